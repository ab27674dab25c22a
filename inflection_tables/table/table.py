"""
Inflection table construction.

A Table turns a flat list of suffix records into a grid:

1. build_tree() partitions the suffixes level by level, one grouping
   feature per level. The last level produces one Cell per complete
   feature path, even when no suffix falls into it, so the table always
   shows the full paradigm.
2. Columns are read off the outer (column feature) levels of the tree:
   one Column per combination of column values, one header row per
   column feature.
3. Rows are the transposition of the columns: row i holds the i-th cell of
   every column.
4. Row titles are read off the inner (row feature) levels of the first
   column's branch.

Example:
    >>> table = Table(features).construct(suffixes, matches)
    >>> [cell.value for cell in table.rows[0].cells]
"""

import logging
from typing import Callable, List, Optional, Sequence, Union

from inflection_tables.errors import ConfigurationError
from inflection_tables.features import Feature
from inflection_tables.matching import MatchResults
from inflection_tables.suffix import Suffix
from inflection_tables.table.grouping import GroupFeatureList, GroupingFeature
from inflection_tables.table.layout import Column, HeaderCell, HeaderRow, Row, RowTitleCell
from inflection_tables.table.tree import Cell, NodeGroup

logger = logging.getLogger(__name__)

CellFilter = Callable[[Suffix], bool]


class Table:
    """
    Grouping engine for one table layout.

    Args:
        features: Grouping features, outermost level first.
        cell_filter: Optional predicate limiting which suffixes may appear in
            cells.
    """

    def __init__(
        self,
        features: Union[GroupFeatureList, Sequence[GroupingFeature]],
        cell_filter: Optional[CellFilter] = None,
    ):
        if not isinstance(features, GroupFeatureList):
            features = GroupFeatureList(features)
        self.features = features
        self.cell_filter = cell_filter
        self.matches: Optional[MatchResults] = None
        self.cells: List[Cell] = []
        self.first_index = 0
        self.tree: Optional[NodeGroup] = None
        self._columns: Optional[List[Column]] = None
        self._headers: Optional[List[HeaderRow]] = None
        self._rows: Optional[List[Row]] = None
        self.empty_columns_hidden = False
        self.no_suffix_groups_hidden = False

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def construct(
        self,
        suffixes: Sequence[Suffix],
        matches: Optional[MatchResults] = None,
        first_index: int = 0,
    ) -> 'Table':
        """
        Build the tree, columns, headers, rows and row titles.

        Cell indices run sequentially from `first_index`.
        """
        self.matches = matches
        self.first_index = first_index
        self.empty_columns_hidden = False
        self.no_suffix_groups_hidden = False
        self.tree = self.build_tree(suffixes)
        self._columns, self._headers = self._construct_columns(self.tree)
        self._rows = self._construct_rows(self._columns)
        self._construct_row_titles()
        logger.debug(
            f"Constructed table: {len(self.cells)} cells, "
            f"{len(self._columns)} columns, {len(self._rows)} rows"
        )
        return self

    def build_tree(self, suffixes: Sequence[Suffix]) -> NodeGroup:
        """Group suffixes into a tree following the grouping features."""
        self.cells = []
        return self._group_by_feature(list(suffixes), [], 0)

    def _group_by_feature(self, suffixes: List[Suffix], ancestors: List[Feature], level: int) -> NodeGroup:
        feature = self.features[level]
        group = NodeGroup(feature, list(ancestors))
        last_level = level == len(self.features) - 1

        for value in feature.ordered_values(ancestors):
            path = ancestors + [value]
            selected = [s for s in suffixes if s.has_feature(value)]
            group.values.append(value)

            if not last_level:
                subgroup = self._group_by_feature(selected, path, level + 1)
                group.subgroups.append(subgroup)
                group.cells.extend(subgroup.cells)
            else:
                if self.cell_filter is not None:
                    selected = [s for s in selected if self.cell_filter(s)]
                cell = Cell.create(selected, path, self.matches, index=self.first_index + len(self.cells))
                self.cells.append(cell)
                group.leaves.append(cell)
                group.cells.append(cell)
        return group

    def _construct_columns(self, tree: NodeGroup):
        column_features = self.features.columns
        columns: List[Column] = []
        headers = [HeaderRow(f) for f in column_features]

        if not column_features:
            columns.append(Column(cells=list(tree.cells), features=[], index=0))
            return columns, headers

        def walk(node: NodeGroup, level: int, parent: Optional[HeaderCell], path: List[Feature]):
            for position, value in enumerate(node.values):
                header = HeaderCell(value, node.feature, parent)
                headers[level].cells.append(header)
                if level < len(column_features) - 1:
                    walk(node.subgroups[position], level + 1, header, path + [value])
                else:
                    column = Column(
                        cells=list(node.child_cells(position)),
                        features=path + [value],
                        index=len(columns),
                        header=header,
                    )
                    header.add_column(column)
                    columns.append(column)

        walk(tree, 0, None, [])
        return columns, headers

    def _construct_rows(self, columns: List[Column]) -> List[Row]:
        lengths = {len(column.cells) for column in columns}
        if len(lengths) > 1:
            raise ConfigurationError(f"Columns have unequal cell counts: {sorted(lengths)}")
        count = lengths.pop() if lengths else 0
        return [Row(cells=[column.cells[i] for column in columns], index=i) for i in range(count)]

    def _row_root(self) -> Optional[NodeGroup]:
        """First node at the outermost row feature level, if any."""
        if not self.features.rows:
            return None
        node = self.tree
        for _ in self.features.columns:
            if not node.subgroups:
                return None
            node = node.subgroups[0]
        return node

    def _construct_row_titles(self) -> None:
        root = self._row_root()
        if root is None:
            return

        def walk(node: NodeGroup, offset: int, parent: Optional[RowTitleCell]):
            feature = node.feature
            for position, value in enumerate(node.values):
                span = len(node.child_cells(position))
                title = parent
                if feature.has_title and span > 0:
                    title = RowTitleCell(
                        feature=value,
                        grouping_feature=feature,
                        span=span,
                        first_row=offset,
                        full_width=feature.full_width_title,
                        parent=parent,
                    )
                    if parent is not None:
                        parent.children.append(title)
                    row = self._rows[offset]
                    if title.full_width:
                        row.full_width_titles.append(title)
                    else:
                        row.title_cells.append(title)
                if node.subgroups:
                    walk(node.subgroups[position], offset, title)
                offset += span

        walk(root, 0, None)

    # ------------------------------------------------------------------
    # Results
    # ------------------------------------------------------------------

    def _require_constructed(self) -> None:
        if self.tree is None:
            raise ConfigurationError("Table has not been constructed yet")

    @property
    def columns(self) -> List[Column]:
        self._require_constructed()
        return self._columns

    @property
    def headers(self) -> List[HeaderRow]:
        self._require_constructed()
        return self._headers

    @property
    def rows(self) -> List[Row]:
        self._require_constructed()
        return self._rows

    @property
    def title_column_count(self) -> int:
        """Number of left side title columns."""
        return len(self.features.column_row_titles)

    @property
    def visible_columns(self) -> List[Column]:
        return [c for c in self.columns if not c.hidden]

    # ------------------------------------------------------------------
    # Column visibility
    # ------------------------------------------------------------------

    def _update_column_visibility(self) -> None:
        no_match_columns = set()
        if self.no_suffix_groups_hidden and self.headers:
            for header in self.headers[0].cells:
                if not header.suffix_matches:
                    no_match_columns.update(id(c) for c in header.columns)

        for column in self.columns:
            hidden = (
                (self.empty_columns_hidden and column.empty)
                or id(column) in no_match_columns
            )
            column.set_hidden(hidden)

    def hide_empty_columns(self) -> 'Table':
        """Hide columns whose cells are all empty."""
        self._require_constructed()
        self.empty_columns_hidden = True
        self._update_column_visibility()
        return self

    def show_empty_columns(self) -> 'Table':
        self._require_constructed()
        self.empty_columns_hidden = False
        self._update_column_visibility()
        return self

    def hide_no_suffix_groups(self) -> 'Table':
        """Hide outermost column groups that contain no suffix match."""
        self._require_constructed()
        self.no_suffix_groups_hidden = True
        self._update_column_visibility()
        return self

    def show_no_suffix_groups(self) -> 'Table':
        self._require_constructed()
        self.no_suffix_groups_hidden = False
        self._update_column_visibility()
        return self
