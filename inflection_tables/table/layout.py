"""
Table layout: columns, rows, header cells and row title cells.

Header cells form a tree parallel to the column features: a header cell owns
the columns it spans and links to its parent and children. When a column is
hidden or shown, its innermost header cell recomputes its span and passes the
change up to its parents.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from inflection_tables.features import Feature
from inflection_tables.table.grouping import GroupingFeature
from inflection_tables.table.tree import Cell


class HeaderCell:
    """
    A column header for one value of a column feature.

    Attributes:
        feature: Value shown in the header.
        grouping_feature: Column feature of the header row.
        columns: Columns spanned by this header.
        parent: Header one row above, if any.
        children: Headers one row below.
    """

    def __init__(
        self,
        feature: Feature,
        grouping_feature: GroupingFeature,
        parent: Optional['HeaderCell'] = None,
    ):
        self.feature = feature
        self.grouping_feature = grouping_feature
        self.columns: List['Column'] = []
        self.parent = parent
        self.children: List['HeaderCell'] = []
        self.span = 0
        if parent is not None:
            parent.children.append(self)

    @property
    def title(self) -> str:
        return str(self.feature)

    @property
    def hidden(self) -> bool:
        return self.span == 0

    def add_column(self, column: 'Column') -> None:
        """Register a column with this header and all its parents."""
        header: Optional[HeaderCell] = self
        while header is not None:
            header.columns.append(column)
            header.span += 1
            header = header.parent

    def column_state_change(self) -> None:
        """Recompute span after a column below was hidden or shown."""
        if self.children:
            self.span = sum(child.span for child in self.children)
        else:
            self.span = sum(1 for column in self.columns if not column.hidden)
        if self.parent is not None:
            self.parent.column_state_change()

    @property
    def suffix_matches(self) -> bool:
        return any(column.suffix_matches for column in self.columns)

    def __repr__(self) -> str:
        return f"HeaderCell({self.title!r}, span={self.span})"


@dataclass
class HeaderRow:
    """All header cells of one column feature, left to right."""
    grouping_feature: GroupingFeature
    cells: List[HeaderCell] = field(default_factory=list)

    @property
    def title(self) -> str:
        return self.grouping_feature.title


@dataclass(eq=False)
class Column:
    """
    One table column: the cells of one combination of column feature values.

    Attributes:
        cells: Cells top to bottom.
        features: Column feature values of the column.
        index: Position from the left.
        header: Innermost header cell (None if the table has no column features).
    """
    cells: List[Cell]
    features: List[Feature]
    index: int = 0
    header: Optional[HeaderCell] = None
    hidden: bool = False

    @property
    def empty(self) -> bool:
        return all(cell.empty for cell in self.cells)

    @property
    def suffix_matches(self) -> bool:
        return any(cell.suffix_match for cell in self.cells)

    def set_hidden(self, hidden: bool) -> None:
        if hidden == self.hidden:
            return
        self.hidden = hidden
        if self.header is not None:
            self.header.column_state_change()

    def hide(self) -> None:
        self.set_hidden(True)

    def show(self) -> None:
        self.set_hidden(False)


@dataclass(eq=False)
class RowTitleCell:
    """
    A row title for one value of a row feature.

    Attributes:
        feature: Value shown.
        grouping_feature: Row feature of the title.
        span: Number of rows covered.
        first_row: Index of the first covered row.
        full_width: Rendered as a separate row across the table.
        parent: Title of the enclosing row group, if titled.
    """
    feature: Feature
    grouping_feature: GroupingFeature
    span: int
    first_row: int
    full_width: bool = False
    parent: Optional['RowTitleCell'] = field(default=None, repr=False)
    children: List['RowTitleCell'] = field(default_factory=list, repr=False)

    @property
    def title(self) -> str:
        return str(self.feature)


@dataclass(eq=False)
class Row:
    """
    One table row, read across all columns.

    Attributes:
        cells: The i-th cell of every column.
        index: Position from the top.
        title_cells: Left side titles starting at this row, outermost first.
        full_width_titles: Full width titles to show above this row.
    """
    cells: List[Cell]
    index: int = 0
    title_cells: List[RowTitleCell] = field(default_factory=list)
    full_width_titles: List[RowTitleCell] = field(default_factory=list)

    @property
    def empty(self) -> bool:
        return all(cell.empty for cell in self.cells)

    @property
    def suffix_matches(self) -> bool:
        return any(cell.suffix_match for cell in self.cells)
