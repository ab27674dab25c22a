"""
Pydantic models describing a constructed inflection table.

These models are the hand-off format for renderers: they hold only what is
visible (hidden columns and header cells are left out) and serialize to
JSON directly.

Usage:
    from inflection_tables.results import TableResult

    table = render_table(template, data)
    result = TableResult.from_table(table, footnotes=data[template.part_of_speech].footnotes)
    print(result.model_dump_json(indent=2))
"""

from typing import Dict, List, Optional, Sequence

from pydantic import BaseModel, Field

from inflection_tables.footnote import Footnote
from inflection_tables.matching import MatchData
from inflection_tables.suffix import Suffix
from inflection_tables.table import Cell, HeaderCell, HeaderRow, Row, RowTitleCell, Table


# =============================================================================
# Cells
# =============================================================================

class SuffixResult(BaseModel):
    """One (possibly merged) suffix record shown in a cell."""
    value: Optional[str] = Field(None, description="Suffix text, None for no overt suffix")
    text: str = Field(..., description="Suffix text for display")
    features: Dict[str, str] = Field(default_factory=dict, description="Feature type -> value")
    footnotes: List[str] = Field(default_factory=list, description="Footnote indices")
    suffix_match: bool = Field(False, description="True if the word's suffix equals this one")
    full_match: bool = Field(False, description="True if suffix and all features match")

    @classmethod
    def from_suffix(cls, suffix: Suffix, match_data: Optional[MatchData] = None) -> "SuffixResult":
        return cls(
            value=suffix.value,
            text=str(suffix),
            features=dict(suffix.features),
            footnotes=suffix.all_footnotes,
            suffix_match=bool(match_data and match_data.suffix_match),
            full_match=bool(match_data and match_data.full_match),
        )


class CellResult(BaseModel):
    """A table cell."""
    index: int = Field(..., description="Sequential cell index within the table")
    value: str = Field("", description="Suffix texts joined for display")
    empty: bool = Field(True, description="True if no suffix falls into the cell")
    suffix_match: bool = Field(False, description="True if any suffix in the cell matches the word")
    full_match: bool = Field(False, description="True if any suffix in the cell is a full match")
    features: Dict[str, str] = Field(default_factory=dict, description="Feature path of the cell")
    footnotes: List[str] = Field(default_factory=list, description="Footnote indices")
    suffixes: List[SuffixResult] = Field(default_factory=list)

    @classmethod
    def from_cell(cls, cell: Cell) -> "CellResult":
        return cls(
            index=cell.index,
            value=cell.value,
            empty=cell.empty,
            suffix_match=cell.suffix_match,
            full_match=cell.full_match,
            features={f.type: str(f) for f in cell.features},
            footnotes=cell.footnotes,
            suffixes=[
                SuffixResult.from_suffix(suffix, data)
                for suffix, data in zip(cell.suffixes, cell.matches)
            ],
        )


# =============================================================================
# Headers and Titles
# =============================================================================

class HeaderCellResult(BaseModel):
    """A column header spanning one or more visible columns."""
    title: str = Field(..., description="Feature value shown")
    feature: str = Field(..., description="Feature type of the header row")
    span: int = Field(..., description="Number of visible columns spanned")

    @classmethod
    def from_header_cell(cls, header: HeaderCell) -> "HeaderCellResult":
        return cls(title=header.title, feature=header.grouping_feature.type, span=header.span)


class HeaderRowResult(BaseModel):
    """All visible header cells of one column feature."""
    title: str = Field(..., description="Title of the column feature")
    cells: List[HeaderCellResult] = Field(default_factory=list)

    @classmethod
    def from_header_row(cls, header_row: HeaderRow) -> "HeaderRowResult":
        return cls(
            title=header_row.title,
            cells=[HeaderCellResult.from_header_cell(c) for c in header_row.cells if not c.hidden],
        )


class RowTitleResult(BaseModel):
    """A row title covering one or more rows."""
    title: str = Field(..., description="Feature value shown")
    feature: str = Field(..., description="Feature type of the title")
    span: int = Field(..., description="Number of rows covered")
    level: int = Field(0, description="Title column, 0 = leftmost (full width titles: 0)")
    full_width: bool = Field(False, description="True if shown as a row across the table")

    @classmethod
    def from_title_cell(cls, title: RowTitleCell, level: int = 0) -> "RowTitleResult":
        return cls(
            title=title.title,
            feature=title.grouping_feature.type,
            span=title.span,
            level=level,
            full_width=title.full_width,
        )


# =============================================================================
# Rows and Tables
# =============================================================================

class RowResult(BaseModel):
    """A table row: its titles and the cells of all visible columns."""
    index: int = Field(..., description="Row position from the top")
    titles: List[RowTitleResult] = Field(default_factory=list, description="Left titles starting here")
    full_width_titles: List[RowTitleResult] = Field(
        default_factory=list,
        description="Full width titles to show above this row",
    )
    cells: List[CellResult] = Field(default_factory=list)
    empty: bool = Field(True, description="True if every cell is empty")
    suffix_matches: bool = Field(False, description="True if any cell matches the word's suffix")

    @classmethod
    def from_row(cls, row: Row, visible: Sequence[bool], title_levels: Dict[str, int]) -> "RowResult":
        return cls(
            index=row.index,
            titles=[
                RowTitleResult.from_title_cell(t, title_levels.get(t.grouping_feature.type, 0))
                for t in row.title_cells
            ],
            full_width_titles=[RowTitleResult.from_title_cell(t) for t in row.full_width_titles],
            cells=[CellResult.from_cell(c) for c, shown in zip(row.cells, visible) if shown],
            empty=row.empty,
            suffix_matches=row.suffix_matches,
        )


class FootnoteResult(BaseModel):
    """A footnote referenced by the table."""
    index: str = Field(..., description="Footnote index as written in the data")
    text: str = Field(..., description="Footnote text")

    @classmethod
    def from_footnote(cls, footnote: Footnote) -> "FootnoteResult":
        return cls(index=footnote.index, text=footnote.text)


class TableResult(BaseModel):
    """
    A constructed table, ready for rendering.

    Example response:
        {
            "title": "Latin noun declension",
            "language": "lat",
            "part_of_speech": "noun",
            "title_column_count": 2,
            "headers": [{"title": "Declension", "cells": [{"title": "1st", "feature": "declension", "span": 4}]}],
            "rows": [{"index": 0, "titles": [...], "cells": [{"index": 0, "value": "a", ...}]}],
            "footnotes": [{"index": "1", "text": "..."}]
        }
    """
    title: Optional[str] = Field(None, description="Table title")
    language: str = Field(..., description="Language code")
    part_of_speech: Optional[str] = Field(None, description="Part of speech")
    title_column_count: int = Field(0, description="Number of left title columns")
    headers: List[HeaderRowResult] = Field(default_factory=list)
    rows: List[RowResult] = Field(default_factory=list)
    footnotes: List[FootnoteResult] = Field(default_factory=list)

    @classmethod
    def from_table(
        cls,
        table: Table,
        footnotes: Optional[Sequence[Footnote]] = None,
        title: Optional[str] = None,
        part_of_speech: Optional[str] = None,
    ) -> "TableResult":
        """
        Create a TableResult from a constructed Table.

        Args:
            table: Constructed table.
            footnotes: Footnotes to list under the table.
            title: Table title.
            part_of_speech: Part of speech shown by the table.
        """
        visible = [not column.hidden for column in table.columns]
        title_levels = {f.type: i for i, f in enumerate(table.features.column_row_titles)}
        return cls(
            title=title,
            language=table.features.language,
            part_of_speech=part_of_speech,
            title_column_count=table.title_column_count,
            headers=[HeaderRowResult.from_header_row(h) for h in table.headers],
            rows=[RowResult.from_row(row, visible, title_levels) for row in table.rows],
            footnotes=[FootnoteResult.from_footnote(f) for f in (footnotes or [])],
        )

    @property
    def has_suffix_match(self) -> bool:
        return any(row.suffix_matches for row in self.rows)
