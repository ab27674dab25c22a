"""
Grouping engine: builds inflection tables from matched suffixes.
"""

from inflection_tables.table.grouping import GroupFeatureList, GroupingFeature
from inflection_tables.table.layout import Column, HeaderCell, HeaderRow, Row, RowTitleCell
from inflection_tables.table.table import Table
from inflection_tables.table.tree import Cell, NodeGroup

__all__ = [
    'Cell',
    'Column',
    'GroupFeatureList',
    'GroupingFeature',
    'HeaderCell',
    'HeaderRow',
    'NodeGroup',
    'Row',
    'RowTitleCell',
    'Table',
]
