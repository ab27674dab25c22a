"""
Tabular data loading for inflection-tables.
"""

from inflection_tables.loading.suffixes import (
    DATA_LAYOUT,
    load_footnotes,
    load_language,
    load_suffixes,
)

__all__ = [
    'DATA_LAYOUT',
    'load_footnotes',
    'load_language',
    'load_suffixes',
]
