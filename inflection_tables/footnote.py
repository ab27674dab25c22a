"""Footnotes attached to suffix records."""

import sys
from dataclasses import dataclass
from typing import Tuple

from inflection_tables.errors import ValidationError


@dataclass(frozen=True)
class Footnote:
    """
    A footnote of one part of speech table.

    Attributes:
        index: Footnote index as it appears in the source data (e.g. '7').
        text: Footnote text.
        part_of_speech: Part of speech whose table the footnote belongs to.
    """
    index: str
    text: str
    part_of_speech: str

    def __post_init__(self):
        if self.index is None or str(self.index).strip() == '':
            raise ValidationError("Footnote index cannot be empty")
        if not self.text or not str(self.text).strip():
            raise ValidationError("Footnote text cannot be empty")
        if not self.part_of_speech:
            raise ValidationError("Footnote part of speech cannot be empty")
        # Indices may be given as numbers; they are always stored as strings
        object.__setattr__(self, 'index', str(self.index).strip())


def index_sort_key(index: str) -> Tuple[int, str]:
    """Sort key for footnote indices: numeric order, non-numeric indices last."""
    try:
        return int(index), ''
    except ValueError:
        return sys.maxsize, index
