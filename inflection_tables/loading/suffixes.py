"""
Suffix and footnote loading from CSV tables.

Each language keeps one directory per part of speech under the data
directory:

    <data>/<lang>/<pofs>/suffixes.csv   - one ending per row
    <data>/<lang>/<pofs>/footnotes.csv  - Index, Text

Nominal suffix columns:  Ending, Number, Case, Declension, Gender, Type, Footnote
                         (Greek adds Primary)
Verb suffix columns:     Ending, Conjugation, Voice, Mood, Tense, Number,
                         Person, Type, Footnote

The first row is a header. '*' in the Ending column means no suffix. A cell
may hold several space separated values (e.g. 'masculine feminine'); such a
row is split into one suffix record per value. Rows that fail validation
(blank placeholder rows for unattested forms, unknown tokens) are logged and
skipped.
"""

import csv
import logging
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from inflection_tables.dataset import GreekExtendedData, LanguageDataset
from inflection_tables.errors import ValidationError
from inflection_tables.features import (
    LANG_GREEK, LANG_LATIN, POFS_ADJECTIVE, POFS_NOUN, POFS_VERB, Feature, Types,
)
from inflection_tables.settings import NULL_SUFFIX, footnotes_path, suffixes_path

logger = logging.getLogger(__name__)


# Column name -> feature type, in file order
NOMINAL_COLUMNS: List[Tuple[str, str]] = [
    ('Number', Types.NUMBER),
    ('Case', Types.CASE),
    ('Declension', Types.DECLENSION),
    ('Gender', Types.GENDER),
    ('Type', Types.TYPE),
    ('Footnote', Types.FOOTNOTE),
]

VERB_COLUMNS: List[Tuple[str, str]] = [
    ('Conjugation', Types.CONJUGATION),
    ('Voice', Types.VOICE),
    ('Mood', Types.MOOD),
    ('Tense', Types.TENSE),
    ('Number', Types.NUMBER),
    ('Person', Types.PERSON),
    ('Type', Types.TYPE),
    ('Footnote', Types.FOOTNOTE),
]

# Language -> part of speech -> column layout
DATA_LAYOUT: Dict[str, Dict[str, List[Tuple[str, str]]]] = {
    LANG_LATIN: {
        POFS_NOUN: NOMINAL_COLUMNS,
        POFS_ADJECTIVE: NOMINAL_COLUMNS,
        POFS_VERB: VERB_COLUMNS,
    },
    LANG_GREEK: {
        POFS_NOUN: NOMINAL_COLUMNS,
    },
}

# Columns that may be left blank
OPTIONAL_COLUMNS = {'Footnote', 'Type'}


def read_rows(csv_path: Path) -> List[Dict[str, str]]:
    """Read a CSV file with a header row into a list of dicts."""
    with open(csv_path, 'r', encoding='utf-8', newline='') as f:
        reader = csv.DictReader(f)
        return [row for row in reader]


def parse_suffix_value(token: Optional[str]) -> Optional[str]:
    """Convert an Ending cell to a suffix value ('*' means no suffix)."""
    if token is None:
        raise ValidationError("Missing suffix value")
    token = token.strip()
    if token == NULL_SUFFIX:
        return None
    if not token:
        raise ValidationError("Empty suffix value")
    return token


def _extended_data(dataset: LanguageDataset, row: Dict[str, str]) -> Optional[Dict[str, object]]:
    if dataset.language == LANG_GREEK:
        primary = (row.get('Primary') or '').strip().lower() == 'primary'
        return {LANG_GREEK: GreekExtendedData(primary=primary)}
    return None


def add_suffix_row(
    dataset: LanguageDataset,
    row: Dict[str, str],
    part_of_speech: str,
    columns: List[Tuple[str, str]],
) -> int:
    """
    Add one CSV row to a dataset.

    Returns:
        Number of suffix records created.

    Raises:
        ValidationError: If the row is blank or holds an invalid value.
    """
    value = parse_suffix_value(row.get('Ending'))
    part = dataset.model.feature_type(Types.PART)
    features = [part.get(part_of_speech)]

    for column, type in columns:
        token = (row.get(column) or '').strip()
        if not token:
            if column in OPTIONAL_COLUMNS:
                continue
            raise ValidationError(f"Missing {column} for suffix '{row.get('Ending')}'")
        features.append(dataset.model.feature_type(type).import_token(token))

    records = dataset.add_suffix(value, features, extended_data=_extended_data(dataset, row))
    return len(records)


def load_suffixes(
    dataset: LanguageDataset,
    csv_path: Path,
    part_of_speech: str,
    columns: Optional[List[Tuple[str, str]]] = None,
) -> int:
    """
    Load a suffix CSV file into a dataset.

    Returns:
        Number of suffix records added.
    """
    if columns is None:
        columns = DATA_LAYOUT[dataset.language][part_of_speech]

    added = 0
    skipped = 0
    # Row 1 is the header
    for line, row in enumerate(read_rows(csv_path), start=2):
        try:
            added += add_suffix_row(dataset, row, part_of_speech, columns)
        except ValidationError as e:
            skipped += 1
            logger.warning(f"{csv_path.name}:{line}: skipping row: {e}")

    logger.info(
        f"Loaded {added} {dataset.language} {part_of_speech} suffixes from {csv_path}"
        + (f" ({skipped} rows skipped)" if skipped else "")
    )
    return added


def load_footnotes(dataset: LanguageDataset, csv_path: Path, part_of_speech: str) -> int:
    """
    Load a footnote CSV file (Index, Text) into a dataset.

    Returns:
        Number of footnotes added.
    """
    part = Feature(Types.PART, part_of_speech)
    added = 0
    for line, row in enumerate(read_rows(csv_path), start=2):
        try:
            dataset.add_footnote(part, row.get('Index'), row.get('Text'))
            added += 1
        except ValidationError as e:
            logger.warning(f"{csv_path.name}:{line}: skipping footnote: {e}")
    logger.info(f"Loaded {added} {dataset.language} {part_of_speech} footnotes from {csv_path}")
    return added


def load_language(dataset: LanguageDataset, data_dir: Optional[Path] = None) -> LanguageDataset:
    """
    Load all bundled tables of a dataset's language.

    Missing part of speech directories are skipped with a warning. Marks the
    dataset as loaded.
    """
    for pofs, columns in DATA_LAYOUT.get(dataset.language, {}).items():
        suffixes_csv = suffixes_path(dataset.language, pofs, data_dir)
        if not suffixes_csv.exists():
            logger.warning(f"No {dataset.language} {pofs} suffix table at {suffixes_csv}")
            continue
        load_suffixes(dataset, suffixes_csv, pofs, columns)

        footnotes_csv = footnotes_path(dataset.language, pofs, data_dir)
        if footnotes_csv.exists():
            load_footnotes(dataset, footnotes_csv, pofs)

    dataset.data_loaded = True
    return dataset
