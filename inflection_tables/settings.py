"""
Settings and configuration for inflection-tables.

Values are resolved from the environment once, at import time.
"""

import os
from pathlib import Path
from typing import Optional

# Data directory paths
PACKAGE_DIR = Path(__file__).parent
DEFAULT_DATA_DIR = PACKAGE_DIR / "data"

# Environment variable for a custom data directory
DATA_DIR = Path(os.environ.get("INFLECTION_TABLES_DATA_DIR", DEFAULT_DATA_DIR))

# Debug mode
DEBUG = os.environ.get("INFLECTION_TABLES_DEBUG", "").lower() in ("1", "true", "yes")

# CSV token that stands for "no overt suffix"
NULL_SUFFIX = "*"

# Separator between several values in one CSV cell (e.g. "masculine feminine")
FEATURE_SEPARATOR = " "

# Separator used when merged suffixes join their grouped feature values
MERGE_SEPARATOR = ", "

# File names inside <DATA_DIR>/<language>/<part of speech>/
SUFFIXES_FILE = "suffixes.csv"
FOOTNOTES_FILE = "footnotes.csv"


def suffixes_path(language: str, part_of_speech: str, data_dir: Optional[Path] = None) -> Path:
    """Path of the suffix CSV for a language and part of speech."""
    return (data_dir or DATA_DIR) / language / part_of_speech / SUFFIXES_FILE


def footnotes_path(language: str, part_of_speech: str, data_dir: Optional[Path] = None) -> Path:
    """Path of the footnote CSV for a language and part of speech."""
    return (data_dir or DATA_DIR) / language / part_of_speech / FOOTNOTES_FILE
