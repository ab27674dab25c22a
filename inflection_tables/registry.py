"""
Dataset registry.

Holds one LanguageDataset per supported language. Create one registry at
application start, call load() once, and pass it to whatever needs suffix
data. Loading is guarded by a lock and runs only once per registry.
"""

import logging
import threading
from pathlib import Path
from typing import Dict, Iterable, Optional

from inflection_tables.dataset import InflectionData, LanguageDataset
from inflection_tables.errors import ConfigurationError
from inflection_tables.features import LANGUAGE_MODELS, normalize_language
from inflection_tables.inflection import Homonym

logger = logging.getLogger(__name__)


class DatasetRegistry:
    """
    Language datasets of an application.

    Args:
        languages: Language codes to register. Defaults to all supported.
        data_dir: Directory with the CSV tables. Defaults to settings.DATA_DIR.
    """

    def __init__(self, languages: Optional[Iterable[str]] = None, data_dir: Optional[Path] = None):
        if languages is None:
            languages = list(LANGUAGE_MODELS)
        self.data_dir = data_dir
        self.datasets: Dict[str, LanguageDataset] = {}
        for language in languages:
            dataset = LanguageDataset(language)
            self.datasets[dataset.language] = dataset
        self._lock = threading.Lock()
        self._loaded = False

    @property
    def loaded(self) -> bool:
        return self._loaded

    def load(self) -> 'DatasetRegistry':
        """Fill all datasets from CSV tables. Safe to call more than once."""
        with self._lock:
            if self._loaded:
                return self
            from inflection_tables.loading import load_language
            for dataset in self.datasets.values():
                load_language(dataset, self.data_dir)
                logger.info(f"{dataset.model.name} dataset ready: {len(dataset.suffixes)} suffixes")
            self._loaded = True
        return self

    def get(self, language: str) -> LanguageDataset:
        """Dataset of a language, raising ConfigurationError if not registered."""
        code = normalize_language(language)
        try:
            return self.datasets[code]
        except KeyError:
            raise ConfigurationError(f"No dataset registered for {language}") from None

    def get_inflection_data(self, homonym: Homonym) -> InflectionData:
        """Match a homonym against the dataset of its language."""
        if homonym.language is None:
            raise ConfigurationError("Homonym has no inflections to take a language from")
        dataset = self.get(homonym.language)
        if not dataset.data_loaded:
            raise ConfigurationError(f"{dataset.model.name} dataset has not been loaded")
        return dataset.get_suffixes(homonym)

    def __contains__(self, language: str) -> bool:
        try:
            return normalize_language(language) in self.datasets
        except ConfigurationError:
            return False
