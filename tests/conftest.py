"""
Shared fixtures for inflection-tables tests.
"""

from typing import List

import pytest

from inflection_tables.dataset import LanguageDataset
from inflection_tables.features import Feature
from inflection_tables.inflection import Homonym, Inflection, Lexeme
from inflection_tables.registry import DatasetRegistry
from inflection_tables.suffix import Suffix


def _features(**features) -> list:
    args = []
    for type, value in features.items():
        if isinstance(value, list):
            args.append([Feature(type, v) for v in value])
        else:
            args.append(Feature(type, value))
    return args


@pytest.fixture
def add_suffix():
    """Add a suffix to a dataset with features given as keywords (lists split)."""
    def _add(dataset: LanguageDataset, value, **features) -> List[Suffix]:
        return dataset.add_suffix(value, _features(**features))
    return _add


@pytest.fixture
def latin_nouns(add_suffix):
    """
    Small Latin noun dataset: 1st declension feminine and 2nd declension
    masculine and neuter, nominative and genitive only.
    """
    dataset = LanguageDataset('lat')
    noun = dict(part='noun')
    add_suffix(dataset, 'a', declension='1st', gender='feminine', number='singular', case='nominative', **noun)
    add_suffix(dataset, 'ae', declension='1st', gender='feminine', number='singular', case='genitive', **noun)
    add_suffix(dataset, 'ae', declension='1st', gender='feminine', number='plural', case='nominative', **noun)
    add_suffix(dataset, 'arum', declension='1st', gender='feminine', number='plural', case='genitive',
               footnote='2', **noun)
    add_suffix(dataset, 'us', declension='2nd', gender='masculine', number='singular', case='nominative',
               footnote='1', **noun)
    add_suffix(dataset, 'i', declension='2nd', gender=['masculine', 'neuter'], number='singular',
               case='genitive', **noun)
    add_suffix(dataset, 'i', declension='2nd', gender='masculine', number='plural', case='nominative', **noun)
    add_suffix(dataset, 'orum', declension='2nd', gender=['masculine', 'neuter'], number='plural',
               case='genitive', **noun)
    add_suffix(dataset, 'um', declension='2nd', gender='neuter', number='singular', case='nominative', **noun)
    add_suffix(dataset, 'a', declension='2nd', gender='neuter', number='plural', case='nominative', **noun)
    dataset.add_footnote('noun', '1', 'Nouns in -er have no ending.')
    dataset.add_footnote('noun', '2', 'Poetry has -um.')
    dataset.data_loaded = True
    return dataset


@pytest.fixture
def make_homonym():
    """Build a homonym from one or more inflections."""
    def _make(*inflections: Inflection) -> Homonym:
        return Homonym([Lexeme('test', list(inflections))])
    return _make


@pytest.fixture(scope="session")
def registry():
    """Registry loaded from the bundled tables."""
    return DatasetRegistry().load()
