"""
Suffix matching.

Scores suffix records against the candidate inflections of a word and keeps,
for every record, the most informative match:

1. The part of speech must match (obligatory), otherwise the inflection
   is ignored for that record.
2. Optional features (case, declension, gender, number for nominals; the
   verbal categories for verbs) are checked one by one.
3. A full match needs the suffix text and every checked feature to match.
   The first full match ends the search for that record.
4. Otherwise the best partial match wins: a matching suffix text beats any
   number of matching features, then more matched features win, and ties
   keep the earlier candidate.

Results are returned in a MatchResults map instead of being stored on the
suffix records, so one dataset can serve any number of queries.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from inflection_tables.features import POFS_VERB, Types
from inflection_tables.inflection import Inflection
from inflection_tables.suffix import Suffix

logger = logging.getLogger(__name__)


# Features that must match for an inflection to be considered at all
OBLIGATORY_MATCHES: Tuple[str, ...] = (Types.PART,)

# Features that improve a match
OPTIONAL_MATCHES: Tuple[str, ...] = (
    Types.CASE, Types.DECLENSION, Types.GENDER, Types.NUMBER,
)

# Per part of speech overrides of OPTIONAL_MATCHES
OPTIONAL_MATCHES_BY_POFS: Dict[str, Tuple[str, ...]] = {
    POFS_VERB: (
        Types.CONJUGATION, Types.VOICE, Types.MOOD,
        Types.TENSE, Types.NUMBER, Types.PERSON,
    ),
}


def get_optional_matches(part_of_speech: Optional[str]) -> Tuple[str, ...]:
    """Optional match features for a part of speech."""
    return OPTIONAL_MATCHES_BY_POFS.get(part_of_speech, OPTIONAL_MATCHES)


@dataclass
class MatchData:
    """
    How well a suffix record matches an inflection.

    Attributes:
        suffix_match: The literal suffix text is equal.
        full_match: Suffix text and all checked features are equal.
        matched_features: Feature types that matched, in check order.
    """
    suffix_match: bool = False
    full_match: bool = False
    matched_features: List[str] = field(default_factory=list)

    def is_better_than(self, other: Optional['MatchData']) -> bool:
        """Ranking used to pick the best partial match."""
        if other is None:
            return True
        if self.suffix_match != other.suffix_match:
            return self.suffix_match
        return len(self.matched_features) > len(other.matched_features)


class MatchResults:
    """
    Match data of one query, keyed by suffix record identity.

    Iterating yields (suffix, match_data) pairs in insertion order.
    Records produced by Suffix.merge resolve to the best match of their parts.
    """

    def __init__(self):
        self._items: Dict[int, Tuple[Suffix, MatchData]] = {}

    def add(self, suffix: Suffix, match_data: MatchData) -> None:
        self._items[id(suffix)] = (suffix, match_data)

    def get(self, suffix: Suffix) -> Optional[MatchData]:
        item = self._items.get(id(suffix))
        if item is not None:
            return item[1]
        best = None
        for part in suffix.parts:
            data = self.get(part)
            if data is not None and data.is_better_than(best):
                best = data
        return best

    def __getitem__(self, suffix: Suffix) -> MatchData:
        data = self.get(suffix)
        if data is None:
            raise KeyError(suffix)
        return data

    def __contains__(self, suffix: Suffix) -> bool:
        return self.get(suffix) is not None

    def __iter__(self) -> Iterator[Tuple[Suffix, MatchData]]:
        return iter(self._items.values())

    def __len__(self) -> int:
        return len(self._items)

    @property
    def suffixes(self) -> List[Suffix]:
        """Matched suffix records in match order."""
        return [suffix for suffix, _ in self._items.values()]

    @property
    def full_matches(self) -> List[Suffix]:
        return [suffix for suffix, data in self._items.values() if data.full_match]

    @property
    def suffix_matches(self) -> List[Suffix]:
        return [suffix for suffix, data in self._items.values() if data.suffix_match]

    def has_suffix_match(self, suffix: Suffix) -> bool:
        data = self.get(suffix)
        return bool(data and data.suffix_match)

    def has_full_match(self, suffix: Suffix) -> bool:
        data = self.get(suffix)
        return bool(data and data.full_match)


def _normalize_suffix(value: Optional[str]) -> Optional[str]:
    return value if value else None


def match_inflection(
    inflection: Inflection,
    suffix: Suffix,
    optional_matches: Sequence[str] = OPTIONAL_MATCHES,
) -> Optional[MatchData]:
    """
    Compare one inflection with one suffix record.

    Returns:
        MatchData, or None if an obligatory feature does not match.
    """
    match_data = MatchData()
    for type in OBLIGATORY_MATCHES:
        if not suffix.feature_match(type, inflection.get(type)):
            return None
        match_data.matched_features.append(type)

    checked = 0
    for type in optional_matches:
        if type not in suffix.features:
            continue
        checked += 1
        if suffix.feature_match(type, inflection.get(type)):
            match_data.matched_features.append(type)

    match_data.suffix_match = _normalize_suffix(inflection.suffix) == _normalize_suffix(suffix.value)
    match_data.full_match = (
        match_data.suffix_match
        and len(match_data.matched_features) == len(OBLIGATORY_MATCHES) + checked
    )
    return match_data


def match(
    inflections: Sequence[Inflection],
    suffix: Suffix,
    part_of_speech: Optional[str] = None,
) -> Optional[MatchData]:
    """
    Find the best match of a suffix record among candidate inflections.

    Args:
        inflections: Candidate inflections (normally of one part of speech).
        suffix: Suffix record to evaluate.
        part_of_speech: Selects the optional feature set. Defaults to the
            record's own part of speech.

    Returns:
        The first full match if there is one, otherwise the best partial
        match, or None if no inflection passed the obligatory check.
    """
    if part_of_speech is None:
        part_of_speech = suffix.features.get(Types.PART)
    optional_matches = get_optional_matches(part_of_speech)

    best: Optional[MatchData] = None
    for inflection in inflections:
        match_data = match_inflection(inflection, suffix, optional_matches)
        if match_data is None:
            continue
        if match_data.full_match:
            return match_data
        if match_data.is_better_than(best):
            best = match_data
    return best


def find_best_matches(
    inflections: Sequence[Inflection],
    suffixes: Sequence[Suffix],
) -> MatchResults:
    """
    Match every suffix record of a dataset against candidate inflections.

    Records with no match at all are left out of the result.
    """
    results = MatchResults()
    for suffix in suffixes:
        match_data = match(inflections, suffix)
        if match_data is not None:
            results.add(suffix, match_data)
    logger.debug(
        f"Matched {len(results)} of {len(suffixes)} suffixes "
        f"({len(results.full_matches)} full, {len(results.suffix_matches)} suffix matches)"
    )
    return results
