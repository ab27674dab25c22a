"""
Suffix datasets.

A LanguageDataset holds every suffix record and footnote of one language.
It is filled once from tabular data and is read-only afterwards; queries
produce InflectionData objects that carry their own match results.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from inflection_tables.errors import ConfigurationError, ValidationError
from inflection_tables.features import Feature, Types, get_language_model, normalize_language
from inflection_tables.footnote import Footnote, index_sort_key
from inflection_tables.inflection import Homonym
from inflection_tables.matching import MatchResults, find_best_matches
from inflection_tables.suffix import Suffix

logger = logging.getLogger(__name__)


FeatureArg = Union[Feature, Sequence[Feature]]


# ============================================================================
# Query Results
# ============================================================================

@dataclass
class PartOfSpeechData:
    """Matched suffixes and footnotes of one part of speech."""
    part_of_speech: str
    suffixes: List[Suffix] = field(default_factory=list)
    matches: MatchResults = field(default_factory=MatchResults)
    footnotes: List[Footnote] = field(default_factory=list)


@dataclass
class InflectionData:
    """Result of matching a homonym against a language dataset."""
    language: str
    homonym: Optional[Homonym] = None
    pos: Dict[str, PartOfSpeechData] = field(default_factory=dict)

    @property
    def parts_of_speech(self) -> List[str]:
        return list(self.pos)

    def get(self, part_of_speech: str) -> Optional[PartOfSpeechData]:
        return self.pos.get(part_of_speech)

    def __getitem__(self, part_of_speech: str) -> PartOfSpeechData:
        return self.pos[part_of_speech]

    def __contains__(self, part_of_speech: str) -> bool:
        return part_of_speech in self.pos


# ============================================================================
# Language Dataset
# ============================================================================

class LanguageDataset:
    """
    All suffix records and footnotes of one language.

    Args:
        language: Language code or name ('lat', 'grc', 'latin', ...).

    Raises:
        ConfigurationError: If the language is empty or unsupported.
    """

    def __init__(self, language: str):
        self.language = normalize_language(language)
        self.model = get_language_model(self.language)
        self.suffixes: List[Suffix] = []
        self.footnotes: List[Footnote] = []
        self.data_loaded = False

    def _check_feature(self, feature: Feature) -> None:
        feature_type = self.model.feature_type(feature.type)
        if not feature_type.unrestricted:
            feature_type.get(feature.value)

    def add_suffix(
        self,
        value: Optional[str],
        features: Sequence[FeatureArg],
        extended_data: Optional[Mapping[str, Any]] = None,
    ) -> List[Suffix]:
        """
        Add a suffix with its features to the dataset.

        Args:
            value: Suffix text, or None for no suffix.
            features: Features of the suffix. An entry may be a list of
                Features of one type, meaning the suffix is valid for every
                value in it; such a suffix is split into one record per value.
            extended_data: Language code -> language specific data attached
                to every record produced.

        Returns:
            The records added to the dataset.

        Raises:
            ValidationError: If the suffix value or a feature value is invalid.
            ConfigurationError: If a feature type is not declared for the
                language, or more than one feature is multi-valued.
        """
        suffix = Suffix(value)
        if extended_data:
            suffix.extended_lang_data.update(extended_data)

        groups = []
        for arg in features:
            if isinstance(arg, Feature):
                items = [arg]
            else:
                items = list(arg)
                if not items:
                    continue

            types = {f.type for f in items}
            if len(types) > 1:
                raise ValidationError(f"Feature group mixes types: {sorted(types)}")
            type = items[0].type
            for feature in items:
                self._check_feature(feature)

            if type == Types.FOOTNOTE:
                suffix.footnotes.extend(str(f.value) for f in items)
            elif len(items) == 1:
                if type in suffix.features:
                    raise ValidationError(f"Duplicate {type} feature for suffix '{value}'")
                suffix.features[type] = items[0].value
            else:
                groups.append((type, items))

        if len(groups) > 1:
            raise ConfigurationError(
                f"Suffix '{value}' has more than one multi-valued feature: "
                f"{[t for t, _ in groups]}"
            )

        if groups:
            type, items = groups[0]
            if type in suffix.features:
                raise ValidationError(f"Duplicate {type} feature for suffix '{value}'")
            records = suffix.split(type, items)
        else:
            records = [suffix]

        self.suffixes.extend(records)
        return records

    def add_footnote(
        self,
        part_of_speech: Union[Feature, str],
        index: Union[str, int],
        text: str,
    ) -> Footnote:
        """
        Add a footnote for a part of speech.

        Raises:
            ValidationError: If the index or text is missing.
        """
        if isinstance(part_of_speech, Feature):
            part_of_speech = str(part_of_speech)
        footnote = Footnote(index, text, part_of_speech)
        self.footnotes.append(footnote)
        return footnote

    def get_footnote(self, part_of_speech: str, index: str) -> Optional[Footnote]:
        for footnote in self.footnotes:
            if footnote.part_of_speech == part_of_speech and footnote.index == index:
                return footnote
        return None

    def get_footnotes(self, part_of_speech: str, suffixes: Sequence[Suffix]) -> List[Footnote]:
        """
        Footnotes referenced by `suffixes`, sorted by numeric index.

        Indices without a footnote entry are logged and left out.
        """
        indices = set()
        for suffix in suffixes:
            indices.update(suffix.all_footnotes)

        footnotes = []
        for index in sorted(indices, key=index_sort_key):
            footnote = self.get_footnote(part_of_speech, index)
            if footnote is None:
                logger.warning(f"No {part_of_speech} footnote {index} in {self.language} dataset")
                continue
            footnotes.append(footnote)
        return footnotes

    def suffixes_for(self, part_of_speech: str) -> List[Suffix]:
        """All records of one part of speech."""
        return [s for s in self.suffixes if s.features.get(Types.PART) == part_of_speech]

    @property
    def parts_of_speech(self) -> List[str]:
        seen: List[str] = []
        for suffix in self.suffixes:
            pofs = suffix.features.get(Types.PART)
            if pofs and pofs not in seen:
                seen.append(pofs)
        return seen

    def get_suffixes(self, homonym: Homonym) -> InflectionData:
        """
        Match all inflections of a homonym against this dataset.

        Inflections are grouped by part of speech; each group is matched
        separately and gets its own footnote list.
        """
        if homonym.language is not None and homonym.language != self.language:
            raise ConfigurationError(
                f"Homonym language {homonym.language} does not match dataset language {self.language}"
            )
        result = InflectionData(self.language, homonym)
        for pofs, inflections in homonym.inflections_by_part_of_speech().items():
            matches = find_best_matches(inflections, self.suffixes)
            suffixes = matches.suffixes
            if not suffixes:
                logger.debug(f"No {pofs} suffixes matched in {self.language} dataset")
                continue
            result.pos[pofs] = PartOfSpeechData(
                part_of_speech=pofs,
                suffixes=suffixes,
                matches=matches,
                footnotes=self.get_footnotes(pofs, suffixes),
            )
        return result

    def __repr__(self) -> str:
        return (
            f"LanguageDataset({self.language!r}, suffixes={len(self.suffixes)}, "
            f"footnotes={len(self.footnotes)})"
        )


# ============================================================================
# Language Specific Data
# ============================================================================

@dataclass(frozen=True)
class GreekExtendedData:
    """
    Greek specific suffix annotations.

    Attributes:
        primary: The ending is the primary (most common) form for its cell.
    """
    primary: bool = False
