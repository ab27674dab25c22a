"""
Input model: candidate grammatical analyses of a word form.

An Inflection is one analysis produced by an external morphological
analyzer: a stem, a suffix and feature values. Lexemes group inflections
under a lemma, and a Homonym groups all lexemes of one word form.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple, Union

from inflection_tables.errors import ConfigurationError
from inflection_tables.features import Types, normalize_language


@dataclass
class Inflection:
    """
    One candidate analysis of a word form.

    Attributes:
        stem: Stem of the word form.
        suffix: Suffix of the word form. None or '' means no suffix.
        language: Language code.
        features: Feature type -> tuple of values. Several values mean the
            analysis is ambiguous for that feature (any of them may match).
    """
    stem: str
    suffix: Optional[str]
    language: str
    features: Dict[str, Tuple[str, ...]] = field(default_factory=dict)

    def __post_init__(self):
        self.language = normalize_language(self.language)
        normalized = {}
        for type, values in self.features.items():
            if isinstance(values, str):
                values = (values,)
            normalized[type] = tuple(values)
        self.features = normalized

    @classmethod
    def create(
        cls,
        stem: str,
        suffix: Optional[str],
        language: str,
        **features: Union[str, Iterable[str]],
    ) -> 'Inflection':
        """
        Convenience constructor taking features as keyword arguments.

        Example:
            >>> Inflection.create('femin', 'a', 'lat', part='noun', case='nominative')
        """
        return cls(stem, suffix, language, {
            type: (value,) if isinstance(value, str) else tuple(value)
            for type, value in features.items()
        })

    @property
    def part_of_speech(self) -> Optional[str]:
        values = self.features.get(Types.PART)
        return values[0] if values else None

    def get(self, type: str) -> Tuple[str, ...]:
        """Values of a feature type, empty tuple if the analysis lacks it."""
        return self.features.get(type, ())

    def has_feature(self, type: str) -> bool:
        return type in self.features


@dataclass
class Lexeme:
    """A lemma together with all inflections analysed as belonging to it."""
    lemma: str
    inflections: List[Inflection] = field(default_factory=list)


@dataclass
class Homonym:
    """All lexemes of a single word form."""
    lexemes: List[Lexeme]
    target_word: Optional[str] = None

    def __post_init__(self):
        if not self.lexemes:
            raise ConfigurationError("Homonym must have at least one lexeme")
        languages = {i.language for i in self.inflections}
        if len(languages) > 1:
            raise ConfigurationError(
                f"Homonym inflections must share one language, got {sorted(languages)}"
            )

    @property
    def inflections(self) -> List[Inflection]:
        return [inflection for lexeme in self.lexemes for inflection in lexeme.inflections]

    @property
    def language(self) -> Optional[str]:
        inflections = self.inflections
        return inflections[0].language if inflections else None

    def inflections_by_part_of_speech(self) -> Dict[str, List[Inflection]]:
        """Group inflections by part of speech, keeping first-seen order."""
        grouped: Dict[str, List[Inflection]] = {}
        for inflection in self.inflections:
            pofs = inflection.part_of_speech
            if pofs is None:
                continue
            grouped.setdefault(pofs, []).append(inflection)
        return grouped
