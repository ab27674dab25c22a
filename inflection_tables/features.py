"""
Grammatical feature vocabulary for Latin and Greek.

A Feature is an atomic (type, value) tag such as ('case', 'genitive').
Each language declares, per feature type, the ordered list of legal values
and how tokens found in CSV data map onto them.

Feature types:
    part        - part of speech (noun, adjective, verb)
    case        - grammatical case
    number      - singular / dual / plural
    gender      - masculine / feminine / neuter
    declension  - nominal declension class
    conjugation - verbal conjugation class
    voice, mood, tense, person - verbal categories
    type        - regular or irregular ending
    footnote    - footnote index (free form, not validated)
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence, Tuple, Union

from inflection_tables.errors import ConfigurationError, ValidationError
from inflection_tables.settings import FEATURE_SEPARATOR


# ============================================================================
# Feature Types
# ============================================================================

class Types:
    """Feature type identifiers."""
    PART = 'part'
    CASE = 'case'
    NUMBER = 'number'
    GENDER = 'gender'
    DECLENSION = 'declension'
    CONJUGATION = 'conjugation'
    VOICE = 'voice'
    MOOD = 'mood'
    TENSE = 'tense'
    PERSON = 'person'
    TYPE = 'type'
    FOOTNOTE = 'footnote'


# Language codes
LANG_LATIN = 'lat'
LANG_GREEK = 'grc'

# Parts of speech
POFS_NOUN = 'noun'
POFS_ADJECTIVE = 'adjective'
POFS_VERB = 'verb'


FeatureValue = Union[str, Tuple[str, ...]]


@dataclass(frozen=True)
class Feature:
    """
    A single grammatical tag.

    `value` is normally a string. A tuple value is a grouped value: several
    values of one type shown together, e.g. ('masculine', 'feminine') for a
    table column shared by both genders.
    """
    type: str
    value: FeatureValue

    @property
    def values(self) -> Tuple[str, ...]:
        """Values of this feature, always as a tuple."""
        if isinstance(self.value, tuple):
            return self.value
        return (self.value,)

    @property
    def is_grouped(self) -> bool:
        return isinstance(self.value, tuple)

    def __str__(self) -> str:
        return FEATURE_SEPARATOR.join(self.values)


class FeatureType:
    """
    Ordered list of legal values for one feature type of one language.

    Args:
        type: Feature type identifier (see Types).
        values: Legal values in display order. None means any value is legal.
        language: Language code this feature type belongs to.
        aliases: Extra import tokens mapped to canonical values.
    """

    def __init__(
        self,
        type: str,
        values: Optional[Sequence[str]],
        language: str,
        aliases: Optional[Dict[str, str]] = None,
    ):
        self.type = type
        self.values: Optional[List[str]] = list(values) if values is not None else None
        self.language = language
        self._importer: Dict[str, str] = {}
        if self.values is not None:
            for value in self.values:
                self._importer[value.lower()] = value
        for token, value in (aliases or {}).items():
            self._importer[token.lower()] = value

    @property
    def unrestricted(self) -> bool:
        return self.values is None

    def get(self, value: str) -> Feature:
        """Create a Feature of this type, checking the value is legal."""
        if self.values is not None and value not in self.values:
            raise ValidationError(
                f"'{value}' is not a legal {self.type} value for {self.language}"
            )
        return Feature(self.type, value)

    def import_value(self, token: str) -> str:
        """Map a single external token to its canonical value."""
        token = token.strip()
        if not token:
            raise ValidationError(f"Empty {self.type} value")
        if self.values is None:
            return token
        value = self._importer.get(token.lower())
        if value is None:
            raise ValidationError(
                f"Unknown {self.type} token '{token}' for {self.language}"
            )
        return value

    def import_token(self, token: str) -> Union[Feature, List[Feature]]:
        """
        Convert a CSV cell into a Feature, or a list of Features when the cell
        holds several space separated values (a multi-valued feature).
        """
        parts = [p for p in token.split(FEATURE_SEPARATOR) if p.strip()]
        if not parts:
            raise ValidationError(f"Empty {self.type} value")
        features = [Feature(self.type, self.import_value(p)) for p in parts]
        if len(features) == 1:
            return features[0]
        return features

    def __repr__(self) -> str:
        return f"FeatureType({self.type!r}, {self.values!r}, {self.language!r})"


# ============================================================================
# Language Models
# ============================================================================

class LanguageModel:
    """Feature vocabulary of one language."""

    def __init__(self, code: str, name: str, feature_types: Iterable[FeatureType]):
        self.code = code
        self.name = name
        self.feature_types: Dict[str, FeatureType] = {ft.type: ft for ft in feature_types}

    def has_feature_type(self, type: str) -> bool:
        return type in self.feature_types

    def feature_type(self, type: str) -> FeatureType:
        """Get the FeatureType for `type`, raising ConfigurationError if undeclared."""
        try:
            return self.feature_types[type]
        except KeyError:
            raise ConfigurationError(
                f"Feature type '{type}' is not declared for {self.name}"
            ) from None

    def __repr__(self) -> str:
        return f"LanguageModel({self.code!r})"


_ORDINAL_ALIASES = {'first': '1st', 'second': '2nd', 'third': '3rd', 'fourth': '4th', 'fifth': '5th'}

_NUMBER_ALIASES = {'sg': 'singular', 'pl': 'plural', 'du': 'dual'}

_GENDER_ALIASES = {'m': 'masculine', 'f': 'feminine', 'n': 'neuter'}


def _latin_model() -> LanguageModel:
    lang = LANG_LATIN
    return LanguageModel(lang, 'Latin', [
        FeatureType(Types.PART, [POFS_NOUN, POFS_ADJECTIVE, POFS_VERB], lang),
        FeatureType(Types.CASE, [
            'nominative', 'genitive', 'dative', 'accusative',
            'ablative', 'locative', 'vocative',
        ], lang, {'nom': 'nominative', 'gen': 'genitive', 'dat': 'dative',
                  'acc': 'accusative', 'abl': 'ablative', 'loc': 'locative',
                  'voc': 'vocative'}),
        FeatureType(Types.NUMBER, ['singular', 'plural'], lang, _NUMBER_ALIASES),
        FeatureType(Types.GENDER, ['masculine', 'feminine', 'neuter'], lang, _GENDER_ALIASES),
        FeatureType(Types.DECLENSION, ['1st', '2nd', '3rd', '4th', '5th'], lang, _ORDINAL_ALIASES),
        FeatureType(Types.CONJUGATION, ['1st', '2nd', '3rd', '4th'], lang, _ORDINAL_ALIASES),
        FeatureType(Types.VOICE, ['active', 'passive'], lang),
        FeatureType(Types.MOOD, ['indicative', 'subjunctive', 'imperative'], lang),
        FeatureType(Types.TENSE, [
            'present', 'imperfect', 'future',
            'perfect', 'pluperfect', 'future perfect',
        ], lang, {'future_perfect': 'future perfect'}),
        FeatureType(Types.PERSON, ['1st', '2nd', '3rd'], lang, _ORDINAL_ALIASES),
        FeatureType(Types.TYPE, ['regular', 'irregular'], lang),
        FeatureType(Types.FOOTNOTE, None, lang),
    ])


def _greek_model() -> LanguageModel:
    lang = LANG_GREEK
    return LanguageModel(lang, 'Greek', [
        FeatureType(Types.PART, [POFS_NOUN, POFS_ADJECTIVE, POFS_VERB], lang),
        FeatureType(Types.CASE, [
            'nominative', 'genitive', 'dative', 'accusative', 'vocative',
        ], lang, {'nom': 'nominative', 'gen': 'genitive', 'dat': 'dative',
                  'acc': 'accusative', 'voc': 'vocative'}),
        FeatureType(Types.NUMBER, ['singular', 'dual', 'plural'], lang, _NUMBER_ALIASES),
        FeatureType(Types.GENDER, ['masculine', 'feminine', 'neuter'], lang, _GENDER_ALIASES),
        FeatureType(Types.DECLENSION, ['1st', '2nd', '3rd'], lang, _ORDINAL_ALIASES),
        FeatureType(Types.TYPE, ['regular', 'irregular'], lang),
        FeatureType(Types.FOOTNOTE, None, lang),
    ])


LANGUAGE_MODELS: Dict[str, LanguageModel] = {
    LANG_LATIN: _latin_model(),
    LANG_GREEK: _greek_model(),
}

# Alternative names accepted for language codes
LANGUAGE_ALIASES = {
    'la': LANG_LATIN,
    'latin': LANG_LATIN,
    'greek': LANG_GREEK,
}


def normalize_language(language: Optional[str]) -> str:
    """Resolve a language name or code to a supported language code."""
    if not language:
        raise ConfigurationError("Language cannot be empty")
    code = language.strip().lower()
    code = LANGUAGE_ALIASES.get(code, code)
    if code not in LANGUAGE_MODELS:
        raise ConfigurationError(f"Unsupported language: {language}")
    return code


def get_language_model(language: Optional[str]) -> LanguageModel:
    """Get the language model for a language code or name."""
    return LANGUAGE_MODELS[normalize_language(language)]
