"""
Table templates.

A template is a declarative description of one kind of inflection table:
which grouping features it uses, in which order and role, and which suffix
records may appear in its cells. Templates are plain data; render_table()
turns a template and a query result into a constructed Table.

Bundled templates:
    lat-noun             Latin noun declension
    lat-adjective        Latin adjective declension
    lat-verb             Latin verb, indicative and subjunctive
    lat-verb-imperative  Latin verb, imperative only
    grc-noun             Greek noun declension (primary endings only)

Usage:
    from inflection_tables.templates import templates_for, render_table

    data = registry.get_inflection_data(homonym)
    for template in templates_for('lat', 'noun'):
        table = render_table(template, data)
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence

from inflection_tables.dataset import InflectionData
from inflection_tables.errors import ConfigurationError
from inflection_tables.features import (
    LANG_GREEK, LANG_LATIN, POFS_ADJECTIVE, POFS_NOUN, POFS_VERB,
    Feature, FeatureValue, Types, get_language_model, normalize_language,
)
from inflection_tables.inflection import Homonym
from inflection_tables.suffix import Suffix
from inflection_tables.table import GroupingFeature, Table
from inflection_tables.table.table import CellFilter

logger = logging.getLogger(__name__)


# ============================================================================
# Template Definition
# ============================================================================

@dataclass
class TableTemplate:
    """
    Layout of one kind of inflection table.

    Attributes:
        id: Unique template identifier (e.g. 'lat-noun').
        language: Language code.
        part_of_speech: Part of speech the table is built for.
        title: Human readable table title.
        grouping_features: Grouping features, outermost level first.
        cell_filter: Optional predicate on suffix records allowed in cells.
        lexeme_filter: Optional predicate on the queried homonym; a template
            whose filter fails is not offered for that homonym.
    """
    id: str
    language: str
    part_of_speech: str
    title: str
    grouping_features: List[GroupingFeature]
    cell_filter: Optional[CellFilter] = None
    lexeme_filter: Optional[Callable[[Homonym], bool]] = None

    def enabled_for(self, homonym: Homonym) -> bool:
        """True if this template applies to the homonym."""
        return self.lexeme_filter is None or self.lexeme_filter(homonym)

    def create_table(self) -> Table:
        """A fresh, unconstructed Table with this template's layout."""
        return Table([f.clone() for f in self.grouping_features], self.cell_filter)


def _feature(language: str, type: str, values: Optional[Sequence[FeatureValue]] = None,
             title: Optional[str] = None) -> GroupingFeature:
    feature_type = get_language_model(language).feature_type(type)
    return GroupingFeature.from_feature_type(feature_type, title=title, values=values)


def _ancestor_value(ancestors: Sequence[Feature], type: str) -> Optional[FeatureValue]:
    for feature in ancestors:
        if feature.type == type:
            return feature.value
    return None


MASCULINE_FEMININE = ('masculine', 'feminine')


# ============================================================================
# Latin
# ============================================================================

def _latin_adjective_genders(ancestors: Sequence[Feature]) -> List[FeatureValue]:
    # 3rd declension adjectives share masculine and feminine endings
    if _ancestor_value(ancestors, Types.DECLENSION) == '3rd':
        return [MASCULINE_FEMININE, 'neuter']
    return ['masculine', 'feminine', 'neuter']


def _latin_nominal_rows(language: str) -> List[GroupingFeature]:
    return [
        _feature(language, Types.NUMBER).set_row_group().set_row_title(),
        _feature(language, Types.CASE).set_row_group().set_row_title(),
    ]


def latin_noun_template() -> TableTemplate:
    lang = LANG_LATIN
    return TableTemplate(
        id='lat-noun',
        language=lang,
        part_of_speech=POFS_NOUN,
        title='Latin noun declension',
        grouping_features=[
            _feature(lang, Types.DECLENSION).set_column_group(),
            _feature(lang, Types.GENDER, values=[MASCULINE_FEMININE, 'neuter']).set_column_group(),
            _feature(lang, Types.TYPE).set_column_group(),
        ] + _latin_nominal_rows(lang),
    )


def latin_adjective_template() -> TableTemplate:
    lang = LANG_LATIN
    return TableTemplate(
        id='lat-adjective',
        language=lang,
        part_of_speech=POFS_ADJECTIVE,
        title='Latin adjective declension',
        grouping_features=[
            _feature(lang, Types.DECLENSION, values=['1st', '2nd', '3rd']).set_column_group(),
            _feature(lang, Types.GENDER).set_column_group().set_order(_latin_adjective_genders),
            _feature(lang, Types.TYPE).set_column_group(),
        ] + _latin_nominal_rows(lang),
    )


def latin_verb_template() -> TableTemplate:
    lang = LANG_LATIN
    return TableTemplate(
        id='lat-verb',
        language=lang,
        part_of_speech=POFS_VERB,
        title='Latin verb conjugation',
        grouping_features=[
            _feature(lang, Types.MOOD, values=['indicative', 'subjunctive']).set_column_group(),
            _feature(lang, Types.CONJUGATION).set_column_group(),
            _feature(lang, Types.VOICE).set_column_group(),
            _feature(lang, Types.TENSE, values=['present', 'imperfect', 'future'])
                .set_row_group().set_full_width_title(),
            _feature(lang, Types.NUMBER).set_row_group().set_row_title(),
            _feature(lang, Types.PERSON).set_row_group().set_row_title(),
        ],
    )


def _is_imperative(suffix: Suffix) -> bool:
    return suffix.features.get(Types.MOOD) == 'imperative'


def _has_imperative(homonym: Homonym) -> bool:
    return any('imperative' in inflection.get(Types.MOOD) for inflection in homonym.inflections)


def latin_imperative_template() -> TableTemplate:
    lang = LANG_LATIN
    return TableTemplate(
        id='lat-verb-imperative',
        language=lang,
        part_of_speech=POFS_VERB,
        title='Latin verb imperative',
        grouping_features=[
            _feature(lang, Types.VOICE).set_column_group(),
            _feature(lang, Types.CONJUGATION).set_column_group(),
            _feature(lang, Types.TENSE, values=['present', 'future'])
                .set_row_group().set_full_width_title(),
            _feature(lang, Types.NUMBER).set_row_group().set_row_title(),
            _feature(lang, Types.PERSON, values=['2nd', '3rd']).set_row_group().set_row_title(),
        ],
        cell_filter=_is_imperative,
        lexeme_filter=_has_imperative,
    )


# ============================================================================
# Greek
# ============================================================================

def _greek_noun_genders(ancestors: Sequence[Feature]) -> List[FeatureValue]:
    # Only the 1st declension keeps masculine and feminine endings apart
    if _ancestor_value(ancestors, Types.DECLENSION) == '1st':
        return ['masculine', 'feminine', 'neuter']
    return [MASCULINE_FEMININE, 'neuter']


def _is_primary(suffix: Suffix) -> bool:
    data = suffix.extended_lang_data.get(LANG_GREEK)
    return bool(data is not None and data.primary)


def greek_noun_template() -> TableTemplate:
    lang = LANG_GREEK
    return TableTemplate(
        id='grc-noun',
        language=lang,
        part_of_speech=POFS_NOUN,
        title='Greek noun declension',
        grouping_features=[
            _feature(lang, Types.DECLENSION).set_column_group(),
            _feature(lang, Types.GENDER).set_column_group().set_order(_greek_noun_genders),
            _feature(lang, Types.TYPE).set_column_group(),
            _feature(lang, Types.NUMBER).set_row_group().set_row_title(),
            _feature(lang, Types.CASE).set_row_group().set_row_title(),
        ],
        cell_filter=_is_primary,
    )


# ============================================================================
# Registry
# ============================================================================

TEMPLATES: Dict[str, TableTemplate] = {
    t.id: t for t in (
        latin_noun_template(),
        latin_adjective_template(),
        latin_verb_template(),
        latin_imperative_template(),
        greek_noun_template(),
    )
}


def get_template(template_id: str) -> TableTemplate:
    """Get a bundled template by id, raising ConfigurationError if unknown."""
    try:
        return TEMPLATES[template_id]
    except KeyError:
        raise ConfigurationError(f"Unknown table template: {template_id}") from None


def templates_for(language: str, part_of_speech: Optional[str] = None) -> List[TableTemplate]:
    """Bundled templates of a language, optionally limited to one part of speech."""
    code = normalize_language(language)
    return [
        t for t in TEMPLATES.values()
        if t.language == code and (part_of_speech is None or t.part_of_speech == part_of_speech)
    ]


def render_table(template: TableTemplate, inflection_data: InflectionData, first_index: int = 0) -> Table:
    """
    Construct a table for the template's part of speech.

    Cells are numbered from `first_index`, so tables rendered together can
    keep their cell indices distinct.

    Raises:
        ConfigurationError: If the template is for another language, or the
            query matched nothing for the template's part of speech.
    """
    if template.language != inflection_data.language:
        raise ConfigurationError(
            f"Template {template.id} is for {template.language}, "
            f"not {inflection_data.language}"
        )
    pos_data = inflection_data.get(template.part_of_speech)
    if pos_data is None:
        raise ConfigurationError(
            f"No {template.part_of_speech} suffixes matched for template {template.id}"
        )
    logger.debug(f"Rendering {template.id} from {len(pos_data.suffixes)} suffixes")
    return template.create_table().construct(pos_data.suffixes, pos_data.matches, first_index=first_index)
