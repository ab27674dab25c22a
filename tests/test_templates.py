"""
Tests for templates.py - bundled table templates against bundled data.
"""

import pytest

from inflection_tables.errors import ConfigurationError
from inflection_tables.inflection import Inflection
from inflection_tables.templates import (
    TEMPLATES,
    get_template,
    render_table,
    templates_for,
)


def latin_noun(suffix='ae', **features):
    base = dict(part='noun', case='genitive', number='singular', declension='1st', gender='feminine')
    base.update(features)
    return Inflection.create('puell', suffix, 'lat', **base)


def latin_verb(suffix='amus', **features):
    base = dict(
        part='verb', conjugation='1st', voice='active', mood='indicative',
        tense='present', number='plural', person='1st',
    )
    base.update(features)
    return Inflection.create('am', suffix, 'lat', **base)


def find_cell(table, **features):
    for cell in table.cells:
        if all(str(cell.feature(t)) == v for t, v in features.items()):
            return cell
    raise AssertionError(f"No cell for {features}")


class TestTemplateSelection:
    """Tests for looking up templates."""

    def test_ids(self):
        assert set(TEMPLATES) == {'lat-noun', 'lat-adjective', 'lat-verb', 'lat-verb-imperative', 'grc-noun'}

    def test_templates_for_part_of_speech(self):
        assert [t.id for t in templates_for('lat', 'noun')] == ['lat-noun']
        assert [t.id for t in templates_for('latin', 'verb')] == ['lat-verb', 'lat-verb-imperative']
        assert templates_for('grc', 'verb') == []

    def test_templates_for_language(self):
        assert len(templates_for('lat')) == 4
        assert [t.id for t in templates_for('greek')] == ['grc-noun']

    def test_unknown_template(self):
        with pytest.raises(ConfigurationError):
            get_template('lat-pronoun')

    def test_create_table_is_fresh(self):
        template = get_template('lat-noun')
        first = template.create_table()
        second = template.create_table()
        assert first is not second
        assert first.features[0] is not template.grouping_features[0]

    def test_imperative_enabled_only_for_imperative_moods(self, make_homonym):
        template = get_template('lat-verb-imperative')
        assert not template.enabled_for(make_homonym(latin_verb()))
        assert template.enabled_for(make_homonym(latin_verb(), latin_verb('a', mood='imperative')))
        assert get_template('lat-verb').enabled_for(make_homonym(latin_verb()))

    def test_render_first_index(self, registry, make_homonym):
        data = registry.get_inflection_data(make_homonym(latin_noun()))
        table = render_table(get_template('lat-noun'), data, first_index=100)
        assert table.cells[0].index == 100
        assert table.cells[-1].index == 100 + len(table.cells) - 1


class TestLatinNounTable:
    """Tests for the Latin noun declension table."""

    @pytest.fixture
    def table(self, registry, make_homonym):
        data = registry.get_inflection_data(make_homonym(latin_noun()))
        return render_table(get_template('lat-noun'), data)

    def test_shape(self, table):
        assert len(table.columns) == 5 * 2 * 2
        assert len(table.rows) == 2 * 7
        assert len(table.headers) == 3
        assert table.title_column_count == 2

    def test_full_match_cell(self, table):
        cell = find_cell(
            table, declension='1st', gender='masculine feminine', type='regular',
            number='singular', case='genitive',
        )
        assert cell.value == 'ae'
        assert cell.full_match
        assert cell.suffixes[0].features['gender'] == 'masculine, feminine'
        assert [c for c in table.cells if c.full_match] == [cell]

    def test_suffix_match_cells(self, table):
        matched = [c for c in table.cells if c.suffix_match]
        assert len(matched) > 1
        assert all('ae' in [s.value for s in c.suffixes] for c in matched)

    def test_hide_empty_columns(self, table):
        table.hide_empty_columns()
        hidden = [c for c in table.columns if c.hidden]
        assert hidden
        assert all(c.empty for c in hidden)
        first_declension = table.headers[0].cells[0]
        assert first_declension.span < 4


class TestLatinAdjectiveTable:
    """Tests for the Latin adjective declension table."""

    def test_gender_columns_depend_on_declension(self, registry, make_homonym):
        inflection = Inflection.create('bon', 'us', 'lat', part='adjective', case='nominative')
        data = registry.get_inflection_data(make_homonym(inflection))
        table = render_table(get_template('lat-adjective'), data)
        genders = [h.title for h in table.headers[1].cells]
        assert genders == ['masculine', 'feminine', 'neuter'] * 2 + ['masculine feminine', 'neuter']
        assert len(table.columns) == 8 * 2


class TestLatinVerbTables:
    """Tests for the Latin verb tables."""

    @pytest.fixture
    def data(self, registry, make_homonym):
        return registry.get_inflection_data(make_homonym(latin_verb()))

    def test_verb_shape(self, data):
        table = render_table(get_template('lat-verb'), data)
        assert len(table.columns) == 2 * 4 * 2
        assert len(table.rows) == 3 * 2 * 3
        assert table.title_column_count == 2
        assert [t.title for t in table.rows[0].full_width_titles] == ['present']
        assert [t.title for t in table.rows[6].full_width_titles] == ['imperfect']

    def test_verb_full_match(self, data):
        table = render_table(get_template('lat-verb'), data)
        cell = find_cell(
            table, mood='indicative', conjugation='1st', voice='active',
            tense='present', number='plural', person='1st',
        )
        assert cell.value == 'amus'
        assert cell.full_match

    def test_subjunctive_future_empty(self, data):
        table = render_table(get_template('lat-verb'), data)
        future = [c for c in table.cells if str(c.feature('mood')) == 'subjunctive' and str(c.feature('tense')) == 'future']
        assert future
        assert all(c.empty for c in future)

    def test_imperative_only(self, data):
        table = render_table(get_template('lat-verb-imperative'), data)
        assert len(table.columns) == 2 * 4
        assert len(table.rows) == 2 * 2 * 2
        suffixes = [s for cell in table.cells for s in cell.suffixes]
        assert suffixes
        assert all(s.features['mood'] == 'imperative' for s in suffixes)
        cell = find_cell(
            table, voice='active', conjugation='1st', tense='present', number='singular', person='2nd',
        )
        assert cell.value == 'a'


class TestGreekNounTable:
    """Tests for the Greek noun declension table."""

    @pytest.fixture
    def table(self, registry, make_homonym):
        inflection = Inflection.create(
            'τιμ', 'ης', 'grc', part='noun', case='genitive', number='singular',
            declension='1st', gender='feminine',
        )
        data = registry.get_inflection_data(make_homonym(inflection))
        return render_table(get_template('grc-noun'), data)

    def test_shape(self, table):
        assert len(table.columns) == (3 + 2 + 2) * 2
        assert len(table.rows) == 3 * 5

    def test_primary_only(self, table):
        suffixes = [s for cell in table.cells for s in cell.suffixes]
        assert all(s.extended_lang_data['grc'].primary for s in suffixes)
        assert 'ᾰ' not in [s.value for s in suffixes]

    def test_full_match(self, table):
        cell = find_cell(
            table, declension='1st', gender='feminine', type='regular',
            number='singular', case='genitive',
        )
        assert [s.value for s in cell.suffixes] == ['ης', 'ᾱς']
        assert cell.full_match

    def test_dual_row(self, table):
        cell = find_cell(
            table, declension='2nd', gender='masculine feminine', type='regular',
            number='dual', case='genitive',
        )
        assert cell.value == 'οιν'


class TestRenderErrors:
    """Tests for render_table errors."""

    def test_wrong_language(self, registry, make_homonym):
        data = registry.get_inflection_data(make_homonym(latin_noun()))
        with pytest.raises(ConfigurationError):
            render_table(get_template('grc-noun'), data)

    def test_part_of_speech_not_matched(self, registry, make_homonym):
        data = registry.get_inflection_data(make_homonym(latin_noun()))
        with pytest.raises(ConfigurationError):
            render_table(get_template('lat-verb'), data)
