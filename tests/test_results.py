"""
Tests for results.py - pydantic table result models.
"""

import json

import pytest

from inflection_tables.inflection import Inflection
from inflection_tables.matching import find_best_matches
from inflection_tables.results import FootnoteResult, SuffixResult, TableResult
from inflection_tables.suffix import Suffix
from inflection_tables.table import GroupingFeature, Table


@pytest.fixture
def table(latin_nouns):
    inflection = Inflection.create(
        'serv', 'us', 'lat', part='noun', case='nominative', number='singular',
        declension='2nd', gender='masculine',
    )
    matches = find_best_matches([inflection], latin_nouns.suffixes)
    features = [
        GroupingFeature('declension', ['1st', '2nd'], 'lat').set_column_group(),
        GroupingFeature('gender', ['masculine', 'feminine', 'neuter'], 'lat').set_column_group(),
        GroupingFeature('number', ['singular', 'plural'], 'lat').set_row_group().set_full_width_title(),
        GroupingFeature('case', ['nominative', 'genitive'], 'lat').set_row_group().set_row_title(),
    ]
    return Table(features).construct(latin_nouns.suffixes, matches)


class TestSuffixResult:
    """Tests for SuffixResult."""

    def test_no_suffix(self):
        result = SuffixResult.from_suffix(Suffix(None, features={'case': 'nominative'}))
        assert result.value is None
        assert result.text == '-'
        assert not result.suffix_match


class TestTableResult:
    """Tests for TableResult.from_table."""

    def test_layout(self, table, latin_nouns):
        result = TableResult.from_table(
            table, footnotes=latin_nouns.footnotes, title='Nouns', part_of_speech='noun',
        )
        assert result.title == 'Nouns'
        assert result.language == 'lat'
        assert result.title_column_count == 1
        assert [h.title for h in result.headers] == ['Declension', 'Gender']
        assert [c.span for c in result.headers[0].cells] == [3, 3]
        assert len(result.rows) == 4
        assert len(result.rows[0].cells) == 6
        assert [f.index for f in result.footnotes] == ['1', '2']

    def test_titles(self, table):
        result = TableResult.from_table(table)
        first = result.rows[0]
        assert [t.title for t in first.full_width_titles] == ['singular']
        assert first.full_width_titles[0].full_width
        assert first.full_width_titles[0].span == 2
        assert [(t.title, t.level) for t in first.titles] == [('nominative', 0)]

    def test_cells(self, table):
        result = TableResult.from_table(table)
        cell = result.rows[0].cells[3]
        assert cell.value == 'us'
        assert cell.full_match
        assert cell.features == {
            'declension': '2nd', 'gender': 'masculine', 'number': 'singular', 'case': 'nominative',
        }
        assert cell.footnotes == ['1']
        assert cell.suffixes[0].full_match
        assert result.rows[0].cells[0].empty
        assert result.has_suffix_match

    def test_hidden_columns_left_out(self, table):
        table.hide_empty_columns()
        result = TableResult.from_table(table)
        assert [c.span for c in result.headers[0].cells] == [1, 2]
        assert [c.title for c in result.headers[1].cells] == ['feminine', 'masculine', 'neuter']
        assert [c.value for c in result.rows[0].cells] == ['a', 'us', 'um']

    def test_json(self, table):
        result = TableResult.from_table(table, title='Nouns')
        data = json.loads(result.model_dump_json())
        assert data['title'] == 'Nouns'
        assert data['rows'][1]['cells'][1]['value'] == 'ae'

    def test_footnote_result(self, latin_nouns):
        footnote = latin_nouns.get_footnote('noun', '2')
        assert FootnoteResult.from_footnote(footnote).model_dump() == {
            'index': '2', 'text': 'Poetry has -um.',
        }
