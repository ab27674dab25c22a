"""
Tests for cli.py - Command line interface.
"""

import json
from unittest.mock import patch

import pytest

from inflection_tables.cli import build_homonym, format_cell, main
from inflection_tables.errors import ConfigurationError, ValidationError
from inflection_tables.results import CellResult


GENITIVE = ['-F', 'case=genitive', '-F', 'number=singular', '-F', 'declension=1st', '-F', 'gender=feminine']


class TestCLIBasics:
    """Tests for basic CLI functionality."""

    def test_version(self, capsys):
        """Test version flag."""
        result = main(['--version'])
        assert result == 0
        captured = capsys.readouterr()
        assert 'inflection-tables' in captured.out
        assert '0.1.0' in captured.out

    def test_help(self, capsys):
        """Test help flag."""
        with pytest.raises(SystemExit) as exc_info:
            main(['--help'])
        assert exc_info.value.code == 0
        captured = capsys.readouterr()
        assert 'inflection tables' in captured.out

    def test_no_args(self, capsys):
        """Test running with no arguments."""
        result = main([])
        assert result == 1

    def test_list(self, capsys):
        """Test listing templates."""
        result = main(['--list'])
        assert result == 0
        captured = capsys.readouterr()
        assert 'lat-noun' in captured.out
        assert 'grc-noun' in captured.out

    def test_list_language(self, capsys):
        """Test listing templates of one language."""
        result = main(['-l', 'greek'])
        assert result == 0
        captured = capsys.readouterr()
        assert 'grc-noun' in captured.out
        assert 'lat-noun' not in captured.out


class TestCLIOutput:
    """Tests for table output."""

    def test_text_output(self, capsys):
        """Test plain text grid output."""
        result = main(['lat', 'noun', '-s', 'ae'] + GENITIVE)
        assert result == 0
        captured = capsys.readouterr()
        assert 'Latin noun declension' in captured.out
        assert 'ae**' in captured.out
        assert 'ae*' in captured.out
        assert 'genitive' in captured.out

    def test_json_output(self, capsys):
        """Test JSON output format."""
        result = main(['lat', 'noun', '-s', 'ae', '-f'] + GENITIVE)
        assert result == 0
        captured = capsys.readouterr()
        data = json.loads(captured.out)
        assert isinstance(data, list)
        assert data[0]['title'] == 'Latin noun declension'
        full = [c for row in data[0]['rows'] for c in row['cells'] if c['full_match']]
        assert [c['value'] for c in full] == ['ae']

    def test_verb_tables(self, capsys):
        """Test both verb templates are printed."""
        result = main(['latin', 'verb', '-s', 'a', '-F', 'mood=imperative'])
        assert result == 0
        captured = capsys.readouterr()
        assert 'Latin verb conjugation' in captured.out
        assert 'Latin verb imperative' in captured.out
        assert '[present]' in captured.out

    def test_template_option(self, capsys):
        """Test --template selects one table."""
        result = main(['lat', 'verb', '-s', 'a', '--template', 'lat-verb-imperative'])
        assert result == 0
        captured = capsys.readouterr()
        assert 'Latin verb imperative' in captured.out
        assert 'Latin verb conjugation' not in captured.out

    def test_hide_empty(self, capsys):
        """Test --hide-empty leaves out empty columns."""
        main(['grc', 'noun', '-s', 'ης', '-f'])
        full = json.loads(capsys.readouterr().out)
        main(['grc', 'noun', '-s', 'ης', '-f', '--hide-empty'])
        hidden = json.loads(capsys.readouterr().out)
        assert len(hidden[0]['rows'][0]['cells']) < len(full[0]['rows'][0]['cells'])

    def test_footnotes_listed(self, capsys):
        """Test footnotes are printed under the table."""
        result = main(['lat', 'noun', '-s', 'ae'])
        assert result == 0
        captured = capsys.readouterr()
        assert '1. The locative is used only' in captured.out


class TestCLIErrorHandling:
    """Tests for error handling."""

    def test_unsupported_language(self, capsys):
        result = main(['xx', 'noun'])
        assert result == 1
        captured = capsys.readouterr()
        assert 'Error' in captured.err

    def test_bad_feature_argument(self, capsys):
        result = main(['lat', 'noun', '-F', 'genitive'])
        assert result == 1
        captured = capsys.readouterr()
        assert 'TYPE=VALUE' in captured.err

    def test_unknown_feature_value(self, capsys):
        result = main(['lat', 'noun', '-F', 'case=instrumental'])
        assert result == 1
        assert 'Error' in capsys.readouterr().err

    def test_no_tables(self, capsys):
        result = main(['grc', 'verb'])
        assert result == 1
        assert 'no verb tables' in capsys.readouterr().err

    def test_unknown_template(self, capsys):
        result = main(['lat', 'noun', '--template', 'lat-pronoun'])
        assert result == 1
        assert 'lat-pronoun' in capsys.readouterr().err

    def test_load_error(self, capsys):
        """Test error while loading data."""
        with patch('inflection_tables.cli.DatasetRegistry.load', side_effect=ConfigurationError("broken")):
            result = main(['lat', 'noun'])
        assert result == 1
        assert 'broken' in capsys.readouterr().err


class TestHelpers:
    """Tests for CLI helper functions."""

    def test_build_homonym(self):
        homonym = build_homonym('latin', 'noun', 'ae', ['case=genitive', 'case=dative', 'number=sg'])
        inflection = homonym.inflections[0]
        assert homonym.language == 'lat'
        assert inflection.get('case') == ('genitive', 'dative')
        assert inflection.get('number') == ('singular',)
        assert inflection.part_of_speech == 'noun'

    def test_build_homonym_unknown_type(self):
        with pytest.raises(ConfigurationError):
            build_homonym('grc', 'noun', None, ['voice=active'])

    def test_build_homonym_malformed(self):
        with pytest.raises(ValidationError):
            build_homonym('lat', 'noun', None, ['case'])

    def test_format_cell(self):
        assert format_cell(CellResult(index=0, value='ae', suffix_match=True)) == 'ae*'
        assert format_cell(CellResult(index=0, value='ae', suffix_match=True, full_match=True)) == 'ae**'
        assert format_cell(CellResult(index=0, value='um', footnotes=['2', '8'])) == 'um[2,8]'
