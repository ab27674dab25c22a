"""
Command line interface for inflection-tables.

Builds a single candidate analysis from the arguments, matches it against
the bundled suffix tables and prints the resulting inflection tables.

Usage:
    inflection-tables lat noun --suffix a --feature case=nominative
    inflection-tables lat verb -s amus -F person=1st -F number=plural
    inflection-tables grc noun -s ης --template grc-noun --hide-empty
    inflection-tables lat noun -s ae -f          # full JSON
    inflection-tables --list                     # bundled templates
"""

import argparse
import json
import logging
import sys
from typing import Dict, List, Optional, Sequence

from inflection_tables import __version__, render_tables
from inflection_tables.errors import InflectionTablesError, ValidationError
from inflection_tables.features import Types, get_language_model
from inflection_tables.inflection import Homonym, Inflection, Lexeme
from inflection_tables.registry import DatasetRegistry
from inflection_tables.results import CellResult, TableResult
from inflection_tables.settings import DEBUG
from inflection_tables.templates import TEMPLATES, templates_for

# Cell markers in text output
SUFFIX_MATCH_MARK = '*'
FULL_MATCH_MARK = '**'


def configure_logging(debug: bool = False) -> None:
    level = logging.DEBUG if (debug or DEBUG) else logging.WARNING
    logging.basicConfig(level=level, format='%(asctime)s - %(levelname)s - %(message)s')


def build_homonym(
    language: str,
    part_of_speech: str,
    suffix: Optional[str],
    feature_args: Sequence[str],
) -> Homonym:
    """
    Build a one-inflection homonym from command line values.

    Raises:
        ValidationError: If a feature argument is malformed or has an
            unknown value.
        ConfigurationError: If the language or a feature type is unknown.
    """
    model = get_language_model(language)
    features: Dict[str, List[str]] = {
        Types.PART: [model.feature_type(Types.PART).import_value(part_of_speech)],
    }
    for arg in feature_args:
        if '=' not in arg:
            raise ValidationError(f"Feature must be given as TYPE=VALUE, got '{arg}'")
        type, value = arg.split('=', 1)
        type = type.strip().lower()
        features.setdefault(type, []).append(model.feature_type(type).import_value(value))

    inflection = Inflection('', suffix, model.code, {t: tuple(v) for t, v in features.items()})
    return Homonym([Lexeme('', [inflection])], target_word=suffix)


def format_cell(cell: CellResult) -> str:
    """Cell text with match marker and footnote indices."""
    text = cell.value
    if cell.full_match:
        text += FULL_MATCH_MARK
    elif cell.suffix_match:
        text += SUFFIX_MATCH_MARK
    if cell.footnotes:
        text += f"[{','.join(cell.footnotes)}]"
    return text


def format_table_text(result: TableResult) -> str:
    """Format a table as a plain text grid."""
    title_count = result.title_column_count
    lines: List[object] = []

    for header in result.headers:
        line = [''] * title_count
        for cell in header.cells:
            line.extend([cell.title] + [''] * (cell.span - 1))
        lines.append(line)

    for row in result.rows:
        for title in row.full_width_titles:
            lines.append(f"[{title.title}]")
        line = [''] * title_count
        for title in row.titles:
            line[title.level] = title.title
        line.extend(format_cell(cell) for cell in row.cells)
        lines.append(line)

    grid = [line for line in lines if isinstance(line, list)]
    widths: List[int] = []
    for line in grid:
        for i, text in enumerate(line):
            if i >= len(widths):
                widths.append(0)
            widths[i] = max(widths[i], len(text))

    output = []
    if result.title:
        output.append(result.title)
        output.append('=' * len(result.title))
    for line in lines:
        if isinstance(line, str):
            output.append(line)
        else:
            output.append('  '.join(text.ljust(widths[i]) for i, text in enumerate(line)).rstrip())

    if result.footnotes:
        output.append('')
        for footnote in result.footnotes:
            output.append(f"{footnote.index}. {footnote.text}")
    return '\n'.join(output)


def list_templates(language: Optional[str] = None) -> int:
    templates = templates_for(language) if language else list(TEMPLATES.values())
    for template in templates:
        print(f"{template.id:<22} {template.language:<4} {template.part_of_speech:<10} {template.title}")
    return 0


def main(args: Optional[list] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description='Latin and Greek inflection tables',
        prog='inflection-tables',
        epilog=(
            'Cells matching the given suffix are marked *, '
            'cells matching suffix and all features are marked **.'
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        'language',
        nargs='?',
        help='Language code or name (lat, grc, latin, greek)',
    )

    parser.add_argument(
        'part_of_speech',
        nargs='?',
        help='Part of speech (noun, adjective, verb)',
    )

    parser.add_argument(
        '-s', '--suffix',
        type=str,
        default=None,
        help='Suffix of the word form (default: no overt suffix)',
    )

    parser.add_argument(
        '-F', '--feature',
        action='append',
        default=[],
        metavar='TYPE=VALUE',
        help='Feature of the word form, e.g. case=genitive (repeatable)',
    )

    parser.add_argument(
        '-t', '--template',
        type=str,
        default=None,
        metavar='ID',
        help='Render only this template (see --list)',
    )

    parser.add_argument(
        '-f', '--full',
        action='store_true',
        help='Full table info as JSON',
    )

    parser.add_argument(
        '--hide-empty',
        action='store_true',
        help='Hide columns without any suffix',
    )

    parser.add_argument(
        '-l', '--list',
        action='store_true',
        help='List bundled table templates',
    )

    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug logging',
    )

    parser.add_argument(
        '-v', '--version',
        action='store_true',
        help='Show version information',
    )

    parsed = parser.parse_args(args)

    if parsed.version:
        print(f'inflection-tables {__version__}')
        return 0

    configure_logging(parsed.debug)

    try:
        if parsed.list:
            return list_templates(parsed.language)

        if not parsed.language or not parsed.part_of_speech:
            parser.print_help()
            return 1

        homonym = build_homonym(
            parsed.language, parsed.part_of_speech, parsed.suffix, parsed.feature,
        )
        registry = DatasetRegistry([homonym.language]).load()
        results = render_tables(
            homonym, registry,
            template_id=parsed.template,
            hide_empty_columns=parsed.hide_empty,
        )
    except InflectionTablesError as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1

    if not results:
        print(
            f'Error: no {parsed.part_of_speech} tables for {parsed.language}',
            file=sys.stderr,
        )
        return 1

    if parsed.full:
        output = [result.model_dump() for result in results]
        print(json.dumps(output, ensure_ascii=False, indent=2))
    else:
        print('\n\n'.join(format_table_text(result) for result in results))
    return 0


if __name__ == '__main__':
    sys.exit(main())
