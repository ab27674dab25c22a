"""
inflection-tables: Latin and Greek inflection table renderer.

Matches the candidate analyses of a word against bundled suffix tables and
lays the matched endings out as declension and conjugation tables.
"""

import time
from typing import List, Optional

__version__ = "0.1.0"


def warm_up(languages: Optional[List[str]] = None, verbose: bool = False):
    """
    Create and load a dataset registry.

    Call this once at application startup and keep the returned registry.

    Args:
        languages: Language codes to load. Defaults to all supported.
        verbose: If True, print timing information.

    Returns:
        Tuple of (registry, elapsed_seconds)

    Example:
        >>> import inflection_tables
        >>> registry, elapsed = inflection_tables.warm_up(verbose=True)
        Loading inflection tables...
          Latin:     412 suffixes
          Greek:     98 suffixes
        Total load:     21.4ms
    """
    from inflection_tables.registry import DatasetRegistry

    t0 = time.perf_counter()
    if verbose:
        print("Loading inflection tables...")
    registry = DatasetRegistry(languages).load()
    elapsed = time.perf_counter() - t0

    if verbose:
        for dataset in registry.datasets.values():
            print(f"  {dataset.model.name + ':':<10} {len(dataset.suffixes)} suffixes")
        print(f"Total load:  {elapsed * 1000:>7.1f}ms")
    return registry, elapsed


def render_tables(
    homonym,
    registry,
    template_id: Optional[str] = None,
    hide_empty_columns: bool = False,
) -> list:
    """
    Build every applicable inflection table for a homonym.

    This is the main high-level API.

    Args:
        homonym: Homonym whose inflections are matched.
        registry: Loaded DatasetRegistry.
        template_id: Build only this template. By default every bundled
            template of each matched part of speech that is enabled for the
            homonym is built.
        hide_empty_columns: Leave out columns without any suffix.

    Returns:
        List of TableResult objects.

    Example:
        >>> from inflection_tables.inflection import Homonym, Inflection, Lexeme
        >>> inflection = Inflection.create('femin', 'a', 'lat', part='noun', case='nominative')
        >>> homonym = Homonym([Lexeme('femina', [inflection])])
        >>> for table in inflection_tables.render_tables(homonym, registry):
        ...     print(table.title)
    """
    from inflection_tables.results import TableResult
    from inflection_tables.templates import get_template, render_table, templates_for

    data = registry.get_inflection_data(homonym)

    if template_id is not None:
        selected = [get_template(template_id)]
    else:
        selected = [
            template
            for pofs in data.parts_of_speech
            for template in templates_for(data.language, pofs)
            if template.enabled_for(homonym)
        ]

    dataset = registry.get(data.language)
    results = []
    first_index = 0
    for template in selected:
        table = render_table(template, data, first_index=first_index)
        first_index += len(table.cells)
        if hide_empty_columns:
            table.hide_empty_columns()
        # Only the footnotes referenced by cells of this table
        shown = [suffix for cell in table.cells for suffix in cell.suffixes]
        results.append(TableResult.from_table(
            table,
            footnotes=dataset.get_footnotes(template.part_of_speech, shown),
            title=template.title,
            part_of_speech=template.part_of_speech,
        ))
    return results


__all__ = [
    '__version__',
    'render_tables',
    'warm_up',
]
