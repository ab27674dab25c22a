"""
Exception types for inflection-tables.

ConfigurationError covers problems with how the library is set up (languages,
feature declarations, table layouts). ValidationError covers bad input data
handed to a dataset, usually one CSV row. Loaders skip rows that raise
ValidationError; ConfigurationError is always fatal.
"""


class InflectionTablesError(Exception):
    """Base class for all inflection-tables errors."""


class ConfigurationError(InflectionTablesError):
    """Raised for unsupported languages, unknown features and invalid table setups."""


class ValidationError(InflectionTablesError, ValueError):
    """Raised when a required value (suffix, footnote index or text) is missing or invalid."""
