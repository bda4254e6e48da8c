"""
Custom exception hierarchy for kegg-list.

Callers can catch a specific failure (a bad line versus an unknown
category) without relying on generic ValueError/KeyError. Every error
aborts the whole parse call; there is no per-line recovery.
"""

from __future__ import annotations


class KeggListError(Exception):
    """Base exception for all kegg-list errors."""


class LineParseError(KeggListError):
    """Raised when a single list line cannot be turned into a record.

    Attributes:
        line: The offending line (or coordinate token), verbatim.
        line_number: 1-based position of the line in the blob. Filled in
            by ``parse_list()``; ``None`` when a line parser is called
            directly.
    """

    def __init__(self, message: str, line: str | None = None) -> None:
        super().__init__(message)
        self.line = line
        self.line_number: int | None = None

    def __str__(self) -> str:
        message = super().__str__()
        if self.line_number is not None:
            return f"line {self.line_number}: {message}"
        return message


class MalformedLineError(LineParseError):
    """Raised when a line's field count or delimiters don't match its category.

    For example, a pathway line with three tab-separated fields, or a
    viral gene line whose info column doesn't have exactly three
    ``"; "``-separated parts.
    """


class NumericParseError(LineParseError):
    """Raised when a genomic coordinate is not a valid integer range.

    Covers non-numeric start/end values, a missing ``..`` separator and
    ``complement(...)`` expressions with absent or unmatched parentheses.
    """


class UnsupportedCategoryError(KeggListError):
    """Raised when a category tag has no registered line parser."""

    def __init__(self, message: str, category: object = None) -> None:
        super().__init__(message)
        self.category = category


class ConfigValidationError(KeggListError):
    """Raised when a parser config file is empty or unusable."""
