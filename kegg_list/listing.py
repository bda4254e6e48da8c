"""
Dispatch and orchestration for KEGG ``list`` responses.

``parse_list_line()`` routes one line to the parser registered for its
category; ``parse_list()`` applies it to every non-blank line of a
response body and returns the records in input order.

Parsing is all-or-nothing: the first ``LineParseError`` or
``UnsupportedCategoryError`` aborts the call and no partial list is
returned.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from types import MappingProxyType

from kegg_list.categories import Category, resolve_category
from kegg_list.config import ParserConfig
from kegg_list.exceptions import LineParseError, UnsupportedCategoryError
from kegg_list.parsers.genes import (
    parse_addendum_gene_line,
    parse_gene_line,
    parse_viral_gene_line,
)
from kegg_list.parsers.headers import (
    parse_brite_line,
    parse_entry_line,
    parse_module_line,
    parse_pathway_line,
    parse_viral_peptide_line,
)
from kegg_list.parsers.orthology import parse_ortholog_line
from kegg_list.records import Record

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG = ParserConfig()

# One dedicated parser per entry of categories.PARSED_CATEGORIES
LINE_PARSERS: MappingProxyType[Category, Callable[[str], Record]] = MappingProxyType({
    Category.PATHWAY: parse_pathway_line,
    Category.BRITE: parse_brite_line,
    Category.MODULE: parse_module_line,
    Category.ORTHOLOGY: parse_ortholog_line,
    Category.GENES: parse_gene_line,
    Category.VIRAL_GENES: parse_viral_gene_line,
    Category.VIRAL_PEPTIDES: parse_viral_peptide_line,
    Category.ADDENDUM_GENES: parse_addendum_gene_line,
})


def _select_parser(
    category: Category, config: ParserConfig
) -> Callable[[str], Record]:
    parser = LINE_PARSERS.get(category)
    if parser is not None:
        return parser
    if category in config.two_field_categories:
        return lambda line: parse_entry_line(line, category)
    raise UnsupportedCategoryError(
        f"Parsing list response not implemented for category {category.value!r}",
        category=category,
    )


def parse_list_line(
    line: str,
    category: Category | str,
    config: ParserConfig | None = None,
) -> Record:
    """Parse a single list line of the given category.

    Args:
        line: One line of the response, without its newline.
        category: A ``Category`` or a tag accepted by ``resolve_category()``.
        config: Optional parser options.

    Raises:
        UnsupportedCategoryError: If the category has no parser.
        MalformedLineError: If the line doesn't match the category's shape.
        NumericParseError: If a gene coordinate is invalid.
    """
    parser = _select_parser(resolve_category(category), config or _DEFAULT_CONFIG)
    return parser(line)


def parse_list(
    text: str,
    category: Category | str,
    config: ParserConfig | None = None,
) -> list[Record]:
    """Parse a complete KEGG ``list`` response body.

    The body is split on ``"\\n"`` only and one trailing ``"\\r"`` is
    removed from each line, so CRLF bodies parse the same as LF ones.
    Blank lines (including the one after a final newline) are skipped.
    The category is resolved before any line is read, so an unsupported
    category fails even for an empty body.

    Args:
        text: The full response body.
        category: A ``Category`` or a tag accepted by ``resolve_category()``.
        config: Optional parser options.

    Returns:
        One record per non-blank line, in input order.

    Raises:
        UnsupportedCategoryError: If the category has no parser.
        MalformedLineError / NumericParseError: On the first bad line, with
            ``line_number`` set to its 1-based position in *text*.
    """
    resolved = resolve_category(category)
    parser = _select_parser(resolved, config or _DEFAULT_CONFIG)

    lines = text.split("\n")
    logger.debug("Parsing %d line(s) as %s", len(lines), resolved.value)

    records: list[Record] = []
    for line_number, line in enumerate(lines, start=1):
        line = line.removesuffix("\r")
        if not line.strip():
            continue
        try:
            records.append(parser(line))
        except LineParseError as exc:
            exc.line_number = line_number
            raise

    logger.info("Parsed %d %s record(s)", len(records), resolved.value)
    return records
