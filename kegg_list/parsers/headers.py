"""
Parsers for the two-field ``{id, name}`` categories.

Pathway, BRITE and module listings, as well as viral peptides, are plain
``id<TAB>text`` lines. Categories without a dedicated parser can be read
with the same rule into an ``EntryRecord`` when the caller enables the
fallback in ``ParserConfig``.
"""

from __future__ import annotations

from kegg_list.categories import Category
from kegg_list.parsers.base import split_fields
from kegg_list.records import (
    BriteRecord,
    EntryRecord,
    ModuleRecord,
    PathwayRecord,
    ViralPeptideRecord,
)


def parse_pathway_line(line: str) -> PathwayRecord:
    id_, name = split_fields(line, 2, "pathway")
    return PathwayRecord(id=id_, name=name)


def parse_brite_line(line: str) -> BriteRecord:
    id_, name = split_fields(line, 2, "brite")
    return BriteRecord(id=id_, name=name)


def parse_module_line(line: str) -> ModuleRecord:
    id_, name = split_fields(line, 2, "module")
    return ModuleRecord(id=id_, name=name)


def parse_viral_peptide_line(line: str) -> ViralPeptideRecord:
    id_, description = split_fields(line, 2, "viral peptide")
    return ViralPeptideRecord(id=id_, description=description)


def parse_entry_line(line: str, category: Category) -> EntryRecord:
    """Parse an ``id<TAB>name`` line of a category without its own parser."""
    id_, name = split_fields(line, 2, category.value)
    return EntryRecord(id=id_, name=name, category=category)
