"""
kegg-list: typed parsing of KEGG REST ``list`` responses.

Public API surface:

- ``parse_list(text, category, config=None)`` -- parse a whole response
  body into a list of records, one per non-blank line.
- ``parse_list_line(line, category, config=None)`` -- parse one line.
- ``Category`` / ``resolve_category()`` / ``resolve_organism()`` -- the
  category tags.
- Record models (``PathwayRecord``, ``GeneRecord``, ...) in
  ``kegg_list.records``.
- ``ParserConfig`` / ``load_config()`` / ``save_config()`` -- optional
  parser options.
- ``records_to_frame()`` / ``locations_to_frame()`` -- pandas views.

Fetching the response body is left to the caller, e.g.::

    text = requests.get("https://rest.kegg.jp/list/pathway/hsa").text
    records = kegg_list.parse_list(text, "pathway")
"""

from __future__ import annotations

from kegg_list.categories import (
    DATABASE_ABBREVIATIONS,
    PARSED_CATEGORIES,
    Category,
    resolve_category,
    resolve_organism,
)
from kegg_list.config import ParserConfig, load_config, save_config
from kegg_list.exceptions import (
    ConfigValidationError,
    KeggListError,
    LineParseError,
    MalformedLineError,
    NumericParseError,
    UnsupportedCategoryError,
)
from kegg_list.frame import locations_to_frame, records_to_frame
from kegg_list.listing import parse_list, parse_list_line
from kegg_list.records import (
    AddendumGeneRecord,
    BriteRecord,
    EntryRecord,
    GeneRecord,
    GenomicLocation,
    ModuleRecord,
    OrthologRecord,
    PathwayRecord,
    Record,
    Strand,
    ViralGeneRecord,
    ViralPeptideRecord,
)

__all__ = [
    "parse_list",
    "parse_list_line",
    "Category",
    "PARSED_CATEGORIES",
    "resolve_category",
    "resolve_organism",
    "DATABASE_ABBREVIATIONS",
    "ParserConfig",
    "load_config",
    "save_config",
    "records_to_frame",
    "locations_to_frame",
    "Record",
    "PathwayRecord",
    "BriteRecord",
    "ModuleRecord",
    "OrthologRecord",
    "GenomicLocation",
    "Strand",
    "GeneRecord",
    "ViralGeneRecord",
    "ViralPeptideRecord",
    "AddendumGeneRecord",
    "EntryRecord",
    "KeggListError",
    "LineParseError",
    "MalformedLineError",
    "NumericParseError",
    "UnsupportedCategoryError",
    "ConfigValidationError",
]
