"""
KEGG database categories for the ``list`` operation.

``Category`` enumerates every KEGG database that the REST ``list``
operation can return. Only eight of them have a dedicated line parser
(``PARSED_CATEGORIES``); the rest raise ``UnsupportedCategoryError``
unless a ``ParserConfig`` enables the two-field fallback for them.

Two resolvers turn caller strings into a ``Category``:

- ``resolve_category()`` accepts database names (``"pathway"``) and
  KEGG's database abbreviations (``"path"``, ``"ko"``, ``"cpd"``, ...).
  Anything else is rejected; there is no fuzzy fallback.
- ``resolve_organism()`` accepts an organism code (``"hsa"``,
  ``"T01001"``) and returns ``Category.GENES``, since the per-organism
  gene listing is keyed by that code.
"""

from __future__ import annotations

import re
from enum import Enum
from types import MappingProxyType

from kegg_list.exceptions import UnsupportedCategoryError

# Three/four letter organism codes (hsa, eco, ...) or T numbers (T01001)
_ORGANISM_CODE = re.compile(r"[a-z]{3,4}|T\d{5}")


class Category(str, Enum):
    """A KEGG database whose ``list`` output can be parsed."""

    PATHWAY = "pathway"
    BRITE = "brite"
    MODULE = "module"
    ORTHOLOGY = "orthology"
    GENES = "genes"
    VIRAL_GENES = "vg"
    VIRAL_PEPTIDES = "vp"
    ADDENDUM_GENES = "ag"
    GENOME = "genome"
    COMPOUND = "compound"
    GLYCAN = "glycan"
    REACTION = "reaction"
    RCLASS = "rclass"
    ENZYME = "enzyme"
    NETWORK = "network"
    VARIANT = "variant"
    DISEASE = "disease"
    DRUG = "drug"
    DGROUP = "dgroup"
    ORGANISM = "organism"


PARSED_CATEGORIES: frozenset[Category] = frozenset({
    Category.PATHWAY,
    Category.BRITE,
    Category.MODULE,
    Category.ORTHOLOGY,
    Category.GENES,
    Category.VIRAL_GENES,
    Category.VIRAL_PEPTIDES,
    Category.ADDENDUM_GENES,
})

# KEGG's short database names, as used in entry prefixes and the REST API
DATABASE_ABBREVIATIONS: MappingProxyType[str, Category] = MappingProxyType({
    "path": Category.PATHWAY,
    "br": Category.BRITE,
    "md": Category.MODULE,
    "ko": Category.ORTHOLOGY,
    "gn": Category.GENOME,
    "cpd": Category.COMPOUND,
    "gl": Category.GLYCAN,
    "rn": Category.REACTION,
    "rc": Category.RCLASS,
    "ec": Category.ENZYME,
    "ne": Category.NETWORK,
    "ds": Category.DISEASE,
    "dr": Category.DRUG,
    "dg": Category.DGROUP,
})


def resolve_category(value: Category | str) -> Category:
    """Resolve a category tag into a ``Category``.

    Accepts a ``Category`` (returned unchanged), a database name such as
    ``"pathway"`` or ``"vg"`` (case-insensitive), or a KEGG database
    abbreviation such as ``"path"`` or ``"cpd"``. Organism codes are not
    accepted here; use ``resolve_organism()`` or ``Category.GENES``.

    Raises:
        UnsupportedCategoryError: If the value matches none of the above.
    """
    if isinstance(value, Category):
        return value
    if not isinstance(value, str):
        raise UnsupportedCategoryError(
            f"Category tag must be a Category or str, got {type(value).__name__}",
            category=value,
        )

    tag = value.lower()
    try:
        return Category(tag)
    except ValueError:
        pass
    if tag in DATABASE_ABBREVIATIONS:
        return DATABASE_ABBREVIATIONS[tag]

    raise UnsupportedCategoryError(
        f"Unknown KEGG list category: {value!r}", category=value
    )


def resolve_organism(code: str) -> Category:
    """Resolve a KEGG organism code (``"hsa"``, ``"T01001"``) to ``Category.GENES``.

    Database names and abbreviations that happen to look like organism
    codes (``"path"``, ``"cpd"``, ``"drug"``) are rejected.

    Raises:
        UnsupportedCategoryError: If *code* is not an organism code.
    """
    if (
        not isinstance(code, str)
        or not _ORGANISM_CODE.fullmatch(code)
        or code in DATABASE_ABBREVIATIONS
        or code in {c.value for c in Category}
    ):
        raise UnsupportedCategoryError(
            f"Not a KEGG organism code: {code!r}", category=code
        )
    return Category.GENES
