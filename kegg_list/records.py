"""
Typed record models for KEGG ``list`` lines.

One frozen pydantic model per record shape. Records are value objects:
they are built once per line, compare by value, and hold no references
to one another. Sequence fields are tuples and are never ``None``.

Key models:
- PathwayRecord / BriteRecord / ModuleRecord: ``{id, name}``.
- OrthologRecord: KO entry with gene symbols and EC numbers.
- GenomicLocation: chromosome plus an optional stranded coordinate range.
- GeneRecord / ViralGeneRecord / ViralPeptideRecord / AddendumGeneRecord.
- EntryRecord: generic ``{id, name}`` for categories parsed through the
  two-field fallback.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

from kegg_list.categories import Category


class Strand(str, Enum):
    """Strand indicator of a genomic location."""

    FORWARD = "+"
    REVERSE = "-"


class _Record(BaseModel):
    """Common base: immutable, non-empty ``id``."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="KEGG identifier")


class PathwayRecord(_Record):
    name: str


class BriteRecord(_Record):
    name: str


class ModuleRecord(_Record):
    name: str


class OrthologRecord(_Record):
    """A KEGG Orthology (KO) entry."""

    symbols: tuple[str, ...] = ()
    name: str
    enzyme_codes: tuple[str, ...] = ()


class GenomicLocation(BaseModel):
    """Chromosome plus an optional coordinate range.

    ``strand``, ``start`` and ``end`` are either all set or all ``None``;
    some genes are only placed on a chromosome without a position.
    """

    model_config = ConfigDict(frozen=True)

    chromosome: str
    strand: Strand | None = None
    start: int | None = None
    end: int | None = None

    @model_validator(mode="after")
    def _check_range_complete(self) -> GenomicLocation:
        present = [v is not None for v in (self.strand, self.start, self.end)]
        if any(present) and not all(present):
            raise ValueError(
                "strand, start and end must be given together or not at all "
                f"(got strand={self.strand}, start={self.start}, end={self.end})"
            )
        return self

    @property
    def has_range(self) -> bool:
        return self.start is not None


class GeneRecord(_Record):
    """A gene of a KEGG organism."""

    type: str
    locations: tuple[GenomicLocation, ...] = Field(..., min_length=1)
    symbols: tuple[str, ...] = ()
    description: str


class ViralGeneRecord(_Record):
    symbols: tuple[str, ...] = Field(..., min_length=1)
    organism: str
    description: str


class ViralPeptideRecord(_Record):
    description: str


class AddendumGeneRecord(_Record):
    """A gene from the KEGG addendum category (not tied to a genome)."""

    symbol: str | None = None
    name: str
    enzyme_codes: tuple[str, ...] = ()


class EntryRecord(_Record):
    """Generic ``{id, name}`` entry of a category without a dedicated parser."""

    name: str
    category: Category


Record = (
    PathwayRecord
    | BriteRecord
    | ModuleRecord
    | OrthologRecord
    | GeneRecord
    | ViralGeneRecord
    | ViralPeptideRecord
    | AddendumGeneRecord
    | EntryRecord
)
