"""
Parsers for gene list lines.

Three listings share this module:

- Organism genes (``list/hsa``)::

      hsa:7157<TAB>CDS<TAB>17:complement(7661779..7687538)<TAB>TP53, BCC7; tumor protein p53

  Genes without an HGNC-style symbol have no ``"; "`` in the info
  column, in which case the whole column is the description.

- Viral genes (``list/vg``)::

      vg:155971:1<TAB>E6; Human papillomavirus type 16; transforming protein E6

- Addendum genes (``list/ag``)::

      ag:CAA76703<TAB>uidA; beta-glucuronidase (EC:3.2.1.31)
"""

from __future__ import annotations

from kegg_list.exceptions import MalformedLineError
from kegg_list.parsers.base import (
    GROUP_SEP,
    SYMBOL_SEP,
    cut_bracketed,
    split_enzymes,
    split_fields,
    split_symbols,
)
from kegg_list.parsers.location import parse_location
from kegg_list.records import AddendumGeneRecord, GeneRecord, ViralGeneRecord

_EC_MARKER = " (EC:"


def parse_gene_line(line: str) -> GeneRecord:
    """Parse an organism gene line into a ``GeneRecord``.

    Raises:
        MalformedLineError: If the line doesn't have four tab fields or the
            location column is empty.
        NumericParseError: If a coordinate token is invalid.
    """
    id_, gene_type, location_col, gene_info = split_fields(line, 4, "gene")

    if GROUP_SEP in gene_info:
        symbols_part, _, description = gene_info.partition(GROUP_SEP)
        symbols = split_symbols(symbols_part)
    else:
        symbols = ()
        description = gene_info

    tokens = location_col.split(SYMBOL_SEP) if location_col else []
    if not tokens or not all(tokens):
        raise MalformedLineError(f"gene line has an empty location: {line!r}", line=line)
    locations = tuple(parse_location(tok) for tok in tokens)

    return GeneRecord(
        id=id_,
        type=gene_type,
        locations=locations,
        symbols=symbols,
        description=description,
    )


def parse_viral_gene_line(line: str) -> ViralGeneRecord:
    id_, gene_info = split_fields(line, 2, "viral gene")

    parts = gene_info.split(GROUP_SEP)
    if len(parts) != 3:
        raise MalformedLineError(
            "viral gene info must be 'symbols; organism; description', "
            f"got {len(parts)} part(s): {line!r}",
            line=line,
        )
    symbols_part, organism, description = parts
    return ViralGeneRecord(
        id=id_,
        symbols=split_symbols(symbols_part),
        organism=organism,
        description=description,
    )


def parse_addendum_gene_line(line: str) -> AddendumGeneRecord:
    """Parse an addendum gene line (``symbol?; name (EC:...)?``)."""
    id_, gene_info = split_fields(line, 2, "addendum gene")

    if GROUP_SEP in gene_info:
        symbol, _, rest = gene_info.partition(GROUP_SEP)
    else:
        symbol = None
        rest = gene_info

    if _EC_MARKER in rest:
        name, enzyme_block = cut_bracketed(rest, _EC_MARKER, ")", line)
        return AddendumGeneRecord(
            id=id_, symbol=symbol, name=name, enzyme_codes=split_enzymes(enzyme_block)
        )
    return AddendumGeneRecord(id=id_, symbol=symbol, name=rest, enzyme_codes=())
