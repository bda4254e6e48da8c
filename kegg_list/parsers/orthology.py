"""
Parser for KEGG Orthology (KO) list lines.

Line shape::

    K00844<TAB>HK; hexokinase [EC:2.7.1.1]
    K00845<TAB>glk; glucokinase [EC:2.7.1.2]
    K01000<TAB>mraY; phospho-N-acetylmuramoyl-pentapeptide-transferase [EC:2.7.8.13]
    K99999<TAB>uncharacterized protein

The symbol group (``"sym1, sym2; "``) is optional; lines without any
``";"`` are name-only. The ``" [EC:...]"`` suffix is optional too.
"""

from __future__ import annotations

from kegg_list.exceptions import MalformedLineError
from kegg_list.parsers.base import (
    GROUP_SEP,
    cut_bracketed,
    split_enzymes,
    split_fields,
    split_symbols,
)
from kegg_list.records import OrthologRecord

_EC_MARKER = " [EC:"


def parse_ortholog_line(line: str) -> OrthologRecord:
    """Parse one KO line into an ``OrthologRecord``.

    Raises:
        MalformedLineError: If the line doesn't have two tab fields, has a
            ``";"`` that isn't followed by a space, or an unterminated
            ``[EC:`` block.
    """
    id_, rest = split_fields(line, 2, "orthology")

    if ";" not in rest:
        return OrthologRecord(id=id_, symbols=(), name=rest, enzyme_codes=())

    symbols_part, found, remainder = rest.partition(GROUP_SEP)
    if not found:
        raise MalformedLineError(
            f"orthology line has ';' but no '; ' symbol separator: {line!r}",
            line=line,
        )
    symbols = split_symbols(symbols_part)

    if _EC_MARKER in remainder:
        name, enzyme_block = cut_bracketed(remainder, _EC_MARKER, "]", line)
        return OrthologRecord(
            id=id_,
            symbols=symbols,
            name=name,
            enzyme_codes=split_enzymes(enzyme_block),
        )
    return OrthologRecord(id=id_, symbols=symbols, name=remainder, enzyme_codes=())
