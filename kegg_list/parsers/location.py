"""
Genomic coordinate parser for gene list lines.

A gene's location column holds one or more ``", "``-separated tokens:

    7                          chromosome only, no position
    1:complement(100..200)     range on the complementary strand
    MT:3307..4262              plain range

The strand assigned to each form follows the upstream data as observed:
``complement(...)`` yields ``Strand.FORWARD`` and a plain range yields
``Strand.REVERSE``. This is the opposite of the usual reading of
complement notation and is kept as-is until it is confirmed against
KEGG; see DESIGN.md.
"""

from __future__ import annotations

import re

from kegg_list.exceptions import NumericParseError
from kegg_list.records import GenomicLocation, Strand

_COMPLEMENT = re.compile(r"complement\(([0-9.]+)\)")
_DIGITS = re.compile(r"[0-9]+")
_RANGE_SEP = ".."


def _parse_position(text: str, token: str) -> int:
    if not _DIGITS.fullmatch(text):
        raise NumericParseError(
            f"Invalid coordinate {text!r} in location {token!r}", line=token
        )
    return int(text)


def _parse_range(text: str, token: str) -> tuple[int, int]:
    parts = text.split(_RANGE_SEP)
    if len(parts) != 2:
        raise NumericParseError(
            f"Expected '<start>..<end>' in location {token!r}, got {text!r}",
            line=token,
        )
    start, end = parts
    return _parse_position(start, token), _parse_position(end, token)


def parse_location(token: str) -> GenomicLocation:
    """Parse a single coordinate token into a ``GenomicLocation``.

    Raises:
        NumericParseError: If the range isn't two integers separated by
            ``..``, or a ``complement(`` expression isn't closed.
    """
    if ":" not in token:
        return GenomicLocation(chromosome=token)

    chromosome, _, coords = token.partition(":")
    if coords.startswith("complement("):
        match = _COMPLEMENT.match(coords)
        if match is None:
            raise NumericParseError(
                f"Malformed complement expression in location {token!r}",
                line=token,
            )
        start, end = _parse_range(match.group(1), token)
        strand = Strand.FORWARD
    else:
        start, end = _parse_range(coords, token)
        strand = Strand.REVERSE

    return GenomicLocation(chromosome=chromosome, strand=strand, start=start, end=end)
