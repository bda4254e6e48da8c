"""
Shared splitting helpers for the line parsers.

KEGG ``list`` lines have no schema declaration: every category relies on
fixed delimiter order (tab between columns, ``"; "`` between sub-groups,
``", "`` between symbols). These helpers do the splitting and raise
``MalformedLineError`` when the expected shape isn't there.
"""

from __future__ import annotations

from kegg_list.exceptions import MalformedLineError

FIELD_SEP = "\t"
GROUP_SEP = "; "
SYMBOL_SEP = ", "


def split_fields(line: str, expected: int, kind: str) -> list[str]:
    """Split a line on tabs and require exactly *expected* fields.

    The first field is the entry id and must not be empty.

    Args:
        line: One line of the list response (no trailing newline).
        expected: Required number of tab-separated fields.
        kind: Human-readable category name for the error message.

    Raises:
        MalformedLineError: On a field count mismatch or an empty id.
    """
    fields = line.split(FIELD_SEP)
    if len(fields) != expected:
        raise MalformedLineError(
            f"{kind} line must have {expected} tab-separated fields, "
            f"got {len(fields)}: {line!r}",
            line=line,
        )
    if not fields[0]:
        raise MalformedLineError(f"{kind} line has an empty id: {line!r}", line=line)
    return fields


def split_symbols(text: str) -> tuple[str, ...]:
    """Split a ``"sym1, sym2"`` group into a tuple of symbols."""
    return tuple(text.split(SYMBOL_SEP))


def split_enzymes(text: str) -> tuple[str, ...]:
    """Split a space-separated EC number block into a tuple."""
    return tuple(text.split(" "))


def cut_bracketed(text: str, marker: str, closing: str, line: str) -> tuple[str, str]:
    """Cut ``"name<marker>block<closing>..."`` into ``(name, block)``.

    Used for the ``" [EC:...]"`` suffix of KO names and the ``" (EC:...)"``
    suffix of addendum gene names. Text after the closing delimiter is
    dropped.

    Raises:
        MalformedLineError: If the closing delimiter is missing.
    """
    name, _, rest = text.partition(marker)
    block, found, _ = rest.partition(closing)
    if not found:
        raise MalformedLineError(
            f"Unterminated {marker.strip()!r} block (missing {closing!r}): {line!r}",
            line=line,
        )
    return name, block
