"""
pandas views of parsed records.

Parsed records are plain value objects; these helpers lay them out as
DataFrames for analysis. Nothing here writes to disk.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

import pandas as pd

from kegg_list.records import GeneRecord, Record

logger = logging.getLogger(__name__)

_LOCATION_COLUMNS = ["id", "chromosome", "strand", "start", "end"]


def records_to_frame(records: Sequence[Record]) -> pd.DataFrame:
    """Build a DataFrame with one row per record and one column per field.

    Tuple fields become lists, enums become their values and nested
    locations become lists of dicts. Column order follows the model's
    field order.

    Args:
        records: Records from a single ``parse_list()`` call.

    Returns:
        The DataFrame; empty (no columns) when *records* is empty.
    """
    if not records:
        return pd.DataFrame()

    columns = list(type(records[0]).model_fields)
    rows = [record.model_dump(mode="json") for record in records]
    return pd.DataFrame(rows, columns=columns)


def locations_to_frame(genes: Iterable[GeneRecord]) -> pd.DataFrame:
    """Flatten gene locations into a long table.

    One row per ``(gene, location)`` pair with columns
    ``id, chromosome, strand, start, end``. Chromosome-only locations get
    missing strand/start/end; ``start`` and ``end`` use the nullable
    ``Int64`` dtype so they stay integers.
    """
    rows = [
        {
            "id": gene.id,
            "chromosome": loc.chromosome,
            "strand": loc.strand.value if loc.strand is not None else None,
            "start": loc.start,
            "end": loc.end,
        }
        for gene in genes
        for loc in gene.locations
    ]
    df = pd.DataFrame(rows, columns=_LOCATION_COLUMNS)
    df["start"] = df["start"].astype("Int64")
    df["end"] = df["end"].astype("Int64")
    logger.debug("Flattened %d gene location(s)", len(df))
    return df
