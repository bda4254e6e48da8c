"""
Demo script: parse saved KEGG ``list`` responses via the public API.

Usage:
    python scripts/parse_list.py pathway inputs/list_pathway.txt
    python scripts/parse_list.py hsa inputs/list_hsa.txt --config kegg.yaml

The response body is read from a local file (save it with e.g.
``curl -o inputs/list_hsa.txt https://rest.kegg.jp/list/hsa``). Prints
a record count and the first rows as a DataFrame.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

# ---------------------------------------------------------------------------
# Logging setup
# ---------------------------------------------------------------------------

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    datefmt="%H:%M:%S",
)
log = logging.getLogger("parse_list")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def main() -> int:
    import kegg_list

    args = sys.argv[1:]
    config = None
    if "--config" in args:
        idx = args.index("--config")
        config = kegg_list.load_config(args[idx + 1])
        del args[idx:idx + 2]

    if len(args) != 2:
        log.error("usage: parse_list.py <category> <response-file> [--config FILE]")
        return 2

    tag, input_path = args
    text = Path(input_path).read_text(encoding="utf-8")

    try:
        try:
            category = kegg_list.resolve_category(tag)
        except kegg_list.UnsupportedCategoryError:
            category = kegg_list.resolve_organism(tag)
        records = kegg_list.parse_list(text, category, config)
    except kegg_list.KeggListError as e:
        log.error("FAILED  %s: %s", input_path, e)
        return 1

    log.info("%s: %d record(s)", input_path, len(records))
    print(kegg_list.records_to_frame(records).head(20).to_string())
    return 0


if __name__ == "__main__":
    sys.exit(main())
