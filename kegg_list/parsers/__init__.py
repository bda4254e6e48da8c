"""
Line parsers sub-package for kegg-list.

One pure function per record category. Each takes a single line of a
KEGG ``list`` response and returns one record, or raises a
``LineParseError`` subclass.

- base.py: shared field/sub-field splitting helpers.
- headers.py: two-field ``{id, name}`` categories (pathway, brite,
  module, viral peptides, fallback entries).
- orthology.py: KO entries with symbols and ``[EC:...]`` blocks.
- genes.py: organism genes, viral genes and addendum genes.
- location.py: genomic coordinate tokens used by gene lines.

The dispatcher (listing.py in the parent package) selects the parser
from the category tag.
"""
