"""
Shared test fixtures and sample data for kegg-list tests.

Sample response bodies are defined here as module-level constants,
trimmed from real ``rest.kegg.jp/list/...`` responses, so every test
module uses the same data.
"""

import pytest

# ---------------------------------------------------------------------------
# Sample list responses -- trailing newline included, as served
# ---------------------------------------------------------------------------
PATHWAY_LIST = (
    "map00010\tGlycolysis / Gluconeogenesis\n"
    "map00020\tCitrate cycle (TCA cycle)\n"
    "map00030\tPentose phosphate pathway\n"
)

BRITE_LIST = (
    "br08901\tKEGG pathway maps\n"
    "br08902\tBRITE hierarchy files\n"
)

MODULE_LIST = (
    "M00001\tGlycolysis (Embden-Meyerhof pathway), glucose => pyruvate\n"
    "M00002\tGlycolysis, core module involving three-carbon compounds\n"
)

ORTHOLOGY_LIST = (
    "K00844\tHK; hexokinase [EC:2.7.1.1]\n"
    "K00003\thom; homoserine dehydrogenase [EC:1.1.1.3]\n"
    "K00005\tgldA; glycerol dehydrogenase [EC:1.1.1.6]\n"
    "K00016\tLDH, ldh; L-lactate dehydrogenase [EC:1.1.1.27]\n"
    "K00029\tE1.1.1.40, maeB; malate dehydrogenase (oxaloacetate-decarboxylating)(NADP+) [EC:1.1.1.40]\n"
    "K00034\tgdh; glucose 1-dehydrogenase [EC:1.1.1.47 1.1.1.119]\n"
    "K01599\themE, UROD; uroporphyrinogen decarboxylase\n"
    "K99999\tuncharacterized protein\n"
)

GENE_LIST = (
    "hsa:7157\tCDS\t17:complement(7661779..7687538)\tTP53, BCC7, LFS1, P53, TRP53; tumor protein p53\n"
    "hsa:4535\tCDS\tMT:3307..4262\tND1, MTND1; NADH dehydrogenase subunit 1\n"
    "hsa:100287102\tncRNA\t1\tuncharacterized LOC100287102\n"
    "hsa:6192\tCDS\tY:2935281..2982506, X:complement(100..200)\tRPS4Y1, RPS4Y; ribosomal protein S4 Y-linked 1\n"
)

VIRAL_GENE_LIST = (
    "vg:155971:1\tE6; Human papillomavirus type 16; transforming protein E6\n"
    "vg:155971:2\tE7, E7a; Human papillomavirus type 16; transforming protein E7\n"
)

VIRAL_PEPTIDE_LIST = (
    "vp:155905-1\tanchored capsid protein C\n"
    "vp:155905-2\tcapsid protein C\n"
)

ADDENDUM_GENE_LIST = (
    "ag:CAA76703\tuidA; beta-glucuronidase (EC:3.2.1.31)\n"
    "ag:AAA23443\tchloramphenicol acetyltransferase (EC:2.3.1.28)\n"
    "ag:BAA20356\tbla; beta-lactamase\n"
    "ag:ABC12345\thypothetical protein\n"
)


# ---------------------------------------------------------------------------
# Pytest markers
# ---------------------------------------------------------------------------
def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (parses whole sample responses)",
    )
