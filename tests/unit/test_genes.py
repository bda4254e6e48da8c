"""
Unit tests for gene line parsers (kegg_list.parsers.genes).

Covers organism genes (with genomic locations), viral genes and
addendum genes.
"""

import pytest

from kegg_list.exceptions import MalformedLineError, NumericParseError
from kegg_list.parsers.genes import (
    parse_addendum_gene_line,
    parse_gene_line,
    parse_viral_gene_line,
)
from kegg_list.records import AddendumGeneRecord, GenomicLocation, Strand


class TestParseGeneLine:
    """Tests for parse_gene_line()."""

    def test_chromosome_only_location(self):
        rec = parse_gene_line("hsa:001\tCDS\t1\tTP53; tumor protein")
        assert rec.id == "hsa:001"
        assert rec.type == "CDS"
        assert rec.locations == (GenomicLocation(chromosome="1"),)
        assert rec.symbols == ("TP53",)
        assert rec.description == "tumor protein"

    def test_complement_location(self):
        rec = parse_gene_line("hsa:002\tCDS\t1:complement(100..200)\tFOO; bar")
        (loc,) = rec.locations
        assert loc.chromosome == "1"
        assert loc.strand is Strand.FORWARD
        assert (loc.start, loc.end) == (100, 200)
        assert rec.symbols == ("FOO",)
        assert rec.description == "bar"

    def test_multiple_locations(self):
        rec = parse_gene_line(
            "hsa:6192\tCDS\tY:2935281..2982506, X:complement(100..200)\tRPS4Y1, RPS4Y; ribosomal protein"
        )
        assert [loc.chromosome for loc in rec.locations] == ["Y", "X"]
        assert [loc.strand for loc in rec.locations] == [Strand.REVERSE, Strand.FORWARD]
        assert rec.symbols == ("RPS4Y1", "RPS4Y")

    def test_no_symbols_keeps_description_verbatim(self):
        rec = parse_gene_line("hsa:100287102\tncRNA\t1\tuncharacterized LOC100287102")
        assert rec.symbols == ()
        assert rec.description == "uncharacterized LOC100287102"

    def test_description_with_group_separator(self):
        rec = parse_gene_line("eco:b0001\tCDS\t190..255\tthrL; thr operon leader; peptide")
        assert rec.symbols == ("thrL",)
        assert rec.description == "thr operon leader; peptide"

    def test_location_without_chromosome_name(self):
        """Bacterial genes have a bare range; it contains no ':'."""
        rec = parse_gene_line("eco:b0001\tCDS\t190..255\tthrL; thr operon leader peptide")
        assert rec.locations == (GenomicLocation(chromosome="190..255"),)

    # -----------------------------------------------------------------
    # Errors
    # -----------------------------------------------------------------

    def test_three_fields(self):
        with pytest.raises(MalformedLineError, match="4 tab-separated fields"):
            parse_gene_line("hsa:001\tCDS\tTP53; tumor protein")

    def test_empty_location_column(self):
        with pytest.raises(MalformedLineError, match="empty location"):
            parse_gene_line("hsa:001\tCDS\t\tTP53; tumor protein")

    @pytest.mark.parametrize("location_col", ["1, ", ", 1", "1, , 2"])
    def test_empty_location_token(self, location_col: str):
        with pytest.raises(MalformedLineError, match="empty location"):
            parse_gene_line(f"hsa:001\tCDS\t{location_col}\tTP53; tumor protein")

    def test_bad_coordinate(self):
        with pytest.raises(NumericParseError):
            parse_gene_line("hsa:001\tCDS\t1:100..abc\tTP53; tumor protein")


class TestParseViralGeneLine:
    """Tests for parse_viral_gene_line()."""

    def test_single_symbol(self):
        rec = parse_viral_gene_line(
            "vg:155971:1\tE6; Human papillomavirus type 16; transforming protein E6"
        )
        assert rec.id == "vg:155971:1"
        assert rec.symbols == ("E6",)
        assert rec.organism == "Human papillomavirus type 16"
        assert rec.description == "transforming protein E6"

    def test_multiple_symbols(self):
        rec = parse_viral_gene_line("vg:1\tE7, E7a; HPV16; protein E7")
        assert rec.symbols == ("E7", "E7a")

    @pytest.mark.parametrize(
        "line",
        [
            "vg:1\tE6; HPV16",
            "vg:1\tE6; HPV16; protein; extra",
            "vg:1\tprotein E6",
        ],
    )
    def test_wrong_group_count(self, line: str):
        with pytest.raises(MalformedLineError, match="symbols; organism; description"):
            parse_viral_gene_line(line)

    def test_missing_tab(self):
        with pytest.raises(MalformedLineError):
            parse_viral_gene_line("vg:1 E6; HPV16; protein E6")


class TestParseAddendumGeneLine:
    """Tests for parse_addendum_gene_line()."""

    def test_symbol_and_enzyme(self):
        rec = parse_addendum_gene_line("ag:CAA76703\tuidA; beta-glucuronidase (EC:3.2.1.31)")
        assert rec == AddendumGeneRecord(
            id="ag:CAA76703",
            symbol="uidA",
            name="beta-glucuronidase",
            enzyme_codes=("3.2.1.31",),
        )

    def test_no_symbol_with_enzyme(self):
        rec = parse_addendum_gene_line("ag:1\tsome protein (EC:1.1.1.1)")
        assert rec == AddendumGeneRecord(
            id="ag:1", symbol=None, name="some protein", enzyme_codes=("1.1.1.1",)
        )

    def test_symbol_without_enzyme(self):
        rec = parse_addendum_gene_line("ag:BAA20356\tbla; beta-lactamase")
        assert rec.symbol == "bla"
        assert rec.name == "beta-lactamase"
        assert rec.enzyme_codes == ()

    def test_name_only(self):
        rec = parse_addendum_gene_line("ag:ABC12345\thypothetical protein")
        assert rec.symbol is None
        assert rec.name == "hypothetical protein"
        assert rec.enzyme_codes == ()

    def test_several_enzymes(self):
        rec = parse_addendum_gene_line("ag:2\tbifunctional enzyme (EC:1.1.1.1 2.2.2.2)")
        assert rec.enzyme_codes == ("1.1.1.1", "2.2.2.2")

    def test_unterminated_enzyme_block(self):
        with pytest.raises(MalformedLineError, match="missing"):
            parse_addendum_gene_line("ag:1\tsome protein (EC:1.1.1.1")
