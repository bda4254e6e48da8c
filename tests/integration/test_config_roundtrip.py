"""
Integration test: config save -> load -> parse with the fallback.
"""

from __future__ import annotations

import pytest

import kegg_list

COMPOUND_LIST = (
    "C00001\tH2O; Water\n"
    "C00002\tATP; Adenosine 5'-triphosphate\n"
)


@pytest.mark.integration
class TestConfigRoundtrip:

    def test_roundtrip_and_parse(self, tmp_path):
        path = tmp_path / "kegg.yaml"
        kegg_list.save_config(
            kegg_list.ParserConfig(two_field_categories=["compound"]), path
        )
        config = kegg_list.load_config(path)
        assert config == kegg_list.ParserConfig(two_field_categories=["compound"])

        records = kegg_list.parse_list(COMPOUND_LIST, "compound", config)
        assert [r.name for r in records] == ["H2O; Water", "ATP; Adenosine 5'-triphosphate"]
        assert all(r.category is kegg_list.Category.COMPOUND for r in records)

    def test_without_config_compound_is_unsupported(self):
        with pytest.raises(kegg_list.UnsupportedCategoryError):
            kegg_list.parse_list(COMPOUND_LIST, "compound")
