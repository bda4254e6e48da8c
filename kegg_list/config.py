"""
Parser configuration model and YAML I/O for kegg-list.

Parsing needs no configuration by default. ``ParserConfig`` exists for
callers that want to opt into behaviour the defaults leave off, and can
be kept in a small YAML file next to the code that fetches the data::

    two_field_categories:
      - compound
      - glycan

Key functions:
- load_config(path) -> ParserConfig: Load and validate from YAML.
- save_config(config, path): Serialize to YAML.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, model_validator

from kegg_list.categories import PARSED_CATEGORIES, Category
from kegg_list.exceptions import ConfigValidationError

logger = logging.getLogger(__name__)


class ParserConfig(BaseModel):
    """Options for ``parse_list()`` / ``parse_list_line()``."""

    model_config = ConfigDict(frozen=True)

    two_field_categories: tuple[Category, ...] = Field(
        (),
        description=(
            "Categories without a dedicated parser whose lines are read as "
            "'id<TAB>name' into EntryRecord. Any other unparsed category "
            "raises UnsupportedCategoryError."
        ),
    )

    @model_validator(mode="after")
    def _check_no_dedicated_parser(self) -> ParserConfig:
        clash = sorted(c.value for c in self.two_field_categories if c in PARSED_CATEGORIES)
        if clash:
            raise ValueError(
                f"Categories {clash} already have a dedicated parser and "
                "cannot use the two-field fallback."
            )
        return self


def load_config(path: str | Path) -> ParserConfig:
    """Load and validate a parser config YAML file.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ConfigValidationError: If the file is empty.
        pydantic.ValidationError: If the YAML content fails schema validation.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    if raw is None:
        raise ConfigValidationError(f"Config file is empty: {path}")
    logger.info("Loaded parser config from %s", path)
    return ParserConfig.model_validate(raw)


def save_config(config: ParserConfig, path: str | Path) -> None:
    """Serialize a ParserConfig to YAML."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = config.model_dump(mode="json")
    with open(path, "w", encoding="utf-8") as f:
        f.write("# kegg-list parser configuration\n\n")
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)
    logger.info("Saved parser config to %s", path)
