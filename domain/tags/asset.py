"""Tag definition records and the assets that group them."""

import logging
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from domain.tags.naming import is_valid_name

logger = logging.getLogger(__name__)


class TagDefinition(BaseModel):
    """
    One configured tag.

    Only `tag_name` is interpreted by the registry; the remaining fields are
    pass-through metadata for tooling (networking, editor colors, ...).
    """

    tag_name: str | None = Field(default=None, description="Full dotted tag path, e.g. 'Ability.Fire'.")
    description: str = ""
    category: str = ""
    is_networked: bool = False
    debug_color: str = "#FFFFFF"


class TagAsset(BaseModel):
    """A named group of tag definitions (one YAML file on disk)."""

    name: str = ""
    tag_definitions: list[TagDefinition | None] = Field(default_factory=list)

    def get_tag_names(self) -> list[str]:
        """Names of all non-null definitions with a non-empty tag name, in file order."""
        return [td.tag_name for td in self.tag_definitions if td is not None and td.tag_name]

    def validate_asset(self) -> list[str]:
        """
        Check every definition's tag name against the full-path grammar.

        Returns:
            The invalid names (empty list if the asset is clean)
        """
        invalid: list[str] = []
        for td in self.tag_definitions:
            if td is None:
                continue
            if not is_valid_name(td.tag_name, full_path=True):
                logger.warning("Invalid tag name: %r in asset %s", td.tag_name, self.name or "<unnamed>")
                invalid.append(str(td.tag_name))
        return invalid


def parse_tag_asset(data: dict[str, Any], default_name: str = "") -> TagAsset:
    """
    Parse a pre-loaded YAML dict into a TagAsset.

    This is a pure function - it does NOT perform file I/O.
    The YAML loading happens in infrastructure.config.loader.

    Field values are validated by TagDefinition, so YAML strings such as
    "false" coerce to booleans. Entries that are not mappings or fail
    validation are kept as None so that the registry can skip them the same
    way it skips definitions without a name.

    Args:
        data: Dictionary from yaml.safe_load()
        default_name: Asset name used when the dict has no `name` key

    Returns:
        TagAsset with one entry per listed definition

    Raises:
        ValueError: If tag_definitions is present but not a list
    """
    raw_defs = data.get("tag_definitions", []) or []
    if not isinstance(raw_defs, list):
        raise ValueError("tag_definitions must be a list")

    definitions: list[TagDefinition | None] = []
    for entry in raw_defs:
        if not isinstance(entry, dict):
            logger.debug("Skipping non-mapping tag definition: %r", entry)
            definitions.append(None)
            continue
        # Null YAML values fall back to the model defaults.
        fields = {k: v for k, v in entry.items() if v is not None}
        if isinstance(fields.get("tag_name"), str):
            fields["tag_name"] = fields["tag_name"].strip()
        try:
            definitions.append(TagDefinition.model_validate(fields))
        except ValidationError as e:
            logger.warning("Skipping malformed tag definition %r: %s", entry.get("tag_name"), e)
            definitions.append(None)

    return TagAsset(name=str(data.get("name") or default_name), tag_definitions=definitions)
