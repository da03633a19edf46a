"""
Gameplay tags: hierarchical labels, their registry, containers and queries.

All modules in this package are pure (no file I/O). Loading tag assets from
disk happens in infrastructure.config.loader.
"""

from domain.tags.asset import TagAsset, TagDefinition, parse_tag_asset
from domain.tags.container import TagContainer
from domain.tags.naming import ROOT_SEGMENT, is_valid_name, is_valid_segment
from domain.tags.owner import TagHolder, TagOwner
from domain.tags.query import QueryType, TagQuery
from domain.tags.registry import (
    TagRegistry,
    TagSource,
    get_default_registry,
    reset_default_registry,
    set_default_registry,
)
from domain.tags.tag import InvalidSegmentError, Tag

__all__ = [
    # Core model
    "Tag",
    "InvalidSegmentError",
    "TagContainer",
    "TagQuery",
    "QueryType",
    # Registry
    "TagRegistry",
    "TagSource",
    "get_default_registry",
    "set_default_registry",
    "reset_default_registry",
    # Naming
    "ROOT_SEGMENT",
    "is_valid_name",
    "is_valid_segment",
    # Assets
    "TagAsset",
    "TagDefinition",
    "parse_tag_asset",
    # Owners
    "TagOwner",
    "TagHolder",
]
