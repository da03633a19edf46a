"""
Configuration management: models, loading, and validation.

Handles:
- TagSettings: Runtime configuration
- Tag asset loading from YAML
- Environment variable overrides

The loader module performs file I/O; models are pure Pydantic classes.
"""

from infrastructure.config.loader import (
    load_settings,
    load_tag_asset,
    load_tag_assets,
    yaml_directory_source,
)
from infrastructure.config.models import TagSettings

__all__ = [
    # Main config (most commonly used)
    "TagSettings",
    "load_settings",
    # Tag assets
    "load_tag_asset",
    "load_tag_assets",
    "yaml_directory_source",
]
