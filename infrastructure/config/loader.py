"""Configuration loading from YAML files."""

import logging
import os
from collections.abc import Callable
from pathlib import Path
from typing import Any

import yaml

from domain.tags.asset import TagAsset, parse_tag_asset
from infrastructure.config.models import TagSettings
from infrastructure.constants import ENV_LOG_LEVEL, ENV_TAGS_DIR, TAG_ASSET_GLOB
from infrastructure.observability import clear_source_context, set_log_context

logger = logging.getLogger(__name__)


def _load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML file and return as dict."""
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected YAML dict in {path}, got {type(data)}")

    return data


def load_tag_asset(path: Path) -> TagAsset:
    """
    Load one tag asset from a YAML file.

    This function handles file I/O, then delegates parsing to domain layer.
    The file stem is used as the asset name unless the file sets `name`.
    """
    set_log_context(source=path.name)
    try:
        data = _load_yaml(path)
        asset = parse_tag_asset(data, default_name=path.stem)
        logger.debug("Loaded asset %s (%d definitions)", asset.name, len(asset.tag_definitions))
        return asset
    finally:
        clear_source_context()


def load_tag_assets(directory: Path, pattern: str = TAG_ASSET_GLOB) -> list[TagAsset]:
    """
    Load every asset file in `directory` matching `pattern`, sorted by file name.

    A missing directory yields no assets (with a warning) rather than an error,
    so a project without tag files still starts with an empty registry.
    """
    if not directory.exists():
        logger.warning("Tag asset directory not found: %s", directory)
        return []
    if not directory.is_dir():
        raise ValueError(f"Tag asset path is not a directory: {directory}")

    return [load_tag_asset(p) for p in sorted(directory.glob(pattern)) if p.is_file()]


def yaml_directory_source(
    directory: Path,
    pattern: str = TAG_ASSET_GLOB,
    *,
    validate: bool = False,
) -> Callable[[], list[TagAsset]]:
    """
    Build a registry configuration source reading YAML assets from `directory`.

    The directory is read lazily, when the registry initializes.
    """

    def _source() -> list[TagAsset]:
        assets = load_tag_assets(directory, pattern)
        if validate:
            for asset in assets:
                asset.validate_asset()
        return assets

    return _source


def load_settings(path: Path | None = None) -> TagSettings:
    """
    Load settings.yaml (if present) and apply environment overrides.

    Environment:
    - GAMEPLAY_TAGS_DIR overrides tags_dir
    - GAMEPLAY_TAGS_LOG_LEVEL overrides console_level
    """
    data: dict[str, Any] = {}
    if path is not None and path.exists():
        data = _load_yaml(path)
    elif path is not None:
        logger.debug("Settings file %s not found; using defaults.", path)

    tags_dir = os.environ.get(ENV_TAGS_DIR)
    if tags_dir:
        data["tags_dir"] = tags_dir
    log_level = os.environ.get(ENV_LOG_LEVEL)
    if log_level:
        data["console_level"] = log_level

    return TagSettings(**data)
