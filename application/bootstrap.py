"""Registry construction from settings."""

import logging

from domain.tags.registry import TagRegistry, set_default_registry
from infrastructure.config.loader import yaml_directory_source
from infrastructure.config.models import TagSettings

logger = logging.getLogger(__name__)


def build_registry(settings: TagSettings, *, install_as_default: bool = True) -> TagRegistry:
    """
    Create a registry fed by the YAML assets under `settings.tags_dir` and initialize it.

    Args:
        settings: Resolved TagSettings
        install_as_default: Also make it the process-wide default registry

    Returns:
        The initialized TagRegistry
    """
    source = yaml_directory_source(settings.tags_dir, settings.asset_glob, validate=settings.validate_assets)
    registry = TagRegistry(sources=[source])
    registry.initialize()

    if install_as_default:
        set_default_registry(registry)

    logger.info("Registry ready: %d tags from %s", len(registry), settings.tags_dir)
    return registry
