"""
Infrastructure layer: External dependencies and I/O boundaries.

Contains adapters for:
- Configuration loading (YAML settings, tag assets, environment)
- Observability (logging)

This is the only layer that performs I/O operations.
"""

from infrastructure.config import TagSettings, load_settings, yaml_directory_source

__all__ = [
    "load_settings",
    "TagSettings",
    "yaml_directory_source",
]
