"""Configuration models (Pydantic classes)."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from infrastructure.constants import TAG_ASSET_GLOB, TAGS_DIR

_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class TagSettings(BaseModel):
    """
    Runtime configuration.
    - Loaded from settings.yaml (optional)
    - Environment overrides applied by the configuration loader
    - Consumed by the application bootstrap and the CLI
    """

    tags_dir: Path = Field(
        default_factory=lambda: TAGS_DIR,
        description="Directory scanned for tag asset YAML files.",
    )
    asset_glob: str = Field(default=TAG_ASSET_GLOB, description="Glob pattern selecting asset files.")
    validate_assets: bool = Field(
        default=True,
        description="If true, log a warning for every malformed tag name found while loading assets.",
    )
    console_level: str = "INFO"
    log_file: Path | None = None

    @field_validator("console_level")
    @classmethod
    def _check_level(cls, v: str) -> str:
        level = str(v).strip().upper()
        if level not in _LEVELS:
            raise ValueError(f"console_level must be one of {sorted(_LEVELS)}, got {v!r}")
        return level
