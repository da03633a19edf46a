from pathlib import Path

# Repo-root conventional directories/files (overrideable via settings.yaml / environment)
CONFIG_DIR = Path("configs")
SETTINGS_FILE = CONFIG_DIR / "settings.yaml"
TAGS_DIR = CONFIG_DIR / "tags"
TAG_ASSET_GLOB = "*.yaml"

# Environment variable overrides
ENV_TAGS_DIR = "GAMEPLAY_TAGS_DIR"
ENV_LOG_LEVEL = "GAMEPLAY_TAGS_LOG_LEVEL"
