"""
Tag registry: interns dotted paths into a canonical tag tree.

A registry owns every Tag it creates. Requesting the same path twice returns
the same object, and missing ancestors are created (and announced to
listeners) strictly before their descendants.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from domain.tags.asset import TagAsset, TagDefinition
from domain.tags.naming import SEPARATOR, is_valid_name
from domain.tags.tag import Tag

logger = logging.getLogger(__name__)

TagListener = Callable[[Tag], None]
# A configuration source yields the assets to ingest during initialize().
TagSource = Callable[[], Iterable[TagAsset]]


class TagRegistry:
    """Canonical store mapping full dotted path -> Tag."""

    def __init__(self, sources: Iterable[TagSource] | None = None) -> None:
        self._sources: list[TagSource] = list(sources or [])
        self._tag_map: dict[str, Tag] = {}
        self._definitions: dict[str, TagDefinition] = {}
        self._listeners: list[TagListener] = []
        self._root = Tag.virtual_root()
        self._initialized = False

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    def initialize(self) -> None:
        """Ingest all configuration sources once. Further calls are no-ops until reset()."""
        if self._initialized:
            return

        self._tag_map.clear()
        self._definitions.clear()
        self._root = Tag.virtual_root()
        self._initialized = True

        asset_count = 0
        try:
            for source in self._sources:
                for asset in source():
                    self.load_tags_from_asset(asset)
                    asset_count += 1
        except Exception:
            # Roll back so the next initialize() ingests every source again.
            logger.error("Tag registry initialization failed after %d assets; rolling back.", asset_count)
            self._tag_map.clear()
            self._definitions.clear()
            self._root = Tag.virtual_root()
            self._initialized = False
            raise

        logger.info("Tag registry initialized with %d tags from %d assets.", len(self._tag_map), asset_count)

    def reset(self) -> None:
        """Drop every tag, definition and listener, and mark the registry uninitialized."""
        self._tag_map.clear()
        self._definitions.clear()
        self._listeners.clear()
        self._root = Tag.virtual_root()
        self._initialized = False

    def _ensure_initialized(self) -> None:
        if not self._initialized:
            logger.warning("Tag registry accessed before initialize(); initializing now.")
            self.initialize()

    # ---- Listeners ----

    def subscribe(self, listener: TagListener) -> TagListener:
        """Register a callback invoked synchronously for every newly created tag."""
        self._listeners.append(listener)
        return listener

    def unsubscribe(self, listener: TagListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _emit_registered(self, tag: Tag) -> None:
        for listener in list(self._listeners):
            listener(tag)

    # ---- Lookup / creation ----

    @staticmethod
    def is_valid_name(name: object, full_path: bool = False) -> bool:
        return is_valid_name(name, full_path=full_path)

    def request_tag(self, path: str | None) -> Tag | None:
        """
        Return the canonical tag for `path`, creating it and its ancestors if needed.

        Empty or malformed paths yield None (with a warning) instead of raising.
        """
        self._ensure_initialized()

        if not isinstance(path, str) or not path:
            logger.warning("Requested tag with null or empty name.")
            return None

        existing = self._tag_map.get(path)
        if existing is not None:
            return existing

        logger.debug("Tag %r not pre-loaded; creating dynamically.", path)
        return self.create_tag(path)

    def create_tag(self, path: str) -> Tag | None:
        """Create `path` (and any missing ancestors), emitting one event per new tag."""
        self._ensure_initialized()

        if not is_valid_name(path, full_path=True):
            logger.warning("Attempted to create tag with invalid name: %r", path)
            return None

        existing = self._tag_map.get(path)
        if existing is not None:
            return existing

        parent = self._root
        prefix = ""
        for segment in path.split(SEPARATOR):
            prefix = f"{prefix}{SEPARATOR}{segment}" if prefix else segment
            current = self._tag_map.get(prefix)
            if current is None:
                current = Tag(segment, parent)
                self._tag_map[prefix] = current
                self._emit_registered(current)
            parent = current

        return self._tag_map[path]

    def find_tag(self, path: str | None) -> Tag | None:
        """Look up an existing tag without creating it."""
        self._ensure_initialized()
        if not isinstance(path, str) or not path:
            return None
        return self._tag_map.get(path)

    def get_all_tags(self) -> list[Tag]:
        """Every registered tag (the virtual root excluded), in creation order."""
        self._ensure_initialized()
        return list(self._tag_map.values())

    def get_child_tags(self, parent: Tag | None) -> list[Tag]:
        self._ensure_initialized()
        if parent is None:
            return []
        return parent.children

    def get_root_tags(self) -> list[Tag]:
        """Top-level tags (direct children of the virtual root)."""
        self._ensure_initialized()
        return self._root.children

    # ---- Configuration ingestion ----

    def load_tags_from_asset(self, asset: TagAsset | None) -> None:
        """Register every named definition of `asset`; null/empty entries are skipped."""
        self._ensure_initialized()

        if asset is None:
            logger.warning("Attempted to load tags from a null asset.")
            return

        for definition in asset.tag_definitions:
            if definition is None or not definition.tag_name:
                continue
            tag = self.create_tag(definition.tag_name)
            if tag is None:
                continue
            if tag.full_path in self._definitions:
                logger.debug("Duplicate definition for %s in asset %s; keeping the first.", tag, asset.name)
                continue
            self._definitions[tag.full_path] = definition

    def get_definition(self, tag: Tag | str | None) -> TagDefinition | None:
        """Metadata recorded for a tag when it was loaded from an asset, if any."""
        self._ensure_initialized()
        if tag is None:
            return None
        path = tag.full_path if isinstance(tag, Tag) else tag
        return self._definitions.get(path)

    def __len__(self) -> int:
        self._ensure_initialized()
        return len(self._tag_map)

    def __contains__(self, path: object) -> bool:
        self._ensure_initialized()
        if isinstance(path, Tag):
            path = path.full_path
        return path in self._tag_map


# ---- Process-wide convenience access ----

_default_registry: TagRegistry | None = None


def get_default_registry() -> TagRegistry:
    """Return the process-wide registry, creating an empty one on first use."""
    global _default_registry
    if _default_registry is None:
        _default_registry = TagRegistry()
    return _default_registry


def set_default_registry(registry: TagRegistry) -> None:
    global _default_registry
    _default_registry = registry
    logger.debug("Default tag registry replaced (initialized=%s).", registry.is_initialized)


def reset_default_registry() -> None:
    """Forget the process-wide registry (tests only)."""
    global _default_registry
    _default_registry = None
