"""Interface for objects that own tags, plus a ready-made holder."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable

from domain.tags.container import TagContainer
from domain.tags.registry import TagRegistry
from domain.tags.tag import Tag

logger = logging.getLogger(__name__)


class TagOwner(ABC):
    """Anything that can answer tag questions about itself."""

    @abstractmethod
    def get_owned_tags(self) -> TagContainer:
        raise NotImplementedError

    def has_matching_tag(self, tag: Tag | None) -> bool:
        return self.get_owned_tags().has_tag(tag)

    def has_all_matching_tags(self, tags: TagContainer | None) -> bool:
        return self.get_owned_tags().has_all(tags)

    def has_any_matching_tags(self, tags: TagContainer | None) -> bool:
        return self.get_owned_tags().has_any(tags)


class TagHolder(TagOwner):
    """
    Concrete owner backed by a TagContainer.

    Initial tags are given by name and resolved through `registry`; names that
    fail to resolve are skipped. Listeners in `on_tag_added` / `on_tag_removed`
    are called synchronously after the container changes.
    """

    def __init__(self, registry: TagRegistry | None = None, initial_tag_names: Iterable[str] | None = None) -> None:
        self._container = TagContainer()
        self.on_tag_added: list[Callable[[Tag], None]] = []
        self.on_tag_removed: list[Callable[[Tag], None]] = []

        if initial_tag_names and registry is not None:
            for name in initial_tag_names:
                tag = registry.request_tag(name)
                if tag is None:
                    logger.warning("Skipping unresolvable initial tag %r", name)
                    continue
                self._container.add_tag(tag)

    def add_tag(self, tag: Tag | None) -> None:
        if tag is None:
            return
        self._container.add_tag(tag)
        for listener in list(self.on_tag_added):
            listener(tag)

    def remove_tag(self, tag: Tag | None) -> None:
        if tag is None:
            return
        if self._container.remove_tag(tag):
            for listener in list(self.on_tag_removed):
                listener(tag)

    def has_tag(self, tag: Tag | None) -> bool:
        return self._container.has_tag(tag)

    def get_owned_tags(self) -> TagContainer:
        return self._container
