"""Set of tags with hierarchical containment queries."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from domain.tags.tag import Tag


class TagContainer:
    """
    Mutable set of tags plus the derived set of all their ancestors.

    Hierarchical queries credit ancestors: a container holding
    `Ability.Fire.Projectile` answers `has_tag(Ability)` with True, while the
    `*_exact` variants only look at explicit members. None tags and None
    containers are always neutral (no-op or False), never an error.
    """

    def __init__(self, *tags: Tag | None) -> None:
        self._tags: set[Tag] = set()
        self._ancestors: set[Tag] = set()
        self.add_tags(tags)

    # ---- Mutation ----

    def add_tag(self, tag: Tag | None) -> None:
        if tag is None or tag.is_virtual_root:
            return
        self._tags.add(tag)
        self._ancestors.update(tag.ancestors())

    def add_tags(self, tags: Iterable[Tag | None]) -> None:
        for tag in tags:
            self.add_tag(tag)

    def remove_tag(self, tag: Tag | None) -> bool:
        """Remove `tag` if it is an explicit member. Returns True if something was removed."""
        if tag is None or tag not in self._tags:
            return False
        self._tags.remove(tag)
        self._rebuild_ancestors()
        return True

    def remove_tags(self, tags: Iterable[Tag | None]) -> None:
        for tag in tags:
            if tag is not None:
                self._tags.discard(tag)
        self._rebuild_ancestors()

    def clear(self) -> None:
        self._tags.clear()
        self._ancestors.clear()

    def _rebuild_ancestors(self) -> None:
        # Another member may still need an ancestor, so removal can't be incremental.
        self._ancestors = {ancestor for tag in self._tags for ancestor in tag.ancestors()}

    # ---- Queries ----

    def has_tag(self, tag: Tag | None) -> bool:
        """True if `tag` is a member or an ancestor of a member."""
        if tag is None:
            return False
        return tag in self._tags or tag in self._ancestors

    def has_tag_exact(self, tag: Tag | None) -> bool:
        return tag is not None and tag in self._tags

    def has_any(self, other: TagContainer | None) -> bool:
        if other is None or other.is_empty():
            return False
        return any(self.has_tag(tag) for tag in other._tags)

    def has_any_exact(self, other: TagContainer | None) -> bool:
        if other is None or other.is_empty():
            return False
        return any(self.has_tag_exact(tag) for tag in other._tags)

    def has_all(self, other: TagContainer | None) -> bool:
        """Vacuously True for a None or empty `other`."""
        if other is None or other.is_empty():
            return True
        return all(self.has_tag(tag) for tag in other._tags)

    def has_all_exact(self, other: TagContainer | None) -> bool:
        """Vacuously True for a None or empty `other`, same as has_all()."""
        if other is None or other.is_empty():
            return True
        return all(self.has_tag_exact(tag) for tag in other._tags)

    def filter(self, filter_tags: TagContainer | None) -> TagContainer:
        """Members that some tag of `filter_tags` matches hierarchically (ancestor-or-self)."""
        result = TagContainer()
        if filter_tags is None or filter_tags.is_empty():
            return result
        for tag in self._tags:
            if any(f.matches_hierarchical(tag) for f in filter_tags._tags):
                result.add_tag(tag)
        return result

    def get_tags(self) -> list[Tag]:
        return list(self._tags)

    def get_parent_tags(self) -> list[Tag]:
        """Snapshot of the derived ancestor set."""
        return list(self._ancestors)

    def count(self) -> int:
        return len(self._tags)

    def is_empty(self) -> bool:
        return not self._tags

    def copy(self) -> TagContainer:
        return TagContainer(*self._tags)

    def __len__(self) -> int:
        return len(self._tags)

    def __iter__(self) -> Iterator[Tag]:
        return iter(list(self._tags))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TagContainer):
            return NotImplemented
        return self._tags == other._tags

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"TagContainer({', '.join(sorted(t.full_path for t in self._tags))})"
