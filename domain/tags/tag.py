"""Hierarchical tag node."""

from __future__ import annotations

from domain.tags.naming import ROOT_SEGMENT, SEPARATOR, is_valid_segment


class InvalidSegmentError(ValueError):
    """Raised when a Tag is constructed with an empty or malformed segment."""


class Tag:
    """
    One segment of a dotted tag path, linked to its parent.

    Tags are immutable once built: segment and parent never change, only the
    children list grows as the registry creates descendants. Two tags compare
    equal iff their full paths are equal; a registry guarantees that equal tags
    are also the same object.
    """

    __slots__ = ("_segment", "_parent", "_children", "_depth", "_full_path", "_is_virtual_root")

    def __init__(self, segment: str, parent: Tag | None = None) -> None:
        if not is_valid_segment(segment):
            raise InvalidSegmentError(f"Invalid tag segment: {segment!r}")

        self._segment = segment
        self._parent = parent
        self._children: list[Tag] = []
        self._depth = 0 if parent is None or parent.is_virtual_root else parent.depth + 1
        self._is_virtual_root = False

        if parent is None or parent.is_virtual_root:
            self._full_path = segment
        else:
            self._full_path = f"{parent.full_path}{SEPARATOR}{segment}"

        if parent is not None:
            parent._children.append(self)

    @classmethod
    def virtual_root(cls) -> Tag:
        """Build the sentinel that anchors top-level tags (never exposed publicly)."""
        root = cls(ROOT_SEGMENT)
        root._is_virtual_root = True
        return root

    @property
    def segment(self) -> str:
        return self._segment

    @property
    def parent(self) -> Tag | None:
        return self._parent

    @property
    def children(self) -> list[Tag]:
        """Snapshot of the current children; mutating it does not touch the tree."""
        return list(self._children)

    @property
    def depth(self) -> int:
        return self._depth

    @property
    def full_path(self) -> str:
        return self._full_path

    @property
    def is_virtual_root(self) -> bool:
        return self._is_virtual_root

    def matches_hierarchical(self, other: Tag | None) -> bool:
        """True if this tag is `other` or one of its ancestors."""
        if other is None:
            return False
        current: Tag | None = other
        while current is not None:
            if current == self:
                return True
            current = current.parent
        return False

    def matches_exact(self, other: Tag | None) -> bool:
        return other is not None and self == other

    def is_descendant_of(self, candidate: Tag | None) -> bool:
        """True if `candidate` sits strictly above this tag in the parent chain."""
        if candidate is None:
            return False
        current = self._parent
        while current is not None:
            if current == candidate:
                return True
            current = current.parent
        return False

    def ancestors(self) -> list[Tag]:
        """Proper ancestors from nearest to farthest, excluding the virtual root."""
        out: list[Tag] = []
        current = self._parent
        while current is not None and not current.is_virtual_root:
            out.append(current)
            current = current.parent
        return out

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Tag):
            return NotImplemented
        return self._is_virtual_root == other._is_virtual_root and self._full_path == other._full_path

    def __hash__(self) -> int:
        return hash(self._full_path)

    def __str__(self) -> str:
        return self._full_path

    def __repr__(self) -> str:
        return f"Tag({self._full_path!r})"
