"""Declarative boolean queries over tag containers."""

from enum import Enum

from pydantic import BaseModel, ConfigDict

from domain.tags.container import TagContainer


class QueryType(str, Enum):
    """How a TagQuery combines its containers."""

    ALL = "All"
    ANY = "Any"
    NONE = "None"
    ALL_EXACT = "AllExact"
    ANY_EXACT = "AnyExact"
    NONE_EXACT = "NoneExact"


class TagQuery(BaseModel):
    """
    Required / blocked / any / none-of containers evaluated against a target.

    - ALL:  target has every required tag and none of the blocked ones
    - ANY:  target has at least one `any` tag and none of the blocked ones
    - NONE: target has none of the `none_of` tags
    The *_EXACT modes use the same structure without ancestor credit.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    required_tags: TagContainer | None = None
    blocked_tags: TagContainer | None = None
    any_tags: TagContainer | None = None
    none_of_tags: TagContainer | None = None
    query_type: QueryType = QueryType.ALL

    def matches(self, target: TagContainer | None) -> bool:
        """Evaluate against `target`. A None target only satisfies an empty query."""
        if target is None:
            return self.is_empty()

        qt = self.query_type
        if qt == QueryType.ALL:
            return target.has_all(self.required_tags) and not target.has_any(self.blocked_tags)
        if qt == QueryType.ANY:
            return target.has_any(self.any_tags) and not target.has_any(self.blocked_tags)
        if qt == QueryType.NONE:
            return not target.has_any(self.none_of_tags)
        if qt == QueryType.ALL_EXACT:
            return target.has_all_exact(self.required_tags) and not target.has_any_exact(self.blocked_tags)
        if qt == QueryType.ANY_EXACT:
            return target.has_any_exact(self.any_tags) and not target.has_any_exact(self.blocked_tags)
        if qt == QueryType.NONE_EXACT:
            return not target.has_any_exact(self.none_of_tags)
        return False

    def is_empty(self) -> bool:
        return all(
            c is None or c.is_empty()
            for c in (self.required_tags, self.blocked_tags, self.any_tags, self.none_of_tags)
        )

    def describe(self) -> str:
        """Multi-line, deterministic rendering for logs and tests."""
        mode = self.query_type.value if isinstance(self.query_type, QueryType) else str(self.query_type)
        lines = [f"Query Type: {mode}"]
        for label, container in (
            ("Required", self.required_tags),
            ("Blocked", self.blocked_tags),
            ("Any", self.any_tags),
            ("None Of", self.none_of_tags),
        ):
            if container is not None and not container.is_empty():
                lines.append(f"{label}: {', '.join(sorted(t.full_path for t in container))}")
        return "\n".join(lines)
