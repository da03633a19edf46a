"""Building containers and queries from plain tag names."""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from domain.tags.container import TagContainer
from domain.tags.query import QueryType, TagQuery
from domain.tags.registry import TagRegistry

logger = logging.getLogger(__name__)

# Mapping keys accepted by build_query -> TagQuery field
QUERY_KEYS = {
    "required": "required_tags",
    "blocked": "blocked_tags",
    "any": "any_tags",
    "none_of": "none_of_tags",
}


def build_container(registry: TagRegistry, names: Iterable[str] | None) -> TagContainer:
    """Resolve `names` through the registry; unresolvable names are skipped with a warning."""
    container = TagContainer()
    for name in names or []:
        tag = registry.request_tag(name)
        if tag is None:
            logger.warning("Ignoring invalid tag name %r", name)
            continue
        container.add_tag(tag)
    return container


def build_query(registry: TagRegistry, query_def: Mapping[str, Any]) -> TagQuery:
    """
    Build a TagQuery from a mapping such as:

        {"query_type": "All", "required": ["Ability"], "blocked": ["Status.Stunned"]}

    Raises:
        ValueError: If query_type is not a known QueryType value
    """
    raw_type = query_def.get("query_type", QueryType.ALL.value)
    try:
        query_type = QueryType(raw_type)
    except ValueError as e:
        valid = [q.value for q in QueryType]
        raise ValueError(f"Unknown query_type {raw_type!r}. Expected one of {valid}") from e

    containers = {field: build_container(registry, query_def.get(key)) for key, field in QUERY_KEYS.items()}
    return TagQuery(query_type=query_type, **containers)
