"""
Domain layer: Business logic with minimal external dependencies.

Contains:
- tags: Tag hierarchy, registry, containers, queries and tag assets
"""

from domain.tags import Tag, TagContainer, TagQuery, TagRegistry

__all__ = [
    "Tag",
    "TagContainer",
    "TagQuery",
    "TagRegistry",
]
