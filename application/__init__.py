"""
Application layer: Use cases and workflow orchestration.

This layer coordinates between domain logic and infrastructure:
building a registry from configured tag assets, turning plain tag names
into containers and queries, and rendering the tag tree.
"""

from application.bootstrap import build_registry
from application.queries import build_container, build_query
from application.rendering import render_tag_tree

__all__ = [
    # Main workflows
    "build_registry",
    # Query utilities
    "build_container",
    "build_query",
    # Rendering
    "render_tag_tree",
]
