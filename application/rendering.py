"""Human-readable renderings of the tag tree."""

from domain.tags.registry import TagRegistry
from domain.tags.tag import Tag


def render_tag_tree(registry: TagRegistry, *, indent: str = "  ", with_descriptions: bool = False) -> str:
    """
    Render every tag as an indented tree, children in creation order.

    Example output:
        Ability
          Fire
            Projectile
    """
    lines: list[str] = []

    def _walk(tag: Tag, level: int) -> None:
        line = f"{indent * level}{tag.segment}"
        if with_descriptions:
            definition = registry.get_definition(tag)
            if definition is not None and definition.description:
                line += f"  - {definition.description}"
        lines.append(line)
        for child in registry.get_child_tags(tag):
            _walk(child, level + 1)

    for root in registry.get_root_tags():
        _walk(root, 0)
    return "\n".join(lines)
