from pathlib import Path

import pytest

from application import build_container, build_query, build_registry, render_tag_tree
from domain.tags.query import QueryType
from domain.tags.registry import get_default_registry
from infrastructure.config.models import TagSettings

ASSET = """
name: core
tag_definitions:
  - tag_name: Ability.Fire.Projectile
    description: Fireball
  - tag_name: Ability.Water
  - tag_name: Status.Stunned
"""


@pytest.fixture
def settings(tmp_path: Path) -> TagSettings:
    tags_dir = tmp_path / "tags"
    tags_dir.mkdir()
    (tags_dir / "core.yaml").write_text(ASSET, encoding="utf-8")
    return TagSettings(tags_dir=tags_dir)


def test_build_registry_loads_assets_and_installs_default(settings: TagSettings) -> None:
    registry = build_registry(settings)

    assert registry.is_initialized
    assert len(registry) == 6
    assert get_default_registry() is registry


def test_build_registry_without_installing(settings: TagSettings) -> None:
    registry = build_registry(settings, install_as_default=False)

    assert get_default_registry() is not registry


def test_build_container_skips_invalid_names(registry) -> None:
    container = build_container(registry, ["Ability.Fire", "", "bad name", None])

    assert [t.full_path for t in container] == ["Ability.Fire"]
    assert build_container(registry, None).is_empty()


def test_build_query(registry) -> None:
    query = build_query(
        registry,
        {"query_type": "All", "required": ["Ability", "Character"], "blocked": ["Status.Stunned"]},
    )

    assert query.query_type is QueryType.ALL
    assert query.matches(build_container(registry, ["Ability.Fire", "Character.Player"]))
    assert not query.matches(build_container(registry, ["Ability.Fire", "Character.Player", "Status.Stunned"]))


def test_build_query_rejects_unknown_type(registry) -> None:
    with pytest.raises(ValueError, match="Unknown query_type"):
        build_query(registry, {"query_type": "Sometimes"})


def test_render_tag_tree(settings: TagSettings) -> None:
    registry = build_registry(settings, install_as_default=False)

    assert render_tag_tree(registry) == "\n".join(
        ["Ability", "  Fire", "    Projectile", "  Water", "Status", "  Stunned"]
    )
    assert "Projectile  - Fireball" in render_tag_tree(registry, with_descriptions=True)
