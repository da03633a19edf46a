import pytest

from domain.tags.registry import TagRegistry, reset_default_registry


@pytest.fixture
def registry() -> TagRegistry:
    reg = TagRegistry()
    reg.initialize()
    return reg


@pytest.fixture(autouse=True)
def _clear_default_registry():
    yield
    reset_default_registry()
