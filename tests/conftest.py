import pytest

from managers.config_manager import validate_props
from models.config import DEFAULT_PROPS


def _props(**overrides):
    raw = dict(DEFAULT_PROPS)
    raw["stargazers"] = list(DEFAULT_PROPS["stargazers"])
    raw.update(overrides)
    return raw


@pytest.fixture
def props():
    """Fresh copy of the default props (3 s @ 60 fps, 143 stars, 20 stargazers)"""
    return _props()


@pytest.fixture
def config():
    return validate_props(_props())


@pytest.fixture
def make_config():
    """Factory: default props with camelCase overrides"""
    def _make(**overrides):
        return validate_props(_props(**overrides))
    return _make
