import pytest

from polycase.config import get_settings

pytest_plugins = ["pytester"]


@pytest.fixture(autouse=True)
def clean_settings():
    """Drop cached settings so environment changes apply per test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
