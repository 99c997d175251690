"""Pytest configuration and fixtures."""

import pytest

from supermemo2.config import get_settings
from supermemo2.srs import Item


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make every test read settings from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def new_item() -> Item:
    return Item.new()


@pytest.fixture
def mature_item() -> Item:
    """An item with a long run of successful reviews."""
    return Item(easiness=2.5, repetitions=5, interval=30)
