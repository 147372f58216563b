"""Shared pytest fixtures for smoothie tests."""

import pytest

from smoothie.config import get_settings
from smoothie.models import OrderSelection


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Clear cached settings so each test sees its own environment."""
    for name in ("SMOOTHIE_LOG_LEVEL", "SMOOTHIE_LOG_TO_FILE", "SMOOTHIE_CURRENCY_SYMBOL"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def small_order() -> OrderSelection:
    """Small oat milk smoothie with one fruit and no sweetener."""
    return OrderSelection(
        size="small",
        base="oat milk",
        fruits=["banana"],
        extras=[],
        sweetener="none",
    )


@pytest.fixture
def medium_order() -> OrderSelection:
    """Medium water smoothie with two fruits, one extra and honey."""
    return OrderSelection(
        size="medium",
        base="water",
        fruits=["mango", "kiwi"],
        extras=["chia"],
        sweetener="honey",
        customer_name="Sam",
    )


@pytest.fixture
def large_order() -> OrderSelection:
    """Large yogurt smoothie with two extras and no sweetener."""
    return OrderSelection(
        size="large",
        base="yogurt",
        fruits=["apple"],
        extras=["protein", "oats"],
        sweetener="none",
    )
