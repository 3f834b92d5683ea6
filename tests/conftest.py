"""Shared test fixtures."""

import pytest


@pytest.fixture
def brand_orange() -> str:
    return "#F2A30F"


@pytest.fixture
def accessible_orange() -> str:
    return "#A85C00"


@pytest.fixture
def dark_grey() -> str:
    return "#212121"


@pytest.fixture
def light_grey() -> str:
    return "#EEEEEE"


@pytest.fixture
def truecolor_env(monkeypatch):
    """Keep COLORTERM changes made by the CLI from leaking between tests."""
    monkeypatch.setenv("COLORTERM", "truecolor")
