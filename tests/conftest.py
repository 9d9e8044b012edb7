"""Root conftest — shared test configuration."""

import os

import pytest

# Failure messages asserted verbatim: keep ANSI codes out unless a test opts in
os.environ["CLARITY_NO_COLOR"] = "1"

from clarity_testkit.config import get_settings  # noqa: E402


@pytest.fixture(autouse=True)
def fresh_settings():
    """Settings cache cleared around every test so env tweaks never leak."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
