"""Shared test fixtures."""

from __future__ import annotations

import pytest

from webdriver_exec.config import get_settings

ENDPOINT = "http://localhost:4444/wd/hub"
SESSION_ID = "4f0c8f5e"


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch, tmp_path):
    """Isolate every test from ambient WEBDRIVER_* env vars and config files."""
    for name in (
        "WEBDRIVER_ENDPOINT_URL",
        "WEBDRIVER_TIMEOUT",
        "WEBDRIVER_MULTI_INSTANCE",
        "WEBDRIVER_ELEMENT_KEY",
        "WEBDRIVER_CONFIG_FILE",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def execute_url():
    return f"{ENDPOINT}/session/{SESSION_ID}/execute"


@pytest.fixture
def execute_async_url():
    return f"{ENDPOINT}/session/{SESSION_ID}/execute_async"
