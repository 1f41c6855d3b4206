"""Client configuration management.

Configuration sources (in priority order):
1. Explicit constructor arguments
2. Environment variables (WEBDRIVER_ prefix)
3. Config file (webdriver.yaml)
4. Defaults
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from webdriver_exec.types import ELEMENT_KEY


class Settings(BaseSettings):
    """webdriver-exec settings."""

    model_config = SettingsConfigDict(
        env_prefix="WEBDRIVER_",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    # Remote end base URL, e.g. http://localhost:4444/wd/hub
    endpoint_url: str | None = None

    # Default request timeout in seconds
    timeout: float = Field(default=30.0, gt=0)

    # Client drives several browsers at once; "function (" scripts get wrapped
    multi_instance: bool = False

    # Reserved key marking element references on the wire
    element_key: str = Field(default=ELEMENT_KEY, min_length=1)


def _load_config_file() -> dict:
    """Load configuration from YAML file if exists.

    Looks for config file in order:
    1. WEBDRIVER_CONFIG_FILE environment variable
    2. ./webdriver.yaml
    """
    config_paths = [
        os.environ.get("WEBDRIVER_CONFIG_FILE"),
        Path("webdriver.yaml"),
    ]

    for path in config_paths:
        if path is None:
            continue
        path = Path(path)
        if path.exists():
            with open(path) as f:
                return yaml.safe_load(f) or {}

    return {}


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Configuration is loaded from:
    1. YAML config file (if exists)
    2. Environment variables (override)
    3. Defaults
    """
    # Init kwargs outrank env vars in pydantic-settings; re-apply env on top
    file_config = _load_config_file()
    env_settings = Settings()
    env_fields = {
        name: getattr(env_settings, name) for name in env_settings.model_fields_set
    }
    return Settings(**{**file_config, **env_fields})
