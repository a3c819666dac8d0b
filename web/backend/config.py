#!/usr/bin/env python3
"""
Configuration access for the matchmaking web application.

The settings models and YAML/env loading live in core.config_loader; this
module caches one AppConfig per process for the API.
"""

from pathlib import Path
from functools import lru_cache

from core.config_loader import AppConfig, load_config


@lru_cache()
def get_config() -> AppConfig:
    """
    Get application configuration with caching.

    Loads from config.yaml at the project root and applies environment
    variable overrides.

    Returns:
        AppConfig: The application configuration.
    """
    return load_config(str(get_project_root() / 'config.yaml'))


def get_project_root() -> Path:
    """Get the project root directory."""
    return Path(__file__).parent.parent.parent
