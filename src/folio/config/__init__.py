"""Configuration package for folio."""

from folio.config.app_config import (
    AppConfig,
    PagesConfig,
    SlugConfig,
    StorageConfig,
    clear_config_cache,
    load_app_config,
)

__all__ = [
    "AppConfig",
    "PagesConfig",
    "SlugConfig",
    "StorageConfig",
    "clear_config_cache",
    "load_app_config",
]
