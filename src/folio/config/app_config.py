"""Application configuration loader.

Loads centralized configuration from data/config/app_config_v1.yaml,
falling back to built-in defaults when the file is missing.

Reserved URLs and themes are frozen into tuples: they are constants for
the lifetime of the process and are passed explicitly to the code that
needs them.

Usage:
    from folio.config.app_config import load_app_config

    config = load_app_config()
    config.pages.reserved_urls
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import structlog
import yaml

logger = structlog.get_logger(__name__)

# Config file path (relative to project root)
CONFIG_FILE = Path("data/config/app_config_v1.yaml")

DEFAULT_RESERVED_URLS = (
    "api",
    "admin",
    "auth",
    "dashboard",
    "static",
    "assets",
    "public",
    "docs",
    "help",
    "terms",
    "privacy",
)
DEFAULT_THEMES = ("ocean", "earth")


@dataclass(frozen=True)
class SlugConfig:
    """Settings for project slug minting."""

    max_attempts: int = 100
    max_conflict_retries: int = 3
    empty_fallback: str = "project"


@dataclass(frozen=True)
class PagesConfig:
    """Settings for profile pages."""

    reserved_urls: tuple[str, ...] = DEFAULT_RESERVED_URLS
    themes: tuple[str, ...] = DEFAULT_THEMES


@dataclass(frozen=True)
class StorageConfig:
    """Settings for the SQLite store."""

    db_path: str = "db/folio.db"


@dataclass(frozen=True)
class AppConfig:
    """Application-wide configuration."""

    slugs: SlugConfig = field(default_factory=SlugConfig)
    pages: PagesConfig = field(default_factory=PagesConfig)
    storage: StorageConfig = field(default_factory=StorageConfig)


# Module-level cache
_cached_config: AppConfig | None = None


def _get_defaults() -> dict[str, Any]:
    """Get default configuration values."""
    return {
        "slugs": {
            "max_attempts": 100,
            "max_conflict_retries": 3,
            "empty_fallback": "project",
        },
        "pages": {
            "reserved_urls": list(DEFAULT_RESERVED_URLS),
            "themes": list(DEFAULT_THEMES),
        },
        "storage": {
            "db_path": "db/folio.db",
        },
    }


def _parse_config(data: dict[str, Any]) -> AppConfig:
    """Parse configuration dictionary into AppConfig object."""
    slugs_data = data.get("slugs") or {}
    slugs = SlugConfig(
        # Fewer than 100 probes would make realistic collisions fail
        max_attempts=max(int(slugs_data.get("max_attempts", 100)), 100),
        max_conflict_retries=int(slugs_data.get("max_conflict_retries", 3)),
        empty_fallback=slugs_data.get("empty_fallback", "project"),
    )

    pages_data = data.get("pages") or {}
    pages = PagesConfig(
        reserved_urls=tuple(
            url.lower() for url in pages_data.get("reserved_urls", DEFAULT_RESERVED_URLS)
        ),
        themes=tuple(pages_data.get("themes", DEFAULT_THEMES)),
    )

    storage_data = data.get("storage") or {}
    storage = StorageConfig(db_path=storage_data.get("db_path", "db/folio.db"))

    return AppConfig(slugs=slugs, pages=pages, storage=storage)


def load_app_config(force_reload: bool = False) -> AppConfig:
    """Load application config, falling back to defaults.

    Args:
        force_reload: If True, ignore cached config and reload from file.

    Returns:
        AppConfig object with all settings.
    """
    global _cached_config

    if _cached_config is not None and not force_reload:
        return _cached_config

    data: dict[str, Any]

    if CONFIG_FILE.exists():
        logger.debug("loading_app_config", source=str(CONFIG_FILE))
        data = yaml.safe_load(CONFIG_FILE.read_text(encoding="utf-8")) or {}
    else:
        logger.info("using_default_config")
        data = _get_defaults()

    _cached_config = _parse_config(data)
    return _cached_config


def clear_config_cache() -> None:
    """Clear the configuration cache.

    Useful for testing or when config is modified at runtime.
    """
    global _cached_config
    _cached_config = None
