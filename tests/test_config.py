"""Tests for application config loading."""

from folio.config.app_config import (
    CONFIG_FILE,
    DEFAULT_RESERVED_URLS,
    DEFAULT_THEMES,
    load_app_config,
)


def _write_config(workdir, text):
    path = workdir / CONFIG_FILE
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


class TestLoadAppConfig:
    """Tests for load_app_config()."""

    def test_defaults_without_file(self, workdir):
        config = load_app_config()
        assert config.slugs.max_attempts == 100
        assert config.slugs.max_conflict_retries == 3
        assert config.slugs.empty_fallback == "project"
        assert config.pages.reserved_urls == DEFAULT_RESERVED_URLS
        assert config.pages.themes == DEFAULT_THEMES
        assert config.storage.db_path == "db/folio.db"

    def test_file_overrides(self, workdir):
        _write_config(
            workdir,
            "pages:\n  themes: [ocean, earth, forest]\n  reserved_urls: [API, Login]\n"
            "storage:\n  db_path: other.db\n",
        )
        config = load_app_config()
        assert config.pages.themes == ("ocean", "earth", "forest")
        assert config.pages.reserved_urls == ("api", "login")
        assert config.storage.db_path == "other.db"
        # Unset sections keep defaults
        assert config.slugs.max_attempts == 100

    def test_attempt_bound_never_below_100(self, workdir):
        _write_config(workdir, "slugs:\n  max_attempts: 5\n")
        assert load_app_config().slugs.max_attempts == 100

    def test_cached_until_reload(self, workdir):
        first = load_app_config()
        _write_config(workdir, "slugs:\n  empty_fallback: untitled\n")
        assert load_app_config() is first
        assert load_app_config(force_reload=True).slugs.empty_fallback == "untitled"

    def test_empty_file_uses_defaults(self, workdir):
        _write_config(workdir, "")
        assert load_app_config().pages.themes == DEFAULT_THEMES
