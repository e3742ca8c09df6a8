"""Tests for pkgdoc.settings."""

from pathlib import Path

from pkgdoc.settings import BUNDLED_TEMPLATE_DIR, PkgdocSettings, get_settings


class TestPkgdocSettings:
    def test_defaults(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        settings = PkgdocSettings()
        assert settings.template_dir == BUNDLED_TEMPLATE_DIR
        assert settings.template_pattern == "*.html"
        assert settings.dev_mode is False
        assert settings.debug is False
        assert settings.log_level == "INFO"
        assert settings.log_json is None

    def test_env_overrides(self, monkeypatch, tmp_path):
        monkeypatch.setenv("PKGDOC_TEMPLATE_DIR", str(tmp_path))
        monkeypatch.setenv("PKGDOC_TEMPLATE_PATTERN", "*.tmpl")
        monkeypatch.setenv("PKGDOC_DEV_MODE", "true")
        monkeypatch.setenv("PKGDOC_LOG_JSON", "false")
        settings = PkgdocSettings()
        assert settings.template_dir == tmp_path
        assert settings.template_pattern == "*.tmpl"
        assert settings.dev_mode is True
        assert settings.log_json is False

    def test_kwargs_beat_env(self, monkeypatch):
        monkeypatch.setenv("PKGDOC_DEV_MODE", "true")
        assert PkgdocSettings(dev_mode=False).dev_mode is False

    def test_dotenv_file(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        (tmp_path / ".env").write_text("PKGDOC_DEBUG=true\nOTHER_SETTING=1\n", encoding="utf-8")
        assert PkgdocSettings().debug is True

    def test_template_dir_coerced_to_path(self):
        assert isinstance(PkgdocSettings(template_dir="templates").template_dir, Path)


def test_get_settings_cached():
    assert get_settings() is get_settings()
