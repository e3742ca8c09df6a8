"""
Tests for the pkgdoc CLI.

Uses typer's CliRunner to invoke commands against a temporary template
directory.
"""

from __future__ import annotations

import importlib
import json
import logging
import sys

from typer.testing import CliRunner

import pkgdoc.registry as registry
from pkgdoc.cli.app import app
from pkgdoc.logging import get_logger

# pkgdoc.cli re-exports the Typer object as `app`, shadowing the submodule
# attribute, so fetch the module itself.
cli_app = importlib.import_module("pkgdoc.cli.app")

runner = CliRunner()


class TestCheck:
    def test_lists_templates(self, template_dir):
        result = runner.invoke(app, ["check", "--dir", str(template_dir)])
        assert result.exit_code == 0, result.output
        assert "hello.html" in result.output
        assert "pairs.html" in result.output

    def test_pattern(self, template_dir):
        result = runner.invoke(app, ["check", "-d", str(template_dir), "-p", "h*.html"])
        assert result.exit_code == 0, result.output
        assert "hello.html" in result.output
        assert "pairs.html" not in result.output

    def test_missing_directory(self, tmp_path):
        result = runner.invoke(app, ["check", "--dir", str(tmp_path / "nowhere")])
        assert result.exit_code == 1

    def test_syntax_error(self, template_dir):
        (template_dir / "bad.html").write_text("{% if %}", encoding="utf-8")
        result = runner.invoke(app, ["check", "--dir", str(template_dir)])
        assert result.exit_code == 1

    def test_bundled_templates_by_default(self):
        result = runner.invoke(app, ["check"])
        assert result.exit_code == 0, result.output
        assert "pkg.html" in result.output


class TestRender:
    def test_renders_with_data(self, template_dir, tmp_path):
        data_file = tmp_path / "data.json"
        data_file.write_text(json.dumps({"name": "cli"}), encoding="utf-8")
        result = runner.invoke(app, ["render", "hello.html", "--data", str(data_file), "--dir", str(template_dir)])
        assert result.exit_code == 0, result.output
        assert result.output == "Hello cli!"

    def test_unknown_template(self, template_dir):
        result = runner.invoke(app, ["render", "missing.html", "--dir", str(template_dir)])
        assert result.exit_code == 1

    def test_missing_data_is_an_error(self, template_dir):
        result = runner.invoke(app, ["render", "hello.html", "--dir", str(template_dir)])
        assert result.exit_code == 1

    def test_package_page_from_json(self, tmp_path):
        data_file = tmp_path / "pkg.json"
        data_file.write_text(
            json.dumps(
                {
                    "pdoc": {
                        "import_path": "github.com/user/repo/sub",
                        "project_root": "github.com/user/repo",
                        "name": "sub",
                        "doc": "See RFC 2616.\n",
                        "declarations": [
                            {"text": "func New() *T", "annotations": [{"pos": 12, "end": 13, "name": "T"}]}
                        ],
                        "imports": ["fmt"],
                        "updated": "2024-01-01T12:00:00+00:00",
                    }
                }
            ),
            encoding="utf-8",
        )
        result = runner.invoke(app, ["render", "pkg.html", "--data", str(data_file)])
        assert result.exit_code == 0, result.output
        assert '<a href="/github.com/user/repo">repo</a>/sub' in result.output
        assert '<pre>func New() *<a href="#T">T</a></pre>' in result.output
        assert "rfc2616" in result.output
        assert "days ago" in result.output

    def test_invalid_package_data(self, tmp_path):
        data_file = tmp_path / "pkg.json"
        data_file.write_text(json.dumps({"pdoc": {"name": "no path"}}), encoding="utf-8")
        result = runner.invoke(app, ["render", "pkg.html", "--data", str(data_file)])
        assert result.exit_code == 1

    def test_stdout_holds_only_the_body(self, template_dir, tmp_path, monkeypatch, caplog):
        monkeypatch.setenv("PKGDOC_LOG_LEVEL", "DEBUG")
        monkeypatch.setattr(registry, "logger", get_logger("pkgdoc.registry"))
        caplog.set_level(logging.DEBUG)
        data_file = tmp_path / "data.json"
        data_file.write_text(json.dumps({"name": "x"}), encoding="utf-8")
        result = runner.invoke(app, ["render", "hello.html", "--data", str(data_file), "--dir", str(template_dir)])
        assert result.exit_code == 0, result.output
        assert result.stdout == "Hello x!"
        assert any("template_set_built" in r.getMessage() for r in caplog.records)


class TestLoggingSetup:
    def test_configured_from_settings_on_stderr(self, template_dir, monkeypatch):
        calls = []

        def recording_configure(**kwargs):
            calls.append((kwargs, sys.stderr))

        monkeypatch.setenv("PKGDOC_LOG_LEVEL", "WARNING")
        monkeypatch.setattr(cli_app, "configure_logging", recording_configure)
        result = runner.invoke(app, ["check", "--dir", str(template_dir)])
        assert result.exit_code == 0, result.output
        kwargs, stderr = calls[0]
        assert kwargs["level"] == "WARNING"
        assert kwargs["stream"] is stderr


def test_help_lists_commands():
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "check" in result.output
    assert "render" in result.output
