"""
Shared pytest fixtures for pkgdoc tests.

This module provides:
- A temporary template directory with small, purpose-built templates
- Settings pointing at that directory
- A fixed clock for relative time tests
- Cache resets for the process-wide settings and renderer
"""

from datetime import UTC, datetime
from pathlib import Path

import pytest
import structlog

from pkgdoc.dispatch import get_renderer
from pkgdoc.models import Annotation, Declaration, Package
from pkgdoc.settings import PkgdocSettings, get_settings

TEMPLATES = {
    "hello.html": "Hello {{ name }}!",
    "data.html": "{{ data }}",
    "decl.html": "{{ decl(d) }}",
    "comment.html": "{{ text|comment }}",
    "crumbs.html": "{{ breadcrumbs(pdoc) }}",
    "pairs.html": '{% set m = map(*args) %}{% for k in m|sort %}{{ k }}={{ m[k] }};{% endfor %}',
}


@pytest.fixture
def template_dir(tmp_path: Path) -> Path:
    """Directory with the templates in TEMPLATES."""
    directory = tmp_path / "templates"
    directory.mkdir()
    for name, text in TEMPLATES.items():
        (directory / name).write_text(text, encoding="utf-8")
    return directory


@pytest.fixture
def settings(template_dir: Path) -> PkgdocSettings:
    return PkgdocSettings(template_dir=template_dir)


@pytest.fixture
def now() -> datetime:
    """Fixed reference time for relative time formatting."""
    return datetime(2024, 1, 1, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def sample_package() -> Package:
    """A package exercising every section of pkg.html."""
    return Package(
        import_path="github.com/user/repo/sub",
        project_root="github.com/user/repo",
        name="sub",
        doc="Package sub does things.\n\nSee RFC 2616 for the protocol.\n",
        declarations=(
            Declaration(
                text="func New(w io.Writer) *T",
                annotations=(
                    Annotation(pos=11, end=20, name="Writer", import_path="io"),
                    Annotation(pos=23, end=24, name="T"),
                ),
            ),
        ),
        imports=("fmt",),
        subdirectories=("github.com/user/repo/sub/inner",),
    )


@pytest.fixture(autouse=True)
def _reset_process_state(monkeypatch):
    """Isolate tests from cached settings, the shared renderer and env signals."""
    monkeypatch.delenv("SERVER_SOFTWARE", raising=False)
    get_settings.cache_clear()
    get_renderer.cache_clear()
    yield
    get_settings.cache_clear()
    get_renderer.cache_clear()
    structlog.reset_defaults()
