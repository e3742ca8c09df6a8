"""
pkgdoc settings.

All values can be overridden via environment variables prefixed with
``PKGDOC_`` or a ``.env`` file.

Order of precedence (highest → lowest):
    1. Explicit keyword arguments
    2. Environment variables (``PKGDOC_TEMPLATE_DIR``, ``PKGDOC_DEV_MODE``, ...)
    3. ``.env`` file
    4. Defaults below
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

BUNDLED_TEMPLATE_DIR = Path(__file__).parent / "templates"


class PkgdocSettings(BaseSettings):
    """Settings for template loading, rendering and the HTTP wiring.

    Fields
    ──────
    template_dir     : Directory holding the template bundle
    template_pattern : Glob, relative to template_dir, selecting template files
    dev_mode         : Rebuild the template set on every render call
    debug            : Include error messages in HTML error pages
    log_level        : structlog log level
    log_json         : Force JSON (True) or console (False) log output
    """

    model_config = SettingsConfigDict(
        env_prefix="PKGDOC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Templates ────────────────────────────────────────────────────────
    template_dir: Path = Field(
        default=BUNDLED_TEMPLATE_DIR,
        description="Directory holding the template bundle",
    )
    template_pattern: str = Field(default="*.html", description="Template file glob")
    dev_mode: bool = Field(default=False, description="Reload templates on every render")

    # ── Observability ────────────────────────────────────────────────────
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(default="INFO", description="Log level")
    log_json: bool | None = Field(default=None, description="JSON logs; auto-detect when unset")


@lru_cache(maxsize=1)
def get_settings() -> PkgdocSettings:
    """Cached settings, loaded once per process."""
    return PkgdocSettings()
