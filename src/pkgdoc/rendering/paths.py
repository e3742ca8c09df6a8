"""Import path formatting for package listings and page titles."""

from __future__ import annotations

import posixpath
from typing import Any

from markupsafe import Markup

from pkgdoc.rendering.escape import html_escape

# Escaped paths longer than this may wrap after each "/".
LONG_PATH = 45
ZERO_WIDTH_SPACE = "&#8203;"


def import_path_fmt(import_path: str) -> Markup:
    """Escape an import path, allowing long ones to break after ``/``."""
    escaped = html_escape(import_path)
    if len(escaped) > LONG_PATH:
        escaped = escaped.replace("/", "/" + ZERO_WIDTH_SPACE)
    return Markup(escaped)


def relative_path_fmt(import_path: str, parent_path: Any = None) -> Markup:
    """Show ``import_path`` relative to ``parent_path`` when it is a string prefix of it."""
    if isinstance(parent_path, str) and parent_path and import_path.startswith(parent_path):
        import_path = import_path[len(parent_path) + 1:]
    return Markup(html_escape(import_path))


def command_name_fmt(import_path: str) -> Markup:
    """The last ``/`` segment of an import path, which names its command."""
    return Markup(html_escape(posixpath.basename(import_path)))
