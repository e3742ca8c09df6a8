"""Clickable import path breadcrumbs."""

from __future__ import annotations

from typing import Any

from markupsafe import Markup

from pkgdoc.rendering.escape import html_escape

HOME_LINK = '<a href="/-/go" title="Standard Packages">☆</a> '


def build_breadcrumbs(import_path: str, project_root: str) -> Markup:
    """Link every ``/``-separated segment of ``import_path`` except the last.

    Each link points at the cumulative prefix ending with that segment and
    is labelled with the segment alone. An empty ``project_root`` marks a
    standard package and prepends the home link. When the project root
    covers the whole import path, the path is emitted as plain text.
    """
    out: list[str] = []
    if not project_root:
        out.append(HOME_LINK)
    elif len(project_root) >= len(import_path):
        return Markup(html_escape(import_path))

    start = 0
    while (sep := import_path.find("/", start)) > start:
        out.append(
            f'<a href="/{html_escape(import_path[:sep])}">'
            f"{html_escape(import_path[start:sep])}</a>/"
        )
        start = sep + 1
    out.append(html_escape(import_path[start:]))
    return Markup("".join(out))


def breadcrumbs_fmt(package: Any) -> Markup:
    """Template form of :func:`build_breadcrumbs` taking a package object."""
    return build_breadcrumbs(package.import_path, package.project_root)
