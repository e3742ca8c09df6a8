"""
Render dispatcher.

Chooses the template set for a render call and turns the rendered body
into an HTTP response.

Outside development mode the process-wide ``TemplateSet`` is built once
(eagerly via ``warm()`` at application start, or lazily on first use) and
only read afterwards, so concurrent requests share it without locking. In
development mode every call builds a private set from disk so template
edits show up on the next request.

Examples:
    >>> renderer = TemplateRenderer(PkgdocSettings(template_dir="templates"))
    >>> response = renderer.execute("pkg.html", 200, {"pdoc": package})
    >>> response.headers["content-type"]
    'text/html; charset=utf-8'
"""

from __future__ import annotations

import os
from collections.abc import Callable
from functools import lru_cache
from typing import Any

from starlette.responses import HTMLResponse

from pkgdoc.logging import LogContext, get_logger
from pkgdoc.registry import TemplateSet, build_template_set
from pkgdoc.settings import PkgdocSettings, get_settings

logger = get_logger(__name__)


def is_dev_server() -> bool:
    """Report whether the process runs under the App Engine development server."""
    return os.environ.get("SERVER_SOFTWARE", "").startswith("Development")


class TemplateRenderer:
    """Renders named templates from a cached or freshly built template set.

    Args:
        settings: Template directory, glob and ``dev_mode`` flag
        dev_mode: Override for the development-mode check, queried on every
            render call. Defaults to ``settings.dev_mode`` or the development
            server environment signal.
    """

    def __init__(
        self,
        settings: PkgdocSettings | None = None,
        *,
        dev_mode: Callable[[], bool] | None = None,
    ):
        self.settings = settings or get_settings()
        self._dev_mode = dev_mode or (lambda: self.settings.dev_mode or is_dev_server())
        self._template_set: TemplateSet | None = None

    def build(self) -> TemplateSet:
        """Parse a new template set from disk."""
        return build_template_set(self.settings.template_dir, self.settings.template_pattern)

    def warm(self) -> TemplateSet:
        """Build the shared template set now instead of on the first render."""
        if self._template_set is None:
            self._template_set = self.build()
            logger.info(
                "templates_loaded",
                directory=str(self._template_set.directory),
                templates=len(self._template_set.templates),
            )
        return self._template_set

    def in_dev_mode(self) -> bool:
        """Whether templates are currently rebuilt on every render."""
        return self._dev_mode()

    def template_set(self) -> TemplateSet:
        """The set to render with: a fresh one in development mode, else the shared one."""
        if self.in_dev_mode():
            logger.debug("templates_reloaded", directory=str(self.settings.template_dir))
            return self.build()
        return self.warm()

    def render(self, name: str, data: Any = None) -> str:
        """Render template ``name`` to a string.

        Raises:
            TemplateParseError: rebuilding the set failed
            TemplateExecutionError: executing the template failed
        """
        with LogContext(template=name):
            return self.template_set().render(name, data)

    def execute(self, name: str, status: int, data: Any = None) -> HTMLResponse:
        """Render template ``name`` into an HTML response with ``status``.

        The body is rendered completely before the response exists, so a
        failure leaves nothing partially written.
        """
        body = self.render(name, data)
        return HTMLResponse(content=body, status_code=status)


@lru_cache(maxsize=1)
def get_renderer() -> TemplateRenderer:
    """Process-wide renderer using the cached settings."""
    return TemplateRenderer(get_settings())


def execute_template(name: str, status: int, data: Any = None) -> HTMLResponse:
    """Render ``name`` with the process-wide renderer."""
    return get_renderer().execute(name, status, data)
