"""
FastAPI application factory.

``create_app()`` wires logging, the shared template renderer and the
error handler. Routes that serve documentation pages are added by the
caller and render through ``request.app.state.renderer``.

Tags:
    pkgdoc, api, app-factory, FastAPI
"""

from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse

from pkgdoc.dispatch import TemplateRenderer
from pkgdoc.errors import PkgdocError
from pkgdoc.logging import configure_logging, get_logger
from pkgdoc.rendering import html_escape
from pkgdoc.settings import PkgdocSettings, get_settings

log = get_logger("pkgdoc.api")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Build the shared template set once at startup."""
    settings: PkgdocSettings = app.state.settings
    configure_logging(level=settings.log_level, json_format=settings.log_json)
    renderer: TemplateRenderer = app.state.renderer
    dev_mode = renderer.in_dev_mode()
    if not dev_mode:
        renderer.warm()
    log.info("pkgdoc starting", dev_mode=dev_mode)
    yield
    log.info("pkgdoc shutting down")


async def pkgdoc_error_handler(request: Request, exc: PkgdocError) -> HTMLResponse:
    """Render failures become a bare 500 page; the message is shown in debug mode."""
    log.error("render_failed", path=request.url.path, **exc.to_dict())
    detail = ""
    if request.app.state.settings.debug:
        detail = f"<pre>{html_escape(exc.message)}</pre>"
    return HTMLResponse(
        content=f"<h1>Internal Server Error</h1>{detail}",
        status_code=500,
    )


def create_app(*, settings: PkgdocSettings | None = None) -> FastAPI:
    """Build a FastAPI application with the template renderer attached.

    Parameters
    ----------
    settings : PkgdocSettings | None
        Override settings (useful for testing). When ``None`` the cached
        singleton from :func:`get_settings` is used.
    """
    settings = settings or get_settings()

    app = FastAPI(title="pkgdoc", lifespan=lifespan)
    app.state.settings = settings
    app.state.renderer = TemplateRenderer(settings)

    app.add_exception_handler(PkgdocError, pkgdoc_error_handler)
    return app
