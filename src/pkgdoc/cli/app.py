"""
Typer application for pkgdoc developer tooling.

    pkgdoc check                          # parse the template bundle
    pkgdoc render pkg.html --data x.json  # render a template with JSON data

In ``render`` data, a ``pdoc`` object is loaded as a ``Package`` so the
bundled package and command pages can be rendered from JSON. Logs go to
stderr; stdout carries only the rendered page.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from pkgdoc.errors import PkgdocError
from pkgdoc.logging import configure_logging
from pkgdoc.models import load_package
from pkgdoc.registry import build_template_set
from pkgdoc.settings import get_settings

console = Console()
err_console = Console(stderr=True)

app = typer.Typer(
    name="pkgdoc",
    help="pkgdoc: package documentation templates.",
    no_args_is_help=True,
)


@app.callback()
def main() -> None:
    """Configure logging before any command runs."""
    settings = get_settings()
    configure_logging(level=settings.log_level, json_format=settings.log_json, stream=sys.stderr)


def _resolve(template_dir: Path | None, pattern: str | None) -> tuple[Path, str]:
    settings = get_settings()
    return template_dir or settings.template_dir, pattern or settings.template_pattern


@app.command("check")
def check(
    template_dir: Path | None = typer.Option(None, "--dir", "-d", help="Template directory"),
    pattern: str | None = typer.Option(None, "--pattern", "-p", help="Template file glob"),
) -> None:
    """Parse every template and list what was compiled."""
    directory, glob = _resolve(template_dir, pattern)
    try:
        template_set = build_template_set(directory, glob)
    except PkgdocError as e:
        err_console.print(e.message, style="red", markup=False)
        raise typer.Exit(code=1) from e

    table = Table(title=f"Templates in {directory}")
    table.add_column("Name")
    table.add_column("Size", justify="right")
    for name in template_set.names:
        table.add_row(name, str((directory / name).stat().st_size))
    console.print(table)


@app.command("render")
def render(
    name: str = typer.Argument(..., help="Template name, e.g. pkg.html"),
    data_file: Path | None = typer.Option(None, "--data", help="JSON file with template data"),
    template_dir: Path | None = typer.Option(None, "--dir", "-d", help="Template directory"),
    pattern: str | None = typer.Option(None, "--pattern", "-p", help="Template file glob"),
) -> None:
    """Render a template to stdout."""
    directory, glob = _resolve(template_dir, pattern)
    data = json.loads(data_file.read_text(encoding="utf-8")) if data_file else {}
    try:
        if isinstance(data, dict) and isinstance(data.get("pdoc"), dict):
            data["pdoc"] = load_package(data["pdoc"])
        body = build_template_set(directory, glob).render(name, data)
    except PkgdocError as e:
        err_console.print(e.message, style="red", markup=False)
        raise typer.Exit(code=1) from e
    typer.echo(body, nl=False)
