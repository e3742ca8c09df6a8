"""pkgdoc command-line interface."""

from pkgdoc.cli.app import app

__all__ = ["app"]
