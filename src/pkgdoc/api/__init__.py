"""HTTP wiring for the documentation renderer."""

from pkgdoc.api.app import create_app

__all__ = ["create_app"]
