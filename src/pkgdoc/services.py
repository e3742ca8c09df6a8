"""
Hosting services whose packages have their own documentation pages.

The declaration annotator only links a cross-package reference when the
target package can be documented by the site, which is the case for
import paths on the services listed here.
"""

from __future__ import annotations

SUPPORTED_SERVICE_PREFIXES: tuple[str, ...] = (
    "github.com/",
    "bitbucket.org/",
    "code.google.com/p/",
    "launchpad.net/",
)


def is_supported_service(import_path: str) -> bool:
    """Report whether ``import_path`` lives on a supported hosting service."""
    return import_path.startswith(SUPPORTED_SERVICE_PREFIXES)
