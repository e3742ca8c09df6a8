"""
Documentation metadata handed to templates.

These are produced by the package-metadata extractor and passed through
the renderer untouched. All of them are frozen dataclasses, so ``==``
compares them field by field; the ``equal`` template helper relies on it.
``load_package`` rebuilds them from JSON for the command-line renderer.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from pydantic import TypeAdapter, ValidationError

from pkgdoc.errors import InvalidPackageData


@dataclass(frozen=True)
class Annotation:
    """A cross-reference span in a declaration's text.

    ``pos`` and ``end`` are UTF-8 byte offsets into ``Declaration.text``.
    An empty ``import_path`` refers to a name in the same package.
    """

    pos: int
    end: int
    name: str
    import_path: str = ""


@dataclass(frozen=True)
class Declaration:
    """Literal declaration source plus ordered, non-overlapping annotations."""

    text: str
    annotations: tuple[Annotation, ...] = ()


@dataclass(frozen=True)
class Package:
    """The subset of a package's documentation the bundled templates use."""

    import_path: str
    project_root: str = ""
    name: str = ""
    synopsis: str = ""
    doc: str = ""
    is_command: bool = False
    declarations: tuple[Declaration, ...] = ()
    imports: tuple[str, ...] = ()
    updated: datetime | None = None
    subdirectories: tuple[str, ...] = field(default_factory=tuple)


_PACKAGE_ADAPTER = TypeAdapter(Package)


def load_package(payload: Mapping[str, Any]) -> Package:
    """Build a ``Package``, with nested declarations and annotations, from decoded JSON.

    ``updated`` accepts ISO 8601 strings; lists become tuples.

    Raises:
        InvalidPackageData: a field is missing or has the wrong type
    """
    try:
        return _PACKAGE_ADAPTER.validate_python(payload)
    except ValidationError as e:
        raise InvalidPackageData(
            f"invalid package data: {e.error_count()} error(s)", cause=e
        ).with_context(import_path=payload.get("import_path")) from e
