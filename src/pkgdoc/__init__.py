"""
pkgdoc: package documentation rendering.

Turns extracted package metadata (doc comments, declarations with
cross-reference spans, import paths, timestamps) into escaped,
link-annotated HTML through a Jinja2 template bundle.

Example:
    >>> from pkgdoc import TemplateRenderer, Package
    >>> renderer = TemplateRenderer()
    >>> html = renderer.render("pkg.html", {"pdoc": Package(import_path="fmt", name="fmt")})
"""

from pkgdoc.dispatch import TemplateRenderer, execute_template, get_renderer
from pkgdoc.errors import (
    AnnotationSpanError,
    InvalidPackageData,
    MalformedMapArguments,
    PkgdocError,
    TemplateExecutionError,
    TemplateParseError,
)
from pkgdoc.models import Annotation, Declaration, Package, load_package
from pkgdoc.registry import TemplateSet, build_template_set

__version__ = "0.1.0"

__all__ = [
    "Annotation",
    "AnnotationSpanError",
    "Declaration",
    "InvalidPackageData",
    "MalformedMapArguments",
    "Package",
    "PkgdocError",
    "TemplateExecutionError",
    "TemplateParseError",
    "TemplateRenderer",
    "TemplateSet",
    "build_template_set",
    "execute_template",
    "get_renderer",
    "load_package",
    "__version__",
]
