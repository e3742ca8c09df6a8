"""
Structured error types for pkgdoc rendering.

Every failure the rendering pipeline can surface is a ``PkgdocError``
subclass carrying a category, structured context, and the chained cause.
Nothing here is retried: a failed build or render aborts the current
request and the HTTP layer decides what the client sees.

Manifesto:
    - **Typed errors:** Map helper misuse, template parse failures and
      template execution failures are distinct types
    - **Rich context:** Errors carry the template name, directory or
      import path that was being rendered
    - **Error chaining:** The original Jinja2 or helper exception is kept
      as ``cause`` and ``__cause__``

Architecture:
    ::

        PkgdocError (category, context, cause)
        ├── MalformedMapArguments   (VALIDATION)
        ├── AnnotationSpanError     (VALIDATION)
        ├── InvalidPackageData      (VALIDATION)
        ├── TemplateParseError      (TEMPLATE)
        └── TemplateExecutionError  (TEMPLATE)

Examples:
    >>> error = TemplateParseError("unexpected '}'").with_context(template="pkg.html")
    >>> error.context.template
    'pkg.html'
    >>> error.to_dict()["category"]
    'TEMPLATE'

Tags:
    error-handling, exception-hierarchy, error-context, pkgdoc

Doc-Types:
    - API Reference
    - Error Handling Guide
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """Error categories used for classification and logging."""

    TEMPLATE = "TEMPLATE"         # Template loading, parsing, execution
    VALIDATION = "VALIDATION"     # Caller contract violations
    CONFIG = "CONFIG"             # Missing or invalid settings
    INTERNAL = "INTERNAL"         # Bugs, unexpected state


@dataclass
class ErrorContext:
    """
    Structured metadata attached to an error.

    Only fields that were set are serialized by ``to_dict()``; anything
    without a dedicated field goes into ``metadata``.

    Attributes:
        template: Name of the template being built or executed
        directory: Template directory being parsed
        import_path: Import path of the package being rendered
        metadata: Additional key-value pairs
    """

    template: str | None = None
    directory: str | None = None
    import_path: str | None = None

    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        result = {}
        for key in ["template", "directory", "import_path"]:
            value = getattr(self, key)
            if value is not None:
                result[key] = value
        if self.metadata:
            result.update(self.metadata)
        return result


class PkgdocError(Exception):
    """
    Base exception for all pkgdoc errors.

    Subclasses set ``default_category``; callers may still override it.

    Examples:
        >>> error = PkgdocError("Something went wrong")
        >>> error.category
        <ErrorCategory.INTERNAL: 'INTERNAL'>

        >>> try:
        ...     raise KeyError("Name")
        ... except KeyError as e:
        ...     error = PkgdocError("lookup failed", cause=e)
        >>> error.cause
        KeyError('Name')
    """

    default_category: ErrorCategory = ErrorCategory.INTERNAL

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        context: ErrorContext | None = None,
        cause: BaseException | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.context = context or ErrorContext()
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def with_context(self, **kwargs: Any) -> PkgdocError:
        """
        Add context to this error (fluent API).

        Usage:
            raise TemplateExecutionError("render failed").with_context(
                template="pkg.html",
                import_path="github.com/user/repo",
            )
        """
        for key, value in kwargs.items():
            if hasattr(self.context, key) and key != "metadata":
                setattr(self.context, key, value)
            else:
                self.context.metadata[key] = value
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        result = {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "category": self.category.value,
        }
        context_dict = self.context.to_dict()
        if context_dict:
            result["context"] = context_dict
        if self.cause is not None:
            result["cause"] = str(self.cause)
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, category={self.category.value})"


# =============================================================================
# VALIDATION ERRORS (caller contract violations)
# =============================================================================


class MalformedMapArguments(PkgdocError):
    """The ``map`` template helper got an odd argument count or a non-string key."""

    default_category = ErrorCategory.VALIDATION


class AnnotationSpanError(PkgdocError):
    """A declaration annotation lies outside the text or overlaps its predecessor."""

    default_category = ErrorCategory.VALIDATION


class InvalidPackageData(PkgdocError):
    """Decoded JSON does not describe a package (wrong types or missing fields)."""

    default_category = ErrorCategory.VALIDATION


# =============================================================================
# TEMPLATE ERRORS
# =============================================================================


class TemplateError(PkgdocError):
    """Base for template set build and execution failures."""

    default_category = ErrorCategory.TEMPLATE


class TemplateParseError(TemplateError):
    """Globbing or parsing the template directory failed."""


class TemplateExecutionError(TemplateError):
    """Executing a named template against its data failed."""


__all__ = [
    "ErrorCategory",
    "ErrorContext",
    "PkgdocError",
    "MalformedMapArguments",
    "AnnotationSpanError",
    "InvalidPackageData",
    "TemplateError",
    "TemplateParseError",
    "TemplateExecutionError",
]
