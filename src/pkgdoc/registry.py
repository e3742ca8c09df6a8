"""
Template registry.

A ``TemplateSet`` is the compiled template bundle: a Jinja2 environment
with the rendering functions registered, plus every template file matching
the bundle's glob compiled up front so syntax errors surface when the set
is built rather than halfway through a response.

Manifesto:
    Templates select and lay out documentation; the rendering functions
    produce the escaped, link-annotated fragments. The registry is the
    seam between the two: functions are registered before any template
    text is parsed, so every template may call them.

Architecture:
    ::

        build_template_set(directory, pattern)
              │
              ├── Environment(FileSystemLoader, autoescape, StrictUndefined)
              ├── register TEMPLATE_FUNCTIONS (globals, filters)
              └── compile every file matching pattern
              │
              ▼
        TemplateSet (immutable) ──render(name, data)──► str

Guardrails:
    ❌ DON'T: Mutate a TemplateSet after it is built
    ✅ DO: Build a new set to pick up template edits

Tags:
    templates, jinja2, registry, pkgdoc

Doc-Types:
    - API Reference
"""

from __future__ import annotations

import time
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    Template,
    TemplateSyntaxError,
    select_autoescape,
)

from pkgdoc.errors import ErrorCategory, TemplateExecutionError, TemplateParseError
from pkgdoc.logging import get_logger
from pkgdoc.rendering import (
    annotate_decl,
    breadcrumbs_fmt,
    command_name_fmt,
    equal,
    import_path_fmt,
    map_fmt,
    relative_path_fmt,
    relative_time,
    render_comment,
)

logger = get_logger(__name__)

# Formatting functions, callable as globals and usable as filters.
FORMATTERS: dict[str, Callable[..., Any]] = {
    "comment": render_comment,
    "decl": annotate_decl,
    "breadcrumbs": breadcrumbs_fmt,
    "commandName": command_name_fmt,
    "relativePath": relative_path_fmt,
    "relativeTime": relative_time,
    "importPath": import_path_fmt,
}

# Plain helpers; "map" would shadow Jinja2's builtin filter of that name.
HELPERS: dict[str, Callable[..., Any]] = {
    "equal": equal,
    "map": map_fmt,
}

TEMPLATE_FUNCTIONS: dict[str, Callable[..., Any]] = {**FORMATTERS, **HELPERS}


@dataclass(frozen=True)
class TemplateSet:
    """A compiled, read-only template bundle."""

    environment: Environment
    templates: Mapping[str, Template]
    directory: Path
    pattern: str

    @property
    def names(self) -> list[str]:
        return sorted(self.templates)

    def render(self, name: str, data: Any = None) -> str:
        """Execute template ``name`` against ``data``.

        Templates see the value as ``data``; when it is a mapping its keys
        are also available as top-level names.

        Raises:
            TemplateExecutionError: unknown template name or any failure
                while executing the template
        """
        template = self.templates.get(name)
        if template is None:
            raise TemplateExecutionError(
                f"no template {name!r} in {self.directory}"
            ).with_context(template=name, directory=str(self.directory))

        context: dict[str, Any] = dict(data) if isinstance(data, Mapping) else {}
        context.setdefault("data", data)
        try:
            return template.render(context)
        except Exception as e:
            raise TemplateExecutionError(
                f"executing {name!r}: {e}", cause=e
            ).with_context(template=name) from e


def create_environment(directory: Path) -> Environment:
    """Jinja2 environment with the rendering functions registered."""
    env = Environment(
        loader=FileSystemLoader(str(directory)),
        autoescape=select_autoescape(["html", "xml"]),
        undefined=StrictUndefined,
        auto_reload=False,
        cache_size=-1,
    )
    env.globals.update(TEMPLATE_FUNCTIONS)
    env.filters.update(FORMATTERS)
    return env


def build_template_set(directory: Path | str, pattern: str = "*.html") -> TemplateSet:
    """Parse every template under ``directory`` matching ``pattern``.

    Raises:
        TemplateParseError: the directory is missing, the glob matches no
            files, or a template fails to parse
    """
    directory = Path(directory)
    started = time.perf_counter()

    if not directory.is_dir():
        raise TemplateParseError(
            f"template directory {directory} does not exist",
            category=ErrorCategory.CONFIG,
        ).with_context(directory=str(directory))

    names = sorted(p.relative_to(directory).as_posix() for p in directory.glob(pattern) if p.is_file())
    if not names:
        raise TemplateParseError(
            f"pattern {pattern!r} matches no files in {directory}"
        ).with_context(directory=str(directory), pattern=pattern)

    env = create_environment(directory)
    templates: dict[str, Template] = {}
    for name in names:
        try:
            templates[name] = env.get_template(name)
        except TemplateSyntaxError as e:
            raise TemplateParseError(
                f"{e.filename or name}:{e.lineno}: {e.message}", cause=e
            ).with_context(template=name, directory=str(directory)) from e
        except (OSError, UnicodeDecodeError) as e:
            raise TemplateParseError(
                f"reading {name}: {e}", cause=e
            ).with_context(template=name, directory=str(directory)) from e

    logger.debug(
        "template_set_built",
        directory=str(directory),
        templates=len(templates),
        elapsed_ms=round((time.perf_counter() - started) * 1000, 2),
    )
    return TemplateSet(
        environment=env,
        templates=MappingProxyType(templates),
        directory=directory,
        pattern=pattern,
    )


__all__ = [
    "FORMATTERS",
    "HELPERS",
    "TEMPLATE_FUNCTIONS",
    "TemplateSet",
    "build_template_set",
    "create_environment",
]
