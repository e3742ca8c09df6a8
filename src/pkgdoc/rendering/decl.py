"""
Declaration source with cross-reference links.

``annotate_decl`` makes a single forward pass over the declaration text,
copying escaped text up to each linkable annotation, emitting the
annotated span as an anchor, and flushing whatever follows the last link.
Annotations that do not qualify for a link are left in place and come out
as plain escaped text with the next flush.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from markupsafe import Markup

from pkgdoc.errors import AnnotationSpanError
from pkgdoc.models import Annotation, Declaration
from pkgdoc.rendering.escape import html_escape
from pkgdoc.services import is_supported_service


def check_annotations(annotations: Sequence[Annotation], size: int) -> None:
    """Raise ``AnnotationSpanError`` unless the spans are in range, ordered and disjoint."""
    prev_end = 0
    for index, a in enumerate(annotations):
        if not 0 <= a.pos <= a.end <= size:
            raise AnnotationSpanError(
                f"annotation {index} span [{a.pos}:{a.end}] outside text of {size} bytes"
            ).with_context(import_path=a.import_path, name=a.name)
        if a.pos < prev_end:
            raise AnnotationSpanError(
                f"annotation {index} starts at {a.pos}, before previous end {prev_end}"
            ).with_context(import_path=a.import_path, name=a.name)
        prev_end = a.end


def link_target(annotation: Annotation, is_supported: Callable[[str], bool]) -> str | None:
    """Return the href path for an annotation, or ``None`` when it is not linked."""
    if annotation.import_path == "":
        return ""
    if is_supported(annotation.import_path):
        return "/" + annotation.import_path
    return None


def annotate_decl(
    decl: Declaration,
    is_supported: Callable[[str], bool] = is_supported_service,
) -> Markup:
    """Render ``decl.text`` as escaped HTML with anchors at its annotations."""
    text = decl.text.encode("utf-8")
    check_annotations(decl.annotations, len(text))

    def chunk(start: int, end: int | None = None) -> str:
        try:
            return html_escape(text[start:end].decode("utf-8"))
        except UnicodeDecodeError as e:
            raise AnnotationSpanError(
                f"span [{start}:{end}] splits a multi-byte character", cause=e
            ) from e

    out: list[str] = []
    last = 0
    for a in decl.annotations:
        href = link_target(a, is_supported)
        if href is None:
            continue
        out.append(chunk(last, a.pos))
        out.append(f'<a href="{html_escape(href)}#{html_escape(a.name)}">')
        out.append(chunk(a.pos, a.end))
        out.append("</a>")
        last = a.end
    out.append(chunk(last))
    return Markup("".join(out))
