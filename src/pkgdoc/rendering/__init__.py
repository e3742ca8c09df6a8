"""
Text and HTML transforms used by the package documentation templates.

Every function here is pure: it takes documentation metadata and returns
escaped, link-annotated HTML as ``markupsafe.Markup``.
"""

from pkgdoc.rendering.breadcrumbs import breadcrumbs_fmt, build_breadcrumbs
from pkgdoc.rendering.comment import doc_to_html, render_comment
from pkgdoc.rendering.decl import annotate_decl
from pkgdoc.rendering.escape import html_escape
from pkgdoc.rendering.helpers import equal, map_fmt
from pkgdoc.rendering.paths import command_name_fmt, import_path_fmt, relative_path_fmt
from pkgdoc.rendering.timefmt import relative_age, relative_time

__all__ = [
    "annotate_decl",
    "breadcrumbs_fmt",
    "build_breadcrumbs",
    "command_name_fmt",
    "doc_to_html",
    "equal",
    "html_escape",
    "import_path_fmt",
    "map_fmt",
    "relative_age",
    "relative_path_fmt",
    "relative_time",
    "render_comment",
]
