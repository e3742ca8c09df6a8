"""HTML escaping shared by every rendering function."""

from __future__ import annotations

from markupsafe import escape


def html_escape(text: str) -> str:
    """Escape ``& < > " '`` and replace NUL with U+FFFD.

    The result is a plain ``str``; callers wrap finished fragments in
    ``Markup`` themselves.
    """
    return str(escape(text)).replace("\0", "\ufffd")
