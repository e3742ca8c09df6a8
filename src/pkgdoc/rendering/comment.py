"""
Doc comment to HTML.

``doc_to_html`` turns plain comment text into paragraphs, section headings
and preformatted blocks, escaping every literal character and linking bare
URLs. ``render_comment`` is what templates call: it additionally demotes
headings from ``<h3>`` to ``<h4>`` so they nest under the page's own
section headings, and links ``RFC NNNN`` references to the IETF archive.

Comment conventions:
    - Blank lines separate paragraphs.
    - Indented lines form a preformatted block.
    - A single capitalized line without punctuation, set off by blank
      lines and followed by unindented text, is a section heading.
    - Doubled backquotes and doubled single quotes become curly quotes.
"""

from __future__ import annotations

import re
import unicodedata
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

from markupsafe import Markup

from pkgdoc.rendering.escape import html_escape

RFC_URL = "https://tools.ietf.org/html/rfc"

_PROTOCOL = r"(?:https?|ftp|file|gopher|mailto|news|nntp|telnet|wais|prospero):"
_HOST_PART = r"[a-zA-Z0-9_@\-]+"
_FILE_PART = r"[a-zA-Z0-9_?%#~&/\-+=]+"
URL_RE = re.compile(
    r"(?<!\w)" + _PROTOCOL + "//"
    + _HOST_PART + r"(?:[.:]" + _HOST_PART + r")*/?"
    + _FILE_PART + r"(?:[:.,]" + _FILE_PART + r")*"
)

# ASCII whitespace and digits only; the text is already escaped HTML.
RFC_RE = re.compile(r"RFC[\t\n\f\r ]+([0-9]{3,4})")

_NON_ALNUM_RE = re.compile(r"[^a-zA-Z0-9]")
_HEADING_ILLEGAL = set(",.;:!?+*/=()[]{}_^°&§~%#@<\">\\")


class BlockKind(Enum):
    PARAGRAPH = "p"
    HEADING = "h"
    PRE = "pre"


@dataclass
class Block:
    kind: BlockKind
    lines: list[str]


def _indent_len(line: str) -> int:
    return len(line) - len(line.lstrip(" \t"))


def _is_blank(line: str) -> bool:
    return line == "" or line == "\n"


def _unindent(lines: list[str]) -> None:
    """Strip the longest common white prefix from the non-blank lines, in place."""
    if not lines:
        return
    prefix = lines[0][: _indent_len(lines[0])]
    for line in lines:
        if not _is_blank(line):
            white = line[: _indent_len(line)]
            n = 0
            while n < len(prefix) and n < len(white) and prefix[n] == white[n]:
                n += 1
            prefix = prefix[:n]
    for i, line in enumerate(lines):
        if not _is_blank(line):
            lines[i] = line[len(prefix):]


def heading_text(line: str) -> str:
    """Return the trimmed line if it qualifies as a section heading, else ``""``."""
    line = line.strip()
    if not line:
        return ""

    first, last = line[0], line[-1]
    if not (first.isalpha() and unicodedata.category(first) == "Lu"):
        return ""
    if not (last.isalpha() or last.isdigit()):
        return ""
    if any(ch in _HEADING_ILLEGAL for ch in line):
        return ""

    # "'" is only allowed as a possessive "'s"
    rest = line
    while (i := rest.find("'")) >= 0:
        if i + 1 >= len(rest) or rest[i + 1] != "s" or (i + 2 < len(rest) and rest[i + 2] != " "):
            return ""
        rest = rest[i + 2:]

    return line


def heading_id(text: str) -> str:
    return "hdr-" + _NON_ALNUM_RE.sub("_", text)


def blocks(text: str) -> Iterator[Block]:
    """Split comment text into paragraph, heading and preformatted blocks."""
    # split after "\n" only, keeping a trailing empty line
    parts = text.split("\n")
    lines = [part + "\n" for part in parts[:-1]] + [parts[-1]]
    _unindent(lines)

    para: list[str] = []
    last_was_blank = False
    last_was_heading = False
    i = 0
    while i < len(lines):
        line = lines[i]
        if _is_blank(line):
            if para:
                yield Block(BlockKind.PARAGRAPH, para)
                para = []
            i += 1
            last_was_blank = True
            continue

        if _indent_len(line) > 0:
            if para:
                yield Block(BlockKind.PARAGRAPH, para)
                para = []
            j = i + 1
            while j < len(lines) and (_is_blank(lines[j]) or _indent_len(lines[j]) > 0):
                j += 1
            while j > i and _is_blank(lines[j - 1]):
                j -= 1
            pre = lines[i:j]
            _unindent(pre)
            yield Block(BlockKind.PRE, pre)
            i = j
            last_was_heading = False
            continue

        if (
            last_was_blank
            and not last_was_heading
            and i + 2 < len(lines)
            and _is_blank(lines[i + 1])
            and not _is_blank(lines[i + 2])
            and _indent_len(lines[i + 2]) == 0
        ):
            head = heading_text(line)
            if head:
                if para:
                    yield Block(BlockKind.PARAGRAPH, para)
                    para = []
                yield Block(BlockKind.HEADING, [head])
                i += 2
                last_was_heading = True
                continue

        last_was_blank = False
        last_was_heading = False
        para.append(line)
        i += 1

    if para:
        yield Block(BlockKind.PARAGRAPH, para)


def _escape_quotes(text: str, nice: bool) -> str:
    if not nice:
        return html_escape(text)
    out: list[str] = []
    last = 0
    i = 0
    while i < len(text) - 1:
        ch = text[i]
        if ch == text[i + 1] and ch in "`'":
            out.append(html_escape(text[last:i]))
            out.append("&ldquo;" if ch == "`" else "&rdquo;")
            last = i + 2
            i += 2
            continue
        i += 1
    out.append(html_escape(text[last:]))
    return "".join(out)


def _link_urls(line: str, nice: bool) -> str:
    out: list[str] = []
    last = 0
    for m in URL_RE.finditer(line):
        out.append(_escape_quotes(line[last:m.start()], nice))
        url = m.group(0)
        out.append(f'<a href="{html_escape(url)}">{_escape_quotes(url, nice)}</a>')
        last = m.end()
    out.append(_escape_quotes(line[last:], nice))
    return "".join(out)


def doc_to_html(text: str) -> str:
    """Format comment text as HTML with ``<h3>`` section headings."""
    out: list[str] = []
    for block in blocks(text):
        if block.kind is BlockKind.PARAGRAPH:
            out.append("<p>\n")
            out.extend(_link_urls(line, nice=True) for line in block.lines)
            out.append("</p>\n")
        elif block.kind is BlockKind.HEADING:
            head = block.lines[0]
            out.append(f'<h3 id="{heading_id(head)}">')
            out.append(_escape_quotes(head, nice=True))
            out.append("</h3>\n")
        else:
            out.append("<pre>")
            out.extend(_link_urls(line, nice=False) for line in block.lines)
            out.append("</pre>\n")
    return "".join(out)


def link_rfcs(html: str) -> str:
    """Wrap each ``RFC NNNN`` reference in a link to the RFC document."""
    return RFC_RE.sub(lambda m: f'<a href="{RFC_URL}{m.group(1)}">{m.group(0)}</a>', html)


def render_comment(comment: str) -> Markup:
    """Render a doc comment for embedding in a package page."""
    html = doc_to_html(comment)
    html = html.replace("<h3 ", "<h4 ").replace("</h3>", "</h4>")
    return Markup(link_rfcs(html))
