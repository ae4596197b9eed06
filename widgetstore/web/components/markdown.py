"""
Safe Markdown-subset renderer for comments, FAQ answers and widget texts.

Why:
- Shoppers and admins write short formatted snippets (bold, lists, quotes,
  simple tables). A full Markdown engine is more than the store needs and its
  output is harder to keep predictable.

Security model:
- The parser builds a small render tree; source text never becomes markup.
- Serialisation escapes every piece of source text and every URL before any
  tag is emitted, and links with unknown URL schemes degrade to plain text.

Supported subset (one block per line, no nesting):
- paragraphs, `* `/`- ` bullet lists, `> ` quotes (one block per line),
  pipe tables with a `---` separator line
- inline `[text](url)`, `**bold**`, `_italic_`, `~~strike~~`, `` `code` ``
"""
from __future__ import annotations

import html
import re
from dataclasses import dataclass, field
from typing import Callable, Iterator, List, Optional, Sequence, Set, Union
from urllib.parse import urlparse

from .base import Component


# --- Render tree ------------------------------------------------------------------


@dataclass
class Text:
    text: str


@dataclass
class _Styled:
    children: List["Span"] = field(default_factory=list)

    @property
    def text(self) -> str:
        return "".join(child.text for child in self.children)


@dataclass
class Bold(_Styled):
    pass


@dataclass
class Italic(_Styled):
    pass


@dataclass
class Strikethrough(_Styled):
    pass


@dataclass
class Code(_Styled):
    pass


@dataclass
class Link(_Styled):
    url: str = ""


Span = Union[Text, Bold, Italic, Strikethrough, Code, Link]


@dataclass
class Paragraph:
    spans: List[Span]

    @property
    def text(self) -> str:
        return "".join(span.text for span in self.spans)


@dataclass
class ListBlock:
    items: List[List[Span]] = field(default_factory=list)


@dataclass
class Blockquote:
    spans: List[Span]

    @property
    def text(self) -> str:
        return "".join(span.text for span in self.spans)


@dataclass
class Table:
    headers: List[List[Span]]
    rows: List[List[List[Span]]] = field(default_factory=list)


Block = Union[Paragraph, ListBlock, Blockquote, Table]


def plain_text(spans: Sequence[Span]) -> str:
    """Concatenate the visible text of a span sequence."""
    return "".join(span.text for span in spans)


# --- Inline formatting -------------------------------------------------------------

# Stands in for an already formatted span while a later rule scans the line.
# Which characters are atoms is tracked by position, so the same character in
# source text stays ordinary text.
_ATOM = "\x00"

# Called with a match group number; returns the spans covering that group.
GroupSpans = Callable[[int], List[Span]]


@dataclass(frozen=True)
class _InlineRule:
    pattern: "re.Pattern[str]"
    build: Callable[[GroupSpans], Span]


def _inflate(flat: str, start: int, end: int, slots: Set[int], atoms: Iterator[Span]) -> List[Span]:
    spans: List[Span] = []
    text_from = start
    for pos in range(start, end):
        if pos in slots:
            if pos > text_from:
                spans.append(Text(flat[text_from:pos]))
            spans.append(next(atoms))
            text_from = pos + 1
    if end > text_from:
        spans.append(Text(flat[text_from:end]))
    return spans


def _wrap(cls: type) -> Callable[[GroupSpans], Span]:
    def build(group: GroupSpans) -> Span:
        return cls(children=group(1))

    return build


def _build_link(group: GroupSpans) -> Span:
    children = group(1)
    url = plain_text(group(2))
    return Link(children=children, url=url)


# Order is significant: each rule scans the output of the previous ones.
_INLINE_RULES: tuple[_InlineRule, ...] = (
    _InlineRule(re.compile(r"\[(.*?)\]\((.*?)\)"), _build_link),
    _InlineRule(re.compile(r"\*\*(.*?)\*\*"), _wrap(Bold)),
    _InlineRule(re.compile(r"_(.*?)_"), _wrap(Italic)),
    _InlineRule(re.compile(r"~~(.*?)~~"), _wrap(Strikethrough)),
    _InlineRule(re.compile(r"`(.*?)`"), _wrap(Code)),
)


def _apply_rule(spans: List[Span], rule: _InlineRule) -> List[Span]:
    for span in spans:
        if isinstance(span, _Styled):
            span.children = _apply_rule(span.children, rule)

    parts: List[str] = []
    slots: Set[int] = set()
    atoms: List[Span] = []
    length = 0
    for span in spans:
        if isinstance(span, Text):
            parts.append(span.text)
            length += len(span.text)
        else:
            parts.append(_ATOM)
            slots.add(length)
            atoms.append(span)
            length += 1
    flat = "".join(parts)
    pending = iter(atoms)

    def inflate(start: int, end: int) -> List[Span]:
        return _inflate(flat, start, end, slots, pending)

    out: List[Span] = []
    pos = 0
    for match in rule.pattern.finditer(flat):
        out.extend(inflate(pos, match.start()))
        out.append(rule.build(lambda g, m=match: inflate(m.start(g), m.end(g))))
        pos = match.end()
    out.extend(inflate(pos, len(flat)))
    return out


def format_inline(text: str) -> List[Span]:
    """Turn one line (or table cell) into a list of inline spans."""
    spans: List[Span] = [Text(text)] if text else []
    for rule in _INLINE_RULES:
        spans = _apply_rule(spans, rule)
    return spans


# --- Block parsing -----------------------------------------------------------------


def _split_row(line: str) -> List[List[Span]]:
    cells = line.split("|")[1:-1]
    return [format_inline(cell.strip()) for cell in cells]


def _is_separator(line: str) -> bool:
    return line.strip().startswith("|") and "---" in line


def parse_markdown(content: Optional[str]) -> List[Block]:
    """Parse the supported Markdown subset into block nodes.

    Parameters:
        content: Raw text (may be None or empty).
    Returns:
        Ordered block nodes. Blank lines produce no block; malformed markup
        falls back to literal text and never raises.
    """
    if not content:
        return []

    text = str(content)
    lines = text.replace("\r\n", "\n").replace("\r", "\n").split("\n")

    blocks: List[Block] = []
    current_list: Optional[ListBlock] = None
    current_table: Optional[Table] = None

    def close_list() -> None:
        nonlocal current_list
        if current_list is not None:
            blocks.append(current_list)
            current_list = None

    i = 0
    while i < len(lines):
        line = lines[i]

        if line.strip().startswith("|"):
            if current_table is not None:
                current_table.rows.append(_split_row(line))
            else:
                following = lines[i + 1] if i + 1 < len(lines) else ""
                close_list()
                if _is_separator(following):
                    current_table = Table(headers=_split_row(line))
                    i += 1  # separator belongs to the table
                else:
                    blocks.append(Paragraph(format_inline(line)))
            i += 1
            continue

        if current_table is not None:
            blocks.append(current_table)
            current_table = None

        if line.startswith("> "):
            close_list()
            blocks.append(Blockquote(format_inline(line[2:])))
        elif line.startswith("* ") or line.startswith("- "):
            if current_list is None:
                current_list = ListBlock()
            current_list.items.append(format_inline(line[2:]))
        else:
            close_list()
            if line.strip():
                blocks.append(Paragraph(format_inline(line)))
        i += 1

    if current_table is not None:
        blocks.append(current_table)
    close_list()
    return blocks


# --- HTML serialisation ------------------------------------------------------------

_ALLOWED_PROTOCOLS = ("http", "https", "mailto")

_TAGS = {
    Bold: "strong",
    Italic: "em",
    Strikethrough: "s",
    Code: "code",
}


def is_safe_url(url: str) -> bool:
    """Allow relative/fragment URLs and the http(s)/mailto schemes only."""
    candidate = "".join(ch for ch in url if ch.isprintable() and not ch.isspace())
    try:
        scheme = urlparse(candidate).scheme
    except ValueError:
        return False
    return not scheme or scheme.lower() in _ALLOWED_PROTOCOLS


def _escape(text: str) -> str:
    # html.escape replaces "&" first, then "<", ">", '"' and "'".
    return html.escape(text, quote=True)


def render_spans(spans: Sequence[Span]) -> str:
    parts: List[str] = []
    for span in spans:
        if isinstance(span, Text):
            parts.append(_escape(span.text))
        elif isinstance(span, Link):
            inner = render_spans(span.children)
            if is_safe_url(span.url):
                parts.append(
                    f'<a href="{_escape(span.url)}" target="_blank" rel="noopener noreferrer">{inner}</a>'
                )
            else:
                parts.append(inner)
        else:
            tag = _TAGS[type(span)]
            parts.append(f"<{tag}>{render_spans(span.children)}</{tag}>")
    return "".join(parts)


def _render_block(block: Block) -> str:
    if isinstance(block, Paragraph):
        return f"<p>{render_spans(block.spans)}</p>"
    if isinstance(block, Blockquote):
        return f"<blockquote>{render_spans(block.spans)}</blockquote>"
    if isinstance(block, ListBlock):
        items = "".join(f"<li>{render_spans(item)}</li>" for item in block.items)
        return f"<ul>{items}</ul>"
    head = "".join(f"<th>{render_spans(cell)}</th>" for cell in block.headers)
    body = "".join(
        "<tr>" + "".join(f"<td>{render_spans(cell)}</td>" for cell in row) + "</tr>"
        for row in block.rows
    )
    return f"<table><thead><tr>{head}</tr></thead><tbody>{body}</tbody></table>"


def render_blocks(blocks: Sequence[Block]) -> str:
    return "".join(_render_block(block) for block in blocks)


def render_markdown_safe(src: Optional[str]) -> str:
    """Render user- or admin-authored Markdown to safe HTML.

    Parameters:
        src: Raw Markdown string (may be None or empty).
    Returns:
        HTML limited to p/ul/li/blockquote/table/strong/em/s/code/a; an empty
        string for empty input. Raw HTML in the source is rendered as text.
    """
    return render_blocks(parse_markdown(src))


class MarkdownRenderer(Component):
    """Wrap rendered Markdown for embedding in cards and pages."""

    def __init__(self, content: Optional[str], *, css_class: str = "markdown") -> None:
        self.content = content
        self.css_class = css_class

    def render(self) -> str:
        body = render_markdown_safe(self.content)
        if not body:
            return ""
        return f'<div class="{self.escape(self.css_class)}">{body}</div>'


__all__ = [
    "Text",
    "Bold",
    "Italic",
    "Strikethrough",
    "Code",
    "Link",
    "Span",
    "Paragraph",
    "ListBlock",
    "Blockquote",
    "Table",
    "Block",
    "plain_text",
    "format_inline",
    "parse_markdown",
    "is_safe_url",
    "render_spans",
    "render_blocks",
    "render_markdown_safe",
    "MarkdownRenderer",
]
