"""Markdown output for single HTML elements: code, headings, images, lists and more."""

from __future__ import annotations

import re

from .dom import Node, NodeType
from .marker import MARKER_CODE_BLOCK_NEWLINE, MARKER_ESCAPING
from .options import HeadingStyle
from .textutils import (
    calculate_code_fence,
    calculate_code_fence_occurrences,
    collapse_inline_code_content,
    delimiter_for_every_line,
    escape_multi_line,
    prefix_lines,
    surround_by_quotes,
    trim_consecutive_newlines,
    trim_unnecessary_hard_line_breaks,
)

# The characters treated as whitespace (the Unicode White_Space property).
_SPACES = (
    "\t\n\v\f\r \u0085\u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)

_MULTIPLE_SPACES = re.compile(" {2,}")
_INTEGER = re.compile(r"[+-]?[0-9]+")

_SKIPPED_IN_CODE = frozenset({"style", "script", "textarea"})
_NEWLINE_IN_CODE = frozenset({"br", "div"})


# - - - - - - - - - - Code - - - - - - - - - - #


def code_language(node: Node) -> str:
    """Return the language named by a ``language-`` or ``lang-`` class, or ''."""
    classes = node.get_attribute("class", "") or ""
    for part in classes.split(" "):
        if "language-" not in part and "lang-" not in part:
            continue
        return part.replace("language-", "", 1).replace("lang-", "", 1)
    return ""


def code_without_tags(node: Node) -> tuple[str, str]:
    """Return the text inside ``node`` and the first info string found.

    ``br`` and ``div`` elements become newlines; style, script and
    textarea elements are left out.
    """
    parts: list[str] = []
    info = ""

    def visit(current: Node) -> None:
        nonlocal info
        is_element = current.type is NodeType.ELEMENT
        if is_element and current.data in ("code", "pre") and not info:
            info = code_language(current)

        if is_element and current.data in _SKIPPED_IN_CODE:
            return
        if is_element and current.data in _NEWLINE_IN_CODE:
            parts.append("\n")
        if current.type is NodeType.TEXT:
            parts.append(current.data)
            return
        for child in current.children():
            visit(child)

    visit(node)
    return "".join(parts), info


def render_inline_code(node: Node) -> str:
    """Render ``node`` as an inline code span."""
    fence_char = "`"
    content, _ = code_without_tags(node)

    if not content.strip(_SPACES):
        # No stripping happens if the code span holds only spaces.
        return fence_char + content + fence_char

    # More than one newline would end the code span in markdown.
    code = collapse_inline_code_content(content)
    fence = fence_char * (calculate_code_fence_occurrences(fence_char, code) + 1)

    if code.startswith("`"):
        code = " " + code
    if code.endswith("`"):
        code = code + " "
    return fence + code + fence


def render_block_code(node: Node, fence: str = "```") -> str:
    """Render ``node`` as a fenced code block using ``fence`` characters."""
    code, info = code_without_tags(node)
    if code.endswith("\n"):
        code = code[:-1]

    fence_str = calculate_code_fence(fence[0], code)

    # Keep the content untouched by the later newline trimming.
    code = code.replace("\n", MARKER_CODE_BLOCK_NEWLINE)
    return f"\n\n{fence_str}{info}\n{code}\n{fence_str}\n\n"


# - - - - - - - - - - Headings - - - - - - - - - - #


def heading_level(name: str) -> int:
    """Return the level of a heading tag; unknown names count as 6."""
    levels = {f"h{level}": level for level in range(1, 7)}
    return levels.get(name, 6)


def underline_width(content: str, min_width: int) -> int:
    """Return the width of the widest line, ignoring escape markers."""
    width = max(
        (len(line) - line.count(MARKER_ESCAPING) for line in content.split("\n")),
        default=0,
    )
    return max(width, min_width)


def escape_pound_sign_at_end(content: str) -> str:
    """Force the escaping of a ``#`` at the end by replacing its marker."""
    if len(content) < 2 or content[-1] != "#":
        return content
    if len(content) >= 3 and content[-3] == "\\":
        # Already escaped.
        return content
    return content[:-2] + "\\" + content[-1]


def render_heading(content: str, level: int, style: str = HeadingStyle.ATX) -> str:
    """Render rendered heading ``content`` in the given ``style``."""
    if not content.strip(_SPACES):
        return ""

    if style == HeadingStyle.SETEXT and level < 3:
        content = trim_consecutive_newlines(content)
        content = escape_multi_line(content)
        line = "=" if level == 1 else "-"
        underline = line * underline_width(content, 3)
        return f"\n\n{content}\n{underline}\n\n"

    content = content.replace("\n", " ").replace("\r", " ")
    content = _MULTIPLE_SPACES.sub(" ", content)
    content = content.strip(_SPACES)
    # A "#" at the end would otherwise be dropped by markdown parsers.
    content = escape_pound_sign_at_end(content)
    return f"\n\n{'#' * level} {content}\n\n"


# - - - - - - - - - - Images - - - - - - - - - - #


def escape_alt(alt: str) -> str:
    """Escape square brackets that are not escaped yet."""
    out: list[str] = []
    previous = ""
    for char in alt:
        if char in "[]" and previous != "\\":
            out.append("\\")
        out.append(char)
        previous = char
    return "".join(out)


def render_image(node: Node) -> str | None:
    """Render an ``img`` element, or return None if it has no source."""
    src = (node.get_attribute("src", "") or "").strip()
    if not src:
        return None

    title = (node.get_attribute("title", "") or "").replace("\n", " ")
    alt = escape_alt((node.get_attribute("alt", "") or "").replace("\n", " "))

    destination = src
    if title:
        destination += " " + surround_by_quotes(title)
    return f"![{alt}]({destination})"


# - - - - - - - - - - Lists - - - - - - - - - - #


def start_at(node: Node) -> int:
    """Return the number an ordered list starts at; 1 if not given or invalid."""
    value = node.get_attribute("start", "1") or ""
    if _INTEGER.fullmatch(value):
        return int(value)
    return 1


def list_prefixes(
    tag: str, start: int, count: int, bullet_marker: str = "-"
) -> list[str]:
    """Return the prefix of every item of a list with ``count`` items.

    Numbers are zero-padded so that all prefixes take the same space.
    """
    if tag == "ul":
        return [bullet_marker + " "] * count
    width = len(str(start + count - 1))
    return [f"{start + offset:0{width}d}. " for offset in range(count)]


def indent_list_item(content: str, indent: int) -> str:
    """Indent every line but the first of a list item by ``indent`` spaces."""
    padding = " " * indent
    lines = [
        line.replace(MARKER_CODE_BLOCK_NEWLINE, MARKER_CODE_BLOCK_NEWLINE + padding)
        for line in content.split("\n")
    ]
    return "\n".join([lines[0], *(padding + line for line in lines[1:])])


# - - - - - - - - - - Other blocks - - - - - - - - - - #


def render_blockquote(content: str) -> str:
    """Render rendered ``content`` as a blockquote; empty content gives ''."""
    content = content.strip(_SPACES)
    if not content:
        return ""
    content = trim_consecutive_newlines(content)
    content = trim_unnecessary_hard_line_breaks(content)
    return "\n\n" + prefix_lines(content, "> ") + "\n\n"


def render_emphasis(content: str, delimiter: str) -> str:
    """Wrap every line of ``content`` in the bold or italic ``delimiter``."""
    return delimiter_for_every_line(content, delimiter)


def render_divider(rule: str = "* * *") -> str:
    """Render a thematic break."""
    return f"\n\n{rule}\n\n"