"""Strikethrough support for ``<strike>``, ``<s>`` and ``<del>`` elements."""

from __future__ import annotations

from .dom import Node, node_name
from .domutils import merge_adjacent, remove_redundant
from .escape import get_next_as_rune
from .textutils import delimiter_for_every_line

DEFAULT_DELIMITER = "~~"

# Characters in text that get marked for possible escaping.
ESCAPED_CHARS = ("~",)

_TILDE = ord("~")
_NAMES = frozenset({"del", "s", "strike"})
_UNICODE_SPACES = frozenset(
    "\t\n\v\f\r \u0085\u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


def is_strikethrough(node: Node) -> bool:
    return node_name(node) in _NAMES


def is_both_strikethrough(a: Node, b: Node) -> bool:
    return is_strikethrough(a) and is_strikethrough(b)


def pre_render(doc: Node) -> None:
    """Remove nested strikethrough elements and merge adjacent ones."""
    remove_redundant(doc, is_both_strikethrough)
    merge_adjacent(doc, is_strikethrough)


def needs_escape(chars: bytes, index: int) -> int:
    """Return 1 if the ``~`` at ``index`` could start a strikethrough, else -1."""
    if chars[index] != _TILDE:
        return -1
    following = get_next_as_rune(chars, index)
    # "not followed by Unicode whitespace"
    if following in ("", "\x00") or following in _UNICODE_SPACES:
        return -1
    return 1


def render_strikethrough(content: str, delimiter: str = DEFAULT_DELIMITER) -> str:
    """Wrap every line of ``content`` in the strikethrough delimiter."""
    return delimiter_for_every_line(content, delimiter or DEFAULT_DELIMITER)