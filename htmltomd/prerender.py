"""Preparation of the HTML tree before it is rendered as markdown."""

from __future__ import annotations

from .dom import Node, node_name
from .domutils import (
    add_list_end_comments,
    add_space,
    leaf_block_alternatives,
    merge_adjacent,
    move_list_items,
    remove_empty_code,
    remove_redundant,
    rename_fake_spans,
    swap_tags,
)

_HEADINGS = frozenset({"h1", "h2", "h3", "h4", "h5", "h6"})
_INLINE_CODE = frozenset({"code", "var", "samp", "kbd", "tt"})


def name_is_bold(node: Node) -> bool:
    return node_name(node) in ("strong", "b")


def name_is_italic(node: Node) -> bool:
    return node_name(node) in ("em", "i")


def name_is_bold_or_italic(node: Node) -> bool:
    return name_is_bold(node) or name_is_italic(node)


def name_is_both_bold_or_italic(a: Node, b: Node) -> bool:
    """Tell whether both nodes are bold, or both are italic."""
    return (name_is_bold(a) and name_is_bold(b)) or (
        name_is_italic(a) and name_is_italic(b)
    )


def name_is_pre(node: Node) -> bool:
    return node_name(node) == "pre"


def name_is_inline_code(node: Node) -> bool:
    return node_name(node) in _INLINE_CODE


def name_is_link(node: Node) -> bool:
    return node_name(node) == "a"


def name_is_both_link(a: Node, b: Node) -> bool:
    return name_is_link(a) and name_is_link(b)


def name_is_heading(node: Node) -> bool:
    return node_name(node) in _HEADINGS


def pre_render(doc: Node, list_end_comments: bool = True) -> None:
    """Rewrite the tree below ``doc`` in place so it can be expressed as markdown.

    With ``list_end_comments`` a comment is put between lists that
    follow each other directly, so that they stay separate.
    """
    rename_fake_spans(doc)

    # Bold / italic
    remove_redundant(doc, name_is_both_bold_or_italic)
    merge_adjacent(doc, name_is_bold_or_italic)

    # Code
    remove_empty_code(doc)
    swap_tags(doc, name_is_inline_code, name_is_pre)
    merge_adjacent(doc, name_is_inline_code)

    add_space(doc, name_is_bold_or_italic, name_is_inline_code)

    # Links
    remove_redundant(doc, name_is_both_link)
    swap_tags(doc, name_is_bold_or_italic, name_is_link)

    # Headings
    swap_tags(doc, name_is_link, name_is_heading)
    leaf_block_alternatives(doc)

    # Lists
    move_list_items(doc)

    if list_end_comments:
        add_list_end_comments(doc)