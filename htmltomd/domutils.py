"""Rewrites of the HTML tree that make it easier to express as markdown."""

from __future__ import annotations

from collections.abc import Callable

from .dom import (
    Node,
    NodeType,
    all_child_nodes,
    all_nodes,
    name_is_block_node,
    next_neighbor_element,
    next_neighbor_node,
    next_neighbor_node_excluding_own_child,
    node_name,
    prev_neighbor_node,
    prev_neighbor_node_excluding_own_child,
    remove_node,
    unwrap_node,
    wrap_node,
)

Predicate = Callable[[Node], bool]
PairPredicate = Callable[[Node, Node], bool]

LIST_END_COMMENT_DATA = "THE END"


# - - - - - - - - - - Neighbours - - - - - - - - - - #


def _next_text_node(start: Node) -> Node | None:
    node = next_neighbor_node_excluding_own_child(start)
    while node is not None:
        if node.type is NodeType.TEXT:
            return node
        if node_name(node) != "span":
            return None
        # A span has no special meaning, so it is skipped.
        node = next_neighbor_node(node)
    return None


def _prev_text_node(start: Node) -> Node | None:
    node = prev_neighbor_node_excluding_own_child(start)
    while node is not None:
        if node.type is NodeType.TEXT:
            return node
        if node_name(node) != "span":
            return None
        node = prev_neighbor_node(node)
    return None


def _first_child_node(start: Node, match: Predicate) -> Node | None:
    node = start.first_child
    while node is not None:
        if node_name(node) == "span":
            node = next_neighbor_node(node)
        elif match(node):
            return node
        else:
            return None
    return None


def _last_child_node(start: Node, match: Predicate) -> Node | None:
    node = start.last_child
    while node is not None:
        if node_name(node) == "span":
            node = prev_neighbor_node(node)
        elif match(node):
            return node
        else:
            return None
    return None


# - - - - - - - - - - Spacing - - - - - - - - - - #


def add_space(doc: Node, is_outer_node: Predicate, is_inner_node: Predicate) -> None:
    """Add a space to the text around outer nodes that start or end with an inner node."""
    node: Node | None = doc
    while node is not None:
        if is_outer_node(node):
            if _first_child_node(node, is_inner_node) is not None:
                prev = _prev_text_node(node)
                if prev is not None:
                    prev.data = prev.data + " "
            if _last_child_node(node, is_inner_node) is not None:
                following = _next_text_node(node)
                if following is not None:
                    following.data = " " + following.data
        node = next_neighbor_element(node)


# - - - - - - - - - - Merging - - - - - - - - - - #


def _collect_adjacent_nodes(node: Node, match: Predicate) -> list[Node]:
    collected: list[Node] = []
    current = node.next_sibling
    while current is not None:
        if node_name(current) == "span":
            current = next_neighbor_node(current)
        elif match(current):
            collected.append(current)
            current = next_neighbor_node_excluding_own_child(current)
        else:
            break
    return collected


def _merge_children(destination: Node, nodes: list[Node]) -> None:
    for node in nodes:
        for child in all_child_nodes(node):
            remove_node(child)
            destination.append_child(child)
        remove_node(node)


def merge_adjacent(doc: Node, match: Predicate) -> None:
    """Merge matching nodes that directly follow each other into the first one."""
    node: Node | None = doc
    while node is not None:
        if match(node):
            _merge_children(node, _collect_adjacent_nodes(node, match))
        node = next_neighbor_element(node)


def merge_adjacent_text_nodes(node: Node | None) -> None:
    """Join text nodes that are siblings of each other, in the whole subtree."""
    if node is None:
        return
    prev: Node | None = None
    for child in node.children():
        if (
            child.type is NodeType.TEXT
            and prev is not None
            and prev.type is NodeType.TEXT
        ):
            prev.data += child.data
            node.remove_child(child)
        else:
            merge_adjacent_text_nodes(child)
            prev = child


# - - - - - - - - - - Leaf block alternatives - - - - - - - - - - #

_CONTAINER_BLOCKS = frozenset(
    {"#document", "html", "head", "body", "blockquote", "ul", "ol", "li"}
)
_LEAF_BLOCKS = frozenset({"hr", "pre", "h1", "h2", "h3", "h4", "h5", "h6"})
_INLINES = frozenset(
    {"#text", "span", "code", "b", "strong", "i", "em", "a", "img", "br"}
)


def _markdown_structure(name: str) -> str:
    if name in _CONTAINER_BLOCKS:
        return "container_block"
    if name in _LEAF_BLOCKS:
        return "leaf_block"
    if name in _INLINES:
        return "inline"
    return ""


def _heading_alternative(node: Node) -> None:
    node.data = "strong"
    node.parent.insert_before(Node(NodeType.ELEMENT, "br"), node.next_sibling)


def _blockquote_alternative(node: Node) -> None:
    parent = node.parent
    parent.insert_before(Node(NodeType.TEXT, ' "'), node)
    node.data = "span"
    parent.insert_before(Node(NodeType.TEXT, '" '), node.next_sibling)


def _pre_alternative(node: Node) -> None:
    node.data = "code"


def _hr_alternative(node: Node) -> None:
    remove_node(node)


_ALTERNATIVES: dict[str, Callable[[Node], None]] = {
    **{f"h{level}": _heading_alternative for level in range(1, 7)},
    "blockquote": _blockquote_alternative,
    "pre": _pre_alternative,
    "hr": _hr_alternative,
}


def leaf_block_alternatives(doc: Node) -> None:
    """Replace blocks that sit inside inline or leaf-block content.

    Markdown cannot express, for example, a blockquote inside a heading,
    so such blocks are turned into inline substitutes.
    """

    def visit(node: Node, inside_leaf_block: bool, inside_inline: bool) -> None:
        name = node_name(node)
        structure = _markdown_structure(name)
        if structure in ("container_block", "leaf_block") and (
            inside_leaf_block or inside_inline
        ):
            alternative = _ALTERNATIVES.get(name)
            if alternative is not None:
                alternative(node)
            else:
                node.data = "span"

        if structure == "leaf_block":
            inside_leaf_block = True
        if structure == "inline":
            inside_inline = True

        for child in reversed(node.children()):
            visit(child, inside_leaf_block, inside_inline)

    visit(doc, False, False)


# - - - - - - - - - - Code - - - - - - - - - - #


def _has_text_child_nodes(start: Node) -> bool:
    return any(
        node.type is NodeType.TEXT and node.data != "" for node in all_nodes(start)
    )


def remove_empty_code(doc: Node) -> None:
    """Remove ``code`` elements that hold no text."""
    node: Node | None = doc
    while node is not None:
        if node_name(node) == "code" and not _has_text_child_nodes(node):
            following = next_neighbor_node_excluding_own_child(node)
            remove_node(node)
            node = following
            continue
        node = next_neighbor_node(node)


# - - - - - - - - - - Lists - - - - - - - - - - #


def _name_is_list(node: Node) -> bool:
    return node_name(node) in ("ul", "ol")


def _next_name_is_list(start: Node) -> bool:
    node = next_neighbor_node_excluding_own_child(start)
    while node is not None:
        name = node_name(node)
        if name in ("ul", "ol"):
            return True
        if name == "li":
            return False
        if name == "#comment" and node.data == LIST_END_COMMENT_DATA:
            return False
        # Text between two lists already separates them.
        if node.type is NodeType.TEXT:
            return False
        if name == "hr":
            return False
        node = next_neighbor_node(node)
    return False


def add_list_end_comments(doc: Node) -> None:
    """Put a comment after each list that another list follows directly."""
    node: Node | None = doc
    while node is not None:
        if _name_is_list(node) and _next_name_is_list(node):
            comment = Node(NodeType.COMMENT, LIST_END_COMMENT_DATA)
            node.parent.insert_before(comment, node.next_sibling)
        node = next_neighbor_element(node)


def move_list_items(node: Node) -> None:
    """Move content of a list that is not inside an ``li`` into the previous ``li``."""
    if node.type is NodeType.ELEMENT and node.data in ("ol", "ul"):
        previous_li: Node | None = None
        for child in node.children():
            if child.type is NodeType.ELEMENT and child.data == "li":
                previous_li = child
            elif child.type is NodeType.TEXT and child.data.strip() == "":
                # Only formatting whitespace.
                continue
            elif previous_li is not None:
                node.remove_child(child)
                previous_li.append_child(child)
            else:
                previous_li = wrap_node(child, Node(NodeType.ELEMENT, "li"))

    for child in node.children():
        move_list_items(child)


# - - - - - - - - - - Redundant nodes - - - - - - - - - - #


def _has_same_type_ancestor(node: Node, match: PairPredicate) -> bool:
    if not match(node, node):
        return False
    parent = node.parent
    while parent is not None:
        if match(node, parent):
            return True
        parent = parent.parent
    return False


def remove_redundant(doc: Node, match: PairPredicate) -> None:
    """Unwrap nodes that already have a matching ancestor."""
    for node in all_nodes(doc):
        if _has_same_type_ancestor(node, match):
            unwrap_node(node)


# - - - - - - - - - - Spans - - - - - - - - - - #


def _is_fake_span(node: Node) -> bool:
    if node_name(node) != "span":
        return False
    return any(name_is_block_node(node_name(inner)) for inner in all_nodes(node))


def rename_fake_spans(doc: Node) -> None:
    """Rename every ``span`` that holds a block element to ``div``."""
    for node in all_nodes(doc):
        if _is_fake_span(node):
            node.data = "div"


# - - - - - - - - - - Swapping - - - - - - - - - - #


def swap_tags_of_nodes(first: Node, second: Node) -> None:
    """Exchange tag names and attributes of two elements, keeping their places."""
    if first.type is not NodeType.ELEMENT or second.type is not NodeType.ELEMENT:
        raise ValueError("swap only works with element nodes")
    first.data, second.data = second.data, first.data
    first.attrs, second.attrs = second.attrs, first.attrs


def _is_empty_text(node: Node) -> bool:
    return node.type is NodeType.TEXT and node.data.strip() == ""


def swap_tags(doc: Node, is_outer_node: Predicate, is_inner_node: Predicate) -> None:
    """Swap an outer node with its only (non-blank) child if that is an inner node."""

    def visit(node: Node) -> None:
        if is_outer_node(node):
            children = [c for c in all_child_nodes(node) if not _is_empty_text(c)]
            if len(children) == 1 and is_inner_node(children[0]):
                swap_tags_of_nodes(node, children[0])
                return
        for child in node.children():
            visit(child)

    visit(doc)