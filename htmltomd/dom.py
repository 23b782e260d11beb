"""A small HTML node tree, parsing into it and rendering it back out."""

from __future__ import annotations

import enum
from collections.abc import Iterator
from xml.dom import Node as _MiniDomNode

import html5lib


class NodeType(enum.Enum):
    """The kinds of node the tree is made of."""

    DOCUMENT = "document"
    ELEMENT = "element"
    TEXT = "text"
    COMMENT = "comment"
    DOCTYPE = "doctype"


class Node:
    """A node of an HTML document.

    For elements ``data`` holds the tag name, for text and comments the
    content and for a doctype its name.
    """

    __slots__ = ("type", "data", "attrs", "parent", "_children")

    def __init__(
        self,
        node_type: NodeType,
        data: str = "",
        attrs: list[tuple[str, str]] | None = None,
    ) -> None:
        self.type = node_type
        self.data = data
        self.attrs: list[tuple[str, str]] = list(attrs) if attrs else []
        self.parent: Node | None = None
        self._children: list[Node] = []

    def __repr__(self) -> str:
        return f"Node({self.type.name}, {self.data!r})"

    def _position(self) -> int:
        assert self.parent is not None
        return self.parent._children.index(self)

    @property
    def first_child(self) -> Node | None:
        return self._children[0] if self._children else None

    @property
    def last_child(self) -> Node | None:
        return self._children[-1] if self._children else None

    @property
    def next_sibling(self) -> Node | None:
        if self.parent is None:
            return None
        siblings = self.parent._children
        position = self._position() + 1
        return siblings[position] if position < len(siblings) else None

    @property
    def prev_sibling(self) -> Node | None:
        if self.parent is None:
            return None
        position = self._position()
        return self.parent._children[position - 1] if position > 0 else None

    def children(self) -> list[Node]:
        """Return a copy of the list of direct children."""
        return list(self._children)

    def append_child(self, child: Node) -> None:
        """Add ``child`` as the last child; it must not have a parent."""
        if child.parent is not None:
            raise ValueError("append_child called for an attached child node")
        child.parent = self
        self._children.append(child)

    def insert_before(self, child: Node, reference: Node | None = None) -> None:
        """Insert ``child`` before ``reference``, or at the end if that is None."""
        if child.parent is not None:
            raise ValueError("insert_before called for an attached child node")
        if reference is None:
            self.append_child(child)
            return
        if reference.parent is not self:
            raise ValueError("the reference node is not a child of this node")
        child.parent = self
        self._children.insert(reference._position(), child)

    def remove_child(self, child: Node) -> None:
        """Detach ``child`` from this node."""
        if child.parent is not self:
            raise ValueError("remove_child called for a non-child node")
        self._children.remove(child)
        child.parent = None

    def get_attribute(self, key: str, default: str | None = None) -> str | None:
        """Return the value of the attribute ``key`` or ``default``."""
        return next((value for name, value in self.attrs if name == key), default)


# - - - - - - - - - - Parsing - - - - - - - - - - #


def _convert(source) -> Node | None:
    kind = source.nodeType
    if kind == _MiniDomNode.DOCUMENT_NODE:
        node = Node(NodeType.DOCUMENT)
    elif kind == _MiniDomNode.ELEMENT_NODE:
        node = Node(NodeType.ELEMENT, source.tagName, list(source.attributes.items()))
    elif kind == _MiniDomNode.TEXT_NODE:
        return Node(NodeType.TEXT, source.data)
    elif kind == _MiniDomNode.COMMENT_NODE:
        return Node(NodeType.COMMENT, source.data)
    elif kind == _MiniDomNode.DOCUMENT_TYPE_NODE:
        return Node(NodeType.DOCTYPE, source.name or "")
    else:
        return None

    for source_child in source.childNodes:
        child = _convert(source_child)
        if child is None:
            continue
        last = node.last_child
        if child.type is NodeType.TEXT and last is not None and last.type is NodeType.TEXT:
            last.data += child.data
        else:
            node.append_child(child)
    return node


def parse(raw_html: str, start_from: str | None = "body") -> Node:
    """Parse ``raw_html`` and return the first node named ``start_from``."""
    start_from = start_from or "body"
    tree = html5lib.parse(
        raw_html.strip(), treebuilder="dom", namespaceHTMLElements=False
    )
    document = _convert(tree)
    if document is not None:
        for node in all_nodes(document):
            if node_name(node) == start_from:
                return node
    raise ValueError(f"could not find a node named {start_from!r}")


# - - - - - - - - - - Navigation - - - - - - - - - - #

_SPECIAL_NAMES = {
    NodeType.DOCUMENT: "#document",
    NodeType.TEXT: "#text",
    NodeType.COMMENT: "#comment",
    NodeType.DOCTYPE: "#doctype",
}


def node_name(node: Node | None) -> str:
    """Return the tag name of an element or a ``#``-name for other nodes."""
    if node is None:
        return ""
    if node.type is NodeType.ELEMENT:
        return node.data
    return _SPECIAL_NAMES[node.type]


def _walk(node: Node) -> Iterator[Node]:
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(current._children))


def all_nodes(node: Node) -> list[Node]:
    """Return ``node`` and all its descendants in document order."""
    return list(_walk(node))


def all_child_nodes(node: Node) -> list[Node]:
    """Return the direct children of ``node``."""
    return node.children()


def next_neighbor_node_excluding_own_child(node: Node | None) -> Node | None:
    """Return the next node in document order that is not inside ``node``."""
    while node is not None:
        sibling = node.next_sibling
        if sibling is not None:
            return sibling
        node = node.parent
    return None


def next_neighbor_node(node: Node | None) -> Node | None:
    """Return the next node in document order."""
    if node is None:
        return None
    if node.first_child is not None:
        return node.first_child
    return next_neighbor_node_excluding_own_child(node)


def prev_neighbor_node_excluding_own_child(node: Node | None) -> Node | None:
    """Return the previous sibling, or that of the closest ancestor having one."""
    while node is not None:
        sibling = node.prev_sibling
        if sibling is not None:
            return sibling
        node = node.parent
    return None


def prev_neighbor_node(node: Node | None) -> Node | None:
    """Step backwards: into the last child first, then to earlier siblings."""
    if node is None:
        return None
    if node.last_child is not None:
        return node.last_child
    return prev_neighbor_node_excluding_own_child(node)


def next_neighbor_element(node: Node | None) -> Node | None:
    """Return the next element node in document order."""
    node = next_neighbor_node(node)
    while node is not None and node.type is not NodeType.ELEMENT:
        node = next_neighbor_node(node)
    return node


# - - - - - - - - - - Mutation - - - - - - - - - - #


def remove_node(node: Node) -> None:
    """Detach ``node`` from its parent, if it has one."""
    if node.parent is not None:
        node.parent.remove_child(node)


def unwrap_node(node: Node) -> None:
    """Replace ``node`` by its children."""
    parent = node.parent
    if parent is None:
        return
    for child in node.children():
        node.remove_child(child)
        parent.insert_before(child, node)
    parent.remove_child(node)


def wrap_node(node: Node, wrapper: Node) -> Node:
    """Put ``wrapper`` in the place of ``node`` and ``node`` inside it."""
    parent = node.parent
    if parent is not None:
        parent.insert_before(wrapper, node)
        parent.remove_child(node)
    wrapper.append_child(node)
    return wrapper


_BLOCK_NAMES = frozenset(
    {
        "address", "article", "aside", "blockquote", "details", "dialog",
        "dd", "div", "dl", "dt", "fieldset", "figcaption", "figure",
        "footer", "form", "h1", "h2", "h3", "h4", "h5", "h6", "header",
        "hgroup", "hr", "li", "main", "nav", "ol", "p", "pre", "section",
        "table", "ul",
    }
)


def name_is_block_node(name: str) -> bool:
    """Tell whether ``name`` is a block-level element."""
    return name in _BLOCK_NAMES


# - - - - - - - - - - Rendering - - - - - - - - - - #

_VOID_ELEMENTS = frozenset(
    {
        "area", "base", "br", "col", "embed", "hr", "img", "input", "keygen",
        "link", "meta", "param", "source", "track", "wbr",
    }
)
_RAW_TEXT_ELEMENTS = frozenset(
    {"iframe", "noembed", "noframes", "noscript", "plaintext", "script", "style", "xmp"}
)
_LEADING_NEWLINE_ELEMENTS = frozenset({"pre", "listing", "textarea"})

_HTML_ESCAPES = str.maketrans(
    {"&": "&amp;", "'": "&#39;", "<": "&lt;", ">": "&gt;", '"': "&#34;", "\r": "&#13;"}
)


def _render(node: Node, parts: list[str]) -> None:
    if node.type is NodeType.DOCUMENT:
        for child in node._children:
            _render(child, parts)
    elif node.type is NodeType.DOCTYPE:
        parts.append(f"<!DOCTYPE {node.data}>")
    elif node.type is NodeType.COMMENT:
        parts.append(f"<!--{node.data}-->")
    elif node.type is NodeType.TEXT:
        parts.append(node.data.translate(_HTML_ESCAPES))
    else:
        parts.append("<" + node.data)
        for key, value in node.attrs:
            parts.append(f' {key}="{value.translate(_HTML_ESCAPES)}"')
        if node.data in _VOID_ELEMENTS:
            parts.append("/>")
            return
        parts.append(">")

        first = node.first_child
        if (
            node.data in _LEADING_NEWLINE_ELEMENTS
            and first is not None
            and first.type is NodeType.TEXT
            and first.data.startswith("\n")
        ):
            parts.append("\n")

        raw = node.data in _RAW_TEXT_ELEMENTS
        for child in node._children:
            if raw and child.type is NodeType.TEXT:
                parts.append(child.data)
            else:
                _render(child, parts)
        parts.append(f"</{node.data}>")


def render_html(node: Node) -> str:
    """Serialise ``node`` and its descendants as HTML."""
    parts: list[str] = []
    _render(node, parts)
    return "".join(parts)


_QUOTE_ESCAPES = {
    "\a": "\\a", "\b": "\\b", "\f": "\\f", "\n": "\\n", "\r": "\\r",
    "\t": "\\t", "\v": "\\v", "\\": "\\\\", '"': '\\"',
}


def _quote(text: str) -> str:
    out = []
    for char in text:
        if char in _QUOTE_ESCAPES:
            out.append(_QUOTE_ESCAPES[char])
        elif char.isprintable():
            out.append(char)
        elif ord(char) < 0x80:
            out.append(f"\\x{ord(char):02x}")
        elif ord(char) <= 0xFFFF:
            out.append(f"\\u{ord(char):04x}")
        else:
            out.append(f"\\U{ord(char):08x}")
    return '"' + "".join(out) + '"'


def _label(node: Node) -> str:
    if node.type is NodeType.ELEMENT:
        if not node.attrs:
            return node.data
        attributes = " ".join(f"{key}={_quote(value)}" for key, value in node.attrs)
        return f"{node.data} ({attributes})"
    if node.type in (NodeType.TEXT, NodeType.COMMENT):
        return f"{node_name(node)} {_quote(node.data)}"
    return node_name(node)


def render_representation(node: Node) -> str:
    """Draw the tree below ``node`` as indented lines, one per node."""
    lines = []
    stack = [(node, 1 if node.parent is not None else 0)]
    while stack:
        current, level = stack.pop()
        if level == 0:
            lines.append(_label(current))
        else:
            lines.append("│ " * (level - 1) + "├─" + _label(current))
        stack.extend((child, level + 1) for child in reversed(current._children))
    return "\n".join(lines)