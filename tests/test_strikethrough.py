import pytest

from htmltomd.dom import Node, NodeType, all_nodes, node_name, parse
from htmltomd.strikethrough import (
    is_both_strikethrough,
    is_strikethrough,
    needs_escape,
    pre_render,
    render_strikethrough,
)


@pytest.mark.parametrize(
    "name, expected",
    [("del", True), ("s", True), ("strike", True), ("span", False), ("strong", False)],
)
def test_is_strikethrough(name, expected):
    assert is_strikethrough(Node(NodeType.ELEMENT, name)) is expected


def test_is_both_strikethrough():
    s = Node(NodeType.ELEMENT, "s")
    strike = Node(NodeType.ELEMENT, "del")
    em = Node(NodeType.ELEMENT, "em")
    assert is_both_strikethrough(s, strike) is True
    assert is_both_strikethrough(s, em) is False


def test_render_simple():
    assert render_strikethrough("Text") == "~~Text~~"


def test_render_with_delimiter():
    assert render_strikethrough("Text", "==") == "==Text=="


def test_render_empty_delimiter_uses_default():
    assert render_strikethrough("Text", "") == "~~Text~~"


def test_render_keeps_spaces_outside():
    assert render_strikethrough("  Text  ") == "  ~~Text~~  "


def test_render_every_line():
    assert render_strikethrough("A\nB") == "~~A~~\n~~B~~"


def test_tilde_characters_inside_are_escaped():
    content = "\a~\a~A\a~\a~B\a~\a~"
    rendered = render_strikethrough(content)
    data = rendered.encode("utf-8")
    markers = [position for position, byte in enumerate(data) if byte == 7]
    assert markers
    for position in markers:
        assert needs_escape(data, position + 1) == 1
    assert rendered.replace("\a", "\\") == r"~~\~\~A\~\~B\~\~~~"


@pytest.mark.parametrize(
    "chars, index, expected",
    [
        (b"~a", 0, 1),
        (b"~\x07a", 0, 1),
        (b"a~b", 1, 1),
        (b"~ ", 0, -1),
        (b"~\n", 0, -1),
        (b"~", 0, -1),
        (b"a~", 1, -1),
        (b"*a", 0, -1),
    ],
)
def test_needs_escape(chars, index, expected):
    assert needs_escape(chars, index) == expected


def test_needs_escape_unicode_space_after():
    assert needs_escape("~\u00a0".encode("utf-8"), 0) == -1


def _strikes(doc):
    return [node for node in all_nodes(doc) if is_strikethrough(node)]


def _text(node):
    return "".join(n.data for n in all_nodes(node) if n.type is NodeType.TEXT)


def test_pre_render_nested():
    doc = parse("<p><s>A <s>B</s> C</s></p>")
    pre_render(doc)
    strikes = _strikes(doc)
    assert len(strikes) == 1
    assert _text(strikes[0]) == "A B C"


def test_pre_render_adjacent():
    doc = parse("<p><s>A</s><s>B</s> <s>C</s></p>")
    pre_render(doc)
    strikes = _strikes(doc)
    assert [_text(node) for node in strikes] == ["AB", "C"]
    paragraph = doc.first_child
    assert [node_name(node) for node in paragraph.children()] == ["s", "#text", "s"]


def test_pre_render_mixed_names_nested():
    doc = parse("<del>A <strike>B</strike></del>")
    pre_render(doc)
    strikes = _strikes(doc)
    assert [node_name(node) for node in strikes] == ["del"]
    assert _text(strikes[0]) == "A B"