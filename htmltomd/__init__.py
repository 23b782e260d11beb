"""Building blocks for converting HTML into CommonMark Markdown: a node tree, tree passes, element renderers and text helpers."""

__version__ = "0.1.0"

__all__ = [
    "dom",
    "domutils",
    "escape",
    "marker",
    "options",
    "prerender",
    "render",
    "strikethrough",
    "textutils",
]