# htmltomd

`htmltomd` holds the pieces for turning HTML into CommonMark Markdown. It
parses HTML into a small, mutable node tree and tidies that tree with a set of
pre-render passes. It then renders single elements as Markdown and cleans up
the resulting text.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `htmltomd.dom`: the node tree.
  - `parse(raw_html, start_from)` reads HTML with html5lib and returns the first
    node with the given name, `"body"` by default. It raises `ValueError` if
    there is no such node.
  - `Node` has `type` (a `NodeType`), `data`, `attrs` and `parent`, the
    properties `first_child`, `last_child`, `next_sibling` and `prev_sibling`,
    and the methods `children()`, `append_child()`, `insert_before()`,
    `remove_child()` and `get_attribute()`.
  - Traversal: `node_name()`, `all_nodes()`, `all_child_nodes()`,
    `next_neighbor_node()`, `prev_neighbor_node()`, `next_neighbor_element()`
    and the `..._excluding_own_child` variants.
  - Edits: `remove_node()`, `unwrap_node()` and `wrap_node()`.
  - `name_is_block_node()`; `render_html()` serialises a tree as HTML, and
    `render_representation()` draws it as an indented outline for debugging.
- `htmltomd.domutils`: passes that rewrite the tree in place.
  - `merge_adjacent()` and `merge_adjacent_text_nodes()` merge nodes and
    adjacent text.
  - `remove_redundant()` unwraps a node that already has a matching ancestor.
  - `swap_tags()` and `swap_tags_of_nodes()` exchange tags, for example
    `<code><pre>` becomes `<pre><code>`.
  - `add_space()`, `remove_empty_code()` and `rename_fake_spans()`.
  - `leaf_block_alternatives()` replaces blocks inside headings or inline
    content: a heading becomes `strong` plus `br`, a blockquote becomes quoted
    text, `pre` becomes `code` and `hr` is removed.
  - `move_list_items()` puts stray list content into `li` elements.
  - `add_list_end_comments()` inserts a `THE END` comment between directly
    adjacent lists.
- `htmltomd.prerender`: `pre_render(doc, list_end_comments)` runs those passes
  in order. It also has the name predicates it uses, such as `name_is_bold()`,
  `name_is_inline_code()` and `name_is_heading()`.
- `htmltomd.render`: Markdown for single elements.
  - Code: `render_inline_code()`, `render_block_code()`, `code_without_tags()`
    and `code_language()`.
  - Headings: `render_heading()` (ATX or setext), `heading_level()`,
    `underline_width()` and `escape_pound_sign_at_end()`.
  - Images: `render_image()`, which returns `None` when there is no `src`, and
    `escape_alt()`.
  - Lists: `start_at()`, `list_prefixes()` and `indent_list_item()`.
  - Other blocks: `render_blockquote()`, `render_emphasis()` and
    `render_divider()`.
  - Code blocks replace newlines with `marker.MARKER_CODE_BLOCK_NEWLINE`, so
    later newline trimming leaves them alone.
- `htmltomd.strikethrough`: support for `<s>`, `<del>` and `<strike>`.
  - `is_strikethrough()`, `is_both_strikethrough()` and `pre_render()`.
  - `needs_escape()` decides whether a `~` needs its backslash.
  - `render_strikethrough(content, delimiter)` uses `~~` by default.
- `htmltomd.escape`: checks such as `is_italic_or_bold()`, `is_atx_header()`,
  `is_setext_header()`, `is_divider()`, `is_ordered_list()`,
  `is_unordered_list()`, `is_block_quote()`, `is_image_or_link()`,
  `is_fenced_code()`, `is_inline_code()` and `is_backslash()`.
  - Each takes the rendered bytes and the index of a marked character.
  - Each returns -1 when escaping is not needed there. Otherwise it returns the
    number of bytes the Markdown construct spans.
  - Escape markers (the bell character, `marker.MARKER_ESCAPING`) are skipped.
- `htmltomd.textutils`: text helpers, including
  - `trim_consecutive_newlines()` and `trim_unnecessary_hard_line_breaks()`
  - `delimiter_for_every_line()` and `escape_multi_line()`
  - `collapse_inline_code_content()`
  - `calculate_code_fence()` and `calculate_code_fence_occurrences()`
  - `prefix_lines()`, `surround_by()`, `surround_by_quotes()` and
    `surrounding_spaces()`
- `htmltomd.options`: the settings.
  - `Config`, `fill_in_defaults()` and `validate_config()`.
  - The enums `HeadingStyle`, `LinkStyle` and `LinkBehavior`.
  - `validate_config()` raises `ValidateConfigError`, a `ValueError`, for the
    first invalid setting. You can set its `key_with_value` to change how the
    key appears in the message.
- `htmltomd.marker`: the private marker characters.

## Example

```python
from htmltomd import dom, prerender, render

body = dom.parse("<p>Some <code>inline  code</code></p>", "body")
prerender.pre_render(body, True)

code = next(n for n in dom.all_nodes(body) if dom.node_name(n) == "code")
print(render.render_inline_code(code))   # `inline code`

print(repr(render.render_heading("Title", 2, "atx")))   # '\n\n## Title\n\n'
```

## Configuration

```python
from htmltomd.options import Config, fill_in_defaults, validate_config

config = fill_in_defaults(Config(heading_style="setext"))
validate_config(config)
```

The defaults are:

- `*` for emphasis and `**` for strong text
- `* * *` for thematic breaks
- `-` for list bullets
- backtick code fences
- ATX headings
- inline links, with links that have an empty href or empty content still
  rendered

## What this package does not do

There is no single function that converts a whole HTML document to Markdown,
and there is no command-line tool. You run the tree passes and call the element
renderers yourself. None of the following is done for you:

- walking the tree and joining the rendered pieces
- escaping text nodes and removing backslashes that `escape` finds unneeded
- rendering links, paragraphs and plain text

`Config.link_style` and the two link behaviours are checked by
`validate_config()`, but nothing in the package renders links.