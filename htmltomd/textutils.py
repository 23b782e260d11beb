"""Text helpers for assembling markdown output."""

import re

# The characters treated as whitespace (the Unicode White_Space property).
_SPACES = frozenset(
    "\t\n\v\f\r \u0085\u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)
_SPACES_STR = "".join(_SPACES)

_MULTIPLE_SPACES = re.compile(" {2,}")


def _is_space(char: str) -> bool:
    return char in _SPACES


def calculate_code_fence_occurrences(fence_char: str, content: str) -> int:
    """Return the length of the longest run of ``fence_char`` in ``content``."""
    longest = 0
    run = 0
    for char in content:
        if char == fence_char:
            run += 1
            longest = max(longest, run)
        else:
            run = 0
    return longest


def calculate_code_fence(fence_char: str, content: str) -> str:
    """Return a fence long enough to wrap ``content`` as a code block."""
    repeat = calculate_code_fence_occurrences(fence_char, content) + 1
    return fence_char * max(repeat, 3)


def collapse_inline_code_content(content: str) -> str:
    """Put inline code on one line and collapse runs of spaces."""
    content = content.replace("\n", " ").replace("\t", " ")
    content = content.strip(_SPACES_STR)
    return _MULTIPLE_SPACES.sub(" ", content)


def trim_unnecessary_hard_line_breaks(content: str) -> str:
    """Drop hard line breaks that are followed by a blank line."""
    content = content.replace("  \n\n", "\n\n")
    content = content.replace("  \n  \n", "\n\n")
    content = content.replace("  \n \n", "\n\n")
    return content


def trim_consecutive_newlines(content: str) -> str:
    """Keep at most two consecutive newlines, dropping spaces between extra ones."""
    result: list[str] = []
    newline_count = 0
    spaces: list[str] = []

    for char in content:
        if char == "\n":
            newline_count += 1
            if newline_count <= 2:
                result.extend(spaces)
                result.append("\n")
            spaces.clear()
        elif char == " ":
            spaces.append(char)
        else:
            newline_count = 0
            result.extend(spaces)
            result.append(char)
            spaces.clear()

    result.extend(spaces)
    return "".join(result)


def delimiter_for_every_line(text: str, delimiter: str) -> str:
    """Wrap the content of every non-blank line in ``delimiter``.

    Whitespace around each line stays outside the delimiters, so that
    emphasis spanning several lines is still recognised.
    """
    lines = []
    for line in text.split("\n"):
        left, trimmed, right = surrounding_spaces(line)
        if trimmed:
            lines.append(f"{left}{delimiter}{trimmed}{delimiter}{right}")
        else:
            lines.append(left + right)
    return "\n".join(lines)


def escape_multi_line(content: str) -> str:
    """Make multi-line content safe inside a link or a heading."""
    parts = content.split("\n")
    if len(parts) == 1:
        return content

    output: list[str] = []
    last = len(parts) - 1
    for position, part in enumerate(parts):
        trimmed = part.lstrip(_SPACES_STR)
        if not trimmed:
            # A blank line would interrupt the link, so escape the line.
            output.append("\\\n")
        elif position == last:
            output.append(trimmed)
        elif trimmed.endswith("  "):
            output.append(trimmed + "\n")
        else:
            output.append(trimmed + "  \n")
    return "".join(output)


def prefix_lines(source: str, prefix: str) -> str:
    """Put ``prefix`` at the start of every line of ``source``."""
    return prefix + source.replace("\n", "\n" + prefix)


def surround_by(content: str, chars: str) -> str:
    """Return ``content`` with ``chars`` on both sides."""
    return f"{chars}{content}{chars}"


def surround_by_quotes(content: str | None) -> str:
    """Quote ``content`` for use as a link or image title.

    Empty content gives an empty string.
    """
    if not content:
        return ""

    has_double = '"' in content
    has_single = "'" in content

    if has_double and has_single:
        return surround_by(content.replace('"', '\\"'), '"')
    if has_double:
        return surround_by(content, "'")
    return surround_by(content, '"')


def surrounding_spaces(content: str) -> tuple[str, str, str]:
    """Split ``content`` into leading whitespace, the rest, and trailing whitespace."""
    right_trimmed = content.rstrip(_SPACES_STR)
    right = content[len(right_trimmed):]
    trimmed = right_trimmed.lstrip(_SPACES_STR)
    left = content[: len(right_trimmed) - len(trimmed)]
    return left, trimmed, right