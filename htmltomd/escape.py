"""Checks that decide whether a character marked for escaping needs it.

Every check gets the rendered bytes and the index of a marked character.
It gives -1 when the character is harmless at that place, otherwise the
number of bytes that the markdown construct spans from that index.
"""

from .marker import BYTES_MARKER_ESCAPING

PLACEHOLDER = BYTES_MARKER_ESCAPING[0]
_PLACEHOLDER_BYTES = BYTES_MARKER_ESCAPING

_NEWLINE = ord("\n")
_SPACE = ord(" ")
_BACKSLASH = ord("\\")
_BACKTICK = ord("`")
_POUND = ord("#")
_EXCLAMATION = ord("!")
_OPEN_BRACKET = ord("[")
_CLOSE_BRACKET = ord("]")
_QUOTE = ord(">")

_FENCES = frozenset(b"`~")
_DIVIDERS = frozenset(b"-_*")
_EMPHASIS = frozenset(b"*_")
_SETEXT = frozenset(b"=-")
_BULLETS = frozenset(b"-*+")
_ORDERED = frozenset(b".)")
_HEADING_END = frozenset(b" \t\n\r")

_ASCII_DIGITS = frozenset(b"0123456789")
_BYTE_SPACES = frozenset(b"\t\n\v\f\r \x85\xa0")
_LINE_LEAD = frozenset({_SPACE, PLACEHOLDER})

_UNICODE_SPACES = frozenset(
    "\t\n\v\f\r \u0085\u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


def is_space(b: int) -> bool:
    """Tell whether the byte ``b`` is whitespace."""
    return b in _BYTE_SPACES


def is_digit(b: int) -> bool:
    """Tell whether the byte ``b`` is an ASCII digit."""
    return b in _ASCII_DIGITS


def get_prev(chars: bytes, index: int) -> int:
    """Return the byte before ``index`` skipping placeholders, or 0."""
    rest = bytes(chars[:index]).rstrip(_PLACEHOLDER_BYTES)
    return rest[-1] if rest else 0


def get_next(chars: bytes, index: int) -> int:
    """Return the byte after ``index`` skipping placeholders, or 0."""
    rest = bytes(chars[index + 1:]).lstrip(_PLACEHOLDER_BYTES)
    return rest[0] if rest else 0


def _decode_first(data: bytes) -> str:
    for length in range(1, min(4, len(data)) + 1):
        try:
            return data[:length].decode("utf-8")
        except UnicodeDecodeError:
            continue
    return "\ufffd"


def _decode_last(data: bytes) -> str:
    for length in range(1, min(4, len(data)) + 1):
        try:
            return data[-length:].decode("utf-8")
        except UnicodeDecodeError:
            continue
    return "\ufffd"


def get_prev_as_rune(chars: bytes, index: int) -> str:
    """Return the character before ``index`` skipping placeholders, or ''."""
    rest = bytes(chars[:index]).rstrip(_PLACEHOLDER_BYTES)
    return _decode_last(rest) if rest else ""


def get_next_as_rune(chars: bytes, index: int) -> str:
    """Return the character after ``index`` skipping placeholders, or ''."""
    rest = bytes(chars[index + 1:]).lstrip(_PLACEHOLDER_BYTES)
    return _decode_first(rest) if rest else ""


def _only_before_on_line(chars: bytes, index: int, allowed=_LINE_LEAD) -> bool:
    for byte in reversed(chars[:index]):
        if byte == _NEWLINE:
            return True
        if byte not in allowed:
            return False
    return True


def is_backslash(chars: bytes, index: int) -> int:
    return 1 if chars[index] == _BACKSLASH else -1


def is_fenced_code(chars: bytes, index: int) -> int:
    if chars[index] not in _FENCES:
        return -1
    if not _only_before_on_line(chars, index):
        return -1

    count = 1
    end = len(chars)
    for position, byte in enumerate(chars[index + 1:], start=index + 1):
        if byte == PLACEHOLDER:
            continue
        if byte in _FENCES:
            count += 1
            continue
        end = position
        break

    if count < 3:
        return -1
    return end - index


def is_inline_code(chars: bytes, index: int) -> int:
    return 1 if chars[index] == _BACKTICK else -1


def is_divider(chars: bytes, index: int) -> int:
    delimiter = chars[index]
    if delimiter not in _DIVIDERS:
        return -1
    if not _only_before_on_line(chars, index):
        return -1

    count = 1
    last = len(chars)
    for position, byte in enumerate(chars[index + 1:], start=index + 1):
        if byte in _LINE_LEAD:
            continue
        if byte == delimiter:
            count += 1
            continue
        if byte == _NEWLINE:
            last = position
            break
        return -1

    return last - index if count >= 3 else -1


def is_atx_header(chars: bytes, index: int) -> int:
    if chars[index] != _POUND:
        return -1
    if not _only_before_on_line(chars, index):
        return -1

    pounds = 1
    for position, byte in enumerate(chars[index + 1:], start=index + 1):
        if byte == _POUND:
            pounds += 1
            if pounds > 6:
                return -1
        elif byte == PLACEHOLDER:
            continue
        elif byte in _HEADING_END:
            return position - index
        else:
            return -1
    return 1


def is_setext_header(chars: bytes, index: int) -> int:
    if chars[index] not in _SETEXT:
        return -1

    newlines = 0
    for byte in reversed(chars[:index]):
        if byte in _LINE_LEAD:
            continue
        if byte == _NEWLINE:
            newlines += 1
            continue
        # Content on the line directly above makes this an underline.
        return 1 if newlines == 1 else -1
    return -1


def is_image_or_link(chars: bytes, index: int) -> int:
    char = chars[index]
    if char == _EXCLAMATION:
        following = index + 1
        if following < len(chars) and chars[following] == _OPEN_BRACKET:
            return 1
        return -1
    if char == _OPEN_BRACKET:
        for byte in chars[index + 1:]:
            if byte == _NEWLINE:
                return -1
            if byte == _CLOSE_BRACKET:
                return 1
    return -1


def is_italic_or_bold(chars: bytes, index: int) -> int:
    if chars[index] not in _EMPHASIS:
        return -1
    following = get_next_as_rune(chars, index)
    if following in ("", "\x00") or following in _UNICODE_SPACES:
        return -1
    return 1


def is_unordered_list(chars: bytes, index: int) -> int:
    if chars[index] not in _BULLETS:
        return -1
    if not _only_before_on_line(chars, index):
        return -1
    following = get_next(chars, index)
    return 1 if is_space(following) or following == 0 else -1


def is_ordered_list(chars: bytes, index: int) -> int:
    if chars[index] not in _ORDERED:
        return -1
    if not get_prev_as_rune(chars, index).isdecimal():
        return -1
    if not _only_before_on_line(chars, index, _LINE_LEAD | _ASCII_DIGITS):
        return -1
    following = get_next(chars, index)
    return 1 if is_space(following) or following == 0 else -1


def is_block_quote(chars: bytes, index: int) -> int:
    if chars[index] != _QUOTE:
        return -1
    return 1 if _only_before_on_line(chars, index) else -1