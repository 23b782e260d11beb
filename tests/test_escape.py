import pytest

from htmltomd.escape import (
    PLACEHOLDER,
    get_next,
    get_next_as_rune,
    get_prev,
    get_prev_as_rune,
    is_atx_header,
    is_backslash,
    is_block_quote,
    is_digit,
    is_divider,
    is_fenced_code,
    is_image_or_link,
    is_inline_code,
    is_italic_or_bold,
    is_ordered_list,
    is_setext_header,
    is_space,
    is_unordered_list,
)


def run_all(check, chars):
    return [check(chars, index) for index in range(len(chars))]


@pytest.mark.parametrize(
    "chars, expected",
    [
        (b"abc", [-1, -1, -1]),
        (b"\a`\a`a", [-1, -1, -1, -1, -1]),
        (b"a \a`\a`\a`a", [-1] * 9),
        (b"\a`\a`\a`a", [-1, 5, -1, -1, -1, -1, -1]),
        (b"\a~\a~\a~a", [-1, 5, -1, -1, -1, -1, -1]),
        (b" \a`\a`\a`a", [-1, -1, 5, -1, -1, -1, -1, -1]),
        (b"\n\a`\a`\a`a", [-1, -1, 5, -1, -1, -1, -1, -1]),
        (
            b"\a`\a`\a`\na\n\a`\a`\a`",
            [-1, 5, -1, -1, -1, -1, -1, -1, -1, -1, 5, -1, -1, -1, -1],
        ),
        (b"\a`\a`\a`\na\n\a`", [-1, 5, -1, -1, -1, -1, -1, -1, -1, -1, -1]),
    ],
)
def test_is_fenced_code(chars, expected):
    assert run_all(is_fenced_code, chars) == expected


@pytest.mark.parametrize(
    "chars, expected",
    [(b"abc", [-1, -1, -1]), (b"`a`", [1, -1, 1])],
)
def test_is_inline_code(chars, expected):
    assert run_all(is_inline_code, chars) == expected


def test_is_backslash():
    assert run_all(is_backslash, b"a\\b") == [-1, 1, -1]


@pytest.mark.parametrize(
    "chars, expected",
    [
        (b"abc", [-1, -1, -1]),
        (b"--", [-1, -1]),
        (b"--- a", [-1, -1, -1, -1, -1]),
        (b"---", [3, -1, -1]),
        (b"-----", [5, -1, -1, -1, -1]),
        (b"--- ", [4, -1, -1, -1]),
        (b"---\n", [3, -1, -1, -1]),
        (b"\n ---", [-1, -1, 3, -1, -1]),
        (b"\n \a-\a-\a-", [-1, -1, -1, 5, -1, -1, -1, -1]),
    ],
)
def test_is_divider(chars, expected):
    assert run_all(is_divider, chars) == expected


@pytest.mark.parametrize(
    "chars, expected",
    [
        (b"abc", [-1, -1, -1]),
        (b"a\a# a", [-1, -1, -1, -1, -1]),
        (b"a \a# a", [-1, -1, -1, -1, -1, -1]),
        (b"\a# ab", [-1, 1, -1, -1, -1]),
        (b"\n\a# ab", [-1, -1, 1, -1, -1, -1]),
        (b" \a# ab", [-1, -1, 1, -1, -1, -1]),
        (b"\a#\a# ab", [-1, 3, -1, -1, -1, -1, -1]),
        (b"\a#\a#\a#\a# a", [-1, 7, -1, -1, -1, -1, -1, -1, -1, -1]),
        (b"\a#\a#\a#\a#\a#\a# a", [-1, 11] + [-1] * 12),
        (b"\a#\a#\a#\a#\a#\a#\a# a", [-1] * 16),
        (b"\a#a", [-1, -1, -1]),
        (b"\a# \na", [-1, 1, -1, -1, -1]),
        (b"\a#", [-1, 1]),
        (b"\a#\ta", [-1, 1, -1, -1]),
    ],
)
def test_is_atx_header(chars, expected):
    assert run_all(is_atx_header, chars) == expected


@pytest.mark.parametrize(
    "chars, expected",
    [
        (b"abc", [-1, -1, -1]),
        (b"a\a=b", [-1, -1, -1, -1]),
        (b"a\n\n\a=", [-1, -1, -1, -1, -1]),
        (b"a\n\a=", [-1, -1, -1, 1]),
        (b"\a=", [-1, -1]),
    ],
)
def test_is_setext_header(chars, expected):
    assert run_all(is_setext_header, chars) == expected


@pytest.mark.parametrize(
    "chars, expected",
    [
        (b"abc", [-1, -1, -1]),
        (b"\a!\a[a]", [-1, -1, -1, 1, -1, -1]),
        (b"!\a[a]", [-1, -1, 1, -1, -1]),
        (b"\a![a]", [-1, 1, 1, -1, -1]),
        (b"[[[a]", [1, 1, 1, -1, -1]),
        (b"[a\n]", [-1, -1, -1, -1]),
        (b"[a", [-1, -1]),
        (b"!", [-1]),
    ],
)
def test_is_image_or_link(chars, expected):
    assert run_all(is_image_or_link, chars) == expected


@pytest.mark.parametrize(
    "text, index, expected",
    [
        ("normal text", 0, -1),
        ("*a", 0, 1),
        ("\n *a", 2, 1),
        ("text *a", 5, 1),
        ("a*a", 1, 1),
        (".*a", 1, 1),
        (" *a", 1, 1),
        (" *.", 1, 1),
        (" *", 1, -1),
        (" * ", 1, -1),
        (" *\n", 1, -1),
        (".*.", 1, 1),
        ("*!*", 0, 1),
        ("$*content*", 1, 1),
        ("0$*!*", 2, 1),
    ],
)
def test_is_italic_or_bold(text, index, expected):
    assert is_italic_or_bold(text.encode("utf-8"), index) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("\xac*!0*", [-1, -1, 1, -1, -1, -1]),
        ("\xac\xac\xac*!0*", [-1, -1, -1, -1, -1, -1, 1, -1, -1, -1]),
    ],
)
def test_is_italic_or_bold_all(text, expected):
    assert run_all(is_italic_or_bold, text.encode("utf-8")) == expected


@pytest.mark.parametrize(
    "chars, expected",
    [
        (b"abc", [-1, -1, -1]),
        (b"a- b", [-1, -1, -1, -1]),
        (b"-ab", [-1, -1, -1]),
        (b"\a- a\n\a- b", [-1, 1, -1, -1, -1, -1, 1, -1, -1]),
        (b" - a", [-1, 1, -1, -1]),
    ],
)
def test_is_unordered_list(chars, expected):
    assert run_all(is_unordered_list, chars) == expected


@pytest.mark.parametrize(
    "chars, expected",
    [
        (b"abc", [-1, -1, -1]),
        (b"1. a", [-1, 1, -1, -1]),
        (b"123. a", [-1, -1, -1, 1, -1, -1]),
        (b"a1. a", [-1, -1, -1, -1, -1]),
        (b"1.a", [-1, -1, -1]),
        (b"a.b", [-1, -1, -1]),
        (b" 1. a", [-1, -1, 1, -1, -1]),
        (b"\a1. a\n\a1. b", [-1, -1, 1, -1, -1, -1, -1, -1, 1, -1, -1]),
    ],
)
def test_is_ordered_list(chars, expected):
    assert run_all(is_ordered_list, chars) == expected


@pytest.mark.parametrize(
    "chars, expected",
    [
        (b"> a", [1, -1, -1]),
        (b" > a", [-1, 1, -1, -1]),
        (b">a", [1, -1]),
        (b"\n> a", [-1, 1, -1, -1]),
        (b"\n > a", [-1, -1, 1, -1, -1]),
        (b"\a> a", [-1, 1, -1, -1]),
        (b"a> a", [-1, -1, -1, -1]),
    ],
)
def test_is_block_quote(chars, expected):
    assert run_all(is_block_quote, chars) == expected


CHINESE = "字".encode("utf-8")


@pytest.mark.parametrize(
    "value, expected",
    [
        (0, False),
        (ord("a"), False),
        (0xE4, False),
        (CHINESE[0], False),
        (CHINESE[1], False),
        (CHINESE[2], False),
        (ord(" "), True),
        (ord("\t"), True),
    ],
)
def test_is_space(value, expected):
    assert is_space(value) is expected


def test_is_digit():
    assert [is_digit(b) for b in b"09a "] == [True, True, False, False]


def test_get_prev():
    chars = bytes([ord("a"), PLACEHOLDER, ord("b"), ord("c")])
    assert get_prev(chars, 3) == ord("b")
    assert get_prev(chars, 2) == ord("a")
    assert get_prev(chars, 1) == ord("a")
    assert get_prev(chars, 0) == 0


def test_get_next():
    chars = bytes([ord("a"), PLACEHOLDER, ord("b"), ord("c")])
    assert get_next(chars, 0) == ord("b")
    assert get_next(chars, 1) == ord("b")
    assert get_next(chars, 2) == ord("c")
    assert get_next(chars, 3) == 0


def test_get_next_and_prev_as_rune():
    chars = bytes([97, 7, 226, 140, 152, 7, 98])
    assert "a\a⌘\ab".encode("utf-8") == chars

    assert get_next(chars, 0) == 226
    assert get_next_as_rune(chars, 0) == "⌘"
    assert get_next_as_rune(chars, 6) == ""

    assert get_prev(chars, 6) == 152
    assert get_prev_as_rune(chars, 6) == "⌘"
    assert get_prev_as_rune(chars, 0) == ""