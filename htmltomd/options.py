"""Settings for the markdown output and their validation."""

from __future__ import annotations

import dataclasses
import enum


class LinkStyle(str, enum.Enum):
    """How links are written."""

    # For example: [view more](/about.html)
    INLINED = "inlined"
    REFERENCED_INDEX = "referenced_index"
    REFERENCED_SHORT = "referenced_short"


class HeadingStyle(str, enum.Enum):
    """How headings are written."""

    # "## Heading"
    ATX = "atx"
    # "Heading" followed by a line of "=" or "-"
    SETEXT = "setext"


class LinkBehavior(str, enum.Enum):
    """What happens to links with an empty href or empty content."""

    # Render the element as a link.
    RENDER = "render"
    # Skip the link and let the other rules render the element.
    SKIP = "skip"


@dataclasses.dataclass
class Config:
    """Customisation of the markdown output.

    Empty values are replaced by the defaults in :func:`fill_in_defaults`.
    """

    em_delimiter: str = ""
    strong_delimiter: str = ""
    horizontal_rule: str = ""
    bullet_list_marker: str = ""
    disable_list_end_comment: bool = False
    code_block_fence: str = ""
    heading_style: str = ""
    link_style: str = ""
    link_empty_href_behavior: str = ""
    link_empty_content_behavior: str = ""


_QUOTE_ESCAPES = {
    "\\": "\\\\", '"': '\\"', "\n": "\\n", "\t": "\\t", "\r": "\\r",
    "\a": "\\a", "\b": "\\b", "\f": "\\f", "\v": "\\v",
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


def _text(value) -> str:
    return value.value if isinstance(value, enum.Enum) else str(value)


class ValidateConfigError(ValueError):
    """A setting has a value that is not allowed.

    ``key_with_value`` defaults to ``Key:"value"`` and may be overridden,
    for example with ``--key="value"`` for a command line.
    """

    def __init__(
        self,
        key: str,
        value: str,
        pattern_description: str,
        key_with_value: str = "",
    ) -> None:
        super().__init__(key, value)
        self.key = key
        self.value = value
        self.pattern_description = pattern_description
        self.key_with_value = key_with_value

    def __str__(self) -> str:
        if not self.key_with_value:
            self.key_with_value = f"{self.key}:{_quote(self.value)}"
        return (
            f"invalid value for {self.key_with_value} "
            f"must be {self.pattern_description}"
        )


def fill_in_defaults(config: Config) -> Config:
    """Return a copy of ``config`` with every empty setting set to its default."""
    return dataclasses.replace(
        config,
        # "*" works better inside words than "_".
        em_delimiter=config.em_delimiter or "*",
        strong_delimiter=config.strong_delimiter or "**",
        horizontal_rule=config.horizontal_rule or "* * *",
        bullet_list_marker=config.bullet_list_marker or "-",
        code_block_fence=config.code_block_fence or "```",
        heading_style=config.heading_style or HeadingStyle.ATX,
        link_empty_href_behavior=config.link_empty_href_behavior or LinkBehavior.RENDER,
        link_empty_content_behavior=(
            config.link_empty_content_behavior or LinkBehavior.RENDER
        ),
        link_style=config.link_style or LinkStyle.INLINED,
    )


def validate_config(config: Config) -> None:
    """Raise :class:`ValidateConfigError` for the first setting that is invalid."""
    em = _text(config.em_delimiter)
    if em.count("_") != 1 and em.count("*") != 1:
        raise ValidateConfigError(
            "EmDelimiter", em, 'exactly 1 character of "*" or "_"'
        )

    strong = _text(config.strong_delimiter)
    if strong.count("_") != 2 and strong.count("*") != 2:
        raise ValidateConfigError(
            "StrongDelimiter", strong, 'exactly 2 characters of "**" or "__"'
        )

    rule = _text(config.horizontal_rule)
    if rule.count("*") < 3 and rule.count("_") < 3 and rule.count("-") < 3:
        raise ValidateConfigError(
            "HorizontalRule", rule, 'at least 3 characters of "*", "_" or "-"'
        )

    bullet = _text(config.bullet_list_marker)
    if bullet not in ("-", "+", "*"):
        raise ValidateConfigError(
            "BulletListMarker", bullet, 'one of "-", "+" or "*"'
        )

    fence = _text(config.code_block_fence)
    if fence not in ("```", "~~~"):
        raise ValidateConfigError(
            "CodeBlockFence", fence, 'one of "```" or "~~~"'
        )

    heading = _text(config.heading_style)
    if heading not in {style.value for style in HeadingStyle}:
        raise ValidateConfigError(
            "HeadingStyle", heading, 'one of "atx" or "setext"'
        )

    link = _text(config.link_style)
    if link not in {style.value for style in LinkStyle}:
        raise ValidateConfigError(
            "LinkStyle",
            link,
            'one of "inlined", "referenced_index" or "referenced_short"',
        )