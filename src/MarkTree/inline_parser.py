"""Recognizers for the text runs inside a single line.

Each ``match_*`` function takes the input and a start position and returns
``(value, next_position)`` or raises :class:`~MarkTree.errors.ParseError`.
"""

from __future__ import annotations

from typing import Optional, Tuple

from .combinators import alt, delimited, is_not, map_value, opt, pair, preceded, tag
from .errors import FailureKind, ParseError
from .model import Bold, Image, InlineCode, InlineElement, Italic, Link, MarkdownText, Plain

WHITESPACE = " \t\r\n"

# Plain runs stop in front of any of these.
PLAIN_STOPS = ("*", "`", "[", "![", "\n")

_link = pair(
    delimited(tag("["), is_not("]\n"), tag("]")),
    delimited(tag("("), is_not(")\n"), tag(")")),
)
_image = preceded(tag("!"), _link)
_inline_code = pair(
    delimited(tag("`"), is_not("`\n"), tag("`")),
    opt(is_not(WHITESPACE)),
)
_bold = delimited(tag("**"), is_not("*\n"), tag("**"))
_italic = delimited(tag("*"), is_not("*\n"), tag("*"))


def match_link(text: str, pos: int = 0) -> Tuple[Tuple[str, str], int]:
    """``[label](url)``"""
    return _link(text, pos)


def match_image(text: str, pos: int = 0) -> Tuple[Tuple[str, str], int]:
    """``![label](url)``"""
    return _image(text, pos)


def match_inline_code(text: str, pos: int = 0) -> Tuple[Tuple[str, Optional[str]], int]:
    """Backtick-delimited code with an optional language tag glued to the closing backtick.

    The tag runs up to the next whitespace character or the end of input.
    """
    return _inline_code(text, pos)


def match_bold(text: str, pos: int = 0) -> Tuple[str, int]:
    return _bold(text, pos)


def match_italic(text: str, pos: int = 0) -> Tuple[str, int]:
    return _italic(text, pos)


def match_plain(text: str, pos: int = 0) -> Tuple[str, int]:
    end = pos
    while end < len(text) and not text.startswith(PLAIN_STOPS, end):
        end += 1
    if end == pos:
        raise ParseError(FailureKind.UNEXPECTED, text, pos, "plain text")
    return text[pos:end], end


# Plain goes first because it only ever stops in front of a marker. Bold must
# precede italic, otherwise "**" would be read as two italic delimiters.
INLINE_RULES = (
    map_value(match_plain, Plain),
    map_value(match_bold, Bold),
    map_value(match_italic, Italic),
    map_value(match_inline_code, lambda value: InlineCode(*value)),
    map_value(match_image, lambda value: Image(*value)),
    map_value(match_link, lambda value: Link(*value)),
)

match_inline = alt(*INLINE_RULES)


def decode_line(text: str, pos: int = 0) -> Tuple[MarkdownText, int]:
    """Decode one line into inline nodes and consume its terminating newline.

    A construct that cannot be decoded fails the whole line; nothing decoded
    before it is returned.
    """
    inlines: list[InlineElement] = []
    while True:
        try:
            inline, pos = match_inline(text, pos)
        except ParseError as error:
            stopped = error
            break
        inlines.append(inline)
    if text.startswith("\n", pos):
        return tuple(inlines), pos + 1
    if pos == len(text):
        raise ParseError(FailureKind.UNTERMINATED, text, pos, "newline")
    raise stopped
