from __future__ import annotations

from typing import Optional, Tuple

from .combinators import alt, delimited, is_not, many1, map_value, opt, pair, preceded, tag, take_while1, terminated
from .errors import FailureKind, ParseError
from .inline_parser import decode_line
from .model import Block, CodeBlock, Heading, MarkdownText, OrderedList, Quote, Text, UnorderedList

FENCE = "```"


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


# "## " -> 2
match_heading_tag = map_value(
    terminated(take_while1(lambda char: char == "#", "'#'"), tag(" ")),
    len,
)
match_heading = pair(match_heading_tag, decode_line)

# "12. " -> "12"
match_ordered_list_tag = terminated(terminated(take_while1(_is_digit, "a digit"), tag(".")), tag(" "))
match_ordered_list_item = preceded(match_ordered_list_tag, decode_line)
match_ordered_list = map_value(many1(match_ordered_list_item), tuple)

match_unordered_list_tag = terminated(tag("-"), tag(" "))
match_unordered_list_item = preceded(match_unordered_list_tag, decode_line)
match_unordered_list = map_value(many1(match_unordered_list_item), tuple)

# Lines inside a quote are decoded as inline text only; a "- item" stays plain.
match_quote_tag = terminated(tag(">"), tag(" "))
match_quote_line = preceded(match_quote_tag, decode_line)
match_quote = map_value(many1(match_quote_line), tuple)

_fence_header = delimited(tag(FENCE), opt(is_not("\n")), tag("\n"))


def match_code_block(text: str, pos: int = 0) -> Tuple[Tuple[str, Optional[str]], int]:
    """Fenced code: returns ``(code, language)``.

    The code is kept verbatim up to the closing fence. Only the three closing
    backticks are consumed; whatever follows them starts the next block.
    """
    info, pos = _fence_header(text, pos)
    end = text.find(FENCE, pos)
    if end < 0:
        raise ParseError(FailureKind.UNTERMINATED, text, len(text), repr(FENCE))
    language = (info or "").strip() or None
    return (text[pos:end], language), end + len(FENCE)


def match_text(text: str, pos: int = 0) -> Tuple[MarkdownText, int]:
    return decode_line(text, pos)


BLOCK_RULES = (
    map_value(match_heading, lambda value: Heading(*value)),
    map_value(match_ordered_list, OrderedList),
    map_value(match_unordered_list, UnorderedList),
    map_value(match_quote, Quote),
    map_value(match_code_block, lambda value: CodeBlock(*value)),
    map_value(match_text, Text),
)

_match_block = alt(*BLOCK_RULES)


def match_block(text: str, pos: int = 0) -> Tuple[Block, int]:
    """Recognize the block starting at ``pos``; the first rule that matches wins."""
    return _match_block(text, pos)
