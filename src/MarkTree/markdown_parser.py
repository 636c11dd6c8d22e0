from __future__ import annotations

from typing import List

from .block_parser import match_block
from .errors import DocumentParseError, ParseError
from .model import Block, Document


def parse_document(text: str) -> Document:
    """Parse a whole document into its ordered blocks.

    The input must be ``\\n``-terminated. Every character has to belong to some
    block; otherwise :class:`DocumentParseError` is raised for the first
    position no block rule accepts. Empty input is rejected the same way.
    """
    blocks: List[Block] = []
    pos = 0
    while True:
        try:
            block, pos = match_block(text, pos)
        except ParseError as error:
            raise _exhausted(text, pos) from error
        blocks.append(block)
        if pos == len(text):
            return Document(blocks=tuple(blocks))


def _exhausted(text: str, pos: int) -> DocumentParseError:
    line = text.count("\n", 0, pos) + 1
    column = pos - (text.rfind("\n", 0, pos) + 1) + 1
    return DocumentParseError(text, pos, line=line, column=column)
