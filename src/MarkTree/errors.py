from __future__ import annotations

from enum import Enum


class FailureKind(Enum):
    # the first token a rule needs is absent
    UNEXPECTED = "unexpected"
    # an opening marker matched but its closing counterpart or newline is missing
    UNTERMINATED = "unterminated"
    # no block rule matches and input remains
    EXHAUSTED = "exhausted"


class ParseError(ValueError):
    """Raised by a recognizer that cannot match ``text`` at ``position``."""

    def __init__(self, kind: FailureKind, text: str, position: int, expected: str) -> None:
        super().__init__(kind, text, position, expected)
        self.kind = kind
        self.text = text
        self.position = position
        self.expected = expected

    @property
    def remainder(self) -> str:
        return self.text[self.position:]

    def __str__(self) -> str:
        return f"{self.kind.value}: expected {self.expected} at {_excerpt(self.text, self.position)}"


class DocumentParseError(ParseError):
    """The whole document could not be parsed; points at the first unparseable block."""

    def __init__(self, text: str, position: int, line: int, column: int) -> None:
        super().__init__(FailureKind.EXHAUSTED, text, position, "block")
        self.args = (text, position, line, column)
        self.line = line
        self.column = column

    @property
    def offset(self) -> int:
        return self.position

    def __str__(self) -> str:
        return f"no block matches at line {self.line}, column {self.column}: {_excerpt(self.text, self.position)}"


def _excerpt(text: str, position: int, limit: int = 30) -> str:
    if position >= len(text):
        return "end of input"
    snippet = text[position:position + limit]
    if len(text) - position > limit:
        snippet += "..."
    return repr(snippet)
