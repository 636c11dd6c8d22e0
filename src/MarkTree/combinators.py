"""Small recognizer toolkit the grammar is assembled from.

A parser is a plain function taking the whole input and a start position and
returning ``(value, next_position)``. It raises :class:`ParseError` when it
cannot match; callers that want to try something else catch the error and
retry at the same position. The input string is never copied or mutated, so
retrying is always safe.
"""

from __future__ import annotations

from typing import Any, Callable, List, Optional, Tuple, TypeVar

from .errors import FailureKind, ParseError

T = TypeVar("T")
U = TypeVar("U")

Parser = Callable[[str, int], Tuple[T, int]]


def tag(literal: str) -> Parser[str]:
    def parse(text: str, pos: int = 0) -> tuple[str, int]:
        if text.startswith(literal, pos):
            return literal, pos + len(literal)
        raise ParseError(FailureKind.UNEXPECTED, text, pos, repr(literal))

    return parse


def is_not(stop_chars: str) -> Parser[str]:
    """Longest non-empty run of characters outside ``stop_chars``."""

    def parse(text: str, pos: int = 0) -> tuple[str, int]:
        end = pos
        while end < len(text) and text[end] not in stop_chars:
            end += 1
        if end == pos:
            raise ParseError(FailureKind.UNEXPECTED, text, pos, f"a character other than {stop_chars!r}")
        return text[pos:end], end

    return parse


def take_while1(predicate: Callable[[str], bool], expected: str) -> Parser[str]:
    def parse(text: str, pos: int = 0) -> tuple[str, int]:
        end = pos
        while end < len(text) and predicate(text[end]):
            end += 1
        if end == pos:
            raise ParseError(FailureKind.UNEXPECTED, text, pos, expected)
        return text[pos:end], end

    return parse


def alt(*parsers: Parser[Any]) -> Parser[Any]:
    """Try ``parsers`` in order and return the first success.

    When all of them fail, the failure that got furthest into the input is
    raised; on a tie the earlier parser wins.
    """

    def parse(text: str, pos: int = 0) -> tuple[Any, int]:
        furthest: ParseError | None = None
        for parser in parsers:
            try:
                return parser(text, pos)
            except ParseError as error:
                if furthest is None or error.position > furthest.position:
                    furthest = error
        if furthest is None:
            raise ParseError(FailureKind.UNEXPECTED, text, pos, "one of no alternatives")
        raise furthest

    return parse


def many0(parser: Parser[T]) -> Parser[List[T]]:
    def parse(text: str, pos: int = 0) -> tuple[list[T], int]:
        values: list[T] = []
        while True:
            try:
                value, after = parser(text, pos)
            except ParseError:
                return values, pos
            if after == pos:
                return values, pos
            values.append(value)
            pos = after

    return parse


def many1(parser: Parser[T]) -> Parser[List[T]]:
    repeat = many0(parser)

    def parse(text: str, pos: int = 0) -> tuple[list[T], int]:
        first, pos = parser(text, pos)
        values, pos = repeat(text, pos)
        return [first, *values], pos

    return parse


def opt(parser: Parser[T]) -> Parser[Optional[T]]:
    def parse(text: str, pos: int = 0) -> tuple[T | None, int]:
        try:
            return parser(text, pos)
        except ParseError:
            return None, pos

    return parse


def pair(first: Parser[T], second: Parser[U]) -> Parser[Tuple[T, U]]:
    def parse(text: str, pos: int = 0) -> tuple[tuple[T, U], int]:
        left, pos = first(text, pos)
        right, pos = second(text, pos)
        return (left, right), pos

    return parse


def preceded(prefix: Parser[Any], parser: Parser[T]) -> Parser[T]:
    def parse(text: str, pos: int = 0) -> tuple[T, int]:
        _, pos = prefix(text, pos)
        return parser(text, pos)

    return parse


def terminated(parser: Parser[T], suffix: Parser[Any]) -> Parser[T]:
    def parse(text: str, pos: int = 0) -> tuple[T, int]:
        value, pos = parser(text, pos)
        _, pos = suffix(text, pos)
        return value, pos

    return parse


def delimited(opening: Parser[Any], body: Parser[T], closing: Parser[Any]) -> Parser[T]:
    """``opening body closing``; a missing ``closing`` is reported as unterminated."""

    def parse(text: str, pos: int = 0) -> tuple[T, int]:
        _, pos = opening(text, pos)
        value, pos = body(text, pos)
        try:
            _, pos = closing(text, pos)
        except ParseError as error:
            raise ParseError(FailureKind.UNTERMINATED, text, error.position, error.expected) from error
        return value, pos

    return parse


def map_value(parser: Parser[T], func: Callable[[T], U]) -> Parser[U]:
    def parse(text: str, pos: int = 0) -> tuple[U, int]:
        value, pos = parser(text, pos)
        return func(value), pos

    return parse
