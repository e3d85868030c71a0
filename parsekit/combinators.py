"""Core parser type and the generic combinators built on it.

A parser is anything that takes an input string and either returns a pair
``(remaining, value)`` or raises :class:`ParseError` carrying the input it
was given, so that callers can rewind to it.
"""

from __future__ import annotations

from typing import Any, Callable, Tuple

ParseResult = Tuple[str, Any]
ParseFunction = Callable[[str], ParseResult]


class ParseError(Exception):
    """Raised when a parser rejects its input.

    ``input`` holds the input to rewind to: the one the failing parser was given.
    """

    def __init__(self, input: str, message: str | None = None) -> None:
        super().__init__(message or f"unable to parse {input!r}")
        self.input = input


class Parser:
    """A parser wrapping a function of ``input -> (remaining, value)``."""

    __slots__ = ("_func",)

    def __init__(self, func: ParseFunction) -> None:
        if not callable(func):
            raise TypeError(f"parser function must be callable, got {func!r}")
        self._func = func

    def parse(self, input: str) -> ParseResult:
        """Run the parser, returning ``(remaining, value)`` or raising ParseError."""
        return self._func(input)

    def __call__(self, input: str) -> ParseResult:
        return self.parse(input)

    def and_(self, right) -> Parser:
        """Run this parser then ``right``; yield both values as a pair."""
        return and_(self, right)

    def or_(self, right) -> Parser:
        """Try this parser, falling back to ``right`` on failure."""
        return or_(self, right)

    def map(self, func: Callable[[Any], Any]) -> Parser:
        """Transform the parsed value with ``func``."""
        return map_(self, func)

    def validate(self, func: Callable[[Any], bool]) -> Parser:
        """Reject the parse when ``func`` returns false for the parsed value."""
        return validate(self, func)

    def consumed(self) -> Parser:
        """Yield ``(consumed_text, value)`` instead of just the value."""
        return consumed(self)

    def recognize(self) -> Parser:
        """Yield the consumed text instead of the parsed value."""
        return recognize(self)

    def preceded(self, after) -> Parser:
        """Run this parser then ``after``, keeping only the latter's value."""
        return preceded(self, after)


def as_parser(parser) -> Parser:
    """Return ``parser`` as a :class:`Parser`, wrapping plain callables."""
    if isinstance(parser, Parser):
        return parser
    if callable(parser):
        return Parser(parser)
    raise TypeError(f"cannot build a parser from {parser!r}")


def _consumed_text(input: str, remaining: str) -> str:
    """The prefix of ``input`` that precedes ``remaining``."""
    if not remaining:
        return input
    if len(remaining) > len(input) or not input.endswith(remaining):
        raise ValueError(f"{remaining!r} is not part of the input {input!r}")
    return input[: len(input) - len(remaining)]


def and_(left, right) -> Parser:
    """Sequence two parsers; a failure of either rewinds to the original input."""
    left_parser = as_parser(left)
    right_parser = as_parser(right)

    def parse(input: str) -> ParseResult:
        remaining, left_value = left_parser.parse(input)
        try:
            remaining, right_value = right_parser.parse(remaining)
        except ParseError:
            raise ParseError(input) from None
        return remaining, (left_value, right_value)

    return Parser(parse)


def or_(left, right) -> Parser:
    """Try ``left``; if it fails, try ``right`` on the input it rewound to."""
    left_parser = as_parser(left)
    right_parser = as_parser(right)

    def parse(input: str) -> ParseResult:
        try:
            return left_parser.parse(input)
        except ParseError as error:
            return right_parser.parse(error.input)

    return Parser(parse)


def map_(parser, func: Callable[[Any], Any]) -> Parser:
    """Apply ``func`` to the value produced by ``parser`` on success."""
    inner = as_parser(parser)

    def parse(input: str) -> ParseResult:
        remaining, value = inner.parse(input)
        return remaining, func(value)

    return Parser(parse)


def validate(parser, func: Callable[[Any], bool]) -> Parser:
    """Succeed only when ``func`` accepts the value produced by ``parser``."""
    inner = as_parser(parser)

    def parse(input: str) -> ParseResult:
        remaining, value = inner.parse(input)
        if not func(value):
            raise ParseError(input)
        return remaining, value

    return Parser(parse)


def consumed(parser) -> Parser:
    """Pair the value of ``parser`` with the text it consumed."""
    inner = as_parser(parser)

    def parse(input: str) -> ParseResult:
        remaining, value = inner.parse(input)
        return remaining, (_consumed_text(input, remaining), value)

    return Parser(parse)


def recognize(parser) -> Parser:
    """Return the text consumed by ``parser`` instead of its value."""
    return map_(consumed(parser), lambda pair: pair[0])


def preceded(preceding, after) -> Parser:
    """Run both parsers in order and keep the value of ``after``."""
    return map_(and_(preceding, after), lambda pair: pair[1])


def fail() -> Parser:
    """A parser that always rejects its input."""

    def parse(input: str) -> ParseResult:
        raise ParseError(input)

    return Parser(parse)