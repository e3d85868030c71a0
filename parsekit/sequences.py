"""Combinators running several parsers: repetition, sequencing and alternatives."""

from __future__ import annotations

from parsekit.combinators import ParseError, ParseResult, Parser, as_parser


class RepeatedParser(Parser):
    """Apply a parser as many times as it succeeds, collecting the values."""

    __slots__ = ("_inner",)

    def __init__(self, parser) -> None:
        self._inner = as_parser(parser)
        super().__init__(self._repeat)

    def _collect(self, input: str) -> tuple[str, list]:
        remaining = input
        results = []
        while True:
            try:
                next_remaining, value = self._inner.parse(remaining)
            except ParseError as error:
                return error.input, results
            results.append(value)
            if next_remaining == remaining:
                # A parser that consumes nothing would match forever.
                return remaining, results
            remaining = next_remaining

    def _repeat(self, input: str) -> ParseResult:
        return self._collect(input)

    def at_least(self, minimum: int) -> Parser:
        """Require at least ``minimum`` successful repetitions; ``minimum`` must be positive."""
        if minimum <= 0:
            raise ValueError("min must be greater than 0")

        def parse(input: str) -> ParseResult:
            remaining, results = self._collect(input)
            if len(results) < minimum:
                raise ParseError(input)
            return remaining, results

        return Parser(parse)


def repeated(parser) -> RepeatedParser:
    """Repeat ``parser`` zero or more times."""
    return RepeatedParser(parser)


def sequence(*args) -> Parser:
    """Run the given parsers in order and yield a tuple of their values.

    A failure in any of them rewinds to the original input.
    """
    if len(args) < 2:
        raise ValueError("a sequence needs at least two parsers")
    parsers = [as_parser(parser) for parser in args]

    def parse(input: str) -> ParseResult:
        remaining = input
        values = []
        for parser in parsers:
            try:
                remaining, value = parser.parse(remaining)
            except ParseError:
                raise ParseError(input) from None
            values.append(value)
        return remaining, tuple(values)

    return Parser(parse)


def one_of(*args) -> Parser:
    """Try the given parsers in order and return the first success."""
    if len(args) < 2:
        raise ValueError("one_of needs at least two parsers")
    parsers = [as_parser(parser) for parser in args]

    def parse(input: str) -> ParseResult:
        current = input
        for parser in parsers:
            try:
                return parser.parse(current)
            except ParseError as error:
                current = error.input
        raise ParseError(current)

    return Parser(parse)