"""Primitive parsers that consume characters directly from the input."""

from __future__ import annotations

from typing import Callable

from parsekit.combinators import ParseError, ParseResult, Parser


def tag(tag: str) -> Parser:
    """Match ``tag`` as a prefix of the input and return it.

    An empty tag matches any input without consuming anything.
    """

    def parse(input: str) -> ParseResult:
        if not input.startswith(tag):
            raise ParseError(input)
        return input[len(tag):], input[: len(tag)]

    return Parser(parse)


class TakeParser(Parser):
    """Take exactly ``count`` characters from the input."""

    __slots__ = ("count",)

    def __init__(self, count: int) -> None:
        if count <= 0:
            raise ValueError("chars count must be greater than 0")
        self.count = count
        super().__init__(self._take)

    def _take(self, input: str) -> ParseResult:
        if len(input) < self.count:
            raise ParseError(input)
        return input[self.count:], input[: self.count]

    def that(self, predicate: Callable[[str], bool]) -> Parser:
        """Take ``count`` characters, each of which must satisfy ``predicate``."""
        count = self.count

        def parse(input: str) -> ParseResult:
            taken = input[:count]
            if len(taken) < count or not all(predicate(char) for char in taken):
                raise ParseError(input)
            return input[count:], taken

        return Parser(parse)


def take(count: int) -> TakeParser:
    """Build a parser taking exactly ``count`` characters; ``count`` must be positive."""
    return TakeParser(count)


def rest(input: str) -> ParseResult:
    """Consume and return the whole input; never fails."""
    return "", input