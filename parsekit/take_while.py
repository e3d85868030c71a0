"""Parsers that consume characters while a predicate holds, optionally bounded."""

from __future__ import annotations

from itertools import islice, takewhile
from typing import Callable

from parsekit.combinators import ParseError, ParseResult, Parser

CharPredicate = Callable[[str], bool]


def _matching_count(input: str, predicate: CharPredicate, limit: int | None = None) -> int:
    """Count leading characters of ``input`` satisfying ``predicate``, up to ``limit``."""
    return sum(1 for _ in takewhile(predicate, islice(input, limit)))


def _check_minimum(minimum: int) -> None:
    if minimum <= 0:
        raise ValueError("min must be greater than 0")


def _check_maximum(maximum: int) -> None:
    if maximum <= 0:
        raise ValueError("max must be greater than 0")


class TakeWhileParser(Parser):
    """Consume characters while ``predicate`` holds; never fails."""

    __slots__ = ("predicate",)

    def __init__(self, predicate: CharPredicate) -> None:
        self.predicate = predicate
        super().__init__(self._take)

    def _take(self, input: str) -> ParseResult:
        count = _matching_count(input, self.predicate)
        return input[count:], input[:count]

    def at_most(self, maximum: int) -> TakeWhileAtMostParser:
        """Consume at most ``maximum`` characters."""
        return TakeWhileAtMostParser(maximum, self.predicate)

    def at_least(self, minimum: int) -> TakeWhileAtLeastParser:
        """Fail unless at least ``minimum`` characters are consumed."""
        return TakeWhileAtLeastParser(minimum, self.predicate)

    def between(self, minimum: int, maximum: int) -> TakeWhileBetweenParser:
        """Consume between ``minimum`` and ``maximum`` characters."""
        return TakeWhileBetweenParser(minimum, maximum, self.predicate)


class TakeWhileAtMostParser(Parser):
    """Consume up to ``maximum`` characters satisfying ``predicate``; never fails."""

    __slots__ = ("maximum", "predicate")

    def __init__(self, maximum: int, predicate: CharPredicate) -> None:
        _check_maximum(maximum)
        self.maximum = maximum
        self.predicate = predicate
        super().__init__(self._take)

    def _take(self, input: str) -> ParseResult:
        count = _matching_count(input, self.predicate, self.maximum)
        return input[count:], input[:count]

    def at_least(self, minimum: int) -> TakeWhileBetweenParser:
        """Also require at least ``minimum`` characters."""
        return TakeWhileBetweenParser(minimum, self.maximum, self.predicate)


class TakeWhileAtLeastParser(Parser):
    """Consume characters satisfying ``predicate``; fail below ``minimum``."""

    __slots__ = ("minimum", "predicate")

    def __init__(self, minimum: int, predicate: CharPredicate) -> None:
        _check_minimum(minimum)
        self.minimum = minimum
        self.predicate = predicate
        super().__init__(self._take)

    def _take(self, input: str) -> ParseResult:
        count = _matching_count(input, self.predicate)
        if count < self.minimum:
            raise ParseError(input)
        return input[count:], input[:count]

    def at_most(self, maximum: int) -> TakeWhileBetweenParser:
        """Also cap the consumption at ``maximum`` characters."""
        return TakeWhileBetweenParser(self.minimum, maximum, self.predicate)


class TakeWhileBetweenParser(Parser):
    """Consume between ``minimum`` and ``maximum`` characters satisfying ``predicate``."""

    __slots__ = ("minimum", "maximum", "predicate")

    def __init__(self, minimum: int, maximum: int, predicate: CharPredicate) -> None:
        _check_minimum(minimum)
        _check_maximum(maximum)
        if minimum > maximum:
            raise ValueError("min must be less than or equal to max")
        self.minimum = minimum
        self.maximum = maximum
        self.predicate = predicate
        super().__init__(self._take)

    def _take(self, input: str) -> ParseResult:
        count = _matching_count(input, self.predicate, self.maximum)
        if count < self.minimum:
            raise ParseError(input)
        return input[count:], input[:count]


def take_while(predicate: CharPredicate) -> TakeWhileParser:
    """Build a parser consuming characters while ``predicate`` holds."""
    return TakeWhileParser(predicate)