"""Small predicate builders for use with character-level parsers."""

from __future__ import annotations

from typing import Any, Callable, Iterable

Predicate = Callable[[Any], bool]


def equals(value: Any) -> Predicate:
    """Return a predicate that is true when its argument equals ``value``."""

    def predicate(item: Any) -> bool:
        return item == value

    return predicate


def is_one_of(values: Iterable[Any]) -> Predicate:
    """Return a predicate that is true when its argument is among ``values``.

    The reverse of ``not_(is_one_of(values))``.
    """
    choices = tuple(values)

    def predicate(item: Any) -> bool:
        return item in choices

    return predicate


def not_(predicate: Predicate) -> Predicate:
    """Return a predicate negating ``predicate``."""

    def negated(item: Any) -> bool:
        return not predicate(item)

    return negated