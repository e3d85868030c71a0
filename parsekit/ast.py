"""Syntax tree nodes for the markdown blocks and inline elements parsed so far."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Protocol, Union


class ToHtml(Protocol):
    """Something that can render itself as an HTML string."""

    def to_html(self) -> str: ...


@dataclass(frozen=True)
class SingleSegment:
    """A node backed by exactly one segment of the source text."""

    segment: str

    def segments(self) -> Iterator[str]:
        """Yield the node's source segments: here, just the one."""
        yield self.segment


@dataclass(frozen=True)
class AtxHeading(SingleSegment):
    """An ATX heading: its source segment, its (possibly empty) title and level 1 to 6."""

    title: str
    level: int


@dataclass(frozen=True)
class BlankLine(SingleSegment):
    """A line holding nothing but spaces, tabs and a line ending."""


@dataclass(frozen=True)
class ThematicBreak(SingleSegment):
    """A thematic break line such as ``---``."""


@dataclass(frozen=True)
class LinkLabel(SingleSegment):
    """A link label, brackets included."""


@dataclass(frozen=True)
class BracketedLinkDestination(SingleSegment):
    """A link destination enclosed in angle brackets."""


@dataclass(frozen=True)
class UnbracketedLinkDestination(SingleSegment):
    """A link destination written without angle brackets."""


LinkDestination = Union[BracketedLinkDestination, UnbracketedLinkDestination]