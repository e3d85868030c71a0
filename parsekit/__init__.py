"""Parser combinators over strings, with markdown node types and text rules."""

__version__ = "0.1.0"

__all__ = [
    "ast",
    "combinators",
    "predicates",
    "primitives",
    "rules",
    "sequences",
    "take_while",
]