"""Rules shared by the markdown parsers: ATX heading titles, link labels and destinations."""

from __future__ import annotations

MAX_LABEL_CHARACTERS = 999


def is_closing_sequence(text: str) -> bool:
    """True when ``text`` is made only of hashes ``#``, with at least one."""
    return bool(text) and all(char == "#" for char in text)


def extract_title(segment: str) -> str:
    """Extract a heading title from the text following the opening hashes.

    Surrounding whitespace is dropped, and so is a trailing closing sequence of
    hashes when it stands as a word of its own.
    """
    maybe_title = segment.strip()
    last_space_index = max(maybe_title.rfind(" "), maybe_title.rfind("\t"))
    last_word_index = last_space_index + 1 if last_space_index >= 0 else 0
    if is_closing_sequence(maybe_title[last_word_index:]):
        return maybe_title[:last_word_index].strip()
    return maybe_title


def valid_label_character_count(segment: str) -> bool:
    """A link label holds at most 999 characters inside its brackets."""
    return len(segment) <= MAX_LABEL_CHARACTERS


def is_valid_label_content(segment: str) -> bool:
    """True when the label content has a non-whitespace character and fits the limit."""
    return bool(segment.strip()) and valid_label_character_count(segment)


def _is_ascii_control(character: str) -> bool:
    code = ord(character)
    return code < 0x20 or code == 0x7F


def is_continuation_char(character: str) -> bool:
    """Characters allowed inside an unbracketed link destination.

    Spaces and ASCII control characters, line endings included, are not allowed.
    """
    return character != " " and character != "\n" and not _is_ascii_control(character)


def is_opening_char(character: str) -> bool:
    """Characters allowed to start an unbracketed link destination: never ``<``."""
    return is_continuation_char(character) and character != "<"