import pytest

from parsekit.rules import (
    extract_title,
    is_closing_sequence,
    is_continuation_char,
    is_opening_char,
    is_valid_label_content,
    valid_label_character_count,
)


class TestIsOpeningChar:
    def test_should_reject_opening_bracket(self):
        assert is_opening_char("<") is False

    def test_should_reject_space(self):
        assert is_opening_char(" ") is False

    def test_should_reject_newline(self):
        assert is_opening_char("\n") is False

    def test_should_reject_ascii_control_character(self):
        assert is_opening_char("\x00") is False

    def test_should_accept_any_other_character(self):
        assert is_opening_char("a") is True


class TestIsContinuationChar:
    def test_should_reject_space(self):
        assert is_continuation_char(" ") is False

    def test_should_reject_newline(self):
        assert is_continuation_char("\n") is False

    def test_should_reject_ascii_control_character(self):
        assert is_continuation_char("\x00") is False

    def test_should_reject_delete_character(self):
        assert is_continuation_char("\x7f") is False

    def test_should_accept_any_other_character(self):
        assert is_continuation_char("a") is True

    def test_should_accept_opening_angle_bracket(self):
        assert is_continuation_char("<") is True

    def test_should_accept_non_ascii(self):
        assert is_continuation_char("ö") is True


class TestIsClosingSequence:
    def test_empty_is_not_closing(self):
        assert is_closing_sequence("") is False

    @pytest.mark.parametrize("text", ["#", "###", "#######"])
    def test_hashes_only(self, text):
        assert is_closing_sequence(text) is True

    @pytest.mark.parametrize("text", ["#a", "a#", "# #", "\\##"])
    def test_other_characters(self, text):
        assert is_closing_sequence(text) is False


class TestExtractTitle:
    @pytest.mark.parametrize(
        ("segment", "expected"),
        [
            (" Heading\n", "Heading"),
            (" Heading ###  \t  \n", "Heading"),
            ("Heading#\n", "Heading#"),
            ("", ""),
            ("\n", ""),
            ("       \n", ""),
            (" ###\n", ""),
            (" ### #\n", "###"),
            (" foo ### b\n", "foo ### b"),
            (" Heading #\\##\n", "Heading #\\##"),
            (" Heading", "Heading"),
            (" Heading\t##\n", "Heading"),
        ],
    )
    def test_titles(self, segment, expected):
        assert extract_title(segment) == expected


class TestLabelContent:
    def test_simple_content_is_valid(self):
        assert is_valid_label_content("a") is True

    def test_included_whitespace_is_valid(self):
        assert is_valid_label_content(" a ") is True

    def test_empty_content_is_invalid(self):
        assert is_valid_label_content("") is False

    def test_whitespace_content_is_invalid(self):
        assert is_valid_label_content(" \t ") is False

    def test_999_characters_is_valid(self):
        assert is_valid_label_content("a" * 999) is True

    def test_1000_characters_is_invalid(self):
        assert is_valid_label_content("a" * 1000) is False

    def test_character_count_counts_characters_not_bytes(self):
        assert valid_label_character_count("ö" * 999) is True
        assert valid_label_character_count("ö" * 1000) is False

    def test_character_count_empty(self):
        assert valid_label_character_count("") is True