import pytest

from parsekit.combinators import ParseError
from parsekit.take_while import take_while


def always(_):
    return True


def never(_):
    return False


def test_should_succeed_when_the_input_is_empty():
    assert take_while(always).parse("") == ("", "")


def test_should_succeed_when_the_predicate_never_matches():
    assert take_while(never).parse("abc") == ("abc", "")


def test_should_succeed_when_the_predicate_matches_all_input():
    assert take_while(always).parse("abc") == ("", "abc")


def test_should_succeed_when_the_predicate_matches_subset():
    parser = take_while(lambda c: c == "a" or c == "b")
    assert parser.parse("abc") == ("c", "ab")


class TestAtMost:
    def test_should_raise_when_max_is_zero(self):
        with pytest.raises(ValueError):
            take_while(always).at_most(0)

    def test_should_succeed_when_the_predicate_never_matches(self):
        assert take_while(never).at_most(1).parse("abc") == ("abc", "")

    def test_should_stop_when_max_bound_is_smaller_than_input_length(self):
        assert take_while(always).at_most(1).parse("abc") == ("bc", "a")

    def test_should_work_when_max_bound_is_equals_to_input_length(self):
        assert take_while(always).at_most(3).parse("abc") == ("", "abc")

    def test_should_work_when_max_bound_is_greater_than_input_length(self):
        assert take_while(always).at_most(4).parse("abc") == ("", "abc")


class TestAtLeast:
    def test_should_raise_when_min_is_zero(self):
        with pytest.raises(ValueError):
            take_while(always).at_least(0)

    def test_should_error_if_predicate_is_false_before_min(self):
        with pytest.raises(ParseError) as info:
            take_while(never).at_least(1).parse("a")
        assert info.value.input == "a"

    def test_should_error_if_input_length_smaller_than_min(self):
        with pytest.raises(ParseError) as info:
            take_while(always).at_least(2).parse("a")
        assert info.value.input == "a"

    def test_should_work_if_min_is_equals_to_input_length(self):
        assert take_while(always).at_least(3).parse("abc") == ("", "abc")

    def test_should_work_if_min_is_lower_than_input_length(self):
        assert take_while(always).at_least(3).parse("abc") == ("", "abc")


class TestBetween:
    def test_should_raise_when_min_is_zero(self):
        with pytest.raises(ValueError):
            take_while(always).between(0, 1)

    def test_should_raise_when_max_is_zero(self):
        with pytest.raises(ValueError):
            take_while(always).at_least(1).at_most(0)

    def test_should_raise_when_min_is_greater_than_max(self):
        with pytest.raises(ValueError):
            take_while(always).at_most(1).at_least(2)

    def test_should_error_if_input_length_smaller_than_min(self):
        with pytest.raises(ParseError) as info:
            take_while(always).between(1, 2).parse("")
        assert info.value.input == ""

    def test_should_succeed_if_input_length_equals_min_equals_max(self):
        assert take_while(always).at_least(3).at_most(3).parse("abc") == ("", "abc")

    def test_should_stop_if_max_is_smaller_than_input_length(self):
        assert take_while(always).at_least(1).at_most(2).parse("abc") == ("c", "ab")

    def test_should_work_if_max_is_greater_than_input_length(self):
        assert take_while(always).at_least(1).at_most(4).parse("abc") == ("", "abc")