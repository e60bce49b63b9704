import sys
import time

import pytest

from drillsmith.drills.basics import (
    add_optional,
    classify_char,
    current_favorite_color,
    describe_array,
    drain_optionals,
    favorite_snacks,
    fill_vec,
    floats_differ,
    is_a_color_word,
    is_even,
    make_sausage,
    my_macro,
    nice_slice,
    print_number,
    seconds_since_epoch,
)


def test_you_can_assert():
    assert is_a_color_word("green") is True


def test_you_can_assert_eq():
    assert (is_even(2) == is_even(4)) is True


def test_is_true_when_even():
    assert is_even(2)


def test_is_false_when_odd():
    assert not is_even(3)


def test_is_false_for_five():
    assert is_even(5) is False


def test_slice_out_of_array():
    assert nice_slice([1, 2, 3, 4, 5]) == [2, 3, 4]


def test_slice_too_short():
    with pytest.raises(IndexError):
        nice_slice([1, 2, 3])


def test_current_favorite_color():
    assert current_favorite_color() == "blue"


@pytest.mark.parametrize(
    "word, expected",
    [("green", True), ("blue", True), ("red", True), ("purple", False), ("", False)],
)
def test_is_a_color_word(word, expected):
    assert is_a_color_word(word) is expected


def test_fill_vec_leaves_original_alone():
    original = []
    filled = fill_vec(original)
    filled.append(88)
    assert original == []
    assert filled == [22, 44, 66, 88]


def test_fill_vec_keeps_existing_values():
    assert fill_vec([1, 2]) == [1, 2, 22, 44, 66]


def test_print_number(capsys):
    assert print_number(13) == "printing: 13"
    assert capsys.readouterr().out == "printing: 13\n"


def test_print_number_missing():
    with pytest.raises(ValueError):
        print_number(None)


def test_drain_optionals_takes_from_the_end(capsys):
    assert drain_optionals(range(1, 10)) == [9, 8, 7, 6, 5, 4, 3, 2, 1]
    assert capsys.readouterr().out.splitlines()[0] == "current value: 9"


def test_drain_optionals_stops_at_none():
    assert drain_optionals([1, None, 3, 4]) == [4, 3]


def test_make_sausage(capsys):
    assert make_sausage() == "sausage!"
    assert capsys.readouterr().out == "sausage!\n"


def test_favorite_snacks():
    assert favorite_snacks() == ("Pear", "Cucumber")


def test_seconds_since_epoch_is_current():
    before = int(time.time())
    seconds = seconds_since_epoch()
    after = int(time.time())
    assert before <= seconds <= after


def test_my_macro_without_argument(capsys):
    assert my_macro() == "Check out my macro!"
    assert capsys.readouterr().out == "Check out my macro!\n"


def test_my_macro_with_argument():
    assert my_macro(7777) == "Look at this other macro: 7777"


def test_my_macro_too_many_arguments():
    with pytest.raises(TypeError):
        my_macro(1, 2)


@pytest.mark.parametrize(
    "ch, expected",
    [
        ("C", "Alphabetical!"),
        ("a", "Alphabetical!"),
        ("7", "Numerical!"),
        ("%", "Neither alphabetic nor numeric!"),
    ],
)
def test_classify_char(ch, expected):
    assert classify_char(ch) == expected


def test_classify_char_requires_one_character():
    with pytest.raises(ValueError):
        classify_char("ab")


def test_describe_array():
    assert describe_array([0] * 101) == "Wow, that's a big array!"
    assert describe_array([0] * 100) == "Wow, that's a big array!"
    assert describe_array([0] * 99) == "Meh, I eat arrays like that for breakfast."


def test_floats_differ():
    assert floats_differ(1.2331, 1.2332) is True
    assert floats_differ(1.0, 1.0) is False
    assert floats_differ(1.0, 1.0 + sys.float_info.epsilon / 2) is False


def test_add_optional():
    assert add_optional(42, 12) == 54
    assert add_optional(42, None) == 42