import pytest

from drillsmith.drills.quizzes import (
    calculate_apple_price,
    my_macro,
    show_strings,
    string,
    string_slice,
    times_two,
)


@pytest.mark.parametrize("apples, price", [(35, 70), (40, 80), (65, 65)])
def test_verify_apple_price(apples, price):
    assert calculate_apple_price(apples) == price


def test_returns_twice_of_positive_numbers():
    assert times_two(4) == 8


def test_returns_twice_of_negative_numbers():
    assert times_two(-4) == -8


def test_my_macro_world():
    assert my_macro("world!") == "Hello world!"


def test_my_macro_goodbye():
    assert my_macro("goodbye!") == "Hello goodbye!"


def test_string_functions_print(capsys):
    string_slice("blue")
    string("red")
    assert capsys.readouterr().out == "blue\nred\n"


def test_show_strings(capsys):
    show_strings()
    assert capsys.readouterr().out.splitlines() == [
        "blue",
        "red",
        "hi",
        "rust is fun!",
        "nice weather",
        "Interpolation Station",
        "a",
        "hello there",
        "Happy Tuesday!",
        "my shift key is sticky",
    ]