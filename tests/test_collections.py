from drillsmith.drills.collections import (
    Fruit,
    array_and_vec,
    build_fruit_basket,
    fill_fruit_basket,
    vec_loop,
)


def _given_basket():
    return {Fruit.APPLE: 4, Fruit.MANGO: 2, Fruit.LYCHEE: 5}


def test_at_least_three_types_of_fruits():
    assert len(build_fruit_basket()) >= 3


def test_at_least_five_fruits():
    assert sum(build_fruit_basket().values()) >= 5


def test_given_fruits_are_not_modified():
    basket = _given_basket()
    fill_fruit_basket(basket)
    assert basket[Fruit.APPLE] == 4
    assert basket[Fruit.MANGO] == 2
    assert basket[Fruit.LYCHEE] == 5


def test_at_least_five_types_of_fruits():
    basket = _given_basket()
    fill_fruit_basket(basket)
    assert len(basket) >= 5


def test_greater_than_eleven_fruits():
    basket = _given_basket()
    fill_fruit_basket(basket)
    assert sum(basket.values()) > 11


def test_missing_fruits_get_three():
    basket = _given_basket()
    fill_fruit_basket(basket)
    assert basket[Fruit.BANANA] == 3
    assert basket[Fruit.PINEAPPLE] == 3


def test_array_and_vec_similarity():
    a, v = array_and_vec()
    assert list(a) == v
    assert v == [10, 20, 30, 40]


def test_vec_loop():
    v = [2, 4, 6, 8, 10]
    assert vec_loop(v) == [4, 8, 12, 16, 20]


def test_vec_loop_leaves_input_alone():
    v = [1, 2, 3]
    result = vec_loop(v)
    assert v == [1, 2, 3]
    assert result == [2, 4, 6]