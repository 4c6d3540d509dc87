import pytest

from weathertui.fuzzy import (
    FilterItem,
    best_matches,
    contains_filter,
    filter_words,
    letter_set,
    levenshtein_distance,
    starts_with_filter,
    with_common_letters,
)

CITIES = ["London", "Lisbon", "Paris", "Berlin", "New York"]


def test_empty_words():
    assert filter_words([], "abc") == []


def test_substring_match_ignores_case():
    assert filter_words(CITIES, "LON") == ["London"]
    assert filter_words(CITIES, "on") == ["London", "Lisbon"]


def test_empty_query_matches_everything():
    assert filter_words(CITIES, "") == CITIES


def test_falls_back_to_closest():
    assert filter_words(["Paris", "Berlin"], "parsi") == ["Paris"]


def test_no_common_letters():
    assert filter_words(["abc"], "xyz") == []


def test_contains_filter():
    assert contains_filter(CITIES, "YORK") == ["New York"]
    assert contains_filter(CITIES, "zzz") == []


def test_starts_with_filter():
    assert starts_with_filter(CITIES, "l") == ["London", "Lisbon"]
    assert starts_with_filter(CITIES, "ondon") == []


def test_best_matches_keeps_ties_in_order():
    items = [FilterItem("b", 2), FilterItem("a", 1), FilterItem("c", 1)]
    assert best_matches(items) == ["a", "c"]


def test_best_matches_empty_raises():
    with pytest.raises(ValueError):
        best_matches([])


@pytest.mark.parametrize("word", ["", "a", "London", "New York"])
def test_levenshtein_identity_and_empty(word):
    assert levenshtein_distance(word, word) == 0
    assert levenshtein_distance(word, "") == len(word)
    assert levenshtein_distance("", word) == len(word)


@pytest.mark.parametrize(
    "a,b,c",
    [("kitten", "sitting", "mitten"), ("paris", "parsi", "pairs"), ("abc", "", "cba")],
)
def test_levenshtein_symmetry_and_triangle(a, b, c):
    assert levenshtein_distance(a, b) == levenshtein_distance(b, a)
    assert levenshtein_distance(a, c) <= levenshtein_distance(a, b) + levenshtein_distance(b, c)


def test_levenshtein_worked_example():
    assert levenshtein_distance("kitten", "sitting") == 3


def test_levenshtein_bounded_by_longer():
    assert levenshtein_distance("abc", "xyzw") <= 4


def test_letter_set_ignores_non_letters():
    assert letter_set("a1!") == letter_set("a")
    assert letter_set("ab") == 0b11
    assert letter_set("ABC") == 0


def test_letter_set_union():
    assert letter_set("ab") | letter_set("cd") == letter_set("abcd")


def test_with_common_letters():
    assert with_common_letters(["Oslo", "Rome", "Kyiv"], "s") == ["Oslo"]
    assert with_common_letters(["Oslo"], "123") == []