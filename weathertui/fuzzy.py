"""Fuzzy filtering of words: substring match, then closest by edit distance."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence


@dataclass(frozen=True)
class FilterItem:
    """A candidate word with its edit distance to the query."""

    word: str
    distance: int


def filter_words(words: Sequence[str], query: str) -> list[str]:
    """Return the words matching the query.

    Words containing the query (case-insensitively) win; otherwise the words
    sharing at least one letter with it and lying closest by edit distance.
    """
    if not words:
        return []
    query = query.lower()

    contains = contains_filter(words, query)
    if contains:
        return contains

    candidates = with_common_letters(words, query)
    if not candidates:
        return []

    return best_matches(
        FilterItem(word=w, distance=levenshtein_distance(w, query)) for w in candidates
    )


def contains_filter(words: Iterable[str], word: str) -> list[str]:
    """Return the words that contain the given word, ignoring case."""
    needle = word.lower()
    return [w for w in words if needle in w.lower()]


def starts_with_filter(words: Iterable[str], prefix: str) -> list[str]:
    """Return the words that start with the prefix, ignoring case."""
    prefix = prefix.lower()
    return [w for w in words if w.lower().startswith(prefix)]


def best_matches(items: Iterable[FilterItem]) -> list[str]:
    """Return the words of all items sharing the smallest distance."""
    ordered = sorted(items, key=lambda item: item.distance)
    if not ordered:
        raise ValueError("best_matches() needs at least one item")
    least = ordered[0].distance
    return [item.word for item in ordered if item.distance == least]


def levenshtein_distance(a: str, b: str) -> int:
    """Return the edit distance between two strings, measured in UTF-8 bytes."""
    ab, bb = a.encode("utf-8"), b.encode("utf-8")
    if not ab:
        return len(bb)
    if not bb:
        return len(ab)

    prev = list(range(len(bb) + 1))
    for i, ca in enumerate(ab, start=1):
        curr = [i]
        for j, cb in enumerate(bb, start=1):
            cost = 0 if ca == cb else 1
            curr.append(min(curr[j - 1] + 1, prev[j] + 1, prev[j - 1] + cost))
        prev = curr
    return prev[-1]


def with_common_letters(words: Iterable[str], word: str) -> list[str]:
    """Return the words sharing at least one letter a-z with the given word."""
    target = letter_set(word.lower())
    return [w for w in words if letter_set(w.lower()) & target]


def letter_set(word: str) -> int:
    """Return a bit mask of the lower-case letters a-z present in the word."""
    mask = 0
    for ch in word:
        if "a" <= ch <= "z":
            mask |= 1 << (ord(ch) - ord("a"))
    return mask