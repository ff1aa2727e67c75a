# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
"""
Single-edit operators and one generation of the breadth-first correction search
"""
from __future__ import annotations

from .trie import ALPHABET, Trie
from typing import Iterable, Iterator, NamedTuple


class Candidates(NamedTuple):
    found: frozenset[str] = frozenset()
    frontier: frozenset[str] = frozenset()


def _splits(word: str) -> list[tuple[str, str]]:
    return [(word[:i], word[i:]) for i in range(len(word) + 1)]


def deletions(word: str) -> Iterator[str]:
    """All strings with one character of `word` removed."""
    return (left + right[1:] for left, right in _splits(word) if right)


def transpositions(word: str) -> Iterator[str]:
    """All strings with two adjacent characters of `word` swapped."""
    return (left + right[1] + right[0] + right[2:] for left, right in _splits(word) if len(right) > 1)


def substitutions(word: str) -> Iterator[str]:
    """All strings with one character of `word` replaced by a letter, the character itself included."""
    return (left + c + right[1:] for left, right in _splits(word) if right for c in ALPHABET)


def insertions(word: str) -> Iterator[str]:
    """All strings with one letter inserted into `word`."""
    return (left + c + right for left, right in _splits(word) for c in ALPHABET)


EDIT_OPERATORS = (deletions, transpositions, substitutions, insertions)


def single_edits(word: str) -> Iterator[str]:
    for operator in EDIT_OPERATORS:
        yield from operator(word)


def expand(dictionary: Trie, sources: Iterable[str]) -> Candidates:
    """Apply every edit operator to every source and split the results by dictionary membership."""
    found: set[str] = set()
    frontier: set[str] = set()
    for source in sources:
        for candidate in single_edits(source):
            if candidate in found or candidate in frontier:
                continue
            if dictionary.lookup(candidate) is not None:
                found.add(candidate)
            else:
                frontier.add(candidate)
    return Candidates(found=frozenset(found), frontier=frozenset(frontier))


def best_match(dictionary: Trie, found: Iterable[str]) -> str | None:
    """Most frequent word in `found`; among equal counts the alphabetically first one wins."""
    best = None
    best_count = 0
    for word in sorted(found):
        count = dictionary.lookup(word) or 0
        if count > best_count:
            best, best_count = word, count
    return best
