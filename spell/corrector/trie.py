# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from .errors import InvalidCharacter
from typing import Final, Iterator

import string

ALPHABET: Final = string.ascii_lowercase
NUM_LETTERS: Final = len(ALPHABET)


def letter_indexes(word: str) -> list[int]:
    """Map a lowercase word to child slot indexes, rejecting anything outside a-z."""
    indexes = []
    for position, character in enumerate(word):
        index = ord(character) - ord("a")
        if not 0 <= index < NUM_LETTERS:
            raise InvalidCharacter(word, character, position)
        indexes.append(index)
    return indexes


class TrieNode:
    """One node per letter; `count` is how many times the word ending here was inserted (0 if none)"""

    __slots__ = ("children", "count")

    def __init__(self) -> None:
        self.children: list[TrieNode | None] = [None] * NUM_LETTERS
        self.count = 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TrieNode):
            return NotImplemented
        return self.count == other.count and self.children == other.children

    __hash__ = None  # type: ignore[assignment]


class Trie:
    """Dictionary of lowercase words with occurrence counts

    `word_count` is the number of distinct words stored and `node_count` the number of
    allocated nodes, root included.
    """

    def __init__(self) -> None:
        self.root = TrieNode()
        self.word_count = 0
        self.node_count = 1

    def insert(self, word: str) -> None:
        word = word.lower()
        node = self.root
        for index in letter_indexes(word):
            child = node.children[index]
            if child is None:
                child = node.children[index] = TrieNode()
                self.node_count += 1
            node = child
        if node.count == 0:
            self.word_count += 1
        node.count += 1

    def lookup(self, word: str) -> int | None:
        """Occurrence count of `word`, or None if it was never inserted"""
        node: TrieNode | None = self.root
        for index in letter_indexes(word.lower()):
            assert node is not None
            node = node.children[index]
            if node is None:
                return None
        assert node is not None
        return node.count or None

    def items(self) -> Iterator[tuple[str, int]]:
        """Stored words and their counts in alphabetical order"""
        stack: list[tuple[TrieNode, str]] = [(self.root, "")]
        while stack:
            node, prefix = stack.pop()
            if node.count > 0:
                yield prefix, node.count
            # push in reverse so "a" is visited first
            for index in reversed(range(NUM_LETTERS)):
                child = node.children[index]
                if child is not None:
                    stack.append((child, prefix + ALPHABET[index]))

    def words(self) -> list[str]:
        return [word for word, _ in self.items()]

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.lookup(word) is not None

    def __len__(self) -> int:
        return self.word_count

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Trie):
            return NotImplemented
        return (
            self.word_count == other.word_count and self.node_count == other.node_count and self.root == other.root
        )

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "".join(word + "\n" for word in self.words())

    def __repr__(self) -> str:
        return f"Trie(word_count={self.word_count}, node_count={self.node_count})"
