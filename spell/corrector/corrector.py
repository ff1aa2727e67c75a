# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from . import envdefault
from .edits import best_match, expand
from .errors import NoSimilarWordFound
from .trie import Trie
from .wordsource import load_dictionary
from typing import Final

import logging

DEFAULT_MAX_DISTANCE: Final = envdefault.SPELL_MAX_DISTANCE


class SpellCorrector:
    """Suggests the most frequent dictionary word closest to a possibly misspelled word

    The dictionary is only read, so one instance may serve concurrent callers.
    """

    def __init__(self, dictionary: Trie, max_distance: int | None = None) -> None:
        if max_distance is None:
            max_distance = DEFAULT_MAX_DISTANCE
        if max_distance < 0:
            raise ValueError(f"max_distance must be non-negative, got {max_distance}")
        self.log = logging.getLogger("SpellCorrector")
        self.dictionary = dictionary
        self.max_distance = max_distance

    @classmethod
    def from_source(
        cls,
        location: str | None = None,
        max_distance: int | None = None,
        timeout: int | None = None,
    ) -> SpellCorrector:
        """Build a corrector from a word list file path or http(s) URL"""
        if location is None:
            location = envdefault.SPELL_DICTIONARY
        if not location:
            raise ValueError("No word list location given and SPELL_DICTIONARY is not set")
        return cls(load_dictionary(location, timeout=timeout), max_distance=max_distance)

    def correct(self, input_word: str) -> str:
        """Return the lowercased `input_word` if known, otherwise the closest most frequent dictionary word.

        Raises NoSimilarWordFound when nothing is within `max_distance` edits and
        InvalidCharacter when the word has characters outside a-z.
        """
        word = input_word.lower()
        if self.dictionary.lookup(word) is not None:
            return word

        sources = frozenset([word])
        for distance in range(1, self.max_distance + 1):
            candidates = expand(self.dictionary, sources)
            self.log.debug(
                "%r distance %d: %d found, %d in frontier",
                word,
                distance,
                len(candidates.found),
                len(candidates.frontier),
            )
            if candidates.found:
                similar = best_match(self.dictionary, candidates.found)
                assert similar is not None
                self.log.debug("correcting %r to %r", word, similar)
                return similar
            sources = candidates.frontier

        raise NoSimilarWordFound(word, self.max_distance)

    def suggest(self, input_word: str) -> str | None:
        """Like correct() but returns None when no similar word is found"""
        try:
            return self.correct(input_word)
        except NoSimilarWordFound:
            return None
