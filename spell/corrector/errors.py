# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from requests import Response


class SpellError(Exception):
    """Spelling corrector error"""


class NoSimilarWordFound(SpellError):
    """No dictionary word within the maximum edit distance"""

    def __init__(self, word: str, max_distance: int) -> None:
        super().__init__(word, max_distance)
        self.word = word
        self.max_distance = max_distance

    def __str__(self) -> str:
        return f"no similar word found for {self.word!r} within edit distance {self.max_distance}"


class InvalidCharacter(SpellError, ValueError):
    """Word contains a character outside the lowercase a-z alphabet"""

    def __init__(self, word: str, character: str, position: int) -> None:
        super().__init__(word, character, position)
        self.word = word
        self.character = character
        self.position = position

    def __str__(self) -> str:
        return f"invalid character {self.character!r} at position {self.position} in {self.word!r}"


class WordSourceError(SpellError):
    """Word list could not be fetched"""

    def __init__(self, response: Response, status: int = 520) -> None:
        super().__init__(response.text, status)
        self.response = response
        self.status = status

    def __str__(self) -> str:
        response_text, status = self.args
        return f"{response_text}, status={status}"
