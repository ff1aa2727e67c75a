# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from pathlib import Path
from spell.corrector.errors import InvalidCharacter, WordSourceError
from spell.corrector.trie import Trie
from spell.corrector.wordsource import iter_tokens, load_dictionary, open_word_list, populate
from unittest import mock

import pytest


class MockResponse:
    def __init__(self, status_code: int, text: str = "", encoding: str | None = "utf-8") -> None:
        self.status_code = status_code
        self.text = text
        self.encoding = encoding
        self.reason = ""


def mock_session(response: MockResponse) -> mock.MagicMock:
    session = mock.MagicMock()
    session.__enter__.return_value = session
    session.get.return_value = response
    return session


def test_iter_tokens() -> None:
    lines = ["cat  Cat\n", "\tbat\n", "", "   \n", "cap"]
    assert list(iter_tokens(lines)) == ["cat", "Cat", "bat", "cap"]


def test_populate() -> None:
    trie = Trie()
    assert populate(trie, ["cat", "Cat", "bat"]) == 3
    assert trie.lookup("cat") == 2
    assert trie.word_count == 2


def test_populate_stops_at_invalid_token() -> None:
    trie = Trie()
    with pytest.raises(InvalidCharacter):
        populate(trie, ["cat", "c4t", "bat"])
    assert trie.words() == ["cat"]


def test_load_dictionary_from_file(tmp_path: Path) -> None:
    word_list = tmp_path / "words.txt"
    word_list.write_text("the quick brown fox\njumps over the lazy dog\n")
    trie = load_dictionary(str(word_list))
    assert trie.lookup("the") == 2
    assert trie.word_count == 8


def test_load_dictionary_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_dictionary(str(tmp_path / "missing.txt"))


def test_load_dictionary_from_url() -> None:
    session = mock_session(MockResponse(200, "apple banana\napple\n"))
    with mock.patch("spell.corrector.wordsource.get_requests_session", return_value=session) as get_session:
        trie = load_dictionary("https://example.com/words.txt", timeout=5)
    get_session.assert_called_once_with(timeout=5)
    session.get.assert_called_once_with("https://example.com/words.txt")
    assert trie.lookup("apple") == 2
    assert trie.lookup("banana") == 1


def test_url_timeout_from_environment() -> None:
    session = mock_session(MockResponse(200, "apple\n"))
    with mock.patch("spell.corrector.wordsource.get_requests_session", return_value=session) as get_session:
        with mock.patch("spell.corrector.envdefault.SPELL_REQUEST_TIMEOUT", 7):
            with open_word_list("http://example.com/words.txt") as lines:
                assert list(lines) == ["apple"]
    get_session.assert_called_once_with(timeout=7)


@pytest.mark.parametrize("status_code", [404, 500, 302])
def test_url_error_status(status_code: int) -> None:
    session = mock_session(MockResponse(status_code, "nope"))
    with mock.patch("spell.corrector.wordsource.get_requests_session", return_value=session):
        with pytest.raises(WordSourceError) as excinfo:
            load_dictionary("https://example.com/words.txt")
    assert excinfo.value.status == status_code
    assert "nope" in str(excinfo.value)
