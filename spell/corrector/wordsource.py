# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
"""
Populating a dictionary from whitespace-delimited word lists
"""
from __future__ import annotations

from . import envdefault
from .errors import WordSourceError
from .session import get_requests_session
from .trie import Trie
from contextlib import contextmanager
from typing import Iterable, Iterator

import logging

log = logging.getLogger("spell_source")

REMOTE_SCHEMES = ("http://", "https://")


def iter_tokens(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from line.split()


def populate(dictionary: Trie, tokens: Iterable[str]) -> int:
    """Insert every token, returning how many were inserted"""
    inserted = 0
    for token in tokens:
        dictionary.insert(token)
        inserted += 1
    return inserted


@contextmanager
def open_word_list(location: str, *, timeout: int | None = None, encoding: str = "utf-8") -> Iterator[Iterable[str]]:
    """Lines of a word list stored in a local file or behind an http(s) URL"""
    if location.startswith(REMOTE_SCHEMES):
        if timeout is None:
            timeout = envdefault.SPELL_REQUEST_TIMEOUT
        with get_requests_session(timeout=timeout) as session:
            log.debug("GET %s", location)
            response = session.get(location)
            if not str(response.status_code).startswith("2"):
                raise WordSourceError(response, status=response.status_code)
            response.encoding = response.encoding or encoding
            yield response.text.splitlines()
    else:
        with open(location, encoding=encoding) as fp:
            yield fp


def load_dictionary(location: str, *, timeout: int | None = None) -> Trie:
    dictionary = Trie()
    with open_word_list(location, timeout=timeout) as lines:
        tokens = populate(dictionary, iter_tokens(lines))
    log.debug(
        "loaded %d tokens from %r: %d words, %d nodes",
        tokens,
        location,
        dictionary.word_count,
        dictionary.node_count,
    )
    return dictionary
