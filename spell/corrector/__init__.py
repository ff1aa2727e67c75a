# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from .corrector import SpellCorrector
from .errors import InvalidCharacter, NoSimilarWordFound, SpellError, WordSourceError
from .trie import Trie

try:
    from .version import __version__
except ImportError:
    __version__ = "UNKNOWN"

__all__ = [
    "InvalidCharacter",
    "NoSimilarWordFound",
    "SpellCorrector",
    "SpellError",
    "Trie",
    "WordSourceError",
    "__version__",
]
