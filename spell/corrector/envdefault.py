# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
"""
Configurable parameters via environment variables
"""

import os

SPELL_DICTIONARY = os.environ.get("SPELL_DICTIONARY")
SPELL_MAX_DISTANCE = int(os.environ.get("SPELL_MAX_DISTANCE", "2"))
SPELL_REQUEST_TIMEOUT = int(os.environ["SPELL_REQUEST_TIMEOUT"]) if os.environ.get("SPELL_REQUEST_TIMEOUT") else None
