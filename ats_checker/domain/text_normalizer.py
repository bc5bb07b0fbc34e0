"""Tokenization shared by every pipeline stage.

All functions operate on content strings -- no file I/O.
"""

from __future__ import annotations

import re
from typing import List

_WORD_SPLIT = re.compile(r"[^A-Za-z0-9_]+")
_ALNUM = re.compile(r"[a-z0-9]")


def tokenize(text: str) -> List[str]:
    """Split *text* on runs of non-word characters, keeping case."""
    return [token for token in _WORD_SPLIT.split(text) if token]


def normalize(text: str) -> List[str]:
    """Return lowercase tokens of length >= 2 that contain an alphanumeric.

    ``"Node.js & CI/CD"`` becomes ``["node", "js", "ci", "cd"]``.
    """
    return [token for token in tokenize(text.lower()) if len(token) > 1 and _ALNUM.search(token)]


def word_count(text: str) -> int:
    """Number of whitespace-separated words in *text*."""
    return len(text.split())
