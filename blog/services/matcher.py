"""
Case-insensitive pattern matching shared by moderation and keyword purge.

Patterns are regular expressions searched anywhere in the text (partial
match). Moderation wraps its lexicon words with word boundaries; purge uses
the caller's patterns as given.
"""

from __future__ import annotations
import re
from functools import lru_cache

from blog.utils.errors import InvalidPatternError


@lru_cache(maxsize=256)
def _compile(pattern: str) -> re.Pattern:
    try:
        return re.compile(pattern, re.IGNORECASE)
    except re.error as e:
        raise InvalidPatternError(pattern, str(e)) from e


def matches(text: str | None, pattern: str) -> bool:
    """Return True if `pattern` is found anywhere in `text`, ignoring case."""
    return _compile(pattern).search(text or "") is not None


def whole_word(word: str) -> str:
    """Pattern matching `word` only at word boundaries ("sad" but not "sadness")."""
    return r"\b" + re.escape(word) + r"\b"
