"""
Shared constants used across the application.

This module contains constants that need to be consistent across
different parts of the application (moderation, purge, validation, etc.).
"""

from enum import Enum


class Emoji(str, Enum):
    """Reaction symbols an entry can carry."""
    LIKE = "LIKE"
    LOVE = "LOVE"
    HAHA = "HAHA"
    WOW = "WOW"
    SAD = "SAD"
    ANGRY = "ANGRY"


# Emoji classification by tone. LOVE and WOW are unclassified on purpose:
# they are never rejected by the emoji rules.
POSITIVE_EMOJI = frozenset({Emoji.LIKE, Emoji.HAHA})
NEGATIVE_EMOJI = frozenset({Emoji.ANGRY, Emoji.SAD})

# Built-in lexicons, matched as whole words against entry title/content
POSITIVE_WORDS = ("love", "happy", "trust")
NEGATIVE_WORDS = ("sad", "fear", "lonely")

# Entries fetched per page when sweeping for a keyword purge
PURGE_PAGE_SIZE = 100

# Default and maximum page sizes for the entries listing endpoint
DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100
