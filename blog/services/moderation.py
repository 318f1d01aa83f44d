"""
Entry tone moderation.

Every blog is either positive or negative. An entry is rejected when its
emoji or its text belongs to the opposite tone: a positive blog refuses
ANGRY/SAD reactions and the words "sad", "fear", "lonely"; a negative blog
refuses LIKE/HAHA and "love", "happy", "trust".

Words are matched case-insensitively at word boundaries (\\b), so "sadness"
does not trip the "sad" rule.
"""

from __future__ import annotations
import logging
from typing import Callable, Optional

from flask import current_app, has_app_context

from blog.constants import Emoji, NEGATIVE_EMOJI, NEGATIVE_WORDS, POSITIVE_EMOJI, POSITIVE_WORDS
from blog.models import Blog, Entry
from blog.services.matcher import matches, whole_word
from blog.utils.errors import BlogNotFoundError, InvalidContentError, InvalidEmojiError
from blog.utils.validation import parse_emoji

logger = logging.getLogger(__name__)

ENTITY_NAME = "entry"


def _safe_log_info(message: str) -> None:
    if has_app_context():
        current_app.logger.info(message)
    else:
        logger.info(message)


def forbidden_for(blog_is_positive: bool) -> tuple[frozenset, tuple[str, ...]]:
    """Emoji set and lexicon an entry of this blog must not use."""
    if blog_is_positive:
        return NEGATIVE_EMOJI, NEGATIVE_WORDS
    return POSITIVE_EMOJI, POSITIVE_WORDS


def validate_entry_content(
    blog_is_positive: bool,
    emoji: Emoji | str | None,
    title: str | None,
    content: str | None,
) -> None:
    """
    Raise if the entry conflicts with its blog's polarity.

    Raises:
        InvalidEmojiError: emoji belongs to the opposing set
        InvalidContentError: title or content holds an opposing word
        BadRequestError: emoji is not a known reaction name
    """
    forbidden_emoji, forbidden_words = forbidden_for(blog_is_positive)

    if emoji is not None:
        emoji = parse_emoji(emoji)
    if emoji in forbidden_emoji:
        _safe_log_info(f"Rejected entry: emoji {emoji.value} not allowed")
        raise InvalidEmojiError(ENTITY_NAME)

    for word in forbidden_words:
        pattern = whole_word(word)
        if matches(title, pattern) or matches(content, pattern):
            _safe_log_info(f"Rejected entry: contains '{word}'")
            raise InvalidContentError(ENTITY_NAME)


def check_entry(entry: Entry, find_blog: Optional[Callable[[int], Optional[Blog]]] = None) -> Blog:
    """
    Validate an entry against its owning blog before it is written.

    Returns the owning blog so callers can reuse it.

    Raises:
        BlogNotFoundError: entry references a blog that does not exist
        InvalidEmojiError, InvalidContentError: see validate_entry_content
    """
    if find_blog is None:
        from blog.services.supabase_client import get_blog as find_blog

    blog = find_blog(entry.blog_id) if entry.blog_id is not None else None
    if blog is None:
        raise BlogNotFoundError(ENTITY_NAME)

    validate_entry_content(blog.positive, entry.emoji, entry.title, entry.content)
    return blog
