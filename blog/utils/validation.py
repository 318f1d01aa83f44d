"""
Request payload validation and normalization.

Turns incoming JSON bodies into `Blog`/`Entry` records and keyword lists,
trimming and bounding text fields. Every failure raises `BadRequestError`
with a reason code the client can act on.
"""

from __future__ import annotations
import re
from typing import Any, Dict, List, Optional

from blog.constants import Emoji
from blog.models import Blog, Entry
from blog.utils.errors import BadRequestError

MAX_NAME_LEN = 120
MAX_TITLE_LEN = 200
MAX_CONTENT_LEN = 20000
MAX_KEYWORDS = 100
MAX_KEYWORD_LEN = 200


def _control_strip(text: str, max_len: int, entity_name: str, field: str) -> str:
    """
    Strip surrounding whitespace and drop control chars.
    Newlines and tabs in the body are kept. Text longer than `max_len` is
    rejected rather than cut, since it is stored as given.
    """
    if not isinstance(text, str):
        return ""
    t = re.sub(r"[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]", "", text).strip()
    if len(t) > max_len:
        raise BadRequestError(f"{field} must be at most {max_len} characters", entity_name, "invalidPayload")
    return t


def _require_json(data: Any, entity_name: str) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise BadRequestError("Invalid request body", entity_name, "invalidPayload")
    return data


def parse_id(value: Any, entity_name: str, field: str = "id") -> Optional[int]:
    """Coerce an optional id to int. Booleans and non-numeric strings are rejected."""
    if value is None:
        return None
    if isinstance(value, bool):
        raise BadRequestError(f"Invalid {field}", entity_name, "invalidPayload")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise BadRequestError(f"Invalid {field}", entity_name, "invalidPayload")


def parse_blog(data: Any) -> Blog:
    """
    Build a Blog from a JSON body.

    Required: name (non-empty), positive (boolean). Optional: id, entryCount.
    """
    data = _require_json(data, "blog")
    name = _control_strip(data.get("name", ""), MAX_NAME_LEN, "blog", "name")
    if not name:
        raise BadRequestError("Blog name is required", "blog", "invalidPayload")

    positive = data.get("positive")
    if not isinstance(positive, bool):
        raise BadRequestError("positive must be true or false", "blog", "invalidPayload")

    entry_count = data.get("entryCount", 0)
    if isinstance(entry_count, bool) or not isinstance(entry_count, int) or entry_count < 0:
        raise BadRequestError("Invalid entryCount", "blog", "invalidPayload")

    return Blog(
        id=parse_id(data.get("id"), "blog"),
        name=name,
        positive=positive,
        entry_count=entry_count,
    )


def parse_emoji(value: Any) -> Emoji:
    """Accept an Emoji or its name in any case; anything else is a bad request."""
    if isinstance(value, Emoji):
        return value
    try:
        return Emoji(str(value or "").strip().upper())
    except ValueError:
        allowed = ", ".join(e.value for e in Emoji)
        raise BadRequestError(f"Invalid emoji. Must be one of: {allowed}", "entry", "invalidPayload")


def parse_entry(data: Any) -> Entry:
    """
    Build an Entry from a JSON body.

    Required: blogId, title, content, emoji. Optional: id, date.
    """
    data = _require_json(data, "entry")
    blog_id = parse_id(data.get("blogId"), "entry", "blogId")
    if blog_id is None:
        raise BadRequestError("blogId is required", "entry", "invalidPayload")

    title = _control_strip(data.get("title", ""), MAX_TITLE_LEN, "entry", "title")
    if not title:
        raise BadRequestError("Title is required", "entry", "invalidPayload")

    raw_content = data.get("content", "")
    if not isinstance(raw_content, str) or not raw_content.strip():
        raise BadRequestError("Content is required", "entry", "invalidPayload")
    content = _control_strip(raw_content, MAX_CONTENT_LEN, "entry", "content")

    date = data.get("date")
    if date is not None and not isinstance(date, str):
        raise BadRequestError("Invalid date", "entry", "invalidPayload")

    return Entry(
        id=parse_id(data.get("id"), "entry"),
        blog_id=blog_id,
        title=title,
        content=content,
        emoji=parse_emoji(data.get("emoji")),
        date=date,
    )


def parse_keywords(data: Any) -> List[str]:
    """
    Extract the keyword patterns from `{"keywords": [...]}`.

    The list must be non-empty and hold only non-empty strings. Order is kept;
    patterns are not compiled here (an invalid one fails during the purge).
    """
    data = _require_json(data, "blog")
    keywords = data.get("keywords")
    if not isinstance(keywords, list) or not keywords:
        raise BadRequestError("keywords must be a non-empty list", "blog", "invalidKeywords")
    if len(keywords) > MAX_KEYWORDS:
        raise BadRequestError(f"At most {MAX_KEYWORDS} keywords allowed", "blog", "invalidKeywords")

    cleaned = []
    for keyword in keywords:
        if not isinstance(keyword, str) or not keyword.strip():
            raise BadRequestError("keywords must be non-empty strings", "blog", "invalidKeywords")
        if len(keyword) > MAX_KEYWORD_LEN:
            raise BadRequestError("Keyword too long", "blog", "invalidKeywords")
        cleaned.append(keyword)
    return cleaned


def parse_page_args(page: Any, size: Any, default_size: int, max_size: int) -> tuple[int, int]:
    """Coerce ?page=&size= query values; out-of-range values fall back to defaults."""
    try:
        p = int(page) if page is not None else 0
    except (TypeError, ValueError):
        p = 0
    try:
        s = int(size) if size is not None else default_size
    except (TypeError, ValueError):
        s = default_size
    if p < 0:
        p = 0
    if s <= 0 or s > max_size:
        s = default_size if s <= 0 else max_size
    return p, s
