"""
Plain records exchanged between the storage layer, the services and the API.

Rows coming back from Supabase are dicts with snake_case columns; the JSON
API uses the camelCase names (blogId, entryCount) the front end expects.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from blog.constants import Emoji


@dataclass
class Blog:
    name: str
    positive: bool
    id: Optional[int] = None
    entry_count: int = 0

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "Blog":
        return cls(
            id=row.get("id"),
            name=row.get("name") or "",
            positive=bool(row.get("positive")),
            entry_count=row.get("entry_count") or 0,
        )

    def to_row(self) -> Dict[str, Any]:
        row = {"name": self.name, "positive": self.positive, "entry_count": self.entry_count}
        if self.id is not None:
            row["id"] = self.id
        return row

    def to_json(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "positive": self.positive,
            "entryCount": self.entry_count,
        }


@dataclass
class Entry:
    blog_id: int
    title: str
    content: str
    emoji: Emoji
    id: Optional[int] = None
    date: Optional[str] = None

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "Entry":
        return cls(
            id=row.get("id"),
            blog_id=row.get("blog_id"),
            title=row.get("title") or "",
            content=row.get("content") or "",
            emoji=Emoji(row["emoji"]),
            date=row.get("date"),
        )

    def to_row(self) -> Dict[str, Any]:
        row = {
            "blog_id": self.blog_id,
            "title": self.title,
            "content": self.content,
            "emoji": self.emoji.value,
            "date": self.date,
        }
        if self.id is not None:
            row["id"] = self.id
        return row

    def to_json(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "blogId": self.blog_id,
            "title": self.title,
            "content": self.content,
            "emoji": self.emoji.value,
            "date": self.date,
        }


@dataclass
class PurgeReport:
    """Outcome of a keyword purge. `deleted` holds ids in deletion order."""
    keywords: List[str]
    blog_id: Optional[int] = None
    dry_run: bool = False
    pages: int = 0
    scanned: int = 0
    deleted: List[int] = field(default_factory=list)

    @property
    def message(self) -> str:
        msg = "Purged entries with keywords matching"
        if self.blog_id is not None:
            msg += f" from blog id: {self.blog_id}"
        return msg

    def to_json(self) -> Dict[str, Any]:
        return {
            "success": True,
            "message": self.message,
            "blogId": self.blog_id,
            "keywords": list(self.keywords),
            "dryRun": self.dry_run,
            "pages": self.pages,
            "scanned": self.scanned,
            "deleted": list(self.deleted),
        }
