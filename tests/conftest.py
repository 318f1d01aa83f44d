"""
tests/conftest.py
"""
from __future__ import annotations

from typing import Generator, List, Optional

import pytest
from flask import Flask
from flask.testing import FlaskClient

from blog import create_app
from blog.constants import Emoji
from blog.models import Blog, Entry
from blog.services import supabase_client


class FakeStore:
    """In-test stand-in for the Supabase tables, keyed by id."""

    def __init__(self) -> None:
        self.blogs: dict[int, Blog] = {}
        self.entries: dict[int, Entry] = {}
        self._next_blog_id = 1
        self._next_entry_id = 1
        self.fetches: List[Optional[int]] = []
        self.deletes: List[int] = []

    # -- helpers used by tests -------------------------------------------
    def add_blog(self, name: str = "blog", positive: bool = True) -> Blog:
        return self.save_blog(Blog(name=name, positive=positive))

    def add_entry(self, blog_id: int, title: str = "t", content: str = "c", emoji: Emoji = Emoji.WOW) -> Entry:
        return self.save_entry(Entry(blog_id=blog_id, title=title, content=content, emoji=emoji))

    # -- storage interface -----------------------------------------------
    def get_blog(self, blog_id: int) -> Blog | None:
        return self.blogs.get(blog_id)

    def list_blogs(self) -> List[Blog]:
        return [self.blogs[k] for k in sorted(self.blogs)]

    def save_blog(self, blog: Blog) -> Blog:
        if blog.id is None:
            blog.id = self._next_blog_id
            self._next_blog_id += 1
        self.blogs[blog.id] = blog
        return blog

    def delete_blog(self, blog_id: int) -> None:
        self.blogs.pop(blog_id, None)

    def get_entry(self, entry_id: int) -> Entry | None:
        return self.entries.get(entry_id)

    def list_entries(self, page: int = 0, size: int = 20):
        ids = sorted(self.entries)
        chunk = ids[page * size:(page + 1) * size]
        return [self.entries[i] for i in chunk], len(ids)

    def fetch_entries_page(self, after_id: Optional[int], page_size: int):
        self.fetches.append(after_id)
        ids = [i for i in sorted(self.entries) if after_id is None or i > after_id]
        page = [self.entries[i] for i in ids[:page_size]]
        next_token = page[-1].id if page else after_id
        return page, len(ids) > page_size, next_token

    def save_entry(self, entry: Entry) -> Entry:
        if entry.id is None:
            entry.id = self._next_entry_id
            self._next_entry_id += 1
        self.entries[entry.id] = entry
        return entry

    def delete_entry(self, entry_id: int) -> None:
        self.deletes.append(entry_id)
        self.entries.pop(entry_id, None)


_STORE_FUNCS = (
    "get_blog", "list_blogs", "save_blog", "delete_blog",
    "get_entry", "list_entries", "fetch_entries_page", "save_entry", "delete_entry",
)


@pytest.fixture
def store(monkeypatch: pytest.MonkeyPatch) -> FakeStore:
    """Replace every storage function with a FakeStore method."""
    fake = FakeStore()
    for name in _STORE_FUNCS:
        monkeypatch.setattr(supabase_client, name, getattr(fake, name))
    return fake


@pytest.fixture
def app(store: FakeStore) -> Flask:
    return create_app("blog.config.TestConfig")


@pytest.fixture
def client(app: Flask) -> Generator[FlaskClient, None, None]:
    with app.test_client() as client:
        yield client
