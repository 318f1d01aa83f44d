"""
tests/test_supabase_client.py
"""
from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from blog.services import supabase_client
from blog.utils.errors import StorageError


def _row(i: int, blog_id: int = 1) -> dict:
    return {"id": i, "blog_id": blog_id, "title": f"t{i}", "content": "c", "emoji": "LIKE", "date": None}


@pytest.fixture
def fake_client(monkeypatch: pytest.MonkeyPatch) -> MagicMock:
    client = MagicMock()
    monkeypatch.setattr(supabase_client, "_supabase_client", client)
    monkeypatch.setattr(supabase_client, "_supabase_admin", None)
    return client


def test_fetch_first_page_detects_next(fake_client):
    query = fake_client.table.return_value.select.return_value.order.return_value
    query.limit.return_value.execute.return_value = SimpleNamespace(data=[_row(i) for i in range(1, 4)])

    entries, has_next, token = supabase_client.fetch_entries_page(None, 2)

    assert [e.id for e in entries] == [1, 2]
    assert has_next is True
    assert token == 2
    query.limit.assert_called_once_with(3)
    query.gt.assert_not_called()


def test_fetch_later_page_uses_keyset(fake_client):
    query = fake_client.table.return_value.select.return_value.order.return_value
    query.gt.return_value.limit.return_value.execute.return_value = SimpleNamespace(data=[_row(5)])

    entries, has_next, token = supabase_client.fetch_entries_page(4, 2)

    query.gt.assert_called_once_with("id", 4)
    assert [e.id for e in entries] == [5]
    assert has_next is False
    assert token == 5


def test_get_blog_missing_returns_none(fake_client):
    chain = fake_client.table.return_value.select.return_value.eq.return_value.limit.return_value
    chain.execute.return_value = SimpleNamespace(data=[])
    assert supabase_client.get_blog(9) is None


def test_get_blog_maps_row(fake_client):
    chain = fake_client.table.return_value.select.return_value.eq.return_value.limit.return_value
    chain.execute.return_value = SimpleNamespace(data=[{"id": 9, "name": "n", "positive": False, "entry_count": 2}])
    blog = supabase_client.get_blog(9)
    assert blog.id == 9
    assert blog.positive is False
    assert blog.entry_count == 2


def test_delete_failure_raises_storage_error(fake_client):
    fake_client.table.return_value.delete.return_value.eq.return_value.execute.side_effect = RuntimeError("down")
    with pytest.raises(StorageError):
        supabase_client.delete_entry(1)


def test_unconfigured_client_raises(monkeypatch):
    monkeypatch.setattr(supabase_client, "_supabase_client", None)
    monkeypatch.setattr(supabase_client, "_supabase_admin", None)
    with pytest.raises(StorageError, match="not configured"):
        supabase_client.get_entry(1)
