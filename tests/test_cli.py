"""
tests/test_cli.py
"""
from __future__ import annotations


def test_purge_entries_dry_run_by_default(app, store):
    blog = store.add_blog("a")
    e = store.add_entry(blog.id, title="foo")

    result = app.test_cli_runner().invoke(args=["purge-entries", "-k", "foo"])

    assert result.exit_code == 0
    assert "Dry run" in result.output
    assert str(e.id) in result.output
    assert store.deletes == []


def test_purge_entries_confirm_deletes(app, store):
    a = store.add_blog("a")
    b = store.add_blog("b")
    store.add_entry(a.id, title="foo")
    keep = store.add_entry(b.id, title="foo")

    result = app.test_cli_runner().invoke(
        args=["purge-entries", "-k", "foo", "--blog-id", str(a.id), "--confirm"]
    )

    assert result.exit_code == 0
    assert "Deleted: 1" in result.output
    assert set(store.entries) == {keep.id}


def test_purge_entries_invalid_pattern_exits_nonzero(app, store):
    blog = store.add_blog("a")
    store.add_entry(blog.id, title="x")

    result = app.test_cli_runner().invoke(args=["purge-entries", "-k", "(", "--confirm"])

    assert result.exit_code == 1
    assert "Invalid keyword pattern" in result.output


def test_purge_entries_requires_keyword(app, store):
    result = app.test_cli_runner().invoke(args=["purge-entries"])
    assert result.exit_code != 0
