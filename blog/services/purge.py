"""
Keyword purge: bulk-delete entries whose title or content matches any of a
caller-supplied set of patterns, optionally restricted to one blog.

Patterns are regular expressions searched case-insensitively anywhere in the
text. Unlike moderation there is no word-boundary wrapping, so "foo" also
matches "food".

Entries are streamed page by page from the storage layer and each match is
deleted as soon as it is found. There is no transaction: if a pattern turns
out to be invalid the purge stops there and earlier deletions stay deleted.
"""

from __future__ import annotations
import logging
import threading
from typing import Callable, Iterator, List, Optional, Sequence, Tuple

from flask import current_app, has_app_context

from blog.constants import PURGE_PAGE_SIZE
from blog.models import Entry, PurgeReport
from blog.services import supabase_client
from blog.services.matcher import matches

logger = logging.getLogger(__name__)

FetchPage = Callable[[Optional[int], int], Tuple[List[Entry], bool, Optional[int]]]
DeleteEntry = Callable[[int], None]

# Serializes purges within this process; two sweeps over the same table
# would otherwise race on the same deletes.
_purge_lock = threading.Lock()


def _logger() -> logging.Logger:
    return current_app.logger if has_app_context() else logger


def iter_entries(fetch_page: FetchPage, page_size: int = PURGE_PAGE_SIZE, pages: Optional[list] = None) -> Iterator[Entry]:
    """
    Lazily yield every entry from a paginated source.

    Each page is fetched exactly once and the cursor only moves forward.
    If `pages` is given, the size of every fetched page is appended to it.
    """
    token = None
    while True:
        entries, has_next, token = fetch_page(token, page_size)
        if pages is not None:
            pages.append(len(entries))
        yield from entries
        if not has_next:
            break


def entry_matches(entry: Entry, keywords: Sequence[str]) -> Optional[str]:
    """Return the first keyword found in the entry's title or content, else None."""
    for keyword in keywords:
        if matches(entry.title, keyword) or matches(entry.content, keyword):
            return keyword
    return None


def purge_entries(
    keywords: Sequence[str],
    blog_id: Optional[int] = None,
    *,
    fetch_page: Optional[FetchPage] = None,
    delete_entry: Optional[DeleteEntry] = None,
    page_size: int = PURGE_PAGE_SIZE,
    dry_run: bool = False,
) -> PurgeReport:
    """
    Delete every entry whose title or content matches one of `keywords`.

    Args:
        keywords: Non-empty sequence of regex patterns
        blog_id: Only consider entries of this blog (None for all blogs)
        fetch_page: Page source, defaults to the Supabase entries table
        delete_entry: Deletion callback, defaults to the Supabase entries table
        page_size: Entries per fetched page
        dry_run: Report matches without deleting them

    Returns:
        PurgeReport listing deleted (or, on dry run, matching) entry ids

    Raises:
        ValueError: keywords is empty or holds non-string items
        InvalidPatternError: a keyword is not a valid regex (raised when
            first evaluated; deletions already issued are kept)
        StorageError: propagated unchanged from fetch/delete
    """
    if isinstance(keywords, str) or not keywords:
        raise ValueError("keywords must be a non-empty list of patterns")
    if not all(isinstance(k, str) for k in keywords):
        raise ValueError("keywords must be strings")

    fetch_page = fetch_page or supabase_client.fetch_entries_page
    delete_entry = delete_entry or supabase_client.delete_entry
    log = _logger()

    report = PurgeReport(keywords=list(keywords), blog_id=blog_id, dry_run=dry_run)
    page_sizes: list = []

    with _purge_lock:
        try:
            for entry in iter_entries(fetch_page, page_size, pages=page_sizes):
                if blog_id is not None and entry.blog_id != blog_id:
                    continue
                report.scanned += 1

                keyword = entry_matches(entry, report.keywords)
                if keyword is None:
                    continue

                if not dry_run:
                    delete_entry(entry.id)
                log.debug(f"{'Matched' if dry_run else 'Deleted'} entry: {entry.id} ({keyword!r})")
                report.deleted.append(entry.id)
        finally:
            report.pages = len(page_sizes)

    log.info(
        f"Purge finished: {len(report.deleted)} of {report.scanned} entries "
        f"{'matched' if dry_run else 'deleted'} over {report.pages} page(s), blog_id={blog_id}"
    )
    return report
