"""
Supabase client initialization and storage helpers.

Provides centralized access to the `blogs` and `entries` tables. Services
never talk to Supabase directly; they go through the functions below, which
turn rows into `Blog`/`Entry` records and raise `StorageError` on failure.
"""

from __future__ import annotations
from typing import Optional, List, Tuple
from flask import current_app, has_app_context
from supabase import create_client, Client

from blog.models import Blog, Entry
from blog.utils.errors import StorageError


def _safe_log_error(message: str) -> None:
    """
    Log error message only if Flask app context is available.

    This allows functions to be called from tests without app context.
    """
    try:
        if has_app_context():
            current_app.logger.error(message)
    except (ImportError, RuntimeError):
        pass


# Global client instances (initialized once per app)
_supabase_client: Optional[Client] = None  # User client (anon key)
_supabase_admin: Optional[Client] = None   # Admin client (service role key)

_blogs_table = "blogs"
_entries_table = "entries"


def init_supabase(app) -> None:
    """
    Initialize Supabase clients with app config.
    Creates two clients:
    - Regular client with anon key (reads)
    - Admin client with service role key (writes and deletes, bypasses RLS)

    Call this from the Flask app factory.
    """
    global _supabase_client, _supabase_admin, _blogs_table, _entries_table

    _blogs_table = app.config.get("BLOGS_TABLE", "blogs")
    _entries_table = app.config.get("ENTRIES_TABLE", "entries")

    url = app.config.get("SUPABASE_URL", "")
    anon_key = app.config.get("SUPABASE_ANON_KEY", "")
    service_key = app.config.get("SUPABASE_SERVICE_ROLE_KEY", "")

    if not url or not anon_key:
        app.logger.warning("Supabase URL or ANON_KEY not configured. Storage will be unavailable.")
        _supabase_client = None
        _supabase_admin = None
        return

    try:
        _supabase_client = create_client(url, anon_key)
        app.logger.info("Supabase client initialized successfully")

        if service_key:
            _supabase_admin = create_client(url, service_key)
            app.logger.info("Supabase admin client initialized successfully")
        else:
            app.logger.warning("SUPABASE_SERVICE_ROLE_KEY not configured. Writes use the anon client.")

    except Exception as e:
        app.logger.error(f"Failed to initialize Supabase client: {e}")
        _supabase_client = None
        _supabase_admin = None


def get_client() -> Optional[Client]:
    """Get the global Supabase client instance (user client with anon key)."""
    return _supabase_client


def get_admin_client() -> Optional[Client]:
    """Get the admin Supabase client instance, falling back to the anon client."""
    return _supabase_admin or _supabase_client


def _require(client: Optional[Client]) -> Client:
    if client is None:
        raise StorageError("Database not configured")
    return client


# ============================================================================
# Blogs
# ============================================================================

def get_blog(blog_id: int) -> Blog | None:
    """Get a single blog by id, or None if it does not exist."""
    client = _require(get_client())
    try:
        response = client.table(_blogs_table).select("*").eq("id", blog_id).limit(1).execute()
    except Exception as e:
        _safe_log_error(f"Error getting blog {blog_id}: {e}")
        raise StorageError(f"Could not load blog {blog_id}") from e
    return Blog.from_row(response.data[0]) if response.data else None


def list_blogs() -> List[Blog]:
    """Get all blogs ordered by id."""
    client = _require(get_client())
    try:
        response = client.table(_blogs_table).select("*").order("id").execute()
    except Exception as e:
        _safe_log_error(f"Error listing blogs: {e}")
        raise StorageError("Could not list blogs") from e
    return [Blog.from_row(row) for row in response.data or []]


def save_blog(blog: Blog) -> Blog:
    """Insert a blog (no id) or update it (id set). Returns the stored record."""
    client = _require(get_admin_client())
    row = blog.to_row()
    try:
        if blog.id is None:
            response = client.table(_blogs_table).insert(row).execute()
        else:
            response = client.table(_blogs_table).update(row).eq("id", blog.id).execute()
    except Exception as e:
        _safe_log_error(f"Error saving blog {blog.id}: {e}")
        raise StorageError("Could not save blog") from e

    if not response.data:
        raise StorageError("Could not save blog")
    return Blog.from_row(response.data[0])


def delete_blog(blog_id: int) -> None:
    client = _require(get_admin_client())
    try:
        client.table(_blogs_table).delete().eq("id", blog_id).execute()
    except Exception as e:
        _safe_log_error(f"Error deleting blog {blog_id}: {e}")
        raise StorageError(f"Could not delete blog {blog_id}") from e


# ============================================================================
# Entries
# ============================================================================

def get_entry(entry_id: int) -> Entry | None:
    client = _require(get_client())
    try:
        response = client.table(_entries_table).select("*").eq("id", entry_id).limit(1).execute()
    except Exception as e:
        _safe_log_error(f"Error getting entry {entry_id}: {e}")
        raise StorageError(f"Could not load entry {entry_id}") from e
    return Entry.from_row(response.data[0]) if response.data else None


def list_entries(page: int = 0, size: int = 20) -> Tuple[List[Entry], int]:
    """
    Get one page of entries ordered by id.

    Args:
        page: Zero-based page number
        size: Entries per page

    Returns:
        (entries, total_count)
    """
    client = _require(get_client())
    start = page * size
    try:
        response = (client
                    .table(_entries_table)
                    .select("*", count="exact")
                    .order("id")
                    .range(start, start + size - 1)
                    .execute())
    except Exception as e:
        _safe_log_error(f"Error listing entries: {e}")
        raise StorageError("Could not list entries") from e
    entries = [Entry.from_row(row) for row in response.data or []]
    return entries, response.count or 0


def fetch_entries_page(after_id: Optional[int], page_size: int) -> Tuple[List[Entry], bool, Optional[int]]:
    """
    Keyset-paginated sweep over all entries.

    Pages are ordered by id and continue strictly after `after_id`, so rows
    deleted between fetches never shift later pages. One extra row is
    requested to learn whether another page exists.

    Returns:
        (entries, has_next, next_token) where next_token is the last id seen
    """
    client = _require(get_client())
    try:
        query = client.table(_entries_table).select("*").order("id")
        if after_id is not None:
            query = query.gt("id", after_id)
        response = query.limit(page_size + 1).execute()
    except Exception as e:
        _safe_log_error(f"Error fetching entries after {after_id}: {e}")
        raise StorageError("Could not fetch entries") from e

    rows = response.data or []
    has_next = len(rows) > page_size
    entries = [Entry.from_row(row) for row in rows[:page_size]]
    next_token = entries[-1].id if entries else after_id
    return entries, has_next, next_token


def save_entry(entry: Entry) -> Entry:
    """Insert an entry (no id) or update it (id set). Returns the stored record."""
    client = _require(get_admin_client())
    row = entry.to_row()
    try:
        if entry.id is None:
            response = client.table(_entries_table).insert(row).execute()
        else:
            response = client.table(_entries_table).update(row).eq("id", entry.id).execute()
    except Exception as e:
        _safe_log_error(f"Error saving entry {entry.id}: {e}")
        raise StorageError("Could not save entry") from e

    if not response.data:
        raise StorageError("Could not save entry")
    return Entry.from_row(response.data[0])


def delete_entry(entry_id: int) -> None:
    client = _require(get_admin_client())
    try:
        client.table(_entries_table).delete().eq("id", entry_id).execute()
    except Exception as e:
        _safe_log_error(f"Error deleting entry {entry_id}: {e}")
        raise StorageError(f"Could not delete entry {entry_id}") from e
