"""
Flask CLI commands for one-off administrative tasks.

Usage:
    flask purge-entries -k foo                     # Dry run (list matches)
    flask purge-entries -k foo -k "ba[rz]" --confirm
    flask purge-entries -k foo --blog-id 3 --confirm
"""

from __future__ import annotations

import click
from flask import current_app
from flask.cli import with_appcontext


@click.command("purge-entries")
@click.option("--keyword", "-k", "keywords", multiple=True, required=True,
              help="Regex pattern to match against entry title/content. Repeatable.")
@click.option("--blog-id", type=int, default=None,
              help="Only purge entries of this blog.")
@click.option("--confirm", is_flag=True, default=False,
              help="Actually delete entries. Without this flag, only lists matches (dry run).")
@with_appcontext
def purge_entries_command(keywords: tuple[str, ...], blog_id: int | None, confirm: bool) -> None:
    """Delete entries whose title or content matches any keyword."""
    from blog.services.purge import purge_entries
    from blog.utils.errors import InvalidPatternError, StorageError

    try:
        report = purge_entries(
            list(keywords),
            blog_id,
            page_size=current_app.config["PURGE_PAGE_SIZE"],
            dry_run=not confirm,
        )
    except InvalidPatternError as e:
        click.echo(f"Error: {e.message}")
        raise SystemExit(1)
    except StorageError as e:
        click.echo(f"Error: {e}")
        raise SystemExit(1)

    scope = f"blog {blog_id}" if blog_id is not None else "all blogs"
    click.echo(f"Scanned {report.scanned} entries in {scope} over {report.pages} page(s).")

    if not confirm:
        click.echo(f"{len(report.deleted)} entries match: {', '.join(map(str, report.deleted)) or '-'}")
        click.echo("\nDry run, nothing deleted. Use --confirm to delete.")
        return

    click.echo(f"\nDone. Deleted: {len(report.deleted)}")
