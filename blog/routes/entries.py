"""
Entry resource routes.

Creates and updates go through tone moderation first; a rejected entry is
never written.
"""

from __future__ import annotations
from flask import Blueprint, request, jsonify
from blog.constants import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from blog.services import supabase_client
from blog.services.moderation import check_entry
from blog.utils.errors import BadRequestError, NotFoundError, log_info
from blog.utils.validation import parse_entry, parse_page_args

ENTITY_NAME = "entry"

entries_bp = Blueprint("entries", __name__)


@entries_bp.route("/entries", methods=["POST"])
def create_entry():
    """Create an entry. 400 if it carries an id, its blog is missing, or its tone conflicts."""
    entry = parse_entry(request.get_json(silent=True))
    if entry.id is not None:
        raise BadRequestError("A new entry cannot already have an ID", ENTITY_NAME, "idexists")

    check_entry(entry, find_blog=supabase_client.get_blog)
    result = supabase_client.save_entry(entry)
    log_info("Entry created", entry_id=result.id, blog_id=result.blog_id)

    resp = jsonify(result.to_json())
    resp.status_code = 201
    resp.headers["Location"] = f"/api/entries/{result.id}"
    return resp


@entries_bp.route("/entries", methods=["PUT"])
def update_entry():
    entry = parse_entry(request.get_json(silent=True))
    if entry.id is None:
        raise BadRequestError("Invalid id", ENTITY_NAME, "idnull")
    if supabase_client.get_entry(entry.id) is None:
        raise NotFoundError("Entry not found", ENTITY_NAME, "notfound")

    check_entry(entry, find_blog=supabase_client.get_blog)
    result = supabase_client.save_entry(entry)
    return jsonify(result.to_json()), 200


@entries_bp.route("/entries", methods=["GET"])
def list_entries():
    """
    One page of entries.

    Query: ?page=<zero-based>&size=<1..100>
    The total number of entries is returned in the X-Total-Count header.
    """
    page, size = parse_page_args(
        request.args.get("page"), request.args.get("size"), DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
    )
    entries, total = supabase_client.list_entries(page, size)
    resp = jsonify([e.to_json() for e in entries])
    resp.headers["X-Total-Count"] = str(total)
    return resp


@entries_bp.route("/entries/<int:entry_id>", methods=["GET"])
def get_entry(entry_id: int):
    entry = supabase_client.get_entry(entry_id)
    if entry is None:
        raise NotFoundError("Entry not found", ENTITY_NAME, "notfound")
    return jsonify(entry.to_json())


@entries_bp.route("/entries/<int:entry_id>", methods=["DELETE"])
def delete_entry(entry_id: int):
    supabase_client.delete_entry(entry_id)
    log_info("Entry deleted", entry_id=entry_id)
    return "", 204
