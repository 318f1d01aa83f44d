"""
Blog resource routes.

Endpoints (mounted under /api):
- POST   /blogs               Create a blog (entry count starts at 0)
- PUT    /blogs               Update a blog
- GET    /blogs               List all blogs
- GET    /blogs/<id>          Get one blog
- DELETE /blogs/<id>          Delete a blog
- DELETE /blogs/clean         Purge entries matching keywords, all blogs
- DELETE /blogs/<id>/clean    Purge entries matching keywords, one blog
"""

from __future__ import annotations
from flask import Blueprint, request, jsonify, current_app
from blog.extensions import limiter
from blog.services import supabase_client
from blog.services.purge import purge_entries
from blog.utils.errors import BadRequestError, NotFoundError, log_info
from blog.utils.validation import parse_blog, parse_keywords

ENTITY_NAME = "blog"

blogs_bp = Blueprint("blogs", __name__)


@blogs_bp.route("/blogs", methods=["POST"])
def create_blog():
    blog = parse_blog(request.get_json(silent=True))
    if blog.id is not None:
        raise BadRequestError("A new blog cannot already have an ID", ENTITY_NAME, "idexists")

    blog.entry_count = 0
    result = supabase_client.save_blog(blog)
    log_info("Blog created", blog_id=result.id, positive=result.positive)

    resp = jsonify(result.to_json())
    resp.status_code = 201
    resp.headers["Location"] = f"/api/blogs/{result.id}"
    return resp


@blogs_bp.route("/blogs", methods=["PUT"])
def update_blog():
    blog = parse_blog(request.get_json(silent=True))
    if blog.id is None:
        raise BadRequestError("Invalid id", ENTITY_NAME, "idnull")
    if supabase_client.get_blog(blog.id) is None:
        raise NotFoundError("Blog not found", ENTITY_NAME, "notfound")

    result = supabase_client.save_blog(blog)
    return jsonify(result.to_json()), 200


@blogs_bp.route("/blogs", methods=["GET"])
def list_blogs():
    return jsonify([b.to_json() for b in supabase_client.list_blogs()])


@blogs_bp.route("/blogs/<int:blog_id>", methods=["GET"])
def get_blog(blog_id: int):
    blog = supabase_client.get_blog(blog_id)
    if blog is None:
        raise NotFoundError("Blog not found", ENTITY_NAME, "notfound")
    return jsonify(blog.to_json())


@blogs_bp.route("/blogs/<int:blog_id>", methods=["DELETE"])
def delete_blog(blog_id: int):
    supabase_client.delete_blog(blog_id)
    log_info("Blog deleted", blog_id=blog_id)
    return "", 204


@blogs_bp.route("/blogs/clean", methods=["DELETE"])
@limiter.limit(lambda: current_app.config["RATELIMIT_PURGE"])
def clean_blogs():
    """
    Delete every entry, across all blogs, whose title or content matches
    one of the given patterns.

    Request body (JSON):
        {"keywords": ["foo", "ba[rz]"]}
    """
    keywords = parse_keywords(request.get_json(silent=True))
    report = purge_entries(keywords, page_size=current_app.config["PURGE_PAGE_SIZE"])
    return jsonify(report.to_json()), 200


@blogs_bp.route("/blogs/<int:blog_id>/clean", methods=["DELETE"])
@limiter.limit(lambda: current_app.config["RATELIMIT_PURGE"])
def clean_blog(blog_id: int):
    """Same as /blogs/clean, restricted to entries of one blog. An unknown id matches nothing."""
    keywords = parse_keywords(request.get_json(silent=True))
    report = purge_entries(keywords, blog_id, page_size=current_app.config["PURGE_PAGE_SIZE"])
    return jsonify(report.to_json()), 200
