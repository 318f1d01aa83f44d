"""
Application factory and global configuration.

Creates the Flask app, applies security headers, configures rate limiting,
registers blueprints, error handlers and CLI commands. This file keeps
startup/config concerns together and avoids domain logic here.
"""

from __future__ import annotations
import os
from flask import Flask, Response
from dotenv import load_dotenv
from .extensions import limiter
from .routes.blogs import blogs_bp
from .routes.entries import entries_bp
from .services import supabase_client
from .utils.errors import register_error_handlers


def _validate_production_security(app: Flask, cfg_path: str) -> None:
    """
    Validate critical security settings in production environments.

    Raises RuntimeError if production requirements are not met, so the app
    never starts with an insecure configuration.

    Checks:
    - SECRET_KEY must be set and strong (>= 32 characters)
    - DEBUG must be False
    """
    is_production = "ProdConfig" in cfg_path
    is_test = app.config.get("TESTING", False)

    if not is_production or is_test:
        return

    errors = []

    secret_key = app.config.get("SECRET_KEY", "")
    if not secret_key:
        errors.append(
            "SECRET_KEY is not set. Set FLASK_SECRET_KEY environment variable. "
            "Generate with: python -c 'import secrets; print(secrets.token_hex(32))'"
        )
    elif len(secret_key) < 32:
        errors.append(
            f"SECRET_KEY is too weak ({len(secret_key)} chars). "
            "Must be at least 32 characters for production security."
        )

    if app.config.get("DEBUG", False):
        errors.append(
            "DEBUG must be False in production. Debug mode exposes sensitive information "
            "and should never be enabled in production environments."
        )

    if errors:
        error_msg = "\n\n[ERROR] PRODUCTION SECURITY VALIDATION FAILED:\n\n" + "\n\n".join(f"  * {err}" for err in errors)
        error_msg += "\n\n[WARNING] The application will not start until these security issues are resolved.\n"
        raise RuntimeError(error_msg)

    app.logger.info("[OK] Production security validation passed")


def create_app(config_object: str | None = None) -> Flask:
    # override=False so production env vars are not overwritten by a stale .env file
    load_dotenv(override=False)

    app = Flask(__name__)

    # Explicit argument wins, then APP_CONFIG (e.g., blog.config.DevConfig)
    cfg_path = config_object or os.getenv("APP_CONFIG", "blog.config.ProdConfig")
    try:
        app.config.from_object(cfg_path)
    except (ImportError, AttributeError) as e:
        app.logger.warning(f"Could not load config object {cfg_path}: {e}")

    _validate_production_security(app, cfg_path)

    limiter.init_app(app)

    if not app.config.get("RATELIMIT_ENABLED", True):
        limiter.enabled = False

    if not app.secret_key:
        app.secret_key = app.config.get("SECRET_KEY", "")

    supabase_client.init_supabase(app)

    @app.after_request
    def apply_security_headers(resp: Response) -> Response:
        resp.headers["X-Content-Type-Options"] = "nosniff"
        resp.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        resp.headers["X-Frame-Options"] = "DENY"
        resp.headers["Content-Security-Policy"] = "default-src 'none'; frame-ancestors 'none'"
        return resp

    # Blueprints
    app.register_blueprint(blogs_bp, url_prefix="/api")
    app.register_blueprint(entries_bp, url_prefix="/api")

    register_error_handlers(app)

    # Register CLI commands
    from blog.cli import purge_entries_command
    app.cli.add_command(purge_entries_command)

    return app
