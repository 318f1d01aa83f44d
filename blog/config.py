"""
Centralized configuration for all environments.

Select a config by setting:
  APP_CONFIG=blog.config.DevConfig      # local dev
  APP_CONFIG=blog.config.ProdConfig     # production (default if unset)
  APP_CONFIG=blog.config.TestConfig     # pytest

Notes:
- SECRET_KEY is read from FLASK_SECRET_KEY
- Rate limiting uses Flask-Limiter v3 keys (RATELIMIT_*).
"""

from __future__ import annotations
import os
import secrets


class BaseConfig:
    # Empty when unset; production startup refuses to run without a real key
    SECRET_KEY = os.getenv("FLASK_SECRET_KEY", "")
    DEBUG = False
    TESTING = False

    # Supabase (Database)
    SUPABASE_URL = os.getenv("SUPABASE_URL", "")
    SUPABASE_ANON_KEY = os.getenv("SUPABASE_ANON_KEY", "")
    SUPABASE_SERVICE_ROLE_KEY = os.getenv("SUPABASE_SERVICE_ROLE_KEY", "")
    BLOGS_TABLE = os.getenv("BLOGS_TABLE", "blogs")
    ENTRIES_TABLE = os.getenv("ENTRIES_TABLE", "entries")

    # Keyword purge
    PURGE_PAGE_SIZE = int(os.getenv("PURGE_PAGE_SIZE", "100"))

    # Flask-Limiter v3
    RATELIMIT_ENABLED = os.getenv("RATELIMIT_ENABLED", "true").lower() == "true"
    RATELIMIT_STORAGE_URI = os.getenv("RATELIMIT_STORAGE_URI", "memory://")
    RATELIMIT_DEFAULT = os.getenv("RATELIMIT_DEFAULT", "120 per minute; 5000 per day")
    RATELIMIT_PURGE = os.getenv("RATELIMIT_PURGE", "5 per minute; 100 per day")

    # Request bodies are small JSON documents
    MAX_CONTENT_LENGTH = 1 * 1024 * 1024

    PREFERRED_URL_SCHEME = os.getenv("PREFERRED_URL_SCHEME", "https")


class ProdConfig(BaseConfig):
    """Production settings (selected by default if APP_CONFIG is unset)."""
    pass


class DevConfig(BaseConfig):
    """Developer-friendly settings."""
    # Random per-process key so dev never runs with an empty string
    SECRET_KEY = os.getenv("FLASK_SECRET_KEY") or secrets.token_hex(32)
    ENV = "development"
    DEBUG = True
    PREFERRED_URL_SCHEME = "http"
    RATELIMIT_PURGE = "100 per minute"


class TestConfig(BaseConfig):
    """CI/pytest settings."""
    SECRET_KEY = secrets.token_hex(32)
    TESTING = True
    DEBUG = True
    # Usually disable the limiter in tests to avoid flakiness
    RATELIMIT_ENABLED = False
    # Never reach a real database from tests
    SUPABASE_URL = ""
    SUPABASE_ANON_KEY = ""
    SUPABASE_SERVICE_ROLE_KEY = ""
