"""
Production WSGI entry point for Gunicorn.

Gunicorn will import this file and look for a top-level variable named `app`.

Usage:
    gunicorn -w 2 -k gthread -b 0.0.0.0:$PORT wsgi:app
"""

from blog import create_app

# Gunicorn looks for a top-level 'app' variable here.
app = create_app()
