"""
WSGI entry point.

    gunicorn wsgi:app

FLASK_CONFIG selects the config class (development, testing, production).
"""
import os

from weave_content import create_app

app = create_app(os.getenv("FLASK_CONFIG", "production"))
