"""
WSGI entry point.

Serve with any WSGI server, e.g. `gunicorn wsgi:application`.
"""

from app import app as application, init_db

# Tables are normally managed with `flask db upgrade`; create_all is a no-op for existing ones
init_db()
