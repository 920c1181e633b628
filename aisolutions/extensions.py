"""
Flask Extensions

Admin authentication is session-based: the signed session cookie carries the
admin identity, so no login manager extension is registered.
"""

from flask_sqlalchemy import SQLAlchemy

# Database instance
db = SQLAlchemy()
