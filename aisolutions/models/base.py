"""
Shared model helpers
"""

from datetime import datetime, timezone


def utcnow():
    """Naive UTC timestamp, the form the columns store."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class RowMixin:
    """Expose a model instance as the plain record the services exchange."""

    @classmethod
    def field_names(cls):
        return [attr.key for attr in cls.__mapper__.column_attrs]

    def to_dict(self):
        return {name: getattr(self, name) for name in self.field_names()}
