"""Database layer: SQLAlchemy models and session."""

from server.db.models import Answer, Base, Word
from server.db.session import get_db, init_db

__all__ = [
    "Answer",
    "Base",
    "Word",
    "get_db",
    "init_db",
]
