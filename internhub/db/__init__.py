"""
Database module - SQLAlchemy engine, sessions and table definitions.
"""
from internhub.db.database import build_engine, session_scope, check_database_connection
from internhub.db.tables import Base

__all__ = [
    "Base",
    "build_engine",
    "session_scope",
    "check_database_connection",
]
