"""Database layer for superjofi application."""

from superjofi.database.base import Database
from superjofi.database.factories import create_database, create_sqlite_database

__all__ = ["Database", "create_database", "create_sqlite_database"]
