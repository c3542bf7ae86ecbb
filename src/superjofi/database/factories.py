"""Database factory functions for creating database instances."""

import os
from pathlib import Path
from typing import Optional

from superjofi.database.sqlalchemy_db import SQLAlchemyDatabase


def create_database(database_url: Optional[str] = None) -> SQLAlchemyDatabase:
    """Create a database from a SQLAlchemy URL.

    Args:
        database_url: SQLAlchemy URL. If None, uses SUPERJOFI_DB_URL, then
            falls back to the default SQLite file (see create_sqlite_database).

    Returns:
        SQLAlchemyDatabase instance
    """
    if database_url is None:
        database_url = os.environ.get("SUPERJOFI_DB_URL")

    if not database_url:
        return create_sqlite_database()
    return SQLAlchemyDatabase(database_url)


def create_sqlite_database(database_path: Optional[str] = None) -> SQLAlchemyDatabase:
    """Create a SQLite database instance.

    Args:
        database_path: Path to SQLite database file. If None, checks SUPERJOFI_DB_PATH
            environment variable, then defaults to ~/.superjofi/superjofi.db

    Returns:
        SQLAlchemyDatabase instance configured for SQLite
    """
    if database_path is None:
        # Check environment variable
        database_path = os.environ.get("SUPERJOFI_DB_PATH")

    if database_path is None:
        # Default to ~/.superjofi/superjofi.db
        home = Path.home()
        db_dir = home / ".superjofi"
        db_dir.mkdir(exist_ok=True)
        database_path = str(db_dir / "superjofi.db")

    database_url = f"sqlite:///{database_path}"
    return SQLAlchemyDatabase(database_url)
