#!/usr/bin/env python3
"""Migration script to normalize legacy entries.

Older databases were written by clients that did not agree on a format:

- the entries table has no bank_id column
- type tags were free text ("Receita", "RECEITA", "Compra", "despesa"...)
- expenses were sometimes stored as negative values
- dates were sometimes stored with a time or timezone suffix

This migration:
- adds bank_id (VARCHAR(64), NULL) when it is missing
- rewrites type tags to INCOME / EXPENSE / PURCHASE using the same rules
  the application applies on read ("REC..." is income, "COMP..." is
  purchase, anything else is expense)
- stores every value as its magnitude; non-numeric values become 0
- rewrites readable dates as YYYY-MM-DD; unreadable dates are left alone

Running it twice is safe.

Usage:
    python migrations/migrate_normalize_entries.py [--db-path PATH]
"""

import sys
from decimal import Decimal
from pathlib import Path

# Add src to path so we can import superjofi modules
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from sqlalchemy import text, inspect
from superjofi.database.factories import create_sqlite_database
from superjofi.database.models import Entry
from superjofi.domain.normalization import normalize_entry_type, normalize_value
from superjofi.utils.date_parser import parse_calendar_date


def column_exists(engine, table_name: str, column_name: str) -> bool:
    """Check if a column exists in a table.

    Args:
        engine: SQLAlchemy engine
        table_name: Name of the table
        column_name: Name of the column

    Returns:
        True if column exists, False otherwise
    """
    inspector = inspect(engine)
    columns = [col["name"] for col in inspector.get_columns(table_name)]
    return column_name in columns


def normalize_rows(session) -> dict[str, int]:
    """Rewrite entry rows into canonical form.

    Returns:
        Number of rows changed per field
    """
    changed = {"type": 0, "value": 0, "date": 0}

    for entry in session.query(Entry).order_by(Entry.id).all():
        canonical_type = normalize_entry_type(entry.type).value
        if entry.type != canonical_type:
            entry.type = canonical_type
            changed["type"] += 1

        raw = entry.value
        if not isinstance(raw, (int, float, Decimal)) or raw < 0:
            entry.value = normalize_value(raw)
            changed["value"] += 1

        parsed = parse_calendar_date(entry.date)
        if parsed is not None and entry.date != parsed.isoformat():
            entry.date = parsed.isoformat()
            changed["date"] += 1

    session.commit()
    return changed


def migrate_database(database_path: str | None = None) -> dict[str, int]:
    """Migrate database entries to the canonical format.

    Args:
        database_path: Path to database file. If None, uses default location.

    Returns:
        Number of rows changed per field

    Raises:
        Exception: If migration fails
    """
    db = create_sqlite_database(database_path=database_path)
    db.connect()

    try:
        # Get engine from sessionmaker by creating a session and accessing its bind
        session = db.session_factory()
        try:
            engine = session.bind
            if engine is None:
                raise Exception("Could not get database engine from session")
        finally:
            session.close()

        inspector = inspect(engine)
        if "entries" not in inspector.get_table_names():
            raise Exception("Table 'entries' does not exist. Please initialize the database schema first.")

        if column_exists(engine, "entries", "bank_id"):
            print("bank_id column already exists in entries table")
        else:
            with engine.begin() as conn:
                conn.execute(text("ALTER TABLE entries ADD COLUMN bank_id VARCHAR(64)"))
                print("  Added column: bank_id")

        print("Normalizing entries...")
        session = db.session_factory()
        try:
            changed = normalize_rows(session)
        finally:
            session.close()

        print(f"  Rewrote {changed['type']} type tag(s)")
        print(f"  Rewrote {changed['value']} value(s)")
        print(f"  Rewrote {changed['date']} date(s)")
        print("Migration completed successfully!")
        return changed

    except Exception as e:
        print(f"Migration failed: {e}")
        raise
    finally:
        db.disconnect()


def main():
    """Main entry point for migration script."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Normalize legacy entries and add the bank_id column"
    )
    parser.add_argument(
        "--db-path",
        type=str,
        help="Path to database file (overrides SUPERJOFI_DB_PATH environment variable)",
    )
    args = parser.parse_args()

    try:
        migrate_database(database_path=args.db_path)
        return 0
    except Exception as e:
        print(f"\nMigration failed: {e}", file=sys.stderr)
        import traceback
        traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
