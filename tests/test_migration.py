"""Tests for the entry normalization migration."""

import importlib.util
from datetime import date
from decimal import Decimal
from pathlib import Path

import pytest
from sqlalchemy import create_engine, inspect, text

from superjofi.database.factories import create_sqlite_database
from superjofi.domain.entities import EntryType
from superjofi.domain.entry import EntryService


MIGRATION_PATH = Path(__file__).parent.parent / "migrations" / "migrate_normalize_entries.py"


@pytest.fixture
def migration():
    spec = importlib.util.spec_from_file_location("migrate_normalize_entries", MIGRATION_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def legacy_db_path(tmp_path):
    """A database written by an older client, without bank_id."""
    db_path = tmp_path / "legacy.db"
    engine = create_engine(f"sqlite:///{db_path}")
    with engine.begin() as conn:
        conn.execute(
            text(
                "CREATE TABLE entries ("
                "id INTEGER PRIMARY KEY, date VARCHAR(32), type VARCHAR(16) NOT NULL, "
                "category_id VARCHAR(64), description VARCHAR NOT NULL DEFAULT '', "
                "payment_method_id VARCHAR(64), client_name VARCHAR NOT NULL DEFAULT '', "
                "value NUMERIC(12, 2) NOT NULL DEFAULT 0, created_at DATETIME NOT NULL)"
            )
        )
        rows = [
            ("2024-03-05", "RECEITA", "1000"),
            ("2024-03-10T00:00:00-03:00", "Despesa", "-300"),
            ("2024-03-15", "COMPRA", "200"),
            ("??", "EXPENSE", "5"),
        ]
        for day, tag, value in rows:
            conn.execute(
                text(
                    "INSERT INTO entries (date, type, value, created_at) "
                    "VALUES (:date, :type, :value, '2024-03-01 00:00:00')"
                ),
                {"date": day, "type": tag, "value": value},
            )
    engine.dispose()
    return str(db_path)


def test_migration_normalizes_rows(migration, legacy_db_path):
    changed = migration.migrate_database(database_path=legacy_db_path)

    assert changed == {"type": 3, "value": 1, "date": 1}

    engine = create_engine(f"sqlite:///{legacy_db_path}")
    try:
        columns = [col["name"] for col in inspect(engine).get_columns("entries")]
        with engine.connect() as conn:
            stored = conn.execute(text("SELECT date, type FROM entries ORDER BY id")).all()
    finally:
        engine.dispose()

    assert "bank_id" in columns
    assert [row.type for row in stored] == ["INCOME", "EXPENSE", "PURCHASE", "EXPENSE"]
    assert stored[1].date == "2024-03-10"
    assert stored[3].date == "??"


def test_migration_is_idempotent(migration, legacy_db_path):
    migration.migrate_database(database_path=legacy_db_path)

    changed = migration.migrate_database(database_path=legacy_db_path)

    assert changed == {"type": 0, "value": 0, "date": 0}


def test_migrated_entries_read_back(migration, legacy_db_path):
    migration.migrate_database(database_path=legacy_db_path)

    db = create_sqlite_database(database_path=legacy_db_path)
    try:
        entries = EntryService(db).list_entries()
    finally:
        db.disconnect()

    assert [e.type for e in entries] == [
        EntryType.INCOME,
        EntryType.EXPENSE,
        EntryType.PURCHASE,
        EntryType.EXPENSE,
    ]
    assert entries[1].value == Decimal("300")
    assert entries[1].date == date(2024, 3, 10)
    assert entries[3].date is None


def test_migration_zeroes_text_values(migration, legacy_db_path):
    engine = create_engine(f"sqlite:///{legacy_db_path}")
    with engine.begin() as conn:
        conn.execute(
            text(
                "INSERT INTO entries (date, type, value, created_at) "
                "VALUES ('2024-03-20', 'DESPESA', 'abc', '2024-03-01 00:00:00')"
            )
        )
    engine.dispose()

    changed = migration.migrate_database(database_path=legacy_db_path)

    assert changed == {"type": 4, "value": 2, "date": 1}

    db = create_sqlite_database(database_path=legacy_db_path)
    try:
        entries = EntryService(db).list_entries()
    finally:
        db.disconnect()

    assert entries[-1].value == Decimal("0")
    assert entries[-1].type == EntryType.EXPENSE
