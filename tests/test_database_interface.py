"""Tests for Database interface returning domain models."""

import os
import pytest
from datetime import date, datetime
from decimal import Decimal

from sqlalchemy import text

from superjofi.database.factories import create_database, create_sqlite_database
from superjofi.domain import entities
from superjofi.domain.errors import NotFoundError


class TestDatabaseInterface:
    """Tests to verify Database interface returns domain models."""

    def test_get_category_returns_domain_model(self, temp_db):
        """Test that get_category returns a domain Category entity."""
        category_id = temp_db.create_category(kind=entities.CategoryKind.BANK, name="Stone")

        category = temp_db.get_category(entities.CategoryKind.BANK, category_id)

        assert isinstance(category, entities.Category)
        assert category.id == category_id
        assert isinstance(category.id, str)
        assert category.name == "Stone"
        assert category.kind == entities.CategoryKind.BANK
        assert isinstance(category.created_at, datetime)

    def test_list_categories_in_creation_order(self, temp_db):
        temp_db.create_category(kind=entities.CategoryKind.EXPENSE, name="B")
        temp_db.create_category(kind=entities.CategoryKind.INCOME, name="A")
        temp_db.create_category(kind=entities.CategoryKind.EXPENSE, name="C")

        assert [c.name for c in temp_db.list_categories()] == ["B", "A", "C"]
        assert [c.name for c in temp_db.list_categories(entities.CategoryKind.EXPENSE)] == ["B", "C"]

    def test_update_and_delete_missing_category(self, temp_db):
        with pytest.raises(NotFoundError):
            temp_db.update_category_name(entities.CategoryKind.BANK, "1", "X")
        with pytest.raises(NotFoundError):
            temp_db.delete_category(entities.CategoryKind.BANK, "1")

    def test_get_entry_returns_domain_model(self, temp_db):
        """Test that get_entry returns a normalized domain Entry."""
        entry_id = temp_db.create_entry(
            date=date(2024, 3, 5),
            type=entities.EntryType.PURCHASE,
            value=Decimal("12.30"),
            description="Insumos",
        )

        entry = temp_db.get_entry(entry_id)

        assert isinstance(entry, entities.Entry)
        assert entry.id == entry_id
        assert entry.date == date(2024, 3, 5)
        assert entry.type == entities.EntryType.PURCHASE
        assert entry.value == Decimal("12.30")
        assert entry.bank_id is None

    def test_delete_category_keeps_entries(self, temp_db):
        category_id = temp_db.create_category(kind=entities.CategoryKind.EXPENSE, name="RH")
        entry_id = temp_db.create_entry(
            date=date(2024, 3, 5),
            type=entities.EntryType.EXPENSE,
            value=Decimal("10"),
            category_id=category_id,
        )

        temp_db.delete_category(entities.CategoryKind.EXPENSE, category_id)

        assert temp_db.get_entry(entry_id).category_id == category_id

    def test_legacy_rows_are_normalized_on_read(self, temp_db):
        """Rows written by older clients are read as canonical entries."""
        session = temp_db._get_session()
        session.execute(
            text(
                "INSERT INTO entries (date, type, value, description, client_name, created_at) "
                "VALUES ('2024-03-01T00:00:00-03:00', 'RECEITA', -150, '', '', '2024-03-01 00:00:00')"
            )
        )
        session.execute(
            text(
                "INSERT INTO entries (date, type, value, description, client_name, created_at) "
                "VALUES ('garbage', 'COMPRA', 30, '', '', '2024-03-01 00:00:00')"
            )
        )
        session.commit()

        first, second = temp_db.list_entries()

        assert first.type == entities.EntryType.INCOME
        assert first.value == Decimal("150")
        assert first.date == date(2024, 3, 1)
        assert second.type == entities.EntryType.PURCHASE
        assert second.date is None

    def test_text_values_are_read_as_zero(self, temp_db):
        """Values stored as text never break reading entries."""
        session = temp_db._get_session()
        for value in ("'abc'", "'1.234,56'", "80"):
            session.execute(
                text(
                    "INSERT INTO entries (date, type, value, description, client_name, created_at) "
                    f"VALUES ('2024-03-05', 'RECEITA', {value}, '', '', '2024-03-01 00:00:00')"
                )
            )
        session.commit()

        entries = temp_db.list_entries()

        assert [entry.value for entry in entries] == [Decimal("0"), Decimal("0"), Decimal("80")]
        assert temp_db.get_entry(entries[0].id).value == Decimal("0")

    def test_update_and_delete_missing_entry(self, temp_db):
        with pytest.raises(NotFoundError):
            temp_db.update_entry(
                "7", date=date(2024, 1, 1), type=entities.EntryType.INCOME, value=Decimal("1")
            )
        with pytest.raises(NotFoundError):
            temp_db.delete_entry("7")


def test_create_database_uses_url(tmp_path):
    db_file = tmp_path / "by_url.db"

    db = create_database(database_url=f"sqlite:///{db_file}")
    db.create_category(kind=entities.CategoryKind.BANK, name="Stone")
    db.disconnect()

    assert db_file.exists()


def test_create_database_falls_back_to_sqlite_path(tmp_path, monkeypatch):
    db_file = tmp_path / "by_path.db"
    monkeypatch.delenv("SUPERJOFI_DB_URL", raising=False)
    monkeypatch.setenv("SUPERJOFI_DB_PATH", str(db_file))

    db = create_database()

    assert db.database_url == f"sqlite:///{db_file}"


def test_create_sqlite_database_env(tmp_path, monkeypatch):
    db_file = tmp_path / "env.db"
    monkeypatch.setenv("SUPERJOFI_DB_PATH", str(db_file))

    db = create_sqlite_database()

    assert db.database_url == f"sqlite:///{db_file}"
    assert os.path.exists(db_file)
