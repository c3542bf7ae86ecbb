"""Shared pytest fixtures for superjofi tests."""

import tempfile
import os
from datetime import date
from decimal import Decimal
import pytest

from superjofi.database.factories import create_sqlite_database
from superjofi.domain.category import CategoryService
from superjofi.domain.entities import Entry, EntryType
from superjofi.domain.entry import EntryService
from superjofi.domain.report import ReportService


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    # Create database
    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def category_service(temp_db):
    """Create a CategoryService with a temporary database."""
    return CategoryService(temp_db)


@pytest.fixture
def entry_service(temp_db):
    """Create an EntryService with a temporary database."""
    return EntryService(temp_db)


@pytest.fixture
def report_service(entry_service, category_service):
    """Create a ReportService over the temporary database."""
    return ReportService(entry_service, category_service)


@pytest.fixture
def sample_chart(category_service):
    """Initialize the default chart and return item IDs keyed by name."""
    from superjofi.cli.commands.init_chart import DEFAULT_CHART

    chart_ids = {}
    for kind, name in DEFAULT_CHART:
        chart_ids[name] = category_service.create_category(kind, name)
    return chart_ids


@pytest.fixture
def make_entry():
    """Return a builder for in-memory entries."""
    counter = {"next": 0}

    def _make(
        entry_date,
        entry_type=EntryType.EXPENSE,
        value="0",
        category_id=None,
        description="",
        client_name="",
        **kwargs,
    ) -> Entry:
        counter["next"] += 1
        if isinstance(entry_date, str):
            entry_date = date.fromisoformat(entry_date)
        return Entry(
            id=kwargs.pop("id", str(counter["next"])),
            date=entry_date,
            type=entry_type,
            value=Decimal(value),
            category_id=category_id,
            description=description,
            client_name=client_name,
            **kwargs,
        )

    return _make


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
