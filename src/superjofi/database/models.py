"""SQLAlchemy models for superjofi database."""

from datetime import datetime, UTC
from sqlalchemy import (
    Column,
    Integer,
    String,
    DateTime,
    Numeric,
    Index,
    TypeDecorator,
    create_engine,
)
from sqlalchemy.orm import declarative_base, sessionmaker, Session

Base = declarative_base()


class StoredAmount(TypeDecorator):
    """NUMERIC(12, 2) column whose cells are read back untouched.

    Legacy rows may hold text such as ``'abc'`` or ``'1.234,56'``. Turning a
    cell into an amount is left to ``normalize_value``.
    """

    impl = Numeric(12, 2)
    cache_ok = True

    def result_processor(self, dialect, coltype):
        return None


class Category(Base):
    """Chart of accounts item. ``kind`` names the list it belongs to."""

    __tablename__ = "categories"

    id = Column(Integer, primary_key=True)
    kind = Column(String(32), nullable=False)
    name = Column(String, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    __table_args__ = (Index("ix_categories_kind", "kind"),)


class Entry(Base):
    """Financial entry row.

    Columns keep what the backend stores: ``date`` is the written
    YYYY-MM-DD string, ``type`` is the raw tag and ``value`` may be signed
    in legacy rows or hold text. References to categories are plain strings without
    foreign keys so deleting a category never touches entries.
    """

    __tablename__ = "entries"

    id = Column(Integer, primary_key=True)
    date = Column(String(32), nullable=True)
    type = Column(String(16), nullable=False)
    category_id = Column(String(64), nullable=True)
    description = Column(String, nullable=False, default="")
    payment_method_id = Column(String(64), nullable=True)
    bank_id = Column(String(64), nullable=True)
    client_name = Column(String, nullable=False, default="")
    value = Column(StoredAmount(), nullable=False, default=0)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
