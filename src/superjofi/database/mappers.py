"""Mapper functions to convert between SQLAlchemy models and domain models.

Entry rows pass through the normalization module here, which makes this
the single ingestion boundary between stored rows and canonical entries.
"""

from superjofi.domain import entities as domain
from superjofi.domain.normalization import row_to_entry
from superjofi.database.models import (
    Category as ORMCategory,
    Entry as ORMEntry,
)


def category_to_domain(orm_category: ORMCategory) -> domain.Category:
    """Convert SQLAlchemy Category model to domain Category entity."""
    return domain.Category(
        id=str(orm_category.id),
        name=orm_category.name,
        kind=domain.CategoryKind(orm_category.kind),
        created_at=orm_category.created_at,
    )


def entry_to_domain(orm_entry: ORMEntry) -> domain.Entry:
    """Convert SQLAlchemy Entry model to a normalized domain Entry."""
    return row_to_entry(
        {
            "id": orm_entry.id,
            "date": orm_entry.date,
            "type": orm_entry.type,
            "value": orm_entry.value,
            "category_id": orm_entry.category_id,
            "description": orm_entry.description,
            "payment_method_id": orm_entry.payment_method_id,
            "bank_id": orm_entry.bank_id,
            "client_name": orm_entry.client_name,
            "created_at": orm_entry.created_at,
        }
    )
