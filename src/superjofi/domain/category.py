"""Category registry domain service."""

from typing import Optional

from superjofi.database.base import Database
from superjofi.domain.entities import Category, CategoryKind, ChartOfAccounts
from superjofi.domain.errors import (
    NotFoundError,
    ValidationError,
    ambiguous_category_name,
    category_not_found,
    category_reference_not_found,
    empty_category_name,
)
from superjofi.utils.logger import get_logger

logger = get_logger(__name__)


class CategoryService:
    """Service for managing the chart of accounts."""

    def __init__(self, db: Database):
        """Initialize category service.

        Args:
            db: Database instance
        """
        self.db = db

    @staticmethod
    def _clean_name(name: str) -> str:
        cleaned = (name or "").strip()
        if not cleaned:
            raise ValidationError(empty_category_name())
        return cleaned

    def create_category(self, kind: CategoryKind, name: str) -> str:
        """Create a category.

        Args:
            kind: List the category belongs to
            name: Display name; duplicates are allowed

        Returns:
            Category ID

        Raises:
            ValidationError: If the name is blank
        """
        cleaned = self._clean_name(name)
        category_id = self.db.create_category(kind=kind, name=cleaned)
        logger.info(f"Created {kind.value} category {category_id} '{cleaned}'")
        return category_id

    def get_category(self, kind: CategoryKind, category_id: str) -> Optional[Category]:
        """Get category by kind and ID.

        Returns:
            Category entity or None if not found
        """
        return self.db.get_category(kind, category_id)

    def list_categories(self, kind: Optional[CategoryKind] = None) -> list[Category]:
        """List categories, optionally for one kind."""
        return self.db.list_categories(kind=kind)

    def rename_category(self, kind: CategoryKind, category_id: str, name: str) -> None:
        """Rename a category.

        Raises:
            ValidationError: If the new name is blank
            NotFoundError: If the category does not exist
        """
        cleaned = self._clean_name(name)
        if self.db.get_category(kind, category_id) is None:
            raise NotFoundError(category_not_found(kind.value, category_id))
        self.db.update_category_name(kind, category_id, cleaned)
        logger.info(f"Renamed {kind.value} category {category_id} to '{cleaned}'")

    def delete_category(self, kind: CategoryKind, category_id: str) -> None:
        """Delete a category.

        Entries pointing at it keep the dangling reference and are reported
        under the fallback label from then on.

        Raises:
            NotFoundError: If the category does not exist
        """
        if self.db.get_category(kind, category_id) is None:
            raise NotFoundError(category_not_found(kind.value, category_id))
        self.db.delete_category(kind, category_id)
        logger.info(f"Deleted {kind.value} category {category_id}")

    def resolve(self, kind: CategoryKind, category_id: Optional[str]) -> Optional[str]:
        """Return the name of a category, or None if it does not exist."""
        if not category_id:
            return None
        category = self.db.get_category(kind, category_id)
        return category.name if category is not None else None

    def chart(self) -> ChartOfAccounts:
        """Return an immutable snapshot of the whole chart of accounts."""
        return ChartOfAccounts(categories=tuple(self.db.list_categories()))

    def find_category(self, kind: CategoryKind, reference: str) -> Category:
        """Find a category by ID or by name (case-insensitive).

        An exact ID match wins over a name match.

        Raises:
            NotFoundError: If nothing matches
            ValidationError: If the name matches more than one category
        """
        reference = (reference or "").strip()
        by_id = self.db.get_category(kind, reference)
        if by_id is not None:
            return by_id

        wanted = reference.casefold()
        matches = [
            cat for cat in self.db.list_categories(kind=kind) if cat.name.casefold() == wanted
        ]
        if not matches:
            raise NotFoundError(category_reference_not_found(kind.value, reference))
        if len(matches) > 1:
            raise ValidationError(ambiguous_category_name(kind.value, reference, len(matches)))
        return matches[0]
