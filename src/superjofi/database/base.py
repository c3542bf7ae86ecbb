"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional
from datetime import date
from decimal import Decimal

# Import entities directly to avoid circular import through domain/__init__.py
from superjofi.domain.entities import Category, CategoryKind, Entry, EntryType


class Database(ABC):
    """Abstract row store for superjofi.

    Implementations return domain entities; entries are normalized on the
    way out, so callers never see raw type tags or signed values.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Category operations
    @abstractmethod
    def create_category(self, kind: CategoryKind, name: str) -> str:
        """Create a category. Returns category ID."""
        pass

    @abstractmethod
    def get_category(self, kind: CategoryKind, category_id: str) -> Optional[Category]:
        """Get category by kind and ID."""
        pass

    @abstractmethod
    def list_categories(self, kind: Optional[CategoryKind] = None) -> list[Category]:
        """List categories in creation order, optionally for one kind."""
        pass

    @abstractmethod
    def update_category_name(self, kind: CategoryKind, category_id: str, name: str) -> None:
        """Rename a category."""
        pass

    @abstractmethod
    def delete_category(self, kind: CategoryKind, category_id: str) -> None:
        """Delete a category. Entries that reference it are left untouched."""
        pass

    # Entry operations
    @abstractmethod
    def create_entry(
        self,
        date: date,
        type: EntryType,
        value: Decimal,
        category_id: Optional[str] = None,
        description: str = "",
        payment_method_id: Optional[str] = None,
        bank_id: Optional[str] = None,
        client_name: str = "",
    ) -> str:
        """Create an entry. Returns entry ID."""
        pass

    @abstractmethod
    def get_entry(self, entry_id: str) -> Optional[Entry]:
        """Get entry by ID."""
        pass

    @abstractmethod
    def list_entries(self) -> list[Entry]:
        """List every entry."""
        pass

    @abstractmethod
    def update_entry(
        self,
        entry_id: str,
        date: date,
        type: EntryType,
        value: Decimal,
        category_id: Optional[str] = None,
        description: str = "",
        payment_method_id: Optional[str] = None,
        bank_id: Optional[str] = None,
        client_name: str = "",
    ) -> None:
        """Replace every non-id field of an entry."""
        pass

    @abstractmethod
    def delete_entry(self, entry_id: str) -> None:
        """Delete an entry."""
        pass
