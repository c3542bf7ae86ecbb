"""Entry store domain service."""

from typing import Any, Optional

from superjofi.database.base import Database
from superjofi.domain.entities import Entry, EntryDraft
from superjofi.domain.errors import (
    NotFoundError,
    ValidationError,
    entry_not_found,
    missing_entry_date,
)
from superjofi.domain.normalization import (
    normalize_entry_type,
    normalize_reference,
    normalize_text,
    normalize_value,
)
from superjofi.utils.logger import get_logger

logger = get_logger(__name__)


class EntryService:
    """Service owning the collection of financial entries.

    Category references are stored as given; they are not checked against
    the chart of accounts, so an entry may point at a deleted category.
    """

    def __init__(self, db: Database):
        """Initialize entry service.

        Args:
            db: Database instance
        """
        self.db = db

    @staticmethod
    def _fields(draft: EntryDraft) -> dict[str, Any]:
        """Normalize a draft into the stored field values."""
        if draft.date is None:
            raise ValidationError(missing_entry_date())
        return {
            "date": draft.date,
            "type": normalize_entry_type(draft.type),
            "value": normalize_value(draft.value),
            "category_id": normalize_reference(draft.category_id),
            "description": normalize_text(draft.description),
            "payment_method_id": normalize_reference(draft.payment_method_id),
            "bank_id": normalize_reference(draft.bank_id),
            "client_name": normalize_text(draft.client_name),
        }

    def add_entry(self, draft: EntryDraft) -> str:
        """Create an entry.

        Args:
            draft: Entry fields. A negative value is stored as its magnitude.

        Returns:
            Entry ID

        Raises:
            ValidationError: If the draft has no date
        """
        fields = self._fields(draft)
        entry_id = self.db.create_entry(**fields)
        logger.info(
            f"Created {fields['type'].value} entry {entry_id} "
            f"on {fields['date'].isoformat()} for {fields['value']}"
        )
        return entry_id

    def get_entry(self, entry_id: str) -> Optional[Entry]:
        """Get entry by ID.

        Returns:
            Entry entity or None if not found
        """
        return self.db.get_entry(entry_id)

    def update_entry(self, entry_id: str, draft: EntryDraft) -> None:
        """Replace all non-id fields of an entry.

        Raises:
            NotFoundError: If the entry does not exist
            ValidationError: If the draft has no date
        """
        fields = self._fields(draft)
        if self.db.get_entry(entry_id) is None:
            raise NotFoundError(entry_not_found(entry_id))
        self.db.update_entry(entry_id, **fields)
        logger.info(f"Updated entry {entry_id}")

    def delete_entry(self, entry_id: str) -> None:
        """Delete an entry.

        Raises:
            NotFoundError: If the entry does not exist
        """
        if self.db.get_entry(entry_id) is None:
            raise NotFoundError(entry_not_found(entry_id))
        self.db.delete_entry(entry_id)
        logger.info(f"Deleted entry {entry_id}")

    def list_entries(self) -> tuple[Entry, ...]:
        """Return an immutable snapshot of every entry."""
        entries = tuple(self.db.list_entries())
        logger.debug(f"Loaded snapshot of {len(entries)} entries")
        return entries

    def draft_from(self, entry: Entry, **changes: Any) -> EntryDraft:
        """Build a draft from an existing entry with some fields replaced.

        Used by editors that submit a partial form: untouched fields keep
        their current values and the result is a complete replacement.
        """
        current = {
            "date": entry.date,
            "type": entry.type,
            "value": entry.value,
            "category_id": entry.category_id,
            "description": entry.description,
            "payment_method_id": entry.payment_method_id,
            "bank_id": entry.bank_id,
            "client_name": entry.client_name,
        }
        current.update(changes)
        return EntryDraft(**current)
