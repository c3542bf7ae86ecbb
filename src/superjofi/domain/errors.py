"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


def entry_not_found(entry_id: str) -> str:
    """Return message for missing entry."""
    return f"Entry {entry_id} not found"


def category_not_found(kind: str, category_id: str) -> str:
    """Return message for missing category by ID."""
    return f"Category {category_id} not found in {kind}"


def category_reference_not_found(kind: str, reference: str) -> str:
    """Return message for a category name or ID that matches nothing."""
    return f"Category '{reference}' not found in {kind}"


def ambiguous_category_name(kind: str, name: str, count: int) -> str:
    """Return message when a name matches several categories of a kind."""
    return (
        f"Category name '{name}' matches {count} items in {kind}. "
        "Use the category ID instead."
    )


def empty_category_name() -> str:
    """Return message for blank category names."""
    return "Category name cannot be empty"


def invalid_month(month: int) -> str:
    """Return message for a month index outside 0..11."""
    return f"Month must be between 0 and 11, got {month}"


def missing_entry_date() -> str:
    """Return message for an entry submitted without a date."""
    return "Entry date is required"
