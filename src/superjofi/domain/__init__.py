"""Domain layer for superjofi application."""

__all__ = [
    "EntryService",
    "CategoryService",
    "ReportService",
]


# Import services lazily: database.base imports domain.entities while the
# services themselves import database.base
def __getattr__(name):
    if name == "EntryService":
        from superjofi.domain.entry import EntryService
        return EntryService
    if name == "CategoryService":
        from superjofi.domain.category import CategoryService
        return CategoryService
    if name == "ReportService":
        from superjofi.domain.report import ReportService
        return ReportService
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
