"""Domain entities exposed for the build pipeline and the query catalog."""

from .core import (
    AccreditationCategories,
    AccreditationSource,
    AccreditationStatus,
    BuildStats,
    DirectoryRecord,
    LibraryMetadata,
    SearchOptions,
    University,
)

__all__ = [
    "AccreditationCategories",
    "AccreditationSource",
    "AccreditationStatus",
    "BuildStats",
    "DirectoryRecord",
    "LibraryMetadata",
    "SearchOptions",
    "University",
]
