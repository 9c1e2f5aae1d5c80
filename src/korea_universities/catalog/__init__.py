"""Query catalog over the merged university snapshot."""

from .api import (
    get_all_universities,
    get_catalog,
    get_library_metadata,
    get_universities,
    load_catalog,
    reset_catalog,
    search_universities,
)
from .filters import apply_filters
from .index import SearchIndexItem, collation_key, normalize_search_key
from .store import UniversityCatalog

__all__ = [
    "SearchIndexItem",
    "UniversityCatalog",
    "apply_filters",
    "collation_key",
    "get_all_universities",
    "get_catalog",
    "get_library_metadata",
    "get_universities",
    "load_catalog",
    "normalize_search_key",
    "reset_catalog",
    "search_universities",
]
