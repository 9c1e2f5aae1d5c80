"""Process-wide catalog and the module-level query functions."""

from __future__ import annotations

import threading
from functools import lru_cache
from pathlib import Path
from typing import List, Tuple

from korea_universities.config.settings import get_settings
from korea_universities.entities import LibraryMetadata, University
from korea_universities.utils.logging import get_logger

from .store import OptionsLike, UniversityCatalog

_CATALOG_LOCK = threading.Lock()


def load_catalog(records_path: str | Path, metadata_path: str | Path) -> UniversityCatalog:
    """Build a standalone catalog from an explicit snapshot."""

    return UniversityCatalog.from_files(records_path, metadata_path)


@lru_cache(maxsize=1)
def _default_catalog() -> UniversityCatalog:
    settings = get_settings()
    catalog = load_catalog(settings.records_file, settings.metadata_file)
    get_logger(module=__name__).debug("Initialised default catalog", count=len(catalog))
    return catalog


def get_catalog() -> UniversityCatalog:
    """Return the shared catalog, loading and indexing it on first use."""

    with _CATALOG_LOCK:
        return _default_catalog()


def reset_catalog() -> None:
    """Drop the shared catalog so the next query reloads the snapshot."""

    with _CATALOG_LOCK:
        _default_catalog.cache_clear()


def get_all_universities() -> Tuple[University, ...]:
    """Every university in 가나다 order."""

    return get_catalog().all()


def get_universities(options: OptionsLike = None) -> List[University]:
    """Filter by region, level, establishment and accreditation."""

    return get_catalog().filter(options)


def search_universities(query: str, options: OptionsLike = None) -> List[University]:
    """Search names by prefix or infix, ignoring spaces and case.

    Example: ``search_universities("한국 공학")`` finds 한국공학대학교.
    """

    return get_catalog().search(query, options)


def get_library_metadata() -> LibraryMetadata:
    return get_catalog().metadata


__all__ = [
    "get_all_universities",
    "get_catalog",
    "get_library_metadata",
    "get_universities",
    "load_catalog",
    "reset_catalog",
    "search_universities",
]
