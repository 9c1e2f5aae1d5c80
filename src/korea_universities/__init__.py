"""Catalog of Korean universities with IEQAS accreditation status."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from loguru import logger

try:
    __version__ = version("korea-universities")
except PackageNotFoundError:  # pragma: no cover - running from a source checkout
    __version__ = "0.1.0"

# Silent for library hosts until configure_logging is called.
logger.disable(__name__)

from .catalog import (
    UniversityCatalog,
    get_all_universities,
    get_library_metadata,
    get_universities,
    load_catalog,
    search_universities,
)
from .config.settings import Settings, get_settings
from .constants import (
    ALL_SCHOOL_TYPES,
    COLLEGE_TYPES,
    ESTABLISHMENTS,
    GRADUATE_TYPES,
    REGIONS,
    SCHOOL_LEVELS,
    UNIVERSITY_TYPES,
)
from .entities import (
    AccreditationStatus,
    LibraryMetadata,
    SearchOptions,
    University,
)

__all__ = [
    "__version__",
    "ALL_SCHOOL_TYPES",
    "COLLEGE_TYPES",
    "ESTABLISHMENTS",
    "GRADUATE_TYPES",
    "REGIONS",
    "SCHOOL_LEVELS",
    "UNIVERSITY_TYPES",
    "AccreditationStatus",
    "LibraryMetadata",
    "SearchOptions",
    "Settings",
    "University",
    "UniversityCatalog",
    "get_all_universities",
    "get_library_metadata",
    "get_settings",
    "get_universities",
    "load_catalog",
    "search_universities",
]
