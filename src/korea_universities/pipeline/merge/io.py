"""File I/O for the merge build: scraped inputs in, snapshot and summary out."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable, List, Sequence

from korea_universities.entities import (
    AccreditationSource,
    BuildStats,
    DirectoryRecord,
    LibraryMetadata,
    University,
)
from korea_universities.utils.helpers import serialize_json
from korea_universities.utils.logging import get_logger


class MissingSourceError(FileNotFoundError):
    """Raised when a scraped input required by the build is absent."""


def require_sources(*paths: str | Path) -> List[Path]:
    """Return *paths* as :class:`Path` objects, failing if any is missing."""

    resolved = [Path(path) for path in paths]
    missing = [str(path) for path in resolved if not path.exists()]
    if missing:
        raise MissingSourceError(f"Source data not found: {', '.join(missing)}")
    return resolved


def _read_json(path: Path) -> object:
    with path.open("r", encoding="utf-8") as handle:
        return json.load(handle)


def load_directory(input_path: str | Path) -> List[DirectoryRecord]:
    """Load the scraped institution directory (``universities.json``)."""

    (path,) = require_sources(input_path)
    payload = _read_json(path)
    if not isinstance(payload, list):
        raise ValueError(f"Expected a list of institutions in {path}")
    records = [DirectoryRecord.model_validate(item) for item in payload]
    get_logger(module=__name__).debug("Loaded directory records", path=str(path), count=len(records))
    return records


def load_accreditation(input_path: str | Path) -> AccreditationSource:
    """Load the scraped accreditation directory (``accredited.json``)."""

    (path,) = require_sources(input_path)
    return AccreditationSource.model_validate(_read_json(path))


def generate_metadata(
    stats: BuildStats,
    accreditation: AccreditationSource,
    *,
    sources: Sequence[str],
    built_at: datetime | None = None,
) -> LibraryMetadata:
    """Assemble the build summary persisted next to the snapshot."""

    timestamp = (built_at or datetime.now(timezone.utc)).isoformat()
    return LibraryMetadata(
        built_at=timestamp,
        source_last_modified=accreditation.last_modified,
        source_scraped_at=accreditation.scraped_at,
        sources=list(sources),
        stats=stats,
    )


def write_records(records: Iterable[University], output_path: str | Path) -> Path:
    """Write the merged snapshot as a JSON array."""

    payload = [record.to_json_dict() for record in records]
    return serialize_json(payload, output_path).resolve()


def write_metadata(metadata: LibraryMetadata, output_path: str | Path) -> Path:
    return serialize_json(metadata.to_json_dict(), output_path).resolve()


def load_records(input_path: str | Path) -> List[University]:
    """Load a merged snapshot written by :func:`write_records`."""

    path = Path(input_path)
    if not path.exists():
        raise FileNotFoundError(f"Snapshot not found: {path}")
    return [University.model_validate(item) for item in _read_json(path)]


def load_metadata(input_path: str | Path) -> LibraryMetadata:
    path = Path(input_path)
    if not path.exists():
        raise FileNotFoundError(f"Metadata not found: {path}")
    return LibraryMetadata.model_validate(_read_json(path))


__all__ = [
    "MissingSourceError",
    "require_sources",
    "load_directory",
    "load_accreditation",
    "generate_metadata",
    "write_records",
    "write_metadata",
    "load_records",
    "load_metadata",
]
