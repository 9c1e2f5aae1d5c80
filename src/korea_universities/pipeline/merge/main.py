"""Public entry point for the merge build."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from korea_universities.config.settings import Settings, get_settings
from korea_universities.entities import LibraryMetadata
from korea_universities.utils.logging import get_logger, log_timing, logging_context

from .io import (
    generate_metadata,
    load_accreditation,
    load_directory,
    require_sources,
    write_metadata,
    write_records,
)
from .processor import MergeProcessor, MergeResult


@dataclass
class BuildOutcome:
    """Result of :func:`build_dataset` with the written artefact paths."""

    result: MergeResult
    metadata: LibraryMetadata
    records_path: Path
    metadata_path: Path


def build_dataset(
    *,
    universities_path: str | Path | None = None,
    accreditation_path: str | Path | None = None,
    output_path: str | Path | None = None,
    metadata_path: str | Path | None = None,
    settings: Settings | None = None,
    built_at: datetime | None = None,
) -> BuildOutcome:
    """Merge both scraped sources and write the snapshot and its summary.

    Both inputs are checked before either is read so that a missing file
    aborts the build without writing anything.
    """

    cfg = settings or get_settings()
    log = get_logger(module=__name__)

    universities_file, accreditation_file = require_sources(
        universities_path or cfg.universities_file,
        accreditation_path or cfg.accreditation_file,
    )
    records_destination = Path(output_path or cfg.records_file)
    metadata_destination = Path(metadata_path or cfg.metadata_file)

    with logging_context(stage="load"), log_timing("load", logger_=log):
        directory = load_directory(universities_file)
        accreditation = load_accreditation(accreditation_file)

    processor = MergeProcessor(policies=cfg.policies)
    with log_timing("merge", logger_=log):
        result = processor.process(directory, accreditation)

    metadata = generate_metadata(
        result.stats,
        accreditation,
        sources=cfg.policies.metadata.sources,
        built_at=built_at,
    )

    with logging_context(stage="write"):
        records_written = write_records(result.records, records_destination)
        metadata_written = write_metadata(metadata, metadata_destination)
        log.info("Saved merged snapshot to {}", records_written)
        log.info("Saved build metadata to {}", metadata_written)

    return BuildOutcome(
        result=result,
        metadata=metadata,
        records_path=records_written,
        metadata_path=metadata_written,
    )


__all__ = ["BuildOutcome", "build_dataset"]
