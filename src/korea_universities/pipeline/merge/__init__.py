"""Reconciliation of the institution directory with accreditation listings."""

from .collection import WorkingCollection
from .io import (
    MissingSourceError,
    generate_metadata,
    load_accreditation,
    load_directory,
    load_metadata,
    load_records,
    write_metadata,
    write_records,
)
from .main import BuildOutcome, build_dataset
from .matcher import InstitutionMatcher
from .parsing import ParsedTarget, parse_target_string
from .processor import MergeProcessor, MergeResult, summarize
from .synthesizer import RecordSynthesizer

__all__ = [
    "BuildOutcome",
    "InstitutionMatcher",
    "MergeProcessor",
    "MergeResult",
    "MissingSourceError",
    "ParsedTarget",
    "RecordSynthesizer",
    "WorkingCollection",
    "build_dataset",
    "generate_metadata",
    "load_accreditation",
    "load_directory",
    "load_metadata",
    "load_records",
    "parse_target_string",
    "summarize",
    "write_metadata",
    "write_records",
]
