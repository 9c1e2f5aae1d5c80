"""General-purpose helpers for deterministic snapshot processing."""

from __future__ import annotations

import json
import re
from pathlib import Path

from .logging import get_logger

_WHITESPACE_PATTERN = re.compile(r"\s+")

_LOGGER = get_logger(module=__name__)


def strip_whitespace(text: str) -> str:
    """Remove every whitespace character."""

    return _WHITESPACE_PATTERN.sub("", text)


def ensure_directory(path: Path | str) -> Path:
    """Ensure that a directory exists and return the resolved Path."""

    target = Path(path)
    target.mkdir(parents=True, exist_ok=True)
    return target.resolve()


def serialize_json(data: object, destination: Path | str, *, indent: int = 2) -> Path:
    """Serialize data to UTF-8 JSON, keeping Hangul readable."""

    dest_path = Path(destination)
    ensure_directory(dest_path.parent)
    dest_path.write_text(
        json.dumps(data, indent=indent, ensure_ascii=False) + "\n",
        encoding="utf-8",
    )
    _LOGGER.debug("Serialized JSON", path=str(dest_path), size=dest_path.stat().st_size)
    return dest_path


__all__ = [
    "strip_whitespace",
    "ensure_directory",
    "serialize_json",
]
