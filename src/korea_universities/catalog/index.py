"""Collation ordering and the precomputed substring search index."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable, Tuple

from pyuca import Collator

from korea_universities.entities import University
from korea_universities.utils.helpers import strip_whitespace


@lru_cache(maxsize=1)
def _collator() -> Collator:
    # Loading the DUCET table is slow; share one collator per process.
    return Collator()


def collation_key(text: str) -> Tuple[int, ...]:
    """Return a Unicode Collation Algorithm key (가나다 order for Hangul)."""

    return _collator().sort_key(text)


def sort_by_name(records: Iterable[University]) -> Tuple[University, ...]:
    """Stable collation sort on ``nameKr``."""

    return tuple(sorted(records, key=lambda record: collation_key(record.name_kr)))


def normalize_search_key(text: str) -> str:
    """Strip every whitespace character and case-fold."""

    return strip_whitespace(text).casefold()


@dataclass(frozen=True)
class SearchIndexItem:
    """Record paired with its precomputed search key."""

    data: University
    search_key: str


def build_search_index(records: Iterable[University]) -> Tuple[SearchIndexItem, ...]:
    return tuple(
        SearchIndexItem(data=record, search_key=normalize_search_key(record.name_kr))
        for record in records
    )


__all__ = [
    "SearchIndexItem",
    "build_search_index",
    "collation_key",
    "normalize_search_key",
    "sort_by_name",
]
