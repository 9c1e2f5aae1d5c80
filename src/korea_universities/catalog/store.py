"""Read-only, name-sorted catalog answering filter and search queries."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from korea_universities.entities import LibraryMetadata, SearchOptions, University
from korea_universities.pipeline.merge.io import load_metadata, load_records
from korea_universities.utils.logging import get_logger

from .filters import apply_filters
from .index import SearchIndexItem, build_search_index, normalize_search_key, sort_by_name

OptionsLike = Optional[Union[SearchOptions, Mapping[str, Any]]]


class UniversityCatalog:
    """In-memory catalog over a merged snapshot.

    Records are sorted by collation order of ``nameKr`` once at construction
    and the search index is built in the same order; nothing is mutated
    afterwards.
    """

    def __init__(self, records: Iterable[University], metadata: LibraryMetadata) -> None:
        self._records: Tuple[University, ...] = sort_by_name(records)
        self._index: Tuple[SearchIndexItem, ...] = build_search_index(self._records)
        self._by_id: Dict[int, University] = {record.id: record for record in self._records}
        self._metadata = metadata

    @classmethod
    def from_files(cls, records_path: str | Path, metadata_path: str | Path) -> "UniversityCatalog":
        records = load_records(records_path)
        metadata = load_metadata(metadata_path)
        get_logger(module=__name__).debug(
            "Loaded catalog snapshot", path=str(records_path), count=len(records)
        )
        return cls(records, metadata)

    @property
    def metadata(self) -> LibraryMetadata:
        return self._metadata

    def __len__(self) -> int:
        return len(self._records)

    def all(self) -> Tuple[University, ...]:
        """Every record in collation order."""

        return self._records

    def get(self, university_id: int) -> University | None:
        return self._by_id.get(university_id)

    def filter(self, options: OptionsLike) -> List[University]:
        """Return records satisfying all supplied filter options."""

        resolved = SearchOptions.coerce(options)
        if resolved.is_empty():
            return list(self._records)
        return [record for record in self._records if apply_filters(record, resolved)]

    def search(self, query: str, options: OptionsLike = None) -> List[University]:
        """Substring search on space-stripped, case-folded names.

        Prefix and infix matches both qualify and results keep collation
        order. A blank query falls back to :meth:`filter`.
        """

        trimmed = query.strip()
        if not trimmed:
            return self.filter(options)

        needle = normalize_search_key(trimmed)
        resolved = SearchOptions.coerce(options)
        check_filters = not resolved.is_empty()

        results: List[University] = []
        for item in self._index:
            if check_filters and not apply_filters(item.data, resolved):
                continue
            if needle in item.search_key:
                results.append(item.data)
        return results


__all__ = ["UniversityCatalog", "OptionsLike"]
