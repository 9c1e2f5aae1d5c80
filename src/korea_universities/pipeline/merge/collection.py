"""Growable, id-indexed working set mutated during a single merge build."""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, List

from korea_universities.entities import University


class WorkingCollection:
    """Ordered university records with constant-time lookup by id.

    Records appended during the build are visible to every later matching
    pass; nothing is snapshotted between accreditation buckets.
    """

    def __init__(self, records: Iterable[University] = ()) -> None:
        self._records: List[University] = []
        self._by_id: Dict[int, University] = {}
        for record in records:
            self.append(record)

    def append(self, record: University) -> None:
        if record.id in self._by_id:
            raise ValueError(f"Duplicate university id: {record.id}")
        self._records.append(record)
        self._by_id[record.id] = record

    def get(self, record_id: int) -> University | None:
        return self._by_id.get(record_id)

    def max_id(self) -> int:
        return max(self._by_id, default=0)

    def sorted_by_id(self) -> List[University]:
        return sorted(self._records, key=lambda record: record.id)

    def __iter__(self) -> Iterator[University]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, record_id: object) -> bool:
        return record_id in self._by_id


__all__ = ["WorkingCollection"]
