"""Merge processor applying accreditation buckets to the directory."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Sequence, Tuple

from korea_universities.config.policies import Policies
from korea_universities.constants import LEVEL_COLLEGE, LEVEL_GRADUATE, LEVEL_UNIVERSITY
from korea_universities.entities import (
    AccreditationSource,
    BuildStats,
    DirectoryRecord,
    University,
)
from korea_universities.utils.logging import get_logger, logging_context

from .collection import WorkingCollection
from .matcher import InstitutionMatcher
from .synthesizer import RecordSynthesizer

# Later categories may match institutions synthesized by earlier ones.
CATEGORY_ORDER: Tuple[str, ...] = ("degree", "language", "excellent")
LEVEL_BUCKETS: Tuple[Tuple[str, str], ...] = (
    ("university", LEVEL_UNIVERSITY),
    ("college", LEVEL_COLLEGE),
    ("graduate", LEVEL_GRADUATE),
)


@dataclass
class MergeResult:
    """Outcome of a merge build."""

    records: List[University]
    stats: BuildStats
    run_stats: Dict[str, int] = field(default_factory=dict)
    synthesized_ids: frozenset[int] = field(default_factory=frozenset)

    @property
    def synthesized(self) -> List[University]:
        return [record for record in self.records if record.id in self.synthesized_ids]


def summarize(records: Sequence[University]) -> BuildStats:
    """Count records per level and those certified for degree or language courses."""

    return BuildStats(
        total=len(records),
        university=sum(1 for record in records if record.level == LEVEL_UNIVERSITY),
        college=sum(1 for record in records if record.level == LEVEL_COLLEGE),
        graduate=sum(1 for record in records if record.level == LEVEL_GRADUATE),
        accredited=sum(
            1
            for record in records
            if record.accreditation.degree or record.accreditation.language
        ),
    )


def to_universities(directory: Iterable[DirectoryRecord]) -> List[University]:
    """Attach an all-false accreditation triple to every directory record."""

    return [University.model_validate(record.model_dump()) for record in directory]


@dataclass
class MergeProcessor:
    """Run the nine accreditation buckets against the institution directory."""

    policies: Policies

    def __post_init__(self) -> None:
        self._log = get_logger(module=__name__)
        self.matcher = InstitutionMatcher(policy=self.policies.matching)

    def process(
        self,
        directory: Iterable[DirectoryRecord],
        accreditation: AccreditationSource,
    ) -> MergeResult:
        """Merge *accreditation* into *directory* and return id-sorted records."""

        collection = WorkingCollection(to_universities(directory))
        synthesizer = RecordSynthesizer(
            policy=self.policies.synthesis,
            observed_max_id=collection.max_id(),
        )
        run_stats: Dict[str, int] = {
            "directory_records": len(collection),
            "entries": 0,
            "matched_entries": 0,
            "synthesized": 0,
        }
        synthesized_ids: set[int] = set()

        for category in CATEGORY_ORDER:
            categories = getattr(accreditation, category)
            flags_set = 0
            with logging_context(stage=f"merge:{category}"):
                self._log.info("Matching {} accreditation entries", category)
                for bucket, level in LEVEL_BUCKETS:
                    for target in getattr(categories, bucket):
                        run_stats["entries"] += 1
                        matched_ids = self.matcher.find_matching_ids(target, collection)
                        if matched_ids:
                            run_stats["matched_entries"] += 1
                        else:
                            record = synthesizer.synthesize(target, level)
                            collection.append(record)
                            synthesized_ids.add(record.id)
                            matched_ids = [record.id]
                        flags_set += self._apply_flag(collection, matched_ids, category)
            run_stats[f"flags_set_{category}"] = flags_set

        run_stats["synthesized"] = synthesizer.created
        records = collection.sorted_by_id()
        stats = summarize(records)
        self._log.info(
            "Merge complete total={} university={} college={} graduate={} accredited={}",
            stats.total,
            stats.university,
            stats.college,
            stats.graduate,
            stats.accredited,
        )
        return MergeResult(
            records=records,
            stats=stats,
            run_stats=run_stats,
            synthesized_ids=frozenset(synthesized_ids),
        )

    @staticmethod
    def _apply_flag(collection: WorkingCollection, ids: Iterable[int], category: str) -> int:
        """Set *category* on every id and return how many flags changed."""

        changed = 0
        for record_id in ids:
            record = collection.get(record_id)
            if record is None:
                continue
            if not getattr(record.accreditation, category):
                setattr(record.accreditation, category, True)
                changed += 1
        return changed


__all__ = [
    "CATEGORY_ORDER",
    "LEVEL_BUCKETS",
    "MergeProcessor",
    "MergeResult",
    "summarize",
    "to_universities",
]
