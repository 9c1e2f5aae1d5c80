"""Create placeholder institutions for accreditation names with no match."""

from __future__ import annotations

from dataclasses import dataclass, field

from korea_universities.config.policies import SynthesisPolicy
from korea_universities.entities import University
from korea_universities.utils.logging import get_logger

from .parsing import parse_target_string


@dataclass
class RecordSynthesizer:
    """Allocate ids and build placeholder :class:`University` records.

    Ids start at ``max(policy.id_seed, observed_max_id + 1)`` so synthesized
    records never collide with directory ids. Establishment and region are
    always the unknown label; nothing is inferred from the name.
    """

    policy: SynthesisPolicy
    observed_max_id: int = 0
    created: int = field(init=False, default=0)

    def __post_init__(self) -> None:
        self._next_id = max(self.policy.id_seed, self.observed_max_id + 1)
        self._log = get_logger(module=__name__)

    @property
    def next_id(self) -> int:
        return self._next_id

    def synthesize(self, target: str, level: str) -> University:
        name, condition = parse_target_string(target)
        record = University(
            id=self._next_id,
            name_kr=name,
            campus=condition,
            level=level,
            type=self.policy.type_for(level),
            establishment=self.policy.unknown_establishment,
            region=self.policy.unknown_region,
        )
        self._next_id += 1
        self.created += 1
        self._log.info(
            "Synthesized missing institution id={} level={} name={} condition={}",
            record.id,
            level,
            name,
            condition or "-",
        )
        return record


__all__ = ["RecordSynthesizer"]
