"""Resolve accreditation names against the working directory collection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, List

from korea_universities.config.policies import MatchingPolicy, SplitCampusRule
from korea_universities.entities import University
from korea_universities.utils.logging import get_logger

from .parsing import ParsedTarget, parse_target_string

_Predicate = Callable[[University], bool]


@dataclass
class InstitutionMatcher:
    """Apply the campus matching rules described by a :class:`MatchingPolicy`.

    Rules are evaluated in order and the first applicable one decides:

    1. a split-campus rule registered for the parsed name;
    2. no condition: exact name equality;
    3. the main-campus condition: exact name on an unlabeled or main campus;
    4. any other condition: either the ``"<name> <condition>캠퍼스"`` compound
       name, or the exact name with the condition inside the campus label.
    """

    policy: MatchingPolicy

    def __post_init__(self) -> None:
        self._log = get_logger(module=__name__)

    def find_matching_ids(self, target: str, records: Iterable[University]) -> List[int]:
        """Return ids of every record *target* refers to, possibly none."""

        parsed = parse_target_string(target)
        predicate = self._predicate_for(parsed)
        matched = [record.id for record in records if predicate(record)]
        self._log.debug(
            "Matched accreditation target {} -> {}",
            target,
            matched,
        )
        return matched

    def _predicate_for(self, parsed: ParsedTarget) -> _Predicate:
        name, condition = parsed

        rule = self.policy.split_rule_for(name)
        if rule is not None:
            return self._split_campus_predicate(rule, condition)

        if condition is None:
            return lambda record: record.name_kr == name

        if condition == self.policy.main_campus_condition:
            labels = set(self.policy.main_campus_labels)
            return lambda record: record.name_kr == name and (
                not record.campus or record.campus in labels
            )

        compound = f"{name} {condition}{self.policy.campus_suffix}"
        return lambda record: record.name_kr == compound or (
            record.name_kr == name
            and record.campus is not None
            and condition in record.campus
        )

    @staticmethod
    def _split_campus_predicate(rule: SplitCampusRule, condition: str | None) -> _Predicate:
        region = rule.region_for(condition)
        return lambda record: rule.base_name in record.name_kr and record.region == region


__all__ = ["InstitutionMatcher"]
