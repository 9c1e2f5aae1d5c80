"""Policy models governing how the two scraped sources are reconciled."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, List

import yaml
from pydantic import BaseModel, Field, field_validator

from ..constants import DATA_SOURCES, DEFAULT_TYPE_BY_LEVEL, UNKNOWN


class SplitCampusRule(BaseModel):
    """Institution whose campuses share a base name but are run independently.

    Records are selected by substring match on ``base_name`` and then by the
    region mapped from the parsed condition; conditions absent from
    ``condition_regions`` fall back to ``default_region``.
    """

    base_name: str = Field(..., min_length=1)
    condition_regions: Dict[str, str] = Field(default_factory=dict)
    default_region: str = Field(..., min_length=1)

    def region_for(self, condition: str | None) -> str:
        if condition is not None and condition in self.condition_regions:
            return self.condition_regions[condition]
        return self.default_region


def _default_split_campus_rules() -> List[SplitCampusRule]:
    return [
        SplitCampusRule(
            base_name="명지대학교",
            condition_regions={"서울캠퍼스": "서울특별시"},
            default_region="경기도",
        )
    ]


class MatchingPolicy(BaseModel):
    """Literals used when resolving accreditation names against the directory."""

    main_campus_condition: str = Field(default="본교")
    main_campus_labels: List[str] = Field(default_factory=lambda: ["제1캠퍼스", "본교"])
    campus_suffix: str = Field(default="캠퍼스")
    split_campus_rules: List[SplitCampusRule] = Field(default_factory=_default_split_campus_rules)

    def split_rule_for(self, name: str) -> SplitCampusRule | None:
        for rule in self.split_campus_rules:
            if rule.base_name == name:
                return rule
        return None


class SynthesisPolicy(BaseModel):
    """Defaults applied to institutions created for unmatched names."""

    id_seed: int = Field(default=90000, ge=1)
    unknown_establishment: str = Field(default=UNKNOWN)
    unknown_region: str = Field(default=UNKNOWN)
    default_types: Dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_TYPE_BY_LEVEL))
    fallback_type: str = Field(default="대학교")

    def type_for(self, level: str) -> str:
        return self.default_types.get(level, self.fallback_type)


class MetadataPolicy(BaseModel):
    """Static labels written into the build summary."""

    sources: List[str] = Field(default_factory=lambda: list(DATA_SOURCES))

    @field_validator("sources")
    @classmethod
    def _require_sources(cls, value: List[str]) -> List[str]:
        cleaned = [item.strip() for item in value if item and item.strip()]
        if not cleaned:
            raise ValueError("metadata.sources must list at least one label")
        return cleaned


class Policies(BaseModel):
    """Aggregate of every policy consulted by the merge build."""

    policy_version: str = Field(default="2025-01")
    matching: MatchingPolicy = Field(default_factory=MatchingPolicy)
    synthesis: SynthesisPolicy = Field(default_factory=SynthesisPolicy)
    metadata: MetadataPolicy = Field(default_factory=MetadataPolicy)


def _resolve_env_overrides(raw: dict) -> dict:
    """Apply environment variable overrides using KOREA_UNIVERSITIES_POLICY__ prefix."""

    prefix = "KOREA_UNIVERSITIES_POLICY__"
    for key, value in os.environ.items():
        if not key.startswith(prefix):
            continue
        path = key[len(prefix) :].lower().split("__")
        cursor = raw
        for part in path[:-1]:
            cursor = cursor.setdefault(part, {})
        try:
            parsed = json.loads(value)
        except (TypeError, json.JSONDecodeError):
            parsed = value
        cursor[path[-1]] = parsed
    return raw


def load_policies(source: Path | Dict[str, Any]) -> Policies:
    """Load policies from a dictionary or YAML file with environment overrides."""

    if isinstance(source, Path):
        if not source.exists():
            raise FileNotFoundError(f"Policy file not found: {source}")
        with source.open("r", encoding="utf-8") as handle:
            raw = yaml.safe_load(handle) or {}
    else:
        raw = dict(source)
    hydrated = _resolve_env_overrides(raw)
    return Policies.model_validate(hydrated)


__all__ = [
    "Policies",
    "load_policies",
    "MatchingPolicy",
    "SynthesisPolicy",
    "MetadataPolicy",
    "SplitCampusRule",
]
