"""Configuration entry points."""

from .policies import (
    MatchingPolicy,
    MetadataPolicy,
    Policies,
    SplitCampusRule,
    SynthesisPolicy,
    load_policies,
)
from .settings import PathsConfig, Settings, get_settings

__all__ = [
    "MatchingPolicy",
    "MetadataPolicy",
    "PathsConfig",
    "Policies",
    "Settings",
    "SplitCampusRule",
    "SynthesisPolicy",
    "get_settings",
    "load_policies",
]
