"""Offline build pipeline producing the published catalog snapshot."""

from .merge import build_dataset

__all__ = ["build_dataset"]
