"""Command-line interface for building and querying the catalog."""

from .main import app

__all__ = ["app"]
