"""Storage layer for the projection and stats store."""

from .database import Database
from .schema import metadata, projected_contracts, stats

__all__ = ["Database", "metadata", "projected_contracts", "stats"]
