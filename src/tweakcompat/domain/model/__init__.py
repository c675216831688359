"""Domain model for the compatibility catalog."""

from __future__ import annotations

from .catalog import Catalog, Device, Outcome, Package, Review, Version, VersionOutcome
from .change import CandidateChange, ChangeRecord, Issue
from .enums import CalculatedStatus, MergeEffect, ReviewStatus, RunMode

__all__ = [
    "CalculatedStatus",
    "CandidateChange",
    "Catalog",
    "ChangeRecord",
    "Device",
    "Issue",
    "MergeEffect",
    "Outcome",
    "Package",
    "Review",
    "ReviewStatus",
    "RunMode",
    "Version",
    "VersionOutcome",
]
