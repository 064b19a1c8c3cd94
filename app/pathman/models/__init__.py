"""Data models for pathman.

This module exports the core data structures used throughout the application.
"""

from pathman.models.clash import ClashKind, ClashReport
from pathman.models.cleanup import (
    CleanupActionResult,
    CleanupBatchResult,
    CleanupCandidate,
    CleanupKind,
)
from pathman.models.managed import ManagedDirectory, ManagedExecutable, ManagedLink, Priority

__all__ = [
    "ClashKind",
    "ClashReport",
    "CleanupActionResult",
    "CleanupBatchResult",
    "CleanupCandidate",
    "CleanupKind",
    "ManagedDirectory",
    "ManagedExecutable",
    "ManagedLink",
    "Priority",
]
