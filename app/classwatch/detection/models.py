"""Scan result models for change detection.

This module defines the immutable report produced by one pass of the
change detector.
"""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True, slots=True)
class ScanReport:
    """Outcome of a single detector pass.

    Attributes:
        added: Paths with no baseline entry before this pass.
        modified: Paths whose timestamp differs from the baseline entry.
        removed: Baseline paths that were not observed during this pass.
        tracked: Number of baseline entries after this pass.
    """

    added: frozenset[Path] = field(default_factory=frozenset)
    modified: frozenset[Path] = field(default_factory=frozenset)
    removed: frozenset[Path] = field(default_factory=frozenset)
    tracked: int = 0

    def __post_init__(self) -> None:
        """Validate report consistency after initialization."""
        if self.tracked < 0:
            msg = f"Tracked count cannot be negative, got {self.tracked}"
            raise ValueError(msg)
        if self.added & self.modified:
            msg = "A path cannot be both added and modified"
            raise ValueError(msg)
        if (self.added | self.modified) & self.removed:
            msg = "A changed path cannot also be removed"
            raise ValueError(msg)

    @property
    def changed(self) -> frozenset[Path]:
        """New and modified paths together (the change set)."""
        return self.added | self.modified

    @property
    def files_were_removed(self) -> bool:
        """True if at least one previously tracked file disappeared."""
        return bool(self.removed)

    @property
    def is_empty(self) -> bool:
        """True if nothing was added, modified or removed."""
        return not (self.added or self.modified or self.removed)
