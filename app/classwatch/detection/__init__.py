"""Change detection for compiled build outputs.

This module provides the timestamp-based file change detector, its
pluggable filesystem strategies and the scan report model.
"""

from classwatch.detection.detector import FileChangeDetector
from classwatch.detection.models import ScanReport
from classwatch.detection.strategies import (
    ChildLister,
    DirectoryCheck,
    Timestamp,
    TimestampSource,
    is_directory,
    list_children,
    modification_timestamp,
)

__all__ = [
    "ChildLister",
    "DirectoryCheck",
    "FileChangeDetector",
    "ScanReport",
    "Timestamp",
    "TimestampSource",
    "is_directory",
    "list_children",
    "modification_timestamp",
]
