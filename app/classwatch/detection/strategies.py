"""Default filesystem strategies used by the change detector.

The detector never touches the filesystem directly; it goes through
these three functions, each of which can be swapped at construction
time (tests substitute them to simulate clock changes or directories
that vanish mid-scan).
"""

import logging
from collections.abc import Callable, Hashable, Sequence
from pathlib import Path

logger = logging.getLogger(__name__)

# Opaque timestamp value; the detector only compares for equality
Timestamp = Hashable

TimestampSource = Callable[[Path], Timestamp]
ChildLister = Callable[[Path], Sequence[Path]]
DirectoryCheck = Callable[[Path], bool]


def modification_timestamp(path: Path) -> int:
    """Read the modification time of a file in nanoseconds.

    Args:
        path: File to inspect.

    Returns:
        ``st_mtime_ns`` of the file.

    Raises:
        OSError: If the file cannot be stat'ed (e.g. deleted after listing).
    """
    return path.stat().st_mtime_ns


def list_children(directory: Path) -> Sequence[Path]:
    """List the immediate children of a directory.

    A directory that is missing, unreadable or not a directory at all
    yields an empty sequence; there is no error case.

    Args:
        directory: Directory to list.

    Returns:
        Children sorted by name, or an empty tuple if no listing is available.
    """
    try:
        return sorted(directory.iterdir())
    except FileNotFoundError:
        logger.debug("Directory disappeared before listing: %s", directory)
    except NotADirectoryError:
        logger.debug("Not a directory, nothing to list: %s", directory)
    except PermissionError:
        logger.warning("Permission denied listing directory: %s", directory)
    except OSError as e:
        logger.debug("Cannot list directory %s: %s", directory, e)
    return ()


def is_directory(path: Path) -> bool:
    """Check whether a listed entry should be descended into."""
    try:
        return path.is_dir()
    except OSError:
        return False
