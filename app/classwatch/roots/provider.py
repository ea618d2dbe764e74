"""Root providers for the change detector.

A root provider answers one question: which directories should be
scanned right now. Providers never check whether the directories exist;
the detector treats missing roots as empty.
"""

import os
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Protocol, runtime_checkable

# Classpath entries with these suffixes are archives, not class directories
_ARCHIVE_SUFFIXES: tuple[str, ...] = (".jar", ".zip")


@runtime_checkable
class RootProvider(Protocol):
    """Supplies the ordered collection of root directories to scan."""

    def root_directories(self) -> Sequence[Path]:
        """Return the directories to scan. May be empty."""
        ...


def _unique(paths: Iterable[Path]) -> tuple[Path, ...]:
    """Drop duplicate paths while keeping first-seen order."""
    seen: set[Path] = set()
    result: list[Path] = []
    for path in paths:
        if path in seen:
            continue
        seen.add(path)
        result.append(path)
    return tuple(result)


class StaticRootProvider:
    """Root provider backed by a fixed list of directories.

    Args:
        directories: Directories to report, in order. Duplicates are dropped.
    """

    def __init__(self, directories: Iterable[Path | str] = ()) -> None:
        self._directories = _unique(Path(d) for d in directories)

    def root_directories(self) -> Sequence[Path]:
        return self._directories

    def __repr__(self) -> str:
        return f"StaticRootProvider({list(map(str, self._directories))!r})"


class ClasspathRootProvider:
    """Root provider that derives class directories from a classpath string.

    The classpath is split on ``os.pathsep``. Blank entries and archive
    entries (``.jar``, ``.zip``) are ignored since only directories hold
    class files worth watching. An empty classpath is valid and simply
    contributes nothing.

    Args:
        classpath: Platform classpath string (e.g. ``"build/classes:lib/a.jar"``).
        extra_directories: Additional directories appended after the
            classpath entries (e.g. separately configured output folders).
    """

    def __init__(
        self,
        classpath: str = "",
        extra_directories: Iterable[Path | str] = (),
    ) -> None:
        entries = [*parse_classpath(classpath), *(Path(d) for d in extra_directories)]
        self._directories = _unique(entries)

    def root_directories(self) -> Sequence[Path]:
        return self._directories


def parse_classpath(classpath: str) -> list[Path]:
    """Split a classpath string into candidate class directories.

    Args:
        classpath: ``os.pathsep``-separated classpath.

    Returns:
        Directory entries in classpath order, archives and blanks removed.
    """
    directories: list[Path] = []
    for raw in classpath.split(os.pathsep):
        entry = raw.strip()
        if not entry:
            continue
        if entry.lower().endswith(_ARCHIVE_SUFFIXES):
            continue
        directories.append(Path(entry))
    return directories
