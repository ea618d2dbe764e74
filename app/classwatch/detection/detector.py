"""Timestamp-based change detector for class output directories.

Walks every root directory reported by a root provider, compares each
file's modification timestamp against an in-memory baseline and reports
which files are new, modified or gone since the previous pass.
"""

import logging
import threading
from collections.abc import Iterator, Mapping, Sequence
from pathlib import Path
from types import MappingProxyType

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
from classwatch.roots.provider import RootProvider, StaticRootProvider

logger = logging.getLogger(__name__)


def _canonical(path: Path) -> Path:
    """Resolve a path without requiring it to exist."""
    try:
        return path.resolve()
    except (OSError, RuntimeError):
        # Symlink loop; fall back to the absolute, unresolved form
        return path.absolute()


class FileChangeDetector:
    """Detects new, modified and removed files under a set of roots.

    The baseline (path -> last observed timestamp) starts empty, so the
    first pass reports every file as new. Each later pass reports only
    files whose timestamp value differs from the baseline, in either
    direction. Directories that cannot be listed count as empty, and
    files whose timestamp cannot be read are skipped for that pass.

    A lock serializes whole passes, so one instance may be shared between
    threads; each pass still sees and updates the baseline atomically.

    Args:
        root_provider: Source of root directories. ``None`` means no roots.
        timestamp_of: Returns the current timestamp of a file. May raise
            ``OSError``, in which case the file is skipped for this pass.
        list_children: Returns a directory's children, or an empty sequence
            when no listing is available.
        is_directory: Decides whether a listed child is descended into.
        suffixes: If given, only files ending with one of these suffixes
            are tracked (e.g. ``(".class",)``).
    """

    def __init__(
        self,
        root_provider: RootProvider | None = None,
        *,
        timestamp_of: TimestampSource = modification_timestamp,
        list_children: ChildLister = list_children,
        is_directory: DirectoryCheck = is_directory,
        suffixes: tuple[str, ...] | None = None,
    ) -> None:
        self._root_provider: RootProvider = (
            root_provider if root_provider is not None else StaticRootProvider()
        )
        self._timestamp_of = timestamp_of
        self._list_children = list_children
        self._is_directory = is_directory
        self._suffixes = tuple(suffixes) if suffixes else None

        self._lock = threading.Lock()
        self._baseline: dict[Path, Timestamp] = {}
        self._last_report: ScanReport | None = None

    @property
    def root_provider(self) -> RootProvider:
        """The provider queried at the start of every pass."""
        return self._root_provider

    def set_root_provider(self, root_provider: RootProvider) -> None:
        """Replace the root provider. The baseline is left untouched.

        Files that are no longer reachable through the new provider are
        reported as removed on the next pass.
        """
        with self._lock:
            self._root_provider = root_provider

    @property
    def baseline(self) -> Mapping[Path, Timestamp]:
        """Read-only snapshot of the tracked files and their timestamps."""
        with self._lock:
            return MappingProxyType(dict(self._baseline))

    @property
    def last_report(self) -> ScanReport | None:
        """Report of the most recent pass, or None before the first one."""
        return self._last_report

    def find_changed_files(self) -> set[Path]:
        """Run one pass and return the paths that are new or modified."""
        return set(self.scan().changed)

    def files_were_removed(self) -> bool:
        """Whether the most recent pass found tracked files missing.

        Returns False before any pass has run.
        """
        report = self.last_report
        return report is not None and report.files_were_removed

    def clear(self) -> None:
        """Forget every tracked file. The next pass reports all files as new."""
        with self._lock:
            self._baseline.clear()
            self._last_report = None

    def scan(self) -> ScanReport:
        """Walk all roots once, update the baseline and report the differences.

        Returns:
            ScanReport with added, modified and removed paths.

        Raises:
            Exception: Whatever the root provider raises is propagated as is.
        """
        with self._lock:
            roots = list(self._root_provider.root_directories())

            added: set[Path] = set()
            modified: set[Path] = set()
            observed: set[Path] = set()

            for path in self._walk(roots):
                if path in observed:
                    continue
                try:
                    timestamp = self._timestamp_of(path)
                except OSError as e:
                    logger.debug("Skipping file with unreadable timestamp %s: %s", path, e)
                    continue

                observed.add(path)
                if path not in self._baseline:
                    added.add(path)
                elif self._baseline[path] != timestamp:
                    modified.add(path)
                else:
                    continue
                self._baseline[path] = timestamp

            removed = self._baseline.keys() - observed
            for path in removed:
                del self._baseline[path]

            report = ScanReport(
                added=frozenset(added),
                modified=frozenset(modified),
                removed=frozenset(removed),
                tracked=len(self._baseline),
            )
            self._last_report = report

        logger.debug(
            "Scanned %d root(s): %d added, %d modified, %d removed, %d tracked",
            len(roots),
            len(report.added),
            len(report.modified),
            len(report.removed),
            report.tracked,
        )
        return report

    def _walk(self, roots: Sequence[Path]) -> Iterator[Path]:
        """Yield the resolved path of every tracked leaf file under the roots.

        Each directory is listed at most once per pass, keyed by its
        resolved path, so symlink cycles terminate and overlapping roots
        walk a subtree once. The suffix filter applies to the name as
        listed; a file reached through several links may be yielded more
        than once under the same resolved path.
        """
        visited: set[Path] = set()
        pending: list[Path] = [_canonical(Path(root)) for root in reversed(roots)]

        while pending:
            directory = pending.pop()
            if directory in visited:
                continue
            visited.add(directory)

            children = self._list_children(directory)
            subdirectories: list[Path] = []
            for child in children:
                if self._is_directory(child):
                    subdirectories.append(_canonical(child))
                elif self._is_tracked(child):
                    yield _canonical(child)
            pending.extend(reversed(subdirectories))

    def _is_tracked(self, path: Path) -> bool:
        if self._suffixes is None:
            return True
        return path.name.endswith(self._suffixes)
