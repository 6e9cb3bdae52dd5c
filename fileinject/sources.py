"""The source file collection shared by every target of a run.

The collection is acquired once. A failed acquisition is remembered so every
target processed against it fails with the same underlying error instead of
being injected with a partial or empty list.
"""

import threading
from collections.abc import Callable, Iterable
from pathlib import Path

from hotlog import get_logger

from fileinject.exceptions import SourceCollectionError
from fileinject.models import SourceFile

logger = get_logger(__name__)

SourceProvider = Iterable[SourceFile] | Callable[[], Iterable[SourceFile]]


class SourceCollection:
    """Lazily materialised, read-only list of source files."""

    def __init__(self, provider: SourceProvider) -> None:
        self._provider = provider
        self._lock = threading.Lock()
        self._files: tuple[SourceFile, ...] | None = None
        self._error: Exception | None = None

    def files(self) -> tuple[SourceFile, ...]:
        """Return the collection, acquiring it on first use.

        Raises:
            SourceCollectionError: acquisition failed (now or on an earlier call).
        """
        with self._lock:
            if self._files is None and self._error is None:
                self._acquire()
        if self._error is not None:
            msg = f'Could not collect source files: {self._error}'
            raise SourceCollectionError(msg) from self._error
        return self._files or ()

    def _acquire(self) -> None:
        try:
            provider = self._provider() if callable(self._provider) else self._provider
            self._files = tuple(provider)
        except Exception as err:  # noqa: BLE001 - re-raised for every target
            logger.error('source_collection_failed', error=str(err))
            self._error = err
        else:
            logger.debug('source_collection_ready', count=len(self._files))

    def __len__(self) -> int:
        return len(self.files())


def collect_sources(patterns: Iterable[str], cwd: Path) -> list[SourceFile]:
    """Expand glob ``patterns`` under ``cwd`` into source files.

    Files keep the order of the patterns; within a pattern they are sorted by
    path. A file matched by several patterns is listed once. Patterns with a
    leading ``!`` exclude files matched so far.
    """
    files: dict[Path, SourceFile] = {}
    for pattern in patterns:
        if pattern.startswith('!'):
            excluded = set(cwd.glob(pattern[1:]))
            files = {path: f for path, f in files.items() if path not in excluded}
            continue
        for path in sorted(cwd.glob(pattern)):
            if path.is_file() and path not in files:
                files[path] = SourceFile(path=path, cwd=cwd, base=cwd)
    return list(files.values())
