"""In-process per-title locking shared by the reference stores."""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator


class _Entry:
    __slots__ = ("lock", "users")

    def __init__(self) -> None:
        self.lock = threading.Lock()
        self.users = 0


class TitleLocks:
    """One ``threading.Lock`` per title that currently has callers.

    An entry lives only while some caller holds or waits on it, so the
    registry stays empty between operations. Only serializes callers
    within one process. With *enabled* False, :meth:`lock_title` is a no-op.
    """

    def __init__(self, *, enabled: bool = True) -> None:
        self._enabled = enabled
        self._guard = threading.Lock()
        self._entries: dict[str, _Entry] = {}

    def __len__(self) -> int:
        """Number of titles currently held or waited on."""
        with self._guard:
            return len(self._entries)

    @contextmanager
    def lock_title(self, title: str) -> Iterator[None]:
        if not self._enabled:
            yield
            return

        with self._guard:
            entry = self._entries.get(title)
            if entry is None:
                entry = self._entries[title] = _Entry()
            entry.users += 1
        try:
            with entry.lock:
                yield
        finally:
            with self._guard:
                entry.users -= 1
                if entry.users == 0:
                    del self._entries[title]
