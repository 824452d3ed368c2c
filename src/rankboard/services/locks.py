"""Per-key mutual exclusion for ledger append-and-recompute units."""

from __future__ import annotations

import threading
from collections.abc import Hashable, Iterator
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field


@dataclass
class _Entry:
    lock: threading.Lock = field(default_factory=threading.Lock)
    holders: int = 0


class KeyedLocks:
    """Lazily created locks, one per key, dropped once nobody holds or awaits them.

    Work on different keys proceeds in parallel; work on the same key is
    serialised. Several keys are always acquired in sorted order so two
    callers locking the same pair cannot deadlock.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._guard = threading.Lock()
        self._entries: dict[Hashable, _Entry] = {}

    @contextmanager
    def hold(self, *keys: Hashable) -> Iterator[None]:
        ordered = sorted(set(keys))
        with self._guard:
            entries = []
            for key in ordered:
                entry = self._entries.setdefault(key, _Entry())
                entry.holders += 1
                entries.append((key, entry))
        try:
            with ExitStack() as stack:
                for _, entry in entries:
                    stack.enter_context(entry.lock)
                yield
        finally:
            with self._guard:
                for key, entry in entries:
                    entry.holders -= 1
                    if entry.holders == 0:
                        del self._entries[key]

    def __len__(self) -> int:
        with self._guard:
            return len(self._entries)

    def __repr__(self) -> str:
        return f"<KeyedLocks {self.name!r} held={len(self)}>"


person_locks = KeyedLocks("person")
comment_locks = KeyedLocks("comment")
