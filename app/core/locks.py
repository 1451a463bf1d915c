# app/core/locks.py
"""
Per-key critical sections for check-then-insert paths.

Usage:

    with registration_locks.hold(email):
        if repo.get_by_email(session, email) is None:
            repo.create(session, user)

Only callers using the same key are serialized; different keys proceed
in parallel. Entries are dropped once no thread holds or waits on them,
so the registry does not grow with every key ever seen.
"""

import threading
from collections.abc import Hashable, Iterator
from contextlib import contextmanager


class KeyedLock:
    """A registry of reference-counted `threading.Lock`s, one per key."""

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._locks: dict[Hashable, threading.Lock] = {}
        self._waiters: dict[Hashable, int] = {}

    @contextmanager
    def hold(self, key: Hashable) -> Iterator[None]:
        with self._guard:
            lock = self._locks.setdefault(key, threading.Lock())
            self._waiters[key] = self._waiters.get(key, 0) + 1

        lock.acquire()
        try:
            yield
        finally:
            lock.release()
            with self._guard:
                self._waiters[key] -= 1
                if self._waiters[key] == 0:
                    del self._waiters[key]
                    del self._locks[key]

    def __len__(self) -> int:
        """Number of keys currently held or waited on."""
        with self._guard:
            return len(self._locks)


# One registry per uniqueness constraint.
registration_locks = KeyedLock()  # key: email
subscription_locks = KeyedLock()  # key: (user_id, plan_id)
follow_locks = KeyedLock()  # key: (follower_id, trainer_id)
