"""Tracking of requests that are currently being served."""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator
from contextlib import contextmanager

log = logging.getLogger(__name__)

VOLUME_OPERATION_ALREADY_EXISTS_ERROR_MSG = "An operation with the given Volume {} already exists"


class AlreadyInFlightError(RuntimeError):
    """Raised when an operation for a key is already in progress."""

    def __init__(self, key: str) -> None:
        super().__init__(VOLUME_OPERATION_ALREADY_EXISTS_ERROR_MSG.format(key))
        self.key = key


class InFlight:
    """A thread-safe set of keys for operations in progress."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._keys: set[str] = set()

    def insert(self, key: str) -> bool:
        """Mark ``key`` as in flight; return False if it already was."""
        with self._lock:
            if key in self._keys:
                return False
            self._keys.add(key)
            return True

    def delete(self, key: str) -> None:
        """Forget ``key``; unknown keys are ignored."""
        with self._lock:
            self._keys.discard(key)
        log.debug("Node Service: volume=%r operation finished", key)

    @contextmanager
    def hold(self, key: str) -> Iterator[str]:
        """Hold ``key`` for the duration of a block, raising if it is taken."""
        if not self.insert(key):
            raise AlreadyInFlightError(key)
        try:
            yield key
        finally:
            self.delete(key)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._keys