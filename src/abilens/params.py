"""Parameter store: the configured ABI text, guarded by a reader/writer lock.

This module provides:
- `ReadWriteLock`: many concurrent readers or one writer.
- `ParameterStore`: holds at most one ABI text; unset until `set()` is called.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator
from contextlib import contextmanager

from abilens.core.errors import NotConfiguredError

logger = logging.getLogger(__name__)


class ReadWriteLock:
    """Reader/writer exclusion: readers share, a writer excludes everyone.

    Waiting writers take priority over new readers so a steady stream of
    decode calls cannot starve a configuration update.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    @contextmanager
    def read(self) -> Iterator[None]:
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @contextmanager
    def write(self) -> Iterator[None]:
        with self._cond:
            self._writers_waiting += 1
            while self._writer or self._readers:
                self._cond.wait()
            self._writers_waiting -= 1
            self._writer = True
        try:
            yield
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()


class ParameterStore:
    """Holds the currently configured ABI text."""

    def __init__(self) -> None:
        self._lock = ReadWriteLock()
        self._abi: str | None = None

    def set(self, abi_text: str) -> None:
        """Store `abi_text`, replacing any previous value."""
        with self._lock.write():
            self._abi = abi_text
        logger.debug("parameters updated (%d chars of ABI)", len(abi_text))

    def get(self) -> str:
        """Return the stored ABI text or raise NotConfiguredError."""
        with self._lock.read():
            abi = self._abi
        if abi is None:
            raise NotConfiguredError()
        return abi

    def clear(self) -> None:
        with self._lock.write():
            self._abi = None

    @property
    def is_configured(self) -> bool:
        with self._lock.read():
            return self._abi is not None
