"""Reader/writer lock for shared caches.

Many readers may hold the lock at once; a writer excludes readers and other
writers. The first reader takes the writer lock on behalf of all readers and
the last reader releases it, so a plain (non-reentrant) threading.Lock is used:
it may be released by a different thread than the one that acquired it.
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Iterator


class RWLock:
    """Reader/writer lock.

    Example:
        >>> lock = RWLock()
        >>> with lock.read():
        ...     value = cache.get(key)
        >>> with lock.write():
        ...     cache[key] = value
    """

    def __init__(self) -> None:
        self._readers = 0
        self._readers_lock = threading.Lock()
        self._writer_lock = threading.Lock()

    @contextmanager
    def read(self) -> Iterator[None]:
        self._acquire_read()
        try:
            yield
        finally:
            self._release_read()

    @contextmanager
    def write(self) -> Iterator[None]:
        with self._writer_lock:
            yield

    def _acquire_read(self) -> None:
        with self._readers_lock:
            self._readers += 1
            if self._readers == 1:
                # first reader blocks writers
                self._writer_lock.acquire()

    def _release_read(self) -> None:
        with self._readers_lock:
            self._readers -= 1
            if self._readers == 0:
                # last reader releases writer lock
                self._writer_lock.release()
