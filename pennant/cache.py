"""Compute-once cache of elimination results, keyed by team name."""

from __future__ import annotations

import threading
from typing import Callable, Dict, Generic, Iterator, Optional, Tuple, TypeVar

from pennant.logging import get_logger

LOGGER = get_logger(__name__)

V = TypeVar("V")


class CertificateCache(Generic[V]):
    """Thread-safe mapping from team name to a resolved result.

    A result, including ``None`` (not eliminated), is computed at most once per
    name: concurrent callers asking for the same name wait on a per-name lock
    and then all receive the stored object. Callers for different names do not
    block each other while computing.

    Iteration follows resolution order.
    """

    def __init__(self) -> None:
        self._results: Dict[str, Optional[V]] = {}
        self._locks: Dict[str, threading.Lock] = {}
        self._guard = threading.Lock()

    def __contains__(self, name: object) -> bool:
        return name in self._results

    def __len__(self) -> int:
        return len(self._results)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._results))

    def items(self) -> Iterator[Tuple[str, Optional[V]]]:
        return iter(list(self._results.items()))

    def get(self, name: str) -> Optional[V]:
        """Return the stored result; raise KeyError if ``name`` is unresolved."""
        return self._results[name]

    def _lock_for(self, name: str) -> threading.Lock:
        with self._guard:
            lock = self._locks.get(name)
            if lock is None:
                lock = self._locks[name] = threading.Lock()
            return lock

    def get_or_compute(self, name: str, compute: Callable[[], Optional[V]]) -> Optional[V]:
        """Return the result for ``name``, calling ``compute`` if it is unresolved.

        An exception raised by ``compute`` propagates and leaves ``name``
        unresolved.
        """
        if name in self._results:
            LOGGER.debug("Cache hit for '%s'", name)
            return self._results[name]

        with self._lock_for(name):
            # another thread may have finished while we waited
            if name in self._results:
                return self._results[name]
            result = compute()
            self._results[name] = result
            return result

    def clear(self) -> None:
        """Forget every result. Only needed when the league snapshot is replaced."""
        with self._guard:
            self._results.clear()
            self._locks.clear()
