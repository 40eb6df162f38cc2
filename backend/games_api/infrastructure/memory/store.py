"""In-memory хранилище. Живёт ровно столько, сколько процесс."""

from __future__ import annotations
import logging
from contextlib import contextmanager
from threading import Lock
from typing import Dict, Generic, Iterable, Iterator, List, Optional

from ...domain.store import StoreUnavailableError, T

logger = logging.getLogger(__name__)


class InMemoryStore(Generic[T]):
    """Thread-safe keyed collection.

    One lock covers the whole map and is held for the full duration of
    every call, reads included. If anything escapes a save or delete the
    store is poisoned and every later call raises StoreUnavailableError.
    A failed read changes nothing and leaves the store usable.
    """

    def __init__(self) -> None:
        self._data: Dict[int, T] = {}
        self._lock = Lock()
        self._poisoned = False

    @classmethod
    def init(cls, initial: Iterable[T]) -> "InMemoryStore[T]":
        store = cls()
        for value in initial:
            store._data[value.get_id()] = value
        return store

    @contextmanager
    def _guard(self, mutating: bool = False) -> Iterator[Dict[int, T]]:
        with self._lock:
            if self._poisoned:
                raise StoreUnavailableError("store is unavailable after a failed operation")
            try:
                yield self._data
            except BaseException:
                if mutating:
                    self._poisoned = True
                    logger.error("store poisoned by a failed write", exc_info=True)
                raise

    @property
    def poisoned(self) -> bool:
        return self._poisoned

    # ── CRUD ───────────────────────────────────────────────────
    def save(self, value: T) -> Optional[T]:
        key = value.get_id()
        with self._guard(mutating=True) as data:
            previous = data.get(key)
            data[key] = value
        return previous

    def delete(self, key: int) -> Optional[T]:
        with self._guard(mutating=True) as data:
            return data.pop(key, None)

    def get(self, key: int) -> Optional[T]:
        with self._guard() as data:
            return data.get(key)

    def get_all(self) -> List[T]:
        with self._guard() as data:
            return list(data.values())

    # ── helpers ────────────────────────────────────────────────
    def __len__(self) -> int:
        with self._guard() as data:
            return len(data)

    def __contains__(self, key: object) -> bool:
        with self._guard() as data:
            return key in data
