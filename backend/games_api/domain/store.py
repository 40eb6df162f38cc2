# games_api/domain/store.py
from __future__ import annotations
from typing import List, Optional, Protocol, TypeVar

__all__ = ("Identified", "Store", "StoreUnavailableError", "T")


class Identified(Protocol):
    """Anything that knows its own key can live in a Store."""

    def get_id(self) -> int: ...


T = TypeVar("T", bound=Identified)


class StoreUnavailableError(RuntimeError):
    """Store refused the call: an earlier operation failed mid-way."""


class Store(Protocol[T]):
    """Keyed collection contract used by the HTTP layer.

    `save` is an upsert: the key is taken from the value itself, the
    previous value (if any) is returned. `delete` returns the removed
    value or None.
    """

    def save(self, value: T) -> Optional[T]: ...
    def delete(self, key: int) -> Optional[T]: ...
    def get(self, key: int) -> Optional[T]: ...
    def get_all(self) -> List[T]: ...
    def __len__(self) -> int: ...
