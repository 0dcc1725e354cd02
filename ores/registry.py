"""Lookup of shared services and data readers by their type."""

from __future__ import annotations

from typing import Dict, Optional, Type, TypeVar

T = TypeVar("T")


class Registry:
    """Maps a type to the one instance registered for it.

    The first instance registered for a type is kept; later ones are ignored.
    """

    def __init__(self) -> None:
        self._entries: Dict[type, object] = {}

    def __contains__(self, kind: object) -> bool:
        return kind in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def add(self, kind: Type[T], instance: T) -> None:
        """Register ``instance`` under ``kind`` unless one is already there."""
        if not isinstance(instance, kind):
            raise TypeError(
                f"{type(instance).__name__} instance is not a {kind.__name__}"
            )
        self._entries.setdefault(kind, instance)

    def get(self, kind: Type[T]) -> Optional[T]:
        """Return the instance registered under ``kind``, or ``None``."""
        return self._entries.get(kind)  # type: ignore[return-value]