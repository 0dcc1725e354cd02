"""A small observer list used to publish game events."""

from __future__ import annotations

from typing import Any, Callable, List

Observer = Callable[..., Any]


class Event:
    """An ordered list of callables that are notified together."""

    def __init__(self) -> None:
        self._observers: List[Observer] = []

    def __len__(self) -> int:
        return len(self._observers)

    def __contains__(self, observer: object) -> bool:
        return observer in self._observers

    def attach(self, observer: Observer) -> None:
        """Add an observer; it is called after those already attached."""
        self._observers.append(observer)

    def detach(self, observer: Observer) -> None:
        """Remove the first occurrence of an observer, if it is attached."""
        try:
            self._observers.remove(observer)
        except ValueError:
            pass

    def notify(self, *args: Any) -> None:
        """Call every attached observer with the given arguments."""
        for observer in list(self._observers):
            observer(*args)