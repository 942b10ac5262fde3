"""Hooks that dispatch values to registered listeners."""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Any, Generic, TypeVar

T = TypeVar("T")

Listener = Callable[[Any, T], None]


class Hook(Generic[T]):
    """A thread-safe list of listeners called with a context and a value."""

    def __init__(self) -> None:
        self.listeners: list[Listener[T]] = []
        self._lock = threading.Lock()

    def listen(self, *args: Listener[T]) -> None:
        """Register the given listeners."""
        with self._lock:
            self.listeners.extend(args)

    def dispatch(self, ctx: Any, value: T) -> None:
        """Call every listener, in registration order, with ``ctx`` and ``value``."""
        with self._lock:
            for listener in self.listeners:
                listener(ctx, value)