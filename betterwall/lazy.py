"""Deferred construction of expensive views."""

from __future__ import annotations

from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")


class LazyView(Generic[T]):
    """Creates its view with ``factory`` on first access and keeps it until unloaded."""

    def __init__(
        self,
        factory: Callable[[], T],
        on_load: Optional[Callable[[T], None]] = None,
    ) -> None:
        self._factory = factory
        self.on_load = on_load
        self._view: Optional[T] = None

    def is_loaded(self) -> bool:
        return self._view is not None

    def get(self) -> T:
        """Return the view, creating it if needed."""
        return self.ensure_loaded()

    def ensure_loaded(self, callback: Optional[Callable[[T], None]] = None) -> T:
        """Create the view if absent; callbacks run only on that first creation."""
        if self._view is None:
            view = self._factory()
            self._view = view
            if self.on_load is not None:
                self.on_load(view)
            if callback is not None:
                callback(view)
        return self._view

    def unload(self) -> None:
        """Drop the view; the next access builds a fresh one."""
        self._view = None