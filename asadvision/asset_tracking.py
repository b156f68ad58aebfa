"""Tracking of resources whose assets are still loading."""

from __future__ import annotations

from collections import deque
from typing import Any, Callable, Hashable

Handle = Hashable


class ResourceHandles:
    """A queue of pending resources, inserted once their assets have loaded."""

    def __init__(self) -> None:
        self._waiting: deque[
            tuple[Handle, Callable[[Handle], bool], Callable[[Handle], Any]]
        ] = deque()
        self._finished: list[Handle] = []

    @property
    def finished(self) -> tuple[Handle, ...]:
        """Handles whose resources have been inserted, in completion order."""
        return tuple(self._finished)

    @property
    def waiting(self) -> tuple[Handle, ...]:
        """Handles still waiting on their assets."""
        return tuple(handle for handle, _, _ in self._waiting)

    def load_resource(
        self,
        handle: Handle,
        is_loaded: Callable[[Handle], bool],
        insert: Callable[[Handle], Any],
    ) -> ResourceHandles:
        """Queue a resource; ``insert`` runs once ``is_loaded`` reports it ready."""
        self._waiting.append((handle, is_loaded, insert))
        return self

    def process(self) -> None:
        """Check every waiting resource once and insert those that are ready."""
        for _ in range(len(self._waiting)):
            handle, is_loaded, insert = self._waiting.popleft()
            if is_loaded(handle):
                insert(handle)
                self._finished.append(handle)
            else:
                self._waiting.append((handle, is_loaded, insert))

    def is_all_done(self) -> bool:
        """True when no resource is still waiting on its assets."""
        return not self._waiting