"""Latest-value-wins commit coalescing for high-frequency picker input."""

from __future__ import annotations

from typing import Callable, Generic, TypeVar

T = TypeVar("T")


class FrameCoalescer(Generic[T]):
    """Buffers submitted values and commits only the latest one per flush.

    ``submit`` returns True when it opened a new coalescing window, which is the
    caller's cue to schedule a ``flush`` on the next rendering opportunity.
    """

    def __init__(self, commit: Callable[[T], None]) -> None:
        self._commit = commit
        self._pending: T | None = None
        self._scheduled = False

    @property
    def has_pending(self) -> bool:
        return self._scheduled

    def submit(self, value: T) -> bool:
        self._pending = value
        if self._scheduled:
            return False
        self._scheduled = True
        return True

    def flush(self) -> bool:
        """Commit the pending value, if any. Returns True when something was committed."""
        self._scheduled = False
        pending, self._pending = self._pending, None
        if pending is None:
            return False
        self._commit(pending)
        return True

    def cancel(self) -> None:
        self._scheduled = False
        self._pending = None
