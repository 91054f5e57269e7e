"""Deferred capture of base tokens from the environment.

Widget styles may not be available the moment the preview reports ready, so a
capture is armed and then attempted after a couple of rendering
opportunities. A completed stylesheet load arms one more attempt. Each mode
moves through ``UNREAD -> PENDING -> CAPTURED``; a pass that reads no colors
drops the mode back to ``UNREAD`` so the next signal retries it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from themestudio.core.tokens import Mode, TokenSet, TokenStore
from themestudio.errors import ThemeStudioError

logger = logging.getLogger(__name__)

FRAMES_PER_PASS = 2


class CaptureState(Enum):
    UNREAD = "unread"
    PENDING = "pending"
    CAPTURED = "captured"


@dataclass(slots=True)
class _PendingPass:
    mode: Mode
    frames_left: int


class CaptureController:
    """Per-mode capture state machine driven by readiness signals and frame ticks."""

    def __init__(
        self,
        store: TokenStore,
        read_tokens: Callable[[Mode], TokenSet],
        *,
        frames_per_pass: int = FRAMES_PER_PASS,
    ) -> None:
        self._store = store
        self._read_tokens = read_tokens
        self._frames_per_pass = max(1, frames_per_pass)
        self._pending: list[_PendingPass] = []
        self._states: dict[Mode, CaptureState] = {
            mode: CaptureState.CAPTURED if store.has_capture(mode) else CaptureState.UNREAD
            for mode in Mode
        }

    def state(self, mode: Mode) -> CaptureState:
        return self._states[mode]

    @property
    def has_pending(self) -> bool:
        return bool(self._pending)

    def signal_ready(self, mode: Mode) -> bool:
        """Arm a capture pass for ``mode``. Returns False if already captured."""
        return self._arm(mode)

    def signal_stylesheet_loaded(self, mode: Mode) -> bool:
        return self._arm(mode)

    def on_frame(self) -> list[Mode]:
        """Advance pending passes by one rendering opportunity.

        Returns the modes captured during this tick.
        """
        if not self._pending:
            return []
        due: list[Mode] = []
        remaining: list[_PendingPass] = []
        for pending in self._pending:
            pending.frames_left -= 1
            if pending.frames_left <= 0:
                due.append(pending.mode)
            else:
                remaining.append(pending)
        self._pending = remaining

        captured: list[Mode] = []
        for mode in due:
            if self._attempt(mode):
                captured.append(mode)
        return captured

    def cancel(self) -> None:
        """Drop every pending pass; pending modes return to UNREAD."""
        self._pending = []
        for mode, state in self._states.items():
            if state is CaptureState.PENDING:
                self._states[mode] = CaptureState.UNREAD

    def _arm(self, mode: Mode) -> bool:
        if self._states[mode] is CaptureState.CAPTURED:
            return False
        self._pending.append(_PendingPass(mode=mode, frames_left=self._frames_per_pass))
        self._states[mode] = CaptureState.PENDING
        return True

    def _attempt(self, mode: Mode) -> bool:
        if self._states[mode] is CaptureState.CAPTURED:
            return False
        try:
            tokens = self._read_tokens(mode)
        except ThemeStudioError as exc:
            logger.warning("token read failed for %s mode: %s", mode.value, exc)
            tokens = TokenSet.empty()

        if tokens.has_colors:
            self._store.capture_if_empty(mode, tokens)
            self._states[mode] = CaptureState.CAPTURED
            logger.info("captured %d %s color tokens", len(tokens.colors), mode.value)
            return True

        still_pending = any(pending.mode is mode for pending in self._pending)
        self._states[mode] = CaptureState.PENDING if still_pending else CaptureState.UNREAD
        logger.debug("empty capture for %s mode; pending=%s", mode.value, still_pending)
        return False
