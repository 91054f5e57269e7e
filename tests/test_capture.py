"""Tests for the deferred base-token capture state machine."""

from __future__ import annotations

from themestudio.core.capture import CaptureController, CaptureState
from themestudio.core.tokens import Mode, TokenSet, TokenStore
from themestudio.errors import ErrorCode, ThemeStudioError

FULL = TokenSet(colors={"accentColor": "#9b7bff"}, radii={"modal": "20px"})


class FakeReader:
    """Returns queued token sets per call; the last one repeats."""

    def __init__(self, *results):
        self._results = list(results)
        self.calls: list[Mode] = []

    def __call__(self, mode: Mode) -> TokenSet:
        self.calls.append(mode)
        result = self._results.pop(0) if len(self._results) > 1 else self._results[0]
        if isinstance(result, Exception):
            raise result
        return result


def test_capture_runs_after_two_frames() -> None:
    store = TokenStore()
    reader = FakeReader(FULL)
    controller = CaptureController(store, reader)

    assert controller.state(Mode.DARK) is CaptureState.UNREAD
    assert controller.signal_ready(Mode.DARK) is True
    assert controller.state(Mode.DARK) is CaptureState.PENDING

    assert controller.on_frame() == []
    assert reader.calls == []
    assert controller.on_frame() == [Mode.DARK]
    assert controller.state(Mode.DARK) is CaptureState.CAPTURED
    assert store.base(Mode.DARK) is FULL
    assert not controller.has_pending


def test_arming_a_captured_mode_is_a_no_op() -> None:
    store = TokenStore()
    controller = CaptureController(store, FakeReader(FULL), frames_per_pass=1)
    controller.signal_ready(Mode.DARK)
    controller.on_frame()
    assert controller.signal_ready(Mode.DARK) is False
    assert controller.signal_stylesheet_loaded(Mode.DARK) is False
    assert not controller.has_pending


def test_empty_read_returns_to_unread_then_retries_on_stylesheet_load() -> None:
    store = TokenStore()
    reader = FakeReader(TokenSet(), FULL)
    controller = CaptureController(store, reader, frames_per_pass=1)

    controller.signal_ready(Mode.LIGHT)
    assert controller.on_frame() == []
    assert controller.state(Mode.LIGHT) is CaptureState.UNREAD
    assert not store.has_capture(Mode.LIGHT)

    assert controller.signal_stylesheet_loaded(Mode.LIGHT) is True
    assert controller.on_frame() == [Mode.LIGHT]
    assert store.has_capture(Mode.LIGHT)


def test_empty_read_stays_pending_while_another_pass_is_armed() -> None:
    store = TokenStore()
    reader = FakeReader(TokenSet(), FULL)
    controller = CaptureController(store, reader, frames_per_pass=2)

    controller.signal_ready(Mode.DARK)
    controller.on_frame()
    controller.signal_stylesheet_loaded(Mode.DARK)
    assert controller.on_frame() == []
    assert controller.state(Mode.DARK) is CaptureState.PENDING
    assert controller.on_frame() == [Mode.DARK]


def test_read_errors_count_as_empty_capture() -> None:
    store = TokenStore()
    reader = FakeReader(ThemeStudioError(ErrorCode.STYLESHEET_NOT_FOUND))
    controller = CaptureController(store, reader, frames_per_pass=1)
    controller.signal_ready(Mode.DARK)
    assert controller.on_frame() == []
    assert controller.state(Mode.DARK) is CaptureState.UNREAD


def test_cancel_drops_pending_passes() -> None:
    store = TokenStore()
    reader = FakeReader(FULL)
    controller = CaptureController(store, reader)
    controller.signal_ready(Mode.DARK)
    controller.signal_ready(Mode.LIGHT)
    controller.cancel()

    assert not controller.has_pending
    assert controller.state(Mode.DARK) is CaptureState.UNREAD
    assert controller.on_frame() == []
    assert controller.on_frame() == []
    assert reader.calls == []


def test_modes_capture_independently() -> None:
    store = TokenStore()
    controller = CaptureController(store, FakeReader(FULL), frames_per_pass=1)
    controller.signal_ready(Mode.DARK)
    controller.on_frame()
    assert controller.state(Mode.DARK) is CaptureState.CAPTURED
    assert controller.state(Mode.LIGHT) is CaptureState.UNREAD


def test_prefilled_store_starts_captured() -> None:
    store = TokenStore()
    store.capture_if_empty(Mode.DARK, FULL)
    controller = CaptureController(store, FakeReader(FULL))
    assert controller.state(Mode.DARK) is CaptureState.CAPTURED
    assert controller.state(Mode.LIGHT) is CaptureState.UNREAD
