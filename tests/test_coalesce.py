"""Tests for frame-coalesced commits."""

from themestudio.core.coalesce import FrameCoalescer


def test_only_latest_value_is_committed() -> None:
    committed: list[str] = []
    coalescer: FrameCoalescer[str] = FrameCoalescer(committed.append)

    assert coalescer.submit("#000001") is True
    assert coalescer.submit("#000002") is False
    assert coalescer.submit("#000003") is False
    assert coalescer.has_pending

    assert coalescer.flush() is True
    assert committed == ["#000003"]
    assert not coalescer.has_pending


def test_flush_without_pending_value_commits_nothing() -> None:
    committed: list[str] = []
    coalescer: FrameCoalescer[str] = FrameCoalescer(committed.append)
    assert coalescer.flush() is False
    assert committed == []


def test_cancel_discards_pending_value() -> None:
    committed: list[str] = []
    coalescer: FrameCoalescer[str] = FrameCoalescer(committed.append)
    coalescer.submit("#ffffff")
    coalescer.cancel()
    assert coalescer.flush() is False
    assert committed == []


def test_new_window_opens_after_flush() -> None:
    committed: list[str] = []
    coalescer: FrameCoalescer[str] = FrameCoalescer(committed.append)
    coalescer.submit("#111111")
    coalescer.flush()
    assert coalescer.submit("#222222") is True
    coalescer.flush()
    assert committed == ["#111111", "#222222"]
