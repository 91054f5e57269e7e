"""Tests for token sets and the per-mode base token store."""

import pytest

from themestudio.core.tokens import Mode, TokenSet, TokenStore


def _tokens(**colors: str) -> TokenSet:
    return TokenSet(colors=colors, radii={"modal": "20px", "connectButton": "12px"})


def test_mode_from_value() -> None:
    assert Mode.from_value("Dark") is Mode.DARK
    assert Mode.from_value(Mode.LIGHT) is Mode.LIGHT
    with pytest.raises(ValueError):
        Mode.from_value("sepia")


def test_token_set_is_read_only() -> None:
    tokens = _tokens(accentColor="#111111")
    with pytest.raises(TypeError):
        tokens.colors["accentColor"] = "#000000"


def test_capture_if_empty_is_idempotent() -> None:
    store = TokenStore()
    first = _tokens(accentColor="#111111")
    assert store.capture_if_empty(Mode.DARK, first) is True
    assert store.capture_if_empty(Mode.DARK, first) is False
    assert store.base(Mode.DARK) is first


def test_later_capture_does_not_replace_colored_set() -> None:
    store = TokenStore()
    store.capture_if_empty(Mode.DARK, _tokens(accentColor="#111111"))
    store.capture_if_empty(Mode.DARK, _tokens(accentColor="#999999"))
    assert store.base(Mode.DARK).colors["accentColor"] == "#111111"


def test_colorless_set_can_be_replaced() -> None:
    store = TokenStore()
    store.capture_if_empty(Mode.LIGHT, TokenSet(radii={"modal": "8px"}))
    assert store.has_capture(Mode.LIGHT) is False
    store.capture_if_empty(Mode.LIGHT, _tokens(modalText="#000000"))
    assert store.has_capture(Mode.LIGHT) is True


def test_modes_are_independent() -> None:
    store = TokenStore()
    store.capture_if_empty(Mode.DARK, _tokens(accentColor="#111111"))
    assert store.has_capture(Mode.DARK)
    assert not store.has_capture(Mode.LIGHT)
    assert store.base(Mode.LIGHT) == TokenSet.empty()


def test_known_color_keys_are_sorted_from_first_capture() -> None:
    store = TokenStore()
    store.capture_if_empty(Mode.DARK, _tokens(modalText="#1", accentColor="#2"))
    store.capture_if_empty(Mode.LIGHT, _tokens(zeta="#3"))
    assert store.known_color_keys() == ("accentColor", "modalText")


def test_radius_keys_prefer_dark() -> None:
    store = TokenStore()
    store.capture_if_empty(Mode.LIGHT, TokenSet(colors={"a": "#1"}, radii={"light": "1px"}))
    assert store.radius_keys(Mode.DARK) == ("light",)
    store.capture_if_empty(Mode.DARK, TokenSet(colors={"a": "#1"}, radii={"dark": "1px"}))
    assert store.radius_keys(Mode.LIGHT) == ("dark",)
