"""Tests for the builder session edit API and derived outputs."""

from __future__ import annotations

import json

from themestudio.core.session import BuilderSession
from themestudio.core.tokens import Mode, TokenSet

DARK = TokenSet(
    colors={"accentColor": "#9b7bff", "modalBackground": "#16171b", "modalText": "#ffffff"},
    fonts={"body": '"Inter", sans-serif'},
    radii={"modal": "20px", "connectButton": "12px"},
)
LIGHT = TokenSet(
    colors={"accentColor": "#6a4cff", "modalBackground": "#ffffff", "modalText": "#000000"},
    radii={"modal": "20px", "connectButton": "12px"},
)


def _captured_session() -> BuilderSession:
    session = BuilderSession()
    session.store.capture_if_empty(Mode.DARK, DARK)
    session.store.capture_if_empty(Mode.LIGHT, LIGHT)
    return session


def test_defaults() -> None:
    session = BuilderSession()
    assert session.selected_wallet_ids == ["polkadotjs", "subwallet", "talisman"]
    assert session.selected_chain_ids == ["polkadot"]
    assert session.mode is Mode.DARK
    assert session.preview_enabled
    assert session.is_loading()


def test_toggle_wallet() -> None:
    session = BuilderSession()
    assert session.toggle_wallet("talisman") is False
    assert "talisman" not in session.selected_wallet_ids
    assert session.toggle_wallet("ledger") is True
    assert session.toggle_wallet("unknown") is False
    assert [wallet.id for wallet in session.selected_wallets()] == ["polkadotjs", "subwallet", "ledger"]


def test_preview_disabled_without_wallets() -> None:
    session = BuilderSession()
    for wallet_id in list(session.selected_wallet_ids):
        session.toggle_wallet(wallet_id)
    assert not session.preview_enabled
    assert "// Select at least one connector" in session.snippet()


def test_toggle_chain_and_modal_size() -> None:
    session = BuilderSession()
    assert session.toggle_chain("kusama") is True
    assert session.toggle_chain("missing") is False
    session.set_modal_size("compact")
    assert session.modal_size == "compact"
    session.set_modal_size("huge")
    assert session.modal_size == "wide"
    text = session.snippet()
    assert "const chains = [polkadot, kusama];" in text
    assert 'modalSize: "wide"' in text


def test_color_override_only_touches_current_mode() -> None:
    session = _captured_session()
    session.set_color_override("accentColor", "#ff0000")
    assert session.color_value("accentColor") == "#ff0000"
    assert session.resolved_theme(Mode.LIGHT).colors["accentColor"] == "#6a4cff"
    session.set_mode("light")
    assert session.color_value("accentColor") == "#6a4cff"
    session.set_mode(Mode.DARK)
    session.reset_color_override("accentColor")
    assert session.color_value("accentColor") == "#9b7bff"


def test_radius_override_uses_captured_keys() -> None:
    session = _captured_session()
    session.set_radius_override("8")
    assert session.resolved_theme().radii == {"modal": "8px", "connectButton": "8px"}
    assert session.snippet_input().theme_overrides == {
        "radii": {"modal": "8px", "connectButton": "8px"}
    }


def test_font_override_and_options() -> None:
    session = _captured_session()
    options = session.font_options()
    assert options[0].value == '"Inter", sans-serif'
    session.set_font_override("Sora, system-ui, sans-serif")
    assert session.resolved_theme().fonts["body"] == "Sora, system-ui, sans-serif"


def test_grouped_keys_follow_search() -> None:
    session = _captured_session()
    assert [group.name for group in session.grouped_color_keys()] == ["General", "Modal"]
    session.set_search_query("text")
    groups = session.grouped_color_keys()
    assert [(group.name, group.keys) for group in groups] == [("Modal", ("modalText",))]


def test_metadata_updates_feed_app_info() -> None:
    session = BuilderSession()
    session.update_metadata(privacy_url="")
    assert "policyLinks" not in session.app_info()
    session.update_metadata(privacy_url="https://example.com/privacy", description="")
    info = session.app_info()
    assert info["policyLinks"]["privacy"] == "https://example.com/privacy"
    assert "description" not in info


def test_snippet_reflects_mode_and_labels() -> None:
    session = _captured_session()
    session.set_app_name("Studio")
    session.set_button_label("Sign in")
    text = session.snippet()
    assert '  appName: "Studio",' in text
    assert '<ConnectButton label={"Sign in"} />' in text
    assert 'defaultMode: "dark"' in text
    session.set_mode(Mode.LIGHT)
    assert "const theme" not in session.snippet()


def test_theme_payload_uses_active_mode() -> None:
    session = _captured_session()
    session.set_mode(Mode.LIGHT)
    session.set_color_override("modalText", "#111111")
    assert session.theme_payload() == {
        "autoMode": False,
        "defaultMode": "light",
        "light": {"colors": {"modalText": "#111111"}},
    }


def test_theme_payload_serializes_to_json() -> None:
    session = _captured_session()
    session.set_color_override("accentColor", "#ff0000")
    session.set_radius_override("8")
    payload = json.loads(json.dumps(session.theme_payload(), indent=2))
    assert payload["defaultMode"] == "dark"
    assert payload["dark"]["colors"] == {"accentColor": "#ff0000"}
    assert payload["dark"]["radii"]["modal"] == "8px"
    assert "light" not in payload
