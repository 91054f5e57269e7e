"""Tests for the integration snippet generator."""

from themestudio.core.catalog import ChainOption, WalletOption
from themestudio.core.snippet import (
    AppMetadata,
    SnippetInput,
    build_app_info,
    generate_snippet,
    should_emit_theme,
    to_json_block,
    unique_in_order,
)
from themestudio.core.tokens import Mode

POLKADOTJS = WalletOption("polkadotjs", "Polkadot.js", "Extension", "polkadotjsConnector")
TALISMAN = WalletOption("talisman", "Talisman", "Extension", "talismanConnector")
WALLETCONNECT = WalletOption(
    "walletconnect", "WalletConnect", "Protocol", "walletConnectConnector", requires_project_id=True
)
NOVA = WalletOption("nova", "Nova Wallet", "Mobile", "walletConnectConnector", requires_project_id=True)
LEDGER = WalletOption("ledger", "Ledger", "Hardware", "ledgerConnector", requires_chains=True)
KUSAMA = ChainOption("kusama", "Kusama", "kusama")
PASEO = ChainOption("paseo", "Paseo", "paseo")


def _lines_with(text: str, needle: str) -> list[str]:
    return [line for line in text.splitlines() if needle in line]


def test_identical_input_gives_identical_output() -> None:
    request = SnippetInput(
        wallets=(POLKADOTJS, LEDGER),
        chains=(KUSAMA,),
        app_name="Demo",
        mode=Mode.DARK,
        theme_overrides={"colors": {"accentColor": "#ff0000"}},
        metadata=AppMetadata(description="Hello"),
    )
    assert generate_snippet(request) == generate_snippet(request)


def test_shared_connector_import_is_not_duplicated() -> None:
    text = generate_snippet(SnippetInput(wallets=(WALLETCONNECT, NOVA)))
    imports = _lines_with(text, "@luno-kit/react/connectors")
    assert imports == ['import { walletConnectConnector } from "@luno-kit/react/connectors";']
    assert len(_lines_with(text, "walletConnectConnector({ projectId: WALLET_CONNECT_ID }),")) == 2


def test_connector_call_shapes() -> None:
    text = generate_snippet(SnippetInput(wallets=(POLKADOTJS, LEDGER)))
    assert "    polkadotjsConnector()," in text
    assert "    ledgerConnector({ chains })," in text


def test_empty_selection_placeholder() -> None:
    text = generate_snippet(SnippetInput())
    assert "    // Select at least one connector" in text
    assert "@luno-kit/react/connectors" not in text


def test_chain_imports_follow_selection_with_fallback() -> None:
    text = generate_snippet(SnippetInput(chains=(KUSAMA, PASEO)))
    assert 'import { kusama, paseo } from "@luno-kit/react/chains";' in text
    assert "const chains = [kusama, paseo];" in text
    fallback = generate_snippet(SnippetInput())
    assert "const chains = [polkadot];" in fallback


def test_default_app_name_and_button_label() -> None:
    text = generate_snippet(SnippetInput())
    assert '  appName: "My LunoKit App",' in text
    assert '<ConnectButton label={"Connect Wallet"} />' in text


def test_theme_block_rules() -> None:
    assert should_emit_theme(Mode.LIGHT, {}) is False
    assert should_emit_theme(Mode.DARK, {}) is True
    assert should_emit_theme(Mode.LIGHT, {"colors": {"a": "#000000"}}) is True

    light = generate_snippet(SnippetInput(mode=Mode.LIGHT))
    assert "const theme" not in light
    assert "theme={theme}" not in light

    dark = generate_snippet(SnippetInput(mode=Mode.DARK))
    assert "const theme = {\n  autoMode: false,\n  defaultMode: \"dark\",\n};" in dark
    assert "<LunoKitProvider config={config} theme={theme}>" in dark


def test_theme_overrides_are_nested_two_spaces() -> None:
    text = generate_snippet(
        SnippetInput(mode=Mode.LIGHT, theme_overrides={"colors": {"accentColor": "#ff0000"}})
    )
    expected = "\n".join(
        [
            "const theme = {",
            "  autoMode: false,",
            '  defaultMode: "light",',
            "  light: {",
            '    "colors": {',
            '      "accentColor": "#ff0000"',
            "    }",
            "  },",
            "};",
        ]
    )
    assert expected in text


def test_policy_links_need_both_urls() -> None:
    assert "policyLinks" not in build_app_info(AppMetadata(terms_url="https://x/terms"))
    info = build_app_info(AppMetadata(terms_url="https://x/terms", privacy_url="https://x/privacy"))
    assert info["policyLinks"] == {
        "terms": "https://x/terms",
        "privacy": "https://x/privacy",
        "target": "_blank",
    }


def test_app_info_fields() -> None:
    assert build_app_info(AppMetadata()) == {}
    assert build_app_info(AppMetadata(decorative_dark="dark.png")) == {}
    info = build_app_info(
        AppMetadata(decorative_light="l.png", decorative_dark="d.png", guide_link="https://docs")
    )
    assert info["decorativeImage"] == {"light": "l.png", "dark": "d.png"}
    assert info["guideText"] == "Integration guide"
    assert info["guideLink"] == "https://docs"


def test_app_info_block_only_when_something_to_say() -> None:
    plain = generate_snippet(SnippetInput(metadata=AppMetadata(terms_url="https://x/terms")))
    assert "const appInfo" not in plain
    text = generate_snippet(SnippetInput(metadata=AppMetadata(description="Hi")))
    assert 'const appInfo = {\n  "description": "Hi"\n};' in text
    assert "appInfo={appInfo}" in text


def test_snippet_ends_with_newline() -> None:
    assert generate_snippet(SnippetInput()).endswith("}\n")


def test_helpers() -> None:
    assert unique_in_order(["b", "a", "b", "c", "a"]) == ["b", "a", "c"]
    assert to_json_block({"a": 1}, nesting=1) == '{\n    "a": 1\n  }'
    assert to_json_block({"a": 1}) == '{\n  "a": 1\n}'
