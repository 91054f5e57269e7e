"""Export of the builder state as an integration-ready App.tsx snippet."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Sequence

from themestudio.core.catalog import ChainOption, WalletOption
from themestudio.core.tokens import Mode

# The widget's own default; a theme block is only needed to leave it.
DEFAULT_SNIPPET_MODE = Mode.LIGHT
DEFAULT_APP_NAME = "My LunoKit App"
DEFAULT_BUTTON_LABEL = "Connect Wallet"
DEFAULT_GUIDE_TEXT = "Integration guide"
FALLBACK_CHAIN_IMPORT = "polkadot"
INDENT_STEP = "  "


@dataclass(frozen=True, slots=True)
class AppMetadata:
    """Optional app metadata shown inside the widget's modal."""

    decorative_light: str = ""
    decorative_dark: str = ""
    description: str = ""
    guide_text: str = ""
    guide_link: str = ""
    terms_url: str = ""
    privacy_url: str = ""


@dataclass(frozen=True, slots=True)
class SnippetInput:
    wallets: Sequence[WalletOption] = ()
    chains: Sequence[ChainOption] = ()
    app_name: str = ""
    modal_size: str = "wide"
    mode: Mode = Mode.DARK
    theme_overrides: Mapping[str, Any] = field(default_factory=dict)
    metadata: AppMetadata = field(default_factory=AppMetadata)
    button_label: str = ""


def unique_in_order(items: Iterable[str]) -> list[str]:
    seen: set[str] = set()
    ordered: list[str] = []
    for item in items:
        if item in seen:
            continue
        seen.add(item)
        ordered.append(item)
    return ordered


def build_app_info(metadata: AppMetadata) -> dict[str, Any]:
    """App info payload; fields with nothing to say are left out.

    Policy links are all-or-nothing: both URLs or neither.
    """
    info: dict[str, Any] = {}

    light = metadata.decorative_light.strip()
    dark = metadata.decorative_dark.strip()
    if light:
        info["decorativeImage"] = {"light": light}
        if dark:
            info["decorativeImage"]["dark"] = dark

    description = metadata.description.strip()
    if description:
        info["description"] = description

    guide_link = metadata.guide_link.strip()
    if guide_link:
        info["guideText"] = metadata.guide_text.strip() or DEFAULT_GUIDE_TEXT
        info["guideLink"] = guide_link

    terms = metadata.terms_url.strip()
    privacy = metadata.privacy_url.strip()
    if terms and privacy:
        info["policyLinks"] = {"terms": terms, "privacy": privacy, "target": "_blank"}

    return info


def to_json_block(data: Any, *, nesting: int = 0) -> str:
    """Serialize a record with two-space indentation, re-indented for splicing."""
    text = json.dumps(data, indent=2, ensure_ascii=False)
    if nesting <= 0:
        return text
    return text.replace("\n", "\n" + INDENT_STEP * nesting)


def should_emit_theme(mode: Mode, theme_overrides: Mapping[str, Any]) -> bool:
    return bool(theme_overrides) or mode is not DEFAULT_SNIPPET_MODE


def _theme_block(mode: Mode, theme_overrides: Mapping[str, Any]) -> str:
    lines = [
        "const theme = {",
        f"{INDENT_STEP}autoMode: false,",
        f"{INDENT_STEP}defaultMode: {json.dumps(mode.value)},",
    ]
    if theme_overrides:
        lines.append(f"{INDENT_STEP}{mode.value}: {to_json_block(dict(theme_overrides), nesting=1)},")
    lines.append("};")
    return "\n".join(lines)


def generate_snippet(request: SnippetInput) -> str:
    """Render the integration snippet. Identical input yields identical text."""
    connector_imports = unique_in_order(wallet.connector for wallet in request.wallets)
    connector_calls = [wallet.connector_call() for wallet in request.wallets]
    chain_imports = unique_in_order(chain.import_name for chain in request.chains) or [
        FALLBACK_CHAIN_IMPORT
    ]
    include_theme = should_emit_theme(request.mode, request.theme_overrides)
    app_info = build_app_info(request.metadata)

    lines: list[str] = [
        'import { ConnectButton, LunoKitProvider } from "@luno-kit/ui";',
        'import { createConfig } from "@luno-kit/react";',
        f'import {{ {", ".join(chain_imports)} }} from "@luno-kit/react/chains";',
    ]
    if connector_imports:
        lines.append(
            f'import {{ {", ".join(connector_imports)} }} from "@luno-kit/react/connectors";'
        )
    lines.extend(
        [
            'import { QueryClient, QueryClientProvider } from "@tanstack/react-query";',
            'import "@luno-kit/ui/styles.css";',
            "",
            'const WALLET_CONNECT_ID = "YOUR_WALLET_CONNECT_ID";',
            'const SUBSCAN_API_KEY = "YOUR_SUBSCAN_API_KEY";',
            "",
            "const queryClient = new QueryClient();",
            f"const chains = [{', '.join(chain_imports)}];",
            "const baseConfig = createConfig({",
            f"  appName: {json.dumps(request.app_name or DEFAULT_APP_NAME, ensure_ascii=False)},",
            "  chains,",
            "  connectors: [",
        ]
    )
    if connector_calls:
        lines.extend(f"    {call}," for call in connector_calls)
    else:
        lines.append("    // Select at least one connector")
    lines.extend(
        [
            "  ],",
            "  subscan: { apiKey: SUBSCAN_API_KEY },",
            "});",
            f"const config = {{ ...baseConfig, modalSize: {json.dumps(request.modal_size)} }};",
        ]
    )

    if include_theme:
        lines.extend(["", _theme_block(request.mode, request.theme_overrides)])
    if app_info:
        lines.extend(["", f"const appInfo = {to_json_block(app_info)};"])

    provider_props = "config={config}"
    if include_theme:
        provider_props += " theme={theme}"
    if app_info:
        provider_props += " appInfo={appInfo}"
    button_label = json.dumps(request.button_label or DEFAULT_BUTTON_LABEL, ensure_ascii=False)

    lines.extend(
        [
            "",
            "export default function App() {",
            "  return (",
            "    <QueryClientProvider client={queryClient}>",
            f"      <LunoKitProvider {provider_props}>",
            f"        <ConnectButton label={{{button_label}}} />",
            "      </LunoKitProvider>",
            "    </QueryClientProvider>",
            "  );",
            "}",
            "",
        ]
    )
    return "\n".join(lines)
