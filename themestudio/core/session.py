"""Builder session state: selections, overrides and everything derived from them."""

from __future__ import annotations

import logging
from dataclasses import replace

from themestudio.core.catalog import Catalog, FontOption, WalletOption, default_catalog
from themestudio.core.grouping import KeyGroup, filter_and_group
from themestudio.core.overrides import OverrideComposer, ResolvedTheme
from themestudio.core.snippet import AppMetadata, SnippetInput, build_app_info, generate_snippet
from themestudio.core.tokens import Mode, TokenSet, TokenStore

logger = logging.getLogger(__name__)

DEFAULT_APP_NAME = "LunoKit Demo"
DEFAULT_BUTTON_LABEL = "Connect Wallet"
DEFAULT_METADATA = AppMetadata(
    description="Wallet sign-in configuration playground",
    guide_text="Integration guide",
    guide_link="https://docs.lunolab.xyz/",
    terms_url="https://lunolab.xyz/terms",
    privacy_url="https://lunolab.xyz/privacy",
)


class BuilderSession:
    """Session-scoped builder state.

    All edits are synchronous and only touch the records they name. Base tokens
    live in the TokenStore and are written by capture only; overrides live in
    the OverrideComposer and are written by edits only.
    """

    def __init__(
        self,
        catalog: Catalog | None = None,
        store: TokenStore | None = None,
    ) -> None:
        self._catalog = catalog or default_catalog()
        self._store = store or TokenStore()
        self._composer = OverrideComposer(fallback_font=self._catalog.fonts[0].value)
        self._wallet_ids: list[str] = list(self._catalog.default_wallets)
        self._chain_ids: list[str] = list(self._catalog.default_chains)
        self._modal_size = self._catalog.default_modal_size
        self._mode = Mode.DARK
        self._search_query = ""
        self._app_name = DEFAULT_APP_NAME
        self._button_label = DEFAULT_BUTTON_LABEL
        self._metadata = DEFAULT_METADATA

    # -- collaborators --

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    @property
    def store(self) -> TokenStore:
        return self._store

    @property
    def composer(self) -> OverrideComposer:
        return self._composer

    # -- selections --

    @property
    def selected_wallet_ids(self) -> list[str]:
        return list(self._wallet_ids)

    def selected_wallets(self) -> list[WalletOption]:
        return self._catalog.selected_wallets(self._wallet_ids)

    def toggle_wallet(self, wallet_id: str) -> bool:
        """Toggle a wallet; returns whether it is selected afterwards."""
        if wallet_id in self._wallet_ids:
            self._wallet_ids.remove(wallet_id)
            return False
        if self._catalog.wallet(wallet_id) is None:
            logger.debug("ignoring unknown wallet id %r", wallet_id)
            return False
        self._wallet_ids.append(wallet_id)
        return True

    @property
    def selected_chain_ids(self) -> list[str]:
        return list(self._chain_ids)

    def toggle_chain(self, chain_id: str) -> bool:
        if chain_id in self._chain_ids:
            self._chain_ids.remove(chain_id)
            return False
        if not any(chain.id == chain_id for chain in self._catalog.chains):
            return False
        self._chain_ids.append(chain_id)
        return True

    @property
    def modal_size(self) -> str:
        return self._modal_size

    def set_modal_size(self, size_id: str) -> None:
        known = {size.id for size in self._catalog.modal_sizes}
        self._modal_size = size_id if size_id in known else self._catalog.default_modal_size

    @property
    def preview_enabled(self) -> bool:
        return bool(self._wallet_ids)

    # -- mode / search --

    @property
    def mode(self) -> Mode:
        return self._mode

    def set_mode(self, mode: Mode | str) -> None:
        self._mode = Mode.from_value(mode)

    @property
    def search_query(self) -> str:
        return self._search_query

    def set_search_query(self, query: str) -> None:
        self._search_query = query or ""

    # -- overrides (current mode) --

    def set_color_override(self, key: str, hex_value: str) -> None:
        self._composer.set_color_override(self._mode, key, hex_value)

    def reset_color_override(self, key: str) -> None:
        self._composer.reset_color_override(self._mode, key)

    def set_font_override(self, value: str) -> None:
        self._composer.set_font_override(self._mode, value)

    def set_radius_override(self, text: str) -> None:
        self._composer.set_radius_override(self._mode, text)

    # -- app metadata --

    @property
    def app_name(self) -> str:
        return self._app_name

    def set_app_name(self, value: str) -> None:
        self._app_name = value or ""

    @property
    def button_label(self) -> str:
        return self._button_label

    def set_button_label(self, value: str) -> None:
        self._button_label = value or ""

    @property
    def metadata(self) -> AppMetadata:
        return self._metadata

    def update_metadata(self, **fields: str) -> None:
        self._metadata = replace(self._metadata, **fields)

    def app_info(self) -> dict:
        return build_app_info(self._metadata)

    # -- derived outputs --

    def base_tokens(self, mode: Mode | None = None) -> TokenSet:
        return self._store.base(mode or self._mode)

    def is_loading(self, mode: Mode | None = None) -> bool:
        return not self._store.has_capture(mode or self._mode)

    def resolved_theme(self, mode: Mode | None = None) -> ResolvedTheme:
        target = mode or self._mode
        return self._composer.resolve(
            target,
            self._store.base(target),
            self._store.radius_keys(target),
        )

    def color_value(self, key: str) -> str:
        return self.resolved_theme().colors.get(key, "")

    def font_options(self) -> list[FontOption]:
        return self._catalog.font_options(self.base_tokens().fonts.get("body", ""))

    def grouped_color_keys(self) -> list[KeyGroup]:
        return filter_and_group(self._store.known_color_keys(), self._search_query)

    def theme_payload(self) -> dict[str, object]:
        return self._composer.theme_payload(self._mode, self._store.radius_keys(self._mode))

    def snippet_input(self) -> SnippetInput:
        return SnippetInput(
            wallets=tuple(self.selected_wallets()),
            chains=tuple(self._catalog.selected_chains(self._chain_ids)),
            app_name=self._app_name,
            modal_size=self._modal_size,
            mode=self._mode,
            theme_overrides=self._composer.export_overrides_only(
                self._mode, self._store.radius_keys(self._mode)
            ),
            metadata=self._metadata,
            button_label=self._button_label,
        )

    def snippet(self) -> str:
        return generate_snippet(self.snippet_input())
