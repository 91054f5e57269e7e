"""Wallet, chain, font and modal-size options offered by the builder."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Mapping

import yaml

from themestudio.errors import ErrorCode, ThemeStudioError
from themestudio.runtime_paths import catalog_path


@dataclass(frozen=True, slots=True)
class WalletOption:
    id: str
    name: str
    type: str
    connector: str
    logo: str = ""
    requires_project_id: bool = False
    requires_chains: bool = False

    def connector_call(self) -> str:
        """Connector factory call as it appears in exported code."""
        if self.requires_project_id:
            return f"{self.connector}({{ projectId: WALLET_CONNECT_ID }})"
        if self.requires_chains:
            return f"{self.connector}({{ chains }})"
        return f"{self.connector}()"


@dataclass(frozen=True, slots=True)
class ChainOption:
    id: str
    name: str
    import_name: str


@dataclass(frozen=True, slots=True)
class FontOption:
    id: str
    label: str
    value: str


@dataclass(frozen=True, slots=True)
class ModalSize:
    id: str
    label: str


@dataclass(frozen=True, slots=True)
class Catalog:
    wallets: tuple[WalletOption, ...]
    chains: tuple[ChainOption, ...]
    fonts: tuple[FontOption, ...]
    modal_sizes: tuple[ModalSize, ...]
    default_wallets: tuple[str, ...]
    default_chains: tuple[str, ...]
    default_modal_size: str

    def wallet(self, wallet_id: str) -> WalletOption | None:
        return next((wallet for wallet in self.wallets if wallet.id == wallet_id), None)

    def selected_wallets(self, wallet_ids: list[str] | tuple[str, ...]) -> list[WalletOption]:
        """Selected wallets in catalog order."""
        chosen = set(wallet_ids)
        return [wallet for wallet in self.wallets if wallet.id in chosen]

    def selected_chains(self, chain_ids: list[str] | tuple[str, ...]) -> list[ChainOption]:
        chosen = set(chain_ids)
        return [chain for chain in self.chains if chain.id in chosen]

    def font_options(self, base_font: str = "") -> list[FontOption]:
        """Font choices, led by the widget's own body font when it is not listed."""
        options = list(self.fonts)
        if not base_font or any(option.value == base_font for option in options):
            return options
        return [FontOption(id="widget-default", label="Default", value=base_font), *options]


def load_catalog(path: Path | None = None) -> Catalog:
    """Load and validate the option catalog from YAML."""
    source = path or catalog_path()
    try:
        data = yaml.safe_load(source.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
        raise ThemeStudioError(ErrorCode.CATALOG_INVALID, path=source, details={"original": str(exc)}) from exc
    if not isinstance(data, dict):
        raise ThemeStudioError(ErrorCode.CATALOG_INVALID, message=f"Expected a mapping in {source}", path=source)

    wallets = tuple(
        WalletOption(
            id=_required_str(item, "id", source),
            name=_required_str(item, "name", source),
            type=_required_str(item, "type", source),
            connector=_required_str(item, "connector", source),
            logo=str(item.get("logo") or ""),
            requires_project_id=bool(item.get("requires_project_id", False)),
            requires_chains=bool(item.get("requires_chains", False)),
        )
        for item in _required_list(data, "wallets", source)
    )
    chains = tuple(
        ChainOption(
            id=_required_str(item, "id", source),
            name=_required_str(item, "name", source),
            import_name=_required_str(item, "import_name", source),
        )
        for item in _required_list(data, "chains", source)
    )
    fonts = tuple(
        FontOption(
            id=_required_str(item, "id", source),
            label=_required_str(item, "label", source),
            value=_required_str(item, "value", source),
        )
        for item in _required_list(data, "fonts", source)
    )
    modal_sizes = tuple(
        ModalSize(id=_required_str(item, "id", source), label=_required_str(item, "label", source))
        for item in _required_list(data, "modal_sizes", source)
    )
    if not fonts or not modal_sizes:
        raise ThemeStudioError(
            ErrorCode.CATALOG_INVALID,
            message=f"{source}: at least one font and one modal size are required",
            path=source,
        )

    defaults = data.get("defaults") or {}
    if not isinstance(defaults, Mapping):
        raise ThemeStudioError(ErrorCode.CATALOG_INVALID, message=f"{source}: defaults must be a mapping", path=source)
    wallet_ids = {wallet.id for wallet in wallets}
    chain_ids = {chain.id for chain in chains}
    default_wallets = tuple(str(item) for item in defaults.get("wallets") or () if item in wallet_ids)
    default_chains = tuple(str(item) for item in defaults.get("chains") or () if item in chain_ids)
    default_modal_size = str(defaults.get("modal_size") or modal_sizes[0].id)

    return Catalog(
        wallets=wallets,
        chains=chains,
        fonts=fonts,
        modal_sizes=modal_sizes,
        default_wallets=default_wallets,
        default_chains=default_chains,
        default_modal_size=default_modal_size,
    )


@lru_cache(maxsize=1)
def default_catalog() -> Catalog:
    return load_catalog()


def _required_list(data: Mapping[str, object], key: str, source: Path) -> list[Mapping[str, object]]:
    value = data.get(key)
    if not isinstance(value, list) or not all(isinstance(item, Mapping) for item in value):
        raise ThemeStudioError(
            ErrorCode.CATALOG_INVALID,
            message=f"{source}: {key!r} must be a list of mappings",
            path=source,
        )
    return value


def _required_str(item: Mapping[str, object], key: str, source: Path) -> str:
    value = item.get(key)
    if not isinstance(value, str) or not value.strip():
        raise ThemeStudioError(
            ErrorCode.CATALOG_INVALID,
            message=f"{source}: field {key!r} must be a non-empty string",
            path=source,
        )
    return value.strip()
