"""Runtime path helpers for bundled package resources."""

from __future__ import annotations

from pathlib import Path


def package_root() -> Path:
    """Return the root path that contains the `themestudio` package resources."""
    return Path(__file__).resolve().parent


def asset_path(*parts: str) -> Path:
    """Resolve a path under the bundled UI assets directory."""
    return package_root().joinpath("ui", "assets", *parts)


def widget_stylesheet_path() -> Path:
    """Bundled stylesheet that declares the widget's design tokens."""
    return asset_path("widget_tokens.css")


def catalog_path() -> Path:
    """Bundled wallet/chain/font catalog."""
    return package_root() / "core" / "catalog.yaml"
