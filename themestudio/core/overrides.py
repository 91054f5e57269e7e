"""Per-mode theme overrides and their composition with base tokens."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Mapping

from themestudio.core.tokens import Mode, TokenSet

DEFAULT_BODY_FONT = "DM Sans, system-ui, sans-serif"


@dataclass(slots=True)
class ModeOverrides:
    """Sparse user overrides for a single mode."""

    colors: dict[str, str] = field(default_factory=dict)
    font: str = ""
    radius: str = ""

    @property
    def is_empty(self) -> bool:
        return not self.colors and not self.font and not self.radius


@dataclass(frozen=True, slots=True)
class ResolvedTheme:
    """Base tokens with overrides applied, ready for rendering."""

    mode: Mode
    colors: dict[str, str]
    fonts: dict[str, str]
    radii: dict[str, str]

    def to_dict(self) -> dict[str, dict[str, str]]:
        return {
            "colors": dict(self.colors),
            "fonts": dict(self.fonts),
            "radii": dict(self.radii),
        }


def radius_token(text: str) -> str:
    """Attach the ``px`` unit unless the text already carries it."""
    return text if text.endswith("px") else f"{text}px"


def expand_radius(text: str, radius_keys: Iterable[str]) -> dict[str, str] | None:
    """Map every radius key to the override radius, or None when unset."""
    keys = tuple(radius_keys)
    if text == "" or not keys:
        return None
    token = radius_token(text)
    return {key: token for key in keys}


class OverrideComposer:
    """Stores user overrides for both modes and composes resolved themes."""

    def __init__(self, fallback_font: str = DEFAULT_BODY_FONT) -> None:
        self._fallback_font = fallback_font
        self._slots: tuple[ModeOverrides, ModeOverrides] = (ModeOverrides(), ModeOverrides())

    def _slot(self, mode: Mode) -> ModeOverrides:
        return self._slots[0 if mode is Mode.DARK else 1]

    def overrides(self, mode: Mode) -> ModeOverrides:
        return self._slot(mode)

    def set_color_override(self, mode: Mode, key: str, hex_value: str) -> None:
        self._slot(mode).colors[key] = hex_value

    def reset_color_override(self, mode: Mode, key: str) -> None:
        self._slot(mode).colors.pop(key, None)

    def set_font_override(self, mode: Mode, value: str) -> None:
        self._slot(mode).font = value or ""

    def set_radius_override(self, mode: Mode, text: str) -> None:
        self._slot(mode).radius = text or ""

    def color_overrides(self, mode: Mode) -> Mapping[str, str]:
        return dict(self._slot(mode).colors)

    def resolve(
        self,
        mode: Mode,
        base: TokenSet,
        radius_keys: Iterable[str] = (),
    ) -> ResolvedTheme:
        slot = self._slot(mode)
        colors = {**base.colors, **slot.colors}
        body = slot.font or base.fonts.get("body") or self._fallback_font
        radii = expand_radius(slot.radius, radius_keys)
        if radii is None:
            radii = dict(base.radii)
        return ResolvedTheme(mode=mode, colors=colors, fonts={"body": body}, radii=radii)

    def export_overrides_only(
        self,
        mode: Mode,
        radius_keys: Iterable[str] = (),
    ) -> dict[str, dict[str, str]]:
        """Override-only payload for code export; untouched fields are omitted."""
        slot = self._slot(mode)
        payload: dict[str, dict[str, str]] = {}
        if slot.colors:
            payload["colors"] = dict(slot.colors)
        if slot.font:
            payload["fonts"] = {"body": slot.font}
        radii = expand_radius(slot.radius, radius_keys)
        if radii:
            payload["radii"] = radii
        return payload

    def export_all_modes(
        self,
        radius_keys: Iterable[str] = (),
    ) -> dict[str, dict[str, dict[str, str]]]:
        keys = tuple(radius_keys)
        exported: dict[str, dict[str, dict[str, str]]] = {}
        for mode in Mode:
            payload = self.export_overrides_only(mode, keys)
            if payload:
                exported[mode.value] = payload
        return exported

    def theme_payload(self, active: Mode, radius_keys: Iterable[str] = ()) -> dict[str, object]:
        """Theme object handed to the widget: fixed mode plus per-mode overrides."""
        payload: dict[str, object] = {"autoMode": False, "defaultMode": active.value}
        payload.update(self.export_all_modes(radius_keys))
        return payload
