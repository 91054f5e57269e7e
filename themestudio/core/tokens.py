"""Design token sets and the per-mode base token store."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping

logger = logging.getLogger(__name__)

TOKEN_CATEGORIES: tuple[str, ...] = ("colors", "fonts", "radii", "shadows", "blurs")


class Mode(Enum):
    """Theme variant. Each mode owns its own base tokens and overrides."""

    DARK = "dark"
    LIGHT = "light"

    @classmethod
    def from_value(cls, value: str | Mode) -> Mode:
        if isinstance(value, Mode):
            return value
        return cls((value or "").strip().lower())

    @property
    def label(self) -> str:
        return self.value.capitalize()


def _frozen(data: Mapping[str, str] | None) -> Mapping[str, str]:
    return MappingProxyType(dict(data or {}))


@dataclass(frozen=True, slots=True)
class TokenSet:
    """Five read-only mappings of token key to CSS value."""

    colors: Mapping[str, str] = field(default_factory=dict)
    fonts: Mapping[str, str] = field(default_factory=dict)
    radii: Mapping[str, str] = field(default_factory=dict)
    shadows: Mapping[str, str] = field(default_factory=dict)
    blurs: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for name in TOKEN_CATEGORIES:
            object.__setattr__(self, name, _frozen(getattr(self, name)))

    @classmethod
    def empty(cls) -> TokenSet:
        return cls()

    @property
    def has_colors(self) -> bool:
        return len(self.colors) > 0

    def sorted_color_keys(self) -> tuple[str, ...]:
        return tuple(sorted(self.colors))

    def to_dict(self) -> dict[str, dict[str, str]]:
        return {name: dict(getattr(self, name)) for name in TOKEN_CATEGORIES}


class TokenStore:
    """Holds the captured base TokenSet for each mode.

    The first capture that carries colors wins. Captures with no colors never
    replace anything, and a recorded set without colors can still be replaced
    by a later, complete read.
    """

    def __init__(self) -> None:
        self._base: dict[Mode, TokenSet | None] = {mode: None for mode in Mode}
        self._color_keys: tuple[str, ...] = ()

    def capture_if_empty(self, mode: Mode, tokens: TokenSet) -> bool:
        existing = self._base[mode]
        if existing is not None and existing.has_colors:
            return False
        self._base[mode] = tokens
        if tokens.has_colors and not self._color_keys:
            self._color_keys = tokens.sorted_color_keys()
        logger.debug(
            "captured %s tokens: %d colors, %d radii",
            mode.value,
            len(tokens.colors),
            len(tokens.radii),
        )
        return True

    def has_capture(self, mode: Mode) -> bool:
        existing = self._base[mode]
        return existing is not None and existing.has_colors

    def base(self, mode: Mode) -> TokenSet:
        return self._base[mode] or TokenSet.empty()

    def known_color_keys(self) -> tuple[str, ...]:
        return self._color_keys

    def radius_keys(self, mode: Mode) -> tuple[str, ...]:
        """Radius key names, shared across modes.

        Dark radii are preferred, then light, then the requested mode's own.
        """
        for candidate in (Mode.DARK, Mode.LIGHT):
            radii = self.base(candidate).radii
            if radii:
                return tuple(radii)
        return tuple(self.base(mode).radii)
