"""Reads the widget's design tokens out of its stylesheet.

The widget declares its tokens as CSS custom properties. Declarations on
``:root`` apply to both modes; declarations under a ``[data-theme="dark"]`` or
``[data-theme="light"]`` selector apply to that mode and win over ``:root``,
the same way the cascade resolves them for a live document.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from themestudio.core.tokens import Mode, TokenSet
from themestudio.errors import ErrorCode, ThemeStudioError

logger = logging.getLogger(__name__)

_COMMENT_RE = re.compile(r"/\*.*?\*/", re.DOTALL)
_RULE_RE = re.compile(r"([^{}]+)\{([^{}]*)\}")
_DECLARATION_RE = re.compile(r"(--[A-Za-z0-9_-]+)\s*:\s*([^;]*)")
_MODE_SELECTOR_RE = re.compile(r"""\[data-theme\s*=\s*["']?(dark|light)["']?\s*\]""", re.IGNORECASE)

_MAX_STYLESHEET_BYTES = 2 * 1024 * 1024

# Custom property prefix -> TokenSet field.
_PREFIXES: tuple[tuple[str, str], ...] = (
    ("--color-", "colors"),
    ("--font-", "fonts"),
    ("--radius-", "radii"),
    ("--shadow-", "shadows"),
    ("--blur-", "blurs"),
)


def custom_properties(css_text: str, mode: Mode) -> dict[str, str]:
    """Custom properties in effect for ``mode``, later declarations winning."""
    shared: dict[str, str] = {}
    scoped: dict[str, str] = {}
    for selector, body in _RULE_RE.findall(_COMMENT_RE.sub("", css_text)):
        modes = {match.lower() for match in _MODE_SELECTOR_RE.findall(selector)}
        if modes:
            if mode.value not in modes:
                continue
            target = scoped
        elif ":root" in selector:
            target = shared
        else:
            continue
        for name, value in _DECLARATION_RE.findall(body):
            target[name] = value.strip()
    return {**shared, **scoped}


def tokens_from_properties(properties: dict[str, str]) -> TokenSet:
    buckets: dict[str, dict[str, str]] = {field: {} for _, field in _PREFIXES}
    for name, value in properties.items():
        if not value:
            continue
        for prefix, field in _PREFIXES:
            if name.startswith(prefix):
                buckets[field][name[len(prefix):]] = value
                break
    return TokenSet(**buckets)


def read_design_tokens(css_text: str, mode: Mode) -> TokenSet:
    """Extract the five token mappings for ``mode`` from stylesheet text."""
    return tokens_from_properties(custom_properties(css_text, mode))


class StyleInspector:
    """Synchronous token reader over a stylesheet file on disk."""

    def __init__(self, stylesheet_path: Path) -> None:
        self._path = stylesheet_path

    @property
    def path(self) -> Path:
        return self._path

    def set_path(self, path: Path) -> None:
        self._path = path

    def read_tokens(self, mode: Mode) -> TokenSet:
        css_text = _read_text_limited(self._path, max_bytes=_MAX_STYLESHEET_BYTES)
        tokens = read_design_tokens(css_text, mode)
        if not tokens.has_colors:
            logger.info("no color tokens for %s mode in %s", mode.value, self._path)
        return tokens


def _read_text_limited(path: Path, *, max_bytes: int) -> str:
    try:
        size = path.stat().st_size
    except FileNotFoundError as exc:
        raise ThemeStudioError(ErrorCode.STYLESHEET_NOT_FOUND, path=path) from exc
    except OSError as exc:
        raise ThemeStudioError(
            ErrorCode.STYLESHEET_UNREADABLE, path=path, details={"original": str(exc)}
        ) from exc
    if size > max_bytes:
        raise ThemeStudioError(ErrorCode.STYLESHEET_TOO_LARGE, path=path, details={"max_bytes": max_bytes})
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ThemeStudioError(
            ErrorCode.STYLESHEET_UNREADABLE, path=path, details={"original": str(exc)}
        ) from exc
