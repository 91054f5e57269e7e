"""Tests for reading design tokens out of a widget stylesheet."""

from __future__ import annotations

from pathlib import Path

import pytest

from themestudio.core.inspector import StyleInspector, custom_properties, read_design_tokens
from themestudio.core.tokens import Mode
from themestudio.errors import ErrorCode, ThemeStudioError
from themestudio.runtime_paths import widget_stylesheet_path

CSS = """
/* shared */
:root {
  --font-body: "Inter", sans-serif;
  --radius-modal: 20px;
  --blur-modalOverlay: 4px;
  --color-accentColor: #000000;
  --unrelated: 1;
}

[data-theme="dark"] {
  --color-accentColor: #9b7bff;
  --color-modalBackground: #16171b;
  --shadow-modal: 0 4px 12px rgba(0, 0, 0, 0.4);
}

[data-theme='light'] {
  --color-modalBackground: #ffffff;
  --color-empty: ;
}

.button { --color-ignored: #123456; }
"""


def test_mode_scoped_values_win_over_root() -> None:
    props = custom_properties(CSS, Mode.DARK)
    assert props["--color-accentColor"] == "#9b7bff"
    assert props["--color-modalBackground"] == "#16171b"
    assert "--color-ignored" not in props


def test_read_design_tokens_splits_by_prefix() -> None:
    tokens = read_design_tokens(CSS, Mode.DARK)
    assert dict(tokens.colors) == {"accentColor": "#9b7bff", "modalBackground": "#16171b"}
    assert dict(tokens.fonts) == {"body": '"Inter", sans-serif'}
    assert dict(tokens.radii) == {"modal": "20px"}
    assert dict(tokens.shadows) == {"modal": "0 4px 12px rgba(0, 0, 0, 0.4)"}
    assert dict(tokens.blurs) == {"modalOverlay": "4px"}


def test_light_mode_reads_its_own_block() -> None:
    tokens = read_design_tokens(CSS, Mode.LIGHT)
    assert dict(tokens.colors) == {"accentColor": "#000000", "modalBackground": "#ffffff"}
    assert dict(tokens.shadows) == {}


def test_inspector_reads_file(tmp_path: Path) -> None:
    path = tmp_path / "widget.css"
    path.write_text(CSS, encoding="utf-8")
    inspector = StyleInspector(path)
    assert inspector.read_tokens(Mode.DARK).colors["accentColor"] == "#9b7bff"


def test_inspector_missing_file_raises(tmp_path: Path) -> None:
    inspector = StyleInspector(tmp_path / "missing.css")
    with pytest.raises(ThemeStudioError) as excinfo:
        inspector.read_tokens(Mode.DARK)
    assert excinfo.value.code is ErrorCode.STYLESHEET_NOT_FOUND


def test_inspector_set_path(tmp_path: Path) -> None:
    path = tmp_path / "widget.css"
    path.write_text(":root { --color-a: #010203; }", encoding="utf-8")
    inspector = StyleInspector(tmp_path / "missing.css")
    inspector.set_path(path)
    assert inspector.path == path
    assert dict(inspector.read_tokens(Mode.LIGHT).colors) == {"a": "#010203"}


def test_bundled_stylesheet_declares_both_modes() -> None:
    inspector = StyleInspector(widget_stylesheet_path())
    dark = inspector.read_tokens(Mode.DARK)
    light = inspector.read_tokens(Mode.LIGHT)
    assert dark.has_colors and light.has_colors
    assert set(dark.colors) == set(light.colors)
    assert dark.colors["modalBackground"] != light.colors["modalBackground"]
    assert "modal" in dark.radii
