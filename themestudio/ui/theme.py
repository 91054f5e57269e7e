"""Studio chrome stylesheet and the preview stylesheet built from resolved tokens."""

from __future__ import annotations

from typing import Mapping

from themestudio.core.overrides import ResolvedTheme

# Studio chrome tokens. These style the builder itself, never the preview.
TOKENS = {
    "canvas": "#050506",
    "surface_0": "#0b0c0f",
    "surface_1": "#121318",
    "surface_2": "#1a1c22",
    "surface_3": "#24262e",
    "line_soft": "#1f2128",
    "line_strong": "#34363f",
    "text_primary": "#f4f5f7",
    "text_muted": "#a3a7b1",
    "text_dim": "#6b6f7a",
    "accent": "#f4f5f7",
    "accent_subtle": "#2a2c33",
    "danger": "#ff6b6b",
    "focus_ring": "#8b8fff",
    "code_canvas": "#0b0d11",
}

FONTS = {
    "body": '"DM Sans", "Segoe UI", sans-serif',
    "display": '"Space Grotesk", "Segoe UI Semibold", sans-serif',
    "mono": '"JetBrains Mono", "Cascadia Code", "Consolas", monospace',
}

BASE_STYLES = f"""
QWidget {{
    background-color: {TOKENS["canvas"]};
    color: {TOKENS["text_muted"]};
    font-family: {FONTS["body"]};
    font-size: 10pt;
}}

QLabel {{
    background-color: transparent;
}}

#PageEyebrow {{
    color: {TOKENS["text_dim"]};
    font-family: {FONTS["display"]};
    font-size: 8pt;
    letter-spacing: 3px;
}}

#PageTitle {{
    color: {TOKENS["text_primary"]};
    font-family: {FONTS["display"]};
    font-size: 20pt;
    font-weight: 600;
}}

#SectionHeader {{
    color: {TOKENS["text_dim"]};
    font-size: 8pt;
    font-weight: 700;
    letter-spacing: 1.2px;
}}

#StatusMuted {{
    color: {TOKENS["text_dim"]};
    font-size: 8pt;
}}

#StatusMessage, #StatusDetail {{
    color: {TOKENS["text_muted"]};
    font-size: 9pt;
}}
"""

FORM_STYLES = f"""
QLineEdit, QSpinBox, QComboBox {{
    background-color: {TOKENS["surface_0"]};
    border: 1px solid {TOKENS["line_soft"]};
    border-radius: 10px;
    padding: 6px 10px;
    color: {TOKENS["text_primary"]};
    selection-background-color: {TOKENS["surface_3"]};
}}

QLineEdit:hover, QSpinBox:hover, QComboBox:hover {{
    border: 1px solid {TOKENS["line_strong"]};
}}

QLineEdit:focus, QSpinBox:focus, QComboBox:focus {{
    border: 1px solid {TOKENS["focus_ring"]};
}}

QComboBox::drop-down {{
    border: none;
    width: 20px;
}}

QCheckBox {{
    background-color: transparent;
    spacing: 8px;
    color: {TOKENS["text_primary"]};
}}

QCheckBox::indicator {{
    width: 14px;
    height: 14px;
    border: 1px solid {TOKENS["line_strong"]};
    border-radius: 7px;
    background-color: {TOKENS["surface_0"]};
}}

QCheckBox::indicator:checked {{
    background-color: {TOKENS["accent"]};
    border-color: {TOKENS["accent"]};
}}
"""

BUTTON_STYLES = f"""
QPushButton {{
    background-color: {TOKENS["surface_1"]};
    color: {TOKENS["text_primary"]};
    border: 1px solid {TOKENS["line_soft"]};
    border-radius: 14px;
    padding: 6px 14px;
    font-family: {FONTS["display"]};
    font-weight: 600;
}}

QPushButton:hover {{
    background-color: {TOKENS["surface_2"]};
    border-color: {TOKENS["line_strong"]};
}}

QPushButton:checked {{
    background-color: {TOKENS["accent"]};
    color: {TOKENS["canvas"]};
}}

QPushButton:disabled {{
    color: {TOKENS["text_dim"]};
}}

#ColorTokenRow {{
    background-color: transparent;
    border: none;
    border-radius: 12px;
    text-align: left;
    padding: 6px 10px;
    font-family: {FONTS["body"]};
}}

#ColorTokenRow:hover {{
    background-color: {TOKENS["surface_2"]};
}}

#ColorTokenRow[overridden="true"] {{
    border-left: 2px solid {TOKENS["focus_ring"]};
}}
"""

STRUCTURE_STYLES = f"""
QToolBox::tab {{
    background-color: {TOKENS["surface_0"]};
    border: 1px solid {TOKENS["line_soft"]};
    border-radius: 12px;
    color: {TOKENS["text_primary"]};
    font-family: {FONTS["display"]};
    font-weight: 600;
    padding: 8px 12px;
}}

QToolBox::tab:selected {{
    border-color: {TOKENS["line_strong"]};
}}

QTabWidget::pane {{
    border: none;
}}

QTabBar::tab {{
    background-color: transparent;
    color: {TOKENS["text_muted"]};
    border: 1px solid {TOKENS["line_soft"]};
    border-radius: 12px;
    padding: 6px 16px;
    margin-right: 6px;
}}

QTabBar::tab:selected {{
    background-color: {TOKENS["text_primary"]};
    color: {TOKENS["canvas"]};
}}

QSplitter::handle {{
    background-color: {TOKENS["line_soft"]};
}}

#ColorPickerPopup {{
    background-color: {TOKENS["surface_0"]};
    border: 1px solid {TOKENS["line_soft"]};
    border-radius: 16px;
}}

#StatusStrip {{
    background-color: {TOKENS["surface_0"]};
    border-top: 1px solid {TOKENS["line_soft"]};
}}

#CodeView {{
    background-color: {TOKENS["code_canvas"]};
    border: 1px solid {TOKENS["line_soft"]};
    border-radius: 16px;
    color: #abb2bf;
    font-family: {FONTS["mono"]};
    font-size: 9pt;
    padding: 10px;
}}

#EmptyPreview {{
    background-color: {TOKENS["surface_0"]};
    border: 1px solid {TOKENS["line_soft"]};
    border-radius: 24px;
}}
"""

SCROLLBAR_STYLES = f"""
QScrollBar:vertical {{
    background: transparent;
    width: 8px;
    margin: 2px;
    border-radius: 4px;
}}

QScrollBar::handle:vertical {{
    background: {TOKENS["line_strong"]};
    min-height: 24px;
    border-radius: 4px;
}}

QScrollBar::add-line:vertical, QScrollBar::sub-line:vertical {{
    height: 0px;
}}

QScrollBar:horizontal {{
    background: transparent;
    height: 8px;
    margin: 2px;
    border-radius: 4px;
}}

QScrollBar::handle:horizontal {{
    background: {TOKENS["line_strong"]};
    min-width: 24px;
    border-radius: 4px;
}}

QScrollBar::add-line:horizontal, QScrollBar::sub-line:horizontal {{
    width: 0px;
}}
"""

APP_STYLESHEET = "\n".join(
    [
        BASE_STYLES,
        FORM_STYLES,
        BUTTON_STYLES,
        STRUCTURE_STYLES,
        SCROLLBAR_STYLES,
    ]
)

# Fallbacks for preview tokens the widget stylesheet does not declare.
PREVIEW_FALLBACKS = {
    "accentColor": "#9b7bff",
    "defaultIconBackground": "#2b2d35",
    "separatorLine": "#2a2c33",
    "modalBackground": "#16171b",
    "modalBorder": "#26282e",
    "modalText": "#ffffff",
    "modalTextSecondary": "#8a8f98",
    "walletSelectItemBackground": "#1e2025",
    "walletSelectItemBackgroundHover": "#26282e",
    "walletSelectItemText": "#ffffff",
    "connectButtonBackground": "#1e2025",
    "connectButtonInnerBackground": "#2b2d35",
    "connectButtonText": "#ffffff",
}

RADIUS_FALLBACKS = {
    "modal": "20px",
    "walletSelectItem": "12px",
    "connectButton": "12px",
}


def build_stylesheet(extra_stylesheet: str = "") -> str:
    """Build the studio stylesheet, optionally followed by extra rules."""
    extra = extra_stylesheet.strip()
    if extra:
        return f"{APP_STYLESHEET}\n\n{extra}\n"
    return APP_STYLESHEET


def _pick(values: Mapping[str, str], key: str, fallbacks: Mapping[str, str]) -> str:
    value = values.get(key, "")
    return value or fallbacks[key]


def build_preview_stylesheet(theme: ResolvedTheme, modal_size: str = "wide") -> str:
    """QSS for the preview panel, using the resolved widget tokens."""
    colors = theme.colors
    radii = theme.radii

    def color(key: str) -> str:
        return _pick(colors, key, PREVIEW_FALLBACKS)

    def radius(key: str) -> str:
        return _pick(radii, key, RADIUS_FALLBACKS)

    body_font = theme.fonts.get("body") or FONTS["body"]
    modal_width = 480 if modal_size == "wide" else 360

    return f"""
#PreviewModal {{
    background-color: {color("modalBackground")};
    border: 1px solid {color("modalBorder")};
    border-radius: {radius("modal")};
    min-width: {modal_width}px;
    max-width: {modal_width}px;
}}

#PreviewModal QLabel, #PreviewButtonStage QLabel {{
    font-family: {body_font};
}}

#PreviewTitle {{
    color: {color("modalText")};
    font-size: 13pt;
    font-weight: 600;
}}

#PreviewSubtitle {{
    color: {color("modalTextSecondary")};
    font-size: 9pt;
}}

#PreviewSeparator {{
    background-color: {color("separatorLine")};
    max-height: 1px;
    min-height: 1px;
}}

#PreviewWalletRow {{
    background-color: {color("walletSelectItemBackground")};
    border: none;
    border-radius: {radius("walletSelectItem")};
    color: {color("walletSelectItemText")};
    font-family: {body_font};
    text-align: left;
    padding: 10px 12px;
}}

#PreviewWalletRow:hover {{
    background-color: {color("walletSelectItemBackgroundHover")};
}}

#PreviewWalletIcon {{
    background-color: {color("defaultIconBackground")};
    border-radius: 14px;
    color: {color("walletSelectItemText")};
    min-width: 28px;
    max-width: 28px;
    min-height: 28px;
    max-height: 28px;
}}

#PreviewConnectButton {{
    background-color: {color("connectButtonBackground")};
    border: 1px solid {color("connectButtonInnerBackground")};
    border-radius: {radius("connectButton")};
    color: {color("connectButtonText")};
    font-family: {body_font};
    font-weight: 600;
    padding: 10px 18px;
}}

#PreviewAccentLink {{
    color: {color("accentColor")};
    font-size: 9pt;
}}
"""
