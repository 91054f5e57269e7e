"""Application settings via QSettings."""

from __future__ import annotations

import os
from pathlib import Path

from PySide6.QtCore import QSettings

from themestudio.runtime_paths import widget_stylesheet_path


class AppSettings:
    """Wraps QSettings for application configuration.

    Theme edits are session-only and never stored here.
    """

    def __init__(self) -> None:
        self._qs = QSettings("ThemeStudio", "ThemeStudio")

    # -- widget stylesheet --

    @property
    def stylesheet_custom_path(self) -> str:
        raw = self._qs.value("widget/stylesheet_path", "", type=str)
        return (raw or "").strip()

    @stylesheet_custom_path.setter
    def stylesheet_custom_path(self, value: str) -> None:
        self._qs.setValue("widget/stylesheet_path", (value or "").strip())

    @property
    def stylesheet_path(self) -> Path:
        """Stylesheet the token inspector reads; the bundled one unless overridden."""
        custom = self.stylesheet_custom_path
        if custom:
            return Path(custom).expanduser()
        return widget_stylesheet_path()

    # -- preview --

    @property
    def frame_interval_ms(self) -> int:
        raw = self._qs.value("ui/frame_interval_ms", 16, type=int)
        try:
            value = int(raw)
        except (TypeError, ValueError):
            return 16
        return min(100, max(4, value))

    @frame_interval_ms.setter
    def frame_interval_ms(self, value: int) -> None:
        self._qs.setValue("ui/frame_interval_ms", int(value))

    # -- window geometry --

    @property
    def window_geometry(self) -> bytes | None:
        return self._qs.value("ui/window_geometry")

    @window_geometry.setter
    def window_geometry(self, value: bytes) -> None:
        self._qs.setValue("ui/window_geometry", value)

    @property
    def splitter_state(self) -> bytes | None:
        return self._qs.value("ui/splitter_state")

    @splitter_state.setter
    def splitter_state(self, value: bytes) -> None:
        self._qs.setValue("ui/splitter_state", value)

    # -- helpers --

    @property
    def app_data_dir(self) -> Path:
        path = self._app_data_dir()
        path.mkdir(parents=True, exist_ok=True)
        return path

    @property
    def log_dir(self) -> Path:
        path = self.app_data_dir / "logs"
        path.mkdir(parents=True, exist_ok=True)
        return path

    @staticmethod
    def _app_data_dir() -> Path:
        base = Path(os.environ.get("APPDATA", Path.home() / ".config"))
        return base / "themestudio"
