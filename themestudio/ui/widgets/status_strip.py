"""Bottom status strip: transient messages, capture state and version."""

from __future__ import annotations

from PySide6.QtCore import QTimer
from PySide6.QtWidgets import QFrame, QHBoxLayout, QLabel, QWidget

from themestudio import __version__


class StatusStrip(QFrame):
    """Compact bottom status bar with message, token state and version labels."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("StatusStrip")
        self.setFixedHeight(32)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(12, 0, 12, 0)
        layout.setSpacing(12)

        self._message_label = QLabel("Ready")
        self._message_label.setObjectName("StatusMessage")
        layout.addWidget(self._message_label)

        layout.addStretch(1)

        self._tokens_label = QLabel("")
        self._tokens_label.setObjectName("StatusDetail")
        layout.addWidget(self._tokens_label)

        self._version_label = QLabel(f"v{__version__}")
        self._version_label.setObjectName("StatusMuted")
        layout.addWidget(self._version_label)

        self._clear_timer = QTimer(self)
        self._clear_timer.setSingleShot(True)
        self._clear_timer.timeout.connect(lambda: self._message_label.setText("Ready"))

    def message(self) -> str:
        return self._message_label.text()

    def show_message(self, text: str, timeout_ms: int = 0) -> None:
        self._message_label.setText(text)
        if timeout_ms > 0:
            self._clear_timer.start(timeout_ms)

    def set_token_state(self, mode_label: str, color_count: int, loading: bool) -> None:
        if loading:
            self._tokens_label.setText(f"{mode_label}: loading tokens...")
        else:
            self._tokens_label.setText(f"{mode_label}: {color_count} color tokens")
