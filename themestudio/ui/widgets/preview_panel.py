"""Live preview of the wallet widget styled with the resolved theme."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QFrame,
    QLabel,
    QPushButton,
    QStackedLayout,
    QVBoxLayout,
    QWidget,
)

from themestudio.core.catalog import WalletOption
from themestudio.core.overrides import ResolvedTheme
from themestudio.ui.theme import build_preview_stylesheet

VIEW_MODAL = "modal"
VIEW_BUTTON = "button"


class _EmptyPreview(QFrame):
    def __init__(self, message: str, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("EmptyPreview")
        layout = QVBoxLayout(self)
        layout.setContentsMargins(32, 48, 32, 48)
        title = QLabel("Preview paused")
        title.setObjectName("PageTitle")
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(title)
        self._message = QLabel(message)
        self._message.setObjectName("StatusDetail")
        self._message.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._message.setWordWrap(True)
        layout.addWidget(self._message)

    def set_message(self, message: str) -> None:
        self._message.setText(message)


class WidgetPreview(QWidget):
    """Mock connect modal and connect button driven by resolved tokens."""

    def __init__(self, view: str = VIEW_MODAL, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._view = view
        self._stack = QStackedLayout(self)

        self._empty = _EmptyPreview("Select at least one wallet to enable the preview.")
        self._stack.addWidget(self._wrap_centered(self._empty))

        self._modal = QFrame()
        self._modal.setObjectName("PreviewModal")
        modal_layout = QVBoxLayout(self._modal)
        modal_layout.setContentsMargins(20, 20, 20, 20)
        modal_layout.setSpacing(10)
        self._title = QLabel("Connect Wallet")
        self._title.setObjectName("PreviewTitle")
        modal_layout.addWidget(self._title)
        self._subtitle = QLabel("")
        self._subtitle.setObjectName("PreviewSubtitle")
        self._subtitle.setWordWrap(True)
        modal_layout.addWidget(self._subtitle)
        separator = QFrame()
        separator.setObjectName("PreviewSeparator")
        modal_layout.addWidget(separator)
        self._wallet_box = QVBoxLayout()
        self._wallet_box.setSpacing(6)
        modal_layout.addLayout(self._wallet_box)
        self._guide_link = QLabel("")
        self._guide_link.setObjectName("PreviewAccentLink")
        modal_layout.addWidget(self._guide_link)
        self._stack.addWidget(self._wrap_centered(self._modal))

        self._button_stage = QWidget()
        self._button_stage.setObjectName("PreviewButtonStage")
        stage_layout = QVBoxLayout(self._button_stage)
        self._connect_button = QPushButton("Connect Wallet")
        self._connect_button.setObjectName("PreviewConnectButton")
        stage_layout.addWidget(self._connect_button, 0, Qt.AlignmentFlag.AlignCenter)
        self._stack.addWidget(self._button_stage)

    @property
    def view(self) -> str:
        return self._view

    def render_state(
        self,
        *,
        theme: ResolvedTheme,
        wallets: list[WalletOption],
        button_label: str,
        modal_size: str,
        enabled: bool = True,
        description: str = "",
        guide_text: str = "",
    ) -> None:
        if not enabled or not wallets:
            self._stack.setCurrentIndex(0)
            return
        self.setStyleSheet(build_preview_stylesheet(theme, modal_size))
        if self._view == VIEW_BUTTON:
            self._connect_button.setText(button_label or "Connect Wallet")
            self._stack.setCurrentIndex(2)
            return

        self._subtitle.setText(description)
        self._subtitle.setVisible(bool(description))
        self._guide_link.setText(guide_text)
        self._guide_link.setVisible(bool(guide_text))
        self._rebuild_wallets(wallets)
        self._stack.setCurrentIndex(1)

    def _rebuild_wallets(self, wallets: list[WalletOption]) -> None:
        while self._wallet_box.count():
            item = self._wallet_box.takeAt(0)
            widget = item.widget()
            if widget is not None:
                widget.deleteLater()
        for wallet in wallets:
            row = QPushButton(wallet.name)
            row.setObjectName("PreviewWalletRow")
            row.setToolTip(wallet.type)
            icon = QLabel(wallet.name[:1], row)
            icon.setObjectName("PreviewWalletIcon")
            icon.setAlignment(Qt.AlignmentFlag.AlignCenter)
            icon.move(10, 8)
            row.setMinimumHeight(44)
            row.setStyleSheet("padding-left: 48px;")
            self._wallet_box.addWidget(row)

    @staticmethod
    def _wrap_centered(widget: QWidget) -> QWidget:
        holder = QWidget()
        layout = QVBoxLayout(holder)
        layout.addStretch(1)
        layout.addWidget(widget, 0, Qt.AlignmentFlag.AlignHCenter)
        layout.addStretch(1)
        return holder
