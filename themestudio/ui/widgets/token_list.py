"""Grouped, searchable list of color tokens."""

from __future__ import annotations

from typing import Mapping

from PySide6.QtCore import QRect, Qt, Signal
from PySide6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from themestudio.core.grouping import KeyGroup, humanize


class ColorTokenRow(QPushButton):
    """Swatch plus humanized label for one color token."""

    def __init__(self, key: str, value: str, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("ColorTokenRow")
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        self.setProperty("overridden", "false")
        self._key = key
        self.setAccessibleName(f"{humanize(key)} color")

        layout = QHBoxLayout(self)
        layout.setContentsMargins(8, 4, 8, 4)
        layout.setSpacing(12)
        self._swatch = QLabel()
        self._swatch.setFixedSize(28, 28)
        layout.addWidget(self._swatch)
        label = QLabel(humanize(key))
        label.setAttribute(Qt.WidgetAttribute.WA_TransparentForMouseEvents)
        layout.addWidget(label, 1)
        self.setMinimumHeight(40)
        self.set_value(value)

    @property
    def key(self) -> str:
        return self._key

    def set_value(self, value: str) -> None:
        self._swatch.setStyleSheet(
            f"background-color: {value or 'transparent'}; border-radius: 14px;"
        )

    def set_overridden(self, overridden: bool) -> None:
        self.setProperty("overridden", "true" if overridden else "false")
        self.style().unpolish(self)
        self.style().polish(self)


class TokenListWidget(QWidget):
    """Search box over grouped color token rows."""

    search_changed = Signal(str)
    token_clicked = Signal(str, QRect)  # key, global geometry of the row

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._rows: dict[str, ColorTokenRow] = {}

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(8)

        self._search = QLineEdit()
        self._search.setPlaceholderText("Search color tokens...")
        self._search.setClearButtonEnabled(True)
        self._search.textChanged.connect(self.search_changed.emit)
        layout.addWidget(self._search)

        self._scroll = QScrollArea()
        self._scroll.setWidgetResizable(True)
        self._scroll.setFrameShape(QFrame.Shape.NoFrame)
        layout.addWidget(self._scroll, 1)

        self._status = QLabel("")
        self._status.setObjectName("StatusDetail")
        self._status.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._status)

        self._content = QWidget()
        self._content_layout = QVBoxLayout(self._content)
        self._scroll.setWidget(self._content)

    def search_text(self) -> str:
        return self._search.text()

    def set_loading(self) -> None:
        self._clear()
        self._status.setText("Loading widget tokens...")

    def set_groups(
        self,
        groups: list[KeyGroup],
        colors: Mapping[str, str],
        overridden: set[str] | frozenset[str] = frozenset(),
    ) -> None:
        self._clear()
        self._status.setText("" if groups else "No tokens match your search.")
        for group in groups:
            header = QLabel(group.name.upper())
            header.setObjectName("SectionHeader")
            self._content_layout.addWidget(header)
            for key in group.keys:
                row = ColorTokenRow(key, colors.get(key, ""))
                row.set_overridden(key in overridden)
                row.clicked.connect(lambda _checked=False, k=key: self._on_row_clicked(k))
                self._rows[key] = row
                self._content_layout.addWidget(row)
        self._content_layout.addStretch(1)

    def update_values(self, colors: Mapping[str, str], overridden: set[str] | frozenset[str]) -> None:
        for key, row in self._rows.items():
            row.set_value(colors.get(key, ""))
            row.set_overridden(key in overridden)

    def visible_keys(self) -> list[str]:
        return list(self._rows)

    def _on_row_clicked(self, key: str) -> None:
        row = self._rows.get(key)
        if row is None:
            return
        top_left = row.mapToGlobal(row.rect().topLeft())
        self.token_clicked.emit(key, QRect(top_left, row.size()))

    def _clear(self) -> None:
        self._rows = {}
        while self._content_layout.count():
            item = self._content_layout.takeAt(0)
            widget = item.widget()
            if widget is not None:
                widget.deleteLater()
