"""Popup color picker: saturation/value panel, hue strip, hex and RGB inputs."""

from __future__ import annotations

from PySide6.QtCore import QPoint, QPointF, QRect, QRectF, QTimer, Qt, Signal
from PySide6.QtGui import QColor, QGuiApplication, QLinearGradient, QPainter, QPainterPath, QPen
from PySide6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
    QWidget,
)

from themestudio.core.coalesce import FrameCoalescer
from themestudio.core.color_model import (
    HSV,
    RGB,
    clamp,
    from_hsv,
    normalize_hex,
    parse_color,
    to_hex,
    to_hsv,
)
from themestudio.core.grouping import humanize

_POPUP_MARGIN = 12


class SaturationValuePanel(QWidget):
    """Square where x is saturation and y is value for the current hue."""

    changed = Signal(float, float)  # saturation, value

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setMinimumSize(320, 180)
        self.setCursor(Qt.CursorShape.CrossCursor)
        self._hue = 0.0
        self._saturation = 0.0
        self._value = 0.0
        self._dragging = False

    def set_hsv(self, hsv: HSV) -> None:
        self._hue = hsv.h
        self._saturation = hsv.s
        self._value = hsv.v
        self.update()

    def paintEvent(self, event) -> None:
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        rect = QRectF(self.rect())
        clip = QPainterPath()
        clip.addRoundedRect(rect, 14, 14)
        painter.setClipPath(clip)

        painter.fillRect(rect, QColor.fromHsvF(min(self._hue / 360, 0.9999), 1.0, 1.0))
        whites = QLinearGradient(rect.topLeft(), rect.topRight())
        whites.setColorAt(0, QColor(255, 255, 255, 255))
        whites.setColorAt(1, QColor(255, 255, 255, 0))
        painter.fillRect(rect, whites)
        blacks = QLinearGradient(rect.bottomLeft(), rect.topLeft())
        blacks.setColorAt(0, QColor(0, 0, 0, 255))
        blacks.setColorAt(1, QColor(0, 0, 0, 0))
        painter.fillRect(rect, blacks)

        marker = QPointF(
            rect.left() + self._saturation * rect.width(),
            rect.top() + (1 - self._value) * rect.height(),
        )
        painter.setClipping(False)
        painter.setPen(QPen(QColor(0, 0, 0, 128), 4))
        painter.drawEllipse(marker, 8, 8)
        painter.setPen(QPen(QColor(255, 255, 255, 180), 2))
        painter.drawEllipse(marker, 8, 8)

    def mousePressEvent(self, event) -> None:
        if event.button() == Qt.MouseButton.LeftButton:
            self._dragging = True
            self._update_from(event.position())

    def mouseMoveEvent(self, event) -> None:
        if self._dragging:
            self._update_from(event.position())

    def mouseReleaseEvent(self, event) -> None:
        self._dragging = False

    def _update_from(self, position: QPointF) -> None:
        width = max(1, self.width())
        height = max(1, self.height())
        self._saturation = clamp(position.x() / width, 0, 1)
        self._value = clamp(1 - position.y() / height, 0, 1)
        self.update()
        self.changed.emit(self._saturation, self._value)


class HueSlider(QWidget):
    """Horizontal hue strip spanning 0-360 degrees."""

    changed = Signal(float)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setFixedHeight(14)
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        self._hue = 0.0
        self._dragging = False

    def set_hue(self, hue: float) -> None:
        self._hue = hue
        self.update()

    def paintEvent(self, event) -> None:
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        rect = QRectF(self.rect())
        gradient = QLinearGradient(rect.topLeft(), rect.topRight())
        for step in range(7):
            gradient.setColorAt(step / 6, QColor.fromHsvF(min(step / 6, 0.9999), 1.0, 1.0))
        path = QPainterPath()
        path.addRoundedRect(rect, rect.height() / 2, rect.height() / 2)
        painter.fillPath(path, gradient)

        x = rect.left() + (self._hue / 360) * rect.width()
        painter.setPen(QPen(QColor(255, 255, 255, 220), 2))
        painter.drawEllipse(QPointF(x, rect.center().y()), 6, 6)

    def mousePressEvent(self, event) -> None:
        if event.button() == Qt.MouseButton.LeftButton:
            self._dragging = True
            self._update_from(event.position())

    def mouseMoveEvent(self, event) -> None:
        if self._dragging:
            self._update_from(event.position())

    def mouseReleaseEvent(self, event) -> None:
        self._dragging = False

    def _update_from(self, position: QPointF) -> None:
        self._hue = clamp(position.x() / max(1, self.width()), 0, 1) * 360
        self.update()
        self.changed.emit(self._hue)


class ColorPickerPopup(QFrame):
    """Edits one color token; commits canonical hex values.

    Drag updates from the panel and hue strip are coalesced so that at most
    one commit happens per frame interval. Closing the popup drops any commit
    that has not been flushed yet.
    """

    color_committed = Signal(str, str)  # token key, hex
    reset_requested = Signal(str)

    def __init__(self, frame_interval_ms: int = 16, parent: QWidget | None = None) -> None:
        super().__init__(parent, Qt.WindowType.Popup)
        self.setObjectName("ColorPickerPopup")
        self.setFixedWidth(360)
        self._key = ""
        self._value = "#000000"
        self._hsv = HSV(0.0, 0.0, 0.0)

        self._coalescer: FrameCoalescer[str] = FrameCoalescer(self._emit_commit)
        self._frame_timer = QTimer(self)
        self._frame_timer.setSingleShot(True)
        self._frame_timer.setInterval(frame_interval_ms)
        self._frame_timer.timeout.connect(self._coalescer.flush)

        self._setup_ui()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(12)

        title_row = QHBoxLayout()
        self._title = QLabel("")
        self._title.setObjectName("SectionHeader")
        title_row.addWidget(self._title, 1)
        self._reset_btn = QPushButton("Reset")
        self._reset_btn.clicked.connect(self._on_reset_clicked)
        title_row.addWidget(self._reset_btn)
        layout.addLayout(title_row)

        self._panel = SaturationValuePanel()
        self._panel.changed.connect(self._on_panel_changed)
        layout.addWidget(self._panel)

        hue_row = QHBoxLayout()
        hue_row.setSpacing(12)
        self._swatch = QLabel()
        self._swatch.setFixedSize(32, 32)
        self._hue = HueSlider()
        self._hue.changed.connect(self._on_hue_changed)
        hue_row.addWidget(self._swatch)
        hue_row.addWidget(self._hue, 1)
        layout.addLayout(hue_row)

        input_row = QHBoxLayout()
        input_row.setSpacing(8)
        self._hex_input = QLineEdit()
        self._hex_input.setMaxLength(7)
        self._hex_input.textEdited.connect(self._on_hex_edited)
        self._hex_input.editingFinished.connect(self._on_hex_finished)
        input_row.addWidget(self._hex_input, 2)

        self._channel_inputs: dict[str, QSpinBox] = {}
        for channel in ("r", "g", "b"):
            spin = QSpinBox()
            spin.setRange(0, 255)
            spin.setPrefix(f"{channel.upper()} ")
            spin.valueChanged.connect(self._on_channel_changed)
            self._channel_inputs[channel] = spin
            input_row.addWidget(spin, 1)
        layout.addLayout(input_row)

    # -- public API --

    @property
    def token_key(self) -> str:
        return self._key

    @property
    def current_value(self) -> str:
        return self._value

    @property
    def has_pending_commit(self) -> bool:
        return self._coalescer.has_pending

    def open_for(self, key: str, value: str, anchor: QRect | None = None) -> None:
        self._coalescer.cancel()
        self._frame_timer.stop()
        self._key = key
        self._title.setText(humanize(key).upper())
        self.set_value(value)
        self.adjustSize()
        if anchor is not None:
            self.move(self._placement_for(anchor))
        self.show()
        self._hex_input.setFocus()

    def set_value(self, value: str) -> None:
        """Sync the editors to an externally committed value."""
        rgb = parse_color(value) or RGB(0, 0, 0)
        self._value = normalize_hex(value) or to_hex(rgb)
        self._hsv = to_hsv(rgb)
        self._refresh(rgb, update_hex=True)

    def closeEvent(self, event) -> None:
        self._coalescer.cancel()
        self._frame_timer.stop()
        super().closeEvent(event)

    def hideEvent(self, event) -> None:
        self._coalescer.cancel()
        self._frame_timer.stop()
        super().hideEvent(event)

    # -- drag input (coalesced) --

    def _on_panel_changed(self, saturation: float, value: float) -> None:
        self._apply_hsv(HSV(self._hsv.h, saturation, value))

    def _on_hue_changed(self, hue: float) -> None:
        self._apply_hsv(HSV(hue, self._hsv.s, self._hsv.v))

    def _apply_hsv(self, hsv: HSV) -> None:
        self._hsv = hsv
        rgb = from_hsv(hsv)
        self._value = to_hex(rgb)
        self._refresh(rgb, update_hex=True)
        if self._coalescer.submit(self._value):
            self._frame_timer.start()

    # -- typed input (committed immediately) --

    def _on_hex_edited(self, text: str) -> None:
        normalized = normalize_hex(text)
        if normalized is None:
            return
        self._commit_typed(normalized, update_hex=False)

    def _on_hex_finished(self) -> None:
        normalized = normalize_hex(self._hex_input.text())
        if normalized is None:
            self._hex_input.setText(self._value)
            return
        self._commit_typed(normalized, update_hex=True)

    def _on_channel_changed(self, _value: int) -> None:
        rgb = RGB(
            r=self._channel_inputs["r"].value(),
            g=self._channel_inputs["g"].value(),
            b=self._channel_inputs["b"].value(),
        )
        self._commit_typed(to_hex(rgb), update_hex=True)

    def _commit_typed(self, hex_value: str, *, update_hex: bool) -> None:
        rgb = parse_color(hex_value) or RGB(0, 0, 0)
        self._value = hex_value
        self._hsv = to_hsv(rgb)
        self._refresh(rgb, update_hex=update_hex)
        self._emit_commit(hex_value)

    def _on_reset_clicked(self) -> None:
        self._coalescer.cancel()
        self._frame_timer.stop()
        if self._key:
            self.reset_requested.emit(self._key)

    def _emit_commit(self, hex_value: str) -> None:
        if self._key:
            self.color_committed.emit(self._key, hex_value)

    # -- helpers --

    def _refresh(self, rgb: RGB, *, update_hex: bool) -> None:
        self._panel.set_hsv(self._hsv)
        self._hue.set_hue(self._hsv.h)
        self._swatch.setStyleSheet(f"background-color: {self._value}; border-radius: 8px;")
        if update_hex and self._hex_input.text() != self._value:
            self._hex_input.setText(self._value)
        for channel, spin in self._channel_inputs.items():
            spin.blockSignals(True)
            spin.setValue(int(getattr(rgb, channel)))
            spin.blockSignals(False)

    def _placement_for(self, anchor: QRect) -> QPoint:
        screen = QGuiApplication.screenAt(anchor.center()) or QGuiApplication.primaryScreen()
        bounds = screen.availableGeometry().adjusted(
            _POPUP_MARGIN, _POPUP_MARGIN, -_POPUP_MARGIN, -_POPUP_MARGIN
        )
        width = self.width() or 360
        height = self.height() or 360
        left = anchor.left()
        top = anchor.bottom() + _POPUP_MARGIN
        if left + width > bounds.right():
            left = bounds.right() - width
        left = max(left, bounds.left())
        if top + height > bounds.bottom():
            top = anchor.top() - height - _POPUP_MARGIN
        top = max(top, bounds.top())
        return QPoint(left, top)
