"""Read-only code preview with snippet syntax coloring."""

from __future__ import annotations

from PySide6.QtCore import Qt, QTimer, Signal
from PySide6.QtGui import QColor, QSyntaxHighlighter, QTextCharFormat, QTextDocument
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QPlainTextEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from themestudio.core.highlight import SPAN_COLORS, SpanKind, tokenize_line


class SnippetHighlighter(QSyntaxHighlighter):
    def __init__(self, document: QTextDocument) -> None:
        super().__init__(document)
        self._formats: dict[SpanKind, QTextCharFormat] = {}
        for kind, color in SPAN_COLORS.items():
            fmt = QTextCharFormat()
            fmt.setForeground(QColor(color))
            self._formats[kind] = fmt

    def highlightBlock(self, text: str) -> None:
        for span in tokenize_line(text):
            self.setFormat(span.start, len(span.text), self._formats[span.kind])


class CodeView(QWidget):
    """Generated snippet with a filename badge and a copy button."""

    copy_requested = Signal()

    def __init__(self, filename: str = "App.tsx", parent: QWidget | None = None) -> None:
        super().__init__(parent)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(8)

        header = QHBoxLayout()
        header.setContentsMargins(4, 0, 4, 0)
        badge = QLabel(filename.upper())
        badge.setObjectName("SectionHeader")
        header.addWidget(badge)
        header.addStretch(1)
        self._copy_btn = QPushButton("Copy")
        self._copy_btn.clicked.connect(self.copy_requested.emit)
        header.addWidget(self._copy_btn)
        layout.addLayout(header)

        self._editor = QPlainTextEdit()
        self._editor.setObjectName("CodeView")
        self._editor.setReadOnly(True)
        self._editor.setLineWrapMode(QPlainTextEdit.LineWrapMode.NoWrap)
        self._editor.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
        self._highlighter = SnippetHighlighter(self._editor.document())
        layout.addWidget(self._editor, 1)

        self._reset_timer = QTimer(self)
        self._reset_timer.setSingleShot(True)
        self._reset_timer.timeout.connect(lambda: self._copy_btn.setText("Copy"))

    def code(self) -> str:
        return self._editor.toPlainText()

    def set_code(self, code: str) -> None:
        if code == self._editor.toPlainText():
            return
        scroll = self._editor.verticalScrollBar().value()
        self._editor.setPlainText(code)
        self._editor.verticalScrollBar().setValue(scroll)

    def mark_copied(self, timeout_ms: int = 1600) -> None:
        self._copy_btn.setText("Copied")
        self._reset_timer.start(timeout_ms)
