"""Main builder window: option sidebar, live previews and generated code."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING

from PySide6.QtCore import QRect, Qt, QTimer
from PySide6.QtGui import QAction, QGuiApplication, QKeySequence
from PySide6.QtWidgets import (
    QCheckBox,
    QComboBox,
    QFileDialog,
    QFormLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QScrollArea,
    QSplitter,
    QTabWidget,
    QToolBox,
    QVBoxLayout,
    QWidget,
)

from themestudio.core.capture import CaptureController
from themestudio.core.tokens import Mode
from themestudio.errors import ErrorCode, ThemeStudioError, format_error_for_user
from themestudio.ui.widgets.code_view import CodeView
from themestudio.ui.widgets.color_picker import ColorPickerPopup
from themestudio.ui.widgets.preview_panel import VIEW_BUTTON, VIEW_MODAL, WidgetPreview
from themestudio.ui.widgets.status_strip import StatusStrip
from themestudio.ui.widgets.token_list import TokenListWidget

if TYPE_CHECKING:
    from themestudio.config.settings import AppSettings
    from themestudio.core.inspector import StyleInspector
    from themestudio.core.session import BuilderSession

logger = logging.getLogger(__name__)

_METADATA_FIELDS = (
    ("description", "Description"),
    ("decorative_light", "Decorative image (light)"),
    ("decorative_dark", "Decorative image (dark)"),
    ("guide_text", "Guide text"),
    ("guide_link", "Guide link"),
    ("terms_url", "Terms URL"),
    ("privacy_url", "Privacy URL"),
)


class MainWindow(QMainWindow):
    """Builder window around a BuilderSession."""

    def __init__(
        self,
        settings: AppSettings,
        session: BuilderSession,
        inspector: StyleInspector,
    ) -> None:
        super().__init__()
        self._settings = settings
        self._session = session
        self._inspector = inspector
        self._shown_once = False
        self._capture = CaptureController(session.store, inspector.read_tokens)

        self._frame_timer = QTimer(self)
        self._frame_timer.setInterval(settings.frame_interval_ms)
        self._frame_timer.timeout.connect(self._on_frame)

        self.setWindowTitle("Theme Studio")
        self.setMinimumSize(1000, 640)
        self.resize(1280, 800)
        self.setObjectName("MainWindow")

        self._setup_layout()
        self._setup_menu()
        self._restore_state()
        self._refresh_font_options()
        self._refresh_all()

    # -- layout --

    def _setup_layout(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        outer = QVBoxLayout(central)
        outer.setContentsMargins(0, 0, 0, 0)
        outer.setSpacing(0)

        self._splitter = QSplitter(Qt.Orientation.Horizontal)
        self._splitter.addWidget(self._build_sidebar())
        self._splitter.addWidget(self._build_output())
        self._splitter.setStretchFactor(0, 0)
        self._splitter.setStretchFactor(1, 1)
        self._splitter.setSizes([380, 900])
        outer.addWidget(self._splitter, 1)

        self._status_strip = StatusStrip()
        outer.addWidget(self._status_strip)

        self._picker = ColorPickerPopup(self._settings.frame_interval_ms, self)
        self._picker.color_committed.connect(self._on_color_committed)
        self._picker.reset_requested.connect(self._on_color_reset)

    def _build_sidebar(self) -> QWidget:
        container = QWidget()
        container.setMinimumWidth(340)
        layout = QVBoxLayout(container)
        layout.setContentsMargins(16, 16, 8, 16)
        layout.setSpacing(8)

        eyebrow = QLabel("WALLET WIDGET")
        eyebrow.setObjectName("PageEyebrow")
        layout.addWidget(eyebrow)
        title = QLabel("Theme Studio")
        title.setObjectName("PageTitle")
        layout.addWidget(title)

        toolbox = QToolBox()
        toolbox.addItem(self._scrollable(self._build_wallet_page()), "Wallets")
        toolbox.addItem(self._scrollable(self._build_chain_page()), "Chains")
        toolbox.addItem(self._scrollable(self._build_modal_page()), "Modal Options")
        toolbox.addItem(self._build_theme_page(), "Theme")
        toolbox.setCurrentIndex(3)
        layout.addWidget(toolbox, 1)
        return container

    def _build_wallet_page(self) -> QWidget:
        page = QWidget()
        layout = QVBoxLayout(page)
        selected = set(self._session.selected_wallet_ids)
        for wallet in self._session.catalog.wallets:
            box = QCheckBox(wallet.name)
            box.setToolTip(wallet.type)
            box.setChecked(wallet.id in selected)
            box.toggled.connect(lambda _checked, wid=wallet.id: self._on_wallet_toggled(wid))
            layout.addWidget(box)
        layout.addStretch(1)
        return page

    def _build_chain_page(self) -> QWidget:
        page = QWidget()
        layout = QVBoxLayout(page)
        selected = set(self._session.selected_chain_ids)
        for chain in self._session.catalog.chains:
            box = QCheckBox(chain.name)
            box.setChecked(chain.id in selected)
            box.toggled.connect(lambda _checked, cid=chain.id: self._on_chain_toggled(cid))
            layout.addWidget(box)
        layout.addStretch(1)
        return page

    def _build_modal_page(self) -> QWidget:
        page = QWidget()
        form = QFormLayout(page)

        self._size_combo = QComboBox()
        for size in self._session.catalog.modal_sizes:
            self._size_combo.addItem(size.label, size.id)
        self._size_combo.setCurrentIndex(max(0, self._size_combo.findData(self._session.modal_size)))
        self._size_combo.currentIndexChanged.connect(self._on_size_changed)
        form.addRow("Modal size", self._size_combo)

        app_name = QLineEdit(self._session.app_name)
        app_name.textChanged.connect(self._on_app_name_changed)
        form.addRow("App name", app_name)

        button_label = QLineEdit(self._session.button_label)
        button_label.textChanged.connect(self._on_button_label_changed)
        form.addRow("Button label", button_label)

        metadata = self._session.metadata
        for field_name, label in _METADATA_FIELDS:
            edit = QLineEdit(getattr(metadata, field_name))
            edit.textChanged.connect(
                lambda text, name=field_name: self._on_metadata_changed(name, text)
            )
            form.addRow(label, edit)
        return page

    def _build_theme_page(self) -> QWidget:
        page = QWidget()
        layout = QVBoxLayout(page)
        layout.setSpacing(8)

        row = QHBoxLayout()
        self._mode_combo = QComboBox()
        for mode in Mode:
            self._mode_combo.addItem(mode.label, mode.value)
        self._mode_combo.setCurrentIndex(self._mode_combo.findData(self._session.mode.value))
        self._mode_combo.currentIndexChanged.connect(self._on_mode_changed)
        row.addWidget(self._mode_combo, 1)

        self._font_combo = QComboBox()
        self._font_combo.currentIndexChanged.connect(self._on_font_changed)
        row.addWidget(self._font_combo, 2)
        layout.addLayout(row)

        self._radius_edit = QLineEdit()
        self._radius_edit.setPlaceholderText("Border radius, e.g. 12 or 12px")
        self._radius_edit.textChanged.connect(self._on_radius_changed)
        layout.addWidget(self._radius_edit)

        self._token_list = TokenListWidget()
        self._token_list.search_changed.connect(self._on_search_changed)
        self._token_list.token_clicked.connect(self._on_token_clicked)
        layout.addWidget(self._token_list, 1)
        return page

    def _build_output(self) -> QWidget:
        self._tabs = QTabWidget()
        self._modal_preview = WidgetPreview(VIEW_MODAL)
        self._button_preview = WidgetPreview(VIEW_BUTTON)
        self._code_view = CodeView()
        self._code_view.copy_requested.connect(self._copy_code)
        self._tabs.addTab(self._modal_preview, "Modal")
        self._tabs.addTab(self._button_preview, "Button")
        self._tabs.addTab(self._code_view, "Code")

        holder = QWidget()
        layout = QVBoxLayout(holder)
        layout.setContentsMargins(8, 16, 16, 16)
        layout.addWidget(self._tabs)
        return holder

    @staticmethod
    def _scrollable(widget: QWidget) -> QScrollArea:
        area = QScrollArea()
        area.setWidgetResizable(True)
        area.setWidget(widget)
        return area

    def _setup_menu(self) -> None:
        menubar = self.menuBar()

        file_menu = menubar.addMenu("&File")
        stylesheet_action = QAction("Load Widget &Stylesheet...", self)
        stylesheet_action.triggered.connect(self._choose_stylesheet)
        file_menu.addAction(stylesheet_action)
        export_action = QAction("&Export Code...", self)
        export_action.setShortcut(QKeySequence.StandardKey.Save)
        export_action.triggered.connect(self._export_code)
        file_menu.addAction(export_action)
        file_menu.addSeparator()
        exit_action = QAction("E&xit", self)
        exit_action.setShortcut(QKeySequence.StandardKey.Quit)
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)

        edit_menu = menubar.addMenu("&Edit")
        copy_action = QAction("&Copy Code", self)
        copy_action.setShortcut(QKeySequence("Ctrl+Shift+C"))
        copy_action.triggered.connect(self._copy_code)
        edit_menu.addAction(copy_action)
        theme_action = QAction("Copy &Theme JSON", self)
        theme_action.triggered.connect(self._copy_theme_json)
        edit_menu.addAction(theme_action)

        help_menu = menubar.addMenu("&Help")
        about_action = QAction("&About", self)
        about_action.triggered.connect(self._show_about)
        help_menu.addAction(about_action)

    # -- capture loop --

    def showEvent(self, event) -> None:
        super().showEvent(event)
        if not self._shown_once:
            self._shown_once = True
            self._request_capture(self._session.mode)

    def _request_capture(self, mode: Mode) -> None:
        if self._capture.signal_ready(mode):
            self._frame_timer.start()

    def _on_frame(self) -> None:
        captured = self._capture.on_frame()
        if not self._capture.has_pending:
            self._frame_timer.stop()
        if captured:
            logger.info("captured base tokens for %s", ", ".join(m.value for m in captured))
            self._refresh_font_options()
            self._refresh_all()
        elif self._session.is_loading() and not self._capture.has_pending:
            self._status_strip.show_message(
                format_error_for_user(ThemeStudioError(ErrorCode.EMPTY_CAPTURE))
            )

    # -- edits --

    def _on_wallet_toggled(self, wallet_id: str) -> None:
        self._session.toggle_wallet(wallet_id)
        self._refresh_preview()
        self._refresh_code()

    def _on_chain_toggled(self, chain_id: str) -> None:
        self._session.toggle_chain(chain_id)
        self._refresh_code()

    def _on_size_changed(self, _index: int) -> None:
        self._session.set_modal_size(self._size_combo.currentData() or "")
        self._refresh_preview()
        self._refresh_code()

    def _on_app_name_changed(self, text: str) -> None:
        self._session.set_app_name(text)
        self._refresh_code()

    def _on_button_label_changed(self, text: str) -> None:
        self._session.set_button_label(text)
        self._refresh_preview()
        self._refresh_code()

    def _on_metadata_changed(self, field_name: str, text: str) -> None:
        self._session.update_metadata(**{field_name: text.strip()})
        self._refresh_preview()
        self._refresh_code()

    def _on_mode_changed(self, _index: int) -> None:
        self._picker.hide()
        self._session.set_mode(self._mode_combo.currentData() or Mode.DARK.value)
        self._request_capture(self._session.mode)
        overrides = self._session.composer.overrides(self._session.mode)
        self._radius_edit.blockSignals(True)
        self._radius_edit.setText(overrides.radius)
        self._radius_edit.blockSignals(False)
        self._refresh_font_options()
        self._refresh_all()

    def _on_font_changed(self, _index: int) -> None:
        value = self._font_combo.currentData()
        if value is None:
            return
        self._session.set_font_override(value)
        self._refresh_preview()
        self._refresh_code()

    def _on_radius_changed(self, text: str) -> None:
        self._session.set_radius_override(text.strip())
        self._refresh_preview()
        self._refresh_code()

    def _on_search_changed(self, text: str) -> None:
        self._session.set_search_query(text)
        self._refresh_tokens()

    def _on_token_clicked(self, key: str, anchor: QRect) -> None:
        self._picker.open_for(key, self._session.color_value(key), anchor)

    def _on_color_committed(self, key: str, hex_value: str) -> None:
        self._session.set_color_override(key, hex_value)
        self._update_token_values()
        self._refresh_preview()
        self._refresh_code()

    def _on_color_reset(self, key: str) -> None:
        self._session.reset_color_override(key)
        self._picker.set_value(self._session.color_value(key))
        self._update_token_values()
        self._refresh_preview()
        self._refresh_code()

    # -- refresh --

    def _refresh_all(self) -> None:
        self._refresh_tokens()
        self._refresh_preview()
        self._refresh_code()

    def _refresh_font_options(self) -> None:
        overrides = self._session.composer.overrides(self._session.mode)
        current = overrides.font or self._session.resolved_theme().fonts.get("body", "")
        self._font_combo.blockSignals(True)
        self._font_combo.clear()
        for option in self._session.font_options():
            self._font_combo.addItem(option.label, option.value)
        index = self._font_combo.findData(current)
        self._font_combo.setCurrentIndex(max(0, index))
        self._font_combo.blockSignals(False)

    def _refresh_tokens(self) -> None:
        mode = self._session.mode
        self._status_strip.set_token_state(
            mode.label,
            len(self._session.base_tokens().colors),
            self._session.is_loading(),
        )
        if self._session.is_loading():
            self._token_list.set_loading()
            return
        self._token_list.set_groups(
            self._session.grouped_color_keys(),
            self._session.resolved_theme().colors,
            set(self._session.composer.color_overrides(mode)),
        )

    def _update_token_values(self) -> None:
        self._token_list.update_values(
            self._session.resolved_theme().colors,
            set(self._session.composer.color_overrides(self._session.mode)),
        )

    def _refresh_preview(self) -> None:
        theme = self._session.resolved_theme()
        wallets = self._session.selected_wallets()
        metadata = self._session.metadata
        guide_text = (metadata.guide_text or "Integration guide") if metadata.guide_link else ""
        for preview in (self._modal_preview, self._button_preview):
            preview.render_state(
                theme=theme,
                wallets=wallets,
                button_label=self._session.button_label,
                modal_size=self._session.modal_size,
                enabled=self._session.preview_enabled,
                description=metadata.description,
                guide_text=guide_text,
            )

    def _refresh_code(self) -> None:
        self._code_view.set_code(self._session.snippet())

    # -- actions --

    def _copy_code(self) -> None:
        QGuiApplication.clipboard().setText(self._session.snippet())
        self._code_view.mark_copied()
        self._status_strip.show_message("Code copied to clipboard", 2400)

    def _copy_theme_json(self) -> None:
        QGuiApplication.clipboard().setText(json.dumps(self._session.theme_payload(), indent=2))
        self._status_strip.show_message("Theme JSON copied to clipboard", 2400)

    def _export_code(self) -> None:
        path_str, _ = QFileDialog.getSaveFileName(
            self, "Export Code", "App.tsx", "TypeScript (*.tsx);;All files (*)"
        )
        if not path_str:
            return
        path = Path(path_str)
        try:
            path.write_text(self._session.snippet(), encoding="utf-8")
        except OSError as exc:
            error = ThemeStudioError(
                ErrorCode.EXPORT_FAILED, path=path, details={"original": str(exc)}
            )
            logger.warning("export failed: %s", error.to_dict())
            self._status_strip.show_message(format_error_for_user(error), 4000)
            return
        self._status_strip.show_message(f"Exported {path.name}", 2400)

    def _choose_stylesheet(self) -> None:
        path_str, _ = QFileDialog.getOpenFileName(
            self,
            "Load Widget Stylesheet",
            str(self._inspector.path.parent),
            "Stylesheets (*.css);;All files (*)",
        )
        if not path_str:
            return
        self._settings.stylesheet_custom_path = path_str
        self._inspector.set_path(Path(path_str))
        armed = [mode for mode in Mode if self._capture.signal_stylesheet_loaded(mode)]
        if armed:
            self._frame_timer.start()
            self._status_strip.show_message("Reading tokens from the new stylesheet...", 2400)
        else:
            self._status_strip.show_message(
                "Base tokens are already captured; the stylesheet applies next launch", 4000
            )

    def _show_about(self) -> None:
        from PySide6.QtWidgets import QMessageBox
        from themestudio import __version__
        QMessageBox.about(
            self, "About Theme Studio",
            f"Theme Studio v{__version__}\n\n"
            "A PySide6 builder for wallet-widget themes.\n\n"
            "Pick wallets and chains, adjust colors per mode, preview the\n"
            "widget live and copy the matching configuration code."
        )

    # -- state --

    def _restore_state(self) -> None:
        geo = self._settings.window_geometry
        if geo:
            self.restoreGeometry(geo)
        splitter = self._settings.splitter_state
        if splitter:
            self._splitter.restoreState(splitter)

    def closeEvent(self, event) -> None:
        self._capture.cancel()
        self._frame_timer.stop()
        self._picker.close()
        self._settings.window_geometry = self.saveGeometry()
        self._settings.splitter_state = self._splitter.saveState()
        super().closeEvent(event)
