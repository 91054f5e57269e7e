"""QApplication bootstrap."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
import sys

from PySide6.QtWidgets import QApplication

from themestudio.config.settings import AppSettings
from themestudio.core.catalog import load_catalog
from themestudio.core.inspector import StyleInspector
from themestudio.core.session import BuilderSession
from themestudio.errors import ThemeStudioError
from themestudio.runtime_paths import catalog_path, package_root
from themestudio.ui.main_window import MainWindow
from themestudio.ui.theme import build_stylesheet


def _configure_startup_logger(settings: AppSettings) -> logging.Logger:
    logger = logging.getLogger("themestudio.startup")
    if logger.handlers:
        return logger

    logger.setLevel(logging.INFO)
    handler = RotatingFileHandler(
        settings.log_dir / "startup.log",
        maxBytes=512_000,
        backupCount=3,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def run_app() -> int:
    """Initialize and run the application."""
    app = QApplication(sys.argv)
    app.setStyle("Fusion")
    app.setApplicationName("ThemeStudio")
    app.setOrganizationName("ThemeStudio")
    app.setStyleSheet(build_stylesheet())
    settings = AppSettings()
    logger = _configure_startup_logger(settings)
    logger.info("startup package_root=%s", package_root())

    try:
        catalog = load_catalog()
    except ThemeStudioError as exc:
        logger.error("catalog load failed: %s", exc.to_dict())
        raise

    stylesheet = settings.stylesheet_path
    if not stylesheet.exists():
        logger.warning("widget stylesheet missing at %s; tokens stay in loading state", stylesheet)
    inspector = StyleInspector(stylesheet)
    session = BuilderSession(catalog=catalog)
    logger.info(
        "catalog %s: %d wallets, %d chains", catalog_path(), len(catalog.wallets), len(catalog.chains)
    )

    window = MainWindow(settings, session, inspector)
    window.show()

    exit_code = app.exec()
    return exit_code
