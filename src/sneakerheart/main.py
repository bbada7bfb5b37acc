# -*- coding: utf-8 -*-
"""Application entry point."""

from __future__ import annotations

import logging
import sys
import traceback
from pathlib import Path
from typing import Any

from PyQt6.QtWidgets import QApplication, QMessageBox

from sneakerheart.config import ConfigError, load_config
from sneakerheart.constants import APP_NAME
from sneakerheart.core.catalog import CatalogError, default_data_file, load_catalog
from sneakerheart.gui.controller import AppController
from sneakerheart.gui.main_window import MainWindow
from sneakerheart.utils.logger import setup_session_logging


def global_exception_handler(exc_type, exc_value, exc_traceback):
    """Log fatal errors and keep a copy of the last crash next to the session logs."""
    error_msg = "".join(traceback.format_exception(exc_type, exc_value, exc_traceback))
    logging.getLogger().critical("FATAL CRASH:\n%s", error_msg)

    crash_path = Path.cwd() / "logs" / "LAST_CRASH.log"
    crash_path.parent.mkdir(parents=True, exist_ok=True)
    crash_path.write_text(error_msg, encoding="utf-8")

    if QApplication.instance() is not None:
        QMessageBox.critical(None, "Application Crash", f"A fatal error occurred.\nDetails saved to: {crash_path}")

    sys.__excepthook__(exc_type, exc_value, exc_traceback)


def resolve_catalog_paths(settings: dict[str, Any]) -> tuple[Path, Path]:
    """Return (data_file, assets_dir) from settings, falling back to the packaged catalog."""
    catalog = settings.get("catalog", {})
    data_file = Path(catalog["data_file"]) if catalog.get("data_file") else default_data_file()
    assets_dir = Path(catalog["assets_dir"]) if catalog.get("assets_dir") else data_file.parent
    return data_file, assets_dir


def main() -> int:
    """Start the GUI application."""
    sys.excepthook = global_exception_handler
    session_log_path = setup_session_logging(Path.cwd(), APP_NAME)
    logger = logging.getLogger(__name__)
    app = QApplication(sys.argv)
    if session_log_path is not None:
        logger.info("Session log file: %s", session_log_path)

    try:
        settings = load_config(sys.argv[1] if len(sys.argv) > 1 else None)
    except ConfigError as exc:
        logger.critical("Settings rejected: %s", exc)
        QMessageBox.critical(None, "Sneaker Heart", f"Configuración inválida.\n\n{exc}")
        return 1

    data_file, assets_dir = resolve_catalog_paths(settings)
    try:
        sneakers = load_catalog(data_file, expected_count=int(settings["catalog"]["expected_count"]))
    except CatalogError as exc:
        logger.critical("Catalog rejected: %s", exc)
        QMessageBox.critical(None, "Sneaker Heart", f"No se pudieron cargar las zapatillas.\n\n{exc}")
        return 1

    controller = AppController(settings, sneakers)
    window = MainWindow(settings=settings, controller=controller, assets_dir=assets_dir)
    window.show()
    window.start()
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
