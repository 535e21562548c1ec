"""
Application Initialization
==========================
This module constructs the Model/View pair and starts the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Reads the settings and sets up logging.
2. Instantiates the Form State (Model).
3. Instantiates the Main Window (View), passing the model in.
"""
import logging
import os
import sys

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import QCoreApplication, QSettings, QTranslator, QLibraryInfo

from coinrefill.config import APP_ID, ORG_ID, VISIBLE_APP_NAME, load_settings
from coinrefill.logging_config import setup_logging
from coinrefill.model.state import FormState
from coinrefill.view.main_window import MainWindow

logger = logging.getLogger(__name__)


def create_app(argv: list[str] | None = None) -> QApplication:
    """Create and configure the QApplication instance."""
    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")

    QCoreApplication.setOrganizationName(ORG_ID)
    QCoreApplication.setApplicationName(APP_ID)
    QSettings.setDefaultFormat(QSettings.Format.IniFormat)

    app = QApplication(sys.argv if argv is None else argv)
    app.setApplicationDisplayName(VISIBLE_APP_NAME)
    return app


def install_translator(app: QApplication, lang_code: str) -> bool:
    """Install Qt's own translations (OK, Abbrechen, ...) for the given language."""
    # English is the default language, no need to load a translator
    if not lang_code or lang_code.lower().startswith("en"):
        return True

    translator = QTranslator(app)
    translations_path = QLibraryInfo.path(QLibraryInfo.TranslationsPath)
    if translator.load(f"qtbase_{lang_code}", translations_path) or \
            translator.load(f"qtbase_{lang_code}", translations_path + "/Qt6"):
        return app.installTranslator(translator)

    logger.warning("Qt translation '%s' not found in %s", lang_code, translations_path)
    return False


def main() -> None:
    # 1. Create the Qt Application (settings need the org/app names)
    app = create_app()

    # 2. Setup Logging (Console + Optional File)
    settings = load_settings()
    setup_logging(level=settings.log_level, log_file=settings.log_file)

    # 3. Install translations for Qt standard widgets
    install_translator(app, settings.language)

    # 4. Initialize the Data Model
    form = FormState()

    # 5. Initialize the Main Window, passing the model
    window = MainWindow(form)
    window.show()
    logger.info("%s started.", VISIBLE_APP_NAME)

    # 6. Start Event Loop
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
