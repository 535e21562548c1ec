"""
Configuration & Application Identity
====================================
This module serves as the central registry for application constants and the
user settings read at startup.

Why is this file needed?
------------------------
1. Identity: Qt stores settings under the organisation/application ids set here.
2. Settings: Log level, log file and UI language are read from an INI file via
   QSettings, so an operator can turn on debug logging without code changes.

Exports:
    VISIBLE_APP_NAME (str): Window title of the form.
    AppSettings: Parsed settings.
    load_settings: Read AppSettings from QSettings.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Optional

from PySide6.QtCore import QSettings

logger = logging.getLogger(__name__)

ORG_ID = "parkraum"
APP_ID = "coinrefill"
VISIBLE_APP_NAME = "Parkautomat Kassenstand"

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LANGUAGE = "de"


@dataclass(frozen=True)
class AppSettings:
    log_level: int = logging.INFO
    log_file: Optional[str] = None
    language: str = DEFAULT_LANGUAGE


def _parse_log_level(name: str) -> int:
    level = logging.getLevelName(str(name).strip().upper())
    if isinstance(level, int):
        return level
    logger.warning("Invalid log level '%s' in settings, using %s", name, DEFAULT_LOG_LEVEL)
    return logging.INFO


def load_settings(settings: QSettings | None = None) -> AppSettings:
    """
    Read the application settings.

    Args:
        settings: Settings store to read; defaults to the application's
            QSettings (requires organisation/application names to be set).
    """
    if settings is None:
        settings = QSettings()

    level_name = settings.value("logging/level", DEFAULT_LOG_LEVEL, type=str) or DEFAULT_LOG_LEVEL
    log_file = settings.value("logging/file", "", type=str) or None
    language = settings.value("ui/language", DEFAULT_LANGUAGE, type=str) or DEFAULT_LANGUAGE

    return AppSettings(
        log_level=_parse_log_level(level_name),
        log_file=log_file,
        language=language.strip().lower(),
    )
