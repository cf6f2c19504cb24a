"""App constants and utilities."""

from .constants import (
    APP_NAME,
    APP_ORG,
    BASE_TITLE,
    DEFAULT_FONT_SIZE,
    DEFAULT_TAB_WIDTH,
    JSON_FILTER,
    JSON_SUFFIX,
    MAX_RECENTS,
    SETTINGS_GEOMETRY,
    SETTINGS_LAST_DIR,
    SETTINGS_RECENTS,
)

__all__ = [
    "APP_ORG",
    "APP_NAME",
    "BASE_TITLE",
    "JSON_SUFFIX",
    "JSON_FILTER",
    "SETTINGS_GEOMETRY",
    "SETTINGS_LAST_DIR",
    "SETTINGS_RECENTS",
    "MAX_RECENTS",
    "DEFAULT_TAB_WIDTH",
    "DEFAULT_FONT_SIZE",
]
