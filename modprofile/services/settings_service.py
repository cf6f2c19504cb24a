from __future__ import annotations
from typing import Iterable
from PyQt6.QtCore import QSettings, QByteArray

from modprofile.domain.interfaces import ISettingsService
from modprofile.utils.constants import (
    MAX_RECENTS,
    SETTINGS_GEOMETRY,
    SETTINGS_LAST_DIR,
    SETTINGS_RECENTS,
)

class SettingsService(ISettingsService):
    """Persist small UI bits: dialog geometry, last used directory and recent profiles."""

    def __init__(self, qsettings: QSettings) -> None:
        self._s = qsettings

    def get_geometry(self) -> bytes | None:
        v = self._s.value(SETTINGS_GEOMETRY)
        return bytes(v) if isinstance(v, QByteArray) else None

    def set_geometry(self, blob: bytes) -> None:
        self._s.setValue(SETTINGS_GEOMETRY, QByteArray(blob))

    def get_last_directory(self) -> str | None:
        v = self._s.value(SETTINGS_LAST_DIR)
        return str(v) if v else None

    def set_last_directory(self, directory: str) -> None:
        self._s.setValue(SETTINGS_LAST_DIR, directory)

    def get_recent(self) -> list[str]:
        v = self._s.value(SETTINGS_RECENTS, [])
        # QSettings (INI backend) hands back a bare str for one-element lists
        if isinstance(v, str):
            v = [v]
        return [str(x) for x in v if x] if isinstance(v, list) else []

    def set_recent(self, recent: Iterable[str]) -> None:
        self._s.setValue(SETTINGS_RECENTS, list(recent)[:MAX_RECENTS])
