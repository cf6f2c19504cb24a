from __future__ import annotations

import os
from datetime import datetime
from pathlib import Path

import pytest

# Headless CI has no display server.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtCore import QSettings  # noqa: E402
from PyQt6.QtWidgets import QApplication  # noqa: E402

from modprofile.domain.models import DiscardChoice  # noqa: E402
from modprofile.services.file_service import FileService  # noqa: E402
from modprofile.services.profile_controller import ProfileDocumentController  # noqa: E402
from modprofile.services.settings_service import SettingsService  # noqa: E402

FIXED_NOW = datetime(2024, 5, 17, 13, 45, 30)


# --- Fallback QApplication fixture (works with or without pytest-qt) ---
@pytest.fixture(scope="session")
def qapp():
    """Provide a QApplication for tests that need Qt.
    Creates one if not present; reuses existing otherwise.
    """
    app = QApplication.instance()
    created = False
    if app is None:
        app = QApplication([])
        created = True
    try:
        yield app
    finally:
        if created:
            app.quit()


# --- Fakes shared by controller / presenter / dialog tests ---


class MemoryFileService:
    """In-memory IFileService; set `fail_reads` / `fail_writes` to simulate IO errors."""

    def __init__(self) -> None:
        self.files: dict[Path, str] = {}
        self.fail_reads = False
        self.fail_writes = False
        self.writes: list[Path] = []

    def read_text(self, path: Path) -> str:
        if self.fail_reads:
            raise PermissionError(f"Permission denied: '{path}'")
        try:
            return self.files[path]
        except KeyError:
            raise FileNotFoundError(f"No such file or directory: '{path}'") from None

    def write_text_atomic(self, path: Path, text: str) -> None:
        if self.fail_writes:
            raise OSError("disk full")
        self.files[path] = text
        self.writes.append(path)


class FakeMessages:
    def __init__(self, answer: DiscardChoice = DiscardChoice.CANCEL) -> None:
        self.answer = answer
        self.asked = 0
        self.errors: list[tuple[str, str]] = []

    def error(self, parent, title: str, text: str) -> None:
        self.errors.append((title, text))

    def ask_save_discard(self, parent, title: str, text: str) -> DiscardChoice:
        self.asked += 1
        return self.answer


class FakeDialogs:
    def __init__(self) -> None:
        self.open_result: Path | None = None
        self.save_result: Path | None = None
        self.open_calls: list[str | None] = []
        self.save_calls: list[str | None] = []

    def get_open_file(self, parent, caption, start_dir, filter_str="") -> Path | None:
        self.open_calls.append(start_dir)
        return self.open_result

    def get_save_file(self, parent, caption, start_path, filter_str="") -> Path | None:
        self.save_calls.append(start_path)
        return self.save_result


# --- Other common fixtures ---


@pytest.fixture()
def tmp_settings_path(tmp_path: Path) -> Path:
    return tmp_path / "settings.ini"


@pytest.fixture()
def qsettings(tmp_settings_path: Path) -> QSettings:
    # Use an INI file so we don't touch system registry / platform stores
    s = QSettings(str(tmp_settings_path), QSettings.Format.IniFormat)
    s.clear()
    return s


@pytest.fixture()
def settings_service(qsettings: QSettings) -> SettingsService:
    return SettingsService(qsettings)


@pytest.fixture()
def file_service() -> FileService:
    return FileService()


@pytest.fixture()
def memory_files() -> MemoryFileService:
    return MemoryFileService()


@pytest.fixture()
def controller(memory_files: MemoryFileService) -> ProfileDocumentController:
    return ProfileDocumentController(memory_files, author="tester", clock=lambda: FIXED_NOW)


@pytest.fixture()
def messages() -> FakeMessages:
    return FakeMessages()


@pytest.fixture()
def dialogs() -> FakeDialogs:
    return FakeDialogs()
