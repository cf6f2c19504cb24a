from __future__ import annotations

from pathlib import Path

from PyQt6.QtCore import QIODevice, QSaveFile

from modprofile.domain.interfaces import IFileService


class FileService(IFileService):
    """UTF-8 reads and atomic whole-file writes for profile documents."""

    def read_text(self, path: Path) -> str:
        # newline="" keeps CRLF files byte-identical across a load/save cycle
        with path.open("r", encoding="utf-8", newline="") as fh:
            return fh.read()

    def write_text_atomic(self, path: Path, text: str) -> None:
        sf = QSaveFile(str(path))
        if not sf.open(QIODevice.OpenModeFlag.WriteOnly):
            raise OSError(f"Cannot open for write: {path}")
        sf.write(text.encode("utf-8"))
        if not sf.commit():
            raise OSError(f"Commit failed for: {path}")
