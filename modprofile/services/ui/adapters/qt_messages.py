from __future__ import annotations

from typing import Any

from PyQt6.QtWidgets import QMessageBox

from modprofile.domain.models import DiscardChoice
from modprofile.services.ui.ports.messages import IMessageService

_Btn = QMessageBox.StandardButton


class QtMessageService(IMessageService):
    """Qt-backed implementation for message dialogs."""

    def error(self, parent: Any | None, title: str, text: str) -> None:
        QMessageBox.critical(parent, title, text)

    def ask_save_discard(self, parent: Any | None, title: str, text: str) -> DiscardChoice:
        resp = QMessageBox.question(
            parent,
            title,
            text,
            _Btn.Yes | _Btn.No | _Btn.Cancel,
            _Btn.Yes,
        )
        if resp == _Btn.Yes:
            return DiscardChoice.SAVE
        if resp == _Btn.No:
            return DiscardChoice.DISCARD
        return DiscardChoice.CANCEL
