from __future__ import annotations

from pathlib import Path

from PyQt6.QtCore import QByteArray
from PyQt6.QtGui import QAction, QFont, QFontDatabase
from PyQt6.QtWidgets import (
    QDialog,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QMenu,
    QPlainTextEdit,
    QPushButton,
    QToolButton,
    QVBoxLayout,
    QWidget,
)

from modprofile.domain.interfaces import ISettingsService
from modprofile.domain.models import Severity
from modprofile.utils.constants import BASE_TITLE, DEFAULT_FONT_SIZE, DEFAULT_TAB_WIDTH

SEVERITY_COLORS = {
    Severity.READY: "#1f5fd1",
    Severity.SUCCESS: "#1a8f2e",
    Severity.WARNING: "#d98200",
    Severity.ERROR: "#c62828",
}


class ProfileEditorDialog(QDialog):
    """
    Modal JSON profile editor. Thin view: every button and edit is forwarded to
    the attached ProfileEditorPresenter, which pushes title and status back.
    """

    def __init__(
        self,
        settings: ISettingsService,
        *,
        tab_width: int = DEFAULT_TAB_WIDTH,
        font_size: int = DEFAULT_FONT_SIZE,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle(BASE_TITLE)
        self.setModal(True)
        self.resize(900, 650)

        self.settings = settings
        self.presenter = None

        # Widgets
        self.editor = QPlainTextEdit(self)
        font = QFontDatabase.systemFont(QFontDatabase.SystemFont.FixedFont)
        font.setStyleHint(QFont.StyleHint.Monospace)
        font.setPointSize(font_size)
        self.editor.setFont(font)
        self.editor.setTabStopDistance(
            tab_width * self.editor.fontMetrics().horizontalAdvance(" ")
        )
        self.editor.setStyleSheet("QPlainTextEdit { background: #f8f8f8; color: black; }")

        self.new_btn = QPushButton("New Profile Template")
        self.load_btn = QPushButton("Load Profile")
        self.save_btn = QPushButton("Save Profile")
        self.save_as_btn = QPushButton("Save As…")
        self.validate_btn = QPushButton("Validate JSON")

        self.recent_menu = QMenu("Recent Profiles", self)
        self.recent_btn = QToolButton(self)
        self.recent_btn.setText("Recent")
        self.recent_btn.setPopupMode(QToolButton.ToolButtonPopupMode.InstantPopup)
        self.recent_btn.setMenu(self.recent_menu)

        self.status_label = QLabel("Ready")

        # Layouts
        buttons = QHBoxLayout()
        for b in (self.new_btn, self.load_btn, self.save_btn, self.save_as_btn, self.validate_btn):
            buttons.addWidget(b)
        buttons.addWidget(self.recent_btn)
        buttons.addStretch(1)

        content = QGroupBox("JSON Profile Content")
        content_layout = QVBoxLayout(content)
        content_layout.addWidget(self.editor)

        status_row = QHBoxLayout()
        status_row.addWidget(QLabel("Status: "))
        status_row.addWidget(self.status_label)
        status_row.addStretch(1)

        root = QVBoxLayout(self)
        root.addLayout(buttons)
        root.addWidget(content, 1)
        root.addLayout(status_row)

        self.show_status("Ready", Severity.READY)
        self.set_recents([])

        geo = self.settings.get_geometry()
        if isinstance(geo, (bytes, bytearray)):
            self.restoreGeometry(QByteArray(geo))

    # ---------- wiring ----------

    def attach_presenter(self, presenter) -> None:
        self.presenter = presenter
        self.editor.textChanged.connect(presenter.on_text_edited)
        self.new_btn.clicked.connect(presenter.new_profile)
        self.load_btn.clicked.connect(presenter.open_profile)
        self.save_btn.clicked.connect(presenter.save_profile)
        self.save_as_btn.clicked.connect(presenter.save_profile_as)
        self.validate_btn.clicked.connect(presenter.validate_profile)
        self.set_recents(list(presenter.recents))
        presenter.refresh()

    # ---------- IProfileEditorView ----------

    def get_editor_text(self) -> str:
        return self.editor.toPlainText()

    def set_editor_text(self, text: str) -> None:
        # Programmatic replacement is not a user edit.
        self.editor.blockSignals(True)
        try:
            self.editor.setPlainText(text)
        finally:
            self.editor.blockSignals(False)

    def set_title(self, title: str) -> None:
        self.setWindowTitle(title)

    def show_status(self, text: str, severity: Severity) -> None:
        self.status_label.setText(text)
        self.status_label.setStyleSheet(f"color: {SEVERITY_COLORS[severity]};")

    def set_recents(self, items: list[str]) -> None:
        self.recent_menu.clear()
        if not items:
            na = QAction("(empty)", self)
            na.setEnabled(False)
            self.recent_menu.addAction(na)
            return
        for p in items:
            self.recent_menu.addAction(
                QAction(p, self, triggered=lambda chk=False, x=p: self._open_recent(x))
            )

    # ---------- helpers ----------

    def _open_recent(self, path_str: str) -> None:
        if self.presenter is not None:
            self.presenter.open_path(Path(path_str))

    # ---------- close ----------

    def reject(self) -> None:
        # QDialog routes both Esc and the window close button through reject().
        if self.presenter is not None and not self.presenter.request_close():
            return
        self.settings.set_geometry(bytes(self.saveGeometry()))
        super().reject()
