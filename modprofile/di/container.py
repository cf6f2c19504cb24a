from __future__ import annotations

from pathlib import Path

from PyQt6.QtCore import QSettings

from modprofile.domain.interfaces import IFileService, ISettingsService
from modprofile.services.config.app_config import AppConfig, build_app_config
from modprofile.services.file_service import FileService
from modprofile.services.profile_controller import ProfileDocumentController
from modprofile.services.settings_service import SettingsService
from modprofile.services.ui.adapters import QtFileDialogService, QtMessageService
from modprofile.services.ui.ports.dialogs import IFileDialogService
from modprofile.services.ui.ports.messages import IMessageService
from modprofile.services.ui.presenters import ProfileEditorPresenter
from modprofile.services.ui.profile_editor_dialog import ProfileEditorDialog
from modprofile.utils.constants import APP_NAME, APP_ORG


class Container:
    """
    Lightweight DI container:
      - Wires default services if not provided
      - Builds the controller / presenter / dialog triple for the profile editor
    """

    def __init__(
        self,
        files: IFileService | None = None,
        settings: ISettingsService | None = None,
        qsettings: QSettings | None = None,
        dialogs: IFileDialogService | None = None,
        messages: IMessageService | None = None,
        config: AppConfig | None = None,
    ) -> None:
        self.config: AppConfig = config or build_app_config()
        self.file_service: IFileService = files or FileService()
        self.settings_service: ISettingsService = settings or SettingsService(
            qsettings or QSettings()
        )
        self.dialogs: IFileDialogService = dialogs or QtFileDialogService()
        self.messages: IMessageService = messages or QtMessageService()

    @staticmethod
    def default(
        qsettings: QSettings | None = None,
        *,
        config: AppConfig | None = None,
        organization: str = APP_ORG,
        application: str = APP_NAME,
    ) -> Container:
        if qsettings is None:
            qsettings = QSettings(organization, application)
        return Container(qsettings=qsettings, config=config)

    # ---------- factories ----------

    def build_controller(self) -> ProfileDocumentController:
        return ProfileDocumentController(
            self.file_service, author=self.config.profile_author()
        )

    def build_profile_editor(
        self,
        *,
        start_path: Path | None = None,
        parent=None,
    ) -> ProfileEditorDialog:
        """Create the editor dialog with its presenter attached, optionally loading a profile."""
        dialog = ProfileEditorDialog(
            self.settings_service,
            tab_width=self.config.tab_width(),
            font_size=self.config.font_size(),
            parent=parent,
        )
        presenter = ProfileEditorPresenter(
            view=dialog,
            controller=self.build_controller(),
            messages=self.messages,
            dialogs=self.dialogs,
            settings=self.settings_service,
        )
        dialog.attach_presenter(presenter)
        if start_path is not None:
            presenter.open_path(start_path)
        return dialog
