from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol, runtime_checkable

from modprofile.domain.errors import (
    EmptyDocumentError,
    NoPathBoundError,
    ProfileIOError,
    ProfileValidationError,
)
from modprofile.domain.interfaces import ISettingsService
from modprofile.domain.models import DiscardChoice, DiscardDecision, Severity
from modprofile.services.profile_controller import ProfileDocumentController
from modprofile.services.ui.ports.dialogs import IFileDialogService
from modprofile.services.ui.ports.messages import IMessageService
from modprofile.utils.constants import JSON_FILTER, MAX_RECENTS

_LOG = logging.getLogger(__name__)


@runtime_checkable
class IProfileEditorView(Protocol):
    """Passive view surface (implemented by the Qt ProfileEditorDialog)."""

    def get_editor_text(self) -> str: ...
    def set_editor_text(self, text: str) -> None: ...
    def set_title(self, title: str) -> None: ...
    def show_status(self, text: str, severity: Severity) -> None: ...
    def set_recents(self, items: list[str]) -> None: ...


class ProfileEditorPresenter:
    """
    Drives the profile document controller from user actions.

    Owns every interaction with prompts and pickers: the unsaved-changes question,
    resolving a destination when a plain save has no bound file, and error boxes.
    The view only forwards clicks and edits and renders title/status.
    """

    def __init__(
        self,
        view: IProfileEditorView,
        controller: ProfileDocumentController,
        messages: IMessageService,
        dialogs: IFileDialogService,
        settings: ISettingsService,
    ) -> None:
        self.view = view
        self.controller = controller
        self.messages = messages
        self.dialogs = dialogs
        self.settings = settings
        self.recents: list[str] = settings.get_recent()

    # ---------- rendering ----------

    def refresh(self) -> None:
        self.view.set_title(self.controller.title)
        status = self.controller.status
        self.view.show_status(status.message, status.severity)

    def _reload_editor(self) -> None:
        self.view.set_editor_text(self.controller.text)
        self.refresh()

    # ---------- edits ----------

    def on_text_edited(self) -> None:
        if self.controller.edit(self.view.get_editor_text()):
            self.view.set_title(self.controller.title)

    # ---------- actions ----------

    def new_profile(self) -> bool:
        created = self.controller.request_new(self.confirm_discard)
        if created:
            self._reload_editor()
        else:
            self.refresh()
        return created

    def open_profile(self) -> bool:
        if self.confirm_discard() is not DiscardDecision.PROCEED:
            self.refresh()
            return False
        path = self.dialogs.get_open_file(
            self.view, "Load Profile", self.settings.get_last_directory(), JSON_FILTER
        )
        if path is None:
            self.refresh()
            return False
        return self._load(path)

    def open_path(self, path: Path) -> bool:
        if self.confirm_discard() is not DiscardDecision.PROCEED:
            self.refresh()
            return False
        return self._load(path)

    def _load(self, path: Path) -> bool:
        try:
            self.controller.load(path)
        except ProfileIOError as e:
            self.refresh()
            self.messages.error(self.view, "Load Error", f"Error loading profile:\n{e.message}")
            self._forget_recent(path)
            return False
        self._remember(path)
        self._reload_editor()
        return True

    def save_profile(self) -> bool:
        try:
            self.controller.save()
        except NoPathBoundError:
            return self.save_profile_as()
        except ProfileIOError as e:
            self._report_save_error(e)
            return False
        self.refresh()
        return True

    def save_profile_as(self) -> bool:
        target = self._pick_save_path()
        if target is None:
            return False
        try:
            saved = self.controller.save_as(target)
        except ProfileIOError as e:
            self._report_save_error(e)
            return False
        self._remember(saved)
        self.refresh()
        return True

    def validate_profile(self) -> bool:
        try:
            self.controller.validate()
        except EmptyDocumentError:
            self.refresh()
            return False
        except ProfileValidationError as e:
            self.refresh()
            self.messages.error(self.view, "Validation Error", f"JSON Validation Error:\n{e}")
            return False
        self.refresh()
        return True

    def request_close(self) -> bool:
        """True when the editor may close."""
        proceed = self.confirm_discard() is DiscardDecision.PROCEED
        self.refresh()
        return proceed

    # ---------- unsaved-changes gate ----------

    def confirm_discard(self) -> DiscardDecision:
        was_modified = self.controller.is_modified
        decision = self.controller.confirm_discard(
            self._ask_save_discard,
            pick_save_path=self._pick_save_path,
            on_error=self._report_save_error,
        )
        saved = was_modified and not self.controller.is_modified
        if saved and self.controller.path is not None:
            self._remember(self.controller.path)
        return decision

    def _ask_save_discard(self) -> DiscardChoice:
        return self.messages.ask_save_discard(
            self.view,
            "Unsaved Changes",
            "You have unsaved changes. Do you want to save before closing?",
        )

    def _pick_save_path(self) -> Path | None:
        start = str(self.controller.path) if self.controller.path else self.settings.get_last_directory()
        return self.dialogs.get_save_file(self.view, "Save Profile As", start, JSON_FILTER)

    def _report_save_error(self, e: ProfileIOError) -> None:
        self.refresh()
        self.messages.error(self.view, "Save Error", f"Error saving profile:\n{e.message}")

    # ---------- recents / last directory ----------

    def _remember(self, path: Path) -> None:
        self.settings.set_last_directory(str(path.parent))
        s = str(path)
        if s in self.recents:
            self.recents.remove(s)
        self.recents.insert(0, s)
        self.recents = self.recents[:MAX_RECENTS]
        self.settings.set_recent(self.recents)
        self.view.set_recents(list(self.recents))

    def _forget_recent(self, path: Path) -> None:
        s = str(path)
        if s in self.recents:
            self.recents.remove(s)
            self.settings.set_recent(self.recents)
            self.view.set_recents(list(self.recents))
            _LOG.debug("Dropped %s from recent profiles", s)
