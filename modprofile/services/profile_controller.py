from __future__ import annotations

import getpass
import logging
from datetime import datetime
from pathlib import Path
from typing import Callable

from modprofile.domain.errors import (
    EmptyDocumentError,
    NoPathBoundError,
    ProfileIOError,
    ProfileValidationError,
)
from modprofile.domain.interfaces import IFileService
from modprofile.domain.models import (
    DiscardChoice,
    DiscardDecision,
    ProfileDocument,
    Severity,
    Status,
)
from modprofile.services.profile_template import create_profile_template, ensure_json_suffix
from modprofile.services.profile_validator import validate_profile_text
from modprofile.utils.constants import BASE_TITLE

_LOG = logging.getLogger(__name__)

UNKNOWN_USER = "unknown"


def _login_name() -> str:
    # getuser() raises when neither the environment nor passwd knows the uid.
    try:
        return getpass.getuser()
    except (KeyError, OSError) as e:
        _LOG.debug("Could not resolve login name: %s", e)
        return UNKNOWN_USER


class ProfileDocumentController:
    """
    Owns the profile document (text, bound path, dirty flag) and every operation
    that changes it. Knows nothing about widgets: prompts arrive as callables and
    results leave as return values, exceptions and ``status``.
    """

    def __init__(
        self,
        files: IFileService,
        *,
        author: str | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.files = files
        self._author = author
        self._clock = clock
        self.document = ProfileDocument(path=None, text="", modified=False)
        self.status = Status("Ready", Severity.READY)

    # ---------- read-only state ----------

    @property
    def text(self) -> str:
        return self.document.text

    @property
    def path(self) -> Path | None:
        return self.document.path

    @property
    def is_modified(self) -> bool:
        return self.document.modified

    @property
    def title(self) -> str:
        title = BASE_TITLE
        if self.document.path is not None:
            title += f" - {self.document.path.name}"
        if self.document.modified:
            title += " *"
        return title

    def set_status(self, message: str, severity: Severity) -> None:
        self.status = Status(message, severity)

    # ---------- editing ----------

    def edit(self, text: str) -> bool:
        """
        On-edit notification. Returns True only on the clean -> dirty transition.
        """
        self.document.text = text
        if self.document.modified:
            return False
        self.document.modified = True
        return True

    def create_template(self, current_user: str | None = None, now: datetime | None = None) -> str:
        if current_user is not None:
            user = current_user
        else:
            user = self._author or _login_name()
        return create_profile_template(user, now or self._clock())

    def request_new(
        self,
        confirm: Callable[[], DiscardDecision],
        current_user: str | None = None,
        now: datetime | None = None,
    ) -> bool:
        if confirm() is not DiscardDecision.PROCEED:
            return False
        self.document = ProfileDocument(
            path=None, text=self.create_template(current_user, now), modified=True
        )
        self.set_status("New profile template created", Severity.SUCCESS)
        _LOG.debug("Created new profile template")
        return True

    # ---------- persistence ----------

    def load(self, path: Path) -> None:
        try:
            text = self.files.read_text(path)
        except (OSError, UnicodeDecodeError) as e:
            _LOG.warning("Failed to load profile %s: %s", path, e)
            self.set_status(f"Error loading profile: {e}", Severity.ERROR)
            raise ProfileIOError(path, str(e)) from e
        self.document = ProfileDocument(path=path, text=text, modified=False)
        self.set_status("Profile loaded successfully", Severity.SUCCESS)
        _LOG.info("Loaded profile %s", path)

    def save(self) -> None:
        if self.document.path is None:
            raise NoPathBoundError()
        self._write(self.document.path)

    def save_as(self, path: Path) -> Path:
        if not path.name:
            message = "Not a file name"
            self.set_status(f"Error saving profile: {message}", Severity.ERROR)
            raise ProfileIOError(path, message)
        target = ensure_json_suffix(path)
        self._write(target)
        self.document.path = target
        return target

    def _write(self, path: Path) -> None:
        try:
            self.files.write_text_atomic(path, self.document.text)
        except OSError as e:
            _LOG.warning("Failed to save profile %s: %s", path, e)
            self.set_status(f"Error saving profile: {e}", Severity.ERROR)
            raise ProfileIOError(path, str(e)) from e
        self.document.modified = False
        self.set_status("Profile saved successfully", Severity.SUCCESS)
        _LOG.info("Saved profile %s", path)

    # ---------- validation ----------

    def validate(self) -> None:
        try:
            validate_profile_text(self.document.text)
        except EmptyDocumentError as e:
            self.set_status(str(e), Severity.WARNING)
            raise
        except ProfileValidationError as e:
            self.set_status(f"JSON validation error: {e}", Severity.ERROR)
            _LOG.debug("Validation failed: %s", e.kind.name)
            raise
        self.set_status("JSON structure is valid", Severity.SUCCESS)

    # ---------- unsaved-changes gate ----------

    def confirm_discard(
        self,
        ask: Callable[[], DiscardChoice],
        pick_save_path: Callable[[], Path | None] | None = None,
        on_error: Callable[[ProfileIOError], None] | None = None,
    ) -> DiscardDecision:
        """
        Gate for destructive actions (new, load, close).

        Clean documents proceed without asking. Otherwise the user may save first
        (proceed only if the save succeeds), discard (proceed, text untouched) or
        cancel (abort).
        """
        if not self.document.modified:
            return DiscardDecision.PROCEED

        choice = ask()
        if choice is DiscardChoice.DISCARD:
            return DiscardDecision.PROCEED
        if choice is not DiscardChoice.SAVE:
            return DiscardDecision.ABORT

        try:
            try:
                self.save()
            except NoPathBoundError:
                target = pick_save_path() if pick_save_path is not None else None
                if target is None:
                    return DiscardDecision.ABORT
                self.save_as(target)
        except ProfileIOError as e:
            if on_error is not None:
                on_error(e)
            return DiscardDecision.ABORT
        return DiscardDecision.PROCEED
