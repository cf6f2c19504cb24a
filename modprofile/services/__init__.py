"""Concrete service implementations and the profile document controller."""

from .file_service import FileService
from .profile_controller import ProfileDocumentController
from .settings_service import SettingsService

__all__ = ["FileService", "ProfileDocumentController", "SettingsService"]
