"""Domain layer: interfaces, errors and simple models (dataclasses)."""

from .errors import (
    NoPathBoundError,
    ProfileEditorError,
    ProfileIOError,
    ProfileValidationError,
    ValidationKind,
)
from .interfaces import IAppConfig, IConfigService, IFileService, ISettingsService
from .models import DiscardChoice, DiscardDecision, ProfileDocument, Severity, Status

__all__ = [
    "IFileService",
    "ISettingsService",
    "IConfigService",
    "IAppConfig",
    "ProfileDocument",
    "Severity",
    "Status",
    "DiscardChoice",
    "DiscardDecision",
    "ProfileEditorError",
    "ProfileIOError",
    "NoPathBoundError",
    "ProfileValidationError",
    "ValidationKind",
]
