from __future__ import annotations

from enum import Enum, auto
from pathlib import Path


class ProfileEditorError(Exception):
    """Base class for everything the profile editor raises on purpose."""


class ProfileIOError(ProfileEditorError):
    """Reading or writing a profile file failed. Carries the underlying message."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(message)
        self.path = path
        self.message = message


class NoPathBoundError(ProfileEditorError):
    """Plain save was requested for a document that was never loaded or saved."""

    def __init__(self) -> None:
        super().__init__("No file is associated with this profile")


class ValidationKind(Enum):
    EMPTY = auto()
    INVALID_STRUCTURE = auto()
    MISSING_MODIFICATIONS = auto()
    UNBALANCED_BRACES = auto()
    UNBALANCED_BRACKETS = auto()


class ProfileValidationError(ProfileEditorError):
    kind: ValidationKind
    default_message = "Invalid profile"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self)


class EmptyDocumentError(ProfileValidationError):
    kind = ValidationKind.EMPTY
    default_message = "No content to validate"


class InvalidStructureError(ProfileValidationError):
    kind = ValidationKind.INVALID_STRUCTURE
    default_message = (
        "Invalid profile structure. Must contain either _meta/_input sections "
        "or legacy profile fields"
    )


class MissingModificationsError(ProfileValidationError):
    kind = ValidationKind.MISSING_MODIFICATIONS
    default_message = "Missing required 'modifications' array"


class UnbalancedBracesError(ProfileValidationError):
    kind = ValidationKind.UNBALANCED_BRACES
    default_message = "Mismatched braces { }"


class UnbalancedBracketsError(ProfileValidationError):
    kind = ValidationKind.UNBALANCED_BRACKETS
    default_message = "Mismatched brackets [ ]"
