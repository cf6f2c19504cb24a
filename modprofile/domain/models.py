from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path


@dataclass
class ProfileDocument:
    path: Path | None
    text: str
    modified: bool = False


class Severity(Enum):
    """Semantic color of the status line."""

    READY = auto()
    SUCCESS = auto()
    WARNING = auto()
    ERROR = auto()


@dataclass(frozen=True)
class Status:
    message: str
    severity: Severity = Severity.READY


class DiscardChoice(Enum):
    """Answer to the unsaved-changes prompt."""

    SAVE = auto()
    DISCARD = auto()
    CANCEL = auto()


class DiscardDecision(Enum):
    PROCEED = auto()
    ABORT = auto()
