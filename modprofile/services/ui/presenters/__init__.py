from __future__ import annotations

from .profile_presenter import IProfileEditorView, ProfileEditorPresenter

__all__ = ["IProfileEditorView", "ProfileEditorPresenter"]
