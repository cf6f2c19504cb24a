from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from modprofile.domain.models import DiscardChoice


@runtime_checkable
class IMessageService(Protocol):
    """
    Abstract UI port for showing messages. Decouples business logic from Qt widgets.
    """

    def error(self, parent: Any | None, title: str, text: str) -> None: ...

    def ask_save_discard(self, parent: Any | None, title: str, text: str) -> DiscardChoice:
        """
        Three-way unsaved-changes question: save first, discard, or cancel.
        Closing the prompt counts as cancel.
        """
        ...
