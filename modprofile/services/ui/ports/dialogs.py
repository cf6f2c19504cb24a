from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol, runtime_checkable

from modprofile.utils.constants import JSON_FILTER


@runtime_checkable
class IFileDialogService(Protocol):
    """File pickers for profile documents, filtered to *.json by default."""

    def get_open_file(
        self,
        parent: Any | None,
        caption: str,
        start_dir: str | None,
        filter_str: str = JSON_FILTER,
    ) -> Path | None:
        """Profile to load, or None if the picker was dismissed."""
        ...

    def get_save_file(
        self,
        parent: Any | None,
        caption: str,
        start_path: str | None,
        filter_str: str = JSON_FILTER,
    ) -> Path | None:
        """Destination chosen by the user (suffix not yet normalized), or None."""
        ...
