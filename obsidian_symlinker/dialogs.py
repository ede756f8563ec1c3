"""Interface to the native dialogs a front end provides."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Optional, Protocol


class DialogProvider(Protocol):
    """Prompts supplied by the embedding application.

    Cancelling a prompt is not an error: ``choose_directory`` returns ``None``
    and ``choose_files`` returns ``None`` or an empty sequence.
    """

    def choose_directory(self, title: str) -> Optional[str]:
        ...

    def choose_files(self, title: str, extensions: Iterable[str]) -> Optional[Sequence[str]]:
        ...

    def confirm(self, message: str, options: Sequence[str], detail: str = "") -> int:
        """Return the index of the option the user picked."""
        ...
