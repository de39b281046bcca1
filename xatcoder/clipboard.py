"""Clipboard writers."""

from __future__ import annotations

from abc import ABC, abstractmethod

import pyperclip

from .errors import ClipboardError


class ClipboardWriter(ABC):
    """Contract for writing text to a clipboard."""

    @abstractmethod
    def set_text(self, content: str) -> None:
        """Replace the clipboard contents with ``content``.

        Raises:
            ClipboardError: If the clipboard is unavailable or the write fails.
        """


class PyperclipClipboard(ClipboardWriter):
    """System clipboard through pyperclip (pbcopy, xclip, wl-copy, win32)."""

    def set_text(self, content: str) -> None:
        try:
            pyperclip.copy(content)
        except pyperclip.PyperclipException as exc:
            raise ClipboardError(f"Failed to copy content to clipboard: {exc}") from exc
