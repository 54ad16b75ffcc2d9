"""Text buffers with a caret — the editing surface insertions act on."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class TextBuffer(Protocol):
    """Minimal document model: text, a caret, and string insertion."""

    @property
    def text(self) -> str: ...

    @property
    def caret(self) -> int: ...

    def insert_string(self, offset: int, text: str) -> None: ...

    def move_caret(self, offset: int) -> None: ...


class StringBuffer:
    """In-memory TextBuffer."""

    def __init__(self, text: str = "", caret: int = 0) -> None:
        self._text = text
        self._caret = 0
        self.move_caret(caret)

    def __repr__(self) -> str:
        return f"StringBuffer(len={len(self._text)}, caret={self._caret})"

    @property
    def text(self) -> str:
        return self._text

    @property
    def caret(self) -> int:
        return self._caret

    def insert_string(self, offset: int, text: str) -> None:
        if offset < 0 or offset > len(self._text):
            msg = f"insert offset {offset} outside buffer of length {len(self._text)}"
            raise ValueError(msg)
        self._text = self._text[:offset] + text + self._text[offset:]

    def move_caret(self, offset: int) -> None:
        """Move the caret, clamped to the buffer bounds."""
        self._caret = max(0, min(offset, len(self._text)))


def read_buffer(path: Path, caret: int = 0) -> StringBuffer:
    """Load a UTF-8 file into a StringBuffer."""
    return StringBuffer(path.read_text(encoding="utf-8"), caret=caret)


def write_buffer(path: Path, buffer: TextBuffer) -> None:
    """Write a buffer's text back to *path*."""
    path.write_text(buffer.text, encoding="utf-8")
    logger.debug("Wrote %d chars to %s", len(buffer.text), path)
