"""A text buffer that records the spans of appended hyperlinks."""

from __future__ import annotations

import threading
from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class TokenOffset:
    """Start offset and length of a token inside a text buffer."""

    start: int
    length: int

    @property
    def end(self) -> int:
        return self.start + self.length


class HyperTextBuffer:
    """Accumulates text and remembers which spans are links."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._parts: list[str] = []
        self._size = 0
        self._offsets: list[TokenOffset] = []

    def clear(self) -> None:
        """Drop all text and link offsets."""
        with self._lock:
            self._parts.clear()
            self._size = 0
            self._offsets.clear()

    def text(self) -> str:
        """Return the whole buffered text."""
        with self._lock:
            joined = "".join(self._parts)
            self._parts = [joined] if joined else []
            return joined

    def append_text(self, text: str) -> None:
        """Append plain text."""
        with self._lock:
            self._append(text)

    def _append(self, text: str) -> int:
        start = self._size
        if text:
            self._parts.append(text)
            self._size += len(text)
        return start

    def append_link(self, text: str) -> None:
        """Append text and record it as a link."""
        with self._lock:
            start = self._append(text)
            self._offsets.append(TokenOffset(start, len(text)))

    def link_offsets(self) -> list[TokenOffset]:
        """Return a copy of the recorded link offsets."""
        with self._lock:
            return list(self._offsets)

    def set_link_offsets(self, offsets: Iterable[TokenOffset]) -> None:
        """Replace the recorded link offsets."""
        new_offsets = list(offsets)
        with self._lock:
            self._offsets = new_offsets

    def links(self) -> list[str]:
        """Return the text of every recorded link, in order."""
        text = self.text()
        with self._lock:
            return [text[off.start : off.end] for off in self._offsets]