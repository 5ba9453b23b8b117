"""Hash results and how they are written into a hyperlink text buffer."""

from __future__ import annotations

import enum
import threading
from collections.abc import Iterable
from dataclasses import dataclass

from fhashkit.hyperbuffer import HyperTextBuffer, TokenOffset
from fhashkit.strings import get_string

_NEWLINE = "\r\n"


class ResultState(enum.Enum):
    """How much of a file's result is known."""

    NONE = 0
    PATH = 1
    META = 2
    ALL = 3
    ERROR = 4


@dataclass
class ResultData:
    """Everything gathered about one file."""

    path: str = ""
    state: ResultState = ResultState.NONE
    size: int = 0
    modified_date: str = ""
    version: str = ""
    md5: str = ""
    sha1: str = ""
    sha256: str = ""
    sha512: str = ""
    error: str = ""

    @property
    def hashes(self) -> tuple[str, str, str, str]:
        return (self.md5, self.sha1, self.sha256, self.sha512)


def append_file_name(result: ResultData, buffer: HyperTextBuffer) -> None:
    """Append the file name line."""
    buffer.append_text(get_string("FILENAME_STRING"))
    buffer.append_text(" ")
    buffer.append_text(result.path)
    buffer.append_text(_NEWLINE)


def append_file_meta(result: ResultData, buffer: HyperTextBuffer) -> None:
    """Append the size, modification date and, if known, the version."""
    buffer.append_text(get_string("FILESIZE_STRING"))
    buffer.append_text(" ")
    buffer.append_text(str(result.size))
    buffer.append_text(" ")
    buffer.append_text(get_string("BYTE_STRING"))
    buffer.append_text(_NEWLINE)
    buffer.append_text(get_string("MODIFYTIME_STRING"))
    buffer.append_text(" ")
    buffer.append_text(result.modified_date)
    if result.version:
        buffer.append_text(_NEWLINE)
        buffer.append_text(get_string("VERSION_STRING"))
        buffer.append_text(" ")
        buffer.append_text(result.version)
    buffer.append_text(_NEWLINE)


def append_file_hash(
    result: ResultData, uppercase: bool, buffer: HyperTextBuffer
) -> None:
    """Append the four hash values, each recorded as a link."""
    convert = str.upper if uppercase else str.lower
    labels = ("MD5: ", "\r\nSHA1: ", "\r\nSHA256: ", "\r\nSHA512: ")
    for label, value in zip(labels, result.hashes):
        buffer.append_text(label)
        buffer.append_link(convert(value))
    buffer.append_text(_NEWLINE * 2)


def append_file_error(result: ResultData, buffer: HyperTextBuffer) -> None:
    """Append the error message of a failed file."""
    buffer.append_text(result.error)
    buffer.append_text(_NEWLINE * 2)


def append_result(
    result: ResultData, uppercase: bool, buffer: HyperTextBuffer
) -> None:
    """Append as much of ``result`` as its state allows."""
    state = result.state
    if state is ResultState.NONE:
        return
    append_file_name(result, buffer)
    if state in (ResultState.ALL, ResultState.META):
        append_file_meta(result, buffer)
    if state is ResultState.ALL:
        append_file_hash(result, uppercase, buffer)
    if state is ResultState.ERROR:
        append_file_error(result, buffer)
    if state not in (ResultState.ALL, ResultState.ERROR):
        buffer.append_text(_NEWLINE)


def find_results(
    results: Iterable[ResultData], file_filter: str, hash_value: str
) -> list[ResultData]:
    """Return results whose path contains ``file_filter`` (case-insensitive)
    and one of whose hashes contains ``hash_value`` (case-insensitive)."""
    needle = hash_value.upper()
    path_needle = file_filter.lower()
    return [
        result
        for result in results
        if path_needle in result.path.lower()
        and any(needle in value.upper() for value in result.hashes)
    ]


def append_find_report(
    results: Iterable[ResultData],
    file_filter: str,
    hash_value: str,
    uppercase: bool,
    buffer: HyperTextBuffer,
) -> list[ResultData]:
    """Append a verify report for ``hash_value`` and return the matches."""
    buffer.append_text(get_string("MAINDLG_FIND_IN_RESULT"))
    buffer.append_text(_NEWLINE)
    buffer.append_text(get_string("HASHVALUE_STRING"))
    buffer.append_text(" ")
    buffer.append_text(hash_value)
    buffer.append_text(_NEWLINE * 2)
    buffer.append_text(get_string("MAINDLG_RESULT"))
    buffer.append_text(_NEWLINE * 2)

    matches = find_results(results, file_filter, hash_value)
    for result in matches:
        append_result(result, uppercase, buffer)
    if not matches:
        buffer.append_text(get_string("MAINDLG_NORESULT"))
    return matches


class ResultView:
    """Writes progress of a hash run into a shared text buffer."""

    def __init__(self, buffer: HyperTextBuffer) -> None:
        self.buffer = buffer
        self._lock = threading.RLock()
        self._saved_text = ""
        self._saved_offsets: list[TokenOffset] = []

    def preparing_calc(self) -> None:
        """Remember the current text and show the "preparing" notice."""
        with self._lock:
            self._saved_text = self.buffer.text()
            self._saved_offsets = self.buffer.link_offsets()
            if self._saved_text == get_string("MAINDLG_INITINFO"):
                self._saved_text = ""
                self._saved_offsets = []
                self.buffer.clear()
            self.buffer.append_text(get_string("MAINDLG_WAITING_START"))
            self.buffer.append_text(_NEWLINE)

    def remove_preparing_calc(self) -> None:
        """Restore the text and links saved by :meth:`preparing_calc`."""
        with self._lock:
            self.buffer.clear()
            self.buffer.append_text(self._saved_text)
            self.buffer.set_link_offsets(self._saved_offsets)

    def show_file_name(self, result: ResultData) -> None:
        with self._lock:
            append_file_name(result, self.buffer)

    def show_file_meta(self, result: ResultData) -> None:
        with self._lock:
            append_file_meta(result, self.buffer)

    def show_file_hash(self, result: ResultData, uppercase: bool) -> None:
        with self._lock:
            append_file_hash(result, uppercase, self.buffer)

    def show_file_error(self, result: ResultData) -> None:
        with self._lock:
            append_file_error(result, self.buffer)

    def prog_max(self) -> int:
        """Return the upper bound of the progress scale."""
        return 100