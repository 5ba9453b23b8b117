"""A small file wrapper with open modes, metadata and raw fd I/O."""

from __future__ import annotations

import enum
import os
import stat
import time


class OsFileError(OSError):
    """Raised when a file cannot be opened or is used while closed."""


class FileStatus(enum.Enum):
    CLOSED = 0
    OPEN_READ = 1
    OPEN_WRITE = 2
    OPEN_READWRITE = 3


class SeekFrom(enum.IntEnum):
    BEGIN = os.SEEK_SET
    CUR = os.SEEK_CUR
    END = os.SEEK_END


_BINARY = getattr(os, "O_BINARY", 0)
_SYNC = getattr(os, "O_SYNC", 0)


class OsFile:
    """A regular file opened through a raw descriptor."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = os.fspath(path)
        self._fd: int | None = None
        self.status = FileStatus.CLOSED

    def _open(self, flags: int, status: FileStatus) -> OsFile:
        if self.status is not FileStatus.CLOSED:
            self.close()
        try:
            st = os.stat(self.path)
        except OSError as exc:
            raise OsFileError("File is missing.") from exc
        if stat.S_ISDIR(st.st_mode):
            raise OsFileError("Cannot open a directory.")
        if not stat.S_ISREG(st.st_mode):
            raise OsFileError("File is missing.")
        try:
            self._fd = os.open(self.path, flags | _BINARY)
        except OSError as exc:
            raise OsFileError("Cannot open this file.") from exc
        self.status = status
        return self

    def open_read(self) -> OsFile:
        """Open the file for reading."""
        return self._open(os.O_RDONLY, FileStatus.OPEN_READ)

    def open_read_scan(self) -> OsFile:
        """Open the file for sequential reading."""
        return self.open_read()

    def open_write(self) -> OsFile:
        """Open the existing file for synchronous writing."""
        return self._open(os.O_RDWR | os.O_CREAT | _SYNC, FileStatus.OPEN_WRITE)

    def open_read_write(self) -> OsFile:
        """Open the existing file for reading and synchronous writing."""
        return self._open(os.O_RDWR | os.O_CREAT | _SYNC, FileStatus.OPEN_READWRITE)

    def length(self) -> int:
        """Return the file size in bytes, or 0 when it cannot be read."""
        try:
            return os.stat(self.path).st_size
        except OSError:
            return 0

    def modified_time(self) -> float | None:
        """Return the modification time as a POSIX timestamp, or None."""
        try:
            return os.stat(self.path).st_mtime
        except OSError:
            return None

    def modified_time_format(self) -> str:
        """Return the local modification time as "YYYY-MM-DD HH:MM", or ""."""
        mtime = self.modified_time()
        if mtime is None:
            return ""
        return time.strftime("%Y-%m-%d %H:%M", time.localtime(int(mtime)))

    def _require_fd(self) -> int:
        if self._fd is None or self.status is FileStatus.CLOSED:
            raise OsFileError("File is not open.")
        return self._fd

    def seek(self, offset: int, whence: SeekFrom = SeekFrom.BEGIN) -> int:
        """Move the file position and return the new absolute position."""
        return os.lseek(self._require_fd(), offset, SeekFrom(whence))

    def read(self, size: int) -> bytes:
        """Read up to ``size`` bytes from the current position."""
        return os.read(self._require_fd(), size)

    def write(self, data: bytes) -> int:
        """Write ``data`` and return the number of bytes written."""
        return os.write(self._require_fd(), data)

    def close(self) -> None:
        """Close the file; closing a closed file does nothing."""
        if self.status is not FileStatus.CLOSED and self._fd is not None:
            os.close(self._fd)
        self._fd = None
        self.status = FileStatus.CLOSED

    def __enter__(self) -> OsFile:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def __del__(self) -> None:
        try:
            self.close()
        except Exception:
            pass