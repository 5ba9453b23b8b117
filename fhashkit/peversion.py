"""Read the fixed file version from a PE image's version resource."""

from __future__ import annotations

import os
from typing import BinaryIO

_RSRC_NAME = b".rsrc"
_VS_VERSION_INFO_NAME = "VS_VERSION_INFO"
_RT_VERSION = 16
_MASK32 = 0xFFFFFFFF


def _pad(value: int) -> int:
    return (value + 3) & 0xFFFFFFFC


class FileVersionHelper:
    """Walks the headers of a seekable binary stream holding a PE image."""

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream

    def _read(self, offset: int, size: int) -> bytes:
        self._stream.seek(offset)
        data = self._stream.read(size)
        return data.ljust(size, b"\0")

    def _word(self, offset: int) -> int:
        return int.from_bytes(self._read(offset, 2), "little")

    def _dword(self, offset: int) -> int:
        return int.from_bytes(self._read(offset, 4), "little")

    def _find_version(self) -> int | None:
        if self._word(0) != 0x5A4D:  # "MZ"
            return None
        pe = self._dword(0x3C)
        if self._word(pe) != 0x4550:  # "PE"
            return None
        coff = pe + 4
        num_sections = self._word(coff + 2)
        opt_header_size = self._word(coff + 16)
        if num_sections == 0 or opt_header_size == 0:
            return None
        opt_header = coff + 20
        magic = self._word(opt_header)
        if magic not in (0x10B, 0x20B):
            return None

        data_dir = opt_header + (96 if magic == 0x10B else 112)
        va_res = self._dword(data_dir + 8 * 2)

        sec_table = opt_header + opt_header_size
        for index in range(num_sections):
            sec = sec_table + 40 * index
            name = self._read(sec, 8).split(b"\0", 1)[0]
            if name != _RSRC_NAME:
                continue
            va_sec = self._dword(sec + 12)
            raw = self._dword(sec + 20)
            res_sec = raw + ((va_res - va_sec) & _MASK32)
            entries = self._word(res_sec + 12) + self._word(res_sec + 14)
            for entry in range(entries):
                res = res_sec + 16 + 8 * entry
                if self._dword(res) != _RT_VERSION:
                    continue
                return self._follow_version_entry(res, res_sec, raw, va_sec)
            return None
        return None

    def _follow_version_entry(
        self, res: int, res_sec: int, raw: int, va_sec: int
    ) -> int | None:
        offs = self._dword(res + 4)
        for _ in range(2):
            if offs & 0x80000000 == 0:
                return None
            ver_dir = res_sec + (offs & 0x7FFFFFFF)
            if self._word(ver_dir + 12) == 0 and self._word(ver_dir + 14) == 0:
                return None
            offs = self._dword(ver_dir + 16 + 4)
        if offs & 0x80000000 != 0:
            return None
        ver_va = self._dword(res_sec + offs)
        return raw + ((ver_va - va_sec) & _MASK32)

    def _block_header(self, version: int, offs: int) -> tuple[int, int, int | None]:
        offs = _pad(offs)
        length = self._word(version + offs)
        value_length = self._word(version + offs + 2)
        block_type = self._word(version + offs + 4)
        offs += 6
        chars = []
        for _ in range(200):
            c = self._word(version + offs)
            offs += 2
            if not c:
                break
            chars.append(chr(c & 0xFF))
        offs = _pad(offs)
        fixed = None
        if block_type == 0:
            if "".join(chars) == _VS_VERSION_INFO_NAME:
                fixed = version + offs
            offs += value_length
        return offs, length, fixed

    def _find_fixed_file_info(self, version: int) -> int | None:
        fixed: int | None = None
        lengths: list[int] = []
        offs = 0
        enter = True
        while True:
            if enter:
                offs, length, found = self._block_header(version, offs)
                if found is not None:
                    fixed = found
                lengths.append(length)
            if offs < lengths[-1]:
                enter = True
                continue
            lengths.pop()
            offs = _pad(offs)
            if not lengths:
                return fixed
            enter = False

    def find(self) -> str:
        """Return the file version as "a.b.c.d", or "" when there is none."""
        version = self._find_version()
        if not version:
            return ""
        fixed = self._find_fixed_file_info(version)
        if fixed is None:
            return ""
        version_ms = self._dword(fixed + 8)
        version_ls = self._dword(fixed + 12)
        return (
            f"{version_ms >> 16}.{version_ms & 0xFFFF}."
            f"{version_ls >> 16}.{version_ls & 0xFFFF}"
        )


def file_version(path: str | os.PathLike[str]) -> str:
    """Return the fixed file version of the PE image at ``path``, or ""."""
    with open(path, "rb") as stream:
        return FileVersionHelper(stream).find()