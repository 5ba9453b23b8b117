"""Command-line front end: hash files and report or verify their digests."""

from __future__ import annotations

import argparse
import hashlib
import os
import sys
import threading
import time
from collections.abc import Iterable, Iterator, Sequence

from fhashkit.hyperbuffer import HyperTextBuffer
from fhashkit.osfile import OsFile, OsFileError
from fhashkit.peversion import file_version
from fhashkit.results import (
    ResultData,
    ResultState,
    append_find_report,
    append_result,
)
from fhashkit.strings import get_string
from fhashkit.uistrings import register_default_strings

_CHUNK_SIZE = 1024 * 1024


def parse_files_cmdline(cmdline: str) -> list[str]:
    """Split a command line such as ``a "b c" d`` into file names.

    Double-quoted names may hold spaces; an unterminated quote runs to the
    end of the line.  Names that are empty or only whitespace are dropped.
    """
    tokens: list[str] = []
    length = len(cmdline)
    i = 0
    while i < length:
        if cmdline[i] == '"':
            end = cmdline.find('"', i + 1)
            if end == -1:
                end = length
            tokens.append(cmdline[i + 1 : end])
            i = end + 2
        else:
            end = cmdline.find(" ", i)
            if end == -1:
                end = length
            tokens.append(cmdline[i:end])
            i = end + 1
    return [token for token in tokens if token.strip()]


def format_speed(total_size: int, seconds: float) -> str:
    """Return the throughput as e.g. "12.34 MB/s", or "" for very short runs."""
    if seconds <= 0.1:
        return ""
    speed = total_size / seconds
    measure = "B/s"
    if speed / 1024 > 1:
        speed /= 1024
        measure = "KB/s"
        if speed / 1024 > 1:
            speed /= 1024
            measure = "MB/s"
    return f"{speed:4.2f} {measure}"


def google_search_url(hash_value: str) -> str:
    """Return the web search address for ``hash_value``."""
    return f"https://www.google.com/search?q={hash_value}&ie=utf-8&oe=utf-8"


def virustotal_search_url(hash_value: str) -> str:
    """Return the malware database search address for ``hash_value``."""
    return f"https://www.virustotal.com/#/search/{hash_value}"


def _stopped(stop: threading.Event | None) -> bool:
    return stop is not None and stop.is_set()


def hash_file(
    path: str | os.PathLike[str], stop: threading.Event | None = None
) -> ResultData | None:
    """Hash one file.

    Returns a result in state ALL, or in state ERROR when the file cannot be
    read.  Returns None when ``stop`` is set before the file is finished.
    """
    result = ResultData(path=os.fspath(path), state=ResultState.PATH)
    osfile = OsFile(path)
    try:
        osfile.open_read_scan()
    except OsFileError as exc:
        result.state = ResultState.ERROR
        result.error = str(exc)
        return result

    with osfile:
        result.size = osfile.length()
        result.modified_date = osfile.modified_time_format()
        try:
            result.version = file_version(path)
        except OSError:
            result.version = ""
        result.state = ResultState.META

        digests = [hashlib.md5(), hashlib.sha1(), hashlib.sha256(), hashlib.sha512()]
        try:
            while chunk := osfile.read(_CHUNK_SIZE):
                if _stopped(stop):
                    return None
                for digest in digests:
                    digest.update(chunk)
        except OSError as exc:
            result.state = ResultState.ERROR
            result.error = exc.strerror or str(exc)
            return result

    if _stopped(stop):
        return None
    result.md5, result.sha1, result.sha256, result.sha512 = (
        digest.hexdigest() for digest in digests
    )
    result.state = ResultState.ALL
    return result


def hash_files(
    paths: Iterable[str | os.PathLike[str]], stop: threading.Event | None = None
) -> Iterator[ResultData]:
    """Hash each path in turn, yielding results until ``stop`` is set."""
    for path in paths:
        if _stopped(stop):
            return
        result = hash_file(path, stop)
        if result is None:
            return
        yield result


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fhash", description="Calculate MD5, SHA1, SHA256 and SHA512 of files."
    )
    parser.add_argument("files", nargs="*", help="files to hash")
    parser.add_argument(
        "-u", "--uppercase", action="store_true", help="print hashes in upper case"
    )
    parser.add_argument(
        "--verify", metavar="HASH", help="report the files whose hash contains HASH"
    )
    return parser


def _emit(buffer: HyperTextBuffer) -> None:
    sys.stdout.write(buffer.text().replace("\r\n", "\n"))
    buffer.clear()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line; returns the process exit status."""
    args = _build_parser().parse_args(argv)
    register_default_strings()

    if not args.files:
        print(get_string("MAINDLG_INITINFO"))
        return 1

    buffer = HyperTextBuffer()
    results: list[ResultData] = []
    total_size = 0
    started = time.monotonic()
    try:
        for result in hash_files(args.files):
            results.append(result)
            if result.state is ResultState.ALL:
                total_size += result.size
            if args.verify is None:
                append_result(result, args.uppercase, buffer)
                _emit(buffer)
    except KeyboardInterrupt:
        print()
        print(get_string("MAINDLG_CALCU_TERMINAL"))
        return 130
    elapsed = time.monotonic() - started

    if args.verify is not None:
        hash_value = args.verify.strip()
        matches = append_find_report(results, "", hash_value, args.uppercase, buffer)
        buffer.append_text("\r\n")
        _emit(buffer)
        return 0 if matches else 1

    print(f"{get_string('MAINDLG_TIME_TITLE')} {int(elapsed)} {get_string('SECOND_STRING')}")
    speed = format_speed(total_size, elapsed)
    if speed:
        print(speed)
    return 1 if any(r.state is ResultState.ERROR for r in results) else 0


if __name__ == "__main__":
    sys.exit(main())