"""Find hyperlink tokens in plain text and locate the link at a position."""

from __future__ import annotations

from collections.abc import Iterable

from fhashkit.hyperbuffer import TokenOffset

WHITESPACE = frozenset(" \r\n\t")
"""Characters that separate tokens."""

_LINK_PREFIXES = ("http://", "mailto:")


def is_whitespace_or_end(text: str, index: int) -> bool:
    """Return True when ``index`` is the end of ``text`` or a whitespace char."""
    if index == len(text):
        return True
    return text[index] in WHITESPACE


def is_word_hyperlink(token: str) -> bool:
    """Return True when ``token`` looks like a web or mail link."""
    return token.lower().startswith(_LINK_PREFIXES)


def build_offset_list(text: str, start: int, finish: int) -> list[TokenOffset]:
    """Return the offsets of link tokens found between ``start`` and ``finish``.

    ``finish`` is inclusive and is clamped to the end of ``text``; a token
    still open at ``finish`` is only recorded if ``finish`` ends it.
    """
    finish = min(finish, len(text))
    start = max(start, 0)
    offsets: list[TokenOffset] = []
    token: list[str] = []
    current = start
    for i in range(start, finish + 1):
        if is_whitespace_or_end(text, i):
            if is_word_hyperlink("".join(token)):
                offsets.append(TokenOffset(current, i - current))
            token.clear()
            current = i + 1
        else:
            token.append(text[i])
    return offsets


def visible_links(
    offsets: Iterable[TokenOffset], start: int, finish: int
) -> list[TokenOffset]:
    """Return the offsets that touch the character range ``start``..``finish``."""
    return [
        off for off in offsets if not (off.end < start or off.start > finish)
    ]


def hyperlink_at(text: str, offsets: Iterable[TokenOffset], index: int) -> str:
    """Return the link text covering character ``index``, or "" if none.

    Later offsets take precedence over earlier ones; a link covers the
    positions from its first character up to and including its end.
    """
    for off in reversed(list(offsets)):
        if off.start <= index <= off.end:
            return text[off.start : off.end]
    return ""