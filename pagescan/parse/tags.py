"""Tag tokenizer.

Returns the normalized content of each ``<...>`` construct: whitespace runs
collapse to a single space, quoted attribute values are left alone and
``<!-- ... -->`` comments end only at ``-->``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from .source import ByteSource

logger = logging.getLogger(__name__)

TAG_WHITESPACE = frozenset(b" \t\n\r\v")
# Comment bodies use the wider C isspace() class.
COMMENT_WHITESPACE = frozenset(b" \t\n\r\v\f")

LT = ord("<")
GT = ord(">")
BANG = ord("!")
DASH = ord("-")
QUOTE = ord('"')
BACKSLASH = ord("\\")
SPACE = ord(" ")


def next_tag(source: ByteSource) -> bytes | None:
    """Consume up to and including the next tag and return its content.

    Returns ``b""`` for ``<>`` and None when no further tag exists.
    """
    c = source.getc()
    while c is not None and c != LT:
        c = source.getc()
    if c is None:
        logger.debug("next_tag(): returning None")
        return None

    c = source.getc()
    if c == GT:
        logger.debug("next_tag(): returning empty tag")
        return b""
    if c is None:
        logger.debug("next_tag(): returning None")
        return None

    buf = bytearray()
    if c == BANG:
        buf.append(c)
        c2 = source.getc()
        if c2 == GT or c2 is None:
            return _finish(buf, c2 == GT)
        if c2 == DASH:
            buf.append(c2)
            c3 = source.getc()
            if c3 == GT or c3 is None:
                return _finish(buf, c3 == GT)
            if c3 == DASH:
                buf.append(c3)
                return _read_comment(source, buf)
        source.ungetc()
    else:
        source.ungetc()

    return _read_tag(source, buf)


def _read_comment(source: ByteSource, buf: bytearray) -> bytes | None:
    while (c := source.getc()) is not None:
        if c == GT and buf.endswith(b"--"):
            return _finish(buf, True)
        if c in COMMENT_WHITESPACE:
            if buf[-1] != SPACE:
                buf.append(SPACE)
            continue
        buf.append(c)
    if buf[-1] == SPACE:
        del buf[-1]
    return _finish(buf, False)


def _read_tag(source: ByteSource, buf: bytearray) -> bytes | None:
    in_str = False
    terminated = False
    # Index of a collapsed space at the end of buf, if any.
    collapsed_at = -1

    while (c := source.getc()) is not None:
        if c == BACKSLASH:
            buf.append(c)
            c = source.getc()
            if c is None:
                break
            buf.append(c)
        elif c == GT and not in_str:
            terminated = True
            break
        elif c in TAG_WHITESPACE and not in_str:
            if buf and buf[-1] != SPACE:
                buf.append(SPACE)
                collapsed_at = len(buf) - 1
            continue
        else:
            if c == QUOTE:
                in_str = not in_str
            buf.append(c)
        collapsed_at = -1

    if collapsed_at >= 0:
        del buf[collapsed_at]
    return _finish(buf, terminated)


def _finish(buf: bytearray, terminated: bool) -> bytes | None:
    # A tag closed by '>' always counts, even when blank ("< >").
    if not buf and not terminated:
        logger.debug("next_tag(): returning None")
        return None
    tag = bytes(buf)
    logger.debug("next_tag(): returning %r", tag)
    return tag


def iter_tags(source: ByteSource) -> Iterator[bytes]:
    """Yield every remaining tag in ``source``."""
    while (tag := next_tag(source)) is not None:
        yield tag


def tag_is(tag: bytes | None, name: bytes) -> bool:
    """True when ``tag`` is ``name``, alone or followed by attributes.

    ``tag_is(b"table border=1", b"table")`` is True, ``tag_is(b"tablet",
    b"table")`` is False.
    """
    if tag is None or not tag.startswith(name):
        return False
    return len(tag) == len(name) or tag[len(name)] in COMMENT_WHITESPACE
