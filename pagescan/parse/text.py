"""Text tokenizer: the plain text between tags.

Whitespace is collapsed, tags between text runs are skipped and the entities
known to :mod:`pagescan.parse.entities` are decoded into the output encoding.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator

from ..config import UTF8_OUTPUT
from .entities import decode_named_entity, decode_numeric_entity, encode_code_point
from .source import ByteSource
from .tags import next_tag

logger = logging.getLogger(__name__)

# 0x82, 0xC2 and 0xA0 cover the usual non-breaking space byte patterns
# (UTF-8 C2 A0, Latin-1 A0).
TEXT_WHITESPACE = frozenset(b" \t\n\r\v\x82\xc2\xa0")
UTF8_LEAD = 0xC3

LT = ord("<")
AMP = ord("&")
SEMI = ord(";")
SPACE = ord(" ")

_INT_PATTERN = re.compile(rb"\s*([+-]?\d+)")


def next_text(source: ByteSource, utf8: bool = UTF8_OUTPUT) -> bytes | None:
    """Return the next run of text, or None at end of input.

    Args:
        source: Byte cursor, advanced past the returned text
        utf8: Emit decoded entities as UTF-8 (else as one Latin-1 byte)

    Returns:
        Normalized text without leading or trailing space
    """
    if source.eof():
        logger.debug("next_text(): returning None")
        return None

    buf = bytearray()
    amp = -1  # index of a pending '&'

    while (c := source.getc()) is not None:
        if c == LT:
            source.ungetc()
            if buf and buf[-1] == SPACE:
                del buf[-1]
            if buf:
                return _finish(buf)
            amp = -1
            next_tag(source)
        elif c in TEXT_WHITESPACE or (c == UTF8_LEAD and not utf8):
            _add_space(buf)
        elif c == SEMI and amp >= 0:
            _replace_entity(buf, amp, utf8)
            amp = -1
        else:
            if c == AMP:
                amp = len(buf)
            buf.append(c)

    return _finish(buf)


def _add_space(buf: bytearray) -> None:
    if buf and buf[-1] != SPACE:
        buf.append(SPACE)


def _replace_entity(buf: bytearray, amp: int, utf8: bool) -> None:
    """Decode ``buf[amp:]`` (``&`` up to, not including, ``;``) in place."""
    body = bytes(buf[amp + 1:])
    if body.startswith(b"#"):
        code_point = decode_numeric_entity(body)
    else:
        code_point = decode_named_entity(body)

    if code_point is not None:
        del buf[amp:]
        decoded = encode_code_point(code_point, utf8)
        if len(decoded) == 1 and decoded[0] in TEXT_WHITESPACE:
            _add_space(buf)
        else:
            buf += decoded
    elif body == b"nbsp":
        del buf[amp:]
        _add_space(buf)
    else:
        buf.append(SEMI)


def _finish(buf: bytearray) -> bytes | None:
    if buf and buf[-1] == SPACE:
        del buf[-1]
    if not buf:
        logger.debug("next_text(): returning None")
        return None
    text = bytes(buf)
    logger.debug("next_text(): returning %r", text)
    return text


def iter_texts(source: ByteSource, utf8: bool = UTF8_OUTPUT) -> Iterator[bytes]:
    """Yield every remaining text run in ``source``."""
    while (text := next_text(source, utf8=utf8)) is not None:
        yield text


def nth_text_from_string(s: str | bytes, n: int, utf8: bool = UTF8_OUTPUT) -> bytes | None:
    """Return the n-th (1-based) text run of a markup fragment."""
    source = ByteSource.from_string(s)
    for _ in range(1, n):
        next_text(source, utf8=utf8)
    return next_text(source, utf8=utf8)


def text_from_string(s: str | bytes, utf8: bool = UTF8_OUTPUT) -> bytes | None:
    """Return the first text run of a markup fragment (e.g. a table cell)."""
    return next_text(ByteSource.from_string(s), utf8=utf8)


def int_from_string(s: str | bytes) -> int:
    """Parse the leading integer of the first text run, ``atoi`` style.

    Returns 0 when the fragment has no text or the text is not a number.
    """
    text = next_text(ByteSource.from_string(s), utf8=True)
    if text is None:
        return 0
    match = _INT_PATTERN.match(text)
    return int(match.group(1)) if match else 0
