"""HTML character entity decoding.

Only a small fixed entity set is understood:

- accented Latin letters written as ``&<letter><family>;`` where family is one
  of ``acute``, ``grave``, ``cedil``, ``circ``, ``tilde`` or ``uml``
  (e.g. ``&auml;`` -> U+00E4)
- the symbolic entities ``trade``, ``amp``, ``gt``, ``lt`` and ``quot``
- numeric references ``&#NNN;`` and ``&#xHH;``

``quot`` decodes to ``&``, not ``"``.
"""

from __future__ import annotations

from dataclasses import dataclass

# Family tables cover base letters 0x40 ('@') through 0x7F.
FAMILY_TABLE_SIZE = 64
FAMILY_TABLE_BASE = 0x40

PLACEHOLDER = b"?"


def _family(letters: dict[str, int]) -> tuple[int, ...]:
    table = [0] * FAMILY_TABLE_SIZE
    for letter, code_point in letters.items():
        table[ord(letter) - FAMILY_TABLE_BASE] = code_point
    return tuple(table)


ACUTE = _family({
    "A": 0xC1, "E": 0xC9, "O": 0xD3, "U": 0xDA, "Y": 0xDD,
    "a": 0xE1, "e": 0xE9, "o": 0xF3, "u": 0xFA, "y": 0xFD,
})
GRAVE = _family({
    "A": 0xC0, "E": 0xC8, "I": 0xCC, "O": 0xD2, "U": 0xD9,
    "a": 0xE0, "e": 0xE8, "i": 0xEC, "o": 0xF2, "u": 0xF9,
})
CEDIL = _family({"C": 0xC7, "c": 0xE7})
CIRC = _family({
    "A": 0xC2, "E": 0xCA, "I": 0xCE, "O": 0xD4, "U": 0xDB,
    "a": 0xE2, "e": 0xEA, "i": 0xEE, "o": 0xF4, "u": 0xFB,
})
TILDE = _family({"A": 0xC3, "N": 0xD1, "a": 0xE3, "n": 0xF1})
UML = _family({
    "A": 0xC4, "E": 0xCB, "I": 0xCF, "O": 0xD6, "S": 0xDF, "U": 0xDC,
    "a": 0xE4, "e": 0xEB, "i": 0xEF, "o": 0xF6, "s": 0xDF, "u": 0xFC, "y": 0xFF,
})


@dataclass(frozen=True)
class FamilyTable:
    """Entity whose code point depends on the base letter."""

    table: tuple[int, ...]

    def lookup(self, base: int) -> int | None:
        index = base - FAMILY_TABLE_BASE
        if 0 <= index < len(self.table) and self.table[index]:
            return self.table[index]
        return None


@dataclass(frozen=True)
class FixedCodePoint:
    """Entity with a single code point."""

    value: int


EntityKind = FamilyTable | FixedCodePoint

ENTITIES: dict[bytes, EntityKind] = {
    b"acute": FamilyTable(ACUTE),
    b"grave": FamilyTable(GRAVE),
    b"cedil": FamilyTable(CEDIL),
    b"circ": FamilyTable(CIRC),
    b"tilde": FamilyTable(TILDE),
    b"uml": FamilyTable(UML),
    b"trade": FixedCodePoint(0x2122),
    b"amp": FixedCodePoint(ord("&")),
    b"gt": FixedCodePoint(ord(">")),
    b"lt": FixedCodePoint(ord("<")),
    b"quot": FixedCodePoint(ord("&")),
}


def decode_named_entity(name: bytes) -> int | None:
    """Decode the body of ``&name;`` to a code point.

    Family entities take their base letter from the first byte of ``name``
    (``auml`` is ``a`` + ``uml``). Returns None when nothing matches.
    """
    if len(name) > 1:
        entry = ENTITIES.get(name[1:])
        if isinstance(entry, FamilyTable):
            code_point = entry.lookup(name[0])
            if code_point is not None:
                return code_point

    entry = ENTITIES.get(name)
    if isinstance(entry, FixedCodePoint):
        return entry.value
    return None


def decode_numeric_entity(text: bytes) -> int | None:
    """Decode ``#NNN`` or ``#xHH`` (the body of a numeric reference).

    Like ``sscanf``, only the leading digits are used. Returns None when there
    are no digits.
    """
    if text.startswith(b"#"):
        text = text[1:]
    base = 10
    digits = b"0123456789"
    if text[:1] in (b"x", b"X"):
        text = text[1:]
        base = 16
        digits = b"0123456789abcdefABCDEF"

    end = 0
    while end < len(text) and text[end] in digits:
        end += 1
    if end == 0:
        return None
    return int(text[:end], base)


def encode_utf8(code_point: int) -> bytes:
    """Encode a code point as 1-4 UTF-8 bytes.

    Zero and unencodable code points give the ``?`` placeholder.
    """
    if code_point <= 0 or code_point > 0x10FFFF:
        return PLACEHOLDER
    return chr(code_point).encode("utf-8", errors="replace")


def encode_code_point(code_point: int, utf8: bool) -> bytes:
    """Encode for the configured output: UTF-8, or a single Latin-1 byte.

    Code points outside Latin-1 have no single-byte form and give ``?``.
    """
    if utf8:
        return encode_utf8(code_point)
    if code_point <= 0 or code_point > 0xFF:
        return PLACEHOLDER
    return bytes([code_point])
