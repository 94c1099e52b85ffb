"""In-memory byte cursor shared by the tokenizers."""

from __future__ import annotations


class ByteSource:
    """Read cursor over an immutable byte buffer.

    Supports exactly one byte of push-back: ``ungetc`` is only valid right
    after a ``getc`` that returned a byte.
    """

    def __init__(self, data: bytes):
        self.data = bytes(data)
        self.pos = 0
        self._can_unget = False

    @classmethod
    def from_string(cls, text: str | bytes, encoding: str = "utf-8") -> "ByteSource":
        """Wrap a string (or bytes) for tokenizing."""
        if isinstance(text, str):
            text = text.encode(encoding)
        return cls(text)

    def __len__(self) -> int:
        return len(self.data)

    def __repr__(self) -> str:
        return f"ByteSource(pos={self.pos}, size={len(self.data)})"

    def eof(self) -> bool:
        return self.pos >= len(self.data)

    def getc(self) -> int | None:
        """Return the next byte, or None at end of input."""
        if self.pos >= len(self.data):
            self._can_unget = False
            return None
        c = self.data[self.pos]
        self.pos += 1
        self._can_unget = True
        return c

    def ungetc(self) -> None:
        """Push back the byte returned by the previous ``getc``."""
        if not self._can_unget:
            raise ValueError("ungetc() is only valid after a successful getc()")
        self.pos -= 1
        self._can_unget = False

    def rfind(self, byte: bytes, end: int | None = None) -> int:
        """Index of the last ``byte`` before ``end`` (default: read position)."""
        return self.data.rfind(byte, 0, self.pos if end is None else end)

    def slice(self, start: int, end: int) -> bytes:
        return self.data[start:end]
