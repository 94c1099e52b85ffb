"""Table walker built on the tag tokenizer.

Cells are returned as the raw markup between ``<td>`` and ``</td>`` (or
``th``); run them through :func:`pagescan.parse.text.text_from_string` to get
their text. Tables nested inside a cell are part of that cell's markup.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Iterator

from .source import ByteSource
from .tags import next_tag, tag_is

logger = logging.getLogger(__name__)


class CellEvent(enum.Enum):
    """Why a cell scan stopped."""

    CELL = "cell"
    ROW_END = "row_end"
    TABLE_END = "table_end"
    END_OF_INPUT = "end_of_input"


def find_table_start(source: ByteSource) -> bytes | None:
    """Skip to the next ``<table>`` tag and return it."""
    while (tag := next_tag(source)) is not None:
        if tag_is(tag, b"table"):
            return tag
    return None


def find_table_end(source: ByteSource) -> bytes | None:
    """Skip to the ``</table>`` closing the current table.

    Nested tables are skipped. Returns None if input ends first.
    """
    nesting = 1
    while (tag := next_tag(source)) is not None:
        if tag == b"/table":
            nesting -= 1
            if nesting == 0:
                return tag
        elif tag_is(tag, b"table"):
            nesting += 1
    return None


def scan_cell(source: ByteSource) -> tuple[CellEvent, bytes | None]:
    """Scan for the next cell of the current row.

    Returns ``(CellEvent.CELL, markup)`` for a cell, otherwise the event that
    ended the scan and None.
    """
    nesting = 1
    start = source.pos

    while (tag := next_tag(source)) is not None:
        if nesting == 1 and (tag_is(tag, b"td") or tag_is(tag, b"th")):
            start = source.pos
        elif nesting == 1 and tag in (b"/td", b"/th"):
            end = source.rfind(b"<")
            return CellEvent.CELL, source.slice(start, end)
        elif nesting == 1 and tag == b"/tr":
            return CellEvent.ROW_END, None
        elif tag == b"/table":
            nesting -= 1
            if nesting == 0:
                return CellEvent.TABLE_END, None
        elif tag_is(tag, b"table"):
            nesting += 1

    logger.debug("scan_cell(): input ended inside a table")
    return CellEvent.END_OF_INPUT, None


def next_cell(source: ByteSource) -> bytes | None:
    """Return the raw markup of the next cell, or None at end of row/table."""
    _, cell = scan_cell(source)
    return cell


def next_row(source: ByteSource) -> list[bytes] | None:
    """Return the cells of the next row, or None at end of table.

    A row without cells (``<tr></tr>``) is an empty list.
    """
    row: list[bytes] = []
    while True:
        event, cell = scan_cell(source)
        if event is CellEvent.CELL:
            row.append(cell)
            continue
        if event is CellEvent.ROW_END or row:
            return row
        return None


def column_count(row: list[bytes] | None) -> int:
    """Number of cells in ``row``, or -1 when there is no row."""
    if row is None:
        return -1
    return len(row)


def iter_rows(source: ByteSource) -> Iterator[list[bytes]]:
    """Yield the rows of the current table until it ends."""
    while (row := next_row(source)) is not None:
        yield row
