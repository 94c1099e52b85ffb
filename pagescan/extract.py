"""Page extraction report: tables, text and page name as one model."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import BaseModel, Field

from .config import PARSER_VERSION, SCHEMA_VERSION, ScanOptions
from .parse.pagename import get_page_name
from .parse.source import ByteSource
from .parse.tables import CellEvent, find_table_start, scan_cell
from .parse.text import iter_texts

logger = logging.getLogger(__name__)


class ExtractedTable(BaseModel):
    """One top-level table with cell text per row."""

    index: int
    columns: int
    rows: list[list[str]]


class PageExtract(BaseModel):
    """Everything pulled out of one page."""

    schema_version: int = SCHEMA_VERSION
    parser_version: str = PARSER_VERSION
    source: str
    encoding: str
    page_name: str | None = None
    tables: list[ExtractedTable] = Field(default_factory=list)
    text: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)


def _decode(value: bytes, options: ScanOptions) -> str:
    return value.decode(options.encoding, errors="replace")


def cell_text(cell: bytes, options: ScanOptions | None = None) -> str:
    """Text of a raw cell, with the cell's text runs joined by spaces."""
    options = options or ScanOptions()
    runs = iter_texts(ByteSource(cell), utf8=options.utf8)
    return " ".join(_decode(run, options) for run in runs)


def extract_tables(
    data: bytes,
    options: ScanOptions | None = None,
    warnings: list[str] | None = None,
) -> list[ExtractedTable]:
    """Extract every top-level table of a page.

    Tables nested in a cell stay inside that cell's text. Rows without cells
    are dropped.

    Args:
        data: Raw page bytes
        options: Output encoding options
        warnings: Optional list collecting problems found on the way

    Returns:
        Tables in document order
    """
    options = options or ScanOptions()
    source = ByteSource(data)
    tables: list[ExtractedTable] = []

    while find_table_start(source) is not None:
        rows: list[list[str]] = []
        row: list[str] = []
        while True:
            event, cell = scan_cell(source)
            if event is CellEvent.CELL:
                row.append(cell_text(cell, options))
                continue
            if row:
                rows.append(row)
            row = []
            if event is CellEvent.ROW_END:
                continue
            if event is CellEvent.END_OF_INPUT and warnings is not None:
                warnings.append(f"Table {len(tables)} is not closed before end of page")
            break

        tables.append(
            ExtractedTable(
                index=len(tables),
                columns=max((len(r) for r in rows), default=0),
                rows=rows,
            )
        )

    logger.debug("extract_tables(): found %d tables", len(tables))
    return tables


def extract_text(data: bytes, options: ScanOptions | None = None) -> list[str]:
    """Return every text run of a page."""
    options = options or ScanOptions()
    return [_decode(run, options) for run in iter_texts(ByteSource(data), utf8=options.utf8)]


def extract_page(data: bytes, source: str, options: ScanOptions | None = None) -> PageExtract:
    """Build the full extraction report for one page.

    Args:
        data: Raw page bytes
        source: Where the page came from (file name, URL)
        options: Output encoding options

    Returns:
        Populated PageExtract
    """
    options = options or ScanOptions()
    warnings: list[str] = []

    name = get_page_name(ByteSource(data))
    if name is None:
        warnings.append("No page name declared")

    tables = extract_tables(data, options, warnings=warnings)
    if not tables:
        warnings.append("No tables found")

    return PageExtract(
        source=source,
        encoding=options.encoding,
        page_name=_decode(name, options) if name is not None else None,
        tables=tables,
        text=extract_text(data, options),
        warnings=warnings,
    )


def dump_extract(extract: PageExtract) -> str:
    """Serialize deterministically (sorted keys, trailing newline)."""
    payload = extract.model_dump(mode="json")
    return json.dumps(payload, indent=2, sort_keys=True, ensure_ascii=False) + "\n"


def write_extract(extract: PageExtract, path: Path) -> Path:
    """Write the report as JSON to ``path``."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dump_extract(extract), encoding="utf-8")
    return path
