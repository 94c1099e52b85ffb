"""Tag, text and table tokenizers for raw HTML bytes."""

from .entities import decode_named_entity, decode_numeric_entity, encode_utf8
from .pagename import get_page_name
from .source import ByteSource
from .tables import (
    CellEvent,
    column_count,
    find_table_end,
    find_table_start,
    iter_rows,
    next_cell,
    next_row,
)
from .tags import iter_tags, next_tag
from .text import int_from_string, iter_texts, next_text, nth_text_from_string, text_from_string

__all__ = [
    "ByteSource",
    "CellEvent",
    "column_count",
    "decode_named_entity",
    "decode_numeric_entity",
    "encode_utf8",
    "find_table_end",
    "find_table_start",
    "get_page_name",
    "int_from_string",
    "iter_rows",
    "iter_tags",
    "iter_texts",
    "next_cell",
    "next_row",
    "next_tag",
    "next_text",
    "nth_text_from_string",
    "text_from_string",
]
