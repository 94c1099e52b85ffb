"""CLI entry point for pagescan.

Reads a saved page (or standard input) and prints its tags, text, tables or a
full JSON extraction report.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any

from . import __version__
from .config import LOG_FORMAT, LOG_LEVEL, ScanOptions


def app(argv: list[str] | None = None) -> None:
    """Console script entrypoint."""
    raise SystemExit(main(argv))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="pagescan",
        description="Pull tags, text and tables out of raw HTML pages.",
    )
    parser.add_argument(
        "--version",
        "-V",
        action="version",
        version=f"pagescan {__version__}",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Log every token (debug)")
    enc = parser.add_mutually_exclusive_group()
    enc.add_argument("--utf8", dest="utf8", action="store_true", default=None, help="Decode entities to UTF-8")
    enc.add_argument("--latin1", dest="utf8", action="store_false", default=None, help="Decode entities to single Latin-1 bytes")

    sub = parser.add_subparsers(dest="cmd", required=True)

    p_tags = sub.add_parser("tags", help="Print every tag, one per line")
    p_tags.add_argument("file", help="HTML file, or - for stdin")

    p_text = sub.add_parser("text", help="Print every text run, one per line")
    p_text.add_argument("file", help="HTML file, or - for stdin")

    p_tables = sub.add_parser("tables", help="Print table rows (tab separated)")
    p_tables.add_argument("file", help="HTML file, or - for stdin")
    p_tables.add_argument("--json", action="store_true", help="Print tables as JSON")

    p_page = sub.add_parser("page", help="Build the full extraction report")
    p_page.add_argument("file", help="HTML file, or - for stdin")
    p_page.add_argument("--out", "-o", type=Path, default=None, help="Write JSON report here")

    p_name = sub.add_parser("page-name", help="Print the declared page name")
    p_name.add_argument("file", help="HTML file, or - for stdin")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else LOG_LEVEL,
        format=LOG_FORMAT,
    )
    options = ScanOptions.from_env() if args.utf8 is None else ScanOptions(utf8=args.utf8)

    try:
        data = _read_input(args.file)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.cmd == "tags":
        return _cmd_tags(data, options)
    if args.cmd == "text":
        return _cmd_text(data, options)
    if args.cmd == "tables":
        return _cmd_tables(data, options, args)
    if args.cmd == "page":
        return _cmd_page(data, options, args)
    if args.cmd == "page-name":
        return _cmd_page_name(data, options)

    parser.print_help()
    return 2


def _read_input(name: str) -> bytes:
    if name == "-":
        return sys.stdin.buffer.read()
    return Path(name).read_bytes()


def _cmd_tags(data: bytes, options: ScanOptions) -> int:
    from .parse.source import ByteSource
    from .parse.tags import iter_tags

    for tag in iter_tags(ByteSource(data)):
        print(tag.decode(options.encoding, errors="replace"))
    return 0


def _cmd_text(data: bytes, options: ScanOptions) -> int:
    from .extract import extract_text

    for line in extract_text(data, options):
        print(line)
    return 0


def _cmd_tables(data: bytes, options: ScanOptions, args: Any) -> int:
    from .extract import extract_tables

    warnings: list[str] = []
    tables = extract_tables(data, options, warnings=warnings)

    if args.json:
        import json

        payload = [t.model_dump(mode="json") for t in tables]
        print(json.dumps(payload, indent=2, ensure_ascii=False))
    else:
        for i, table in enumerate(tables):
            if i:
                print()
            for row in table.rows:
                print("\t".join(row))

    for w in warnings:
        print(f"Warning: {w}", file=sys.stderr)
    return 0


def _cmd_page(data: bytes, options: ScanOptions, args: Any) -> int:
    from .extract import dump_extract, extract_page, write_extract

    source = "<stdin>" if args.file == "-" else args.file
    report = extract_page(data, source, options)

    if args.out is None:
        sys.stdout.write(dump_extract(report))
        return 0

    try:
        path = write_extract(report, args.out)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("✓ Report written")
    print(f"  Output: {path}")
    print(f"  Page: {report.page_name or 'Unknown'}")
    print(f"  Tables: {len(report.tables)}")
    print(f"  Text runs: {len(report.text)}")

    if report.warnings:
        print(f"\nWarnings ({len(report.warnings)}):")
        for w in report.warnings:
            print(f"  - {w}")
    return 0


def _cmd_page_name(data: bytes, options: ScanOptions) -> int:
    from .parse.pagename import get_page_name
    from .parse.source import ByteSource

    name = get_page_name(ByteSource(data))
    if name is None:
        print("Error: no page name found", file=sys.stderr)
        return 1
    print(name.decode(options.encoding, errors="replace"))
    return 0


if __name__ == "__main__":
    app()
