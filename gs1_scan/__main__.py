"""
CLI interface for the GS1 scan decoder.

Usage:
    python -m gs1_scan "<scan text>" [options]

Options:
    --json                  Output as JSON
    --detect                Only print the detected symbology
    --separator C           Variable-length field separator (default "+")
    --near-expiry-months N  Add an expiry status to DataMatrix output
    --verbose               Debug logging
"""

import argparse
import logging
import sys
from typing import Optional

from .core.parser import ParseOptions, ParseResult, parse
from .core.symbology import detect_type
from .exceptions import ScanError
from .formatters.json_formatter import format_date_ddmmyyyy, result_to_json


def format_result(result: ParseResult) -> str:
    """Format parse result for display."""
    lines = [
        "=" * 60,
        "Scan Decode Result",
        "=" * 60,
        f"Raw Input: {result.raw!r}",
        f"Symbology: {result.symbology.value if result.symbology else 'Unknown'}",
        "",
    ]

    if not result.is_datamatrix:
        lines.append(f"Code: {result.value}")
        return '\n'.join(lines)

    lines.extend([
        "Fields:",
        "-" * 40,
    ])
    for parsed in result.fields:
        lines.append(f"  AI({parsed.code}): {parsed.name}")
        lines.append(f"    Value: {parsed.value!r}")
        if parsed.code in ("11", "17"):
            lines.append(f"    Date: {format_date_ddmmyyyy(parsed.value)}")
        lines.append("")

    return '\n'.join(lines)


def main(argv: Optional[list] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog='gs1_scan',
        description='Decode raw barcode scanner output'
    )

    parser.add_argument(
        'raw',
        help='Scanner output to decode, symbology identifier included'
    )

    parser.add_argument(
        '--json',
        action='store_true',
        help='Output result as JSON'
    )

    parser.add_argument(
        '--detect',
        action='store_true',
        help='Only detect and print the symbology'
    )

    parser.add_argument(
        '--separator',
        default='+',
        help='Separator terminating variable-length AI fields'
    )

    parser.add_argument(
        '--near-expiry-months',
        type=int,
        default=None,
        help='Report expiry status using this near-expiry window (JSON only)'
    )

    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable debug logging'
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    if args.detect:
        kind = detect_type(args.raw)
        print(kind.value if kind else "Unknown")
        return 0

    try:
        options = ParseOptions(separator=args.separator)
        result = parse(args.raw, options=options)
    except ScanError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.json:
        print(result_to_json(result, near_expiry_months=args.near_expiry_months))
    else:
        print(format_result(result))

    return 0


if __name__ == '__main__':
    sys.exit(main())
