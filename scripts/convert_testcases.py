#!/usr/bin/env python3
"""
Convert a test case text file (Markdown / BDD or plain title format) into CSV.

Examples:
    python scripts/convert_testcases.py cases.md -o testcases.csv
    cat dump.txt | python scripts/convert_testcases.py --format testcase
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from tcconvert.config import load_config
from tcconvert.models.testcase_import import InputFormat
from tcconvert.services.testcase_import_service import TestCaseImportError, TestCaseImportService

logger = logging.getLogger("convert_testcases")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Convert test case text into CSV")
    parser.add_argument("input", nargs="?", default="-", help="Input text file (default: stdin)")
    parser.add_argument("-o", "--output", default="", help="Output CSV path (default: stdout)")
    parser.add_argument(
        "--format",
        choices=[fmt.value for fmt in InputFormat],
        default=None,
        help="Input dialect (default: converter.default_input_format from config)",
    )
    parser.add_argument("--config", default=os.getenv("TCCONVERT_CONFIG", "config.yaml"))
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def read_input(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8-sig") as f:
        return f.read()


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)
    service = TestCaseImportService(config.converter)

    try:
        text = read_input(args.input)
    except OSError as e:
        print(f"failed reading {args.input}: {e}", file=sys.stderr)
        return 1

    input_format = InputFormat(args.format) if args.format else None
    try:
        result = service.convert(text, input_format)
    except TestCaseImportError as e:
        print(e.message, file=sys.stderr)
        return 1

    if args.output:
        try:
            with open(args.output, "w", encoding="utf-8", newline="") as f:
                f.write(result.csv)
        except OSError as e:
            print(f"failed writing {args.output}: {e}", file=sys.stderr)
            return 1
    else:
        sys.stdout.write(result.csv + "\n")

    print(result.message, file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
