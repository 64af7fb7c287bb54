from __future__ import annotations

import argparse
import json
import sys
from typing import List

from modules.base_convert.core.base import (
    ConversionError,
    convert_all,
    label_for,
    parse_base,
)
from workbench.logger import setup_logger
from workbench.settings import get_settings

BASE_CHOICES = ["auto", "decimal", "binary", "octal", "hex"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="base-convert",
        description="Convert a whole number between decimal, binary, octal and hex.",
    )
    parser.add_argument("number", help="Number to convert, e.g. 255, FF or 11111111")
    parser.add_argument(
        "--base",
        "-b",
        choices=BASE_CHOICES,
        default=None,
        help="Base of the input (default: auto-detect)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as a JSON object",
    )
    return parser


def main(argv: List[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    logger = setup_logger(settings.log_level, json=settings.log_json)

    requested = args.base or settings.default_base
    try:
        result, resolved = convert_all(args.number, parse_base(requested))
    except ConversionError as exc:
        logger.info("conversion_failed", base=requested, error=str(exc))
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.json:
        payload = {"detected": resolved.value, **result.as_dict()}
        print(json.dumps(payload))
        return 0

    print(f"Detected:     {label_for(resolved)}")
    print(f"Decimal:      {result.decimal}")
    print(f"Binary:       {result.binary}")
    print(f"Octal:        {result.octal}")
    print(f"Hexadecimal:  {result.hex}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
