# binview/cli/args.py
from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional

from binview import __version__
from binview.core.errors import ArgumentError
from binview.model.types import ByteOrder, ElementType


# ---------------- value converters ----------------

def element_type_arg(token: str) -> ElementType:
    try:
        return ElementType.parse(token)
    except ArgumentError as e:
        raise argparse.ArgumentTypeError(f"{e.message} ({e.hint})")


def byte_order_arg(token: str) -> ByteOrder:
    try:
        return ByteOrder.parse(token)
    except ArgumentError as e:
        raise argparse.ArgumentTypeError(f"{e.message} ({e.hint})")


def non_negative_int(v: str) -> int:
    s = str(v).strip()
    if not (s.isascii() and s.isdigit()):
        raise argparse.ArgumentTypeError(f"Invalid non-negative integer '{v}'")
    return int(s)


def positive_int(v: str) -> int:
    n = non_negative_int(v)
    if n < 1:
        raise argparse.ArgumentTypeError(f"Value must be >= 1, got '{v}'")
    return n


# ---------------- argparse ----------------

def build_parser() -> argparse.ArgumentParser:
    types = "|".join(m.value for m in ElementType)
    orders = " | ".join(m.value for m in ByteOrder)

    parser = argparse.ArgumentParser(
        prog="binview",
        description="Print fixed-width numbers stored in a binary file, one per line.",
    )
    parser.add_argument("type", metavar="TYPE", type=element_type_arg, help=f"Element type: {types}")
    parser.add_argument("file", metavar="FILE", type=Path, help="Binary input file.")

    # None = "not given", so profile values can fill in
    parser.add_argument("-o", "--offset", type=non_negative_int, default=None,
                        help="Byte offset of the first element (default: 0).")
    parser.add_argument("-n", "--number", type=non_negative_int, default=None,
                        help="Maximum number of elements (default: all remaining).")
    parser.add_argument("-b", "--byte-order", dest="byte_order", type=byte_order_arg, default=None,
                        metavar="BYTE_ORDER", help=f"{orders} (default: little-endian).")
    parser.add_argument("-r", "--row-size", dest="row_size", type=positive_int, default=None,
                        help="Values printed per line, space separated (default: 1).")
    parser.add_argument("--profile", type=Path, default=None,
                        help="YAML file with default offset/number/byte_order/row_size.")
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="Log to stderr (-v info, -vv debug).")
    parser.add_argument("--log-file", dest="log_file", type=Path, default=None,
                        help="Also write the log to this file.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)
