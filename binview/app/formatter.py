# binview/app/formatter.py
from __future__ import annotations

import math
import struct
from typing import IO, Iterable, Iterator, List

from binview.model.codec import Number
from binview.model.types import ElementType


# max significant digits needed to round-trip each float width
_FLOAT_DIGITS = {4: 9, 8: 17}
_PACK_FMT = {4: "<f", 8: "<d"}


def _shortest_scientific(value: float, width: int) -> str:
    """Fewest significant digits, in %e form, that pack back to the same bits."""
    fmt = _PACK_FMT[width]
    target = struct.pack(fmt, value)
    digits = _FLOAT_DIGITS[width]
    for precision in range(1, digits + 1):
        text = f"{value:.{precision - 1}e}"
        try:
            if struct.pack(fmt, float(text)) == target:
                return text
        except OverflowError:
            # rounded past the f32 range (near FLT_MAX)
            continue
    return f"{value:.{digits - 1}e}"


def _format_float(value: float, width: int) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"

    mantissa, _, exp_text = _shortest_scientific(value, width).partition("e")
    exp = int(exp_text)
    sign = "-" if mantissa.startswith("-") else ""
    significand = mantissa.lstrip("-").replace(".", "")

    # same cut-over as %g: positional for 1e-4 <= |value| < 10**digits
    if not -4 <= exp < _FLOAT_DIGITS[width]:
        return f"{mantissa}e{exp_text}"
    if exp < 0:
        return f"{sign}0.{'0' * (-exp - 1)}{significand}"
    int_part = significand[:exp + 1].ljust(exp + 1, "0")
    frac_part = significand[exp + 1:]
    return f"{sign}{int_part}.{frac_part}" if frac_part else f"{sign}{int_part}"


def format_value(value: Number, element_type: ElementType) -> str:
    """
    Canonical text for one decoded value.

    Integers: base 10. Floats: fewest significant digits that pack back to
    the same bits at the element's own width (f32 0.1 -> "0.1", 100.0 -> "100"),
    positional unless the exponent is below -4 or reaches the round-trip
    digit count (9 for f32, 17 for f64).
    """
    if element_type.is_float:
        return _format_float(float(value), element_type.width)
    return str(int(value))


def iter_lines(values: Iterable[Number], element_type: ElementType, *, row_size: int = 1) -> Iterator[str]:
    if row_size < 1:
        raise ValueError(f"row_size must be >= 1, got {row_size}")

    row: List[str] = []
    for v in values:
        row.append(format_value(v, element_type))
        if len(row) >= row_size:
            yield " ".join(row)
            row = []
    if row:
        yield " ".join(row)


def write_lines(lines: Iterable[str], stream: IO[str]) -> int:
    n = 0
    for line in lines:
        stream.write(line)
        stream.write("\n")
        n += 1
    stream.flush()
    return n
