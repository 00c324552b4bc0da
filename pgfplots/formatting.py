from __future__ import annotations

from decimal import Decimal
import math


def format_number(value: float) -> str:
    """Shortest round-trip decimal text, without exponent or a trailing ``.0``.

    ``1.0 -> "1"``, ``-1.0 -> "-1"``, ``0.5 -> "0.5"``, ``1e20 -> "100000000000000000000"``.
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"

    out = format(Decimal(repr(value)), "f")
    if "." in out:
        out = out.rstrip("0").rstrip(".")
    return out
