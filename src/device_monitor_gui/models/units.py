from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

ZERO_BYTES = "Zero KB"

# Decimal (1000-based) "file" style units with their displayed precision.
_UNITS: tuple[tuple[str, int], ...] = (
    ("KB", 0),
    ("MB", 1),
    ("GB", 2),
    ("TB", 2),
    ("PB", 2),
    ("EB", 2),
)


def _trim(value: Decimal) -> str:
    s = format(value, "f")
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return s


def format_bytes(n: int) -> str:
    """Render a byte count the way file managers show file sizes.

    Scaling is decimal: 1 KB is 1000 bytes. The output never depends on the
    process locale.
    """
    n = int(n)
    if n < 0:
        raise ValueError(f"byte count must be non-negative: {n}")
    if n == 0:
        return ZERO_BYTES
    if n < 1000:
        return "1 byte" if n == 1 else f"{n} bytes"

    value = Decimal(n)
    last = len(_UNITS) - 1
    for i, (unit, places) in enumerate(_UNITS):
        value = value / 1000
        shown = value.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)
        # 999.6 KB rounds to 1000 KB; show it as 1 MB instead.
        if shown < 1000 or i == last:
            return f"{_trim(shown)} {unit}"
    raise AssertionError("unreachable")


def format_count(n: int) -> str:
    return f"{int(n):,}"
