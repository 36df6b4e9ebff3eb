"""Human-readable byte formatting.

Sizes are rendered with decimal (SI, base 1000) units, e.g. ``"1.2 kB"``.
"""

from __future__ import annotations

import math

_SI_UNITS = ("B", "kB", "MB", "GB", "TB", "PB", "EB")
_SI_BASE = 1000


def format_bytes(size: int) -> str:
    """Render a byte count with SI units.

    Values under 10 bytes are printed as-is. Larger values are scaled to the
    largest unit not exceeding them and printed with one decimal below 10,
    otherwise rounded to a whole number.

    Args:
        size: Byte count; negative values keep their sign, e.g. ``"-1.2 kB"``.

    Returns:
        Formatted size such as ``"100 B"``, ``"1.2 kB"`` or ``"12 MB"``.
    """
    if size < 0:
        return f"-{format_bytes(-size)}"
    if size < 10:
        return f"{size} B"
    exponent = 0
    while exponent < len(_SI_UNITS) - 1 and size >= _SI_BASE ** (exponent + 1):
        exponent += 1
    scaled = math.floor(size / _SI_BASE**exponent * 10 + 0.5) / 10
    if scaled < 10:
        return f"{scaled:.1f} {_SI_UNITS[exponent]}"
    return f"{scaled:.0f} {_SI_UNITS[exponent]}"
