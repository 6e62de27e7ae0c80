"""Human-readable formatting of byte sizes."""

from __future__ import annotations

import struct

_KB = 1024
_MB = 1024 * 1024
_GB = 1024 * 1024 * 1024


def _single(value: float) -> float:
    """Round ``value`` to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


def size_to_string(size: float) -> str:
    """Format a byte count with a 'KB', 'MB' or 'GB' suffix and two decimals.

    Sizes below one kilobyte carry no unit and end with a single space.
    """
    s = _single(float(size))
    if s < _KB:
        return f"{s:.2f} "
    if s < _MB:
        return f"{_single(s / _KB):.2f} KB"
    if s < _GB:
        return f"{_single(s / _MB):.2f} MB"
    return f"{_single(s / _GB):.2f} GB"