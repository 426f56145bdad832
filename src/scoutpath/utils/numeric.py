"""
Strict numeric parsing helpers.

Both helpers raise ValueError instead of returning a sentinel, so a literal
"0" is never confused with a failed parse. Only ASCII digits are accepted.
"""

import math
import struct

S32_MIN = -2 ** 31
S32_MAX = 2 ** 31 - 1

# Smallest positive normal single precision float
F32_MIN_NORMAL = 2.0 ** -126


def string_to_s32(text: str) -> int:
    """
    Parse a base-10 integer that fits in a signed 32-bit range.

    Args:
        text: The string to parse. Leading whitespace is skipped, trailing
            characters of any kind are rejected.

    Returns:
        The parsed integer.

    Raises:
        ValueError: If the string is empty, not an integer, or out of range.
    """
    if not text or not text.isascii() or "_" in text or text != text.rstrip():
        raise ValueError(f"Not an integer: {text!r}")

    value = int(text.lstrip(), 10)
    if not S32_MIN <= value <= S32_MAX:
        raise ValueError(f"Integer out of 32-bit range: {text!r}")
    return value


def string_to_f32(text: str) -> float:
    """
    Parse a float that is representable in single precision.

    Surrounding whitespace is skipped. Values that overflow single precision,
    non-zero values below its smallest normal magnitude, and non finite values
    are rejected.

    Raises:
        ValueError: If the string cannot be parsed or is out of range.
    """
    if not text or not text.strip() or not text.isascii() or "_" in text:
        raise ValueError(f"Not a number: {text!r}")

    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"Float is not finite: {text!r}")

    try:
        # Standard size packing raises on overflow instead of producing inf
        single = struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        raise ValueError(f"Float out of 32-bit range: {text!r}") from None

    if single != 0.0 and abs(single) < F32_MIN_NORMAL:
        raise ValueError(f"Float underflows 32-bit range: {text!r}")
    if value != 0.0 and single == 0.0:
        raise ValueError(f"Float underflows 32-bit range: {text!r}")
    return single
