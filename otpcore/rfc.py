"""
rfc.py - pure helpers of the HOTP/TOTP pipeline (RFC 4226 / RFC 6238).

Nothing here touches HMAC state; these functions only move integers and
bytes around so they can be tested against the RFC appendices directly.

Pipeline:
    counter -> int_to_bytes -> HMAC -> dynamic_truncate -> reduce_digits
    -> format_code (optional)
"""

import struct
import time
from typing import Tuple

from .config import POW10
from .exceptions import InvalidInterval

_UINT64_LIMIT = 1 << 64


# --- RFC helpers -----------------------------------------------------------
def int_to_bytes(i: int) -> bytes:
    """
    Encode the counter as the 8-byte big-endian message RFC 4226 requires.

    Example: int_to_bytes(1) -> b'\\x00\\x00\\x00\\x00\\x00\\x00\\x00\\x01'

    Raises:
        ValueError: if the counter does not fit an unsigned 64-bit integer
    """
    if not 0 <= i < _UINT64_LIMIT:
        raise ValueError(f"counter must be an unsigned 64-bit integer, got {i}")
    return struct.pack(">Q", i)


def dynamic_truncate(hmac_digest: bytes) -> int:
    """
    Apply RFC 4226 dynamic truncation.

    - offset = low 4 bits of the last byte
    - read 4 bytes at offset as a big-endian integer
    - clear the top bit, leaving a 31-bit unsigned value

    Arguments:
        hmac_digest: HMAC output, at least 20 bytes (offset + 4 <= 19)
    """
    offset = hmac_digest[-1] & 0x0F
    (code,) = struct.unpack_from(">I", hmac_digest, offset)
    return code & 0x7FFFFFFF


def reduce_digits(code: int, digits: int) -> int:
    """
    Reduce a truncated value to ``digits`` decimal digits.

    Only 10**0 .. 10**9 are reduced. For ``digits >= 10`` the 31-bit value is
    returned untouched; it is always below 10**10 anyway.
    """
    if digits < 0:
        raise ValueError(f"digits must be non-negative, got {digits}")
    if digits < len(POW10):
        return code % POW10[digits]
    return code


def format_code(value: int, digits: int) -> str:
    """
    Render an OTP value left-padded with '0' to ``digits`` characters.

    Padding saturates at zero: a value already wider than ``digits`` is
    rendered in full. ``digits == 0`` renders as the empty string.
    """
    if digits == 0:
        return ""
    return str(value).zfill(digits)


def counter_window(interval: int, timestamp: int) -> Tuple[int, int]:
    """
    Derive the TOTP counter and what is left of its window.

    Both arguments are taken in the same unit:

        counter   = timestamp // interval
        remaining = interval - timestamp % interval

    Arguments:
        interval: window length, must be positive
        timestamp: Unix time in the unit of ``interval``

    Returns:
        (counter, remaining)

    Raises:
        InvalidInterval: if interval is zero or negative
    """
    if interval <= 0:
        raise InvalidInterval(f"interval must be positive, got {interval}")
    return timestamp // interval, interval - timestamp % interval


def time_now() -> int:
    """Current Unix time in milliseconds."""
    return time.time_ns() // 1_000_000
