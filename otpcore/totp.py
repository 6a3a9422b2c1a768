"""
totp.py - time-based one-time passwords (RFC 6238).

A TOTP is an HOTP whose counter is ``timestamp // interval``. The window is
computed once, at construction, together with how much of it is left.

Unit note: ``interval`` and ``timestamp`` are divided as given. The default
clock returns Unix milliseconds, so callers wanting authenticator-compatible
30 second windows pass a seconds timestamp explicitly:

    >>> import time
    >>> totp = TOTP.new(secret, COMMON_INTERVAL, int(time.time()))
    >>> totp.remaining_sec, totp.generate_6_str()
"""

import logging
from typing import Callable, Optional

from cryptography.hazmat.primitives import hashes

from .config import COMMON_INTERVAL
from .generation import GenerateOtpDefault, Verify
from .hotp import HOTP
from .rfc import counter_window, time_now

logger = logging.getLogger(__name__)

__all__ = ["TOTP", "COMMON_INTERVAL"]


class TOTP(GenerateOtpDefault, Verify):
    """
    One TOTP computation frozen at a point in time.

    ``interval`` and ``remaining_sec`` stay as computed at construction;
    reading them later does not consult the clock again. Generation is
    delegated to the inner HOTP and is one-shot like it.
    """

    def __init__(
        self,
        secret: bytes,
        interval: int,
        timestamp: Optional[int] = None,
        algorithm: Optional[hashes.HashAlgorithm] = None,
        clock: Optional[Callable[[], int]] = None,
    ) -> None:
        """
        Arguments:
            secret: raw key bytes
            interval: window length, same unit as the timestamp
            timestamp: Unix time; read from ``clock`` when None
            algorithm: hash for the HMAC, defaults to SHA1
            clock: zero-argument callable, defaults to ``time_now`` (ms)

        Raises:
            InvalidInterval: if interval is zero or negative
            InvalidKey: propagated from the HOTP construction
        """
        if timestamp is None:
            timestamp = (clock or time_now)()
        counter, remaining = counter_window(interval, timestamp)

        self._hotp = HOTP(secret, counter, algorithm)
        self._interval = interval
        self._remaining = remaining
        logger.debug("TOTP window %d, %d of %d left", counter, remaining, interval)

    @classmethod
    def new(
        cls,
        secret: bytes,
        interval: int,
        timestamp: int,
        algorithm: Optional[hashes.HashAlgorithm] = None,
    ) -> "TOTP":
        """TOTP at an explicit timestamp."""
        return cls(secret, interval, timestamp, algorithm)

    @classmethod
    def from_bytes(
        cls,
        secret: bytes,
        interval: int,
        algorithm: Optional[hashes.HashAlgorithm] = None,
        clock: Optional[Callable[[], int]] = None,
    ) -> "TOTP":
        """TOTP at the current clock reading."""
        return cls(secret, interval, None, algorithm, clock)

    @property
    def interval(self) -> int:
        return self._interval

    @property
    def remaining_sec(self) -> int:
        """What was left of the window when the instance was built."""
        return self._remaining

    @property
    def algorithm(self) -> hashes.HashAlgorithm:
        return self._hotp.algorithm

    def generate(self, digits: int) -> int:
        return self._hotp.generate(digits)
