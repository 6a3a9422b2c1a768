"""
hotp.py - HMAC-based one-time passwords (RFC 4226).

    >>> from otpcore import HOTP
    >>> HOTP(b"test", 1).generate_6()
    431881

The secret is raw bytes. Base32 secrets from authenticator apps must be
decoded first (see ``otpcore.encoding.decode_secret``).
"""

import logging
from typing import Optional

from cryptography.hazmat.primitives import hashes, hmac

from .algorithms import check_algorithm
from .config import MAX_DIGITS
from .exceptions import InvalidKey
from .generation import GenerateOtpDefault, Verify
from .rfc import dynamic_truncate, int_to_bytes, reduce_digits

logger = logging.getLogger(__name__)


class HOTP(GenerateOtpDefault, Verify):
    """
    One HOTP computation for a fixed secret and counter.

    The HMAC context is keyed and fed the counter at construction; only
    that context is kept, not the secret. Generating finalizes the context,
    so an instance yields exactly one token: a second ``generate`` (or
    ``verify``) raises ``AlreadyFinalized``.
    """

    def __init__(
        self,
        secret: bytes,
        counter: int,
        algorithm: Optional[hashes.HashAlgorithm] = None,
    ) -> None:
        """
        Arguments:
            secret: raw key bytes
            counter: moving factor, unsigned 64-bit
            algorithm: hash for the HMAC, defaults to SHA1

        Raises:
            InvalidKey: if the HMAC primitive rejects the secret
            UnsupportedDigest: if the hash digest is shorter than 20 bytes
            ValueError: if the counter is outside the unsigned 64-bit range
        """
        if algorithm is None:
            algorithm = hashes.SHA1()
        self.algorithm = check_algorithm(algorithm)
        message = int_to_bytes(counter)

        try:
            self._hmac = hmac.HMAC(secret, self.algorithm)
        except (TypeError, ValueError) as e:
            raise InvalidKey(f"secret rejected by HMAC-{self.algorithm.name.upper()}: {e}") from e
        self._hmac.update(message)

        logger.debug("HOTP ready (algorithm=%s, counter=%d)", self.algorithm.name, counter)

    @classmethod
    def from_bytes(
        cls,
        secret: bytes,
        counter: int,
        algorithm: Optional[hashes.HashAlgorithm] = None,
    ) -> "HOTP":
        return cls(secret, counter, algorithm)

    def generate(self, digits: int) -> int:
        # checked before finalize so a bad call does not burn the instance
        if not 0 <= digits <= MAX_DIGITS:
            raise ValueError(f"digits must be between 0 and {MAX_DIGITS}, got {digits}")
        code = dynamic_truncate(self._hmac.finalize())
        return reduce_digits(code, digits)
