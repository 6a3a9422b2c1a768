"""
generation.py - generation and verification built on a single primitive.

Any class that implements ``generate(digits) -> int`` gets the string,
fixed-digit and verification forms by mixing these classes in. Every method
ends up calling ``generate`` once, so each of them consumes the instance:
construct a fresh HOTP/TOTP for every attempt.

Example:
    >>> HOTP(b"test", 1).generate_6_str()
    '431881'
    >>> HOTP(b"test", 1).verify_str("431881", 6)
    True
"""

import abc
from typing import Union

from cryptography.hazmat.primitives import constant_time

from .rfc import format_code


class GenerateOtp(abc.ABC):
    """Generate an OTP as a number or a zero-padded string."""

    @abc.abstractmethod
    def generate(self, digits: int) -> int:
        """Return the OTP reduced to ``digits`` digits. Consumes the instance."""

    def generate_str(self, digits: int) -> str:
        return format_code(self.generate(digits), digits)


class GenerateOtpDefault(GenerateOtp):
    """Shortcuts for the common 4, 6 and 8 digit tokens."""

    def generate_4(self) -> int:
        return self.generate(4)

    def generate_6(self) -> int:
        return self.generate(6)

    def generate_8(self) -> int:
        return self.generate(8)

    def generate_4_str(self) -> str:
        return self.generate_str(4)

    def generate_6_str(self) -> str:
        return self.generate_str(6)

    def generate_8_str(self) -> str:
        return self.generate_str(8)


class Verify(GenerateOtp):
    """
    Compare a caller-supplied token with the regenerated one.

    ``verify`` and ``verify_str`` use plain ``==`` and therefore return as
    soon as a mismatch is found. ``verify_constant_time`` compares in time
    independent of where the tokens differ and is what request handlers
    should use.
    """

    def verify(self, candidate: int, digits: int) -> bool:
        return self.generate(digits) == candidate

    def verify_str(self, candidate: str, digits: int) -> bool:
        return self.generate_str(digits) == candidate

    def verify_constant_time(self, candidate: Union[int, str], digits: int) -> bool:
        """Accepts the token as typed (str) or as a number, padded like ``generate_str``."""
        if isinstance(candidate, int):
            candidate = format_code(candidate, digits)
        expected = self.generate_str(digits)
        return constant_time.bytes_eq(expected.encode("ascii"), candidate.encode("utf-8"))
