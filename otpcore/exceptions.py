"""
exceptions.py - error types raised by the OTP core.

Everything the library raises on purpose derives from OTPError, and each
concrete error also subclasses the builtin a caller would naturally catch
(ValueError, ZeroDivisionError) so plain ``except ValueError`` keeps working.
"""

from cryptography.exceptions import AlreadyFinalized

__all__ = [
    "OTPError",
    "InvalidKey",
    "InvalidInterval",
    "UnsupportedDigest",
    "AlreadyFinalized",
]


class OTPError(Exception):
    """Base class for otpcore errors."""


class InvalidKey(OTPError, ValueError):
    """The HMAC primitive refused the secret."""


class InvalidInterval(OTPError, ZeroDivisionError):
    """TOTP interval is zero or negative."""


class UnsupportedDigest(OTPError, ValueError):
    """Unknown hash name, or a digest too short for dynamic truncation."""
