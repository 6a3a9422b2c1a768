"""
otpcore
=======

HOTP (RFC 4226) and TOTP (RFC 6238) one-time passwords over raw secret
bytes, with the HMAC supplied by ``cryptography``.

Core algorithm
--------------
- HOTP: code = Truncate(HMAC(key=secret, msg=counter)) mod 10^digits
- TOTP: HOTP with counter = timestamp // interval
- Dynamic truncation: 4 bytes at offset (last byte & 0x0F), top bit cleared

Quick start
-----------
>>> from otpcore import HOTP, TOTP, COMMON_INTERVAL
>>> HOTP(b"test", 1).generate_6_str()
'431881'
>>> totp = TOTP.new(b"test", 75, 112345)
>>> totp.remaining_sec
5
>>> totp.generate_6_str()
'677062'

Instances are one-shot: generating or verifying consumes them.
"""

from .config import COMMON_INTERVAL, DEFAULT_DIGITS
from .exceptions import AlreadyFinalized, InvalidInterval, InvalidKey, OTPError, UnsupportedDigest
from .generation import GenerateOtp, GenerateOtpDefault, Verify
from .hotp import HOTP
from .totp import TOTP

__version__ = "0.3.0"

__all__ = [
    "HOTP",
    "TOTP",
    "COMMON_INTERVAL",
    "DEFAULT_DIGITS",
    "GenerateOtp",
    "GenerateOtpDefault",
    "Verify",
    "OTPError",
    "InvalidKey",
    "InvalidInterval",
    "UnsupportedDigest",
    "AlreadyFinalized",
]
