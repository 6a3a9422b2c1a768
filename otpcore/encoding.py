"""
encoding.py - turn user-supplied secrets into the raw bytes the engines take.

The engines never decode; the CLI and the HTTP API call ``decode_secret``
on whatever the user typed.
"""

import base64
import binascii

ENCODINGS = ("base32", "hex", "raw")


def decode_secret(value: str, encoding: str = "base32") -> bytes:
    """
    Decode a secret string.

    - base32: case-insensitive, spaces ignored, '=' padding restored when
      missing (authenticator apps usually drop it)
    - hex: plain hexadecimal
    - raw: the UTF-8 bytes of the string itself

    Raises:
        ValueError: unknown encoding or malformed input
    """
    if encoding == "base32":
        secret = value.replace(" ", "").rstrip("=")
        missing_padding = len(secret) % 8
        if missing_padding:
            secret += "=" * (8 - missing_padding)
        try:
            return base64.b32decode(secret, casefold=True)
        except binascii.Error as e:
            raise ValueError("Invalid Base32 secret") from e
    if encoding == "hex":
        try:
            return bytes.fromhex(value)
        except ValueError as e:
            raise ValueError("Invalid hex secret") from e
    if encoding == "raw":
        return value.encode("utf-8")
    raise ValueError(f"unknown secret encoding {encoding!r}, expected one of {', '.join(ENCODINGS)}")
