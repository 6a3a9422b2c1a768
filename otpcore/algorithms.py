"""
algorithms.py - hash selection for the HMAC keyed-hash primitive.

The engines accept any ``cryptography`` HashAlgorithm instance; this module
turns user-facing names (CLI flags, JSON fields) into those instances and
refuses digests that are too short for dynamic truncation.
"""

from typing import Dict, Type

from cryptography.hazmat.primitives import hashes

from .config import MIN_DIGEST_SIZE
from .exceptions import UnsupportedDigest

ALGORITHMS: Dict[str, Type[hashes.HashAlgorithm]] = {
    "SHA1": hashes.SHA1,
    "SHA256": hashes.SHA256,
    "SHA512": hashes.SHA512,
    "SHA3256": hashes.SHA3_256,
    "SHA3512": hashes.SHA3_512,
}


def get_algorithm(name: str) -> hashes.HashAlgorithm:
    """
    Look up a hash by name.

    Names are case-insensitive and may contain dashes or underscores,
    so "sha-256", "SHA256" and "sha3_256" all resolve.

    Raises:
        UnsupportedDigest: if the name is unknown
    """
    key = name.upper().replace("-", "").replace("_", "")
    try:
        return ALGORITHMS[key]()
    except KeyError:
        supported = ", ".join(sorted(ALGORITHMS))
        raise UnsupportedDigest(f"unsupported algorithm {name!r} (supported: {supported})") from None


def check_algorithm(algorithm: hashes.HashAlgorithm) -> hashes.HashAlgorithm:
    """Validate a hash instance for use by the engines and return it."""
    if not isinstance(algorithm, hashes.HashAlgorithm):
        raise UnsupportedDigest(f"expected a cryptography HashAlgorithm, got {type(algorithm).__name__}")
    if algorithm.digest_size < MIN_DIGEST_SIZE:
        raise UnsupportedDigest(
            f"{algorithm.name} digest is {algorithm.digest_size} bytes, "
            f"dynamic truncation needs at least {MIN_DIGEST_SIZE}"
        )
    return algorithm
