import base64

import pytest

from otpcore_server import create_app

RFC4226_SECRET = b"12345678901234567890"

# RFC 6238 Appendix B seeds, one per hash
RFC6238_SEEDS = {
    "SHA1": b"12345678901234567890",
    "SHA256": b"12345678901234567890123456789012",
    "SHA512": b"1234567890123456789012345678901234567890123456789012345678901234",
}


def b32(value: str) -> bytes:
    return base64.b32decode(value, casefold=True)


@pytest.fixture
def app():
    return create_app({"TESTING": True})


@pytest.fixture
def client(app):
    return app.test_client()
