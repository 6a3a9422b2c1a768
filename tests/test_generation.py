import pytest

from otpcore import HOTP, TOTP, GenerateOtp, GenerateOtpDefault, Verify


class FixedOtp(GenerateOtpDefault, Verify):
    """Anything with generate(digits) gets the whole facade."""

    def __init__(self, code):
        self.code = code

    def generate(self, digits):
        return self.code % 10**digits if digits < 10 else self.code


def test_generate_otp_is_abstract():
    with pytest.raises(TypeError):
        GenerateOtp()


def test_facade_over_custom_generator():
    assert FixedOtp(1094287082).generate_6_str() == "287082"
    assert FixedOtp(81).generate_4_str() == "0081"
    assert FixedOtp(81).generate_8() == 81


@pytest.mark.parametrize("digits", [1, 4, 6, 8, 9])
def test_string_length_matches_digits(digits):
    code = HOTP(b"test", 7).generate_str(digits)
    assert len(code) == digits
    assert code.isdigit()


@pytest.mark.parametrize("digits", range(0, 10))
def test_value_in_range(digits):
    assert 0 <= HOTP(b"test", 3).generate(digits) < 10**digits


def test_verify_roundtrip_on_fresh_instances():
    expected = HOTP(b"test", 5).generate(6)
    assert HOTP(b"test", 5).verify(expected, 6)
    assert not HOTP(b"test", 5).verify(expected + 1, 6)


def test_verify_str():
    assert HOTP(b"test", 1).verify_str("431881", 6)
    assert not HOTP(b"test", 1).verify_str("431882", 6)
    # leading zeros matter for string comparison
    assert HOTP(b"test", 1).verify_str("81", 2)
    assert not HOTP(b"test", 1).verify_str("081", 2)


def test_verify_constant_time():
    assert HOTP(b"test", 1).verify_constant_time("431881", 6)
    assert not HOTP(b"test", 1).verify_constant_time("431880", 6)
    assert not HOTP(b"test", 1).verify_constant_time("4318810", 6)
    assert not HOTP(b"test", 1).verify_constant_time("", 6)


def test_verify_constant_time_totp():
    assert TOTP.new(b"test", 75, 112345).verify_constant_time("677062", 6)


def test_verify_constant_time_accepts_int():
    assert HOTP(b"test", 1).verify_constant_time(431881, 6)
    assert HOTP(b"test", 1).verify_constant_time(81, 2)
    assert not HOTP(b"test", 1).verify_constant_time(431882, 6)
