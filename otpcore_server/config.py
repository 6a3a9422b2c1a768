"""
Flask configuration for the OTP API.

Values here are defaults; ``create_app`` overrides them from OTPCORE_*
environment variables (e.g. OTPCORE_DEFAULT_DIGITS=8, OTPCORE_CORS_ORIGINS)
and then from the mapping passed to it.
"""

from otpcore.config import COMMON_INTERVAL, DEFAULT_ALGORITHM, DEFAULT_DIGITS, DEFAULT_SECRET_ENCODING


class Config:
    DEFAULT_DIGITS = DEFAULT_DIGITS
    DEFAULT_INTERVAL = COMMON_INTERVAL
    DEFAULT_ALGORITHM = DEFAULT_ALGORITHM
    DEFAULT_SECRET_ENCODING = DEFAULT_SECRET_ENCODING
    CORS_ORIGINS = "*"
    LOG_LEVEL = "INFO"
