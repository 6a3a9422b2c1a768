"""Defaults shared by the library, the CLI and the HTTP API."""

DEFAULT_DIGITS = 6          # authenticator apps expect 6
COMMON_INTERVAL = 30        # TOTP step adopted by most services
DEFAULT_ALGORITHM = "SHA1"  # RFC 4226 / Google Authenticator default
DEFAULT_SECRET_ENCODING = "base32"

# dynamic truncation reads up to offset 15 + 4 bytes
MIN_DIGEST_SIZE = 20

# 10**0 .. 10**9; digit counts past the table skip reduction
POW10 = tuple(10 ** i for i in range(10))

# digit count is an unsigned 8-bit value
MAX_DIGITS = 255
# longest token the CLI and the API hand out
MAX_TOKEN_DIGITS = 10
