"""
OTP API ROUTES - FLASK BLUEPRINT

Every endpoint takes a JSON body carrying the secret and returns JSON.
Optional fields fall back to the app config (DEFAULT_DIGITS,
DEFAULT_INTERVAL, DEFAULT_ALGORITHM, DEFAULT_SECRET_ENCODING).

EXAMPLE:
curl -X POST http://localhost:5000/hotp -H "Content-Type: application/json" \
     -d '{"secret": "ORSXG5A", "counter": 1}'
"""

import time
from typing import Any, Dict, Optional

from flask import Blueprint, current_app, jsonify, request

from otpcore.algorithms import get_algorithm
from otpcore.config import MAX_TOKEN_DIGITS
from otpcore.encoding import decode_secret
from otpcore.hotp import HOTP
from otpcore.totp import TOTP

otp_bp = Blueprint("otp", __name__)


def _body(*required: str) -> Dict[str, Any]:
    data = request.get_json(silent=True) or {}
    missing = [name for name in required if name not in data]
    if missing:
        raise ValueError(f"{', '.join(missing)} required")
    return data


def _int(data: Dict[str, Any], name: str, default: Optional[int] = None) -> int:
    """Integer field of a request body; JSON null, floats and booleans are refused."""
    value = data.get(name, default)
    if isinstance(value, (bool, float)):
        raise ValueError(f"{name} must be an integer")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValueError(f"{name} must be an integer") from None


def _options(data: Dict[str, Any]):
    """Secret bytes, digit count and hash for a request body."""
    cfg = current_app.config
    encoding = data.get("encoding", cfg["DEFAULT_SECRET_ENCODING"])
    secret = decode_secret(str(data["secret"]), encoding)
    digits = _int(data, "digits", cfg["DEFAULT_DIGITS"])
    if not 1 <= digits <= MAX_TOKEN_DIGITS:
        raise ValueError(f"digits must be between 1 and {MAX_TOKEN_DIGITS}")
    algorithm = get_algorithm(str(data.get("algorithm", cfg["DEFAULT_ALGORITHM"])))
    return secret, digits, algorithm


def _build_totp(data: Dict[str, Any]):
    secret, digits, algorithm = _options(data)
    interval = _int(data, "interval", current_app.config["DEFAULT_INTERVAL"])
    # seconds, as authenticator apps count
    timestamp = _int(data, "timestamp") if "timestamp" in data else int(time.time())
    return TOTP.new(secret, interval, timestamp, algorithm), digits


@otp_bp.route("/hotp", methods=["POST"])
def get_hotp():
    """
    HOTP CODE

      {"secret": "ORSXG5A", "counter": 1, "digits": 6}
      -> {"code": "431881", "counter": 1, "digits": 6}
    """
    data = _body("secret", "counter")
    secret, digits, algorithm = _options(data)
    counter = _int(data, "counter")

    code = HOTP(secret, counter, algorithm).generate_str(digits)
    return jsonify({"code": code, "counter": counter, "digits": digits})


@otp_bp.route("/totp", methods=["POST"])
def get_totp():
    """
    TOTP CODE

      {"secret": "MNSTS5LFGEZDQOLF", "timestamp": 1707146471}
      -> {"code": "437617", "remaining": 19, "interval": 30, "digits": 6}

    ``timestamp`` defaults to the current Unix time in seconds.
    """
    data = _body("secret")
    totp, digits = _build_totp(data)
    remaining = totp.remaining_sec
    code = totp.generate_str(digits)
    return jsonify({"code": code, "remaining": remaining, "interval": totp.interval, "digits": digits})


@otp_bp.route("/verify_hotp", methods=["POST"])
def verify_hotp_route():
    """
    CHECK A HOTP CODE

      {"secret": "...", "code": "431881", "counter": 1} -> {"valid": true}
    """
    data = _body("secret", "code", "counter")
    secret, digits, algorithm = _options(data)

    hotp = HOTP(secret, _int(data, "counter"), algorithm)
    valid = hotp.verify_constant_time(str(data["code"]), digits)
    return jsonify({"valid": valid})


@otp_bp.route("/verify_totp", methods=["POST"])
def verify_totp_route():
    """
    CHECK A TOTP CODE

      {"secret": "...", "code": "437617", "timestamp": 1707146471} -> {"valid": true}

    Only the window containing ``timestamp`` is checked.
    """
    data = _body("secret", "code")
    totp, digits = _build_totp(data)
    valid = totp.verify_constant_time(str(data["code"]), digits)
    return jsonify({"valid": valid})
