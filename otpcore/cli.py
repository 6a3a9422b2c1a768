#!/usr/bin/env python3
"""
cli.py - command line wrapper around the otpcore engines.

Subcommands:
- hotp   : HOTP code for a given counter
- totp   : TOTP code for now (or --timestamp) and seconds left
- verify : check a TOTP/HOTP code, exit status 0 when valid, 1 when not

Secrets are Base32 by default (as shown by authenticator apps); use
--encoding hex or --encoding raw otherwise.

    otpcore hotp --secret ORSXG5A --counter 1
    otpcore totp --secret MNSTS5LFGEZDQOLF --timestamp 1707146471
    otpcore verify totp --secret MNSTS5LFGEZDQOLF --code 437617 --timestamp 1707146471
"""

import argparse
import logging
import sys
import time
from typing import List, Optional

from .algorithms import get_algorithm
from .config import COMMON_INTERVAL, DEFAULT_ALGORITHM, DEFAULT_DIGITS, DEFAULT_SECRET_ENCODING, MAX_TOKEN_DIGITS
from .encoding import ENCODINGS, decode_secret
from .exceptions import OTPError
from .hotp import HOTP
from .totp import TOTP

logger = logging.getLogger(__name__)

EXIT_VALID = 0
EXIT_INVALID = 1
EXIT_ERROR = 2


def _digits(value: str) -> int:
    digits = int(value)
    if not 1 <= digits <= MAX_TOKEN_DIGITS:
        raise argparse.ArgumentTypeError(f"must be between 1 and {MAX_TOKEN_DIGITS}")
    return digits


def _secret(args) -> bytes:
    return decode_secret(args.secret, args.encoding)


def _timestamp(args) -> int:
    # authenticator apps count in seconds
    return args.timestamp if args.timestamp is not None else int(time.time())


# --- CLI command handlers ---
def cmd_hotp(args) -> int:
    hotp = HOTP(_secret(args), args.counter, get_algorithm(args.algorithm))
    code = hotp.generate_str(args.digits)
    print(f"HOTP({args.digits}d, counter={args.counter}): {code}")
    return EXIT_VALID


def cmd_totp(args) -> int:
    totp = TOTP.new(_secret(args), args.interval, _timestamp(args), get_algorithm(args.algorithm))
    remaining = totp.remaining_sec
    code = totp.generate_str(args.digits)
    print(f"TOTP ({args.digits}d): {code}  (valid ~{remaining:2d}s)")
    return EXIT_VALID


def cmd_verify_totp(args) -> int:
    totp = TOTP.new(_secret(args), args.interval, _timestamp(args), get_algorithm(args.algorithm))
    if totp.verify_constant_time(args.code, args.digits):
        print("[+] TOTP code is VALID")
        return EXIT_VALID
    print("[-] TOTP code is INVALID")
    return EXIT_INVALID


def cmd_verify_hotp(args) -> int:
    hotp = HOTP(_secret(args), args.counter, get_algorithm(args.algorithm))
    if hotp.verify_constant_time(args.code, args.digits):
        print(f"[+] HOTP code is VALID (counter = {args.counter})")
        return EXIT_VALID
    print("[-] HOTP code is INVALID")
    return EXIT_INVALID


# --- Argparse builder ---
def _add_common(p: argparse.ArgumentParser) -> None:
    p.add_argument("--secret", required=True, help="Shared secret")
    p.add_argument(
        "--encoding",
        choices=ENCODINGS,
        default=DEFAULT_SECRET_ENCODING,
        help="How --secret is encoded (default: %(default)s)",
    )
    p.add_argument("--digits", type=_digits, default=DEFAULT_DIGITS, help="Number of OTP digits")
    p.add_argument("--algorithm", default=DEFAULT_ALGORITHM, help="HMAC hash: SHA1, SHA256, SHA512, SHA3-256, SHA3-512")


def _add_totp_options(p: argparse.ArgumentParser) -> None:
    p.add_argument("--interval", type=int, default=COMMON_INTERVAL, help="TOTP time step (seconds)")
    p.add_argument("--timestamp", type=int, help="Unix time in seconds (default: now)")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="otpcore", description="HOTP/TOTP generator and verifier")
    p.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    sub = p.add_subparsers(dest="cmd")

    # hotp
    ph = sub.add_parser("hotp", help="Generate HOTP code for a specific counter")
    _add_common(ph)
    ph.add_argument("--counter", type=int, required=True)
    ph.set_defaults(func=cmd_hotp)

    # totp
    pt = sub.add_parser("totp", help="Generate the current TOTP code")
    _add_common(pt)
    _add_totp_options(pt)
    pt.set_defaults(func=cmd_totp)

    # verify
    pv = sub.add_parser("verify", help="Verify an OTP code (TOTP or HOTP)")
    sub_v = pv.add_subparsers(dest="verify_type")

    pvt = sub_v.add_parser("totp", help="Verify a TOTP code")
    _add_common(pvt)
    _add_totp_options(pvt)
    pvt.add_argument("--code", required=True, help="OTP code to verify")
    pvt.set_defaults(func=cmd_verify_totp)

    pvh = sub_v.add_parser("hotp", help="Verify a HOTP code")
    _add_common(pvh)
    pvh.add_argument("--counter", type=int, required=True, help="Current HOTP counter")
    pvh.add_argument("--code", required=True, help="OTP code to verify")
    pvh.set_defaults(func=cmd_verify_hotp)

    return p


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="[%(levelname)s] %(name)s: %(message)s",
    )

    if not hasattr(args, "func"):
        parser.print_help()
        return EXIT_ERROR

    try:
        return args.func(args)
    except (OTPError, ValueError) as e:
        logger.debug("command %s failed", args.cmd, exc_info=True)
        print(f"[!] {e}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
