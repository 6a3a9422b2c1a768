"""
FLASK APP FACTORY - OTP API SERVER
==================================

Builds the Flask app, enables CORS for browser clients and registers the
OTP blueprint.

    flask --app otpcore_server:create_app run

Endpoints (JSON in, JSON out):
- POST /hotp          HOTP code for a counter
- POST /totp          TOTP code for now (or a given timestamp)
- POST /verify_hotp   check a HOTP code
- POST /verify_totp   check a TOTP code
"""

import logging
from typing import Any, Mapping, Optional

from flask import Flask, jsonify
from flask_cors import CORS

from otpcore.exceptions import OTPError

from .config import Config
from .routes import otp_bp

logger = logging.getLogger(__name__)


def create_app(config: Optional[Mapping[str, Any]] = None) -> Flask:
    """
    Create the API app.

    Configuration is layered: ``Config`` defaults, then OTPCORE_* environment
    variables, then ``config``.
    """
    app = Flask(__name__)
    app.config.from_object(Config)
    app.config.from_prefixed_env("OTPCORE")
    if config:
        app.config.update(config)

    logging.getLogger("otpcore").setLevel(app.config["LOG_LEVEL"])
    logger.setLevel(app.config["LOG_LEVEL"])

    CORS(app, origins=app.config["CORS_ORIGINS"])
    app.register_blueprint(otp_bp)

    @app.errorhandler(OTPError)
    @app.errorhandler(ValueError)
    def handle_bad_input(e):
        logger.warning("rejected request: %s", e)
        return jsonify({"error": str(e)}), 400

    @app.route("/", methods=["GET"])
    def index():
        return jsonify(
            {
                "service": "otpcore",
                "endpoints": {
                    "POST /hotp": "HOTP code for {secret, counter}",
                    "POST /totp": "TOTP code for {secret, interval?, timestamp?}",
                    "POST /verify_hotp": "check {secret, code, counter}",
                    "POST /verify_totp": "check {secret, code, interval?, timestamp?}",
                },
            }
        )

    return app


if __name__ == "__main__":
    create_app().run(debug=True, host="0.0.0.0", port=5000)
