"""
otpcore_server
==============

Stateless HTTP API over the otpcore engines (Flask blueprint + CORS).
Secrets travel in each request body; nothing is stored server side.
"""

from .app import create_app

__all__ = ["create_app"]
