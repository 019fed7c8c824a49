"""
Play Store API error types.

Three kinds reach the caller: transport failures, undecodable responses and
rejected logins. Nothing is retried here.
"""

from typing import Any, Optional


class PlayStoreError(Exception):
    def __init__(self, code: str, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.details = details


class TransportError(PlayStoreError):
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__("transport_error", message, {"status_code": status_code} if status_code else None)
        self.status_code = status_code


class DecodeError(PlayStoreError):
    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__("decode_error", message, details)


class AuthenticationError(PlayStoreError):
    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__("auth_error", message, details)
