"""
Error classes for the SSO client.
"""

from typing import Optional


class SSOError(Exception):
    """Base SSO client error."""

    def __init__(self, message: str, error_code: str = None, details: dict = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or "SSO_ERROR"
        self.details = details or {}


class ConfigurationError(SSOError):
    """Malformed or incomplete client identity."""

    def __init__(self, message: str, details: dict = None):
        super().__init__(message, "CONFIGURATION_ERROR", details)


class NetworkError(SSOError):
    """Transport-level failure (connection refused, timeout)."""

    def __init__(self, message: str, details: dict = None):
        super().__init__(message, "NETWORK_ERROR", details)


class ProtocolError(SSOError):
    """The server answered, but not with a 200 JSON document."""

    def __init__(self, message: str, status_code: Optional[int] = None, details: dict = None):
        super().__init__(message, "PROTOCOL_ERROR", details)
        self.status_code = status_code


class ValidationError(SSOError):
    """Well-formed response with missing fields, bad signature or absent claim."""

    def __init__(self, message: str, details: dict = None):
        super().__init__(message, "VALIDATION_ERROR", details)
