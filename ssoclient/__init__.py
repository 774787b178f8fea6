"""
ssoclient Python Package

Token exchange and validation client for an OAuth2-style SSO server
"""

__version__ = "0.1.0"

from .core.client import SSOClient
from .core.config import ClientIdentity, HTTPConfig
from .auth import (
    AccessToken,
    RefreshToken,
    TokenPair,
    ExpiryState,
    SSOError,
    ConfigurationError,
    NetworkError,
    ProtocolError,
    ValidationError,
    derive_challenge,
    generate_verifier,
    generate_state,
)
from .token import MemoryTokenStore, TokenStore
from .transport import AiohttpTransport, HTTPResponse, Transport

__all__ = [
    "SSOClient",
    "ClientIdentity",
    "HTTPConfig",
    "AccessToken",
    "RefreshToken",
    "TokenPair",
    "ExpiryState",
    "SSOError",
    "ConfigurationError",
    "NetworkError",
    "ProtocolError",
    "ValidationError",
    "derive_challenge",
    "generate_verifier",
    "generate_state",
    "MemoryTokenStore",
    "TokenStore",
    "AiohttpTransport",
    "HTTPResponse",
    "Transport",
]
