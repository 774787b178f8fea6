"""
Package auth provides the token side of the SSO client.

This package implements:
- PKCE challenge derivation and the authorization redirect
- Verification of signed access tokens and their claims
- Access and refresh token values
- The client's error hierarchy

Protocol Usage Declaration:
  - OAuth 2.0:      USED for token values and grants
  - PKCE:           SUPPORTED in the authorization redirect
  - OpenID:         NOT USED anywhere in this package
"""

from .errors import (
    SSOError,
    ConfigurationError,
    NetworkError,
    ProtocolError,
    ValidationError,
)

from .pkce import (
    derive_challenge,
    build_authorization_url,
    generate_verifier,
    generate_state,
)

from .jwt import (
    Credential,
    VerifiedCredential,
    UnverifiedCredential,
    verify_credential,
)

from .types import (
    AccessToken,
    RefreshToken,
    TokenPair,
    ExpiryState,
)

__all__ = [
    # Errors
    'SSOError',
    'ConfigurationError',
    'NetworkError',
    'ProtocolError',
    'ValidationError',

    # PKCE
    'derive_challenge',
    'build_authorization_url',
    'generate_verifier',
    'generate_state',

    # Credentials
    'Credential',
    'VerifiedCredential',
    'UnverifiedCredential',
    'verify_credential',

    # Tokens
    'AccessToken',
    'RefreshToken',
    'TokenPair',
    'ExpiryState',
]
