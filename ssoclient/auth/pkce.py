"""
PKCE helpers for the authorization code flow.

The authorization server compares the challenge sent with the redirect against
the SHA-256 hex digest of the verifier presented at the token endpoint, so the
challenge is hex encoded rather than base64url encoded.
"""

import hashlib
import logging
import secrets
from typing import Optional
from urllib.parse import urlencode

logger = logging.getLogger(__name__)

CHALLENGE_METHOD = "S256"
MIN_VERIFIER_LENGTH = 43
MAX_VERIFIER_LENGTH = 128


def derive_challenge(verifier: str) -> str:
    """Return the code challenge (SHA-256 hex digest) for a verifier."""
    return hashlib.sha256(verifier.encode("utf-8")).hexdigest()


def generate_verifier(length: int = 64) -> str:
    """Generate a random URL-safe verifier of ``length`` characters."""
    if not MIN_VERIFIER_LENGTH <= length <= MAX_VERIFIER_LENGTH:
        raise ValueError(
            f"Verifier length must be between {MIN_VERIFIER_LENGTH} and {MAX_VERIFIER_LENGTH}"
        )
    # token_urlsafe yields ~1.3 characters per byte
    return secrets.token_urlsafe(length)[:length]


def generate_state() -> str:
    """Generate an opaque state value for CSRF protection."""
    return secrets.token_urlsafe(16)


def build_authorization_url(
    endpoint: str,
    client_id: int,
    state: str,
    verifier: str,
    return_to: str,
    audience: Optional[int] = None,
) -> str:
    """
    Build the URL the user agent is sent to in order to start authentication.

    The server itself is not contacted; the user agent performs the request.

    Args:
        endpoint: Base URL of the authentication server
        client_id: App id of the application requesting authentication
        state: Opaque value echoed back on the redirect
        verifier: PKCE verifier, kept secret until the code exchange
        return_to: URL the server redirects to once the user authenticated
        audience: App id of the application whose data is requested, or None
            (or 0) to access the user's account on the authentication server itself

    Returns:
        The redirect URL
    """
    params = [
        ("response_type", "code"),
        ("client", str(client_id)),
        ("state", state),
        ("redirect", return_to),
        ("code_challenge", derive_challenge(verifier)),
        ("code_challenge_method", CHALLENGE_METHOD),
    ]

    if audience:
        params.append(("audience", str(audience)))

    url = f"{endpoint.rstrip('/')}/auth/oauth?{urlencode(params)}"
    logger.debug(f"Built authorization redirect for client {client_id}")
    return url
