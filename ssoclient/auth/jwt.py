"""
Signed token credentials for the SSO client.

An access credential is either verified (a JWT whose HMAC-SHA256 signature
matched the application secret, with its claims available) or unverified (the
raw string, as handed out for legacy and client credentials tokens). Both
share one interface so callers never need to check which one they hold.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import jwt

from .errors import ValidationError

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"


class Credential(ABC):
    """A token value as presented to resource servers."""

    raw: str

    @abstractmethod
    def audience(self) -> Optional[int]:
        """App id the token grants access to."""
        pass

    @abstractmethod
    def client(self) -> Optional[int]:
        """App id on whose behalf the token was issued."""
        pass

    @property
    def verified(self) -> bool:
        return False

    def __str__(self) -> str:
        return self.raw


@dataclass(frozen=True)
class UnverifiedCredential(Credential):
    """Opaque token string; claims are not applicable."""
    raw: str

    def audience(self) -> Optional[int]:
        return None

    def client(self) -> Optional[int]:
        return None


@dataclass(frozen=True)
class VerifiedCredential(Credential):
    """JWT whose signature was checked against the application secret."""
    raw: str
    claims: Dict[str, Any] = field(default_factory=dict)

    @property
    def verified(self) -> bool:
        return True

    def audience(self) -> Optional[int]:
        return _app_id(self.claims, "aud")

    def client(self) -> Optional[int]:
        # The server stores the requesting application in "iss", not the token issuer
        return _app_id(self.claims, "iss")


def _app_id(claims: Dict[str, Any], name: str) -> int:
    """Read an app id claim, accepting ints, numeric strings and single-item lists."""
    if name not in claims or claims[name] is None:
        raise ValidationError(f"Token has no '{name}' claim", {"claim": name})

    value = claims[name]
    if isinstance(value, (list, tuple)):
        if len(value) != 1:
            raise ValidationError(f"Ambiguous '{name}' claim", {"claim": name})
        value = value[0]

    if isinstance(value, bool):
        raise ValidationError(f"Invalid '{name}' claim", {"claim": name})

    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Invalid '{name}' claim", {"claim": name}) from e


def verify_credential(token: str, key: bytes) -> VerifiedCredential:
    """
    Verify a JWT with HMAC-SHA256 keyed by the decoded application secret.

    Audience and issuer are not enforced. Liveness is taken from the token
    envelope, so the time claims (exp, iat, nbf) are not checked either.

    Raises:
        ValidationError: if the signature does not match or the token cannot be decoded
    """
    try:
        claims = jwt.decode(
            token,
            key,
            algorithms=[ALGORITHM],
            options={
                "verify_aud": False,
                "verify_iss": False,
                "verify_exp": False,
                "verify_iat": False,
                "verify_nbf": False,
            },
        )
    except jwt.InvalidSignatureError as e:
        logger.warning("Token signature verification failed")
        raise ValidationError("signature mismatch") from e
    except jwt.InvalidTokenError as e:
        logger.warning(f"Token could not be decoded: {e}")
        raise ValidationError("malformed token", {"reason": str(e)}) from e

    return VerifiedCredential(raw=token, claims=claims)
