"""
Token value types for the SSO client.
"""

import time
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Iterator, Optional, Union

from .jwt import Credential, UnverifiedCredential

if TYPE_CHECKING:
    from ..core.client import SSOClient


class ExpiryState(Enum):
    """Liveness of a token as far as it can be told locally."""
    ACTIVE = "active"
    EXPIRED = "expired"
    UNKNOWN = "unknown"

    def __bool__(self) -> bool:
        # UNKNOWN is not expired locally; renewal is attempted and the server decides
        return self is ExpiryState.EXPIRED


class AccessToken:
    """
    Access token obtained from a code, refresh or client credentials exchange.

    The expiry is fixed at construction; liveness is always derived from it.
    """

    __slots__ = ("_issuer", "_credential", "_expires_at")

    def __init__(self, issuer: "SSOClient", credential: Union[Credential, str], expires_at: int):
        if isinstance(credential, str):
            credential = UnverifiedCredential(credential)
        self._issuer = issuer
        self._credential = credential
        self._expires_at = int(expires_at)

    @property
    def issuer(self) -> "SSOClient":
        return self._issuer

    @property
    def credential(self) -> Credential:
        return self._credential

    @property
    def expires_at(self) -> int:
        return self._expires_at

    def get_id(self) -> str:
        """The token string presented to resource servers."""
        return self._credential.raw

    def is_expired(self, now: Optional[float] = None) -> bool:
        """True once the current time is strictly past the expiry."""
        if now is None:
            now = time.time()
        return now > self._expires_at

    def audience(self) -> Optional[int]:
        """
        App id this token grants access to.

        Callers must compare this with their own app id before trusting the
        token; it is not enforced on exchange. Returns None for unverified
        credentials.
        """
        return self._credential.audience()

    def client(self) -> Optional[int]:
        """App id of the application the token was issued to."""
        return self._credential.client()

    def __repr__(self) -> str:
        return (
            f"AccessToken(verified={self._credential.verified}, "
            f"expires_at={self._expires_at})"
        )


class RefreshToken:
    """Opaque renewal credential, optionally with a known expiry."""

    __slots__ = ("_issuer", "_token", "_expires_at")

    def __init__(self, issuer: "SSOClient", token: str, expires_at: Optional[int] = None):
        self._issuer = issuer
        self._token = token
        self._expires_at = int(expires_at) if expires_at is not None else None

    @property
    def issuer(self) -> "SSOClient":
        return self._issuer

    @property
    def expires_at(self) -> Optional[int]:
        return self._expires_at

    def get_id(self) -> str:
        return self._token

    def is_expired(self, now: Optional[float] = None) -> ExpiryState:
        """
        UNKNOWN when the server did not declare an expiry. Only EXPIRED is
        truthy, so ``if refresh.is_expired():`` reads as expected.
        """
        if self._expires_at is None:
            return ExpiryState.UNKNOWN
        if now is None:
            now = time.time()
        return ExpiryState.EXPIRED if now > self._expires_at else ExpiryState.ACTIVE

    async def renew(self) -> "TokenPair":
        """
        Exchange this refresh token for a new access/refresh pair.

        The server rotates the refresh credential, so this object must not be
        used again after a successful renewal. A second call is still sent and
        the server's rejection is raised.
        """
        return await self._issuer.exchange_refresh(self)

    def __repr__(self) -> str:
        return f"RefreshToken(expires_at={self._expires_at})"


@dataclass(frozen=True)
class TokenPair:
    """Access token plus the refresh token issued with it, if any."""
    access: AccessToken
    refresh: Optional[RefreshToken] = None

    def __iter__(self) -> Iterator:
        return iter((self.access, self.refresh))
