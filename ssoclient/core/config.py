"""
Configuration module for the SSO client.
"""

import base64
import binascii
from datetime import timedelta
from dataclasses import dataclass, field
from urllib.parse import unquote, urlsplit
import os

from ..auth.errors import ConfigurationError


@dataclass(frozen=True)
class ClientIdentity:
    """Endpoint, app id and secret an application authenticates with"""
    endpoint: str
    app_id: int
    app_secret: str = field(repr=False)

    def __post_init__(self):
        if not self.app_secret:
            raise ConfigurationError("App Secret is missing")
        if not self.endpoint:
            raise ConfigurationError("Endpoint is missing")
        if isinstance(self.app_id, bool) or not isinstance(self.app_id, int):
            raise ConfigurationError(
                "App id must be an integer", {"app_id": repr(self.app_id)}
            )
        object.__setattr__(self, "endpoint", self.endpoint.rstrip("/"))

    def signing_key(self) -> bytes:
        """
        HMAC key for access tokens: the app secret is stored base64 encoded
        and the server signs with the decoded bytes.
        """
        try:
            return base64.b64decode(self.app_secret, validate=True)
        except (binascii.Error, ValueError) as e:
            raise ConfigurationError("App Secret is not valid base64") from e

    @classmethod
    def from_credentials(cls, credentials: str) -> "ClientIdentity":
        """
        Parse a connection string of the form
        ``scheme://<app_id>:<secret>@host[:port]/path``.
        """
        parts = urlsplit(credentials)

        if not parts.scheme or not parts.hostname:
            raise ConfigurationError("Credentials must be an absolute URL")

        try:
            port = parts.port
        except ValueError as e:
            raise ConfigurationError("Invalid port in credentials") from e

        try:
            app_id = int(unquote(parts.username or ""))
        except ValueError as e:
            raise ConfigurationError("App id is missing or not numeric") from e

        host = f"{parts.hostname}:{port}" if port else parts.hostname
        return cls(
            endpoint=f"{parts.scheme}://{host}{parts.path}",
            app_id=app_id,
            app_secret=unquote(parts.password or ""),
        )

    @classmethod
    def from_env(cls) -> "ClientIdentity":
        """Create the identity from environment variables"""
        credentials = os.getenv("SSO_CREDENTIALS")
        if credentials:
            return cls.from_credentials(credentials)

        app_id = os.getenv("SSO_APP_ID", "")
        try:
            parsed_id = int(app_id)
        except ValueError as e:
            raise ConfigurationError("SSO_APP_ID is missing or not numeric") from e

        return cls(
            endpoint=os.getenv("SSO_ENDPOINT", ""),
            app_id=parsed_id,
            app_secret=os.getenv("SSO_APP_SECRET", ""),
        )


@dataclass
class HTTPConfig:
    """Settings for the HTTP transport"""
    timeout: timedelta = field(default_factory=lambda: timedelta(seconds=30))
    user_agent: str = "ssoclient-py/0.1.0"

    @classmethod
    def from_env(cls) -> "HTTPConfig":
        """Create configuration from environment variables"""
        return cls(
            timeout=timedelta(
                seconds=float(os.getenv("SSO_HTTP_TIMEOUT_SECONDS", "30"))
            ),
        )

    def validate(self) -> bool:
        """Validate the configuration"""
        if self.timeout.total_seconds() <= 0:
            raise ConfigurationError("timeout must be positive")
        if not self.user_agent:
            raise ConfigurationError("user_agent is required")
        return True
