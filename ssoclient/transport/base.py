"""
HTTP transport interface used by the SSO client.
"""

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from ..auth.errors import ProtocolError

Fields = Mapping[str, str]


@dataclass(frozen=True)
class HTTPResponse:
    """Status and raw body of a completed request."""
    status_code: int
    body: bytes = b""
    headers: Dict[str, str] = field(default_factory=dict)

    def expect(self, status_code: int = 200) -> "HTTPResponse":
        """Raise ProtocolError unless the status matches."""
        if self.status_code != status_code:
            raise ProtocolError(
                "unexpected status",
                status_code=self.status_code,
                details={"expected": status_code, "received": self.status_code},
            )
        return self

    def json(self) -> Dict[str, Any]:
        """Decode the body as a JSON object."""
        try:
            data = json.loads(self.body)
        except (ValueError, UnicodeDecodeError) as e:
            raise ProtocolError("malformed response", status_code=self.status_code) from e

        if not isinstance(data, dict):
            raise ProtocolError("malformed response", status_code=self.status_code)
        return data


class Transport(ABC):
    """
    Issues HTTP requests on behalf of the client.

    Implementations raise NetworkError for transport-level failures and
    return every response the server produced, whatever its status.
    """

    @abstractmethod
    async def post(
        self,
        url: str,
        fields: Fields,
        params: Optional[Fields] = None,
        files: Optional[Mapping[str, str]] = None,
    ) -> HTTPResponse:
        """Submit ``fields`` form encoded; ``files`` maps field names to file paths."""
        pass

    @abstractmethod
    async def get(self, url: str, params: Optional[Fields] = None) -> HTTPResponse:
        """Issue a GET request with ``params`` as the query string."""
        pass

    async def close(self) -> None:
        """Release resources held by the transport."""
        pass
