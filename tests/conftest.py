"""
Shared fixtures for the SSO client tests.
"""

import base64
import json
from typing import List, Mapping, Optional

import jwt
import pytest

from ssoclient import ClientIdentity, HTTPResponse, SSOClient, Transport

SIGNING_KEY = b"s3cret-shared-between-app-and-sso-server"
SECRET = base64.b64encode(SIGNING_KEY).decode("ascii")


class RecordingTransport(Transport):
    """Transport that answers from a queue and records every request."""

    def __init__(self, responses: Optional[List[HTTPResponse]] = None):
        self.responses = list(responses or [])
        self.calls = []
        self.closed = False

    def queue(self, status_code: int = 200, body=b"") -> None:
        if not isinstance(body, bytes):
            body = json.dumps(body).encode("utf-8")
        self.responses.append(HTTPResponse(status_code=status_code, body=body))

    async def post(self, url, fields, params=None, files=None) -> HTTPResponse:
        self.calls.append(("POST", url, dict(fields), params, files))
        return self.responses.pop(0)

    async def get(self, url, params=None) -> HTTPResponse:
        self.calls.append(("GET", url, None, params, None))
        return self.responses.pop(0)

    async def close(self) -> None:
        self.closed = True


def make_envelope(access: str, expires: int = 1999999999,
                  refresh: Optional[str] = None, refresh_expires: Optional[int] = None) -> dict:
    tokens = {"access": {"token": access, "expires": expires}}
    if refresh is not None:
        tokens["refresh"] = {"token": refresh, "expires": refresh_expires}
    return {"tokens": tokens}


@pytest.fixture
def envelope():
    """Build a token creation response body."""
    return make_envelope


@pytest.fixture
def secret():
    return SECRET


@pytest.fixture
def signing_key():
    return SIGNING_KEY


@pytest.fixture
def identity():
    return ClientIdentity(endpoint="https://auth.example", app_id=7, app_secret=SECRET)


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def client(identity, transport):
    return SSOClient.new(identity, transport)


@pytest.fixture
def mint():
    """Sign claims into a JWT with the decoded app secret, as the server does."""
    def _mint(claims: Mapping, key: bytes = SIGNING_KEY) -> str:
        return jwt.encode(dict(claims), key, algorithm="HS256")
    return _mint
