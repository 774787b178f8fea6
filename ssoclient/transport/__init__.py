"""
Transport module initialization
"""

from .base import HTTPResponse, Transport
from .http import AiohttpTransport

__all__ = [
    "HTTPResponse",
    "Transport",
    "AiohttpTransport",
]
