"""
Caller-owned storage for token pairs.

The client never consults a store; applications that want to avoid
renewing tokens they already hold keep pairs here, keyed by access token id.
"""

from abc import ABC, abstractmethod
from typing import Dict, Optional
import asyncio
import time

from ..auth.types import ExpiryState, TokenPair


class TokenStore(ABC):
    """Abstract base class for token storage"""

    @abstractmethod
    async def store(self, pair: TokenPair) -> None:
        """Store a token pair under its access token id"""
        pass

    @abstractmethod
    async def get(self, token_id: str) -> Optional[TokenPair]:
        """Retrieve a token pair"""
        pass

    @abstractmethod
    async def delete(self, token_id: str) -> bool:
        """Delete a token pair"""
        pass

    @abstractmethod
    async def cleanup_expired(self) -> int:
        """Remove unusable pairs and return how many were removed"""
        pass

    async def close(self) -> None:
        """Close the token store and release resources"""
        pass


class MemoryTokenStore(TokenStore):
    """In-memory token store"""

    def __init__(self):
        self.pairs: Dict[str, TokenPair] = {}
        self._lock = asyncio.Lock()

    async def store(self, pair: TokenPair) -> None:
        async with self._lock:
            self.pairs[pair.access.get_id()] = pair

    async def get(self, token_id: str) -> Optional[TokenPair]:
        async with self._lock:
            return self.pairs.get(token_id)

    async def delete(self, token_id: str) -> bool:
        async with self._lock:
            if token_id in self.pairs:
                del self.pairs[token_id]
                return True
            return False

    async def replace(self, old: TokenPair, new: TokenPair) -> None:
        """Swap a renewed pair in for the one it superseded"""
        async with self._lock:
            self.pairs.pop(old.access.get_id(), None)
            self.pairs[new.access.get_id()] = new

    async def cleanup_expired(self) -> int:
        """
        Remove pairs that can no longer be used or renewed.

        A pair whose access token expired is kept while its refresh token is
        active or of unknown expiry, since it may still be renewed.
        """
        async with self._lock:
            now = time.time()
            expired = [
                token_id
                for token_id, pair in self.pairs.items()
                if pair.access.is_expired(now) and (
                    pair.refresh is None
                    or pair.refresh.is_expired(now) is ExpiryState.EXPIRED
                )
            ]

            for token_id in expired:
                del self.pairs[token_id]

            return len(expired)
