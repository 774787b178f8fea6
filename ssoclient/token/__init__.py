"""
Token module initialization
"""

from .store import TokenStore, MemoryTokenStore

__all__ = [
    "TokenStore",
    "MemoryTokenStore",
]
