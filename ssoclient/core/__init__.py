"""
Core module initialization
"""

from .config import ClientIdentity, HTTPConfig

__all__ = ["ClientIdentity", "HTTPConfig"]
