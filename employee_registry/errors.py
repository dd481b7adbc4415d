"""
Registry exceptions

Failures talking to the backing store or the cache. A missing employee is
not an error and never raises one of these.
"""
from typing import Any, Dict, Optional


class RegistryError(Exception):
    """Base exception for employee registry failures"""

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.details = details or {}
        if original_error is not None:
            self.details["original_error"] = str(original_error)
            self.details["original_error_type"] = type(original_error).__name__
        super().__init__(self.message)


class StoreError(RegistryError):
    """Raised when a store statement fails"""


class StoreUnavailableError(StoreError):
    """Raised when the relational store cannot be reached"""

    def __init__(self, message: str = "Store unavailable", **kwargs):
        super().__init__(message, **kwargs)


class CacheUnavailableError(RegistryError):
    """Raised when Redis cannot be reached or times out"""

    def __init__(self, message: str = "Cache unavailable", key: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        if key:
            self.details["key"] = key
