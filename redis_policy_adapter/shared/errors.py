"""
Shared error handling for the Redis policy adapter.
"""

from typing import Dict, Any, Optional
from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standard error response format."""

    code: str
    message: str
    details: Dict[str, Any] = {}


class PolicyAdapterException(Exception):
    """Base exception for the policy adapter."""

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_response(self) -> ErrorResponse:
        """Convert to error response."""
        return ErrorResponse(
            code=self.code,
            message=self.message,
            details=self.details
        )


class InvalidRuleError(PolicyAdapterException):
    """Malformed rule rejected before any store I/O."""

    def __init__(self, message: str = "Invalid rule", details: Optional[Dict[str, Any]] = None):
        super().__init__("INVALID_RULE", message, details)


class StoreConnectionError(PolicyAdapterException):
    """The rule store could not be reached while starting up."""

    def __init__(self, message: str = "Store connection failed", details: Optional[Dict[str, Any]] = None):
        super().__init__("STORE_CONNECTION_ERROR", message, details)
