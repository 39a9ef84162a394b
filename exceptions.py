"""Exceptions raised by the calculator and handled by the web layer."""

from typing import Any, Dict, Optional


class CalculatorError(Exception):
    """Base exception for calculator failures.

    Attributes:
        message: Human-readable error message.
        status_code: HTTP status code the web layer responds with.
        details: Optional additional error context.
    """

    def __init__(
        self,
        message: str,
        status_code: int = 400,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class InvalidInputError(CalculatorError):
    """Raised when an input (or a result derived from it) is outside the valid domain."""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(message, status_code=400, details={"field": field})
