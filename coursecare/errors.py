"""
Exception types raised by the coursecare core.
"""
from typing import Any, Dict, Optional


class CourseCareError(Exception):
    """Base exception for all coursecare errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(CourseCareError, ValueError):
    """An attribute write fell outside its declared bound, or required text was empty."""

    def __init__(self, message: str, field: str, value: Any = None):
        super().__init__(message, details={"field": field, "value": value})
        self.field = field
        self.value = value
