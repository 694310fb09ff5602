"""
Custom exception classes for LazyPage.

This module defines the exceptions raised by the paginator so callers can
branch on a machine-readable error code.
"""

from typing import Any, Optional
from fastapi import status


class LazyPageException(Exception):
    """
    Base exception class for all LazyPage exceptions.

    Attributes:
        message (str): Error message
        status_code (int): HTTP status code
        error_code (str): Application-specific error code
        details (dict): Additional error details
    """

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        error_code: str = "INTERNAL_ERROR",
        details: Optional[dict[str, Any]] = None,
    ):
        """
        Initialize LazyPageException.

        Args:
            message (str): Error message
            status_code (int): HTTP status code (default: 500)
            error_code (str): Application-specific error code (default: INTERNAL_ERROR)
            details (dict, optional): Additional error details
        """
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)


class ConfigurationException(LazyPageException):
    """
    Raised when a component is constructed with invalid arguments.

    The error code is composed of the component identifier and a failure
    tag, e.g. ``services/paginator::MISSING_REQUIRED_PER_PAGE``.

    Examples:
        >>> raise ConfigurationException("Missing required 'per_page'", "services/paginator::MISSING_REQUIRED_PER_PAGE")
    """

    def __init__(self, message: str, error_code: str = "CONFIGURATION_ERROR", details: Optional[dict] = None):
        """Initialize ConfigurationException."""
        super().__init__(
            message=message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            error_code=error_code,
            details=details,
        )
