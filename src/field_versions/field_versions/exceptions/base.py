# ABOUTME: Core exception classes for the field versioning library
# ABOUTME: Provides structured error handling with context and error codes

from typing import Dict, Any


class FieldVersionsException(Exception):
    """Base exception class for the field versioning library.

    Provides structured error handling with optional error codes and contextual
    details. All custom exceptions in the library inherit from this class
    to ensure consistent error handling patterns.

    Attributes:
        message: Human-readable error message
        code: Optional error code for programmatic handling
        details: Optional dictionary containing contextual information
    """

    def __init__(self, message: str, code: str | None = None, details: Dict[str, Any] | None = None):
        """Initialize FieldVersionsException with message, optional code and details.

        Args:
            message: Human-readable error message
            code: Optional error code for programmatic handling
            details: Optional dictionary containing contextual information
        """
        self.message = message
        self.code = code
        self.details = details.copy() if details else {}
        super().__init__(self.message)


class ConfigurationException(FieldVersionsException):
    """Exception raised for configuration errors.

    Used when library configuration is invalid or missing, such as:
    - Invalid resolver options
    - Settings values that fail validation
    - Conflicting options passed alongside an explicit resolver

    Should include details about the configuration issue.
    """

    pass
