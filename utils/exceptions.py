"""
Custom exception classes for the service clients.
"""
from typing import Optional


class ServiceOperationError(Exception):
    """Exception raised when a failed outcome's result is requested."""

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        error_type: Optional[str] = None,
        exception_name: Optional[str] = None,
        response_code: Optional[int] = None
    ):
        """
        Initialize service operation error.

        Args:
            message: Error message
            operation: Operation name if available
            error_type: Name of the error category (e.g. SERVICE, MISSING_PARAMETER)
            exception_name: Service exception name if available
            response_code: HTTP status code if available
        """
        super().__init__(message)
        self.message = message
        self.operation = operation
        self.error_type = error_type
        self.exception_name = exception_name
        self.response_code = response_code


class EndpointResolutionError(Exception):
    """Exception raised when an endpoint cannot be resolved."""

    def __init__(
        self,
        message: str,
        region: Optional[str] = None,
        service_name: Optional[str] = None
    ):
        super().__init__(message)
        self.message = message
        self.region = region
        self.service_name = service_name


class MissingParameterError(Exception):
    """Exception raised for required request members that are not set."""

    def __init__(self, field: str, operation: Optional[str] = None):
        message = f"Missing required field [{field}]"
        super().__init__(message)
        self.message = message
        self.field = field
        self.operation = operation
