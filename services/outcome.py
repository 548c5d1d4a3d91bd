"""
Outcome and error types returned by every service client operation.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Generic, Optional, TypeVar

from botocore.exceptions import ClientError

from utils.exceptions import ServiceOperationError

T = TypeVar('T')

THROTTLING_ERROR_CODES = frozenset({
    'Throttling',
    'ThrottlingException',
    'ThrottledException',
    'RequestThrottledException',
    'TooManyRequestsException',
    'ProvisionedThroughputExceededException',
    'TransactionInProgressException',
    'RequestLimitExceeded',
    'BandwidthLimitExceeded',
    'LimitExceededException',
    'RequestThrottled',
    'SlowDown',
    'PriorRequestNotComplete',
    'EC2ThrottledException',
})


class CoreErrors(Enum):
    """Error categories shared by all service clients."""

    MISSING_PARAMETER = 'MISSING_PARAMETER'
    ENDPOINT_RESOLUTION_FAILURE = 'ENDPOINT_RESOLUTION_FAILURE'
    VALIDATION = 'VALIDATION'
    MISSING_AUTHENTICATION_TOKEN = 'MISSING_AUTHENTICATION_TOKEN'
    NETWORK_CONNECTION = 'NETWORK_CONNECTION'
    REQUEST_TIMEOUT = 'REQUEST_TIMEOUT'
    SERVICE = 'SERVICE'
    UNKNOWN = 'UNKNOWN'


@dataclass(frozen=True)
class ServiceError:
    """A client-side or service-side failure of a single operation."""

    error_type: CoreErrors
    exception_name: str
    message: str
    retryable: bool = False
    response_code: Optional[int] = None
    request_id: Optional[str] = None

    @classmethod
    def from_client_error(cls, error: ClientError) -> "ServiceError":
        """
        Build a service error from a botocore ``ClientError``.

        Args:
            error: The error raised by the botocore client

        Returns:
            ServiceError carrying the service's error code, message and status
        """
        response = error.response or {}
        details = response.get('Error', {})
        metadata = response.get('ResponseMetadata', {})

        code = details.get('Code', '') or 'Unknown'
        status = metadata.get('HTTPStatusCode')
        retryable = (
            code in THROTTLING_ERROR_CODES
            or (status is not None and (status >= 500 or status == 429))
        )
        return cls(
            error_type=CoreErrors.SERVICE,
            exception_name=code,
            message=details.get('Message', '') or str(error),
            retryable=retryable,
            response_code=status,
            request_id=metadata.get('RequestId'),
        )


class Outcome(Generic[T]):
    """Holds either the result of an operation or the error that ended it."""

    __slots__ = ('_result', '_error')

    def __init__(self, result: Optional[T] = None, error: Optional[ServiceError] = None):
        if result is not None and error is not None:
            raise ValueError('An outcome holds either a result or an error, not both')
        self._result = result
        self._error = error

    @classmethod
    def success(cls, result: T) -> "Outcome[T]":
        return cls(result=result)

    @classmethod
    def failure(cls, error: ServiceError) -> "Outcome[T]":
        return cls(error=error)

    @property
    def is_success(self) -> bool:
        return self._error is None

    @property
    def result(self) -> Optional[T]:
        return self._result

    @property
    def error(self) -> Optional[ServiceError]:
        return self._error

    def get_result(self) -> T:
        """
        Return the result, raising if the operation failed.

        Raises:
            ServiceOperationError: If the outcome holds an error
        """
        if self._error is not None:
            raise ServiceOperationError(
                self._error.message,
                error_type=self._error.error_type.value,
                exception_name=self._error.exception_name,
                response_code=self._error.response_code,
            )
        return self._result

    def __bool__(self) -> bool:
        return self.is_success

    def __repr__(self) -> str:
        if self._error is not None:
            return f'Outcome(error={self._error!r})'
        return f'Outcome(result={self._result!r})'


# Responses from botocore are plain dictionaries
OperationOutcome = Outcome[Dict[str, Any]]
