"""
Dispatch decorators for error handling, logging, and outcome formatting.
"""
import functools
import uuid
from typing import Any, Callable, Mapping

from botocore.exceptions import (
    BotoCoreError,
    ClientError,
    ConnectTimeoutError,
    EndpointConnectionError,
    NoCredentialsError,
    ParamValidationError,
    PartialCredentialsError,
    ReadTimeoutError,
)

from logger_config import get_logger
from services.outcome import CoreErrors, Outcome, ServiceError
from utils.exceptions import MissingParameterError

logger = get_logger(__name__)


def _client_error(error_type: CoreErrors, exception_name: str, message: str,
                  retryable: bool = False) -> Outcome:
    return Outcome.failure(ServiceError(
        error_type=error_type,
        exception_name=exception_name,
        message=message,
        retryable=retryable,
    ))


def outcome_operation(
    func: Callable[[Any, str, Mapping[str, Any]], Outcome]
) -> Callable[[Any, str, Mapping[str, Any]], Outcome]:
    """
    Decorator for the dispatch step of a service client.

    Provides:
    - Request correlation IDs for logging
    - Translation of missing parameters and botocore errors into error outcomes
    - Invocation and completion logging

    Exceptions that do not come from request validation or botocore propagate.

    Args:
        func: The dispatch method to decorate, called as func(client, operation_name, request)

    Returns:
        Decorated dispatch method
    """
    @functools.wraps(func)
    def wrapper(client: Any, operation_name: str, request: Mapping[str, Any]) -> Outcome:
        correlation_id = str(uuid.uuid4())
        service = getattr(client, 'SERVICE_CLIENT_NAME', type(client).__name__)
        log_extra = {
            'correlation_id': correlation_id,
            'service': service,
            'operation': operation_name,
        }

        logger.debug(f'{service}.{operation_name} invoked', extra=log_extra)

        try:
            outcome = func(client, operation_name, request)

        except MissingParameterError as e:
            logger.error(f'{operation_name}: Required field: {e.field}, is not set', extra=log_extra)
            return _client_error(CoreErrors.MISSING_PARAMETER, 'MISSING_PARAMETER', e.message)

        except ClientError as e:
            error = ServiceError.from_client_error(e)
            logger.warning(
                f'{service}.{operation_name} failed with {error.exception_name}: {error.message}',
                extra={**log_extra, 'request_id': error.request_id},
            )
            return Outcome.failure(error)

        except ParamValidationError as e:
            logger.error(f'{service}.{operation_name} rejected by validation: {str(e)}', extra=log_extra)
            return _client_error(CoreErrors.VALIDATION, 'ValidationException', str(e))

        except (NoCredentialsError, PartialCredentialsError) as e:
            logger.error(f'{service}.{operation_name} has no usable credentials: {str(e)}', extra=log_extra)
            return _client_error(
                CoreErrors.MISSING_AUTHENTICATION_TOKEN, 'MissingAuthenticationToken', str(e)
            )

        except (ConnectTimeoutError, ReadTimeoutError) as e:
            logger.error(f'{service}.{operation_name} timed out: {str(e)}', extra=log_extra)
            return _client_error(CoreErrors.REQUEST_TIMEOUT, 'RequestTimeout', str(e), retryable=True)

        except EndpointConnectionError as e:
            logger.error(f'{service}.{operation_name} could not connect: {str(e)}', extra=log_extra)
            return _client_error(
                CoreErrors.NETWORK_CONNECTION, 'NetworkConnection', str(e), retryable=True
            )

        except BotoCoreError as e:
            logger.error(
                f'{service}.{operation_name} failed: {str(e)}',
                extra=log_extra,
                exc_info=True
            )
            return _client_error(CoreErrors.UNKNOWN, type(e).__name__, str(e))

        if outcome.is_success:
            logger.debug(f'{service}.{operation_name} completed successfully', extra=log_extra)
        return outcome

    return wrapper
