"""
Base class for the generated-style AWS service clients.

A service client declares its operation table; for every operation the base
class exposes a synchronous method returning an ``Outcome``, a ``_callable``
variant returning a ``Future`` of that outcome, and an ``_async`` variant
that hands the outcome to a callback. All three go through ``make_request``.
"""
import copy
import threading
import uuid
from concurrent.futures import Executor, Future
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

import boto3
from botocore import xform_name

from config import get_config
from logger_config import get_logger
from utils.decorators import outcome_operation
from utils.exceptions import MissingParameterError

from .client_configuration import ClientConfiguration
from .endpoint_provider import EndpointProvider, ResolvedEndpoint, compute_signer_region
from .executor import get_default_executor
from .outcome import CoreErrors, Outcome, ServiceError

logger = get_logger(__name__)


@dataclass(frozen=True)
class Credentials:
    """Static AWS credentials."""

    access_key_id: str
    secret_access_key: str = field(repr=False)
    session_token: Optional[str] = field(default=None, repr=False)


@dataclass(frozen=True)
class AsyncCallerContext:
    """Caller-owned context handed back to an async operation's handler."""

    uuid: str = field(default_factory=lambda: str(uuid.uuid4()))


AsyncHandler = Callable[[Any, Dict[str, Any], Outcome, Optional[AsyncCallerContext]], None]


def _merge_request(request: Optional[Mapping[str, Any]], params: Mapping[str, Any]) -> Dict[str, Any]:
    merged = dict(request or {})
    merged.update(params)
    return merged


def _sync_method(operation_name: str, method_name: str, service: str) -> Callable[..., Outcome]:
    def operation(self, request: Optional[Mapping[str, Any]] = None, **params: Any) -> Outcome:
        return self.make_request(operation_name, _merge_request(request, params))

    operation.__name__ = method_name
    operation.__doc__ = f'Call {service} {operation_name} and return its Outcome.'
    return operation


def _callable_method(operation_name: str, method_name: str, service: str) -> Callable[..., Future]:
    def operation(self, request: Optional[Mapping[str, Any]] = None, **params: Any) -> Future:
        return self.make_callable_operation(operation_name, _merge_request(request, params))

    operation.__name__ = f'{method_name}_callable'
    operation.__doc__ = f'Submit {service} {operation_name} to the executor and return a Future of its Outcome.'
    return operation


def _async_method(operation_name: str, method_name: str, service: str) -> Callable[..., Future]:
    def operation(
        self,
        request: Optional[Mapping[str, Any]] = None,
        handler: Optional[AsyncHandler] = None,
        context: Optional[AsyncCallerContext] = None,
        **params: Any
    ) -> Future:
        if handler is None:
            raise TypeError(f'{method_name}_async() requires a handler')
        return self.make_async_operation(operation_name, _merge_request(request, params), handler, context)

    operation.__name__ = f'{method_name}_async'
    operation.__doc__ = (
        f'Submit {service} {operation_name} to the executor and call '
        f'handler(client, request, outcome, context) when it completes.'
    )
    return operation


class ServiceClient:
    """Common construction and dispatch for every service client."""

    # boto3 service name, SigV4 signing name, endpoint host prefix
    SERVICE_NAME: str = ''
    SIGNING_NAME: str = ''
    ENDPOINT_PREFIX: str = ''
    SERVICE_CLIENT_NAME: str = ''

    # Operation name -> request members that must be set before dispatch
    OPERATIONS: Mapping[str, Tuple[str, ...]] = {}

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if not cls.SIGNING_NAME:
            cls.SIGNING_NAME = cls.SERVICE_NAME
        if not cls.ENDPOINT_PREFIX:
            cls.ENDPOINT_PREFIX = cls.SERVICE_NAME
        service = cls.SERVICE_CLIENT_NAME or cls.__name__
        for operation_name in cls.OPERATIONS:
            method_name = xform_name(operation_name)
            for name, factory in (
                (method_name, _sync_method),
                (f'{method_name}_callable', _callable_method),
                (f'{method_name}_async', _async_method),
            ):
                # Methods written on the class itself take precedence
                if name not in cls.__dict__:
                    method = factory(operation_name, method_name, service)
                    method.__qualname__ = f'{cls.__name__}.{name}'
                    setattr(cls, name, method)

    def __init__(
        self,
        configuration: Optional[ClientConfiguration] = None,
        credentials: Optional[Credentials] = None,
        session: Optional[boto3.Session] = None,
        endpoint_provider: Optional[EndpointProvider] = None
    ) -> None:
        """
        Initialize the service client.

        Args:
            configuration: Client settings; built from the environment when omitted
            credentials: Static credentials (default credentials chain when omitted)
            session: boto3 session supplying credentials; exclusive with ``credentials``
            endpoint_provider: Endpoint provider (the service default when omitted)

        Raises:
            ValueError: If both credentials and session are given
        """
        if credentials is not None and session is not None:
            raise ValueError('Pass either credentials or a session, not both')

        self._configuration = configuration or ClientConfiguration.from_config(get_config())
        self._credentials = credentials
        self._session = session
        self._executor: Executor = (
            self._configuration.executor
            or get_default_executor(self._configuration.max_workers)
        )
        self._endpoint_provider = endpoint_provider or EndpointProvider(
            self.SERVICE_NAME, self.SIGNING_NAME
        )
        self._transports: Dict[Tuple[str, str], Any] = {}
        self._transport_lock = threading.Lock()

        self._endpoint_provider.init_built_in_parameters(self._configuration)
        logger.debug(
            f'{self.SERVICE_CLIENT_NAME} client initialised for region '
            f'{compute_signer_region(self._configuration.region)}'
        )

    @classmethod
    def operation_names(cls) -> Tuple[str, ...]:
        return tuple(cls.OPERATIONS)

    @property
    def configuration(self) -> ClientConfiguration:
        return self._configuration

    @property
    def executor(self) -> Executor:
        return self._executor

    @property
    def session(self) -> boto3.Session:
        """Lazy initialization of the boto3 session."""
        if self._session is None:
            if self._credentials is not None:
                self._session = boto3.Session(
                    aws_access_key_id=self._credentials.access_key_id,
                    aws_secret_access_key=self._credentials.secret_access_key,
                    aws_session_token=self._credentials.session_token,
                )
            else:
                self._session = boto3.Session()
        return self._session

    def access_endpoint_provider(self) -> Optional[EndpointProvider]:
        return self._endpoint_provider

    def override_endpoint(self, endpoint: str) -> None:
        """Send every subsequent request to ``endpoint``."""
        if self._endpoint_provider is None:
            raise ValueError(f'{self.SERVICE_CLIENT_NAME} client has no endpoint provider')
        self._endpoint_provider.override_endpoint(endpoint)

    def _transport_for(self, endpoint: ResolvedEndpoint) -> Any:
        """Return the botocore client for an endpoint, creating it on first use."""
        key = (endpoint.url, endpoint.signing_region)
        with self._transport_lock:
            transport = self._transports.get(key)
            if transport is None:
                transport = self.session.client(
                    self.SERVICE_NAME,
                    region_name=endpoint.signing_region,
                    endpoint_url=endpoint.url,
                    verify=self._configuration.verify_ssl,
                    config=self._configuration.to_boto_config(
                        self.SERVICE_CLIENT_NAME, endpoint.signing_region
                    ),
                )
                self._transports[key] = transport
                logger.debug(f'Created {self.SERVICE_NAME} transport for {endpoint.url}')
        return transport

    def _required_members(self, operation_name: str) -> Tuple[str, ...]:
        try:
            return self.OPERATIONS[operation_name]
        except KeyError:
            raise ValueError(
                f'{self.SERVICE_CLIENT_NAME} has no operation named {operation_name}'
            ) from None

    def _before_dispatch(self, operation_name: str, request: Mapping[str, Any]) -> Optional[Outcome]:
        """Operation-specific checks run after validation; an outcome returned here ends the call."""
        return None

    @outcome_operation
    def make_request(self, operation_name: str, request: Mapping[str, Any]) -> Outcome:
        """
        Dispatch one operation and wrap the response in an Outcome.

        Args:
            operation_name: Operation name as it appears in the service model
            request: Request members keyed by their model names

        Returns:
            Outcome holding the response dictionary or the error

        Raises:
            ValueError: If the operation is not part of this client
        """
        required = self._required_members(operation_name)

        if self._endpoint_provider is None:
            return Outcome.failure(ServiceError(
                error_type=CoreErrors.ENDPOINT_RESOLUTION_FAILURE,
                exception_name='ENDPOINT_RESOLUTION_FAILURE',
                message='Endpoint provider is not initialized',
            ))

        for member in required:
            if request.get(member) is None:
                raise MissingParameterError(member, operation_name)

        early = self._before_dispatch(operation_name, request)
        if early is not None:
            return early

        endpoint_outcome = self._endpoint_provider.resolve_endpoint()
        if not endpoint_outcome:
            return Outcome.failure(endpoint_outcome.error)

        transport = self._transport_for(endpoint_outcome.result)
        method_name = xform_name(operation_name)
        api_method = getattr(transport, method_name, None)
        if api_method is None:
            return Outcome.failure(ServiceError(
                error_type=CoreErrors.UNKNOWN,
                exception_name='UnsupportedOperation',
                message=f'{operation_name} is not available in the installed botocore '
                        f'model for {self.SERVICE_NAME}',
            ))

        # Optional members set to None count as unset
        members = {name: value for name, value in request.items() if value is not None}
        response = api_method(**members)
        return Outcome.success(response)

    def make_callable_operation(self, operation_name: str, request: Mapping[str, Any]) -> Future:
        """Run ``make_request`` on the executor against a copy of the request."""
        snapshot = copy.deepcopy(dict(request))
        return self._executor.submit(self.make_request, operation_name, snapshot)

    def make_async_operation(
        self,
        operation_name: str,
        request: Mapping[str, Any],
        handler: AsyncHandler,
        context: Optional[AsyncCallerContext] = None
    ) -> Future:
        """
        Run ``make_request`` on the executor and pass the outcome to ``handler``.

        The handler is called as handler(client, request, outcome, context)
        on an executor thread.
        """
        snapshot = copy.deepcopy(dict(request))

        def task() -> None:
            outcome = self.make_request(operation_name, snapshot)
            try:
                handler(self, snapshot, outcome, context)
            except Exception:
                logger.exception(f'{self.SERVICE_CLIENT_NAME}.{operation_name} handler raised')
                raise

        return self._executor.submit(task)

    def close(self) -> None:
        """Release the botocore clients created by this client."""
        with self._transport_lock:
            transports, self._transports = list(self._transports.values()), {}
        for transport in transports:
            transport.close()

    def __enter__(self) -> "ServiceClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def __repr__(self) -> str:
        return (
            f'{type(self).__name__}(region={self._configuration.region!r}, '
            f'operations={len(self.OPERATIONS)})'
        )
