"""
Endpoint resolution for the service clients.

The provider feeds the client's built-in parameters (region, FIPS and
dual-stack flags, endpoint override) to botocore's endpoint ruleset for the
service and returns the URL a request is sent to. Per-call parameters such
as a different ``Region`` take precedence over the built-ins, which is how
cross-region pre-signing resolves its endpoint.
"""
import threading
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple

import boto3
from botocore import UNSIGNED
from botocore.config import Config as BotoConfig
# NoRegionError and EndpointVariantError derive from BaseEndpointResolverError,
# the ruleset's EndpointResolutionError from EndpointProviderError
from botocore.exceptions import BaseEndpointResolverError, EndpointProviderError

from logger_config import get_logger
from utils.exceptions import EndpointResolutionError

from .client_configuration import ClientConfiguration
from .outcome import CoreErrors, Outcome, ServiceError

logger = get_logger(__name__)


@dataclass(frozen=True)
class ResolvedEndpoint:
    """The URL and signing scope a request is dispatched with."""

    url: str
    signing_region: str
    signing_name: str


def compute_signer_region(region: Optional[str]) -> Optional[str]:
    """
    Map pseudo regions onto the region requests are signed for.

    ``aws-global`` signs for ``us-east-1``; ``fips-<region>`` and
    ``<region>-fips`` sign for ``<region>``.
    """
    if not region:
        return region
    if region == 'aws-global':
        return 'us-east-1'
    if region.startswith('fips-'):
        return region[len('fips-'):]
    if region.endswith('-fips'):
        return region[:-len('-fips')]
    return region


def _is_fips_pseudo_region(region: Optional[str]) -> bool:
    return bool(region) and (region.startswith('fips-') or region.endswith('-fips'))


class EndpointProvider:
    """Resolves service endpoints from built-in and per-call parameters."""

    def __init__(
        self,
        service_name: str,
        signing_name: Optional[str] = None,
        session: Optional[boto3.Session] = None
    ) -> None:
        """
        Initialize the endpoint provider.

        Args:
            service_name: boto3 service name whose endpoint ruleset is used
            signing_name: SigV4 service name when the ruleset does not name one
            session: boto3 session used to load the ruleset (a fresh one when omitted)
        """
        self.service_name = service_name
        self.signing_name = signing_name or service_name
        self._session = session
        self._built_in: Dict[str, Any] = {
            'Region': None,
            'UseFIPS': False,
            'UseDualStack': False,
            'Endpoint': None,
        }
        # One unsigned botocore client per built-in combination; only its
        # ruleset resolver is used
        self._resolvers: Dict[Tuple[Any, ...], Any] = {}
        self._resolver_lock = threading.Lock()

    @property
    def built_in_parameters(self) -> Dict[str, Any]:
        return dict(self._built_in)

    @property
    def session(self) -> boto3.Session:
        """Lazy initialization of the boto3 session."""
        if self._session is None:
            self._session = boto3.Session()
        return self._session

    def init_built_in_parameters(self, configuration: ClientConfiguration) -> None:
        """Copy region, FIPS, dual-stack and override settings from a client configuration."""
        region = configuration.region
        self._built_in['Region'] = compute_signer_region(region)
        self._built_in['UseFIPS'] = configuration.use_fips or _is_fips_pseudo_region(region)
        self._built_in['UseDualStack'] = configuration.use_dual_stack
        self._built_in['Endpoint'] = configuration.endpoint_override

    def override_endpoint(self, endpoint: str) -> None:
        """Send every subsequent request to ``endpoint``."""
        logger.debug(f'Endpoint for {self.service_name} overridden with {endpoint}')
        self._built_in['Endpoint'] = endpoint

    def resolve_endpoint(self, params: Optional[Mapping[str, Any]] = None) -> Outcome[ResolvedEndpoint]:
        """
        Resolve the endpoint for one call.

        Args:
            params: Per-call endpoint parameters overriding the built-ins
                (``Region``, ``UseFIPS``, ``UseDualStack``, ``Endpoint``)

        Returns:
            Outcome holding a ResolvedEndpoint, or an
            ENDPOINT_RESOLUTION_FAILURE error
        """
        merged = dict(self._built_in)
        if params:
            merged.update({k: v for k, v in params.items() if v is not None})
            if 'Region' in params and params['Region']:
                if _is_fips_pseudo_region(params['Region']):
                    merged['UseFIPS'] = True
                merged['Region'] = compute_signer_region(params['Region'])

        try:
            return Outcome.success(self._resolve(merged))
        except EndpointResolutionError as e:
            logger.error(f'Endpoint resolution failed for {self.service_name}: {e.message}')
            return Outcome.failure(ServiceError(
                error_type=CoreErrors.ENDPOINT_RESOLUTION_FAILURE,
                exception_name='ENDPOINT_RESOLUTION_FAILURE',
                message=e.message,
            ))

    def _resolver_for(self, region: Optional[str], use_fips: bool, use_dual_stack: bool,
                      endpoint: Optional[str]) -> Any:
        key = (region, use_fips, use_dual_stack, endpoint)
        with self._resolver_lock:
            resolver = self._resolvers.get(key)
            if resolver is None:
                resolver = self.session.client(
                    self.service_name,
                    region_name=region,
                    endpoint_url=endpoint,
                    config=BotoConfig(
                        signature_version=UNSIGNED,
                        use_fips_endpoint=use_fips,
                        use_dualstack_endpoint=use_dual_stack,
                    ),
                )
                self._resolvers[key] = resolver
        return resolver

    def _resolve(self, params: Mapping[str, Any]) -> ResolvedEndpoint:
        region = params.get('Region')
        use_fips = bool(params.get('UseFIPS'))
        use_dual_stack = bool(params.get('UseDualStack'))
        endpoint = params.get('Endpoint')

        if not region and not endpoint:
            raise EndpointResolutionError(
                'Invalid Configuration: Missing Region',
                service_name=self.service_name,
            )

        try:
            resolver = self._resolver_for(region, use_fips, use_dual_stack, endpoint)
            if resolver._ruleset_resolver is None:
                url, properties = resolver.meta.endpoint_url, {}
            else:
                service_model = resolver.meta.service_model
                operation_model = service_model.operation_model(service_model.operation_names[0])
                endpoint_info = resolver._ruleset_resolver.construct_endpoint(
                    operation_model=operation_model,
                    call_args={},
                    request_context={},
                )
                url, properties = endpoint_info.url, endpoint_info.properties
        except (BaseEndpointResolverError, EndpointProviderError) as e:
            raise EndpointResolutionError(str(e), region=region, service_name=self.service_name) from e
        except ValueError as e:
            # botocore rejects malformed regions and override URLs with ValueError
            raise EndpointResolutionError(
                f'Invalid Configuration: {e}', region=region, service_name=self.service_name
            ) from e

        signing = next(iter(properties.get('authSchemes') or []), {})
        return ResolvedEndpoint(
            url=url.rstrip('/'),
            signing_region=signing.get('signingRegion') or region or 'us-east-1',
            signing_name=signing.get('signingName') or self.signing_name,
        )
