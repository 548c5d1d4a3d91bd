"""
Neptune client: DB clusters, instances, parameter groups, snapshots,
event subscriptions and global clusters.

Neptune shares the RDS query API, so requests are signed as ``rds`` and
sent to the ``rds`` endpoints. Cross-region copies carry a pre-signed URL
generated for the source region.
"""
from typing import Any, Mapping, Optional

from botocore import xform_name

from logger_config import get_logger

from .outcome import Outcome
from .service_client import ServiceClient

logger = get_logger(__name__)

PRESIGNED_URL_EXPIRES_IN = 3600

_OPERATION_NAMES = (
    "AddRoleToDBCluster",
    "AddSourceIdentifierToSubscription",
    "AddTagsToResource",
    "ApplyPendingMaintenanceAction",
    "CopyDBClusterParameterGroup",
    "CopyDBClusterSnapshot",
    "CopyDBParameterGroup",
    "CreateDBCluster",
    "CreateDBClusterEndpoint",
    "CreateDBClusterParameterGroup",
    "CreateDBClusterSnapshot",
    "CreateDBInstance",
    "CreateDBParameterGroup",
    "CreateDBSubnetGroup",
    "CreateEventSubscription",
    "CreateGlobalCluster",
    "DeleteDBCluster",
    "DeleteDBClusterEndpoint",
    "DeleteDBClusterParameterGroup",
    "DeleteDBClusterSnapshot",
    "DeleteDBInstance",
    "DeleteDBParameterGroup",
    "DeleteDBSubnetGroup",
    "DeleteEventSubscription",
    "DeleteGlobalCluster",
    "DescribeDBClusterEndpoints",
    "DescribeDBClusterParameterGroups",
    "DescribeDBClusterParameters",
    "DescribeDBClusterSnapshotAttributes",
    "DescribeDBClusterSnapshots",
    "DescribeDBClusters",
    "DescribeDBEngineVersions",
    "DescribeDBInstances",
    "DescribeDBParameterGroups",
    "DescribeDBParameters",
    "DescribeDBSubnetGroups",
    "DescribeEngineDefaultClusterParameters",
    "DescribeEngineDefaultParameters",
    "DescribeEventCategories",
    "DescribeEventSubscriptions",
    "DescribeEvents",
    "DescribeGlobalClusters",
    "DescribeOrderableDBInstanceOptions",
    "DescribePendingMaintenanceActions",
    "DescribeValidDBInstanceModifications",
    "FailoverDBCluster",
    "FailoverGlobalCluster",
    "ListTagsForResource",
    "ModifyDBCluster",
    "ModifyDBClusterEndpoint",
    "ModifyDBClusterParameterGroup",
    "ModifyDBClusterSnapshotAttribute",
    "ModifyDBInstance",
    "ModifyDBParameterGroup",
    "ModifyDBSubnetGroup",
    "ModifyEventSubscription",
    "ModifyGlobalCluster",
    "PromoteReadReplicaDBCluster",
    "RebootDBInstance",
    "RemoveFromGlobalCluster",
    "RemoveRoleFromDBCluster",
    "RemoveSourceIdentifierFromSubscription",
    "RemoveTagsFromResource",
    "ResetDBClusterParameterGroup",
    "ResetDBParameterGroup",
    "RestoreDBClusterFromSnapshot",
    "RestoreDBClusterToPointInTime",
    "StartDBCluster",
    "StopDBCluster",
)


class NeptuneClient(ServiceClient):
    """Client for Neptune operations."""

    SERVICE_NAME = 'neptune'
    SIGNING_NAME = 'rds'
    ENDPOINT_PREFIX = 'rds'
    SERVICE_CLIENT_NAME = 'Neptune'

    OPERATIONS = dict.fromkeys(_OPERATION_NAMES, ())

    # Operations that accept SourceRegion and need a pre-signed URL from it
    CROSS_REGION_OPERATIONS = frozenset({'CopyDBClusterSnapshot', 'CreateDBCluster'})

    def _before_dispatch(self, operation_name: str, request: Mapping[str, Any]) -> Optional[Outcome]:
        """
        Resolve the source region's endpoint for cross-region requests.

        botocore signs the URL itself; the source region still has to
        resolve, otherwise the call fails with ENDPOINT_RESOLUTION_FAILURE.
        """
        if operation_name not in self.CROSS_REGION_OPERATIONS:
            return None
        source_region = request.get('SourceRegion')
        if not source_region or request.get('PreSignedUrl'):
            return None

        presigned_outcome = self._endpoint_provider.resolve_endpoint({'Region': source_region})
        if not presigned_outcome:
            return Outcome.failure(presigned_outcome.error)

        logger.debug(
            f'{operation_name} will carry a pre-signed URL for {source_region} '
            f'({presigned_outcome.result.url})'
        )
        return None

    def convert_request_to_presigned_url(
        self,
        operation_name: str,
        request: Mapping[str, Any],
        region: str
    ) -> Optional[str]:
        """
        Generate a GET pre-signed URL for a request in another region.

        Args:
            operation_name: Operation name as it appears in the service model
            request: Request members keyed by their model names
            region: Region the URL is signed for

        Returns:
            The pre-signed URL, valid for one hour, or None if the endpoint
            could not be resolved
        """
        self._required_members(operation_name)

        if self._endpoint_provider is None:
            logger.error('Presigned URL generating failed. Endpoint provider is not initialized.')
            return None

        endpoint_outcome = self._endpoint_provider.resolve_endpoint({'Region': region})
        if not endpoint_outcome:
            logger.error(f'Endpoint resolution failed: {endpoint_outcome.error.message}')
            return None

        transport = self._transport_for(endpoint_outcome.result)
        return transport.generate_presigned_url(
            ClientMethod=xform_name(operation_name),
            Params=dict(request),
            ExpiresIn=PRESIGNED_URL_EXPIRES_IN,
            HttpMethod='GET',
        )
