"""
Proton client: environments, services, templates, components and
repository syncing.
"""
from .service_client import ServiceClient

_OPERATION_NAMES = (
    "AcceptEnvironmentAccountConnection",
    "CancelComponentDeployment",
    "CancelEnvironmentDeployment",
    "CancelServiceInstanceDeployment",
    "CancelServicePipelineDeployment",
    "CreateComponent",
    "CreateEnvironment",
    "CreateEnvironmentAccountConnection",
    "CreateEnvironmentTemplate",
    "CreateEnvironmentTemplateVersion",
    "CreateRepository",
    "CreateService",
    "CreateServiceTemplate",
    "CreateServiceTemplateVersion",
    "CreateTemplateSyncConfig",
    "DeleteComponent",
    "DeleteEnvironment",
    "DeleteEnvironmentAccountConnection",
    "DeleteEnvironmentTemplate",
    "DeleteEnvironmentTemplateVersion",
    "DeleteRepository",
    "DeleteService",
    "DeleteServiceTemplate",
    "DeleteServiceTemplateVersion",
    "DeleteTemplateSyncConfig",
    "GetAccountSettings",
    "GetComponent",
    "GetEnvironment",
    "GetEnvironmentAccountConnection",
    "GetEnvironmentTemplate",
    "GetEnvironmentTemplateVersion",
    "GetRepository",
    "GetRepositorySyncStatus",
    "GetService",
    "GetServiceInstance",
    "GetServiceTemplate",
    "GetServiceTemplateVersion",
    "GetTemplateSyncConfig",
    "GetTemplateSyncStatus",
    "ListComponentOutputs",
    "ListComponentProvisionedResources",
    "ListComponents",
    "ListEnvironmentAccountConnections",
    "ListEnvironmentOutputs",
    "ListEnvironmentProvisionedResources",
    "ListEnvironmentTemplateVersions",
    "ListEnvironmentTemplates",
    "ListEnvironments",
    "ListRepositories",
    "ListRepositorySyncDefinitions",
    "ListServiceInstanceOutputs",
    "ListServiceInstanceProvisionedResources",
    "ListServiceInstances",
    "ListServicePipelineOutputs",
    "ListServicePipelineProvisionedResources",
    "ListServiceTemplateVersions",
    "ListServiceTemplates",
    "ListServices",
    "ListTagsForResource",
    "NotifyResourceDeploymentStatusChange",
    "RejectEnvironmentAccountConnection",
    "TagResource",
    "UntagResource",
    "UpdateAccountSettings",
    "UpdateComponent",
    "UpdateEnvironment",
    "UpdateEnvironmentAccountConnection",
    "UpdateEnvironmentTemplate",
    "UpdateEnvironmentTemplateVersion",
    "UpdateService",
    "UpdateServiceInstance",
    "UpdateServicePipeline",
    "UpdateServiceTemplate",
    "UpdateServiceTemplateVersion",
    "UpdateTemplateSyncConfig",
)


class ProtonClient(ServiceClient):
    """Client for Proton operations."""

    SERVICE_NAME = 'proton'
    SIGNING_NAME = 'proton'
    ENDPOINT_PREFIX = 'proton'
    SERVICE_CLIENT_NAME = 'Proton'

    # Required members are left to botocore's parameter validation
    OPERATIONS = dict.fromkeys(_OPERATION_NAMES, ())
