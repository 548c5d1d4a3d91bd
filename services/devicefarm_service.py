"""
Device Farm client: projects, device pools, runs, remote access sessions
and TestGrid projects.
"""
from .service_client import ServiceClient

_OPERATION_NAMES = (
    "CreateDevicePool",
    "CreateInstanceProfile",
    "CreateNetworkProfile",
    "CreateProject",
    "CreateRemoteAccessSession",
    "CreateTestGridProject",
    "CreateTestGridUrl",
    "CreateUpload",
    "CreateVPCEConfiguration",
    "DeleteDevicePool",
    "DeleteInstanceProfile",
    "DeleteNetworkProfile",
    "DeleteProject",
    "DeleteRemoteAccessSession",
    "DeleteRun",
    "DeleteTestGridProject",
    "DeleteUpload",
    "DeleteVPCEConfiguration",
    "GetAccountSettings",
    "GetDevice",
    "GetDeviceInstance",
    "GetDevicePool",
    "GetDevicePoolCompatibility",
    "GetInstanceProfile",
    "GetJob",
    "GetNetworkProfile",
    "GetOfferingStatus",
    "GetProject",
    "GetRemoteAccessSession",
    "GetRun",
    "GetSuite",
    "GetTest",
    "GetTestGridProject",
    "GetTestGridSession",
    "GetUpload",
    "GetVPCEConfiguration",
    "InstallToRemoteAccessSession",
    "ListArtifacts",
    "ListDeviceInstances",
    "ListDevicePools",
    "ListDevices",
    "ListInstanceProfiles",
    "ListJobs",
    "ListNetworkProfiles",
    "ListOfferingPromotions",
    "ListOfferingTransactions",
    "ListOfferings",
    "ListProjects",
    "ListRemoteAccessSessions",
    "ListRuns",
    "ListSamples",
    "ListSuites",
    "ListTagsForResource",
    "ListTestGridProjects",
    "ListTestGridSessionActions",
    "ListTestGridSessionArtifacts",
    "ListTestGridSessions",
    "ListTests",
    "ListUniqueProblems",
    "ListUploads",
    "ListVPCEConfigurations",
    "PurchaseOffering",
    "RenewOffering",
    "ScheduleRun",
    "StopJob",
    "StopRemoteAccessSession",
    "StopRun",
    "TagResource",
    "UntagResource",
    "UpdateDeviceInstance",
    "UpdateDevicePool",
    "UpdateInstanceProfile",
    "UpdateNetworkProfile",
    "UpdateProject",
    "UpdateTestGridProject",
    "UpdateUpload",
    "UpdateVPCEConfiguration",
)


class DeviceFarmClient(ServiceClient):
    """Client for Device Farm operations."""

    SERVICE_NAME = 'devicefarm'
    SIGNING_NAME = 'devicefarm'
    ENDPOINT_PREFIX = 'devicefarm'
    SERVICE_CLIENT_NAME = 'Device Farm'

    # Required members are left to botocore's parameter validation
    OPERATIONS = dict.fromkeys(_OPERATION_NAMES, ())
