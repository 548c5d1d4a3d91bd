"""
CodeBuild client: projects, builds, build batches, report groups and webhooks.
"""
from .service_client import ServiceClient

_OPERATION_NAMES = (
    "BatchDeleteBuilds",
    "BatchGetBuildBatches",
    "BatchGetBuilds",
    "BatchGetProjects",
    "BatchGetReportGroups",
    "BatchGetReports",
    "CreateProject",
    "CreateReportGroup",
    "CreateWebhook",
    "DeleteBuildBatch",
    "DeleteProject",
    "DeleteReport",
    "DeleteReportGroup",
    "DeleteResourcePolicy",
    "DeleteSourceCredentials",
    "DeleteWebhook",
    "DescribeCodeCoverages",
    "DescribeTestCases",
    "GetReportGroupTrend",
    "GetResourcePolicy",
    "ImportSourceCredentials",
    "InvalidateProjectCache",
    "ListBuildBatches",
    "ListBuildBatchesForProject",
    "ListBuilds",
    "ListBuildsForProject",
    "ListCuratedEnvironmentImages",
    "ListProjects",
    "ListReportGroups",
    "ListReports",
    "ListReportsForReportGroup",
    "ListSharedProjects",
    "ListSharedReportGroups",
    "ListSourceCredentials",
    "PutResourcePolicy",
    "RetryBuild",
    "RetryBuildBatch",
    "StartBuild",
    "StartBuildBatch",
    "StopBuild",
    "StopBuildBatch",
    "UpdateProject",
    "UpdateProjectVisibility",
    "UpdateReportGroup",
    "UpdateWebhook",
)


class CodeBuildClient(ServiceClient):
    """Client for CodeBuild operations."""

    SERVICE_NAME = 'codebuild'
    SIGNING_NAME = 'codebuild'
    ENDPOINT_PREFIX = 'codebuild'
    SERVICE_CLIENT_NAME = 'CodeBuild'

    # Required members are left to botocore's parameter validation
    OPERATIONS = dict.fromkeys(_OPERATION_NAMES, ())
