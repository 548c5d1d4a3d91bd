"""
Dispatch tests against real botocore clients.

Every service client builds its transport from the installed botocore models
here, so a model missing from the installed release fails these tests. Calls
are answered by botocore's Stubber, or by moto where it has a backend.
"""
import pytest
from botocore.stub import Stubber
from moto import mock_aws

from services.client_configuration import ClientConfiguration
from services.codebuild_service import CodeBuildClient
from services.devicefarm_service import DeviceFarmClient
from services.mediatailor_service import MediaTailorClient
from services.neptune_service import NeptuneClient
from services.opsworks_service import OpsWorksClient
from services.outcome import CoreErrors
from services.proton_service import ProtonClient
from services.service_client import Credentials


STUBBED_CALLS = [
    (CodeBuildClient, 'list_projects', {'sortBy': 'NAME'}, {'projects': ['app']}),
    (DeviceFarmClient, 'list_projects', {}, {
        'projects': [{'arn': 'arn:aws:devicefarm:us-west-2:123456789012:project:abc', 'name': 'app'}],
    }),
    (MediaTailorClient, 'list_channels', {'MaxResults': 10}, {'Items': []}),
    (NeptuneClient, 'describe_db_clusters', {'DBClusterIdentifier': 'graph'}, {'DBClusters': []}),
    (OpsWorksClient, 'describe_stacks', {}, {'Stacks': []}),
    (ProtonClient, 'list_environments', {}, {'environments': []}),
]


def _real_transport(client):
    endpoint = client.access_endpoint_provider().resolve_endpoint().get_result()
    return client._transport_for(endpoint)


@pytest.fixture
def configuration(executor):
    return ClientConfiguration(region='us-west-2', executor=executor)


@pytest.mark.dispatch
class TestStubbedTransport:
    """Tests for dispatch through botocore clients built from the installed models."""

    @pytest.mark.parametrize('client_class,method,params,response', STUBBED_CALLS)
    def test_dispatch(self, configuration, client_class, method, params, response):
        """Test one operation per service reaches a real botocore client."""
        client = client_class(configuration, credentials=Credentials('testing', 'testing'))
        transport = _real_transport(client)

        assert transport.meta.service_model.service_name == client_class.SERVICE_NAME
        with Stubber(transport) as stubber:
            stubber.add_response(method, response, params)
            outcome = getattr(client, method)(params)
            stubber.assert_no_pending_responses()

        assert outcome.is_success
        assert outcome.result == response
        client.close()

    @pytest.mark.parametrize('client_class,method,params,response', STUBBED_CALLS)
    def test_callable_dispatch(self, configuration, client_class, method, params, response):
        """Test the callable variant uses the same botocore client."""
        client = client_class(configuration, credentials=Credentials('testing', 'testing'))
        transport = _real_transport(client)

        with Stubber(transport) as stubber:
            stubber.add_response(method, response, params)
            outcome = getattr(client, f'{method}_callable')(params).result(timeout=10)

        assert outcome.get_result() == response
        client.close()

    def test_optional_none_member_not_sent(self, configuration):
        """Test an optional member set to None is dropped before botocore validates."""
        client = ProtonClient(configuration, credentials=Credentials('testing', 'testing'))
        transport = _real_transport(client)

        with Stubber(transport) as stubber:
            stubber.add_response('list_environments', {'environments': []}, {'maxResults': 5})
            outcome = client.list_environments(maxResults=5, nextToken=None)

        assert outcome.is_success

    def test_unknown_member_is_validation_error(self, configuration):
        """Test botocore's parameter validation surfaces as a VALIDATION outcome."""
        client = DeviceFarmClient(configuration, credentials=Credentials('testing', 'testing'))

        outcome = client.list_projects(notAMember='x')

        assert outcome.error.error_type is CoreErrors.VALIDATION

    def test_service_error(self, configuration):
        """Test a stubbed service error is wrapped with its code and status."""
        client = MediaTailorClient(configuration, credentials=Credentials('testing', 'testing'))

        with Stubber(_real_transport(client)) as stubber:
            stubber.add_client_error(
                'describe_channel',
                service_error_code='NotFoundException',
                service_message='Channel not found',
                http_status_code=404,
                expected_params={'ChannelName': 'live'},
            )
            outcome = client.describe_channel(ChannelName='live')

        assert outcome.error.error_type is CoreErrors.SERVICE
        assert outcome.error.exception_name == 'NotFoundException'
        assert outcome.error.response_code == 404


@pytest.mark.moto_integration
class TestOpsWorksBackend:
    """Tests for the OpsWorks client against moto's backend."""

    @pytest.fixture
    def opsworks(self, aws_credentials, executor):
        with mock_aws():
            client = OpsWorksClient(ClientConfiguration(region='us-east-1', executor=executor))
            yield client
            client.close()

    def test_describe_stacks(self, opsworks):
        """Test the OpsWorks model is installed and the call dispatches."""
        outcome = opsworks.describe_stacks()

        assert outcome.is_success
        assert outcome.result['Stacks'] == []

    def test_create_and_describe_stack(self, opsworks):
        """Test a created stack is returned by describe_stacks."""
        created = opsworks.create_stack(
            Name='wod-stack',
            Region='us-east-1',
            ServiceRoleArn='arn:aws:iam::123456789012:role/aws-opsworks-service-role',
            DefaultInstanceProfileArn='arn:aws:iam::123456789012:instance-profile/aws-opsworks-ec2-role',
        )

        assert created.is_success
        stack_id = created.result['StackId']
        described = opsworks.describe_stacks(StackIds=[stack_id])
        assert described.get_result()['Stacks'][0]['Name'] == 'wod-stack'
