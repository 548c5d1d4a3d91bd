"""
Integration tests running the CodeBuild client against moto's mocked backend.
"""
import pytest
from moto import mock_aws
from moto.core import DEFAULT_ACCOUNT_ID

from services.client_configuration import ClientConfiguration
from services.codebuild_service import CodeBuildClient
from services.outcome import CoreErrors


def _project_request(name):
    return {
        'name': name,
        'source': {'type': 'S3', 'location': 'bucket/path/source.zip'},
        'artifacts': {'type': 'NO_ARTIFACTS'},
        'environment': {
            'type': 'LINUX_CONTAINER',
            'image': 'aws/codebuild/standard:7.0',
            'computeType': 'BUILD_GENERAL1_SMALL',
        },
        'serviceRole': f'arn:aws:iam::{DEFAULT_ACCOUNT_ID}:role/service-role/codebuild-role',
    }


@pytest.fixture
def codebuild(aws_credentials, executor):
    with mock_aws():
        client = CodeBuildClient(ClientConfiguration(region='us-east-1', executor=executor))
        yield client
        client.close()


@pytest.mark.moto_integration
def test_create_and_list_projects(codebuild):
    """Test a created project is returned by list_projects."""
    created = codebuild.create_project(_project_request('wod-build'))

    assert created.is_success
    assert created.result['project']['name'] == 'wod-build'

    listed = codebuild.list_projects()
    assert listed.is_success
    assert 'wod-build' in listed.result['projects']


@pytest.mark.moto_integration
def test_callable_against_backend(codebuild):
    """Test the callable variant reaches the mocked backend from the executor."""
    codebuild.create_project(_project_request('async-build')).get_result()

    outcome = codebuild.list_projects_callable().result(timeout=10)

    assert outcome.get_result()['projects'] == ['async-build']


@pytest.mark.moto_integration
def test_duplicate_project_is_service_error(codebuild):
    """Test a service-side failure comes back as a SERVICE outcome."""
    codebuild.create_project(_project_request('dup')).get_result()

    outcome = codebuild.create_project(_project_request('dup'))

    assert not outcome.is_success
    assert outcome.error.error_type is CoreErrors.SERVICE
    assert outcome.error.exception_name == 'ResourceAlreadyExistsException'
    assert outcome.error.response_code == 400


@pytest.mark.moto_integration
def test_botocore_validation(codebuild):
    """Test members unknown to the model are rejected before sending."""
    outcome = codebuild.list_projects(notAMember=True)

    assert outcome.error.error_type is CoreErrors.VALIDATION
