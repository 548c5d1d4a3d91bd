"""
Shared fixtures for service client tests.
"""
from concurrent.futures import ThreadPoolExecutor
from unittest.mock import Mock

import pytest

from services.client_configuration import ClientConfiguration


@pytest.fixture
def aws_credentials(monkeypatch):
    """Fake credentials so botocore never reads a real profile."""
    monkeypatch.setenv('AWS_ACCESS_KEY_ID', 'testing')
    monkeypatch.setenv('AWS_SECRET_ACCESS_KEY', 'testing')
    monkeypatch.setenv('AWS_SECURITY_TOKEN', 'testing')
    monkeypatch.setenv('AWS_SESSION_TOKEN', 'testing')
    monkeypatch.setenv('AWS_DEFAULT_REGION', 'us-east-1')


@pytest.fixture
def executor():
    """Dedicated executor so tests never share the process-wide pool."""
    pool = ThreadPoolExecutor(max_workers=2, thread_name_prefix='test-client')
    yield pool
    pool.shutdown(wait=True)


@pytest.fixture
def client_configuration(executor):
    """Client configuration for us-west-2 using the test executor."""
    return ClientConfiguration(region='us-west-2', executor=executor)


@pytest.fixture
def transport():
    """Stand-in for the botocore client."""
    return Mock()


@pytest.fixture
def session(transport):
    """boto3 session stand-in whose client() returns the mocked transport."""
    mock_session = Mock()
    mock_session.client.return_value = transport
    return mock_session


@pytest.fixture(autouse=True)
def reset_config():
    """Drop the cached environment config between tests."""
    import config
    config._config = None
    yield
    config._config = None
