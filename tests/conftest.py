"""Pytest configuration and shared fixtures."""

import pytest
from unittest.mock import MagicMock, AsyncMock

from lambda_fetch.clients.lambda_client import LambdaClient


FUNCTION_ARN = "arn:aws:lambda:us-east-1:123456789012:function:my-fn"
LAYER_ARN = "arn:aws:lambda:eu-west-1:123456789012:layer:my-layer:3"
PRESIGNED_URL = (
    "https://awslambda-us-east-1-tasks.s3.us-east-1.amazonaws.com/snapshots/"
    "123456789012/my-fn-abc?X-Amz-Algorithm=AWS4-HMAC-SHA256"
    "&X-Amz-Credential=ASIAEXAMPLEEXAMPLE12%2F20250101%2Fus-east-1%2Fs3%2Faws4_request"
    "&X-Amz-Signature=deadbeefcafe"
)


# =============================================================================
# Environment and Configuration Fixtures
# =============================================================================

@pytest.fixture
def test_env(monkeypatch):
    """Set up test environment variables."""
    test_vars = {
        "AWS_ACCESS_KEY_ID": "testing",
        "AWS_SECRET_ACCESS_KEY": "testing",
        "AWS_SECURITY_TOKEN": "testing",
        "AWS_SESSION_TOKEN": "testing",
        "AWS_DEFAULT_REGION": "us-east-1",
        "LOG_LEVEL": "DEBUG",
    }
    for key, value in test_vars.items():
        monkeypatch.setenv(key, value)
    return test_vars


# =============================================================================
# AWS and HTTP Mocks
# =============================================================================

@pytest.fixture
def function_arn():
    return FUNCTION_ARN


@pytest.fixture
def layer_arn():
    return LAYER_ARN


@pytest.fixture
def presigned_url():
    return PRESIGNED_URL


@pytest.fixture
def mock_lambda_client():
    """Create a mock LambdaClient returning well-formed responses."""
    client = MagicMock(spec=LambdaClient)
    client.get_function = AsyncMock(
        return_value={
            "Configuration": {"FunctionName": "my-fn"},
            "Code": {"RepositoryType": "S3", "Location": PRESIGNED_URL},
        }
    )
    client.get_layer_version_by_arn = AsyncMock(
        return_value={
            "LayerVersionArn": LAYER_ARN,
            "Version": 3,
            "Content": {"Location": PRESIGNED_URL, "CodeSize": 42},
        }
    )
    return client


@pytest.fixture
def mock_boto_client():
    """Create a mock boto3 Lambda client."""
    client = MagicMock()
    client.get_function = MagicMock(
        return_value={"Code": {"Location": PRESIGNED_URL}}
    )
    client.get_layer_version_by_arn = MagicMock(
        return_value={"Content": {"Location": PRESIGNED_URL}}
    )
    return client


def _make_response(status_code: int = 200, content: bytes = b"", reason: str = "OK"):
    response = MagicMock()
    response.status_code = status_code
    response.content = content
    response.reason = reason
    return response


@pytest.fixture
def make_response():
    """Factory for stand-ins of requests.Response."""
    return _make_response


@pytest.fixture
def mock_session():
    """Create a mock requests session answering 200 with a small zip body."""
    session = MagicMock()
    session.get = MagicMock(return_value=_make_response(200, b"PK\x03\x04artifact"))
    return session


# =============================================================================
# Pytest Hooks for Test Reporting
# =============================================================================

def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
    config.addinivalue_line(
        "markers", "property: marks tests as property-based tests"
    )


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "property" in str(item.fspath):
            item.add_marker(pytest.mark.property)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
