"""AWS client wrapper module."""

from .lambda_client import LambdaClient, build_boto_config, classify_botocore_error
from .regional_client_factory import RegionalClientFactory

__all__ = [
    "LambdaClient",
    "RegionalClientFactory",
    "build_boto_config",
    "classify_botocore_error",
]
