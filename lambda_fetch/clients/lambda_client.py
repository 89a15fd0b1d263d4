# Copyright (c) 2025-2026 OptimNow. All Rights Reserved.
# Licensed under the Apache License, Version 2.0.
# See LICENSE file in the project root for full license information.

"""Lambda API client wrapper with a single failure taxonomy."""

import asyncio
from typing import Any, Callable

import boto3
from botocore.config import Config
from botocore.exceptions import (
    BotoCoreError,
    ClientError,
    ConnectionError as BotoConnectionError,
    CredentialRetrievalError,
    InvalidConfigError,
    NoCredentialsError,
    PartialCredentialsError,
    ProfileNotFound,
    SSOError,
    TokenRetrievalError,
)

from ..errors import (
    ResolveError,
    ServiceRejectedError,
    UnclassifiedResolveError,
    UnreachableError,
)

# Failures that happen before the service sees the request: the credential
# chain yields nothing usable (missing or partial keys, unknown profile,
# broken config file, expired SSO token), or the endpoint cannot be reached.
UNREACHABLE_ERRORS = (
    NoCredentialsError,
    PartialCredentialsError,
    ProfileNotFound,
    CredentialRetrievalError,
    InvalidConfigError,
    SSOError,
    TokenRetrievalError,
    BotoConnectionError,
)


def build_boto_config(
    connect_timeout: float = 10.0,
    read_timeout: float = 60.0,
) -> Config:
    """
    Build the botocore configuration shared by all Lambda clients.

    Every call is a single attempt: failures are reported, never retried.

    Args:
        connect_timeout: Connect timeout in seconds
        read_timeout: Read timeout in seconds

    Returns:
        botocore Config
    """
    return Config(
        connect_timeout=connect_timeout,
        read_timeout=read_timeout,
        retries={
            'max_attempts': 1,
            'mode': 'standard'
        }
    )


def classify_botocore_error(exc: Exception, operation: str) -> ResolveError:
    """
    Map a boto3/botocore exception onto the resolver error taxonomy.

    Args:
        exc: Exception raised by boto3
        operation: Lambda API operation name, used in the message

    Returns:
        UnreachableError, ServiceRejectedError or UnclassifiedResolveError
    """
    if isinstance(exc, ClientError):
        error = exc.response.get('Error', {})
        error_code = error.get('Code', '')
        error_message = error.get('Message', '')
        return ServiceRejectedError(
            f"{operation} failed: {error_code} - {error_message}",
            error_code=error_code,
            detail=error,
        )

    if isinstance(exc, UNREACHABLE_ERRORS):
        return UnreachableError(f"{operation} could not be sent: {exc}", detail=exc)

    return UnclassifiedResolveError(f"{operation} failed: {exc}", detail=exc)


class LambdaClient:
    """
    Wrapper around a regional boto3 Lambda client.

    Uses the default boto3 credential chain (environment, shared profile,
    instance or task role) - no credentials are accepted here.
    Blocking boto3 calls are run in the default executor.
    """

    def __init__(
        self,
        region: str,
        boto_config: Config | None = None,
        boto_client: Any = None,
    ):
        """
        Initialize the Lambda client.

        Args:
            region: AWS region the Lambda API is called in
            boto_config: Optional botocore Config; single-attempt default if None
            boto_client: Optional pre-built boto3 Lambda client (used in tests)
        """
        self.region = region
        if boto_client is None:
            boto_client = boto3.client(
                'lambda',
                region_name=region,
                config=boto_config or build_boto_config()
            )
        self.lambda_client = boto_client

    async def _call(self, operation: str, func: Callable[..., dict], **kwargs) -> dict[str, Any]:
        """
        Call a Lambda API operation once.

        Args:
            operation: Operation name for error messages
            func: Bound boto3 client method
            **kwargs: Request parameters

        Returns:
            Response dictionary from the Lambda API

        Raises:
            ResolveError: Classified failure of the call
        """
        loop = asyncio.get_running_loop()
        try:
            return await loop.run_in_executor(None, lambda: func(**kwargs))
        except (ClientError, BotoCoreError) as e:
            raise classify_botocore_error(e, operation) from e

    async def get_function(self, function_name: str) -> dict[str, Any]:
        """
        Fetch function metadata, including the ``Code.Location`` download URL.

        Args:
            function_name: Function name, ARN or qualified ARN

        Returns:
            GetFunction response
        """
        return await self._call(
            "GetFunction",
            self.lambda_client.get_function,
            FunctionName=function_name
        )

    async def get_layer_version_by_arn(self, arn: str) -> dict[str, Any]:
        """
        Fetch layer version metadata, including the ``Content.Location`` download URL.

        Args:
            arn: Layer version ARN

        Returns:
            GetLayerVersionByArn response
        """
        return await self._call(
            "GetLayerVersionByArn",
            self.lambda_client.get_layer_version_by_arn,
            Arn=arn
        )
