# Copyright (c) 2025-2026 OptimNow. All Rights Reserved.
# Licensed under the Apache License, Version 2.0.
# See LICENSE file in the project root for full license information.

"""Factory for creating and caching regional Lambda clients."""

from botocore.config import Config

from .lambda_client import LambdaClient, build_boto_config


class RegionalClientFactory:
    """
    Factory for creating and caching regional Lambda clients.

    The region comes from the ARN being resolved, so a client is built on
    demand for whichever region is asked for and reused afterwards.
    The same botocore configuration is applied to every client.
    """

    def __init__(self, boto_config: Config | None = None):
        """
        Initialize with an optional botocore config.

        Args:
            boto_config: Config applied to all clients. If None, a
                        single-attempt config with default timeouts is used.
        """
        self._boto_config = boto_config or build_boto_config()
        self._clients: dict[str, LambdaClient] = {}

    @property
    def boto_config(self) -> Config:
        """Get the botocore configuration."""
        return self._boto_config

    @property
    def cached_regions(self) -> list[str]:
        """Get list of regions with cached clients."""
        return list(self._clients.keys())

    def get_client(self, region: str) -> LambdaClient:
        """
        Get or create a Lambda client for the specified region.

        Args:
            region: AWS region code (e.g., "us-east-1", "eu-west-1")

        Returns:
            LambdaClient configured for the specified region
        """
        if region in self._clients:
            return self._clients[region]

        client = LambdaClient(region=region, boto_config=self._boto_config)
        self._clients[region] = client

        return client

    def has_client(self, region: str) -> bool:
        """Check if a client is cached for the specified region."""
        return region in self._clients

    def clear_clients(self) -> None:
        """Drop all cached clients."""
        self._clients.clear()
