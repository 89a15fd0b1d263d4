# Copyright (c) 2025-2026 OptimNow. All Rights Reserved.
# Licensed under the Apache License, Version 2.0.
# See LICENSE file in the project root for full license information.

"""Resolve a parsed Lambda ARN into a pre-signed artifact download URL.

Functions and layers are looked up through different Lambda API calls but
share one response contract: an object (``Code`` or ``Content``) holding a
time-bound ``Location`` URL. Each kind has its own locator, selected by the
identifier's ResourceKind.
"""

from typing import Any, Callable, Protocol

from botocore.exceptions import BotoCoreError

from ..clients.lambda_client import LambdaClient, classify_botocore_error
from ..clients.regional_client_factory import RegionalClientFactory
from ..errors import IncompleteResponseError
from ..models import ResourceKind, StructuredIdentifier
from ..utils.arn_utils import region_of

ClientFactory = Callable[[str], LambdaClient]


def extract_location(response: dict[str, Any], container_key: str, arn: str) -> str:
    """
    Pull ``<container_key>.Location`` out of a Lambda API response.

    Raises:
        IncompleteResponseError: If the container or the location is missing
    """
    container = response.get(container_key)
    if not container:
        raise IncompleteResponseError(
            f"Response for {arn} has no '{container_key}' object",
            detail=container_key,
        )

    location = container.get("Location")
    if not location:
        raise IncompleteResponseError(
            f"Response for {arn} has no '{container_key}.Location' field",
            detail=f"{container_key}.Location",
        )

    return location


class ResourceLocator(Protocol):
    """Looks up the download location of one kind of Lambda resource."""

    async def locate(self, client: LambdaClient, arn: str) -> str:
        ...


class FunctionLocator:
    """Locates a function's deployment package via GetFunction."""

    async def locate(self, client: LambdaClient, arn: str) -> str:
        response = await client.get_function(arn)
        return extract_location(response, "Code", arn)


class LayerLocator:
    """Locates a layer version's content via GetLayerVersionByArn."""

    async def locate(self, client: LambdaClient, arn: str) -> str:
        response = await client.get_layer_version_by_arn(arn)
        return extract_location(response, "Content", arn)


DEFAULT_LOCATORS: dict[ResourceKind, ResourceLocator] = {
    ResourceKind.FUNCTION: FunctionLocator(),
    ResourceKind.LAYER: LayerLocator(),
}


class ResourceResolver:
    """
    Resolves StructuredIdentifiers into pre-signed download URLs.

    The Lambda client is obtained from an injected factory keyed by region,
    so tests can hand in a fake client without touching real credentials.
    """

    def __init__(
        self,
        client_factory: ClientFactory | None = None,
        locators: dict[ResourceKind, ResourceLocator] | None = None,
    ):
        """
        Initialize the resolver.

        Args:
            client_factory: Callable returning a LambdaClient for a region.
                            Defaults to a fresh RegionalClientFactory.
            locators: Locator per resource kind. Defaults to DEFAULT_LOCATORS.
        """
        if client_factory is None:
            client_factory = RegionalClientFactory().get_client
        self._client_factory = client_factory
        self._locators = locators or DEFAULT_LOCATORS

    async def resolve(self, identifier: StructuredIdentifier) -> str:
        """
        Resolve the download URL for a function or layer.

        Args:
            identifier: Parsed ARN

        Returns:
            Pre-signed, time-bound URL of the packaged artifact

        Raises:
            UnreachableError: Lambda API unreachable or no credentials
            ServiceRejectedError: Lambda API returned an error
            IncompleteResponseError: Response lacked the location
            UnclassifiedResolveError: Any other botocore failure
        """
        region = region_of(identifier.original)

        try:
            client = self._client_factory(region)
        except BotoCoreError as e:
            raise classify_botocore_error(e, "CreateClient") from e

        locator = self._locators[identifier.kind]
        return await locator.locate(client, identifier.original)
