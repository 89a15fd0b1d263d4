# Copyright (c) 2025-2026 OptimNow. All Rights Reserved.
# Licensed under the Apache License, Version 2.0.
# See LICENSE file in the project root for full license information.

"""Download pipeline: parse, resolve, fetch, write."""

import logging
from pathlib import Path

from ..models import DownloadResult
from ..utils.arn_utils import parse_arn, region_of
from ..utils.error_sanitization import redact_presigned_url
from .artifact_fetcher import ArtifactFetcher
from .artifact_writer import ArtifactWriter
from .resource_resolver import ResourceResolver

logger = logging.getLogger(__name__)


class DownloadService:
    """
    Service for downloading Lambda function and layer artifacts.

    Runs the stages strictly in sequence for one ARN. Any stage failure is
    raised to the caller unchanged; nothing is retried.
    """

    def __init__(
        self,
        resolver: ResourceResolver | None = None,
        fetcher: ArtifactFetcher | None = None,
        writer: ArtifactWriter | None = None,
    ):
        """
        Initialize download service.

        Args:
            resolver: Resolver turning ARNs into download URLs
            fetcher: Fetcher downloading the artifact bytes
            writer: Writer saving the bytes to disk
        """
        self.resolver = resolver or ResourceResolver()
        self.fetcher = fetcher or ArtifactFetcher()
        self.writer = writer or ArtifactWriter()

    async def fetch_bytes(self, raw_arn: str) -> bytes:
        """
        Resolve and download the artifact for an ARN without writing it.

        Emits no log records; failures are only raised.

        Args:
            raw_arn: Lambda function or layer ARN

        Returns:
            Artifact bytes

        Raises:
            LambdaFetchError: From whichever stage failed
        """
        identifier = parse_arn(raw_arn)
        url = await self.resolver.resolve(identifier)
        return await self.fetcher.fetch(url)

    async def download(self, raw_arn: str, dest: str | Path) -> DownloadResult:
        """
        Download the artifact for an ARN and write it to ``dest``.

        Args:
            raw_arn: Lambda function or layer ARN
            dest: Destination file path

        Returns:
            DownloadResult describing what was written

        Raises:
            LambdaFetchError: From whichever stage failed
        """
        identifier = parse_arn(raw_arn)
        region = region_of(identifier.original)
        logger.info(f"Resolving {identifier.kind.value} {identifier.original}")

        url = await self.resolver.resolve(identifier)
        logger.debug(f"Resolved download location {redact_presigned_url(url)}")

        data = await self.fetcher.fetch(url)
        path = self.writer.write(data, dest)
        logger.info(f"Wrote {len(data)} bytes to {path}")

        return DownloadResult(
            arn=identifier.original,
            kind=identifier.kind,
            region=region,
            destination=str(path),
            size_bytes=len(data),
        )
