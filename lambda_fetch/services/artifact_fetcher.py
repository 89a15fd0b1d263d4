# Copyright (c) 2025-2026 OptimNow. All Rights Reserved.
# Licensed under the Apache License, Version 2.0.
# See LICENSE file in the project root for full license information.

"""Download an artifact from a pre-signed URL."""

import asyncio

import requests

from ..errors import DownloadFailedError
from ..utils.error_sanitization import redact_presigned_url


class ArtifactFetcher:
    """
    Fetches artifact bytes with a plain, unauthenticated HTTP GET.

    The URL is expected to be pre-signed by the issuing service, so no
    credentials or auth headers are attached. The whole body is buffered.
    """

    def __init__(self, session: requests.Session | None = None, timeout: float = 300.0):
        """
        Initialize the fetcher.

        Args:
            session: Optional requests session (a new one is created if None)
            timeout: Request timeout in seconds
        """
        self.session = session or requests.Session()
        self.timeout = timeout

    def _get(self, url: str) -> bytes:
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            raise DownloadFailedError(
                f"GET {redact_presigned_url(url)} failed: {type(e).__name__}",
                detail=e,
            ) from e

        if not 200 <= response.status_code < 300:
            raise DownloadFailedError(
                f"GET {redact_presigned_url(url)} returned HTTP {response.status_code}",
                status_code=response.status_code,
                detail=response.reason,
            )

        return response.content

    async def fetch(self, url: str) -> bytes:
        """
        Download the artifact at ``url``.

        Args:
            url: Pre-signed download URL

        Returns:
            Response body, verbatim

        Raises:
            DownloadFailedError: On a non-2xx status or a transport error
        """
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self._get, url)
