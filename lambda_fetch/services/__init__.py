"""Service layer for the Lambda artifact downloader."""

from .resource_resolver import (
    FunctionLocator,
    LayerLocator,
    ResourceLocator,
    ResourceResolver,
)
from .artifact_fetcher import ArtifactFetcher
from .artifact_writer import ArtifactWriter
from .download_service import DownloadService

__all__ = [
    "FunctionLocator",
    "LayerLocator",
    "ResourceLocator",
    "ResourceResolver",
    "ArtifactFetcher",
    "ArtifactWriter",
    "DownloadService",
]
