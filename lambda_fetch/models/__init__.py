"""Data models for the Lambda artifact downloader."""

from .enums import ErrorKind, ResourceKind
from .identifier import StructuredIdentifier
from .download import DownloadResult

__all__ = [
    "ErrorKind",
    "ResourceKind",
    "StructuredIdentifier",
    "DownloadResult",
]
