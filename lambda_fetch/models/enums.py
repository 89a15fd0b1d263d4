"""Enumerations for resource kinds and error kinds."""

from enum import Enum


class ResourceKind(str, Enum):
    """Lambda resource types that can be downloaded."""

    FUNCTION = "function"
    LAYER = "layer"


class ErrorKind(str, Enum):
    """Failure categories surfaced by the download pipeline."""

    MALFORMED_ARN = "malformed_arn"
    UNSUPPORTED_RESOURCE_TYPE = "unsupported_resource_type"
    UNREACHABLE = "unreachable"
    SERVICE_REJECTED = "service_rejected"
    INCOMPLETE_RESPONSE = "incomplete_response"
    OTHER = "other"
    DOWNLOAD_FAILED = "download_failed"
    WRITE_FAILED = "write_failed"
