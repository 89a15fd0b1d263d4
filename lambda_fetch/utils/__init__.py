"""Utility modules for the Lambda artifact downloader."""

from .arn_utils import is_lambda_arn, parse_arn, region_of
from .error_sanitization import (
    redact_presigned_url,
    redact_sensitive_info,
    sanitize_error_message,
)

__all__ = [
    "is_lambda_arn",
    "parse_arn",
    "region_of",
    "redact_presigned_url",
    "redact_sensitive_info",
    "sanitize_error_message",
]
