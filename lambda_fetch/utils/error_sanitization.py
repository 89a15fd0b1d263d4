# Copyright (c) 2025-2026 OptimNow. All Rights Reserved.
# Licensed under the Apache License, Version 2.0.
# See LICENSE file in the project root for full license information.

"""Error message sanitization for terminal output and logs.

Lambda hands back pre-signed S3 URLs whose query strings carry temporary
credentials, and botocore diagnostics can echo access key ids. Anything
that may be printed or logged goes through these helpers first.
"""

import re
from urllib.parse import urlsplit, urlunsplit

from ..errors import LambdaFetchError
from ..models.enums import ErrorKind

# Patterns for detecting sensitive information in messages
SENSITIVE_PATTERNS = {
    "credentials": [
        r"(?:AKIA|ASIA)[0-9A-Z]{16}",  # AWS Access Key ID
        r"(?i)aws_secret_access_key['\"]?\s*[:=]\s*['\"]?[A-Za-z0-9/+=]{40}",
        r"(?i)aws_session_token['\"]?\s*[:=]\s*['\"]?[^\s'\"]+",
    ],
    # Pre-signed URL query parameters
    "presigned_query": [
        r"(?i)(?<=X-Amz-Signature=)[^&\s'\"]+",
        r"(?i)(?<=X-Amz-Credential=)[^&\s'\"]+",
        r"(?i)(?<=X-Amz-Security-Token=)[^&\s'\"]+",
    ],
}

COMPILED_PATTERNS = {
    category: [re.compile(pattern) for pattern in patterns]
    for category, patterns in SENSITIVE_PATTERNS.items()
}

# User-facing messages per error kind
USER_MESSAGES = {
    ErrorKind.MALFORMED_ARN: "Invalid ARN",
    ErrorKind.UNSUPPORTED_RESOURCE_TYPE: "ARN must be a Lambda function or layer",
    ErrorKind.UNREACHABLE: "Could not reach the Lambda API (no credentials found or network unreachable)",
    ErrorKind.SERVICE_REJECTED: "The Lambda API rejected the request",
    ErrorKind.INCOMPLETE_RESPONSE: "The Lambda API response did not include a download location",
    ErrorKind.OTHER: "Unexpected error while calling the Lambda API",
    ErrorKind.DOWNLOAD_FAILED: "Failed to download the artifact",
    ErrorKind.WRITE_FAILED: "Failed to write the artifact",
}


def redact_sensitive_info(text: str, replacement: str = "[REDACTED]") -> str:
    """
    Redact credentials and pre-signed URL signatures from text.

    Args:
        text: Text to redact
        replacement: String to use for redacted content

    Returns:
        Text with sensitive information redacted
    """
    if not text:
        return text

    result = text
    for patterns in COMPILED_PATTERNS.values():
        for pattern in patterns:
            result = pattern.sub(replacement, result)

    return result


def redact_presigned_url(url: str) -> str:
    """Drop the query string (and its signature) from a pre-signed URL."""
    parts = urlsplit(url)
    if not parts.query:
        return url
    return urlunsplit((parts.scheme, parts.netloc, parts.path, "", ""))


def sanitize_error_message(exc: LambdaFetchError) -> str:
    """
    Build a user-safe, one-line message for a pipeline error.

    Args:
        exc: Error raised by the download pipeline

    Returns:
        Message of the form "<summary>: <redacted detail>"
    """
    summary = USER_MESSAGES.get(exc.kind, USER_MESSAGES[ErrorKind.OTHER])
    return f"{summary}: {redact_sensitive_info(exc.message)}"
