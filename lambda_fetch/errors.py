# Copyright (c) 2025-2026 OptimNow. All Rights Reserved.
# Licensed under the Apache License, Version 2.0.
# See LICENSE file in the project root for full license information.

"""Exception hierarchy for the Lambda artifact downloader.

Every failure raised by the parser, resolver, fetcher or writer is a
LambdaFetchError subclass tagged with an ErrorKind, so callers can branch
on ``exc.kind`` or on the exception class.
"""

from typing import Any

from .models.enums import ErrorKind


class LambdaFetchError(Exception):
    """Base class for all download pipeline failures."""

    kind: ErrorKind = ErrorKind.OTHER

    def __init__(self, message: str, detail: Any = None):
        """
        Initialize the error.

        Args:
            message: Human-readable description of the failure
            detail: Underlying diagnostic (exception, response payload, ...)
        """
        super().__init__(message)
        self.message = message
        self.detail = detail


# =============================================================================
# Parser errors
# =============================================================================

class ParseError(LambdaFetchError):
    """Raised when an ARN cannot be parsed."""


class MalformedArnError(ParseError):
    """ARN is missing the ``arn:`` prefix or has fewer than 7 segments."""

    kind = ErrorKind.MALFORMED_ARN


class UnsupportedResourceTypeError(ParseError):
    """ARN resource type is neither ``function`` nor ``layer``."""

    kind = ErrorKind.UNSUPPORTED_RESOURCE_TYPE

    def __init__(self, resource_type: str):
        super().__init__(
            f"Unsupported resource type '{resource_type}': "
            "ARN must be a Lambda function or layer",
            detail=resource_type,
        )
        self.resource_type = resource_type


# =============================================================================
# Resolver errors
# =============================================================================

class ResolveError(LambdaFetchError):
    """Raised when the Lambda API does not yield a download location."""


class UnreachableError(ResolveError):
    """The Lambda API could not be reached or no credentials were found."""

    kind = ErrorKind.UNREACHABLE


class ServiceRejectedError(ResolveError):
    """The Lambda API processed the request and returned an error."""

    kind = ErrorKind.SERVICE_REJECTED

    def __init__(self, message: str, error_code: str = "", detail: Any = None):
        super().__init__(message, detail=detail)
        self.error_code = error_code


class IncompleteResponseError(ResolveError):
    """The Lambda API answered without the expected location field."""

    kind = ErrorKind.INCOMPLETE_RESPONSE


class UnclassifiedResolveError(ResolveError):
    """Any other transport or protocol error from botocore."""

    kind = ErrorKind.OTHER


# =============================================================================
# Fetcher and writer errors
# =============================================================================

class FetchError(LambdaFetchError):
    """Raised when the artifact cannot be downloaded."""


class DownloadFailedError(FetchError):
    """Non-2xx HTTP status or transport failure on the artifact GET."""

    kind = ErrorKind.DOWNLOAD_FAILED

    def __init__(self, message: str, status_code: int | None = None, detail: Any = None):
        super().__init__(message, detail=detail)
        self.status_code = status_code


class WriteFailedError(LambdaFetchError):
    """The artifact could not be written to the destination path."""

    kind = ErrorKind.WRITE_FAILED

    def __init__(self, path: str, detail: Any = None):
        super().__init__(f"Could not write artifact to {path}", detail=detail)
        self.path = path
