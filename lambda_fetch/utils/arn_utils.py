# Copyright (c) 2025-2026 OptimNow. All Rights Reserved.
# Licensed under the Apache License, Version 2.0.
# See LICENSE file in the project root for full license information.

"""Lambda ARN parsing and classification.

Function ARN: arn:aws:lambda:us-east-1:123456789012:function:my-fn[:qualifier]
Layer ARN:    arn:aws:lambda:us-east-1:123456789012:layer:my-layer:3

Pure string inspection only: nothing here touches the network or the
filesystem.
"""

from ..errors import MalformedArnError, ParseError, UnsupportedResourceTypeError
from ..models import ResourceKind, StructuredIdentifier

ARN_PREFIX = "arn:"
MIN_SEGMENTS = 7

# Segment indexes in a colon-split ARN
REGION_INDEX = 3
RESOURCE_TYPE_INDEX = 5

RESOURCE_KINDS = {
    "function": ResourceKind.FUNCTION,
    "layer": ResourceKind.LAYER,
}


def parse_arn(raw: str) -> StructuredIdentifier:
    """
    Validate and classify a Lambda ARN.

    Args:
        raw: ARN string supplied by the caller

    Returns:
        StructuredIdentifier carrying the ARN verbatim and its resource kind

    Raises:
        MalformedArnError: If the ARN lacks the ``arn:`` prefix or has
            fewer than 7 colon-delimited segments
        UnsupportedResourceTypeError: If the resource type segment is not
            ``function`` or ``layer``

    Example:
        >>> parse_arn("arn:aws:lambda:us-east-1:123456789012:function:my-fn").kind
        <ResourceKind.FUNCTION: 'function'>
    """
    parts = raw.split(":")

    if not raw.startswith(ARN_PREFIX) or len(parts) < MIN_SEGMENTS:
        raise MalformedArnError(
            f"Invalid ARN '{raw}': must start with '{ARN_PREFIX}' and have at "
            f"least {MIN_SEGMENTS} colon-separated parts",
            detail=raw,
        )

    resource_type = parts[RESOURCE_TYPE_INDEX]
    kind = RESOURCE_KINDS.get(resource_type)
    if kind is None:
        raise UnsupportedResourceTypeError(resource_type)

    return StructuredIdentifier(original=raw, kind=kind)


def region_of(arn: str) -> str:
    """
    Extract the region segment from an ARN that already passed parse_arn.

    Not validated again: calling this on unparsed input may raise IndexError.
    """
    return arn.split(":")[REGION_INDEX]


def is_lambda_arn(raw: str) -> bool:
    """Return True if ``raw`` parses as a Lambda function or layer ARN."""
    try:
        parse_arn(raw)
    except ParseError:
        return False
    return True
