"""Parsed Lambda ARN data model."""

from pydantic import BaseModel, ConfigDict, Field

from .enums import ResourceKind


class StructuredIdentifier(BaseModel):
    """A validated Lambda ARN together with its resource kind."""

    model_config = ConfigDict(frozen=True)

    original: str = Field(..., description="The validated ARN, kept verbatim for API lookups")
    kind: ResourceKind = Field(..., description="Whether the ARN names a function or a layer")
