"""Download result data model."""

from pydantic import BaseModel, Field

from .enums import ResourceKind


class DownloadResult(BaseModel):
    """Summary of a completed artifact download."""

    arn: str = Field(..., description="ARN the artifact was resolved from")
    kind: ResourceKind = Field(..., description="Resource kind of the ARN")
    region: str = Field(..., description="AWS region the Lambda API was called in")
    destination: str = Field(..., description="Path the artifact was written to")
    size_bytes: int = Field(..., ge=0, description="Size of the written artifact")
