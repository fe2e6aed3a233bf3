"""
Common API response models.
"""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Error body returned for 400 and 500 responses."""

    error: str = Field(..., description="Human-readable error message")


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str = Field(..., description="Service status")
    message: str = Field(..., description="Health check message")
    version: str | None = Field(None, description="Service version")
    dependencies: dict[str, str] | None = Field(None, description="Dependency status")
