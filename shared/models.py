from pydantic import BaseModel, ConfigDict, Field


# Request/Response Models
class AdjustmentRequest(BaseModel):
    """Body of ``POST /api/tone/adjust``, camelCase on the wire."""

    model_config = ConfigDict(populate_by_name=True)

    text: str = Field(..., description="Text to transform")
    tone_level: int = Field(..., alias="toneLevel", ge=0, le=100, description="0 formal .. 100 casual")
    style_level: int = Field(
        ..., alias="styleLevel", ge=0, le=100, description="0 concise .. 100 expanded"
    )


class AdjustmentResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    adjusted_text: str = Field(..., alias="adjustedText")
    original_text: str | None = Field(None, alias="originalText")
    tone_level: int | None = Field(None, alias="toneLevel")
    style_level: int | None = Field(None, alias="styleLevel")
    cached: bool = Field(default=False, description="Whether the result came from the cache")
