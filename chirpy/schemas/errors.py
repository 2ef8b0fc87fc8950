"""Error response schema."""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Uniform error envelope."""

    error: str = Field(..., description="Human readable error message")

    model_config = {"json_schema_extra": {"examples": [{"error": "Chirp not found"}]}}
