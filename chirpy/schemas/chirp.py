"""Chirp schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class ChirpCreate(BaseModel):
    """Create a new chirp.

    Length and id syntax are checked by the chirp service, not here, so that
    both failures produce their own error messages.
    """

    body: str
    user_id: str


class ChirpResponse(BaseModel):
    """Chirp response."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    created_at: datetime
    updated_at: datetime
    body: str
    user_id: UUID
