"""Chirp model."""

from sqlalchemy import Column, ForeignKey, String, Uuid
from sqlalchemy.orm import relationship

from chirpy.database import Base
from chirpy.models.mixins import TimestampMixin, UUIDMixin


class Chirp(Base, UUIDMixin, TimestampMixin):
    """A short text post owned by a user."""

    __tablename__ = "chirps"

    # Moderated text; the raw input is capped at 140 characters before moderation
    body = Column(String, nullable=False)
    user_id = Column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    # Relationships
    user = relationship("User", back_populates="chirps")
