"""User model."""

from sqlalchemy import Column, String
from sqlalchemy.orm import relationship

from chirpy.database import Base
from chirpy.models.mixins import TimestampMixin, UUIDMixin


class User(Base, UUIDMixin, TimestampMixin):
    """User model for authentication and chirp ownership."""

    __tablename__ = "users"

    email = Column(String(255), unique=True, nullable=False, index=True)
    hashed_password = Column(String(255), nullable=False)

    # Relationships
    chirps = relationship("Chirp", back_populates="user", passive_deletes=True)
