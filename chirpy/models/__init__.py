"""SQLAlchemy models."""

from chirpy.models.chirp import Chirp
from chirpy.models.user import User

__all__ = [
    "User",
    "Chirp",
]
