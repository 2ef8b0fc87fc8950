"""Chirp creation and retrieval."""

import logging

from sqlalchemy.exc import SQLAlchemyError

from chirpy.exceptions import InternalError, NotFound
from chirpy.models.chirp import Chirp
from chirpy.queries import Queries
from chirpy.services.moderation import moderate
from chirpy.services.validation import parse_chirp_id, parse_user_id, validate_chirp_body

logger = logging.getLogger(__name__)


class ChirpService:
    """Service for chirp operations."""

    def __init__(self, queries: Queries):
        self.queries = queries

    def create(self, body: str, user_id_raw: str) -> Chirp:
        """Validate, moderate and store a chirp.

        The author id is only checked for syntax; it is not tied to a logged-in
        session.
        """
        validate_chirp_body(body)
        user_id = parse_user_id(user_id_raw)
        cleaned_body = moderate(body)

        try:
            chirp = self.queries.create_chirp(cleaned_body, user_id)
        except SQLAlchemyError as e:
            logger.error(f"Error creating chirp: {e}")
            raise InternalError("Error creating chirp") from e

        logger.debug(f"Created chirp {chirp.id} for user {user_id}")
        return chirp

    def list(self) -> list[Chirp]:
        """Return every chirp, oldest first."""
        try:
            return self.queries.list_chirps()
        except SQLAlchemyError as e:
            logger.error(f"Error getting chirps: {e}")
            raise InternalError("Error getting chirps") from e

    def get(self, chirp_id_raw: str) -> Chirp:
        """Return a single chirp by id."""
        chirp_id = parse_chirp_id(chirp_id_raw)
        try:
            chirp = self.queries.get_chirp_by_id(chirp_id)
        except SQLAlchemyError as e:
            logger.error(f"Error getting chirp {chirp_id}: {e}")
            raise InternalError("Error getting chirp") from e
        if chirp is None:
            raise NotFound("Chirp not found")
        return chirp
