"""User registration, login and bulk reset."""

import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from chirpy.exceptions import DuplicateEmail, InternalError, InvalidCredentials
from chirpy.models.user import User
from chirpy.queries import Queries
from chirpy.services.auth import get_password_hash, verify_password_timing_safe

logger = logging.getLogger(__name__)


class UserService:
    """Service for user account operations."""

    def __init__(self, queries: Queries):
        self.queries = queries

    def register(self, email: str, password: str) -> User:
        """Create a user with a hashed password."""
        try:
            hashed_password = get_password_hash(password)
        except ValueError as e:
            logger.error(f"Error hashing password: {type(e).__name__}")
            raise InternalError("Error creating user") from e

        try:
            user = self.queries.create_user(email, hashed_password)
        except IntegrityError as e:
            logger.info(f"Registration rejected, email already in use: {email}")
            raise DuplicateEmail() from e
        except SQLAlchemyError as e:
            logger.error(f"Error creating user: {e}")
            raise InternalError("Error creating user") from e

        logger.info(f"Created user {user.id}")
        return user

    def authenticate(self, email: str, password: str) -> User:
        """Return the user owning these credentials.

        Unknown email and wrong password raise the same error so callers cannot
        probe for registered accounts.
        """
        try:
            user = self.queries.get_user_by_email(email)
        except SQLAlchemyError as e:
            logger.error(f"Error looking up user: {e}")
            raise InternalError("Error logging in") from e

        hashed_password = user.hashed_password if user else None
        if not verify_password_timing_safe(password, hashed_password) or user is None:
            logger.info("Rejected login attempt")
            raise InvalidCredentials()
        return user

    def reset_all(self) -> None:
        """Delete every user. Callers are responsible for the dev-mode check."""
        try:
            count = self.queries.delete_all_users()
        except SQLAlchemyError as e:
            logger.error(f"Error resetting users: {e}")
            raise InternalError("Failed to reset database") from e
        logger.warning(f"Deleted all users ({count})")
