"""Database queries used by the domain services.

Lookups return the record or ``None``. Writes commit immediately; on failure the
session is rolled back and the SQLAlchemy error is re-raised for the caller to
classify.
"""

from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from chirpy.models.chirp import Chirp
from chirpy.models.user import User


class Queries:
    """Narrow query interface over a SQLAlchemy session."""

    def __init__(self, db: Session):
        self.db = db

    def _commit(self) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise

    def create_user(self, email: str, hashed_password: str) -> User:
        user = User(email=email, hashed_password=hashed_password)
        self.db.add(user)
        self._commit()
        self.db.refresh(user)
        return user

    def get_user_by_email(self, email: str) -> User | None:
        return self.db.query(User).filter(User.email == email).first()

    def delete_all_users(self) -> int:
        """Delete every user. Their chirps go with them via ON DELETE CASCADE."""
        try:
            count = self.db.query(User).delete(synchronize_session=False)
        except SQLAlchemyError:
            self.db.rollback()
            raise
        self._commit()
        return count

    def create_chirp(self, body: str, user_id: UUID) -> Chirp:
        chirp = Chirp(body=body, user_id=user_id)
        self.db.add(chirp)
        self._commit()
        self.db.refresh(chirp)
        return chirp

    def list_chirps(self) -> list[Chirp]:
        return self.db.query(Chirp).order_by(Chirp.created_at, Chirp.id).all()

    def get_chirp_by_id(self, chirp_id: UUID) -> Chirp | None:
        return self.db.query(Chirp).filter(Chirp.id == chirp_id).first()
