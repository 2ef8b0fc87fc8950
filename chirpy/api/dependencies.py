"""FastAPI dependencies for services, settings and metrics."""

from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from chirpy.config import Settings
from chirpy.database import get_db
from chirpy.metrics import HitCounter
from chirpy.queries import Queries
from chirpy.services.chirps import ChirpService
from chirpy.services.users import UserService


def get_queries(db: Annotated[Session, Depends(get_db)]) -> Queries:
    """Get the query interface bound to this request's session."""
    return Queries(db)


def get_user_service(queries: Annotated[Queries, Depends(get_queries)]) -> UserService:
    """Get user service with dependencies."""
    return UserService(queries)


def get_chirp_service(queries: Annotated[Queries, Depends(get_queries)]) -> ChirpService:
    """Get chirp service with dependencies."""
    return ChirpService(queries)


def get_app_settings(request: Request) -> Settings:
    """Settings the running application was built with."""
    return request.app.state.settings


def get_hit_counter(request: Request) -> HitCounter:
    """Hit counter owned by the running application."""
    return request.app.state.hits
