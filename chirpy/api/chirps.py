"""Chirp endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from chirpy.api.dependencies import get_chirp_service
from chirpy.schemas.chirp import ChirpCreate, ChirpResponse
from chirpy.schemas.errors import ErrorResponse
from chirpy.services.chirps import ChirpService

router = APIRouter(prefix="/api/chirps", tags=["chirps"])


@router.post(
    "",
    response_model=ChirpResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
def create_chirp(
    chirp_data: ChirpCreate,
    chirps: Annotated[ChirpService, Depends(get_chirp_service)],
):
    """Post a chirp. Banned words in the body are masked."""
    return chirps.create(chirp_data.body, chirp_data.user_id)


@router.get("", response_model=list[ChirpResponse])
def list_chirps(
    chirps: Annotated[ChirpService, Depends(get_chirp_service)],
):
    """List all chirps."""
    return chirps.list()


@router.get(
    "/{chirp_id}",
    response_model=ChirpResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
def get_chirp(
    chirp_id: str,
    chirps: Annotated[ChirpService, Depends(get_chirp_service)],
):
    """Get a single chirp."""
    return chirps.get(chirp_id)
