"""Admin endpoints: visit metrics and the dev-only reset."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Response
from fastapi.responses import HTMLResponse

from chirpy.api.dependencies import get_app_settings, get_hit_counter, get_user_service
from chirpy.config import Settings
from chirpy.exceptions import Forbidden
from chirpy.metrics import HitCounter
from chirpy.schemas.errors import ErrorResponse
from chirpy.services.users import UserService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["admin"])

METRICS_TEMPLATE = """<html>
  <body>
    <h1>Welcome, Chirpy Admin</h1>
    <p>Chirpy has been visited {hits} times!</p>
  </body>
</html>"""


@router.get("/metrics", response_class=HTMLResponse)
def metrics(hits: Annotated[HitCounter, Depends(get_hit_counter)]):
    """Report how many times the static site has been visited."""
    return HTMLResponse(METRICS_TEMPLATE.format(hits=hits.value))


@router.post("/reset", responses={403: {"model": ErrorResponse}})
def reset(
    settings: Annotated[Settings, Depends(get_app_settings)],
    hits: Annotated[HitCounter, Depends(get_hit_counter)],
    users: Annotated[UserService, Depends(get_user_service)],
):
    """Delete all users and zero the hit counter. Development mode only."""
    if not settings.is_dev:
        logger.warning("Reset attempted outside development mode")
        raise Forbidden()

    users.reset_all()
    hits.reset()
    return Response(status_code=200)
