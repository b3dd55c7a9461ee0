from fastapi import APIRouter

from lotto_partners.models.responses import HealthResponse
from lotto_partners.server.app import get_app_config


router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(model=get_app_config().defaults.model)
