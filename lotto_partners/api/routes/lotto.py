from fastapi import APIRouter

from lotto_partners.core.draw import generate_draw
from lotto_partners.models.responses import DrawResponse


router = APIRouter(prefix="/lotto", tags=["lotto"])


@router.get("/draw", response_model=DrawResponse)
async def draw() -> DrawResponse:
    """Generate a new set of lucky numbers."""
    return DrawResponse(numbers=generate_draw())
