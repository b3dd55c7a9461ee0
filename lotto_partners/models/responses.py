from pydantic import BaseModel, Field

from lotto_partners.core.draw import DRAW_SIZE


class ProxyResponse(BaseModel):
    """Successful completion proxy response."""

    text: str


class ErrorResponse(BaseModel):
    """Error envelope shared by all endpoints."""

    error: str


class DrawResponse(BaseModel):
    """A freshly generated draw."""

    numbers: list[int] = Field(..., min_length=DRAW_SIZE, max_length=DRAW_SIZE)


class HealthResponse(BaseModel):
    status: str = "ok"
    model: str
