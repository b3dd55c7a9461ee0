import json

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from lotto_partners.core.gemini import GeminiClient
from lotto_partners.models.requests import ProxyRequest
from lotto_partners.models.responses import ErrorResponse, ProxyResponse
from lotto_partners.server.app import get_gemini_client
from lotto_partners.utils.logging import get_logger


logger = get_logger("proxy")
router = APIRouter(tags=["proxy"])


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
    )


@router.post(
    "/gemini",
    response_model=ProxyResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def complete(
    request: Request,
    client: GeminiClient = Depends(get_gemini_client),
) -> ProxyResponse | JSONResponse:
    """
    Forward a prompt to the model and return its text.

    The body is parsed by hand so that every failure, including a missing
    or malformed body, is reported in the same ``{"error": ...}`` envelope.
    """
    body = await request.body()
    if not body:
        return error_response(400, "Request body is missing")

    try:
        proxy_request = ProxyRequest.model_validate(json.loads(body))
    except (json.JSONDecodeError, UnicodeDecodeError, ValidationError) as e:
        logger.warning(f"Rejected request body: {e}")
        return error_response(400, f"Invalid request body: {e}")

    if not proxy_request.has_contents:
        return error_response(400, 'Missing "contents" in request body')

    try:
        text = await client.generate_text(proxy_request.contents, proxy_request.config)
    except Exception as e:
        logger.exception(f"Completion failed: {e}")
        return error_response(500, str(e))

    return ProxyResponse(text=text)
