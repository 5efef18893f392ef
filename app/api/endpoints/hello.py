"""Greeting endpoint."""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from app.api.deps import get_logger
from app.core.constants import GREETING, GREETING_LOG_MESSAGE

router = APIRouter()


@router.get(
    "/",
    response_class=PlainTextResponse,
    summary="Greeting",
    description="Returns the static plain-text greeting.",
)
async def hello(logger: logging.Logger = Depends(get_logger)) -> PlainTextResponse:
    """Log the request and return the greeting."""
    logger.info(GREETING_LOG_MESSAGE)
    return PlainTextResponse(GREETING)
