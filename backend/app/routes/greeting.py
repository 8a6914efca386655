"""
Bills Demo Backend: Greeting Route
==================================

What:  GET / answers with a fixed plain-text greeting.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["Greeting"])

GREETING = "Hello, World!"


@router.get(
    "/",
    response_class=PlainTextResponse,
    summary="Plain-text greeting",
)
async def greet() -> PlainTextResponse:
    return PlainTextResponse(GREETING)
