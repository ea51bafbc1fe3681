"""Default landing page served when no redirect matches."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["Home"])


@router.get("/", response_class=PlainTextResponse, summary="Landing page")
async def hello() -> str:
    return "Hello, world!"
