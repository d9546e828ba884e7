"""Health check routes."""

from typing import Literal

from fastapi import APIRouter
from pydantic import BaseModel

from remark.util.time import iso_now

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    ok: Literal[True] = True
    ts: str


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check endpoint.

    Returns:
        ``{"ok": true, "ts": <server time>}``
    """
    return HealthResponse(ts=iso_now())
