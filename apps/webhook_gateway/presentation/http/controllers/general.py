"""General Controller (루트/헬스체크)."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse

from apps.webhook_gateway.setup.config import get_settings

router = APIRouter(tags=["general"])


@router.get("/", response_class=PlainTextResponse)
async def hello() -> str:
    return "Hello"


@router.get("/health")
async def health(request: Request) -> dict[str, Any]:
    """헬스체크.

    broker는 lifespan 이전(컨테이너 없음)이면 "disconnected"입니다.
    """
    settings = get_settings()
    container = getattr(request.app.state, "container", None)
    connected = container is not None and container.is_broker_connected
    return {
        "status": "healthy",
        "service": settings.service_name,
        "version": settings.service_version,
        "broker": "connected" if connected else "disconnected",
    }
