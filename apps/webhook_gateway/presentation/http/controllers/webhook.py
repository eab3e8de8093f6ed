"""Webhook Controller.

- POST /webhook   채팅 플랫폼 Webhook 수신 → 명령 분류 → 큐 발행

응답:
- 200 (본문 없음): 발행 완료 또는 무시(IGNORE)
- 400: chat.id 누락, /readimage 이미지 없음
- 500: 브로커 발행 실패
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Body, Response, status

from apps.webhook_gateway.setup.dependencies import DispatchCommandDep

router = APIRouter(tags=["webhook"])
logger = logging.getLogger(__name__)


@router.post("/webhook", status_code=status.HTTP_200_OK)
async def receive_message(
    command: DispatchCommandDep,
    payload: Any = Body(...),
) -> Response:
    """Webhook 수신."""
    logger.info("Received message payload: %s", payload)

    await command.execute(payload)
    return Response(status_code=status.HTTP_200_OK)
