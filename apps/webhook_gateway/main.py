"""Webhook Gateway Entry Point.

채팅 플랫폼 Webhook을 받아 명령별로 RabbitMQ 큐에 전달합니다.

Architecture:
    Chat Platform ──POST /webhook──▶ webhook-gateway (이 모듈)
                                          │
                                          ├── DispatchWebhookCommand (명령 분류)
                                          │
                                          └── RabbitMQMessagePublisher
                                                  │ ChannelPool (round-robin)
                                                  ▼
                                   RabbitMQ default exchange
                                   ├── ImageToText  (/readimage → OCR 워커)
                                   ├── Reply        (/help → 답장 워커)
                                   └── Music        (/songlinks → 음악 검색 워커)

Run:
    python -m apps.webhook_gateway.main
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from apps.webhook_gateway.presentation.http.controllers import root_router
from apps.webhook_gateway.presentation.http.errors import register_exception_handlers
from apps.webhook_gateway.setup.config import get_settings
from apps.webhook_gateway.setup.dependencies import Container
from apps.webhook_gateway.setup.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 생명주기 관리.

    Startup:
      - RabbitMQ 연결 + 채널 풀 생성
      - Container 조립

    Shutdown:
      - 연결 종료
    """
    settings = get_settings()
    logger.info(
        "Webhook Gateway starting",
        extra={
            "service_name": settings.service_name,
            "service_version": settings.service_version,
            "env": settings.environment,
        },
    )

    container = Container(settings)
    await container.init()
    app.state.container = container
    logger.info("Dependencies initialized")

    yield

    logger.info("Webhook Gateway shutting down")
    await container.close()


def create_app() -> FastAPI:
    """FastAPI 애플리케이션 팩토리."""
    settings = get_settings()

    setup_logging(settings)

    app = FastAPI(
        title="Webhook Gateway",
        description="채팅 Webhook 명령 분류 및 큐 발행",
        version=settings.service_version,
        lifespan=lifespan,
    )

    register_exception_handlers(app)
    app.include_router(root_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "apps.webhook_gateway.main:app",
        host=settings.host,
        port=settings.port,
    )
