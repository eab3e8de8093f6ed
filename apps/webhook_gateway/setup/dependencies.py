"""Dependency Injection.

Composition Root입니다. 연결/풀/발행자/Command를 여기서 조립하고
FastAPI 앱 상태(app.state.container)에 보관합니다.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from apps.webhook_gateway.application.webhook.commands import (
    DispatchQueues,
    DispatchWebhookCommand,
)
from apps.webhook_gateway.infrastructure.messaging import (
    RabbitMQConnection,
    RabbitMQMessagePublisher,
)
from apps.webhook_gateway.setup.config import Settings, get_settings


class Container:
    """의존성 컨테이너."""

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings or get_settings()
        self._connection: RabbitMQConnection | None = None
        self._publisher: RabbitMQMessagePublisher | None = None
        self._dispatch_command: DispatchWebhookCommand | None = None

    async def init(self) -> None:
        """의존성 초기화."""
        self._connection = RabbitMQConnection(
            self._settings.amqp_url,
            pool_size=self._settings.channel_pool_size,
        )
        pool = await self._connection.connect()

        self._publisher = RabbitMQMessagePublisher(pool)
        self._dispatch_command = DispatchWebhookCommand(
            publisher=self._publisher,
            queues=DispatchQueues(
                image=self._settings.image_queue,
                reply=self._settings.reply_queue,
                music=self._settings.music_queue,
            ),
            songlinks_max_lines=self._settings.songlinks_max_lines,
            songlinks_max_chars=self._settings.songlinks_max_chars,
        )

    async def close(self) -> None:
        """리소스 정리."""
        if self._connection:
            await self._connection.close()
        self._dispatch_command = None
        self._publisher = None

    @property
    def is_broker_connected(self) -> bool:
        """RabbitMQ 연결 상태."""
        return self._connection is not None and self._connection.is_connected

    @property
    def dispatch_command(self) -> DispatchWebhookCommand:
        """Webhook 디스패치 Command."""
        if not self._dispatch_command:
            raise RuntimeError("Container not initialized")
        return self._dispatch_command


def get_dispatch_command(request: Request) -> DispatchWebhookCommand:
    """DispatchWebhookCommand 조회 (요청마다 같은 인스턴스)."""
    container: Container = request.app.state.container
    return container.dispatch_command


DispatchCommandDep = Annotated[DispatchWebhookCommand, Depends(get_dispatch_command)]
