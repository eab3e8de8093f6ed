"""RabbitMQ Connection.

하나의 robust 연결과 발행 전용 채널 N개를 관리하는 Infrastructure 컴포넌트입니다.

| 컴포넌트                 | 책임                        |
|--------------------------|-----------------------------|
| RabbitMQConnection       | 연결/채널 생성 및 종료      |
| ChannelPool              | 채널 Round-robin 분배       |
| RabbitMQMessagePublisher | 직렬화 + default exchange 발행 |

큐/Exchange 선언은 하지 않습니다 (Consumer 측 책임).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import aio_pika

from apps.webhook_gateway.infrastructure.messaging.channel_pool import ChannelPool

if TYPE_CHECKING:
    from aio_pika.abc import AbstractChannel, AbstractConnection

logger = logging.getLogger(__name__)


class RabbitMQConnection:
    """RabbitMQ 연결.

    연결 하나에 채널 여러 개를 열어 ChannelPool로 제공합니다.
    """

    def __init__(self, amqp_url: str, pool_size: int = 5) -> None:
        """Initialize.

        Args:
            amqp_url: RabbitMQ 연결 URL
            pool_size: 채널 수 (1 이상)
        """
        if pool_size < 1:
            raise ValueError("pool_size must be at least 1")
        self._amqp_url = amqp_url
        self._pool_size = pool_size
        self._connection: AbstractConnection | None = None
        self._pool: ChannelPool[AbstractChannel] | None = None

    async def connect(self) -> ChannelPool["AbstractChannel"]:
        """연결 후 채널 풀 생성."""
        if self._pool is not None and self._connection and not self._connection.is_closed:
            return self._pool

        self._connection = await aio_pika.connect_robust(self._amqp_url)

        channels = []
        for _ in range(self._pool_size):
            # publisher confirm 미사용 (fire-and-forget)
            channels.append(await self._connection.channel(publisher_confirms=False))
        self._pool = ChannelPool(channels)

        logger.info(
            "RabbitMQ connected",
            extra={"pool_size": self._pool_size},
        )
        return self._pool

    @property
    def is_connected(self) -> bool:
        return self._connection is not None and not self._connection.is_closed

    async def close(self) -> None:
        """연결 종료."""
        if self._connection and not self._connection.is_closed:
            await self._connection.close()
            logger.info("RabbitMQ connection closed")
        self._pool = None
