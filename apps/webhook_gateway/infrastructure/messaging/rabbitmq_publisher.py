"""RabbitMQ Message Publisher.

MessagePublisherPort의 RabbitMQ 구현체입니다.
default exchange("")로 발행하므로 routing_key가 곧 큐 이름입니다.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

from aio_pika import Message

from apps.webhook_gateway.application.common.exceptions import (
    MessagePublishError,
    MessageSerializationError,
)
from apps.webhook_gateway.application.webhook.ports import MessagePublisherPort
from apps.webhook_gateway.domain.value_objects import OutboundMessage

if TYPE_CHECKING:
    from aio_pika.abc import AbstractChannel

    from apps.webhook_gateway.infrastructure.messaging.channel_pool import ChannelPool

logger = logging.getLogger(__name__)


def serialize_message(message: OutboundMessage) -> bytes:
    """OutboundMessage → JSON bytes.

    Raises:
        MessageSerializationError: 직렬화 실패 (정상 경로에서는 발생하지 않음)
    """
    try:
        return json.dumps(message.to_dict(), ensure_ascii=False).encode()
    except (TypeError, ValueError) as e:
        raise MessageSerializationError(str(e)) from e


class RabbitMQMessagePublisher(MessagePublisherPort):
    """ChannelPool 기반 메시지 발행자.

    - 발행마다 풀에서 다음 채널을 빌림 (호출 동안만 사용)
    - 브로커 confirm 대기 X, 재시도 X
    """

    def __init__(self, pool: "ChannelPool[AbstractChannel]") -> None:
        self._pool = pool

    async def publish(self, queue_name: str, message: OutboundMessage) -> None:
        body = serialize_message(message)
        channel = self._pool.next_channel()

        try:
            await channel.default_exchange.publish(
                Message(body=body, content_type="application/json"),
                routing_key=queue_name,
            )
        except Exception as e:
            logger.error(
                "Message publish failed",
                extra={"queue": queue_name, "chat_id": message.chat_id},
                exc_info=True,
            )
            raise MessagePublishError(queue_name, str(e)) from e

        logger.debug(
            "Message published",
            extra={"queue": queue_name, "chat_id": message.chat_id},
        )
