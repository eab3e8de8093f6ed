from apps.webhook_gateway.infrastructure.messaging.channel_pool import ChannelPool
from apps.webhook_gateway.infrastructure.messaging.rabbitmq_client import (
    RabbitMQConnection,
)
from apps.webhook_gateway.infrastructure.messaging.rabbitmq_publisher import (
    RabbitMQMessagePublisher,
    serialize_message,
)

__all__ = [
    "ChannelPool",
    "RabbitMQConnection",
    "RabbitMQMessagePublisher",
    "serialize_message",
]
