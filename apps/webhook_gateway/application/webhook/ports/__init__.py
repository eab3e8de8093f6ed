from apps.webhook_gateway.application.webhook.ports.message_publisher import (
    MessagePublisherPort,
)

__all__ = ["MessagePublisherPort"]
