"""Webhook Gateway 애플리케이션 예외."""

from apps.webhook_gateway.application.common.exceptions.base import ApplicationError
from apps.webhook_gateway.application.common.exceptions.messaging import (
    MessagePublishError,
    MessageSerializationError,
)
from apps.webhook_gateway.application.common.exceptions.validation import (
    ChatIdMissingError,
    ImageNotFoundError,
    InvalidWebhookPayloadError,
)

__all__ = [
    "ApplicationError",
    "InvalidWebhookPayloadError",
    "ChatIdMissingError",
    "ImageNotFoundError",
    "MessagePublishError",
    "MessageSerializationError",
]
