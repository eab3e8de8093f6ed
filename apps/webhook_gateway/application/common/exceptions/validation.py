"""Webhook 페이로드 검증 예외 (4xx)."""

from apps.webhook_gateway.application.common.exceptions.base import ApplicationError


class InvalidWebhookPayloadError(ApplicationError):
    """처리할 수 없는 Webhook 페이로드."""

    def __init__(self, message: str = "Invalid webhook payload") -> None:
        super().__init__(message)


class ChatIdMissingError(InvalidWebhookPayloadError):
    """message.chat.id 누락."""

    def __init__(self) -> None:
        super().__init__("No valid chat_id found in the message payload")


class ImageNotFoundError(InvalidWebhookPayloadError):
    """/readimage 요청에 사용할 이미지(file_id)가 없음."""

    def __init__(self) -> None:
        super().__init__("No valid file_id found in the photo")
