"""메시지 발행 예외 (5xx)."""

from apps.webhook_gateway.application.common.exceptions.base import ApplicationError


class MessagePublishError(ApplicationError):
    """브로커 발행 실패.

    재시도하지 않습니다. 재전송은 Webhook 송신측 정책에 맡깁니다.
    """

    def __init__(self, queue_name: str, reason: str | None = None) -> None:
        self.queue_name = queue_name
        detail = f"Failed to publish message to queue '{queue_name}'"
        if reason:
            detail = f"{detail}: {reason}"
        super().__init__(detail)


class MessageSerializationError(ApplicationError):
    """OutboundMessage 직렬화 실패 (불변식 위반)."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to serialize outbound message: {reason}")
