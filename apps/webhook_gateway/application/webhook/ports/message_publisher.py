"""Message Publisher Port - 큐 발행 추상화."""

from abc import ABC, abstractmethod

from apps.webhook_gateway.domain.value_objects.outbound_message import OutboundMessage


class MessagePublisherPort(ABC):
    """메시지 발행 포트.

    책임:
    - 지정한 큐로 메시지를 한 번 제출 (fire-and-forget)
    - 브로커 ack 대기 X, 재시도 X
    """

    @abstractmethod
    async def publish(self, queue_name: str, message: OutboundMessage) -> None:
        """메시지를 큐에 제출.

        Raises:
            MessagePublishError: 브로커 제출 실패
            MessageSerializationError: 직렬화 실패
        """
        pass
