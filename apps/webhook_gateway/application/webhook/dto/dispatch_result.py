"""Dispatch 결과 DTO."""

from __future__ import annotations

from dataclasses import dataclass

from apps.webhook_gateway.domain.enums import DispatchAction
from apps.webhook_gateway.domain.value_objects.outbound_message import OutboundMessage


@dataclass(frozen=True)
class DispatchResult:
    """분류 결과와 발행 대상.

    IGNORE인 경우 queue_name, message 모두 None입니다.
    """

    action: DispatchAction
    queue_name: str | None = None
    message: OutboundMessage | None = None

    @property
    def should_publish(self) -> bool:
        return self.queue_name is not None and self.message is not None

    @classmethod
    def ignore(cls) -> DispatchResult:
        return cls(action=DispatchAction.IGNORE)
