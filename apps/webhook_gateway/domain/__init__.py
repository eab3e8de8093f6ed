"""Webhook Gateway 도메인 계층."""

from apps.webhook_gateway.domain.enums import DispatchAction
from apps.webhook_gateway.domain.value_objects.outbound_message import OutboundMessage

__all__ = ["DispatchAction", "OutboundMessage"]
