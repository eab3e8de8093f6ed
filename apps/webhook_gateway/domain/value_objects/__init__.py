from apps.webhook_gateway.domain.value_objects.outbound_message import OutboundMessage

__all__ = ["OutboundMessage"]
