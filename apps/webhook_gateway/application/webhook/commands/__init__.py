from apps.webhook_gateway.application.webhook.commands.dispatch_webhook import (
    DispatchQueues,
    DispatchWebhookCommand,
)

__all__ = ["DispatchQueues", "DispatchWebhookCommand"]
