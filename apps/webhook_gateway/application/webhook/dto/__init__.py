from apps.webhook_gateway.application.webhook.dto.dispatch_result import DispatchResult

__all__ = ["DispatchResult"]
