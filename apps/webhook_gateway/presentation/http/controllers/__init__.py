from fastapi import APIRouter

from apps.webhook_gateway.presentation.http.controllers.general import (
    router as general_router,
)
from apps.webhook_gateway.presentation.http.controllers.webhook import (
    router as webhook_router,
)

root_router = APIRouter()
root_router.include_router(general_router)
root_router.include_router(webhook_router)

__all__ = ["root_router"]
