"""Exception Handlers.

애플리케이션 예외를 HTTP 응답으로 변환합니다.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from apps.webhook_gateway.application.common.exceptions import (
    ApplicationError,
    ChatIdMissingError,
    ImageNotFoundError,
    InvalidWebhookPayloadError,
    MessagePublishError,
    MessageSerializationError,
)

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """예외 핸들러 등록."""

    @app.exception_handler(ChatIdMissingError)
    async def chat_id_missing_handler(request: Request, exc: ChatIdMissingError):
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "code": "CHAT_ID_MISSING"},
        )

    @app.exception_handler(ImageNotFoundError)
    async def image_not_found_handler(request: Request, exc: ImageNotFoundError):
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "code": "IMAGE_NOT_FOUND"},
        )

    @app.exception_handler(InvalidWebhookPayloadError)
    async def invalid_payload_handler(request: Request, exc: InvalidWebhookPayloadError):
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "code": "INVALID_PAYLOAD"},
        )

    @app.exception_handler(MessagePublishError)
    async def publish_error_handler(request: Request, exc: MessagePublishError):
        return JSONResponse(
            status_code=500,
            content={"detail": exc.message, "code": "PUBLISH_FAILED"},
        )

    @app.exception_handler(MessageSerializationError)
    async def serialization_error_handler(request: Request, exc: MessageSerializationError):
        logger.error("Outbound message serialization failed", exc_info=exc)
        return JSONResponse(
            status_code=500,
            content={"detail": "Internal server error", "code": "SERIALIZATION_ERROR"},
        )

    @app.exception_handler(ApplicationError)
    async def application_error_handler(request: Request, exc: ApplicationError):
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "code": "APPLICATION_ERROR"},
        )
