from apps.webhook_gateway.application.webhook.services.payload_extractor import (
    extract_caption,
    extract_chat_id,
    extract_largest_image_file_id,
    extract_text,
)

__all__ = [
    "extract_caption",
    "extract_chat_id",
    "extract_largest_image_file_id",
    "extract_text",
]
