"""Webhook Payload Extractor.

스키마가 고정되지 않은 Webhook JSON에서 필요한 필드만 꺼냅니다.
모든 함수는 필드가 없거나 타입이 다르면 예외 대신 None을 반환합니다.

    {
        "message": {
            "chat": {"id": 123},
            "caption": "/readimage",
            "text": "/help",
            "photo": [{"width": 90, "file_id": "..."}, ...]
        }
    }
"""

from __future__ import annotations

from typing import Any

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def _dig(payload: Any, *keys: str) -> Any:
    """중첩 dict를 따라 내려가며 값을 조회 (중간에 없으면 None)."""
    node = payload
    for key in keys:
        if not isinstance(node, dict):
            return None
        node = node.get(key)
    return node


def _as_int(value: Any) -> int | None:
    # bool은 int 서브클래스이므로 제외
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    if not _INT64_MIN <= value <= _INT64_MAX:
        return None
    return value


def _as_str(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def extract_chat_id(payload: Any) -> int | None:
    """message.chat.id 추출."""
    return _as_int(_dig(payload, "message", "chat", "id"))


def extract_caption(payload: Any) -> str | None:
    """message.caption 추출 (이미지 첨부 명령)."""
    return _as_str(_dig(payload, "message", "caption"))


def extract_text(payload: Any) -> str | None:
    """message.text 추출 (텍스트 명령)."""
    return _as_str(_dig(payload, "message", "text"))


def extract_largest_image_file_id(payload: Any) -> str | None:
    """가장 넓은(width 최대) 이미지의 file_id 추출.

    width가 정수가 아니면 0으로 간주합니다.
    최대값이 여러 개면 배열에서 먼저 나온 항목을 선택합니다.
    선택된 항목에 file_id 문자열이 없으면 None입니다.
    """
    photos = _dig(payload, "message", "photo")
    if not isinstance(photos, list) or not photos:
        return None

    largest = max(photos, key=lambda photo: _as_int(_dig(photo, "width")) or 0)
    return _as_str(_dig(largest, "file_id"))
