"""webhook_gateway 테스트 공통 Fixtures."""

from __future__ import annotations

import sys
from pathlib import Path

# 프로젝트 루트를 sys.path에 추가
project_root = Path(__file__).parent.parent.parent.parent
sys.path.insert(0, str(project_root))

from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest


def make_payload(**message: Any) -> dict[str, Any]:
    """message 필드를 채운 Webhook 페이로드."""
    return {"message": message}


@pytest.fixture
def chat_id() -> int:
    return 123456789


@pytest.fixture
def readimage_payload(chat_id: int) -> dict[str, Any]:
    """/readimage + 여러 해상도 이미지."""
    return make_payload(
        chat={"id": chat_id},
        caption="/readimage",
        photo=[
            {"width": 90, "height": 90, "file_id": "small"},
            {"width": 800, "height": 600, "file_id": "large"},
            {"width": 320, "height": 240, "file_id": "medium"},
        ],
    )


@pytest.fixture
def help_payload(chat_id: int) -> dict[str, Any]:
    return make_payload(chat={"id": chat_id}, text="/help")


@pytest.fixture
def songlinks_payload(chat_id: int) -> dict[str, Any]:
    return make_payload(
        chat={"id": chat_id},
        text="/songlinks\nDaft Punk - One More Time\nQueen - Bohemian Rhapsody",
    )


@pytest.fixture
def mock_publisher() -> AsyncMock:
    """Mock MessagePublisher."""
    publisher = AsyncMock()
    publisher.publish = AsyncMock()
    return publisher


@pytest.fixture
def mock_channel() -> MagicMock:
    """Mock aio_pika 채널 (default_exchange.publish만 사용)."""
    channel = MagicMock()
    channel.default_exchange.publish = AsyncMock()
    return channel
