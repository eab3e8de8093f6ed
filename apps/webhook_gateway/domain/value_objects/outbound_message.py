"""Outbound Message Value Object."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class OutboundMessage:
    """큐로 발행되는 메시지.

    Consumer(OCR, 음악 검색, 답장 워커)가 공통으로 읽는 형식입니다.
    ``{"chat_id": int, "text": str}``

    Attributes:
        chat_id: 응답을 보낼 채팅 ID
        text: 명령별로 가공된 본문
    """

    chat_id: int
    text: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
