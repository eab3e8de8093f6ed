"""/songlinks 본문 파싱 규칙."""

from __future__ import annotations

from itertools import islice
from typing import Iterator

from apps.webhook_gateway.domain.constants import (
    SONG_LINKS_MAX_CHARS,
    SONG_LINKS_MAX_LINES,
)


def _iter_lines(text: str) -> Iterator[str]:
    """``\\n`` 기준 줄 분리 (``\\r\\n`` 허용, 마지막 빈 줄 제외).

    str.splitlines()는 \\u2028 등도 줄바꿈으로 취급하므로 사용하지 않습니다.
    """
    if not text:
        return
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    for part in parts:
        yield part[:-1] if part.endswith("\r") else part


def parse_song_list(
    text: str,
    max_lines: int = SONG_LINKS_MAX_LINES,
    max_chars: int = SONG_LINKS_MAX_CHARS,
) -> str:
    """/songlinks 명령 본문을 곡 목록 텍스트로 변환.

    첫 줄(명령 토큰)은 버리고, 이후 최대 ``max_lines``줄을
    각각 ``max_chars``글자(바이트 아님)로 자른 뒤 개행으로 합칩니다.
    남은 줄이 없으면 빈 문자열입니다.

    Args:
        text: 원본 메시지 텍스트 ("/songlinks\\nsong a\\nsong b")
        max_lines: 최대 곡 수
        max_chars: 곡당 최대 글자 수

    Returns:
        개행으로 구분된 곡 목록
    """
    lines = islice(_iter_lines(text), 1, 1 + max_lines)
    return "\n".join(line[:max_chars] for line in lines)
