"""Channel Pool - 고정 크기 Round-robin 풀.

하나의 RabbitMQ 연결 위에 열린 채널 N개를 순서대로 돌려가며 빌려줍니다.

Thread Safety:
- threading.Lock 사용 (sync 메서드, async 호환)
- Lock 구간은 인덱스 계산뿐이며 네트워크 I/O는 포함하지 않음

Note:
- 풀은 생성 후 변경되지 않습니다 (증감/제거 없음)
- 실패한 채널도 교체하지 않습니다 (robust 연결의 채널 복구에 의존)
"""

from __future__ import annotations

import threading
from typing import Generic, Sequence, TypeVar

T = TypeVar("T")


class ChannelPool(Generic[T]):
    """Round-robin 채널 풀.

    Example:
        >>> pool = ChannelPool(["a", "b", "c"])
        >>> [pool.next_channel() for _ in range(4)]
        ['a', 'b', 'c', 'a']
    """

    def __init__(self, channels: Sequence[T]) -> None:
        """Initialize.

        Args:
            channels: 발행용 채널 목록 (비어 있으면 안 됨)

        Raises:
            ValueError: 빈 채널 목록
        """
        if not channels:
            raise ValueError("Channel pool should never be empty")
        self._channels: tuple[T, ...] = tuple(channels)
        self._cursor = 0
        self._lock = threading.Lock()

    def next_channel(self) -> T:
        """다음 채널 반환.

        반환된 채널은 공유 참조입니다. 호출자는 닫지 않아야 합니다.
        """
        with self._lock:
            index = self._cursor
            self._cursor = (index + 1) % len(self._channels)
        return self._channels[index]
