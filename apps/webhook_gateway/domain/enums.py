"""Dispatch 분류 결과."""

from enum import Enum


class DispatchAction(str, Enum):
    """Webhook 메시지 분류 결과.

    요청마다 새로 계산되며 요청 간에 상태를 공유하지 않습니다.
    """

    READ_IMAGE = "readimage"
    HELP = "help"
    SONG_LINKS = "songlinks"
    IGNORE = "ignore"
