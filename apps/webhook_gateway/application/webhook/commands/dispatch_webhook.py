"""Dispatch Webhook Command - 명령 분류 및 큐 발행.

| 조건                              | Action     | 큐          |
|-----------------------------------|------------|-------------|
| caption == /readimage             | READ_IMAGE | image_queue |
| caption 존재 (그 외)              | IGNORE     | -           |
| text == /help                     | HELP       | reply_queue |
| text.startswith(/songlinks)       | SONG_LINKS | music_queue |
| 그 외                             | IGNORE     | -           |
| chat.id 없음                      | 400        | -           |

요청 간 상태를 공유하지 않습니다 (요청마다 독립적으로 분류).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from apps.webhook_gateway.application.common.exceptions import (
    ChatIdMissingError,
    ImageNotFoundError,
)
from apps.webhook_gateway.application.webhook.dto import DispatchResult
from apps.webhook_gateway.application.webhook.ports import MessagePublisherPort
from apps.webhook_gateway.application.webhook.services import (
    extract_caption,
    extract_chat_id,
    extract_largest_image_file_id,
    extract_text,
)
from apps.webhook_gateway.domain.constants import (
    HELP_COMMAND,
    HELP_TEXT,
    IMAGE_QUEUE,
    MUSIC_QUEUE,
    READ_IMAGE_COMMAND,
    REPLY_QUEUE,
    SONG_LINKS_COMMAND,
    SONG_LINKS_MAX_CHARS,
    SONG_LINKS_MAX_LINES,
)
from apps.webhook_gateway.domain.enums import DispatchAction
from apps.webhook_gateway.domain.services import parse_song_list
from apps.webhook_gateway.domain.value_objects import OutboundMessage

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DispatchQueues:
    """Action별 목적지 큐 이름."""

    image: str = IMAGE_QUEUE
    reply: str = REPLY_QUEUE
    music: str = MUSIC_QUEUE


class DispatchWebhookCommand:
    """Webhook 디스패치 Command.

    책임:
    - 페이로드에서 chat_id/caption/text/photo 추출
    - 명령 분류 후 OutboundMessage 생성
    - MessagePublisher로 큐에 한 번 제출

    알 수 없는 명령은 에러가 아니라 IGNORE (성공, 발행 없음)입니다.
    """

    def __init__(
        self,
        publisher: MessagePublisherPort,
        queues: DispatchQueues | None = None,
        songlinks_max_lines: int = SONG_LINKS_MAX_LINES,
        songlinks_max_chars: int = SONG_LINKS_MAX_CHARS,
    ) -> None:
        self._publisher = publisher
        self._queues = queues or DispatchQueues()
        self._songlinks_max_lines = songlinks_max_lines
        self._songlinks_max_chars = songlinks_max_chars

    def plan(self, payload: Any) -> DispatchResult:
        """페이로드를 분류하고 발행할 메시지를 만듭니다 (발행하지 않음).

        Raises:
            ChatIdMissingError: message.chat.id 누락
            ImageNotFoundError: /readimage인데 선택 가능한 이미지 없음
        """
        chat_id = extract_chat_id(payload)
        if chat_id is None:
            logger.info("No valid chat_id found in the message payload")
            raise ChatIdMissingError()

        caption = extract_caption(payload)
        if caption is not None:
            if caption == READ_IMAGE_COMMAND:
                return self._plan_read_image(chat_id, payload)
            return DispatchResult.ignore()

        text = extract_text(payload)
        if text is None:
            return DispatchResult.ignore()
        if text == HELP_COMMAND:
            return self._plan_help(chat_id)
        if text.startswith(SONG_LINKS_COMMAND):
            return self._plan_song_links(chat_id, text)
        return DispatchResult.ignore()

    async def execute(self, payload: Any) -> DispatchResult:
        """분류 후 대상 큐로 발행.

        Raises:
            InvalidWebhookPayloadError: 클라이언트 입력 오류 (발행 시도 안 함)
            MessagePublishError: 브로커 제출 실패 (재시도 안 함)
        """
        result = self.plan(payload)

        if not result.should_publish:
            logger.debug("Webhook ignored", extra={"action": result.action.value})
            return result

        await self._publisher.publish(result.queue_name, result.message)
        logger.info(
            "Published '%s' message to %s queue",
            result.action.value,
            result.queue_name,
            extra={"action": result.action.value, "queue": result.queue_name},
        )
        return result

    def _plan_read_image(self, chat_id: int, payload: Any) -> DispatchResult:
        file_id = extract_largest_image_file_id(payload)
        if file_id is None:
            logger.info("No valid file_id found in the photo")
            raise ImageNotFoundError()

        return DispatchResult(
            action=DispatchAction.READ_IMAGE,
            queue_name=self._queues.image,
            message=OutboundMessage(chat_id=chat_id, text=file_id),
        )

    def _plan_help(self, chat_id: int) -> DispatchResult:
        return DispatchResult(
            action=DispatchAction.HELP,
            queue_name=self._queues.reply,
            message=OutboundMessage(chat_id=chat_id, text=HELP_TEXT),
        )

    def _plan_song_links(self, chat_id: int, text: str) -> DispatchResult:
        songs = parse_song_list(
            text,
            max_lines=self._songlinks_max_lines,
            max_chars=self._songlinks_max_chars,
        )
        return DispatchResult(
            action=DispatchAction.SONG_LINKS,
            queue_name=self._queues.music,
            message=OutboundMessage(chat_id=chat_id, text=songs),
        )
