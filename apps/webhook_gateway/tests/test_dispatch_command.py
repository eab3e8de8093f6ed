"""DispatchWebhookCommand 테스트."""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock

import pytest

from apps.webhook_gateway.application.common.exceptions import (
    ChatIdMissingError,
    ImageNotFoundError,
    InvalidWebhookPayloadError,
    MessagePublishError,
)
from apps.webhook_gateway.application.webhook.commands import (
    DispatchQueues,
    DispatchWebhookCommand,
)
from apps.webhook_gateway.domain.constants import HELP_TEXT
from apps.webhook_gateway.domain.enums import DispatchAction
from apps.webhook_gateway.domain.value_objects import OutboundMessage


def make_payload(**message: Any) -> dict[str, Any]:
    return {"message": message}


class TestPlan:
    """plan() 분류 테스트 (발행 없음)."""

    @pytest.fixture
    def command(self, mock_publisher: AsyncMock) -> DispatchWebhookCommand:
        return DispatchWebhookCommand(publisher=mock_publisher)

    def test_readimage(
        self,
        command: DispatchWebhookCommand,
        readimage_payload: dict[str, Any],
        chat_id: int,
    ) -> None:
        """/readimage → ImageToText, 가장 큰 이미지 file_id."""
        result = command.plan(readimage_payload)

        assert result.action == DispatchAction.READ_IMAGE
        assert result.queue_name == "ImageToText"
        assert result.message == OutboundMessage(chat_id=chat_id, text="large")

    def test_help(
        self,
        command: DispatchWebhookCommand,
        help_payload: dict[str, Any],
        chat_id: int,
    ) -> None:
        """/help → Reply, 고정 도움말."""
        result = command.plan(help_payload)

        assert result.action == DispatchAction.HELP
        assert result.queue_name == "Reply"
        assert result.message == OutboundMessage(chat_id=chat_id, text=HELP_TEXT)

    def test_help_text_lists_commands(self) -> None:
        """도움말에 명령 목록 포함."""
        for token in ("/songlinks", "/readimage", "/donate"):
            assert token in HELP_TEXT

    def test_help_with_any_chat_id(self, command: DispatchWebhookCommand) -> None:
        """chat_id 값과 무관하게 같은 도움말."""
        for chat_id in (0, -42, 2**40):
            result = command.plan(make_payload(chat={"id": chat_id}, text="/help"))
            assert result.message == OutboundMessage(chat_id=chat_id, text=HELP_TEXT)

    def test_songlinks(
        self,
        command: DispatchWebhookCommand,
        songlinks_payload: dict[str, Any],
    ) -> None:
        """/songlinks → Music, 곡 목록."""
        result = command.plan(songlinks_payload)

        assert result.action == DispatchAction.SONG_LINKS
        assert result.queue_name == "Music"
        assert result.message.text == "Daft Punk - One More Time\nQueen - Bohemian Rhapsody"

    def test_songlinks_without_songs(self, command: DispatchWebhookCommand) -> None:
        """/songlinks만 있으면 빈 텍스트 발행."""
        result = command.plan(make_payload(chat={"id": 1}, text="/songlinks"))

        assert result.action == DispatchAction.SONG_LINKS
        assert result.message == OutboundMessage(chat_id=1, text="")

    def test_songlinks_prefix_match(self, command: DispatchWebhookCommand) -> None:
        """/songlinks로 시작하면 매칭."""
        result = command.plan(make_payload(chat={"id": 1}, text="/songlinksfoo\nsong"))

        assert result.action == DispatchAction.SONG_LINKS
        assert result.message.text == "song"

    @pytest.mark.parametrize(
        "message",
        [
            {"caption": "/help"},
            {"caption": "hello"},
            {"caption": "/songlinks\nsong", "text": "/help"},
            {"text": "hello"},
            {"text": "/HELP"},
            {"text": "/help "},
            {"text": " /songlinks"},
            {"text": "/donate"},
            {},
        ],
    )
    def test_ignored(self, command: DispatchWebhookCommand, message: dict[str, Any]) -> None:
        """알 수 없는 명령은 IGNORE."""
        result = command.plan(make_payload(chat={"id": 1}, **message))

        assert result.action == DispatchAction.IGNORE
        assert result.queue_name is None
        assert result.message is None
        assert result.should_publish is False

    def test_caption_takes_precedence_over_text(self, command: DispatchWebhookCommand) -> None:
        """caption이 있으면 text는 보지 않음."""
        result = command.plan(make_payload(chat={"id": 1}, caption="other", text="/help"))
        assert result.action == DispatchAction.IGNORE

    @pytest.mark.parametrize(
        "payload",
        [
            {},
            {"message": {"text": "/help"}},
            {"message": {"chat": {}, "caption": "/readimage"}},
            {"message": {"chat": {"id": "1"}, "text": "/help"}},
        ],
    )
    def test_missing_chat_id_raises(
        self, command: DispatchWebhookCommand, payload: dict[str, Any]
    ) -> None:
        """chat.id 누락 시 ChatIdMissingError."""
        with pytest.raises(ChatIdMissingError):
            command.plan(payload)

    @pytest.mark.parametrize("photo", [None, []])
    def test_readimage_without_photo_raises(
        self, command: DispatchWebhookCommand, photo: Any
    ) -> None:
        """/readimage인데 이미지 없음."""
        message: dict[str, Any] = {"chat": {"id": 1}, "caption": "/readimage"}
        if photo is not None:
            message["photo"] = photo

        with pytest.raises(ImageNotFoundError) as exc_info:
            command.plan({"message": message})

        assert isinstance(exc_info.value, InvalidWebhookPayloadError)

    def test_custom_queues_and_limits(self, mock_publisher: AsyncMock) -> None:
        """설정된 큐 이름과 /songlinks 한도 사용."""
        command = DispatchWebhookCommand(
            publisher=mock_publisher,
            queues=DispatchQueues(image="img", reply="rep", music="mus"),
            songlinks_max_lines=1,
            songlinks_max_chars=2,
        )

        result = command.plan(make_payload(chat={"id": 1}, text="/songlinks\nabc\ndef"))

        assert result.queue_name == "mus"
        assert result.message.text == "ab"


class TestExecute:
    """execute() 발행 테스트."""

    @pytest.fixture
    def command(self, mock_publisher: AsyncMock) -> DispatchWebhookCommand:
        return DispatchWebhookCommand(publisher=mock_publisher)

    @pytest.mark.asyncio
    async def test_publishes_to_target_queue(
        self,
        command: DispatchWebhookCommand,
        mock_publisher: AsyncMock,
        readimage_payload: dict[str, Any],
        chat_id: int,
    ) -> None:
        """분류된 큐로 한 번 발행."""
        result = await command.execute(readimage_payload)

        mock_publisher.publish.assert_awaited_once_with(
            "ImageToText",
            OutboundMessage(chat_id=chat_id, text="large"),
        )
        assert result.action == DispatchAction.READ_IMAGE

    @pytest.mark.asyncio
    async def test_ignored_does_not_publish(
        self,
        command: DispatchWebhookCommand,
        mock_publisher: AsyncMock,
    ) -> None:
        """IGNORE면 발행 없음."""
        result = await command.execute(make_payload(chat={"id": 1}, text="hi"))

        assert result.action == DispatchAction.IGNORE
        mock_publisher.publish.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_client_error_does_not_publish(
        self,
        command: DispatchWebhookCommand,
        mock_publisher: AsyncMock,
    ) -> None:
        """클라이언트 오류면 발행 시도 안 함."""
        with pytest.raises(ChatIdMissingError):
            await command.execute({"message": {"text": "/help"}})

        with pytest.raises(ImageNotFoundError):
            await command.execute(make_payload(chat={"id": 1}, caption="/readimage"))

        mock_publisher.publish.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_publish_error_propagates_without_retry(
        self,
        command: DispatchWebhookCommand,
        mock_publisher: AsyncMock,
        help_payload: dict[str, Any],
    ) -> None:
        """발행 실패는 그대로 전파 (재시도 없음)."""
        mock_publisher.publish.side_effect = MessagePublishError("Reply", "connection lost")

        with pytest.raises(MessagePublishError):
            await command.execute(help_payload)

        assert mock_publisher.publish.await_count == 1
