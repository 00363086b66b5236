"""Tests for the Telegram API methods."""

import asyncio
import json

import httpx
import pytest

from telegram_bot_client.adapters.telegram_client import HttpxTelegramClient
from telegram_bot_client.api.telegram_models import (
    InlineQueryResultArticle,
    InputTextMessageContent,
)
from telegram_bot_client.domain.chat_id import ChatId
from telegram_bot_client.domain.enums import ChatMemberStatus, ParseMode
from telegram_bot_client.domain.files import FileToSend
from tests.conftest import make_api

_MESSAGE = {
    "message_id": 10,
    "date": 1700000000,
    "chat": {"id": "@channel", "type": "channel"},
    "text": "hi",
}


def test_send_message_body() -> None:
    payloads: list[dict[str, object]] = []

    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path.endswith("/sendMessage")
        payloads.append(json.loads(request.content.decode()))
        return httpx.Response(200, json={"ok": True, "result": _MESSAGE})

    client = HttpxTelegramClient(api=make_api(handler))

    message = asyncio.run(
        client.send_message("@channel", "*hi*", parse_mode=ParseMode.MARKDOWN)
    )

    assert payloads == [
        {"chat_id": "@channel", "text": "*hi*", "parse_mode": "Markdown"}
    ]
    assert message.chat.id == ChatId.from_username("@channel")
    assert message.text == "hi"


def test_send_message_rejects_malformed_chat() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError("no request expected")

    client = HttpxTelegramClient(api=make_api(handler))

    with pytest.raises(ValueError):
        asyncio.run(client.send_message("channel", "hi"))


def test_send_photo_by_url() -> None:
    payloads: list[dict[str, object]] = []

    def handler(request: httpx.Request) -> httpx.Response:
        payloads.append(json.loads(request.content.decode()))
        return httpx.Response(200, json={"ok": True, "result": _MESSAGE})

    client = HttpxTelegramClient(api=make_api(handler))

    asyncio.run(
        client.send_photo(
            42, FileToSend.from_url("https://example.com/cat.jpg"), caption="cat"
        )
    )

    assert payloads == [
        {"chat_id": 42, "photo": "https://example.com/cat.jpg", "caption": "cat"}
    ]


def test_get_chat_member_uses_query_string() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(
            200,
            json={
                "ok": True,
                "result": {"user": {"id": 5, "first_name": "A"}, "status": "member"},
            },
        )

    client = HttpxTelegramClient(api=make_api(handler))

    member = asyncio.run(client.get_chat_member("@group", 5))

    assert seen[0].method == "GET"
    assert seen[0].url.query == b"chat_id=%40group&user_id=5"
    assert member.status is ChatMemberStatus.MEMBER
    assert member.user.id == 5


def test_get_me_and_get_file() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path.endswith("/getMe"):
            return httpx.Response(
                200, json={"ok": True, "result": {"id": 1, "is_bot": True}}
            )
        assert request.url.params["file_id"] == "file-id"
        return httpx.Response(
            200,
            json={
                "ok": True,
                "result": {"file_id": "file-id", "file_path": "photos/file.jpg"},
            },
        )

    client = HttpxTelegramClient(api=make_api(handler))

    me = asyncio.run(client.get_me())
    file = asyncio.run(client.get_file("file-id"))

    assert me.is_bot is True
    assert file.file_path == "photos/file.jpg"


def test_answer_inline_query() -> None:
    payloads: list[dict[str, object]] = []

    def handler(request: httpx.Request) -> httpx.Response:
        payloads.append(json.loads(request.content.decode()))
        return httpx.Response(200, json={"ok": True, "result": True})

    client = HttpxTelegramClient(api=make_api(handler))
    result = InlineQueryResultArticle(
        id="a1",
        title="Answer",
        input_message_content=InputTextMessageContent(message_text="42"),
    )

    answered = asyncio.run(client.answer_inline_query("q1", [result], cache_time=0))

    assert answered is True
    assert payloads[0]["results"] == [
        {
            "type": "article",
            "id": "a1",
            "title": "Answer",
            "input_message_content": {"message_text": "42"},
        }
    ]
    assert payloads[0]["cache_time"] == 0


def test_create_from_settings(settings) -> None:
    client = HttpxTelegramClient.create(settings)

    assert client.api.raise_on_error is True
