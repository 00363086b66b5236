"""Telegram Bot API methods."""

from dataclasses import dataclass
from typing import Protocol

from telegram_bot_client.adapters.web_api_client import WebApiClient
from telegram_bot_client.api.telegram_models import (
    AnswerInlineQueryRequest,
    InlineQueryResultArticle,
    SendMessageRequest,
    SendPhotoRequest,
    TelegramChatMember,
    TelegramFile,
    TelegramMessage,
    TelegramUser,
)
from telegram_bot_client.config import Settings
from telegram_bot_client.domain.chat_id import ChatId
from telegram_bot_client.domain.enums import ParseMode
from telegram_bot_client.domain.files import FileToSend


class TelegramClient(Protocol):
    """Interface for Telegram API interactions."""

    async def get_me(self) -> TelegramUser:
        """Return the bot's own user."""

    async def send_message(
        self,
        chat_id: ChatId | int | str,
        text: str,
        parse_mode: ParseMode | None = None,
        reply_markup: dict | None = None,
    ) -> TelegramMessage:
        """Send a text message to a Telegram chat."""

    async def send_photo(
        self,
        chat_id: ChatId | int | str,
        photo: FileToSend,
        caption: str | None = None,
        parse_mode: ParseMode | None = None,
    ) -> TelegramMessage:
        """Send a photo known by file id or URL."""

    async def get_chat_member(
        self, chat_id: ChatId | int | str, user_id: int
    ) -> TelegramChatMember:
        """Fetch one member of a chat."""

    async def get_file(self, file_id: str) -> TelegramFile:
        """Fetch download metadata of a file."""

    async def answer_inline_query(
        self,
        inline_query_id: str,
        results: list[InlineQueryResultArticle],
        cache_time: int | None = None,
    ) -> bool:
        """Answer an inline query."""


@dataclass
class HttpxTelegramClient(TelegramClient):
    """Telegram client built on ``WebApiClient``."""

    api: WebApiClient

    @classmethod
    def create(cls, settings: Settings) -> "HttpxTelegramClient":
        """Create a Telegram client from settings."""
        return cls(api=WebApiClient.create(settings))

    async def get_me(self) -> TelegramUser:
        """Return the bot's own user via getMe."""
        return await self.api.get("getMe", TelegramUser)

    async def send_message(
        self,
        chat_id: ChatId | int | str,
        text: str,
        parse_mode: ParseMode | None = None,
        reply_markup: dict | None = None,
    ) -> TelegramMessage:
        """Send a message using Telegram's sendMessage API."""
        request = SendMessageRequest(
            chat_id=ChatId.parse(chat_id),
            text=text,
            parse_mode=parse_mode,
            reply_markup=reply_markup,
        )
        return await self.api.post(
            "sendMessage", body=request, result_type=TelegramMessage
        )

    async def send_photo(
        self,
        chat_id: ChatId | int | str,
        photo: FileToSend,
        caption: str | None = None,
        parse_mode: ParseMode | None = None,
    ) -> TelegramMessage:
        """Send a photo using Telegram's sendPhoto API."""
        request = SendPhotoRequest(
            chat_id=ChatId.parse(chat_id),
            photo=photo,
            caption=caption,
            parse_mode=parse_mode,
        )
        return await self.api.post(
            "sendPhoto", body=request, result_type=TelegramMessage
        )

    async def get_chat_member(
        self, chat_id: ChatId | int | str, user_id: int
    ) -> TelegramChatMember:
        """Fetch a chat member using getChatMember."""
        params = {"chat_id": ChatId.parse(chat_id), "user_id": user_id}
        return await self.api.get("getChatMember", TelegramChatMember, params=params)

    async def get_file(self, file_id: str) -> TelegramFile:
        """Fetch file metadata using getFile."""
        return await self.api.get("getFile", TelegramFile, params={"file_id": file_id})

    async def answer_inline_query(
        self,
        inline_query_id: str,
        results: list[InlineQueryResultArticle],
        cache_time: int | None = None,
    ) -> bool:
        """Answer an inline query using answerInlineQuery."""
        request = AnswerInlineQueryRequest(
            inline_query_id=inline_query_id,
            results=results,
            cache_time=cache_time,
        )
        return bool(
            await self.api.post("answerInlineQuery", body=request, result_type=bool)
        )
