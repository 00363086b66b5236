"""Pydantic models for Telegram Bot API payloads."""

from typing import Annotated

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from telegram_bot_client.codecs import (
    CHAT_ID_CODEC,
    FILE_TO_SEND_CODEC,
    INLINE_QUERY_RESULT_TYPE_CODEC,
    PARSE_MODE_CODEC,
    EmptyObjectCodec,
)
from telegram_bot_client.domain.chat_id import ChatId
from telegram_bot_client.domain.enums import (
    ChatMemberStatus,
    InlineQueryResultType,
    ParseMode,
)
from telegram_bot_client.domain.files import FileToSend

ChatIdField = Annotated[ChatId, CHAT_ID_CODEC]
ParseModeField = Annotated[ParseMode, PARSE_MODE_CODEC]
InlineQueryResultTypeField = Annotated[
    InlineQueryResultType, INLINE_QUERY_RESULT_TYPE_CODEC
]
FileToSendField = Annotated[FileToSend, FILE_TO_SEND_CODEC]


class TelegramModel(BaseModel):
    """Base model: unknown fields from the API are ignored."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class TelegramUser(TelegramModel):
    """Telegram user payload."""

    id: int
    is_bot: bool | None = None
    first_name: str | None = None
    last_name: str | None = None
    username: str | None = None
    language_code: str | None = None


class TelegramChat(TelegramModel):
    """Telegram chat payload."""

    id: ChatIdField
    type: str
    title: str | None = None
    username: str | None = None
    first_name: str | None = None
    last_name: str | None = None


class TelegramFile(TelegramModel):
    """A file ready to be downloaded."""

    file_id: str
    file_unique_id: str | None = None
    file_size: int | None = None
    file_path: str | None = None


class TelegramPhotoSize(TelegramFile):
    """One size of a photo or a file/sticker thumbnail."""

    width: int
    height: int


# A missing thumbnail is sent by the API as an empty object.
PhotoSizeField = Annotated[TelegramPhotoSize, EmptyObjectCodec(TelegramPhotoSize)]


class TelegramDocument(TelegramFile):
    """General file attached to a message."""

    thumbnail: PhotoSizeField | None = Field(
        default=None, validation_alias=AliasChoices("thumbnail", "thumb")
    )
    file_name: str | None = None
    mime_type: str | None = None


class TelegramChatMember(TelegramModel):
    """Information about one member of a chat."""

    user: TelegramUser
    status: ChatMemberStatus


class TelegramMessage(TelegramModel):
    """Telegram message payload."""

    message_id: int
    date: int
    chat: TelegramChat
    from_user: TelegramUser | None = Field(default=None, alias="from")
    text: str | None = None
    caption: str | None = None
    photo: list[TelegramPhotoSize] | None = None
    document: TelegramDocument | None = None


class InputTextMessageContent(TelegramModel):
    """Text content of a message sent as the result of an inline query."""

    message_text: str
    parse_mode: ParseModeField | None = None
    disable_web_page_preview: bool | None = None


class InlineQueryResultArticle(TelegramModel):
    """Link to an article or web page returned for an inline query."""

    type: InlineQueryResultTypeField = InlineQueryResultType.ARTICLE
    id: str
    title: str
    input_message_content: InputTextMessageContent
    url: str | None = None
    description: str | None = None
    thumbnail_url: str | None = None


class SendMessageRequest(TelegramModel):
    """Body of ``sendMessage``."""

    chat_id: ChatIdField
    text: str
    parse_mode: ParseModeField | None = None
    reply_markup: dict[str, object] | None = None


class SendPhotoRequest(TelegramModel):
    """Body of ``sendPhoto`` for photos passed by file id or URL."""

    chat_id: ChatIdField
    photo: FileToSendField
    caption: str | None = None
    parse_mode: ParseModeField | None = None


class AnswerInlineQueryRequest(TelegramModel):
    """Body of ``answerInlineQuery``."""

    inline_query_id: str
    results: list[InlineQueryResultArticle]
    cache_time: int | None = None
