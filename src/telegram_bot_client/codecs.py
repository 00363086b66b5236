"""Wire codecs for fields whose JSON form differs from their Python form.

Each codec governs exactly one type. Used as ``Annotated`` metadata it replaces
pydantic's structural schema for that type and falls through for any other.
``to_wire`` and ``query_value`` apply the same rules outside of models.
"""

import json
from enum import Enum
from collections.abc import Mapping
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, GetCoreSchemaHandler
from pydantic_core import core_schema

from telegram_bot_client.domain.chat_id import ChatId
from telegram_bot_client.domain.enums import (
    PARSE_MODE_TOKENS,
    InlineQueryResultType,
    ParseMode,
)
from telegram_bot_client.domain.files import FileToSend

T = TypeVar("T")


class WireCodec(Generic[T]):
    """Read/write rule for a single type."""

    governs: type[T]

    def can_convert(self, type_: object) -> bool:
        return type_ is self.governs

    def read(self, token: object) -> T:
        raise NotImplementedError

    def write(self, value: T) -> object:
        raise NotImplementedError

    def validate(self, value: object) -> T:
        if isinstance(value, self.governs):
            return value
        return self.read(value)

    def __get_pydantic_core_schema__(
        self, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        if not self.can_convert(source_type):
            return handler(source_type)
        return core_schema.no_info_plain_validator_function(
            self.validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                self.write, when_used="json"
            ),
        )


class ChatIdCodec(WireCodec[ChatId]):
    """Bare string for usernames, bare number for identifiers."""

    governs = ChatId

    def read(self, token: object) -> ChatId:
        if isinstance(token, bool) or not isinstance(token, str | int):
            raise ValueError(f"Chat reference must be a string or integer: {token!r}")
        return ChatId.parse(str(token))

    def write(self, value: ChatId) -> str | int:
        if value.username is not None:
            return value.username
        return value.identifier


class InlineQueryResultTypeCodec(WireCodec[InlineQueryResultType]):
    """Lenient read (case and underscores ignored), canonical snake_case write."""

    governs = InlineQueryResultType

    def read(self, token: object) -> InlineQueryResultType:
        if token is None:
            return InlineQueryResultType.UNKNOWN
        wanted = str(token).replace("_", "").casefold()
        for member in InlineQueryResultType:
            if member.name.replace("_", "").casefold() == wanted:
                return member
        return InlineQueryResultType.UNKNOWN

    def write(self, value: InlineQueryResultType) -> str:
        return value.to_type_string()


_PARSE_MODES_BY_TOKEN: dict[str, ParseMode] = {
    token: mode for mode, token in PARSE_MODE_TOKENS.items()
}


class ParseModeCodec(WireCodec[ParseMode]):
    """Table-driven tokens; unknown tokens read as ``ParseMode.DEFAULT``."""

    governs = ParseMode

    def read(self, token: object) -> ParseMode:
        if not isinstance(token, str):
            return ParseMode.DEFAULT
        return _PARSE_MODES_BY_TOKEN.get(token, ParseMode.DEFAULT)

    def write(self, value: ParseMode) -> str:
        return PARSE_MODE_TOKENS[value]


class FileToSendCodec(WireCodec[FileToSend]):
    """A file id or URL, sent as a bare string."""

    governs = FileToSend

    def read(self, token: object) -> FileToSend:
        if not isinstance(token, str) or not token:
            raise ValueError(f"File reference must be a non-empty string: {token!r}")
        if token.startswith(("http://", "https://")):
            return FileToSend.from_url(token)
        return FileToSend.from_file_id(token)

    def write(self, value: FileToSend) -> str:
        return value.to_wire_string()


class EmptyObjectCodec(WireCodec[T]):
    """Structural (de)serialization where an empty JSON object means absent."""

    def __init__(self, governs: type[T]) -> None:
        self.governs = governs

    def __get_pydantic_core_schema__(
        self, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        if not self.can_convert(source_type):
            return handler(source_type)

        def _read(value: object, validate: core_schema.ValidatorFunctionWrapHandler):
            if value == {}:
                return None
            return validate(value)

        return core_schema.no_info_wrap_validator_function(
            _read, handler(source_type)
        )


CHAT_ID_CODEC = ChatIdCodec()
INLINE_QUERY_RESULT_TYPE_CODEC = InlineQueryResultTypeCodec()
PARSE_MODE_CODEC = ParseModeCodec()
FILE_TO_SEND_CODEC = FileToSendCodec()

SCALAR_CODECS: tuple[WireCodec[Any], ...] = (
    CHAT_ID_CODEC,
    INLINE_QUERY_RESULT_TYPE_CODEC,
    PARSE_MODE_CODEC,
    FILE_TO_SEND_CODEC,
)


def codec_for(type_: type) -> WireCodec[Any] | None:
    """Return the codec governing ``type_``, if any."""
    for codec in SCALAR_CODECS:
        if codec.can_convert(type_):
            return codec
    return None


def to_wire(value: object) -> object:
    """Render a request body as JSON-ready Python data."""
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True, exclude_none=True)
    codec = codec_for(type(value))
    if codec is not None:
        return codec.write(value)
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Mapping):
        return {str(key): to_wire(item) for key, item in value.items()}
    if isinstance(value, list | tuple):
        return [to_wire(item) for item in value]
    return value


def query_value(value: object) -> str:
    """Render a query-string value (before percent-escaping)."""
    if isinstance(value, bool):
        return "true" if value else "false"
    wired = to_wire(value)
    if isinstance(wired, dict | list):
        return json.dumps(wired, separators=(",", ":"))
    return str(wired)
