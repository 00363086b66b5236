"""Enumerations shared by the Bot API models."""

from enum import Enum, StrEnum, auto


class ParseMode(Enum):
    """Text formatting mode of a message.

    Wire tokens are not derived from member names; see ``PARSE_MODE_TOKENS``.
    """

    DEFAULT = auto()
    MARKDOWN = auto()
    HTML = auto()
    MARKDOWN_V2 = auto()


PARSE_MODE_TOKENS: dict[ParseMode, str] = {
    ParseMode.DEFAULT: "",
    ParseMode.MARKDOWN: "Markdown",
    ParseMode.HTML: "HTML",
    ParseMode.MARKDOWN_V2: "MarkdownV2",
}


class InlineQueryResultType(Enum):
    """Kind of an inline query result; values are the snake_case wire tokens."""

    UNKNOWN = "unknown"
    ARTICLE = "article"
    PHOTO = "photo"
    GIF = "gif"
    MPEG4_GIF = "mpeg4_gif"
    VIDEO = "video"
    AUDIO = "audio"
    VOICE = "voice"
    DOCUMENT = "document"
    LOCATION = "location"
    VENUE = "venue"
    CONTACT = "contact"
    GAME = "game"
    STICKER = "sticker"

    def to_type_string(self) -> str:
        return self.value


class FileType(Enum):
    """How a file is handed to the API."""

    UNKNOWN = auto()
    STREAM = auto()
    ID = auto()
    URL = auto()


class ChatMemberStatus(StrEnum):
    """Status of a member in a chat."""

    CREATOR = "creator"
    ADMINISTRATOR = "administrator"
    MEMBER = "member"
    RESTRICTED = "restricted"
    LEFT = "left"
    KICKED = "kicked"
