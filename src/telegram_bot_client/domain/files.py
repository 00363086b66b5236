"""Files referenced by outgoing requests."""

from dataclasses import dataclass

from telegram_bot_client.domain.enums import FileType


@dataclass(frozen=True)
class FileToSend:
    """A file already known to Telegram (``file_id``) or reachable by URL."""

    file_id: str | None = None
    url: str | None = None

    def __post_init__(self) -> None:
        if (self.file_id is None) == (self.url is None):
            raise ValueError("FileToSend needs exactly one of file_id or url")
        if self.url is not None and not self.url.startswith(("http://", "https://")):
            raise ValueError(f"Unsupported file URL: {self.url!r}")

    @classmethod
    def from_file_id(cls, file_id: str) -> "FileToSend":
        return cls(file_id=file_id)

    @classmethod
    def from_url(cls, url: str) -> "FileToSend":
        return cls(url=url)

    @property
    def type(self) -> FileType:
        """Delivery kind; uploads from streams are not supported."""
        if self.file_id is not None:
            return FileType.ID
        return FileType.URL

    def to_wire_string(self) -> str:
        return self.file_id if self.file_id is not None else str(self.url)
