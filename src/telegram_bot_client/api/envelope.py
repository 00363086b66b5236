"""Response envelope wrapping every Bot API reply."""

from typing import Generic, TypeVar

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, PrivateAttr

from telegram_bot_client.api.telegram_models import ChatIdField

T = TypeVar("T")

NO_RESPONSE_MESSAGE = "No response received"


class ResponseParameters(BaseModel):
    """Hints on why a request failed and how to recover."""

    migrate_to_chat_id: ChatIdField | None = None
    retry_after: int | None = None


class ApiResponse(BaseModel, Generic[T]):
    """``{ok, description, result}`` envelope.

    Telegram names the error text ``description``; ``message`` is accepted too.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    ok: bool
    message: str | None = Field(
        default=None, validation_alias=AliasChoices("message", "description")
    )
    result: T | None = None
    error_code: int | None = None
    parameters: ResponseParameters | None = None

    _received: bool = PrivateAttr(default=True)

    @classmethod
    def no_response(cls) -> "ApiResponse[T]":
        """Envelope substituted when the reply could not be decoded."""
        response = cls(ok=False, message=NO_RESPONSE_MESSAGE)
        response._received = False
        return response

    @property
    def received(self) -> bool:
        """False for the synthetic envelope built by ``no_response``."""
        return self._received
