"""Errors raised by the Bot API client."""

from telegram_bot_client.api.envelope import ApiResponse, ResponseParameters


class ApiRequestError(Exception):
    """A request failed; ``error_code`` mirrors the HTTP/API status."""

    def __init__(
        self,
        message: str,
        error_code: int = 0,
        parameters: ResponseParameters | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.parameters = parameters

    @classmethod
    def from_api_response(cls, response: ApiResponse[object]) -> "ApiRequestError":
        """Build the error reported by an ``ok: false`` envelope."""
        return cls(
            response.message or "Unknown API error",
            response.error_code or 0,
            response.parameters,
        )

    def __str__(self) -> str:
        return f"{self.message} (error_code={self.error_code})"


class InvalidTokenError(ApiRequestError):
    """The bot token was rejected (HTTP 401)."""


class RequestTimeoutError(ApiRequestError):
    """The network round trip timed out before a response arrived."""
