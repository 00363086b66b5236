"""Polymorphic chat reference."""

from dataclasses import dataclass


@dataclass(frozen=True, eq=False)
class ChatId:
    """Addresses a chat by numeric identifier or by ``@username``.

    Only one of the two is meaningful: ``username`` when set, otherwise
    ``identifier``. Equality and hashing use the canonical string form, so a
    reference parsed from ``"42"`` equals one built from ``42``.
    """

    identifier: int = 0
    username: str | None = None

    def __post_init__(self) -> None:
        if self.username is None:
            return
        if not _is_username(self.username):
            raise ValueError(f"Invalid chat username: {self.username!r}")
        if self.identifier != 0:
            raise ValueError("ChatId cannot carry both identifier and username")

    @classmethod
    def from_identifier(cls, identifier: int) -> "ChatId":
        """Build a reference from a numeric chat id."""
        if isinstance(identifier, bool) or not isinstance(identifier, int):
            raise TypeError(f"Chat identifier must be int, got {identifier!r}")
        return cls(identifier=identifier)

    @classmethod
    def from_username(cls, username: str) -> "ChatId":
        """Build a reference from an ``@``-prefixed username."""
        return cls(username=username)

    @classmethod
    def parse(cls, value: "str | int | ChatId") -> "ChatId":
        """Parse a chat reference from its canonical string or an int.

        Raises ValueError when a string is neither an ``@username`` nor an
        integer.
        """
        if isinstance(value, ChatId):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return cls.from_identifier(value)
        if not isinstance(value, str):
            raise TypeError(f"Cannot build ChatId from {type(value).__name__}")
        if _is_username(value):
            return cls.from_username(value)
        text = value.strip()
        digits = text[1:] if text[:1] in {"+", "-"} else text
        if not (digits.isascii() and digits.isdecimal()):
            raise ValueError(
                f"Chat reference must be '@username' or an integer, got {value!r}"
            )
        return cls.from_identifier(int(text))

    def to_canonical_string(self) -> str:
        """Return the username if set, else the decimal identifier."""
        if self.username is not None:
            return self.username
        return str(self.identifier)

    def __str__(self) -> str:
        return self.to_canonical_string()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ChatId):
            return NotImplemented
        return self.to_canonical_string() == other.to_canonical_string()

    def __hash__(self) -> int:
        return hash(self.to_canonical_string())


def _is_username(value: str) -> bool:
    return len(value) > 1 and value.startswith("@")
