"""Tests for the chat reference value object."""

import pytest

from telegram_bot_client.domain.chat_id import ChatId


def test_parse_username() -> None:
    chat_id = ChatId.parse("@channel")

    assert chat_id.username == "@channel"
    assert chat_id.identifier == 0
    assert chat_id.to_canonical_string() == "@channel"


def test_parse_integer_string_sets_identifier() -> None:
    chat_id = ChatId.parse("-100123")

    assert chat_id.username is None
    assert chat_id.identifier == -100123


def test_parse_int() -> None:
    assert ChatId.parse(42).identifier == 42


def test_equality_uses_canonical_string() -> None:
    assert ChatId.parse("42") == ChatId.from_identifier(42)
    assert hash(ChatId.parse("42")) == hash(ChatId.from_identifier(42))
    assert ChatId.from_username("@abc") == ChatId.parse("@abc")
    assert ChatId.from_username("@abc") != ChatId.from_identifier(42)
    assert str(ChatId.from_identifier(7)) == "7"


def test_chat_id_is_not_equal_to_plain_values() -> None:
    assert ChatId.from_identifier(42) != 42
    assert ChatId.from_username("@abc") != "@abc"


@pytest.mark.parametrize(
    "raw", ["abc", "@", "", "4_2", "12ab", "\u0661\u0662", "-\uff14\uff12"]
)
def test_parse_rejects_ambiguous_strings(raw: str) -> None:
    with pytest.raises(ValueError):
        ChatId.parse(raw)


def test_from_username_requires_at_prefix() -> None:
    with pytest.raises(ValueError):
        ChatId.from_username("channel")


def test_from_identifier_rejects_bool() -> None:
    with pytest.raises(TypeError):
        ChatId.from_identifier(True)


def test_chat_id_is_immutable() -> None:
    chat_id = ChatId.from_identifier(1)

    with pytest.raises(AttributeError):
        chat_id.identifier = 2  # type: ignore[misc]
