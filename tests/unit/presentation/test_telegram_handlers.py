from __future__ import annotations

from datetime import date
from typing import Any

import pytest

from beancount_shorthand.domain.accounts import AccountMap
from beancount_shorthand.infrastructure.clock import FixedClock
from beancount_shorthand.infrastructure.config.holder import AccountMapHolder
from beancount_shorthand.presentation.telegram import handlers
from beancount_shorthand.presentation.telegram.handlers import DIVIDER, build_reply
from beancount_shorthand.presentation.telegram.models import Update

CLOCK = FixedClock(date(2021, 9, 8))


def _update(text: str | None, *, edited: bool = False) -> Update:
    message: dict[str, Any] = {
        "message_id": 7,
        "date": 1631059200,
        "chat": {"id": 42, "type": "private"},
        "from": {"id": 1, "is_bot": False, "first_name": "Ann"},
    }
    if text is not None:
        message["text"] = text
    return Update.model_validate({"update_id": 100, ("edited_message" if edited else "message"): message})


@pytest.fixture
def holder(account_map: AccountMap) -> AccountMapHolder:
    return AccountMapHolder(account_map)


def test_success_reply(holder: AccountMapHolder) -> None:
    reply = build_reply(_update("2021-09-08 @KFC hamburger 12.40 AUD cba > food"), holder, CLOCK)
    assert reply is not None
    assert reply.chat_id == 42
    assert reply.reply_to_message_id == 7
    assert reply.method == "sendMessage"
    assert reply.text == (
        f"✅\n{DIVIDER}\n"
        '2021-09-08 * "KFC" "hamburger"\n'
        "  Expenses:Food          12.40 AUD\n"
        "  Assets:Bank:CBA\n"
    )


def test_failure_reply(holder: AccountMapHolder) -> None:
    reply = build_reply(_update("2021-09-08 @KFC hamburger 12.40 AUD xyz > food"), holder, CLOCK)
    assert reply is not None
    assert reply.text == f"⚠️\n{DIVIDER}\nFailed to parse input: account xyz doesn't exist in current setting"


def test_line_without_date_uses_clock(holder: AccountMapHolder) -> None:
    reply = build_reply(_update("@KFC hamburger 12.40 AUD cba > food"), holder, CLOCK)
    assert reply is not None
    assert '2021-09-08 * "KFC" "hamburger"' in reply.text


def test_edited_message_is_answered(holder: AccountMapHolder) -> None:
    reply = build_reply(_update("2021-09-08 @KFC x 1 AUD cba > food", edited=True), holder, CLOCK)
    assert reply is not None
    assert reply.text.startswith("✅")


@pytest.mark.parametrize("text", ["/start", "/help", "/help@shorthand_bot"])
def test_usage_reply(holder: AccountMapHolder, text: str) -> None:
    reply = build_reply(_update(text), holder, CLOCK)
    assert reply is not None
    assert "12.40 AUD cba > food" in reply.text


@pytest.mark.parametrize("text", [None, "", "   "])
def test_no_text_no_reply(holder: AccountMapHolder, text: str | None) -> None:
    assert build_reply(_update(text), holder, CLOCK) is None


def test_update_without_message(holder: AccountMapHolder) -> None:
    assert build_reply(Update(update_id=1), holder, CLOCK) is None


def test_unexpected_error_reply(monkeypatch: pytest.MonkeyPatch, holder: AccountMapHolder) -> None:
    def boom(*args: Any, **kwargs: Any) -> str:
        raise RuntimeError("boom")

    monkeypatch.setattr(handlers, "parse_and_format", boom)
    reply = build_reply(_update("2021-09-08 @KFC x 1 AUD cba > food"), holder, CLOCK)
    assert reply is not None
    assert reply.text == "Server error"


def test_swapped_accounts_take_effect(holder: AccountMapHolder) -> None:
    holder.swap(AccountMap("AUD", {"cba": "Assets:Bank:CBA", "food": "Expenses:Groceries"}))
    reply = build_reply(_update("2021-09-08 @KFC x 1 AUD cba > food"), holder, CLOCK)
    assert reply is not None
    assert "Expenses:Groceries" in reply.text
