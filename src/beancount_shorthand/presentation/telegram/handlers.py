"""Telegram webhook reply builder.

Framework-free: takes a parsed ``Update`` plus the injected account holder and
clock, runs the shorthand pipeline and returns the ``SendMessage`` reply. The
HTTP layer only deserializes and serializes.

Reply texts:
- success: ``✅`` banner followed by the Beancount entry
- ParseError: ``⚠️`` banner followed by ``Failed to parse input: <detail>``
- /start, /help: usage with an example in the default currency
"""
from __future__ import annotations

from beancount_shorthand.application.pipeline import parse_and_format
from beancount_shorthand.application.ports import Clock
from beancount_shorthand.domain.errors import ParseError
from beancount_shorthand.infrastructure.config.holder import AccountMapHolder
from beancount_shorthand.infrastructure.logging.config import get_logger

from .models import SendMessage, Update

__all__ = [
    "DIVIDER",
    "build_reply",
    "failure_text",
    "success_text",
    "usage_text",
]

log = get_logger("beancount_shorthand.telegram")

DIVIDER = "=" * 30
_HELP_COMMANDS = {"/start", "/help"}


def success_text(entry: str) -> str:
    return f"✅\n{DIVIDER}\n{entry}"


def failure_text(detail: str) -> str:
    return f"⚠️\n{DIVIDER}\nFailed to parse input: {detail}"


def usage_text(currency: str) -> str:
    return (
        "Send one transaction per message:\n"
        "[YYYY-MM-DD] @Payee narration amount CURRENCY source > category\n\n"
        f"Example:\n2021-09-08 @KFC hamburger 12.40 {currency} cba > food"
    )


def build_reply(update: Update, holder: AccountMapHolder, clock: Clock) -> SendMessage | None:
    """Return the reply for ``update`` or None when there is nothing to answer.

    Updates without a (edited) message or without text are ignored.

    Error Handling:
        - ParseError -> failure text naming the problem.
        - Any other exception -> logged, "Server error" reply.
    """
    message = update.effective_message
    text = (message.text or "").strip() if message is not None else ""
    if message is None or not text:
        log.warning("update_without_text", update_id=update.update_id)
        return None

    def reply(body: str) -> SendMessage:
        return SendMessage(chat_id=message.chat.id, text=body, reply_to_message_id=message.message_id)

    accounts = holder.current()
    if text.split(maxsplit=1)[0].split("@", 1)[0] in _HELP_COMMANDS:
        return reply(usage_text(accounts.default_currency()))

    try:
        entry = parse_and_format(text, accounts, today=clock.today())
    except ParseError as e:
        log.info("parse_failed", update_id=update.update_id, kind=e.kind.value, detail=str(e))
        return reply(failure_text(str(e)))
    except Exception:
        log.exception("reply_failed", update_id=update.update_id)
        return reply("Server error")

    log.info("parse_succeeded", update_id=update.update_id)
    return reply(success_text(entry))
