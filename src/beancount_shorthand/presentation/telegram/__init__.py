from .handlers import build_reply, failure_text, success_text, usage_text
from .models import Chat, Message, SendMessage, Update, User

__all__ = [
    "build_reply",
    "failure_text",
    "success_text",
    "usage_text",
    "Chat",
    "Message",
    "SendMessage",
    "Update",
    "User",
]
