from .account import Account
from .message import ChatMessage

__all__ = [
    "Account",
    "ChatMessage",
]
