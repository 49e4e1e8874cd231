import logging
import time
import uuid
from typing import List

from ..core.exceptions import InvalidInput
from ..db import Store
from ..models import ChatMessage

logger = logging.getLogger(__name__)


class ChatService:
    """Single shared chat room backed by the store's append-only log"""

    def __init__(self, store: Store, history_limit: int = 100, max_length: int = 500):
        self.store = store
        self.history_limit = history_limit
        self.max_length = max_length

    async def post_message(self, username: str, text) -> ChatMessage:
        if not isinstance(text, str) or not text.strip():
            raise InvalidInput("Message cannot be empty.")

        text = text.strip()
        if len(text) > self.max_length:
            raise InvalidInput(f"Message must be at most {self.max_length} characters.")

        message = ChatMessage(
            id=uuid.uuid4().hex,
            author=username,
            text=text,
            timestamp=int(time.time() * 1000)
        )

        async with self.store.writer():
            await self.store.append_message(message)

        logger.debug(f"Chat message {message.id} posted by {username}")
        return message

    async def list_recent(self) -> List[ChatMessage]:
        """
        Newest ``history_limit`` messages, oldest first.

        The sort is stable, so messages sharing a millisecond keep the order
        they were appended in.
        """
        messages = await self.store.recent_messages(self.history_limit)
        return sorted(messages, key=lambda m: m.timestamp)
