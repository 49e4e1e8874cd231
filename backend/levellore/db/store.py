import asyncio
from abc import ABC, abstractmethod
from contextlib import asynccontextmanager
from typing import List, Optional

from ..models import Account, ChatMessage


class Store(ABC):
    """
    Persistence boundary for accounts and the chat log.

    Every load-mutate-persist sequence must run inside ``writer()`` so that
    concurrent requests cannot lose each other's updates. Reads may run
    outside of it.
    """

    def __init__(self):
        self._write_lock = asyncio.Lock()

    @asynccontextmanager
    async def writer(self):
        """Serialize mutations: only one writer holds the store at a time"""
        async with self._write_lock:
            yield self

    async def initialize(self):
        """Load or create the backing storage"""

    async def close(self):
        """Release any held resources"""

    @abstractmethod
    async def ping(self) -> bool:
        """Return True when the backing storage is reachable"""

    @abstractmethod
    async def get_account(self, username: str) -> Optional[Account]:
        """Get account by username (case-sensitive)"""

    @abstractmethod
    async def put_account(self, account: Account) -> None:
        """Create or replace an account and persist it"""

    @abstractmethod
    async def list_accounts(self) -> List[Account]:
        """Return every account"""

    @abstractmethod
    async def append_message(self, message: ChatMessage) -> None:
        """Append a message to the chat log and persist it"""

    @abstractmethod
    async def recent_messages(self, limit: int) -> List[ChatMessage]:
        """Return at most ``limit`` of the newest messages, in insertion order"""
