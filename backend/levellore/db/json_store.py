import asyncio
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, List, Optional

from .store import Store
from ..core.exceptions import StoreError
from ..models import Account, ChatMessage

logger = logging.getLogger(__name__)


class JsonFileStore(Store):
    """
    Store backed by a single JSON document: ``{"users": {...}, "messages": [...]}``.

    The in-memory copy is authoritative and the file is rewritten in full on
    every mutation. Memory is only updated once the new snapshot is on disk,
    so a failed write leaves both sides as they were.
    """

    def __init__(self, path: str):
        super().__init__()
        self.path = Path(path)
        self._users: Dict[str, Account] = {}
        self._messages: List[ChatMessage] = []
        self._loaded = False

    async def initialize(self):
        """Load the data file, starting empty when it does not exist yet"""
        if not self.path.exists():
            logger.info(f"No data file at {self.path}, starting with an empty store")
            self._loaded = True
            return

        try:
            data = await asyncio.to_thread(self._read)
            if not isinstance(data, dict):
                raise TypeError("top level must be an object")
            if not isinstance(data.get("users", {}), dict):
                raise TypeError("'users' must be an object")
            if not isinstance(data.get("messages", []), list):
                raise TypeError("'messages' must be a list")
            users = {
                username: Account.from_record(username, record)
                for username, record in data.get("users", {}).items()
            }
            messages = [ChatMessage.from_dict(m) for m in data.get("messages", [])]
        except (OSError, ValueError, KeyError, TypeError) as e:
            logger.error(f"Could not load data file {self.path}: {e}")
            raise StoreError(f"Could not load data file: {e}") from e

        self._users = users
        self._messages = messages
        self._loaded = True
        logger.info(f"Loaded {len(users)} users and {len(messages)} messages from {self.path}")

    async def ping(self) -> bool:
        return self._loaded

    async def get_account(self, username: str) -> Optional[Account]:
        return self._users.get(username)

    async def put_account(self, account: Account) -> None:
        users = dict(self._users)
        users[account.username] = account
        await self._flush(users, self._messages)
        self._users = users

    async def list_accounts(self) -> List[Account]:
        return list(self._users.values())

    async def append_message(self, message: ChatMessage) -> None:
        messages = self._messages + [message]
        await self._flush(self._users, messages)
        self._messages = messages

    async def recent_messages(self, limit: int) -> List[ChatMessage]:
        if limit <= 0:
            return []
        return self._messages[-limit:]

    async def _flush(self, users: Dict[str, Account], messages: List[ChatMessage]):
        snapshot = {
            "users": {username: account.to_record() for username, account in users.items()},
            "messages": [m.to_dict() for m in messages],
        }
        try:
            await asyncio.to_thread(self._write, snapshot)
        except OSError as e:
            logger.error(f"Error saving store to {self.path}: {e}")
            raise StoreError(f"Could not save data file: {e}") from e

    def _read(self) -> dict:
        with open(self.path, "r", encoding="utf-8") as handle:
            return json.load(handle)

    def _write(self, snapshot: dict):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, prefix=".data-", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                json.dump(snapshot, handle, indent=2)
            os.replace(tmp_path, self.path)
        except OSError:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise
