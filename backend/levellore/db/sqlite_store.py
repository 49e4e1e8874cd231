import logging
import os
from datetime import date
from typing import List, Optional

import aiosqlite

from .schema import STORE_SCHEMA
from .store import Store
from ..core.exceptions import StoreError
from ..models import Account, ChatMessage

logger = logging.getLogger(__name__)


def _row_to_account(row) -> Account:
    return Account(
        username=row["username"],
        password_hash=row["password_hash"],
        xp=row["xp"],
        last_login_award_date=date.fromisoformat(row["last_login_date"]) if row["last_login_date"] else None,
        last_quiz_award_date=date.fromisoformat(row["last_quiz_date"]) if row["last_quiz_date"] else None,
        avatar_image=row["profile_pic"],
    )


def _row_to_message(row) -> ChatMessage:
    return ChatMessage(
        id=row["id"],
        author=row["username"],
        text=row["text"],
        timestamp=row["timestamp"],
    )


class SqliteStore(Store):
    """Store backed by an embedded SQLite database file"""

    def __init__(self, db_path: str):
        super().__init__()
        self.db_path = db_path

    async def initialize(self):
        """Create the database file and tables if needed"""
        parent = os.path.dirname(self.db_path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        try:
            async with aiosqlite.connect(self.db_path) as db:
                await db.executescript(STORE_SCHEMA)
                await db.commit()
        except aiosqlite.Error as e:
            logger.error(f"Could not initialize database {self.db_path}: {e}")
            raise StoreError(f"Could not initialize database: {e}") from e

    async def ping(self) -> bool:
        try:
            async with aiosqlite.connect(self.db_path) as db:
                await db.execute("SELECT 1")
            return True
        except aiosqlite.Error:
            return False

    async def get_account(self, username: str) -> Optional[Account]:
        try:
            async with aiosqlite.connect(self.db_path) as db:
                db.row_factory = aiosqlite.Row
                cursor = await db.execute("""
                    SELECT * FROM accounts WHERE username = ?
                """, (username,))
                row = await cursor.fetchone()
                return _row_to_account(row) if row else None
        except aiosqlite.Error as e:
            raise StoreError(f"Failed to read account: {e}") from e

    async def put_account(self, account: Account) -> None:
        record = account.to_record()
        try:
            async with aiosqlite.connect(self.db_path) as db:
                await db.execute("""
                    INSERT INTO accounts (
                        username, password_hash, xp,
                        last_login_date, last_quiz_date, profile_pic
                    ) VALUES (?, ?, ?, ?, ?, ?)
                    ON CONFLICT(username) DO UPDATE SET
                        password_hash = excluded.password_hash,
                        xp = excluded.xp,
                        last_login_date = excluded.last_login_date,
                        last_quiz_date = excluded.last_quiz_date,
                        profile_pic = excluded.profile_pic
                """, (
                    account.username, record["password"], record["xp"],
                    record["lastLoginDate"], record["lastQuizDate"], record["profilePic"]
                ))
                await db.commit()
        except aiosqlite.Error as e:
            logger.error(f"Error saving account {account.username}: {e}")
            raise StoreError(f"Failed to save account: {e}") from e

    async def list_accounts(self) -> List[Account]:
        try:
            async with aiosqlite.connect(self.db_path) as db:
                db.row_factory = aiosqlite.Row
                cursor = await db.execute("SELECT * FROM accounts")
                rows = await cursor.fetchall()
                return [_row_to_account(row) for row in rows]
        except aiosqlite.Error as e:
            raise StoreError(f"Failed to list accounts: {e}") from e

    async def append_message(self, message: ChatMessage) -> None:
        try:
            async with aiosqlite.connect(self.db_path) as db:
                await db.execute("""
                    INSERT INTO messages (id, username, text, timestamp)
                    VALUES (?, ?, ?, ?)
                """, (message.id, message.author, message.text, message.timestamp))
                await db.commit()
        except aiosqlite.Error as e:
            logger.error(f"Error saving chat message: {e}")
            raise StoreError(f"Failed to save message: {e}") from e

    async def recent_messages(self, limit: int) -> List[ChatMessage]:
        if limit <= 0:
            return []
        try:
            async with aiosqlite.connect(self.db_path) as db:
                db.row_factory = aiosqlite.Row
                cursor = await db.execute("""
                    SELECT id, username, text, timestamp FROM messages
                    ORDER BY seq DESC LIMIT ?
                """, (limit,))
                rows = await cursor.fetchall()
                return [_row_to_message(row) for row in reversed(rows)]
        except aiosqlite.Error as e:
            raise StoreError(f"Failed to read messages: {e}") from e
