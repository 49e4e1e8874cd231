import base64
import binascii
import logging
import re
from dataclasses import dataclass
from datetime import date
from typing import Optional

import bcrypt

from .leveling import LevelInfo, compute_level
from .session_manager import SessionManager
from ..core.exceptions import Conflict, InvalidInput, Unauthorized
from ..db import Store
from ..models import Account

logger = logging.getLogger(__name__)

# Coloured square shown until a user uploads their own picture
DEFAULT_AVATAR = (
    "data:image/png;base64,iVBORw0KGgoAAAANSUhEUgAAADIAAAAyCAIAAACRXR/mAAAAT0lEQVR4nO3OMQHAIADAMJh/"
    "A3hCFAb29IIjUZA51h7v+W4H/mkVWoVWoVVoFVqFVqFVaBVahVahVWgVWoVWoVVoFVqFVqFVaBVahVahVRz/7AHJNzgs"
    "xgAAAABJRU5ErkJggg=="
)

MAX_USERNAME_LENGTH = 50
# bcrypt only looks at the first 72 bytes and newer releases refuse longer input
MAX_PASSWORD_BYTES = 72

_DATA_URI = re.compile(r"^data:image/[\w.+-]+(;[\w=.+-]+)*;base64,(?P<payload>[A-Za-z0-9+/=\s]+)$")

INVALID_CREDENTIALS = "Invalid credentials."


@dataclass(frozen=True)
class Profile:
    username: str
    xp: int
    level_info: LevelInfo
    last_login_award_date: Optional[date]
    last_quiz_award_date: Optional[date]
    avatar_image: str


class AuthenticationService:
    """Registration, password login and bearer-token resolution"""

    def __init__(
        self,
        store: Store,
        session_manager: SessionManager,
        bcrypt_rounds: int = 10,
        max_avatar_bytes: int = 2 * 1024 * 1024
    ):
        self.store = store
        self.session_manager = session_manager
        self.bcrypt_rounds = bcrypt_rounds
        self.max_avatar_bytes = max_avatar_bytes

    def _hash_password(self, password: str) -> str:
        """Hash password using bcrypt"""
        salt = bcrypt.gensalt(rounds=self.bcrypt_rounds)
        hashed = bcrypt.hashpw(password.encode('utf-8'), salt)
        return hashed.decode('utf-8')

    def _verify_password(self, password: str, hashed: str) -> bool:
        """Verify password against hash"""
        try:
            return bcrypt.checkpw(password.encode('utf-8'), hashed.encode('utf-8'))
        except ValueError:
            return False

    async def register(self, username: Optional[str], password: Optional[str]) -> Account:
        """Create an account with zero XP and no award dates"""
        username = (username or "").strip()
        if not username or not password:
            raise InvalidInput("Username and password are required.")
        if len(username) > MAX_USERNAME_LENGTH:
            raise InvalidInput(f"Username must be at most {MAX_USERNAME_LENGTH} characters.")
        if len(password.encode('utf-8')) > MAX_PASSWORD_BYTES:
            raise InvalidInput(f"Password must be at most {MAX_PASSWORD_BYTES} bytes.")

        async with self.store.writer():
            if await self.store.get_account(username) is not None:
                raise Conflict("Username already exists.")

            account = Account(username=username, password_hash=self._hash_password(password))
            await self.store.put_account(account)

        logger.info(f"Registered new user {username}")
        return account

    async def authenticate(self, username: Optional[str], password: Optional[str]) -> str:
        """
        Verify credentials and issue a new session token.

        Unknown users and wrong passwords fail with the same message so the
        response never reveals whether a username exists.
        """
        username = (username or "").strip()
        account = await self.store.get_account(username) if username else None

        if account is None or not password or not self._verify_password(password, account.password_hash):
            logger.warning("Failed login attempt")
            raise Unauthorized(INVALID_CREDENTIALS)

        token = self.session_manager.create_session(account.username)
        logger.info(f"User {account.username} logged in")
        return token

    async def resolve_account(self, token: Optional[str]) -> Account:
        """Map a bearer token to its account or fail with Unauthorized"""
        username = self.session_manager.resolve(token)
        if username is None:
            raise Unauthorized("Unauthorized")

        account = await self.store.get_account(username)
        if account is None:
            raise Unauthorized("Unauthorized")
        return account

    async def get_profile(self, token: Optional[str]) -> Profile:
        account = await self.resolve_account(token)
        return Profile(
            username=account.username,
            xp=account.xp,
            level_info=compute_level(account.xp),
            last_login_award_date=account.last_login_award_date,
            last_quiz_award_date=account.last_quiz_award_date,
            avatar_image=account.avatar_image or DEFAULT_AVATAR,
        )

    async def update_avatar(self, username: str, image: Optional[str]) -> str:
        """Validate a base64 image data URI and store it as the user's avatar"""
        self._validate_avatar(image)

        async with self.store.writer():
            account = await self.store.get_account(username)
            if account is None:
                raise Unauthorized("Unauthorized")
            await self.store.put_account(account.with_changes(avatar_image=image))

        return image

    def logout(self, token: Optional[str]) -> bool:
        """Invalidate a session token on the server"""
        if not token:
            return False
        return self.session_manager.end_session(token)

    def _validate_avatar(self, image: Optional[str]):
        if not image or not isinstance(image, str):
            raise InvalidInput("Image data is required.")

        match = _DATA_URI.match(image)
        if not match:
            raise InvalidInput("Image must be a base64 image data URI.")

        try:
            raw = base64.b64decode(match.group("payload"), validate=False)
        except (binascii.Error, ValueError):
            raise InvalidInput("Image data is not valid base64.")

        if len(raw) > self.max_avatar_bytes:
            raise InvalidInput(f"Image must be at most {self.max_avatar_bytes} bytes.")
