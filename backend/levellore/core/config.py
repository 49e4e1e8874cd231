from pydantic_settings import BaseSettings
from typing import Optional
import os


class Settings(BaseSettings):
    # Application settings
    APP_NAME: str = "LevelLore"
    VERSION: str = "0.1.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # API settings
    API_PREFIX: str = "/api"

    # CORS settings
    BACKEND_CORS_ORIGINS: list[str] = ["*"]

    # Storage: "json" keeps everything in DATA_FILE, "sqlite" uses SQLITE_PATH
    STORE_BACKEND: str = "json"
    DATA_FILE: str = "./data/data.json"
    SQLITE_PATH: str = "./data/levellore.db"

    # Client shell (index.html + assets), served only when set
    STATIC_DIR: Optional[str] = None

    # Auth
    BCRYPT_ROUNDS: int = 10
    SESSION_TTL_HOURS: Optional[int] = None

    # XP rewards
    DAILY_LOGIN_XP: int = 10
    DAILY_QUIZ_XP: int = 50

    # Chat
    CHAT_HISTORY_LIMIT: int = 100
    CHAT_MAX_LENGTH: int = 500

    # Avatars
    MAX_AVATAR_BYTES: int = 2 * 1024 * 1024

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True

    def ensure_directories(self):
        """Create parent directories for the configured data files"""
        for path in (self.DATA_FILE, self.SQLITE_PATH):
            parent = os.path.dirname(path)
            if parent:
                os.makedirs(parent, exist_ok=True)


settings = Settings()
