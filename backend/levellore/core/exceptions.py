"""
Domain exceptions for LevelLore services.

Services raise these; the API layer turns them into JSON error responses
using ``status_code`` and ``message``.
"""


class LevelLoreError(Exception):
    """Base exception for all service errors"""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInput(LevelLoreError):
    """Raised when a request is missing fields or carries malformed values"""
    status_code = 400


class Unauthorized(LevelLoreError):
    """Raised for bad credentials and missing or unknown session tokens"""
    status_code = 401


class NotFound(LevelLoreError):
    """Raised when a requested resource does not exist"""
    status_code = 404


class Conflict(LevelLoreError):
    """Raised when creating something that already exists"""
    status_code = 409


class StoreError(LevelLoreError):
    """Raised when the persistent store cannot be read or written"""
    status_code = 500
