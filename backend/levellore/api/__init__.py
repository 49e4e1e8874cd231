from .api import build_api_router

__all__ = [
    "build_api_router"
]
