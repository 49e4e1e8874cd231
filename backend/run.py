#!/usr/bin/env python3
"""
Start the LevelLore API server.

Host, port and every other setting come from the environment or ``.env``.
"""

import uvicorn

from levellore.core.config import settings

if __name__ == "__main__":
    uvicorn.run(
        "levellore.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower()
    )
