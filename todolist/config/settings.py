"""
Application settings and configuration
"""

import os
import logging
from pathlib import Path
from dotenv import load_dotenv
from typing import Optional
from todolist.config.constants import DEFAULT_TASKS_FILE

# Load environment variables from .env file
env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(dotenv_path=env_path)


class Settings:
    """Application settings loaded from environment variables"""

    # Storage
    TASKS_FILE: str = os.getenv("TODOLIST_TASKS_FILE", DEFAULT_TASKS_FILE)

    # Logging
    LOG_LEVEL: str = os.getenv("TODOLIST_LOG_LEVEL", "INFO")
    LOG_FILE: Optional[str] = os.getenv("TODOLIST_LOG_FILE", None)

    @classmethod
    def validate(cls) -> bool:
        """Validate that settings hold usable values"""
        if not cls.TASKS_FILE or not cls.TASKS_FILE.strip():
            raise ValueError("TODOLIST_TASKS_FILE must not be empty")

        if not isinstance(logging.getLevelName(cls.LOG_LEVEL.upper()), int):
            raise ValueError(f"Unknown log level: {cls.LOG_LEVEL}")

        return True


# Global settings instance
settings = Settings()
