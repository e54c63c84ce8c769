"""Configuration management for backupsrc."""

import os
from typing import Optional
from dotenv import load_dotenv
from pydantic import BaseModel, Field

from .fs.paths import join


load_dotenv()


class Settings(BaseModel):
    """Process-wide settings."""

    # Repository location, e.g. "rest:https://host:8000/repo"
    repository: Optional[str] = Field(default=None)

    # Stdin source
    stdin_filename: str = Field(default="stdin")
    allow_empty_file: bool = Field(default=False)

    # Prefix for credential environment variables
    env_prefix: str = Field(default="")

    log_level: str = Field(default="WARNING")

    @property
    def stdin_path(self) -> str:
        """Logical path of the stdin file inside the virtual tree."""
        return join("/", self.stdin_filename)

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from environment variables."""
        def _parse_bool(value: Optional[str], fallback: bool) -> bool:
            if value is None:
                return fallback
            lowered = value.strip().lower()
            if lowered in ("1", "true", "yes", "on"):
                return True
            if lowered in ("0", "false", "no", "off"):
                return False
            return fallback

        return cls(
            repository=os.getenv("BACKUP_REPOSITORY"),
            stdin_filename=os.getenv("BACKUP_STDIN_FILENAME", "stdin"),
            allow_empty_file=_parse_bool(os.getenv("BACKUP_ALLOW_EMPTY_FILE"), False),
            env_prefix=os.getenv("BACKUP_ENV_PREFIX", ""),
            log_level=os.getenv("LOG_LEVEL", "WARNING").upper(),
        )
