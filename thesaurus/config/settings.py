"""
Application settings.

Values come from the environment (a .env file is loaded first) and can be
overridden explicitly, e.g. by command line flags.
"""

import os
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from thesaurus.registry import DEFAULT_SHARDS

# Relative defaults resolve against the working directory at use time
DEFAULT_LOGS_DIR = Path("logs")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseModel):
    """Runtime configuration for the thesaurus console."""

    log_level: str = Field(default="INFO", description="Minimum level written to log files")
    logs_dir: Path = Field(default=DEFAULT_LOGS_DIR, description="Directory for log files")
    shards: int = Field(default=DEFAULT_SHARDS, ge=1, description="Registry lock stripes")
    seed_file: Optional[Path] = Field(default=None, description="YAML file with seed synonym groups")

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {value!r}")
        return level


def load_settings(env_file: Optional[str] = None, **overrides: Any) -> Settings:
    """
    Build Settings from environment variables.

    Args:
        env_file: Optional path to a .env file. By default .env is
                  searched for the usual way by python-dotenv.
        **overrides: Explicit values; None means "not given".

    Returns:
        Validated Settings.
    """
    if env_file:
        load_dotenv(env_file)
    else:
        load_dotenv()

    # Unset and empty variables fall back to model defaults
    values = {
        "log_level": os.getenv("THESAURUS_LOG_LEVEL") or None,
        "logs_dir": os.getenv("THESAURUS_LOGS_DIR") or None,
        "shards": os.getenv("THESAURUS_SHARDS") or None,
        "seed_file": os.getenv("THESAURUS_SEED_FILE") or None,
    }
    values.update({k: v for k, v in overrides.items() if v is not None})

    return Settings(**{k: v for k, v in values.items() if v is not None})
