"""
Application configuration and environment variables
"""

import os
from pathlib import Path
from typing import Final

from dotenv import load_dotenv

from monke.core.errors import ConfigError

load_dotenv()

DEFAULT_DB_PATH: Final[Path] = Path.home() / ".config" / "monke" / "monke.db"


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        # Reported by Config.validate()
        return 0


class Config:
    DB_PATH: Final[Path] = Path(
        os.path.expanduser(os.getenv("MONKE_DB_PATH", str(DEFAULT_DB_PATH)))
    )
    LOG_LEVEL: Final[str] = os.getenv("MONKE_LOG_LEVEL", "WARNING")
    LINE_WIDTH: Final[int] = _int_env("MONKE_LINE_WIDTH", 80)
    CHART_WIDTH: Final[int] = _int_env("MONKE_CHART_WIDTH", 40)

    @classmethod
    def validate(cls) -> None:
        """Both rendered widths must be positive integers."""
        if cls.LINE_WIDTH < 1:
            raise ConfigError("MONKE_LINE_WIDTH must be a positive integer.")
        if cls.CHART_WIDTH < 1:
            raise ConfigError("MONKE_CHART_WIDTH must be a positive integer.")
