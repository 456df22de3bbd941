import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent

load_dotenv(dotenv_path=PROJECT_ROOT / ".env")


class EnvManager:
    """Read settings from the process environment (after loading .env)."""

    @staticmethod
    def get_env_variable(name: str, default: Optional[str] = None) -> str:
        value = os.getenv(name)
        if value is None or value == "":
            return default  # type: ignore
        return value

    @staticmethod
    def get_bool(name: str, default: bool = False) -> bool:
        value = os.getenv(name)
        if value is None:
            return default
        return value.strip().lower() in ("1", "true", "yes", "on")
