import os
import re
import unicodedata
from datetime import date, datetime
from pathlib import Path
from typing import Dict, Optional, Union

SRC_DIR = Path(__file__).resolve().parent.parent.parent
APPS_DIR = SRC_DIR / "apps"


def get_apps() -> Dict[str, Path]:
    return {
        name: APPS_DIR / name
        for name in sorted(os.listdir(APPS_DIR))
        if (APPS_DIR / name).is_dir() and not name.startswith("__")
    }


def get_app_paths(child_name: str) -> Dict[str, Dict[str, Path]]:
    """Return the module files of every `<app>/<child_name>` package."""
    result: Dict[str, Dict[str, Path]] = {}

    for app_name, app_path in get_apps().items():
        child = app_path / child_name
        if not child.is_dir():
            continue
        result[app_name] = {
            file.stem: file
            for file in sorted(child.glob("*.py"))
            if file.stem != "__init__"
        }

    return result


def module_name_from_path(path: Path) -> str:
    relative = path.relative_to(SRC_DIR.parent).with_suffix("")
    return ".".join(relative.parts)


def generate_slug(text: Optional[str]) -> str:
    """Lowercase, ASCII-fold and hyphenate a name for use in URLs."""
    if not text:
        return ""
    value = unicodedata.normalize("NFKD", text).encode("ascii", "ignore").decode()
    value = re.sub(r"[^\w\s-]", "", value.lower())
    return re.sub(r"[-\s_]+", "-", value).strip("-")


def format_date(value: Union[str, date, datetime, None]) -> str:
    """Render a date as e.g. '5 March 2025'; empty string for missing values."""
    if not value:
        return ""
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return value
    return f"{value.day} {value.strftime('%B %Y')}"


def isoformat(value: Union[date, datetime, None]) -> Optional[str]:
    return value.isoformat() if value else None
