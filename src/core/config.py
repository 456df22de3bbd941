from datetime import datetime
from typing import List, Optional
from zoneinfo import ZoneInfo

from pydantic_settings import BaseSettings

from src.core.env_manager import EnvManager


class Settings(BaseSettings):
    ASYNC_DATABASE_URL: str = EnvManager.get_env_variable(
        "ASYNC_DATABASE_URL", "sqlite+aiosqlite:///database.db"
    )
    CREATE_TABLES: bool = EnvManager.get_bool("CREATE_TABLES", True)

    PROJECT_NAME: str = EnvManager.get_env_variable("PROJECT_NAME", "PrepTive")
    PROJECT_INFO: str = EnvManager.get_env_variable(
        "PROJECT_INFO", "Exam updates, admit cards, results and syllabus"
    )
    PROJECT_VERSION: str = EnvManager.get_env_variable("PROJECT_VERSION", "1.0.0")
    TIME_ZONE: str = EnvManager.get_env_variable("TIME_ZONE", "Asia/Kolkata")
    LOG_LEVEL: str = EnvManager.get_env_variable("LOG_LEVEL", "INFO")

    # Public site identity used in canonical URLs and structured data
    SITE_URL: str = EnvManager.get_env_variable("SITE_URL", "https://www.preptive.in")
    SITE_NAME: str = EnvManager.get_env_variable("SITE_NAME", "PrepTive")
    TWITTER_HANDLE: str = EnvManager.get_env_variable("TWITTER_HANDLE", "@preptive_in")
    CONTACT_EMAIL: str = EnvManager.get_env_variable("CONTACT_EMAIL", "mail@preptive.in")
    CONTACT_PHONE: str = EnvManager.get_env_variable("CONTACT_PHONE", "+918381873457")

    GOOGLE_SITE_VERIFICATION: Optional[str] = EnvManager.get_env_variable(
        "GOOGLE_SITE_VERIFICATION"
    )
    YANDEX_VERIFICATION: Optional[str] = EnvManager.get_env_variable(
        "YANDEX_VERIFICATION"
    )
    YAHOO_VERIFICATION: Optional[str] = EnvManager.get_env_variable(
        "YAHOO_VERIFICATION"
    )

    ALLOWED_IMAGE_DOMAINS: List[str] = ["image.preptive.in", "www.preptive.in"]

    MEDIA_ORIGIN: str = EnvManager.get_env_variable(
        "MEDIA_ORIGIN", "https://gwptkkewewqekdmqowbl.supabase.co"
    )
    MEDIA_BUCKET_PREFIX: str = EnvManager.get_env_variable(
        "MEDIA_BUCKET_PREFIX", "/storage/v1/object/public/media"
    )
    MEDIA_PROXY_USER_AGENT: str = EnvManager.get_env_variable(
        "MEDIA_PROXY_USER_AGENT", "Netlify-Edge"
    )

    def get_now(self):
        """Get the current time in the configured time zone."""
        tz = ZoneInfo(self.TIME_ZONE)
        return datetime.now(tz)


settings = Settings()
