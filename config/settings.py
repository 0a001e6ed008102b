from __future__ import annotations

import os
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv


load_dotenv()


class Settings:
    """Application settings loaded from environment variables.

    Keep all config centralized here; the frame core only ever sees
    ``domain`` passed in explicitly.
    """

    def __init__(
        self,
        domain: Optional[str] = None,
        app_env: Optional[str] = None,
        log_level: Optional[str] = None,
        assets_dir: Optional[str] = None,
        host: Optional[str] = None,
        port: Optional[int] = None,
        frame_title: Optional[str] = None,
    ) -> None:
        raw_domain = domain if domain is not None else os.getenv("DOMAIN", "")
        self.domain: str = raw_domain.strip().rstrip("/")
        self.app_env: str = app_env or os.getenv("APP_ENV", "development")
        self.log_level: str = (log_level or os.getenv("LOG_LEVEL", "INFO")).upper()
        self.assets_dir: str = assets_dir or os.getenv("ASSETS_DIR", "assets")
        self.host: str = host or os.getenv("HOST", "0.0.0.0")
        self.port: int = port if port is not None else int(os.getenv("PORT", "8080"))
        self.frame_title: str = frame_title or os.getenv("FRAME_TITLE", "Moxie Store Frame")

    @property
    def is_dev(self) -> bool:
        return self.app_env.lower() in {"dev", "development", "local"}


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
