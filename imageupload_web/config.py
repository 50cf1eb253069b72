# imageupload_web/config.py
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict
from typing import List
from functools import lru_cache


class WebSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_prefix="WEB_", case_sensitive=False, extra="ignore")

    # API Connection
    API_BASE_URL: str = "http://localhost:8000"
    API_TIMEOUT_SECONDS: int = 30

    # Client-side upload checks, mirror the API limits
    MAX_UPLOAD_SIZE: int = 5 * 1024 * 1024  # 5MB
    ALLOWED_IMAGE_TYPES: List[str] = ["image/jpeg", "image/jpg", "image/png", "image/gif", "image/webp"]


@lru_cache()
def get_web_settings() -> WebSettings:
    return WebSettings()


web_settings: WebSettings = get_web_settings()
