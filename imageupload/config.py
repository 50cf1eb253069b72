# imageupload/config.py
import os
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict
from typing import List
from functools import lru_cache

MAX_IMAGES_PER_CUSTOMER = 10

INLINE_STORAGE = "inline"
FILESYSTEM_STORAGE = "filesystem"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # Service
    APP_NAME: str = "Image Upload API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    DOCS_ENABLED: bool = True
    HOST: str = os.environ.get("HOST", "0.0.0.0")
    PORT: int = int(os.environ.get("PORT", 8000))
    # Public address used to build image serve URLs
    BASE_URL: str = os.environ.get("BASE_URL", "http://localhost:8000")

    # Database
    DATABASE_URL: str = os.environ.get("DATABASE_URL", "sqlite:///./imageupload.db")

    # CORS, comma-separated; "*" allows any origin
    ALLOWED_ORIGINS: str = "*"

    # Image ingestion
    MAX_FILE_SIZE: int = 5 * 1024 * 1024
    # Multipart batches carry several files
    MAX_REQUEST_SIZE: int = 60 * 1024 * 1024
    ALLOWED_IMAGE_TYPES: List[str] = ["image/jpeg", "image/jpg", "image/png", "image/gif", "image/webp"]
    IMAGE_STORAGE_MODE: str = INLINE_STORAGE
    UPLOAD_DIR: str = "uploads"

    # Responses smaller than this are sent uncompressed
    GZIP_MIN_SIZE: int = 500

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @property
    def allowed_origins_list(self) -> List[str]:
        return [origin.strip() for origin in (self.ALLOWED_ORIGINS or "").split(",") if origin.strip()]

    @property
    def uses_filesystem_storage(self) -> bool:
        return self.IMAGE_STORAGE_MODE.strip().lower() == FILESYSTEM_STORAGE


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings: Settings = get_settings()
