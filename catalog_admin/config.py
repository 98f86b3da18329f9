# catalog_admin/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional
from functools import lru_cache

class Settings(BaseSettings):
    ENV: str = "development"

    # document store
    MONGO_URL: str = "mongodb://localhost:27017"
    MONGO_DB: str = "catalog"

    # public origin used to build absolute image URLs for newly created products
    BASE_URL: str = "http://localhost:8000"

    # uploaded product images live here and are served under UPLOAD_URL_PATH
    UPLOAD_DIR: str = "uploads"
    UPLOAD_URL_PATH: str = "/uploads"

    DEFAULT_PAGE_LIMIT: int = 10
    # leave unset to allow any page size; set e.g. MAX_PAGE_LIMIT=100 in .env to clamp
    MAX_PAGE_LIMIT: Optional[int] = None

    CORS_ORIGINS: str = ""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

@lru_cache()
def get_settings() -> Settings:
    """Return cached Settings instance."""
    return Settings()

settings = Settings()
