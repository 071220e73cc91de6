from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Base
    APP_ENV: str = "dev"  # dev | staging | prod
    APP_NAME: str = "GLU Tools API"
    APP_VERSION: str = "0.1.0"

    # CORS
    CORS_ORIGINS: str = "http://localhost:3000,http://localhost:5173"

    # Security
    API_KEY: str = "change_me"
    API_PREFIX: str = "/api"

    # Store
    STORE_BACKEND: str = "memory"  # memory | sql
    DATABASE_URL: str = "sqlite:///./glutools.db"
    MAX_UPLOAD_MB: int = 25

    # Seed
    SEED_ON_STARTUP: bool = True
    DEFAULT_ADMIN_NAME: str = "GLU Admin"
    DEFAULT_ADMIN_EMAIL: str = "admin@glutools.com"
    DEFAULT_ADMIN_PASSWORD: str = "admin123"

    # Logging
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        case_sensitive = True


@lru_cache
def get_settings() -> Settings:
    return Settings()
