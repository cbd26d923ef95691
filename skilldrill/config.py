from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Database
    DATABASE_URL: str = "sqlite:///./skilldrill.db"

    # Identity provider tokens (verified only, never issued here)
    AUTH_SECRET_KEY: str = "change-me"
    AUTH_ALGORITHM: str = "HS256"
    AUTH_AUDIENCE: Optional[str] = None

    # Application
    APP_ENV: str = "development"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:8081",
    ]
    ENABLE_ADMIN_ROUTES: bool = True

    # AI drafting
    GEMINI_API_KEY: Optional[str] = None
    GEMINI_MODEL: str = "gemini-1.5-flash"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )


settings = Settings()
