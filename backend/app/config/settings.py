from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    # Environment
    APP_ENV: str = Field("development")
    DEBUG: bool = Field(False)

    # Database
    DB_USER: str = Field("stays_admin")
    DB_PASSWORD: str = Field("StaysPass2024")
    DB_NAME: str = Field("stays")
    DB_HOST: str = Field("postgres")
    DB_PORT: int = Field(5432)
    DATABASE_URL: Optional[str] = Field(None)

    # App
    API_HOST: str = Field("0.0.0.0")
    API_PORT: int = Field(4000)
    CORS_ORIGINS: str = Field("http://127.0.0.1:5173")

    # Auth
    JWT_SECRET_KEY: str = Field("supersecret")
    JWT_ALGORITHM: str = Field("HS256")
    JWT_EXP_MINUTES: int = Field(60)
    AUTH_COOKIE_NAME: str = Field("authToken")
    AUTH_COOKIE_SAMESITE: str = Field("none")
    PASSWORD_HASH_SCHEME: str = Field("bcrypt")
    PASSWORD_HASH_ROUNDS: int = Field(10)

    # Media
    UPLOADS_DIR: str = Field("/app/data/uploads")
    DOWNLOAD_TIMEOUT_SEC: float = Field(10.0)
    MAX_UPLOAD_BYTES: int = Field(10 * 1024 * 1024)
    MAX_UPLOAD_FILES: int = Field(10)

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        env_file_encoding="utf-8"
    )

    @property
    def cors_origins(self) -> List[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"postgresql+asyncpg://{self.DB_USER}:{self.DB_PASSWORD}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        )

    def is_production(self) -> bool:
        return self.APP_ENV.lower() in ("production", "prod")


settings = Settings()
