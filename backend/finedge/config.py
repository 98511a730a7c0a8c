"""
FinEdge - Configuration Settings
"""
from decimal import Decimal
from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator
import json


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore"
    )

    # =========================
    # Application Settings
    # =========================
    APP_NAME: str = "FinEdge"
    APP_ENV: str = "development"
    DEBUG: bool = True
    SECRET_KEY: str = "change-this-in-production"
    API_PREFIX: str = "/api"

    # =========================
    # Server Configuration
    # =========================
    BACKEND_HOST: str = "0.0.0.0"
    BACKEND_PORT: int = 8000
    CORS_ORIGINS: List[str] = ["http://localhost:5173", "http://localhost:3000"]

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        if isinstance(v, str):
            try:
                return json.loads(v)
            except json.JSONDecodeError:
                return [origin.strip() for origin in v.split(",")]
        return v

    # =========================
    # Database - PostgreSQL
    # =========================
    POSTGRES_HOST: str = "localhost"
    POSTGRES_PORT: int = 5432
    POSTGRES_DB: str = "finedge"
    POSTGRES_USER: str = "finedge_user"
    POSTGRES_PASSWORD: str = "dev_password_123"
    # Direct DATABASE_URL from environment (overrides individual settings)
    DATABASE_URL: str = ""
    DATABASE_ECHO: bool = False

    @property
    def database_url(self) -> str:
        """Get the async database URL."""
        if self.DATABASE_URL:
            url = self.DATABASE_URL
            # Plain postgres URLs need the asyncpg driver
            if url.startswith("postgresql://"):
                url = url.replace("postgresql://", "postgresql+asyncpg://", 1)
            return url
        return f"postgresql+asyncpg://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"

    # =========================
    # Authentication
    # =========================
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24
    ALLOW_ADMIN_SIGNUP: bool = True

    # =========================
    # Trading
    # =========================
    # Seed cash granted to every new user portfolio
    INITIAL_DEPOSIT: Decimal = Decimal("10000.00")
    DEFAULT_PAGE_SIZE: int = 10
    TOP_MOVERS_LIMIT: int = 10

    # =========================
    # Logging
    # =========================
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"
    LOG_TO_FILE: bool = True


# Create global settings instance
settings = Settings()
