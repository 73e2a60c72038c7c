# =============================================================================
# pr_reviewer/core/config.py
# =============================================================================
from typing import List, Optional
from pydantic import field_validator
from pydantic_settings import BaseSettings
import os
from dotenv import load_dotenv

load_dotenv()

class Settings(BaseSettings):
    # Project Info
    PROJECT_NAME: str = "PR Reviewer Assignment Service"
    VERSION: str = "1.0.0"
    DESCRIPTION: str = "Assigns and tracks pull request reviewers across teams"

    # Database connection parts (used when DATABASE_URL is not given)
    DB_HOST: str = os.getenv("DB_HOST", "postgres")
    DB_PORT: int = int(os.getenv("DB_PORT", "5432"))
    DB_USER: str = os.getenv("DB_USER", "postgres")
    DB_PASSWORD: str = os.getenv("DB_PASSWORD", "postgres")
    DB_NAME: str = os.getenv("DB_NAME", "pr_reviewer")

    # Full override, e.g. sqlite:// for tests
    DATABASE_URL: Optional[str] = os.getenv("DATABASE_URL")

    DATABASE_POOL_SIZE: int = int(os.getenv("DATABASE_POOL_SIZE", "10"))
    DATABASE_MAX_OVERFLOW: int = int(os.getenv("DATABASE_MAX_OVERFLOW", "20"))

    # Startup connection retry: attempt N waits N * backoff seconds
    DB_CONNECT_ATTEMPTS: int = int(os.getenv("DB_CONNECT_ATTEMPTS", "10"))
    DB_CONNECT_BACKOFF_SECONDS: float = float(os.getenv("DB_CONNECT_BACKOFF_SECONDS", "2"))

    # Drop and recreate all tables on boot
    RESET_DB_ON_STARTUP: bool = os.getenv("RESET_DB_ON_STARTUP", "false").lower() == "true"

    # CORS
    ALLOWED_HOSTS: List[str] = ["*"]

    # Environment
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
    DEBUG: bool = ENVIRONMENT == "development"

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_DIR: str = os.getenv("LOG_DIR", "logs")

    # Server
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "8080"))

    @field_validator("DB_CONNECT_ATTEMPTS")
    @classmethod
    def validate_connect_attempts(cls, v):
        if v < 1:
            raise ValueError("DB_CONNECT_ATTEMPTS must be at least 1")
        return v

    @field_validator("DB_CONNECT_BACKOFF_SECONDS")
    @classmethod
    def validate_connect_backoff(cls, v):
        if v < 0:
            raise ValueError("DB_CONNECT_BACKOFF_SECONDS must not be negative")
        return v

    @property
    def database_url(self) -> str:
        """Resolved SQLAlchemy URL"""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"postgresql+psycopg2://{self.DB_USER}:{self.DB_PASSWORD}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        )

    @property
    def safe_database_url(self) -> str:
        """Database URL without the password, for logs"""
        if self.DATABASE_URL:
            return self.DATABASE_URL.split("@")[-1]
        return f"{self.DB_USER}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"

    class Config:
        env_file = ".env"
        case_sensitive = True

settings = Settings()
