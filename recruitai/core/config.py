"""
Configuration management for the RecruitAI matching and interview platform.

This module provides centralized configuration management supporting:
- Environment variables and a local .env file
- OpenAI integration (direct or OpenAI-compatible endpoints)
- Local development defaults for PostgreSQL and the candidate portal
"""

from functools import lru_cache
from typing import Any, Dict, List, Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
import structlog

logger = structlog.get_logger(__name__)


class Settings(BaseSettings):
    """
    Main application settings with smart defaults for local development.
    """

    # Environment Detection
    ENVIRONMENT: str = Field(
        default="local",
        description="Environment (local/development/staging/production)"
    )
    DEBUG: bool = Field(
        default=False,
        description="Debug mode"
    )

    # Core Application Settings
    APP_NAME: str = Field(
        default="RecruitAI",
        description="Application name"
    )
    APP_VERSION: str = Field(
        default="1.0.0",
        description="Application version"
    )

    # Security (Required)
    SECRET_KEY: str = Field(
        ...,
        description="JWT signing secret key (min 32 chars)"
    )
    JWT_ALGORITHM: str = Field(
        default="HS256",
        description="JWT algorithm"
    )
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(
        default=60,
        description="Access token expiry in minutes"
    )

    # CORS Configuration
    CORS_ORIGINS: str = Field(
        default="*",
        description="Comma-separated CORS origins"
    )

    # Logging
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level"
    )
    LOG_FORMAT: str = Field(
        default="console",
        description="Log format (json/console)"
    )

    # OpenAI Configuration
    OPENAI_API_KEY: Optional[str] = Field(
        default=None,
        description="OpenAI API key"
    )
    OPENAI_BASE_URL: Optional[str] = Field(
        default="https://api.openai.com/v1",
        description="OpenAI API base URL"
    )
    OPENAI_MODEL: str = Field(
        default="gpt-3.5-turbo",
        description="OpenAI chat model name"
    )
    OPENAI_MAX_TOKENS: int = Field(
        default=1500,
        description="Maximum tokens for chat completions"
    )
    OPENAI_TEMPERATURE: float = Field(
        default=0.2,
        description="Default temperature for chat completions"
    )
    AI_REQUEST_TIMEOUT: float = Field(
        default=30.0,
        description="Timeout in seconds for a single AI analysis call"
    )

    # PostgreSQL Configuration
    POSTGRES_URL: Optional[str] = Field(
        default=None,
        description="PostgreSQL connection URL"
    )
    POSTGRES_HOST: str = Field(
        default="localhost",
        description="PostgreSQL host"
    )
    POSTGRES_PORT: int = Field(
        default=5432,
        description="PostgreSQL port"
    )
    POSTGRES_USER: str = Field(
        default="recruitai",
        description="PostgreSQL user"
    )
    POSTGRES_PASSWORD: str = Field(
        default="recruitai",
        description="PostgreSQL password"
    )
    POSTGRES_DB: str = Field(
        default="recruitai",
        description="PostgreSQL database name"
    )
    DB_POOL_SIZE: int = Field(
        default=10,
        description="Database connection pool size"
    )

    # Candidate portal / interviews
    FRONTEND_URL: str = Field(
        default="http://localhost:3001",
        description="Base URL of the candidate-facing frontend"
    )
    INTERVIEW_DEFAULT_EXPIRY_DAYS: int = Field(
        default=7,
        description="Days an interview invitation remains valid"
    )
    INTERVIEW_TOKEN_BYTES: int = Field(
        default=32,
        description="Random bytes used when generating interview access tokens"
    )

    # Pagination
    DEFAULT_PAGE_SIZE: int = Field(
        default=20,
        description="Default page size for list endpoints"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @field_validator('SECRET_KEY')
    @classmethod
    def validate_secret_key(cls, v: str) -> str:
        """Validate that secret key is secure enough."""
        if len(v) < 32:
            raise ValueError("SECRET_KEY must be at least 32 characters long")
        return v

    @field_validator('ENVIRONMENT')
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate and normalize environment name."""
        v = v.lower()
        if v not in ('local', 'development', 'staging', 'production', 'test'):
            logger.warning(f"Unknown environment: {v}, defaulting to 'local'")
            return 'local'
        return v

    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.ENVIRONMENT == 'production'

    def is_local(self) -> bool:
        """Check if running in local environment."""
        return self.ENVIRONMENT == 'local'

    def get_cors_origins(self) -> List[str]:
        """Get CORS origins as a list."""
        if self.CORS_ORIGINS == "*":
            return ["*"]
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]

    def get_postgres_url(self) -> str:
        """Get PostgreSQL connection URL."""
        if self.POSTGRES_URL:
            return self.POSTGRES_URL
        return f"postgresql://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"

    def is_openai_configured(self) -> bool:
        """Check if OpenAI is configured."""
        return bool(self.OPENAI_API_KEY)

    def get_openai_config(self) -> Dict[str, Any]:
        """Get OpenAI client configuration."""
        if not self.OPENAI_API_KEY:
            raise ValueError("No OpenAI configuration found. Set OPENAI_API_KEY.")
        return {
            "api_key": self.OPENAI_API_KEY,
            "base_url": self.OPENAI_BASE_URL,
            "model": self.OPENAI_MODEL,
            "max_tokens": self.OPENAI_MAX_TOKENS,
            "temperature": self.OPENAI_TEMPERATURE,
        }

    def interview_link(self, access_token: str) -> str:
        """Build the candidate-facing interview URL for an access token."""
        return f"{self.FRONTEND_URL.rstrip('/')}/interview/{access_token}"


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings.

    Settings are loaded once from the environment (and .env file) and cached.
    """
    settings = Settings()

    logger.info(
        "Settings loaded",
        environment=settings.ENVIRONMENT,
        debug=settings.DEBUG,
        openai_configured=settings.is_openai_configured(),
    )

    return settings
