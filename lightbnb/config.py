"""
Configuration management using Pydantic settings.
Reads database credentials and pool options from environment variables or a .env file.
"""

from pydantic import ValidationInfo, field_validator
from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # Application configuration
    app_name: str = "LightBnB"
    environment: str = "development"
    debug: bool = False

    # Database credentials (DB_USER, DB_PASSWORD, DB_HOST, DATABASE, DB_PORT)
    db_user: str = "labber"
    db_password: str = "labber"
    db_host: str = "localhost"
    database: str = "lightbnb"
    db_port: int = 5432

    # Full URL; built from the components above when left empty
    database_url: str = ""

    # Connection pool settings
    pool_size: int = 10
    max_overflow: int = 20
    pool_timeout: int = 30
    pool_recycle: int = 3600

    # Number of rows returned by listing queries when the caller gives no limit
    default_result_limit: int = 10

    @field_validator("database_url", mode="before")
    @classmethod
    def validate_database_url(cls, v, info: ValidationInfo):
        """Build database URL from components if not provided directly."""
        if not v:
            user = info.data.get("db_user", "labber")
            password = info.data.get("db_password", "labber")
            host = info.data.get("db_host", "localhost")
            port = info.data.get("db_port", 5432)
            db = info.data.get("database", "lightbnb")
            return f"postgresql+asyncpg://{user}:{password}@{host}:{port}/{db}"

        # Ensure async driver is used
        if v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v):
        """Validate environment setting."""
        allowed_envs = ["development", "testing", "staging", "production"]
        if v not in allowed_envs:
            raise ValueError(f"Environment must be one of: {allowed_envs}")
        return v

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    @property
    def is_testing(self) -> bool:
        return self.environment == "testing"

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    This ensures we only create one instance of settings throughout the app lifecycle.
    """
    return Settings()


# Global settings instance
settings = get_settings()
