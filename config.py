"""
Configuration settings for the Contact Manager API
Manages database connections, API settings, and environment variables
Handles both local development (SQLite/PostgreSQL) and AWS deployment
"""

import os
from typing import List


def _split_origins(value: str) -> List[str]:
    return [origin.strip() for origin in value.split(",") if origin.strip()]


class Settings:
    """
    Application configuration class that loads settings from environment variables
    with fallback defaults for local development
    """

    # Database Configuration
    DATABASE_URL: str = os.getenv(
        "DATABASE_URL",
        "postgresql+asyncpg://postgres@localhost:5432/contacts"
    )

    # RDS Configuration (for AWS deployment)
    RDS_HOSTNAME: str = os.getenv("RDS_HOSTNAME", "localhost")
    RDS_PORT: str = os.getenv("RDS_PORT", "5432")
    RDS_DB_NAME: str = os.getenv("RDS_DB_NAME", "contacts")
    RDS_USERNAME: str = os.getenv("RDS_USERNAME", "postgres")
    RDS_PASSWORD: str = os.getenv("RDS_PASSWORD", "")

    # SSL Configuration for RDS
    DB_SSL_MODE: str = os.getenv("DB_SSL_MODE", "prefer")  # require, prefer, disable

    # Connection pool (ignored for SQLite)
    DB_POOL_SIZE: int = int(os.getenv("DB_POOL_SIZE", "5"))
    DB_MAX_OVERFLOW: int = int(os.getenv("DB_MAX_OVERFLOW", "10"))
    DB_POOL_TIMEOUT: int = int(os.getenv("DB_POOL_TIMEOUT", "30"))

    # Create tables when the application starts
    AUTO_CREATE_TABLES: bool = os.getenv("AUTO_CREATE_TABLES", "True").lower() == "true"

    # API Configuration
    API_TITLE: str = "Contact Manager API"
    API_VERSION: str = "1.0.0"
    API_DESCRIPTION: str = "Contact management with duplicate merging and vCard import/export"

    # Server Configuration
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "8000"))

    # Environment
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
    DEBUG: bool = os.getenv("DEBUG", "True").lower() == "true"

    # Logging Configuration
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # CORS Configuration
    CORS_ORIGINS: List[str] = _split_origins(os.getenv("CORS_ORIGINS", "*"))

    # vCard upload limit
    MAX_UPLOAD_BYTES: int = int(os.getenv("MAX_UPLOAD_BYTES", str(5 * 1024 * 1024)))

    @classmethod
    def get_database_url(cls) -> str:
        """
        Get the database URL for the current environment
        Ensures an async driver is used
        """
        url = cls.DATABASE_URL
        if url.startswith("postgresql://"):
            return url.replace("postgresql://", "postgresql+asyncpg://", 1)
        if url.startswith("sqlite://"):
            return url.replace("sqlite://", "sqlite+aiosqlite://", 1)
        return url

    @classmethod
    def get_rds_database_url(cls) -> str:
        """
        Build RDS database URL from individual components
        Used when deploying to AWS with RDS
        """
        if cls.RDS_PASSWORD:
            auth = f"{cls.RDS_USERNAME}:{cls.RDS_PASSWORD}"
        else:
            auth = cls.RDS_USERNAME

        base_url = f"postgresql+asyncpg://{auth}@{cls.RDS_HOSTNAME}:{cls.RDS_PORT}/{cls.RDS_DB_NAME}"

        # asyncpg takes 'ssl', not 'sslmode'
        if cls.DB_SSL_MODE in ("require", "prefer"):
            base_url += f"?ssl={cls.DB_SSL_MODE}"
        elif cls.DB_SSL_MODE != "disable":
            base_url += "?ssl=true"

        return base_url

    @classmethod
    def get_active_database_url(cls) -> str:
        """
        Get the appropriate database URL based on environment
        Uses RDS configuration if RDS_HOSTNAME is set and not localhost, otherwise uses DATABASE_URL
        """
        if cls.RDS_HOSTNAME and cls.RDS_HOSTNAME != "localhost" and cls.RDS_PASSWORD:
            return cls.get_rds_database_url()
        return cls.get_database_url()

    @classmethod
    def is_sqlite(cls) -> bool:
        return cls.get_active_database_url().startswith("sqlite")

    @classmethod
    def is_lambda_environment(cls) -> bool:
        """
        Check if we're running in AWS Lambda
        """
        return os.getenv("AWS_LAMBDA_FUNCTION_NAME") is not None


# Create a global settings instance
settings = Settings()
