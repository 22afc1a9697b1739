"""
Application configuration loaded from environment variables.
"""
import os
import logging

logger = logging.getLogger(__name__)

DEFAULT_POSTGRES_PASSWORD = "secretpassword"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

class AppConfig:
    """Centralized application configuration with validation."""

    def __init__(self):
        self.environment = os.getenv("ENVIRONMENT", "development")
        self.log_level = os.getenv("LOG_LEVEL", "INFO").upper()

        # Database configuration with defaults
        self.postgres_user = os.getenv("POSTGRES_USER", "identity_user")
        self.postgres_password = os.getenv("POSTGRES_PASSWORD", DEFAULT_POSTGRES_PASSWORD)
        self.db_host = os.getenv("DB_HOST", "localhost")
        self.db_port = os.getenv("DB_PORT", "5432")
        self.postgres_db = os.getenv("POSTGRES_DB", "identity")
        self.db_echo = os.getenv("DB_ECHO", "false").lower() == "true"

        self.database_url = os.getenv("DATABASE_URL") or self._build_database_url()

        self._validate_config()

    def _build_database_url(self) -> str:
        return (
            f"postgresql+asyncpg://{self.postgres_user}:{self.postgres_password}"
            f"@{self.db_host}:{self.db_port}/{self.postgres_db}"
        )

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    def _validate_config(self):
        """Warn about unsafe settings; an unusable LOG_LEVEL falls back to INFO."""
        issues = []

        if self.environment != "development" and self.postgres_password == DEFAULT_POSTGRES_PASSWORD:
            issues.append("POSTGRES_PASSWORD is the default value")

        if self.is_production and self.db_echo:
            issues.append("DB_ECHO is enabled in production and will log SQL statements")

        if self.log_level not in LOG_LEVELS:
            issues.append(f"Unknown LOG_LEVEL: {self.log_level}, using INFO")
            self.log_level = "INFO"

        if issues:
            logger.warning("Configuration issues detected:")
            for issue in issues:
                logger.warning(f"  - {issue}")

# Global configuration instance
app_config = AppConfig()
