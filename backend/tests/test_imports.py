"""
Test that all modules can be imported correctly.
This helps identify import issues in CI/CD environment.
"""
import pytest

class TestImports:
    """Test module imports for CI/CD compatibility."""

    def test_main_app_import(self):
        """Test importing the main FastAPI app."""
        try:
            from main import app
            assert app is not None
        except ImportError as e:
            pytest.fail(f"Failed to import main.app: {e}")

    def test_identity_store_imports(self):
        try:
            from services.identity_store import IdentityStore, open_identity_store, Base
            assert IdentityStore is not None
            assert open_identity_store is not None
            assert Base is not None
        except ImportError as e:
            pytest.fail(f"Failed to import identity store modules: {e}")

    def test_config_defaults(self):
        from services.config import AppConfig

        config = AppConfig()
        assert config.database_url
        assert "://" in config.database_url

    def test_database_url_from_environment(self, monkeypatch):
        from services.config import AppConfig

        monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:///./identity.db")
        assert AppConfig().database_url == "sqlite+aiosqlite:///./identity.db"

    def test_database_url_built_from_parts(self, monkeypatch):
        from services.config import AppConfig

        monkeypatch.delenv("DATABASE_URL", raising=False)
        monkeypatch.setenv("POSTGRES_USER", "alice")
        monkeypatch.setenv("POSTGRES_PASSWORD", "s3cret")
        monkeypatch.setenv("DB_HOST", "db")
        monkeypatch.setenv("DB_PORT", "5433")
        monkeypatch.setenv("POSTGRES_DB", "accounts")

        assert AppConfig().database_url == "postgresql+asyncpg://alice:s3cret@db:5433/accounts"

    def test_schema_imports(self):
        try:
            from schemas.email_verification import VerificationRequest, ValidationResult
            assert VerificationRequest is not None
            assert ValidationResult is not None
        except ImportError as e:
            pytest.fail(f"Failed to import schema modules: {e}")

    def test_external_dependencies(self):
        """Test that external dependencies are available."""
        try:
            from fastapi import HTTPException
            from sqlalchemy.ext.asyncio import AsyncSession
            from email_validator import validate_email
            import httpx

            assert HTTPException is not None
            assert AsyncSession is not None
            assert validate_email is not None
            assert httpx is not None
        except ImportError as e:
            pytest.fail(f"Failed to import external dependencies: {e}")

    def test_unknown_log_level_falls_back_to_info(self, monkeypatch, caplog):
        from services.config import AppConfig

        monkeypatch.setenv("LOG_LEVEL", "verbose")
        with caplog.at_level("WARNING", logger="services.config"):
            config = AppConfig()

        assert config.log_level == "INFO"
        assert "Unknown LOG_LEVEL: VERBOSE" in caplog.text

    def test_log_level_is_upper_cased(self, monkeypatch):
        from services.config import AppConfig

        monkeypatch.setenv("LOG_LEVEL", "debug")
        assert AppConfig().log_level == "DEBUG"
