"""Application configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # App settings
    app_name: str = "Journal API"
    debug: bool = False
    secret_key: str  # Required, no default

    # Database
    database_url: str = "sqlite+aiosqlite:///./journal.db"

    # Session cookie (signed JWT wrapping a server-side session id)
    jwt_algorithm: str = "HS256"
    session_expire_minutes: int = 60 * 24
    session_cookie_name: str = "journal_session"
    session_cookie_secure: bool = False

    # Users
    default_avatar: str = "src/assets/user.svg"

    # CORS
    cors_origins: list[str] = ["http://localhost:5173"]

    @field_validator("secret_key")
    @classmethod
    def validate_secret_key(cls, v: str, info) -> str:
        """Validate that secret_key is secure."""
        if not v:
            raise ValueError("SECRET_KEY is required")

        # In production mode, ensure secret key is strong
        debug = info.data.get("debug", False)
        if not debug:
            if len(v) < 32:
                raise ValueError("SECRET_KEY must be at least 32 characters in production mode")
            if v in ("change-me-in-production", "secret", "password", "changeme"):
                raise ValueError("SECRET_KEY must not be a common weak value")

        return v

    def validate_runtime_config(self) -> list[str]:
        """Validate runtime configuration and return warnings."""
        warnings = []

        if self.database_url.startswith("sqlite"):
            warnings.append(
                "DATABASE_URL points at SQLite - fine for development, "
                "concurrent writers will serialize"
            )

        if not self.session_cookie_secure and not self.debug:
            warnings.append("SESSION_COOKIE_SECURE is off - session cookies travel over plain HTTP")

        if "*" in self.cors_origins:
            warnings.append("CORS_ORIGINS contains '*' - credentials will be refused by browsers")

        # Warn about debug mode in production
        if self.debug:
            warnings.append("DEBUG mode is enabled - should be disabled in production")

        return warnings


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
