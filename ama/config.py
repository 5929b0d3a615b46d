"""
AMA – Application configuration.
Reads environment variables from a .env file via pydantic-settings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Central configuration loaded from environment / .env."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # ── App ──
    APP_NAME: str = "AMA"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # ── Database ──
    DATABASE_URL: str = "sqlite+aiosqlite:///./ama.db"

    # ── Capability tokens ──
    # Random bytes per token before URL-safe encoding (32 bytes = 256 bits).
    TOKEN_BYTES: int = 32

    # ── Voting ──
    # Voter id used when the request carries no proxy headers.
    VOTER_FALLBACK_ID: str = "127.0.0.1"

    # ── Share links ──
    PUBLIC_BASE_URL: str = "http://localhost:8000"


settings = Settings()
