from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    """
    Application configuration settings loaded from environment variables
    or a `.env` file. Provides strongly typed access to environment values.
    """

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", env_parse_none_str="null")

    SECRET_KEY: str = "change-this-secret"
    """Secret key used for signing session tokens."""

    ALGORITHM: str = "HS256"
    """Cryptographic algorithm used for JWT signing (e.g., `HS256`)."""

    ACCESS_TOKEN_EXPIRE_MINUTES: int | None = 60 * 24 * 7
    """Duration (in minutes) before access tokens expire. Set to `null` to issue tokens without an `exp` claim."""

    DB_URL: str = "sqlite:///./diary.db"
    """SQLAlchemy database URL (e.g., `postgresql+psycopg://...`, `sqlite:///...`)."""

    BCRYPT_ROUNDS: int = 12
    """bcrypt cost factor used when hashing new passwords."""

    VIDEO_DIR: str = "videos"
    """Directory where generated video artifacts are written."""

    SUMMARIZER_BACKEND: str = "stub"
    """Summarizer implementation: `stub` (echo) or `openai`."""

    SUMMARY_MAX_LENGTH: int = 100
    """Maximum length (in characters) of a generated summary."""

    API_KEY: str | None = None
    """OpenAI API key, required when `SUMMARIZER_BACKEND` is `openai`."""

    OPEN_AI_MODEL: str = "gpt-4o-mini"
    """OpenAI model name used by the summarizer."""

    FRONTEND_URL: str | None = None
    """Base URL of the frontend client application, enables CORS when set."""

    HOST: str = "0.0.0.0"
    """Interface the HTTP server binds to."""

    PORT: int = 3000
    """Port the HTTP server listens on."""

    LOG_LEVEL: str = "INFO"
    """Root logging level."""


# Singleton instance of Settings, ready to be imported across the app
settings = Settings()
"""Defines a Settings object that contains the contents of the .env file"""
