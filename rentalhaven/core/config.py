"""Application configuration settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
    )

    PROJECT_NAME: str = "Rental Haven"
    VERSION: str = "0.1.0"
    DEBUG: bool = True
    HOST: str = "0.0.0.0"
    PORT: int = 8080
    LOG_LEVEL: str = "INFO"

    DATABASE_URL: str = "sqlite:///./rentalhaven.db"

    # Authentication
    # Not a real credential: every successful register/login returns this string.
    PLACEHOLDER_TOKEN: str = "dummy-token"
    BCRYPT_ROUNDS: int = 12

    # Local file storage for uploads
    UPLOAD_DIR: str = "uploads"

    # Development posture: any origin, credentials allowed
    CORS_ALLOW_ORIGIN_REGEX: str = ".*"

    # Fixes the rating/review draws of the seeding endpoint when set
    SEED_RANDOM_SEED: int | None = None


settings = Settings()
