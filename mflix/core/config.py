"""Data layer configuration from environment."""
from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Settings loaded from env / .env."""

    app_name: str = "Mflix Data Layer"

    # Database
    mongodb_uri: str = "mongodb://localhost:27017"
    database_name: str = "sample_mflix"
    server_selection_timeout_ms: int = 5000
    operation_timeout_seconds: float | None = 10.0  # None disables the default deadline

    # Password hashing (bcrypt work factor)
    bcrypt_rounds: int = Field(12, ge=4, le=31)

    # Reporting
    top_commenters_limit: int = Field(20, gt=0)

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


def get_settings() -> Settings:
    return Settings()
