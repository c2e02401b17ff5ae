"""Settings for routedoc via Pydantic BaseSettings.

Values are read from environment variables with the ROUTEDOC_ prefix,
falling back to the defaults defined here. Example: ROUTEDOC_STRICT_METHODS=1
makes document generation fail on routes whose method Swagger 2.0 cannot hold.
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Document
    content_type: str = "application/json; charset=utf-8"
    default_scheme: str = "https"  # used when the request has no X-Forwarded-Proto
    strict_methods: bool = False  # raise instead of omitting unsupported methods

    # CORS headers on the documentation endpoint
    cors_allow_headers: list[str] = ["Content-Type"]
    cors_allow_methods: list[str] = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
    cors_max_age: int = 60 * 60 * 24 * 30

    # CLI
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        # logging only accepts upper-case level names
        return value.upper()

    model_config = SettingsConfigDict(
        env_prefix="ROUTEDOC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
