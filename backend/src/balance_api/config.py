from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Pydantic Settings reads env vars matching field names (case-insensitive),
    so ``PORT=8080`` sets ``port``. In development it also reads a .env file.
    In the cluster the Deployment manifest sets them directly.
    """

    # Listener
    host: str = "0.0.0.0"
    port: int = Field(default=10000, ge=1, le=65535)

    # The gateway sits in front of the service and rewrites Host / X-Forwarded-*.
    # Comma-separated list of trusted proxy addresses, "*" trusts everyone.
    forwarded_allow_ips: str = "*"

    # Logging
    log_level: str = "INFO"
    log_json: bool = True  # False switches to colored console output for local runs

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )
