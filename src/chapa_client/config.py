"""Configuration management for the Chapa client."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ChapaSettings(BaseSettings):
    """Client settings, overridable through CHAPA_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CHAPA_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    # API endpoints
    base_url: str = Field(
        default="https://api.chapa.co/v1",
        description="Chapa API base URL"
    )
    initialize_path: str = Field(
        default="/transaction/initialize",
        description="Path of the transaction initialize endpoint"
    )
    verify_path: str = Field(
        default="/transaction/verify/",
        description="Path prefix of the transaction verify endpoint"
    )

    # Owned HTTP client
    timeout_seconds: float = Field(default=10.0, description="Request timeout")

    # Credentials
    secret_key: str = Field(
        default="",
        description="Chapa secret key (only used by ChapaClient.from_settings)",
        repr=False,
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_json: bool = Field(default=True, description="Render logs as JSON")

    @property
    def initialize_url(self) -> str:
        return f"{self.base_url.rstrip('/')}{self.initialize_path}"

    @property
    def verify_url(self) -> str:
        return f"{self.base_url.rstrip('/')}{self.verify_path}"
