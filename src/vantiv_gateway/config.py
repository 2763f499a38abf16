"""Configuration management for the Vantiv gateway client."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

TEST_URL = "https://www.testlitle.com/sandbox/communicator/online"
LIVE_URL = "https://payments.litle.com/vap/communicator/online"


class VantivSettings(BaseSettings):
    """Gateway credentials and endpoint settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="VANTIV_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Credentials
    login: str = Field(default="", description="API user (<authentication><user>)")
    password: str = Field(default="", description="API password")
    merchant_id: str = Field(default="", description="Vantiv merchant id")

    # Endpoint
    url: str | None = Field(default=None, description="Explicit endpoint override")
    test: bool = Field(default=True, description="Use the sandbox endpoint")
    timeout_seconds: float = Field(default=30.0, description="HTTP request timeout")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_json: bool = Field(default=True, description="Render logs as JSON")

    @property
    def endpoint_url(self) -> str:
        """Endpoint the transport posts to."""
        if self.url and self.url.strip():
            return self.url
        return TEST_URL if self.test else LIVE_URL

    def missing_credentials(self) -> list[str]:
        """Names of required credential fields that are blank."""
        return [
            name
            for name in ("login", "password", "merchant_id")
            if not getattr(self, name).strip()
        ]


# Global settings instance
settings = VantivSettings()
