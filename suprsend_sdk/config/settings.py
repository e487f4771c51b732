import platform

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from suprsend_sdk.version import __version__

DEFAULT_BASE_URL = "https://hub.suprsend.com/"


class Settings(BaseSettings):
    """SDK configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    log_level: str = "INFO"

    workspace_key: str = ""
    workspace_secret: str = ""
    base_url: str = DEFAULT_BASE_URL

    request_timeout_seconds: int = 30

    @field_validator("base_url")
    @classmethod
    def normalize_base_url(cls, value: str) -> str:
        value = value.strip() or DEFAULT_BASE_URL
        if not value.endswith("/"):
            value += "/"
        return value

    @property
    def user_agent(self) -> str:
        return f"suprsend_sdk/{__version__};python/{platform.python_version()}"
