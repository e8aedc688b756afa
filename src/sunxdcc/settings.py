from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from .deliver.client import BASE_URL, DEFAULT_USER_AGENT


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables.

    Environment variables (all optional):
    - SUNXDCC_BASE_URL: search endpoint (default: https://sunxdcc.com/deliver.php)
    - SUNXDCC_REQUEST_TIMEOUT: request timeout in seconds (default: 15.0)
    - SUNXDCC_USER_AGENT: HTTP user agent (default: "sunxdcc-py/0.1")
    """

    model_config = SettingsConfigDict(
        env_prefix="SUNXDCC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    base_url: str = BASE_URL
    request_timeout: float = 15.0
    user_agent: str = DEFAULT_USER_AGENT


def get_settings(**overrides: Optional[object]) -> Settings:
    values = {k: v for k, v in overrides.items() if v is not None}
    return Settings(**values)  # type: ignore[arg-type]
