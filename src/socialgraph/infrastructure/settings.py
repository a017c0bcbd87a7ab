"""Gateway settings using pydantic-settings.

Settings are loaded from environment variables (or a ``.env`` file) with
defaults that leave every optional feature switched off.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GatewaySettings(BaseSettings):
    """Query gateway settings.

    Environment variables:
        SOCIALGRAPH_PROFILE_URL_TEMPLATE: Profile URL with an ``${ID}`` placeholder
        SOCIALGRAPH_INFO_URL_TEMPLATE: Info URL with an ``${ID}`` placeholder
        SOCIALGRAPH_EVENTS_ENABLED: Raise domain events after mutations (default: false)
        SOCIALGRAPH_EVENTS_LOGGING: Log every raised event (default: false)
        SOCIALGRAPH_REMOTE_TIMEOUT_SECONDS: Timeout handed to the query channel (default: 30)
    """

    model_config = SettingsConfigDict(
        env_prefix="SOCIALGRAPH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    profile_url_template: str | None = Field(
        default=None,
        description="Template for synthesized profile URLs",
    )
    info_url_template: str | None = Field(
        default=None,
        description="Template for synthesized info URLs",
    )
    events_enabled: bool = Field(
        default=False,
        description="Raise domain events after successful mutations",
    )
    events_logging: bool = Field(
        default=False,
        description="Register a listener that logs every event",
    )
    remote_timeout_seconds: float = Field(
        default=30.0,
        description="Remote call timeout, applied by the channel",
        gt=0,
    )


@lru_cache
def get_settings() -> GatewaySettings:
    """Get cached gateway settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return GatewaySettings()
