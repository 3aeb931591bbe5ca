"""Configuration for reminder descriptions using pydantic-settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.paths import ENV_FILE


class ReminderConfig(BaseSettings):
    """Configuration for the reminders module.

    All settings are loaded from environment variables with the REMINDER_ prefix.

    :param use_24hour_time_format: Render times as 00:00 instead of 12:00 AM.
    :param locale_code: Locale used for cron descriptions (e.g. en_US, de_DE).
    :param verbose_descriptions: Include implicit parts such as "every day".
    """

    model_config = SettingsConfigDict(
        env_prefix="REMINDER_",
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    use_24hour_time_format: bool = Field(
        default=True,
        description="Use 24-hour time in cron descriptions",
    )
    locale_code: str = Field(
        default="en_US",
        min_length=2,
        description="Locale for cron descriptions",
    )
    verbose_descriptions: bool = Field(
        default=False,
        description="Produce verbose cron descriptions",
    )


@lru_cache
def get_reminder_settings() -> ReminderConfig:
    """Get cached reminder settings.

    Settings are loaded once and cached for the lifetime of the process.

    :returns: Configured ReminderConfig instance.
    """
    return ReminderConfig()
