from __future__ import annotations

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings, read from ``HOLIDAYTABLE_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="HOLIDAYTABLE_",
        extra="ignore",
    )

    # Decrees are issued against Beijing local time; aware datetimes are
    # converted to this zone before their calendar day is taken.
    timezone: str = "Asia/Shanghai"

    # Abort table construction when a date is both a holiday and a workday.
    strict: bool = True

    @field_validator("timezone")
    @classmethod
    def _known_timezone(cls, value: str) -> str:
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"Unknown timezone {value!r}.") from exc
        return value

    @property
    def tzinfo(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)


settings = Settings()
