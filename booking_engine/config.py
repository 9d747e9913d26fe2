from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_prefix="BOOKING_", extra="ignore")

    database_url: str = "sqlite+aiosqlite:///./booking_engine.db"
    use_in_memory: bool = True
    sql_echo: bool = False

    # IANA zone used for "today" and the same-day cutoff; host time when unset
    local_timezone: str | None = None
    # ISO 4217 code shown in prices
    currency_code: str = Field(default="EUR", pattern=r"^[A-Z]{3}$")

    notification_fail_max: int = 5
    notification_reset_timeout: int = 60

    log_level: str = "INFO"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
