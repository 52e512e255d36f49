from pydantic_settings import BaseSettings
from pydantic import field_validator


class Settings(BaseSettings):
    database_url: str = "sqlite:///./runner.db"
    # Timezone for calendar-based views (daily stats, streaks, monthly goal).
    # Examples: "America/New_York", "Europe/London", or "local" to use system tz.
    timezone: str = "local"
    log_level: str = "INFO"

    # Live session tuning
    tick_interval_s: float = 1.0
    distance_filter_m: float = 10.0

    # The client-fed location provider has no OS prompt to show; a permission
    # request from the not-determined state resolves to this outcome.
    location_auto_grant: bool = True

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, v):
        if v in ("", None):
            return "INFO"
        return str(v).upper()

    class Config:
        env_file = ".env"


settings = Settings()
