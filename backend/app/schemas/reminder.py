from datetime import datetime

from pydantic import BaseModel, Field, field_validator


class ReminderSettings(BaseModel):
    enabled: bool = False
    hour: int = Field(8, ge=0, le=23)
    minute: int = Field(0, ge=0, le=59)
    # 0 = Sunday ... 6 = Saturday
    days: list[int] = [1, 3, 5]

    @field_validator("days")
    @classmethod
    def _check_days(cls, v):
        if any(d < 0 or d > 6 for d in v):
            raise ValueError("days must be weekday indices 0-6 (0 = Sunday)")
        return sorted(set(v))


class ScheduledReminder(BaseModel):
    identifier: str
    title: str
    body: str
    weekday: int
    hour: int
    minute: int
    next_fire: datetime
