"""Weekly run reminders.

The schedule (enabled flag, time of day, weekdays) lives in the settings
store. Installing a schedule always replaces every pending reminder; there
is no incremental add/remove.

Weekday indices run 0 = Sunday through 6 = Saturday.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Optional

from app.core.constants import (
    DEFAULT_REMINDER_DAYS,
    DEFAULT_REMINDER_HOUR,
    DEFAULT_REMINDER_MINUTE,
    REMINDER_ID_PREFIX,
    REMINDER_MESSAGES,
    REMINDER_TITLE,
)
from app.services.settings_store import SettingsStore

logger = logging.getLogger(__name__)

KEY_ENABLED = "remindersEnabled"
KEY_HOUR = "reminderHour"
KEY_MINUTE = "reminderMinute"
KEY_DAYS = "reminderDays"


@dataclass
class ReminderSchedule:
    enabled: bool = False
    hour: int = DEFAULT_REMINDER_HOUR
    minute: int = DEFAULT_REMINDER_MINUTE
    days: list[int] = field(default_factory=lambda: list(DEFAULT_REMINDER_DAYS))


def load_schedule(store: SettingsStore) -> ReminderSchedule:
    days = store.get(KEY_DAYS)
    if not isinstance(days, list) or not all(isinstance(d, int) and 0 <= d <= 6 for d in days):
        days = list(DEFAULT_REMINDER_DAYS)
    return ReminderSchedule(
        enabled=bool(store.get(KEY_ENABLED, False)),
        hour=int(store.get(KEY_HOUR, DEFAULT_REMINDER_HOUR)),
        minute=int(store.get(KEY_MINUTE, DEFAULT_REMINDER_MINUTE)),
        days=sorted(set(days)),
    )


def save_schedule(store: SettingsStore, schedule: ReminderSchedule) -> None:
    store.update({
        KEY_ENABLED: schedule.enabled,
        KEY_HOUR: schedule.hour,
        KEY_MINUTE: schedule.minute,
        KEY_DAYS: sorted(set(schedule.days)),
    })


@dataclass(frozen=True)
class NotificationRequest:
    identifier: str
    title: str
    body: str
    weekday: int  # 0 = Sunday
    hour: int
    minute: int
    repeats: bool = True

    def next_fire(self, now: datetime) -> datetime:
        """Next time this weekly trigger matches, strictly after `now`."""
        # datetime.weekday() counts from Monday = 0
        target = (self.weekday - 1) % 7
        candidate = now.replace(hour=self.hour, minute=self.minute, second=0, microsecond=0)
        candidate += timedelta(days=(target - now.weekday()) % 7)
        if candidate <= now:
            candidate += timedelta(days=7)
        return candidate


class LocalNotificationCenter:
    """In-process stand-in for the platform's local notification scheduler."""

    def __init__(self, grant: bool = True):
        self._grant = grant
        self.authorized: Optional[bool] = None
        self._pending: dict[str, NotificationRequest] = {}

    def request_authorization(self) -> bool:
        if self.authorized is None:
            self.authorized = self._grant
        if not self.authorized:
            logger.warning("Notification permission was not granted")
        return self.authorized

    def add(self, request: NotificationRequest) -> None:
        self._pending[request.identifier] = request

    def remove_all_pending(self) -> None:
        self._pending.clear()

    def pending(self) -> list[NotificationRequest]:
        return sorted(self._pending.values(), key=lambda r: r.weekday)


class ReminderService:
    def __init__(self, center: LocalNotificationCenter):
        self.center = center

    def apply(self, schedule: ReminderSchedule) -> list[NotificationRequest]:
        """Install `schedule`, asking for permission first when it's enabled."""
        if schedule.enabled:
            self.center.request_authorization()
        return self.reschedule(schedule)

    def reschedule(self, schedule: ReminderSchedule) -> list[NotificationRequest]:
        self.center.remove_all_pending()
        if not schedule.enabled or not schedule.days:
            logger.info("Reminders cleared")
            return []

        requests = []
        for index, day in enumerate(sorted(set(schedule.days))):
            request = NotificationRequest(
                identifier=f"{REMINDER_ID_PREFIX}{day}",
                title=REMINDER_TITLE,
                # Each day gets a different message, cycling through the list
                body=REMINDER_MESSAGES[index % len(REMINDER_MESSAGES)],
                weekday=day,
                hour=schedule.hour,
                minute=schedule.minute,
            )
            self.center.add(request)
            requests.append(request)
        logger.info(
            "Scheduled %d reminders at %02d:%02d", len(requests), schedule.hour, schedule.minute
        )
        return requests
