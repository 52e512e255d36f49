from datetime import datetime

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.time_utils import to_local_datetime
from app.db import get_db
from app.schemas.reminder import ReminderSettings, ScheduledReminder
from app.services.reminders import ReminderSchedule, ReminderService, load_schedule, save_schedule
from app.services.settings_store import SettingsStore

router = APIRouter(prefix="/reminders", tags=["reminders"])


def get_reminder_service(request: Request) -> ReminderService:
    return request.app.state.reminders


@router.get("", response_model=ReminderSettings)
def get_reminders(db: Session = Depends(get_db)):
    schedule = load_schedule(SettingsStore(db))
    return ReminderSettings(**vars(schedule))


@router.put("", response_model=ReminderSettings)
def update_reminders(
    payload: ReminderSettings,
    db: Session = Depends(get_db),
    service: ReminderService = Depends(get_reminder_service),
):
    """Save the weekly schedule and replace every pending reminder with it."""
    schedule = ReminderSchedule(
        enabled=payload.enabled,
        hour=payload.hour,
        minute=payload.minute,
        days=payload.days,
    )
    save_schedule(SettingsStore(db), schedule)
    service.apply(schedule)
    return ReminderSettings(**vars(schedule))


@router.get("/scheduled", response_model=list[ScheduledReminder])
def list_scheduled(service: ReminderService = Depends(get_reminder_service)):
    now = to_local_datetime(datetime.now().astimezone(), settings.timezone)
    return [
        ScheduledReminder(
            identifier=r.identifier,
            title=r.title,
            body=r.body,
            weekday=r.weekday,
            hour=r.hour,
            minute=r.minute,
            next_fire=r.next_fire(now),
        )
        for r in service.center.pending()
    ]
