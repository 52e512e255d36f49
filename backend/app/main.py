import logging
import sys

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.api.session import router as session_router
from app.api.location import router as location_router
from app.api.runs import router as runs_router
from app.api.goals import router as goals_router
from app.api.reminders import router as reminders_router
from app.api.articles import router as articles_router
from app.db import Base, engine, SessionLocal
from app.models.run import Run  # noqa: F401  (import ensures table is registered)
from app.models.app_setting import AppSetting  # noqa: F401
from app.core.config import settings
from app.services.location_feed import ClientLocationProvider
from app.services.reminders import LocalNotificationCenter, ReminderService, load_schedule
from app.services.run_store import SqlRunStore
from app.services.settings_store import SettingsStore
from app.services.tracker import RunTracker


logging.basicConfig(
    level=getattr(logging, settings.log_level, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)

app = FastAPI()

# Allow CORS for local frontend
origins = ["*"]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Create DB tables (runs, settings) on startup
Base.metadata.create_all(bind=engine)

app.state.tracker = RunTracker(
    ClientLocationProvider(auto_grant=settings.location_auto_grant),
    store=SqlRunStore(SessionLocal),
    tick_interval_s=settings.tick_interval_s,
    distance_filter_m=settings.distance_filter_m,
)


def _restore_reminders() -> ReminderService:
    service = ReminderService(LocalNotificationCenter())
    db = SessionLocal()
    try:
        service.apply(load_schedule(SettingsStore(db)))
    finally:
        db.close()
    return service


app.state.reminders = _restore_reminders()

app.include_router(session_router)
app.include_router(location_router)
app.include_router(runs_router)
app.include_router(goals_router)
app.include_router(reminders_router)
app.include_router(articles_router)


@app.get("/")
def root():
    return {"message": "Runner backend is running"}
