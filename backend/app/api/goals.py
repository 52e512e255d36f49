from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.constants import DEFAULT_MONTHLY_GOAL_KM
from app.db import get_db
from app.schemas.goal import MonthlyGoalRead, MonthlyGoalUpsert
from app.services.run_store import list_runs
from app.services.settings_store import SettingsStore
from app.services.stats import month_distance


router = APIRouter(prefix="/goals", tags=["goals"])

KEY_MONTHLY_GOAL = "monthlyGoal"


def _goal_read(db: Session, goal_km: float) -> MonthlyGoalRead:
    done = month_distance(list_runs(db), settings.timezone)
    return MonthlyGoalRead(
        goal_km=goal_km,
        month_distance_km=done,
        progress=min(done / goal_km, 1.0) if goal_km > 0 else 0.0,
    )


@router.get("/monthly", response_model=MonthlyGoalRead)
def get_monthly_goal(db: Session = Depends(get_db)):
    goal_km = float(SettingsStore(db).get(KEY_MONTHLY_GOAL, DEFAULT_MONTHLY_GOAL_KM))
    return _goal_read(db, goal_km)


@router.put("/monthly", response_model=MonthlyGoalRead)
def upsert_monthly_goal(payload: MonthlyGoalUpsert, db: Session = Depends(get_db)):
    if payload.goal_km <= 0:
        raise HTTPException(status_code=422, detail="goal_km must be > 0")
    SettingsStore(db).update({KEY_MONTHLY_GOAL: payload.goal_km})
    return _goal_read(db, payload.goal_km)
