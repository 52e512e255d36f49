from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from sqlalchemy.orm import Session

from app.api.session import get_tracker
from app.core.config import settings
from app.core.time_utils import format_clock, format_distance, format_hours_minutes
from app.core.trail import decode_trail, trail_region
from app.db import get_db
from app.models.run import Run
from app.schemas.run import (
    AchievementRead,
    DayStatRead,
    HomeSummary,
    RunDetail,
    RunRead,
    RunStats,
)
from app.services.achievements import compute_achievements
from app.services.gpx_export import trail_to_gpx
from app.services.run_store import list_runs
from app.services.stats import last_7_days, motivational_message, overall_stats, run_progress
from app.services.tracker import RunTracker

router = APIRouter(prefix="/runs", tags=["runs"])


def _run_fields(run: Run) -> dict:
    return {
        "id": run.id,
        "timestamp": run.timestamp,
        "distance_km": run.distance_km,
        "duration_s": run.duration_s,
        "average_pace": run.average_pace,
        "calories": run.calories,
        "distance": format_distance(run.distance_km),
        "duration": format_clock(run.duration_s),
    }


def _get_run_or_404(db: Session, run_id: int) -> Run:
    run = db.query(Run).filter(Run.id == run_id).first()
    if not run:
        raise HTTPException(status_code=404, detail="Run not found")
    return run


@router.get("/", response_model=list[RunRead])
def list_history(
    limit: Optional[int] = Query(None, ge=1),
    db: Session = Depends(get_db),
):
    """Run history, most recent first."""
    return [RunRead(**_run_fields(run)) for run in list_runs(db, limit=limit)]


@router.get("/stats", response_model=RunStats)
def get_run_stats(db: Session = Depends(get_db)):
    stats = overall_stats(list_runs(db))
    return RunStats(
        total_runs=stats.total_runs,
        total_distance_km=stats.total_distance_km,
        total_duration_s=stats.total_duration_s,
        total_time=format_hours_minutes(stats.total_duration_s),
        average_pace=stats.average_pace,
    )


@router.get("/daily", response_model=list[DayStatRead])
def get_daily_stats(db: Session = Depends(get_db)):
    """Totals for today and the previous six days, newest first."""
    return last_7_days(list_runs(db), settings.timezone)


@router.get("/achievements", response_model=list[AchievementRead])
def get_achievements(db: Session = Depends(get_db)):
    return compute_achievements(list_runs(db), settings.timezone)


def _home_coordinates(tracker: RunTracker, runs) -> list[list[float]]:
    feed = tracker.feed
    if tracker.is_running:
        return [[p.latitude, p.longitude] for p in feed.positions]
    if runs:
        coords = decode_trail(runs[0].coordinates)
        if coords:
            return coords
    if feed.last_known is not None:
        return [[feed.last_known.latitude, feed.last_known.longitude]]
    return []


@router.get("/home", response_model=HomeSummary)
def get_home_summary(
    db: Session = Depends(get_db),
    tracker: RunTracker = Depends(get_tracker),
):
    runs = list_runs(db)
    last_distance = runs[0].distance_km if runs else 0.0
    # The live run wins over the last stored one while it's in progress
    if tracker.is_running:
        current = tracker.session.distance
    else:
        current = last_distance
    return HomeSummary(
        is_running=tracker.is_running,
        current_distance_km=current,
        last_run_distance_km=last_distance,
        run_progress=run_progress(current),
        message=motivational_message(len(runs), running=tracker.is_running),
        coordinates=_home_coordinates(tracker, runs),
    )


@router.get("/{run_id}", response_model=RunDetail)
def get_run(run_id: int, db: Session = Depends(get_db)):
    run = _get_run_or_404(db, run_id)
    coords = decode_trail(run.coordinates)
    return RunDetail(**_run_fields(run), coordinates=coords, region=trail_region(coords))


@router.get("/{run_id}/gpx")
def export_run_gpx(run_id: int, db: Session = Depends(get_db)):
    run = _get_run_or_404(db, run_id)
    xml = trail_to_gpx(run.coordinates, name=f"Run {run.id}", start_time=run.timestamp)
    return Response(
        content=xml,
        media_type="application/gpx+xml",
        headers={"Content-Disposition": f'attachment; filename="run-{run.id}.gpx"'},
    )


@router.delete("/{run_id}")
def delete_run(run_id: int, db: Session = Depends(get_db)):
    db_run = _get_run_or_404(db, run_id)
    db.delete(db_run)
    db.commit()
    return {"message": "Run deleted"}
