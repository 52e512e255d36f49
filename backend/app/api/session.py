from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException, Request

from app.core.time_utils import format_clock, format_distance, format_speed
from app.schemas.session import (
    CompletedRunRead,
    LocationBatch,
    LocationBatchResult,
    SessionRead,
)
from app.services.location_feed import Position
from app.services.run_session import RunSession, SessionState, SessionStateError
from app.services.tracker import RunTracker

router = APIRouter(prefix="/session", tags=["session"])


def get_tracker(request: Request) -> RunTracker:
    return request.app.state.tracker


def session_read(session: RunSession | None) -> SessionRead:
    if session is None:
        return SessionRead(state=SessionState.idle)
    snap = session.snapshot()
    completed = (
        CompletedRunRead.model_validate(session.completed_run)
        if session.completed_run is not None
        else None
    )
    return SessionRead(
        state=snap.state,
        started_at=snap.started_at,
        duration_s=snap.duration_s,
        distance_km=snap.distance_km,
        paused_s=snap.paused_s,
        pace_min_per_km=snap.pace_min_per_km,
        speed_km_per_h=snap.speed_km_per_h,
        calories=snap.calories,
        duration=format_clock(snap.duration_s),
        distance=format_distance(snap.distance_km),
        speed=format_speed(snap.distance_km, snap.duration_s),
        completed=completed,
    )


# Commands are async so they run on the event loop that drives the tick.

@router.get("", response_model=SessionRead)
async def get_session(tracker: RunTracker = Depends(get_tracker)):
    return session_read(tracker.session)


@router.post("/start", response_model=SessionRead)
async def start_run(tracker: RunTracker = Depends(get_tracker)):
    try:
        session = tracker.start()
    except SessionStateError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return session_read(session)


@router.post("/pause", response_model=SessionRead)
async def pause_run(tracker: RunTracker = Depends(get_tracker)):
    try:
        session = tracker.pause()
    except SessionStateError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return session_read(session)


@router.post("/resume", response_model=SessionRead)
async def resume_run(tracker: RunTracker = Depends(get_tracker)):
    try:
        session = tracker.resume()
    except SessionStateError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return session_read(session)


@router.post("/stop", response_model=SessionRead)
async def stop_run(tracker: RunTracker = Depends(get_tracker)):
    try:
        session = tracker.stop()
    except SessionStateError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return session_read(session)


@router.post("/locations", response_model=LocationBatchResult)
async def push_locations(payload: LocationBatch, tracker: RunTracker = Depends(get_tracker)):
    """Deliver a batch of GPS fixes from the client, oldest first."""
    now = datetime.now(timezone.utc)
    batch = [
        Position(latitude=p.latitude, longitude=p.longitude, timestamp=p.timestamp or now)
        for p in payload.positions
    ]
    accepted = tracker.provider.push(batch)
    return LocationBatchResult(
        accepted=accepted,
        points=len(tracker.feed.positions),
        distance_km=tracker.feed.calculate_distance(),
    )
