from fastapi import APIRouter, Depends

from app.api.session import get_tracker
from app.schemas.session import AuthorizationIn, LocationStatus
from app.services.tracker import RunTracker

router = APIRouter(prefix="/location", tags=["location"])


def location_status(tracker: RunTracker) -> LocationStatus:
    feed = tracker.feed
    last = feed.last_known
    return LocationStatus(
        authorization=feed.authorization_status,
        is_tracking=feed.is_tracking,
        updating=tracker.provider.updating,
        points=len(feed.positions),
        last_latitude=last.latitude if last else None,
        last_longitude=last.longitude if last else None,
    )


@router.get("", response_model=LocationStatus)
async def get_location(tracker: RunTracker = Depends(get_tracker)):
    return location_status(tracker)


@router.post("/permission", response_model=LocationStatus)
async def request_permission(tracker: RunTracker = Depends(get_tracker)):
    tracker.feed.request_permission()
    return location_status(tracker)


@router.post("/authorization", response_model=LocationStatus)
async def set_authorization(payload: AuthorizationIn, tracker: RunTracker = Depends(get_tracker)):
    """Report the client's OS-level location permission."""
    tracker.provider.set_authorization(payload.status)
    return location_status(tracker)


@router.post("/updates/start", response_model=LocationStatus)
async def start_updates(tracker: RunTracker = Depends(get_tracker)):
    tracker.feed.start_location_updates()
    return location_status(tracker)


@router.post("/updates/stop", response_model=LocationStatus)
async def stop_updates(tracker: RunTracker = Depends(get_tracker)):
    tracker.feed.stop_location_updates()
    return location_status(tracker)
