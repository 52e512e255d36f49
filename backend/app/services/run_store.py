import logging
from typing import Callable, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.models.run import Run
from app.services.run_session import CompletedRun

logger = logging.getLogger(__name__)


class SqlRunStore:
    """Persists completed runs through SQLAlchemy sessions.

    A failed write is logged and reported as None; callers never see the
    database error and keep their in-memory state.
    """

    def __init__(self, session_factory: Callable[[], Session]):
        self.session_factory = session_factory

    def save(self, completed: CompletedRun) -> Optional[int]:
        db = self.session_factory()
        try:
            run = Run(
                timestamp=completed.timestamp,
                distance_km=completed.distance_km,
                duration_s=completed.duration_s,
                average_pace=completed.average_pace,
                calories=completed.calories,
                coordinates=completed.coordinates,
            )
            db.add(run)
            db.commit()
            db.refresh(run)
            logger.info(
                "Run saved successfully: id=%s distance=%.3f duration=%.1f",
                run.id, completed.distance_km, completed.duration_s,
            )
            return run.id
        except SQLAlchemyError:
            db.rollback()
            logger.exception("Error saving run")
            return None
        finally:
            db.close()

    def list_runs(self) -> list[Run]:
        db = self.session_factory()
        try:
            return list_runs(db)
        finally:
            db.close()


def list_runs(db: Session, limit: Optional[int] = None) -> list[Run]:
    """All stored runs, most recent first."""
    query = db.query(Run).order_by(Run.timestamp.desc(), Run.id.desc())
    if limit is not None:
        query = query.limit(limit)
    return query.all()
