import logging
from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.db import Base
from app.models.run import Run  # noqa: F401
from app.services.run_session import CompletedRun
from app.services.run_store import SqlRunStore


def make_session_factory(create_tables=True):
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    if create_tables:
        Base.metadata.create_all(bind=engine)
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def completed(start, distance=1.0, duration=600.0, coords="[[0.0,0.0],[0.0,0.01]]"):
    return CompletedRun(
        timestamp=start,
        distance_km=distance,
        duration_s=duration,
        average_pace=(duration / 60) / distance if distance else 0.0,
        calories=distance * 60,
        coordinates=coords,
    )


def test_save_and_list_newest_first():
    store = SqlRunStore(make_session_factory())
    t0 = datetime(2026, 1, 1, 7, 0, tzinfo=timezone.utc)
    ids = [
        store.save(completed(t0 + timedelta(days=d), distance=1.0 + d))
        for d in (0, 2, 1)
    ]
    assert all(isinstance(i, int) for i in ids)

    runs = store.list_runs()
    assert [r.distance_km for r in runs] == [3.0, 2.0, 1.0]
    assert runs[0].coordinates == "[[0.0,0.0],[0.0,0.01]]"
    assert runs[0].calories == pytest.approx(180.0)


def test_save_failure_is_logged_not_raised(caplog):
    store = SqlRunStore(make_session_factory(create_tables=False))
    with caplog.at_level(logging.ERROR, logger="app.services.run_store"):
        result = store.save(completed(datetime(2026, 1, 1, tzinfo=timezone.utc)))
    assert result is None
    assert "Error saving run" in caplog.text


def test_session_state_survives_failed_save(feed, scheduler, clock):
    from app.services.run_session import RunSession, SessionState

    store = SqlRunStore(make_session_factory(create_tables=False))
    session = RunSession(feed, store=store, scheduler=scheduler, clock=clock)
    session.start()
    clock.advance(30)
    scheduler.fire()
    run = session.stop()

    assert session.state == SessionState.stopped
    assert run.duration_s == 30
    assert session.completed_run is run
