import asyncio
import json
import math
import threading

import pytest

from app.core.geo import haversine
from app.services.location_feed import (
    AuthorizationStatus,
    ClientLocationProvider,
    LocationFeed,
    Position,
)
from conftest import pos


def test_distance_is_zero_without_two_points(feed):
    assert feed.calculate_distance() == 0.0
    feed.start_tracking()
    feed.on_locations([pos(0.0, 0.0)])
    assert feed.calculate_distance() == 0.0


def test_distance_sums_consecutive_legs(feed):
    feed.start_tracking()
    points = [pos(0.0, 0.0), pos(0.0, 0.01, 5), pos(0.01, 0.01, 10), pos(0.0, 0.0, 15)]
    feed.on_locations(points)
    expected = sum(
        haversine(a.latitude, a.longitude, b.latitude, b.longitude)
        for a, b in zip(points, points[1:])
    ) / 1000
    assert feed.calculate_distance() == pytest.approx(expected)


def test_tracking_appends_whole_batches(feed):
    feed.start_tracking()
    feed.on_locations([pos(0.0, 0.0), pos(0.0, 0.001, 1)])
    feed.on_locations([pos(0.0, 0.002, 2)])
    assert [p.longitude for p in feed.positions] == [0.0, 0.001, 0.002]


def test_start_tracking_clears_previous_trail(feed):
    feed.start_tracking()
    feed.on_locations([pos(0.0, 0.0), pos(0.0, 0.01, 1)])
    feed.stop_tracking()
    feed.start_tracking()
    assert feed.positions == []


def test_idle_feed_keeps_only_last_known(feed):
    feed.on_locations([pos(1.0, 1.0)])
    feed.on_locations([pos(2.0, 2.0, 1), pos(3.0, 3.0, 2)])
    assert len(feed.positions) == 1
    assert feed.positions[0].latitude == 3.0
    assert feed.last_known.latitude == 3.0


def test_stop_tracking_collapses_trail_on_next_fix(feed):
    feed.start_tracking()
    feed.on_locations([pos(0.0, 0.0), pos(0.0, 0.01, 1)])
    feed.stop_tracking()
    # The trail survives until a new fix arrives
    assert len(feed.positions) == 2
    feed.on_locations([pos(5.0, 5.0, 2)])
    assert [(p.latitude, p.longitude) for p in feed.positions] == [(5.0, 5.0)]


def test_held_trail_survives_fixes_while_paused(feed):
    feed.start_tracking()
    feed.on_locations([pos(0.0, 0.0), pos(0.0, 0.01, 1)])
    feed.stop_tracking(keep_trail=True)
    feed.on_locations([pos(5.0, 5.0, 2)])
    assert len(feed.positions) == 2
    assert feed.last_known.latitude == 5.0

    feed.start_tracking(clear=False)
    feed.on_locations([pos(0.0, 0.02, 3)])
    assert [p.longitude for p in feed.positions] == [0.0, 0.01, 0.02]


def test_empty_batch_is_ignored(feed):
    feed.on_locations([])
    assert feed.positions == []
    assert feed.last_known is None


def test_tracking_without_permission_starts_once_granted():
    provider = ClientLocationProvider(auto_grant=True)
    feed = LocationFeed(provider)
    assert feed.authorization_status == AuthorizationStatus.not_determined

    feed.start_tracking()

    assert feed.authorization_status == AuthorizationStatus.granted
    assert feed.is_tracking is True
    assert provider.updating is True
    assert provider.push([pos(0.0, 0.0), pos(0.0, 0.01, 1)]) == 2
    assert feed.calculate_distance() == pytest.approx(1.112, abs=0.001)


def test_late_grant_starts_pending_tracking():
    provider = ClientLocationProvider(auto_grant=False)
    feed = LocationFeed(provider)
    feed.start_tracking()
    assert feed.is_tracking is False

    provider.set_authorization(AuthorizationStatus.granted)
    assert feed.is_tracking is True
    assert provider.updating is True


def test_stop_cancels_pending_tracking():
    provider = ClientLocationProvider(auto_grant=False)
    feed = LocationFeed(provider)
    feed.start_tracking()
    feed.stop_tracking()

    provider.set_authorization(AuthorizationStatus.granted)
    assert feed.is_tracking is False
    assert provider.updating is False


def test_denied_permission_yields_no_fixes():
    provider = ClientLocationProvider(auto_grant=False)
    feed = LocationFeed(provider)
    feed.request_permission()
    assert feed.authorization_status == AuthorizationStatus.denied

    feed.start_tracking()
    assert provider.push([pos(0.0, 0.0), pos(0.0, 0.01, 1)]) == 0
    assert feed.positions == []
    assert feed.calculate_distance() == 0.0


def test_permission_is_only_asked_once():
    provider = ClientLocationProvider(auto_grant=False)
    provider.request_authorization()
    provider.auto_grant = True
    provider.request_authorization()
    assert provider.authorization_status == AuthorizationStatus.denied


def test_provider_drops_fixes_inside_distance_filter(provider, feed):
    feed.start_tracking()
    # ~1.1 m, then ~111 m from the first fix
    accepted = provider.push([pos(0.0, 0.0), pos(0.0, 0.00001, 1), pos(0.0, 0.001, 2)])
    assert accepted == 2
    assert [p.longitude for p in feed.positions] == [0.0, 0.001]


def test_provider_ignores_pushes_when_stopped(provider, feed):
    assert provider.push([pos(0.0, 0.0)]) == 0
    assert feed.last_known is None


def test_stop_location_updates_is_noop_while_tracking(provider, feed):
    feed.start_tracking()
    feed.stop_location_updates()
    assert provider.updating is True


def test_passive_updates_continue_after_tracking_stops(provider, feed):
    feed.start_location_updates()
    feed.start_tracking()
    feed.stop_tracking()
    assert provider.updating is True
    feed.stop_location_updates()
    assert provider.updating is False


def test_tracking_alone_stops_provider_on_stop(provider, feed):
    feed.start_tracking()
    feed.stop_tracking()
    assert provider.updating is False


def test_export_trail_is_ordered_pairs(feed):
    feed.start_tracking()
    feed.on_locations([pos(55.75, 37.61), pos(55.76, 37.62, 1)])
    assert json.loads(feed.export_trail()) == [[55.75, 37.61], [55.76, 37.62]]


def test_export_trail_fails_quietly(feed):
    feed.start_tracking()
    feed.on_locations([Position(math.nan, 0.0)])
    assert feed.export_trail() is None


def test_push_threadsafe_delivers_on_loop(provider, feed):
    feed.start_tracking()
    loop = asyncio.new_event_loop()
    delivered_on = []
    original = feed.on_locations

    def record(batch):
        delivered_on.append(threading.get_ident())
        original(batch)

    provider.attach(record, feed.on_authorization_changed)
    try:
        worker = threading.Thread(target=provider.push_threadsafe, args=(loop, [pos(0.0, 0.0)]))
        worker.start()
        worker.join()
        loop.run_until_complete(asyncio.sleep(0.01))
    finally:
        loop.close()

    assert delivered_on == [threading.get_ident()]
    assert len(feed.positions) == 1
