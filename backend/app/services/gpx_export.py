import gpxpy
import gpxpy.gpx

from app.core.trail import decode_trail


def trail_to_gpx(coordinates, name: str | None = None, start_time=None) -> str:
    """Render a stored trail as a GPX document with one track and segment.

    Only the run start time is known, so points carry no timestamps.
    """
    gpx = gpxpy.gpx.GPX()
    gpx.creator = "Runner"
    gpx.time = start_time

    track = gpxpy.gpx.GPXTrack(name=name)
    track.type = "running"
    gpx.tracks.append(track)
    segment = gpxpy.gpx.GPXTrackSegment()
    track.segments.append(segment)

    for lat, lon in decode_trail(coordinates):
        segment.points.append(gpxpy.gpx.GPXTrackPoint(latitude=lat, longitude=lon))
    return gpx.to_xml()
