def format_clock(total_seconds: float) -> str:
    """
    Format a live session duration as 'M:SS', or 'H:MM:SS' past an hour.
    Example: 754.9 -> '12:34', 3723 -> '1:02:03'
    """
    total = int(total_seconds)
    hours = total // 3600
    minutes = total // 60 % 60
    seconds = total % 60
    if hours > 0:
        return f"{hours}:{minutes:02d}:{seconds:02d}"
    return f"{minutes}:{seconds:02d}"


def format_hours_minutes(total_seconds: float) -> str:
    """
    Format an aggregate duration as 'Xh Ym', dropping hours when zero.
    Example: 5400 -> '1h 30m', 300 -> '5m'
    """
    total = int(total_seconds)
    hours = total // 3600
    minutes = total // 60 % 60
    if hours > 0:
        return f"{hours}h {minutes}m"
    return f"{minutes}m"


def format_distance(distance_km: float) -> str:
    """Format kilometers with two decimals. Example: 5.0 -> '5.00'"""
    return f"{distance_km:.2f}"


def format_speed(distance_km: float, duration_seconds: float) -> str:
    """Format average speed in km/h with one decimal; '0.0' without movement."""
    if duration_seconds <= 0 or distance_km <= 0:
        return "0.0"
    return f"{distance_km / duration_seconds * 3600.0:.1f}"


def compute_pace(duration_seconds: float, distance_km: float) -> float:
    """
    Average pace in minutes per kilometer, 0 when no distance was covered.
    Example: duration=600 sec, distance=1.2 -> 8.333...
    """
    if distance_km <= 0:
        return 0.0
    return (duration_seconds / 60.0) / distance_km


def compute_speed(duration_seconds: float, distance_km: float) -> float:
    """Average speed in km/h, 0 unless both duration and distance are positive."""
    if duration_seconds <= 0 or distance_km <= 0:
        return 0.0
    return distance_km / duration_seconds * 3600.0


def to_local_datetime(dt, tz_name: str | None = None):
    """Convert a datetime from source tz (assume UTC if naive) to local or given tz.

    - If `tz_name` is 'local' or None: use system local timezone.
    - If `tz_name` is IANA tz name (e.g., 'America/New_York'): use that.
    - If `dt` has no tzinfo, assume UTC.
    """
    from datetime import timezone
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    if tz_name and tz_name != "local":
        try:
            from zoneinfo import ZoneInfo
            return dt.astimezone(ZoneInfo(tz_name))
        except (KeyError, ValueError):
            return dt.astimezone()
    return dt.astimezone()
