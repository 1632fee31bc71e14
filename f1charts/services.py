"""
Chart-facing operations.

Each function resolves the human-facing identifiers it needs, issues its
fetches and reshapes the records. Errors from any step propagate unchanged.
"""
from typing import Sequence

from f1charts.laps import merge_lap_times
from f1charts.models import (
    AvailableSession,
    BrakePoint,
    DRSPoint,
    GearPoint,
    Meeting,
    RPMPoint,
    ScheduleEvent,
    Session,
    SessionDriver,
    SpeedPoint,
    StintAnalysis,
    ThrottlePoint,
    parse_records,
)
from f1charts.openf1 import fetchers
from f1charts.openf1.api_client import OpenF1Client
from f1charts.resolve import resolve_meeting, resolve_session_key
from f1charts.telemetry import Metric, fetch_metric_series
from f1charts.utils.logger import logger

# An empty fragment matches every meeting, i.e. the season's first one.
FIRST_MEETING = ""


# ── Calendar & sessions ──────────────────────────────────────────────────────

async def fetch_schedule(client: OpenF1Client, year: int) -> list[ScheduleEvent]:
    """Season calendar, in upstream order."""
    meetings = parse_records(Meeting, await fetchers.fetch_meetings(client, year), "meeting")
    return [
        ScheduleEvent(
            meeting_key=m.meeting_key,
            name=m.name,
            country=m.country or "",
            date=m.date or "",
        )
        for m in meetings
    ]


async def fetch_available_sessions(
    client: OpenF1Client,
    year: int,
    event: str,
) -> list[AvailableSession]:
    """Sessions of the first meeting whose name contains `event`."""
    meeting_key = await resolve_meeting(client, year, event)
    raw = await fetchers.fetch_sessions(client, meeting_key)
    sessions = parse_records(Session, raw, "session")
    return [
        AvailableSession(name=s.name, type=s.type or "", start_time=s.date or "")
        for s in sessions
    ]


async def fetch_session_drivers(
    client: OpenF1Client,
    year: int,
    event: str,
    session: str,
) -> list[SessionDriver]:
    session_key = await resolve_session_key(client, year, event, session)
    entries = await fetchers.fetch_entry_list(client, session_key)
    return [
        SessionDriver(
            code=str(d.get("driver_number", "")),
            name=d.get("full_name") or "",
            team=d.get("team") or d.get("team_name") or "",
        )
        for d in entries
    ]


# ── Lap times & telemetry ────────────────────────────────────────────────────

async def fetch_lap_times(
    client: OpenF1Client,
    year: int,
    event: str,
    session: str,
    drivers: Sequence[str | int],
) -> list[dict]:
    """
    Lap times of several drivers merged by lap number.

    Returns:
        Rows ``{"LapNumber": n, "<driver>": seconds, ...}`` in first-sight
        order (not sorted by lap).
    """
    session_key = await resolve_session_key(client, year, event, session)
    table = await merge_lap_times(client, session_key, drivers)
    return table.to_records()


async def _telemetry(
    client: OpenF1Client,
    year: int,
    event: str,
    session: str,
    driver: str | int,
    lap: int,
    metric: Metric,
) -> list:
    session_key = await resolve_session_key(client, year, event, session)
    return await fetch_metric_series(client, session_key, driver, lap, metric)


async def fetch_telemetry_speed(
    client: OpenF1Client,
    year: int,
    event: str,
    session: str,
    driver: str | int,
    lap: int,
) -> list[SpeedPoint]:
    return await _telemetry(client, year, event, session, driver, lap, Metric.SPEED)


async def fetch_telemetry_gear(
    client: OpenF1Client,
    year: int,
    event: str,
    session: str,
    driver: str | int,
    lap: int,
) -> list[GearPoint]:
    return await _telemetry(client, year, event, session, driver, lap, Metric.GEAR)


async def fetch_telemetry_throttle(
    client: OpenF1Client,
    year: int,
    event: str,
    session: str,
    driver: str | int,
    lap: int,
) -> list[ThrottlePoint]:
    return await _telemetry(client, year, event, session, driver, lap, Metric.THROTTLE)


async def fetch_telemetry_brake(
    client: OpenF1Client,
    year: int,
    event: str,
    session: str,
    driver: str | int,
    lap: int,
) -> list[BrakePoint]:
    return await _telemetry(client, year, event, session, driver, lap, Metric.BRAKE)


async def fetch_telemetry_rpm(
    client: OpenF1Client,
    year: int,
    event: str,
    session: str,
    driver: str | int,
    lap: int,
) -> list[RPMPoint]:
    return await _telemetry(client, year, event, session, driver, lap, Metric.RPM)


async def fetch_telemetry_drs(
    client: OpenF1Client,
    year: int,
    event: str,
    session: str,
    driver: str | int,
    lap: int,
) -> list[DRSPoint]:
    return await _telemetry(client, year, event, session, driver, lap, Metric.DRS)


async def fetch_lap_positions(
    client: OpenF1Client,
    year: int,
    event: str,
    session: str,
) -> list[dict]:
    """Raw position_data records for the session."""
    session_key = await resolve_session_key(client, year, event, session)
    return await fetchers.fetch_position_data(client, session_key)


async def fetch_session_intervals(
    client: OpenF1Client,
    year: int,
    event: str,
    session: str,
) -> list[dict]:
    """Raw gap-to-leader records for the session."""
    session_key = await resolve_session_key(client, year, event, session)
    return await fetchers.fetch_intervals(client, session_key)


async def fetch_stint_analysis(
    client: OpenF1Client,
    year: int,
    event: str,
    session: str,
) -> list[StintAnalysis]:
    """
    Tyre stint analysis.

    OpenF1 offers no stint summary to build this from, so the result is
    always empty and no request is made.
    """
    logger.debug(f"Stint analysis requested for {year} {event} {session}; not available")
    return []


# ── Results & standings ──────────────────────────────────────────────────────

async def fetch_race_results(client: OpenF1Client, year: int) -> list[dict]:
    meeting_key = await resolve_meeting(client, year, FIRST_MEETING)
    return await fetchers.fetch_season_race_results(client, meeting_key)


async def fetch_specific_race_results(
    client: OpenF1Client,
    year: int,
    event: str,
    session: str,
) -> list[dict]:
    """
    Classified result of one event.

    `session` is accepted for symmetry with the other lookups; the result
    endpoint is keyed by meeting only.
    """
    meeting_key = await resolve_meeting(client, year, event)
    return await fetchers.fetch_meeting_race_results(client, year, meeting_key)


async def fetch_driver_standings(client: OpenF1Client, year: int) -> list[dict]:
    meeting_key = await resolve_meeting(client, year, FIRST_MEETING)
    return await fetchers.fetch_driver_standings(client, meeting_key)


async def fetch_team_standings(client: OpenF1Client, year: int) -> list[dict]:
    meeting_key = await resolve_meeting(client, year, FIRST_MEETING)
    return await fetchers.fetch_constructor_standings(client, meeting_key)
