"""
Endpoint-specific fetchers for the OpenF1 API.

Each fetcher issues exactly one request and returns the raw record dicts.
"""
from f1charts.openf1.api_client import OpenF1Client
from f1charts.utils.logger import logger


async def fetch_meetings(client: OpenF1Client, year: int) -> list[dict]:
    """
    Fetch all meetings (race weekends) of a season.

    Args:
        client: OpenF1Client instance.
        year: F1 season year (e.g. 2024).

    Returns:
        List of meeting metadata dicts, in upstream order.
    """
    logger.debug(f"Fetching meetings for {year}...")
    return await client.get("/meetings", params={"year": year})


async def fetch_sessions(client: OpenF1Client, meeting_key: int) -> list[dict]:
    """
    Fetch all sessions of one meeting.

    Args:
        client: OpenF1Client instance.
        meeting_key: Unique meeting identifier.

    Returns:
        List of session metadata dicts, in upstream order.
    """
    logger.debug(f"Fetching sessions for meeting {meeting_key}...")
    return await client.get("/sessions", params={"meeting_key": meeting_key})


async def fetch_entry_list(client: OpenF1Client, session_key: int) -> list[dict]:
    """Fetch the entry list (drivers taking part) of a session."""
    logger.debug(f"Fetching entry_list for session {session_key}...")
    return await client.get("/entry_list", params={"session_key": session_key})


async def fetch_drivers(client: OpenF1Client, session_key: int) -> list[dict]:
    """Fetch driver metadata for a session."""
    logger.debug(f"Fetching drivers for session {session_key}...")
    return await client.get("/drivers", params={"session_key": session_key})


async def fetch_laps(
    client: OpenF1Client,
    session_key: int,
    driver_number: str | int,
) -> list[dict]:
    """
    Fetch every lap of one driver in a session.

    Args:
        client: OpenF1Client instance.
        session_key: Unique session identifier.
        driver_number: Driver identifier within the session.

    Returns:
        List of lap records.
    """
    logger.debug(f"Fetching laps for driver {driver_number} in session {session_key}...")
    return await client.get(
        "/laps", params={"session_key": session_key, "driver_number": driver_number}
    )


async def fetch_car_data(
    client: OpenF1Client,
    session_key: int,
    driver_number: str | int,
    lap_number: int,
) -> list[dict]:
    """
    Fetch raw car telemetry samples for one driver and lap.

    Returns:
        List of car_data samples, in upstream (time) order.
    """
    logger.debug(
        f"Fetching car_data for driver {driver_number}, lap {lap_number}, session {session_key}..."
    )
    return await client.get(
        "/car_data",
        params={
            "session_key": session_key,
            "driver_number": driver_number,
            "lap_number": lap_number,
        },
    )


async def fetch_position_data(client: OpenF1Client, session_key: int) -> list[dict]:
    """Fetch driver position data for a session."""
    logger.debug(f"Fetching position_data for session {session_key}...")
    return await client.get("/position_data", params={"session_key": session_key})


async def fetch_intervals(client: OpenF1Client, session_key: int) -> list[dict]:
    """Fetch interval (gap to leader) data for a session."""
    logger.debug(f"Fetching intervals for session {session_key}...")
    return await client.get("/intervals", params={"session_key": session_key})


async def fetch_season_race_results(client: OpenF1Client, meeting_key: int) -> list[dict]:
    logger.debug(f"Fetching race results for meeting {meeting_key}...")
    return await client.get("/results/races", params={"meeting_key": meeting_key})


async def fetch_meeting_race_results(
    client: OpenF1Client,
    year: int,
    meeting_key: int,
) -> list[dict]:
    logger.debug(f"Fetching {year} race result for meeting {meeting_key}...")
    return await client.get(f"/results/race/{year}", params={"meeting_key": meeting_key})


async def fetch_driver_standings(client: OpenF1Client, meeting_key: int) -> list[dict]:
    logger.debug(f"Fetching driver standings for meeting {meeting_key}...")
    return await client.get("/standings/drivers", params={"meeting_key": meeting_key})


async def fetch_constructor_standings(client: OpenF1Client, meeting_key: int) -> list[dict]:
    logger.debug(f"Fetching constructor standings for meeting {meeting_key}...")
    return await client.get("/standings/constructors", params={"meeting_key": meeting_key})
