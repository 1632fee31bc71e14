"""
Key resolution: human-facing names → OpenF1 numeric keys.

A fragment matches a record when the record's name contains it,
case-insensitively. When several records match, the first one in upstream
order wins; `rank_matches` exposes the full candidate list so callers can
detect ambiguity. Nothing is cached: each resolution issues one request.
"""
from dataclasses import dataclass, field
from typing import Callable, Generic, Optional, Sequence, TypeVar

from f1charts.exceptions import ResolutionNotFoundError
from f1charts.models import Meeting, Session, parse_records
from f1charts.openf1.api_client import OpenF1Client
from f1charts.openf1.fetchers import fetch_meetings, fetch_sessions
from f1charts.utils.logger import logger

T = TypeVar("T")


@dataclass(frozen=True)
class MatchResult(Generic[T]):
    """All records matching a fragment, in upstream order, plus the chosen one."""

    fragment: str
    candidates: list[T] = field(default_factory=list)

    @property
    def chosen(self) -> Optional[T]:
        return self.candidates[0] if self.candidates else None

    @property
    def ambiguous(self) -> bool:
        return len(self.candidates) > 1


def rank_matches(
    records: Sequence[T],
    fragment: str,
    name_of: Callable[[T], str],
) -> MatchResult[T]:
    """
    Collect every record whose name contains `fragment` (case-insensitive).

    Args:
        records: Records in upstream order.
        fragment: Substring to look for. An empty fragment matches everything.
        name_of: Extracts the display name from a record.

    Returns:
        MatchResult with candidates in the order they were given.
    """
    needle = fragment.lower()
    candidates = [r for r in records if needle in (name_of(r) or "").lower()]
    return MatchResult(fragment=fragment, candidates=candidates)


async def match_meetings(client: OpenF1Client, year: int, event: str) -> MatchResult[Meeting]:
    """Fetch the season's meetings and rank them against `event`."""
    meetings = parse_records(Meeting, await fetch_meetings(client, year), "meeting")
    return rank_matches(meetings, event, lambda m: m.name)


async def match_sessions(
    client: OpenF1Client,
    meeting_key: int,
    session: str,
) -> MatchResult[Session]:
    """Fetch a meeting's sessions and rank them against `session`."""
    sessions = parse_records(Session, await fetch_sessions(client, meeting_key), "session")
    return rank_matches(sessions, session, lambda s: s.name)


async def resolve_meeting(client: OpenF1Client, year: int, event: str) -> int:
    """
    Resolve (year, event-name fragment) to a meeting_key.

    Raises:
        ResolutionNotFoundError: No meeting name contains `event`.
    """
    result = await match_meetings(client, year, event)
    meeting = result.chosen
    if meeting is None:
        logger.warning(f"No meeting matching '{event}' in {year}")
        raise ResolutionNotFoundError("meeting", year, event)
    if result.ambiguous:
        logger.debug(
            f"'{event}' matched {len(result.candidates)} meetings in {year}; "
            f"using '{meeting.name}'"
        )
    return meeting.meeting_key


async def resolve_session(client: OpenF1Client, meeting_key: int, session: str) -> int:
    """
    Resolve (meeting_key, session-name fragment) to a session_key.

    Raises:
        ResolutionNotFoundError: No session name contains `session`.
    """
    result = await match_sessions(client, meeting_key, session)
    chosen = result.chosen
    if chosen is None:
        logger.warning(f"No session matching '{session}' for meeting {meeting_key}")
        raise ResolutionNotFoundError("session", f"meeting {meeting_key}", session)
    if result.ambiguous:
        logger.debug(
            f"'{session}' matched {len(result.candidates)} sessions for meeting "
            f"{meeting_key}; using '{chosen.name}'"
        )
    return chosen.session_key


async def resolve_session_key(
    client: OpenF1Client,
    year: int,
    event: str,
    session: str,
) -> int:
    """Resolve the meeting, then the session inside it."""
    meeting_key = await resolve_meeting(client, year, event)
    return await resolve_session(client, meeting_key, session)
