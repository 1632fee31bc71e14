"""
Pytest fixtures for f1charts tests.

`FakeOpenF1` stands in for the OpenF1 API behind `httpx.MockTransport`,
so the real client code runs against canned records.
"""
from typing import Any, Optional

import httpx
import pytest

from f1charts.openf1.api_client import OpenF1Client

BASE_URL = "https://api.openf1.org/v1"


class FakeOpenF1:
    """Routes requests by path and a subset of query params."""

    def __init__(self) -> None:
        self._routes: list[tuple[str, dict[str, str], int, dict]] = []
        self.requests: list[httpx.Request] = []

    def add(
        self,
        path: str,
        records: Any = None,
        *,
        match: Optional[dict[str, Any]] = None,
        status: int = 200,
        text: Optional[str] = None,
    ) -> None:
        if text is not None:
            body = {"text": text}
        else:
            body = {"json": records if records is not None else []}
        match = {k: str(v) for k, v in (match or {}).items()}
        self._routes.append((path, match, status, body))

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path.removeprefix("/v1")
        params = dict(request.url.params)
        for route_path, match, status, body in self._routes:
            if route_path == path and all(params.get(k) == v for k, v in match.items()):
                return httpx.Response(status, **body)
        return httpx.Response(404, json={"detail": "Not Found"})

    def paths(self) -> list[str]:
        return [r.url.path.removeprefix("/v1") for r in self.requests]


@pytest.fixture
def fake() -> FakeOpenF1:
    return FakeOpenF1()


@pytest.fixture
def client(fake: FakeOpenF1) -> OpenF1Client:
    return OpenF1Client(base_url=BASE_URL, transport=httpx.MockTransport(fake.handler))


@pytest.fixture
def meetings_2024() -> list[dict]:
    """Three 2024 meetings in upstream order."""
    return [
        {"meeting_key": 1229, "meeting_name": "Bahrain Grand Prix", "country_name": "Bahrain",
         "date_start": "2024-02-29T11:30:00+00:00"},
        {"meeting_key": 1230, "meeting_name": "Saudi Arabian Grand Prix", "country_name": "Saudi Arabia",
         "date_start": "2024-03-07T13:30:00+00:00"},
        {"meeting_key": 1231, "meeting_name": "Australian Grand Prix"},
    ]


@pytest.fixture
def bahrain_sessions() -> list[dict]:
    return [
        {"session_key": 9460, "session_name": "Practice 1", "session_type": "Practice",
         "date_start": "2024-02-29T11:30:00+00:00"},
        {"session_key": 9461, "session_name": "Practice 2", "session_type": "Practice",
         "date_start": "2024-02-29T15:00:00+00:00"},
        {"session_key": 9468, "session_name": "Qualifying", "session_type": "Qualifying",
         "date_start": "2024-03-01T16:00:00+00:00"},
        {"session_key": 9472, "session_name": "Race", "session_type": "Race",
         "date_start": "2024-03-02T15:00:00+00:00"},
    ]


@pytest.fixture
def season(fake: FakeOpenF1, meetings_2024, bahrain_sessions) -> FakeOpenF1:
    """Fake upstream with the 2024 calendar and Bahrain sessions registered."""
    fake.add("/meetings", meetings_2024, match={"year": 2024})
    fake.add("/sessions", bahrain_sessions, match={"meeting_key": 1229})
    return fake


@pytest.fixture
def car_samples() -> list[dict]:
    """Four car_data samples with mixed DRS encodings."""
    return [
        {"distance": 0.0, "speed": 280, "throttle": 100, "brake": 0, "rpm": 11800,
         "n_gear": 7, "drs": "1", "latitude": 26.03, "longitude": 50.51},
        {"distance": 12.5, "speed": 295, "throttle": 100, "brake": 0, "rpm": 12050,
         "n_gear": 8, "drs": "0", "latitude": 26.04, "longitude": 50.52},
        {"distance": 25.1, "speed": 190, "throttle": 0, "brake": 100, "rpm": 10400,
         "n_gear": 4, "drs": None, "latitude": 26.05, "longitude": 50.53},
        {"distance": 38.0, "speed": 150, "throttle": 20, "brake": 0, "rpm": 9100,
         "n_gear": 3, "drs": 1, "latitude": 26.06, "longitude": 50.54},
    ]
