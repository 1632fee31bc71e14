"""
Pydantic models for OpenF1 records and chart-ready shapes.

Raw models accept whatever subset of fields upstream sends. Chart models
serialize with the field names the frontend charts expect:
``point.model_dump(by_alias=True)``.
"""
from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError

from f1charts.exceptions import MalformedResponseError


class _Raw(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


class _Chart(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


# ── Raw upstream records ─────────────────────────────────────────────────────

class Meeting(_Raw):
    """A race weekend."""

    meeting_key: int
    name: str = Field(default="", validation_alias=AliasChoices("name", "meeting_name"))
    country: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("country", "country_name")
    )
    date: Optional[str] = Field(default=None, validation_alias=AliasChoices("date", "date_start"))


class Session(_Raw):
    """A timed activity within a meeting (practice, qualifying, race)."""

    session_key: int
    name: str = Field(default="", validation_alias=AliasChoices("name", "session_name"))
    type: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("type", "session_type")
    )
    date: Optional[str] = Field(default=None, validation_alias=AliasChoices("date", "date_start"))


class CarSample(_Raw):
    """One car telemetry reading. `drs` stays untyped so projections can normalize it."""

    date: Optional[str] = None
    distance: Optional[float] = None
    speed: Optional[float] = None
    throttle: Optional[float] = None
    brake: Optional[float] = None
    rpm: Optional[float] = None
    n_gear: Optional[int] = None
    drs: Any = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None


class LapRecord(_Raw):
    """One completed lap of one driver."""

    lap_number: int
    lap_duration: Optional[float] = Field(
        default=None, validation_alias=AliasChoices("lap_duration", "lap_time")
    )
    duration_sector_1: Optional[float] = None
    duration_sector_2: Optional[float] = None
    duration_sector_3: Optional[float] = None
    is_pit_out_lap: Optional[bool] = None
    i1_speed: Optional[float] = None
    i2_speed: Optional[float] = None
    st_speed: Optional[float] = None


# ── Chart shapes ─────────────────────────────────────────────────────────────

class SpeedPoint(_Chart):
    distance: Optional[float] = Field(alias="Distance")
    speed: Optional[float] = Field(alias="Speed")


class ThrottlePoint(_Chart):
    distance: Optional[float] = Field(alias="Distance")
    throttle: Optional[float] = Field(alias="Throttle")


class BrakePoint(_Chart):
    distance: Optional[float] = Field(alias="Distance")
    brake: Optional[float] = Field(alias="Brake")


class RPMPoint(_Chart):
    distance: Optional[float] = Field(alias="Distance")
    rpm: Optional[float] = Field(alias="RPM")


class DRSPoint(_Chart):
    distance: Optional[float] = Field(alias="Distance")
    drs: int = Field(alias="DRS")


class GearPoint(_Chart):
    x: Optional[float] = Field(alias="X")
    y: Optional[float] = Field(alias="Y")
    n_gear: Optional[int] = Field(alias="nGear")


class SessionDriver(_Chart):
    code: str
    name: str = ""
    team: str = ""


class AvailableSession(_Chart):
    name: str
    type: str = ""
    start_time: str = Field(default="", alias="startTime")


class ScheduleEvent(_Chart):
    meeting_key: int = Field(alias="meetingKey")
    name: str
    country: str = ""
    date: str = ""


class LapDetail(_Chart):
    lap_number: int = Field(alias="lapNumber")
    lap_time: float = Field(alias="lapTime")


class StintAnalysis(_Chart):
    """Tyre stint summary. OpenF1 has no equivalent, so nothing produces it yet."""

    driver_code: str = Field(alias="driverCode")
    stint_number: int = Field(alias="stintNumber")
    compound: str
    start_lap: int = Field(alias="startLap")
    end_lap: int = Field(alias="endLap")
    lap_details: list[LapDetail] = Field(default_factory=list, alias="lapDetails")


def parse_records(model: type[_Raw], records: list[dict], source: str) -> list:
    """
    Validate raw records against `model`, keeping upstream order.

    Raises:
        MalformedResponseError: A record does not fit the model.
    """
    try:
        return [model.model_validate(record) for record in records]
    except ValidationError as e:
        raise MalformedResponseError(f"Unexpected {source} record: {e}") from e
