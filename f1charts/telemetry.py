"""
Per-lap telemetry series for charts.

One car_data request per series; each raw sample is narrowed to a two-axis
point for the requested metric. Output keeps the input order and length.
"""
from enum import Enum
from typing import Any, Callable, Sequence

from pydantic import BaseModel

from f1charts.models import (
    BrakePoint,
    CarSample,
    DRSPoint,
    GearPoint,
    RPMPoint,
    SpeedPoint,
    ThrottlePoint,
    parse_records,
)
from f1charts.openf1.api_client import OpenF1Client
from f1charts.openf1.fetchers import fetch_car_data
from f1charts.utils.logger import logger


class Metric(str, Enum):
    SPEED = "speed"
    THROTTLE = "throttle"
    BRAKE = "brake"
    RPM = "rpm"
    DRS = "drs"
    GEAR = "gear"


def drs_active(value: Any) -> int:
    """Only the string "1" counts as an open flap."""
    return 1 if value == "1" else 0


_PROJECTIONS: dict[Metric, Callable[[CarSample], BaseModel]] = {
    Metric.SPEED: lambda s: SpeedPoint(distance=s.distance, speed=s.speed),
    Metric.THROTTLE: lambda s: ThrottlePoint(distance=s.distance, throttle=s.throttle),
    Metric.BRAKE: lambda s: BrakePoint(distance=s.distance, brake=s.brake),
    Metric.RPM: lambda s: RPMPoint(distance=s.distance, rpm=s.rpm),
    Metric.DRS: lambda s: DRSPoint(distance=s.distance, drs=drs_active(s.drs)),
    Metric.GEAR: lambda s: GearPoint(x=s.longitude, y=s.latitude, n_gear=s.n_gear),
}


def project_samples(samples: Sequence[CarSample], metric: Metric | str) -> list[BaseModel]:
    """
    Narrow raw samples to one metric's chart points.

    Args:
        samples: Raw car samples in upstream order.
        metric: Metric to project onto.

    Returns:
        One point per sample, same order.
    """
    project = _PROJECTIONS[Metric(metric)]
    return [project(sample) for sample in samples]


async def fetch_metric_series(
    client: OpenF1Client,
    session_key: int,
    driver: str | int,
    lap_number: int,
    metric: Metric | str,
) -> list[BaseModel]:
    """
    Fetch one driver's lap telemetry and project it onto `metric`.

    Args:
        client: OpenF1Client instance.
        session_key: Resolved session key.
        driver: Driver identifier within the session.
        lap_number: Lap to fetch.
        metric: Metric to project onto.

    Returns:
        Chart points; an empty list when upstream has no samples.
    """
    metric = Metric(metric)
    raw = await fetch_car_data(client, session_key, driver, lap_number)
    samples = parse_records(CarSample, raw, "car_data")
    logger.debug(
        f"Projecting {len(samples)} samples onto {metric.value} "
        f"(driver {driver}, lap {lap_number})"
    )
    return project_samples(samples, metric)
