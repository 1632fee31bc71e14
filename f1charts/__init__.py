"""
f1charts: OpenF1 data reshaped for charts.

Resolve season/event/session names to OpenF1 keys, then fetch telemetry
series, merged lap-time tables, schedules and standings.
"""
from f1charts.exceptions import (
    F1ChartsError,
    MalformedResponseError,
    NotFoundError,
    ResolutionNotFoundError,
    TransportError,
)
from f1charts.laps import MergedLapTable, merge_lap_times, merge_lap_times_best_effort
from f1charts.openf1.api_client import OpenF1Client
from f1charts.resolve import rank_matches, resolve_meeting, resolve_session
from f1charts.telemetry import Metric, fetch_metric_series

__all__ = [
    "F1ChartsError",
    "MalformedResponseError",
    "MergedLapTable",
    "Metric",
    "NotFoundError",
    "OpenF1Client",
    "ResolutionNotFoundError",
    "TransportError",
    "fetch_metric_series",
    "merge_lap_times",
    "merge_lap_times_best_effort",
    "rank_matches",
    "resolve_meeting",
    "resolve_session",
]
