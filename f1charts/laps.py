"""
Multi-driver lap-time merger.

Each driver's laps are fetched one after another and folded into a single
sparse table keyed by lap number, one column per driver. A row is created
the first time any driver reports a lap number and filled in by later
drivers. Rows keep first-sight order; `MergedLapTable.to_frame` sorts.

Two merge modes share the same fetch step:
- `merge_lap_times`: all drivers must succeed, the first failure is raised.
- `merge_lap_times_best_effort`: failed drivers are reported and skipped.
"""
from dataclasses import dataclass
from typing import Optional, Sequence

import pandas as pd

from f1charts.exceptions import F1ChartsError
from f1charts.models import LapRecord, parse_records
from f1charts.openf1.api_client import OpenF1Client
from f1charts.openf1.fetchers import fetch_laps
from f1charts.utils.logger import logger

LAP_COLUMN = "LapNumber"


class MergedLapTable:
    """Sparse lap-number × driver table of lap durations."""

    def __init__(self) -> None:
        self._rows: dict[int, dict[str, Optional[float]]] = {}
        self.drivers: list[str] = []

    def set(self, lap_number: int, driver: str, value: Optional[float]) -> None:
        """Set one cell, creating the row on first sight of `lap_number`."""
        if driver not in self.drivers:
            self.drivers.append(driver)
        row = self._rows.get(lap_number)
        if row is None:
            self._rows[lap_number] = {driver: value}
        else:
            row[driver] = value

    def get(self, lap_number: int, driver: str) -> Optional[float]:
        return self._rows.get(lap_number, {}).get(driver)

    @property
    def lap_numbers(self) -> list[int]:
        """Lap numbers in first-sight order."""
        return list(self._rows)

    def __len__(self) -> int:
        return len(self._rows)

    def __contains__(self, lap_number: object) -> bool:
        return lap_number in self._rows

    def to_records(self) -> list[dict]:
        """Rows as frontend dicts: ``{"LapNumber": n, "<driver>": seconds, ...}``."""
        return [{LAP_COLUMN: lap, **values} for lap, values in self._rows.items()]

    def to_frame(self) -> pd.DataFrame:
        """
        Rows as a DataFrame sorted by lap number.

        Returns:
            One column per driver (in processing order), NaN where a driver
            has no lap with that number.
        """
        columns = [LAP_COLUMN, *self.drivers]
        if not self._rows:
            return pd.DataFrame(columns=columns)
        df = pd.DataFrame(self.to_records(), columns=columns)
        return df.sort_values(LAP_COLUMN).reset_index(drop=True)


@dataclass(frozen=True)
class DriverLapOutcome:
    """Result of fetching one driver's laps: either laps or the error."""

    driver: str
    laps: Optional[list[LapRecord]] = None
    error: Optional[F1ChartsError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def fold_laps(table: MergedLapTable, driver: str, laps: Sequence[LapRecord]) -> MergedLapTable:
    """Fold one driver's laps into `table` in place and return it."""
    for lap in laps:
        table.set(lap.lap_number, driver, lap.lap_duration)
    return table


async def fetch_driver_laps(
    client: OpenF1Client,
    session_key: int,
    driver: str | int,
) -> list[LapRecord]:
    """Fetch and validate one driver's laps."""
    raw = await fetch_laps(client, session_key, driver)
    return parse_records(LapRecord, raw, "lap")


async def collect_lap_outcomes(
    client: OpenF1Client,
    session_key: int,
    drivers: Sequence[str | int],
    stop_on_error: bool = False,
) -> list[DriverLapOutcome]:
    """
    Fetch each driver's laps sequentially, capturing failures per driver.

    Args:
        client: OpenF1Client instance.
        session_key: Resolved session key.
        drivers: Driver identifiers, processed in the given order.
        stop_on_error: Stop fetching after the first failed driver.

    Returns:
        One outcome per driver that was fetched, in driver order.
    """
    outcomes: list[DriverLapOutcome] = []
    for driver in drivers:
        driver = str(driver)
        try:
            laps = await fetch_driver_laps(client, session_key, driver)
        except F1ChartsError as e:
            logger.warning(f"Lap fetch failed for driver {driver} in session {session_key}: {e}")
            outcomes.append(DriverLapOutcome(driver=driver, error=e))
            if stop_on_error:
                break
            continue
        outcomes.append(DriverLapOutcome(driver=driver, laps=laps))
    return outcomes


def merge_outcomes(outcomes: Sequence[DriverLapOutcome], strict: bool = True) -> MergedLapTable:
    """
    Fold fetched outcomes into a table.

    Args:
        outcomes: Per-driver outcomes in driver order.
        strict: Raise the first failure instead of skipping it.

    Returns:
        MergedLapTable built from the successful outcomes.
    """
    table = MergedLapTable()
    for outcome in outcomes:
        if not outcome.ok:
            if strict:
                raise outcome.error
            continue
        fold_laps(table, outcome.driver, outcome.laps or [])
    return table


async def merge_lap_times(
    client: OpenF1Client,
    session_key: int,
    drivers: Sequence[str | int],
) -> MergedLapTable:
    """
    Merge every driver's lap times into one table; all drivers must succeed.

    Raises:
        F1ChartsError: The first driver fetch that failed. No partial table
            is returned and later drivers are not fetched.
    """
    outcomes = await collect_lap_outcomes(client, session_key, drivers, stop_on_error=True)
    table = merge_outcomes(outcomes, strict=True)
    logger.info(f"Merged {len(table)} laps for {len(drivers)} drivers (session {session_key})")
    return table


async def merge_lap_times_best_effort(
    client: OpenF1Client,
    session_key: int,
    drivers: Sequence[str | int],
) -> tuple[MergedLapTable, dict[str, F1ChartsError]]:
    """
    Merge the drivers whose laps could be fetched.

    Returns:
        The table, and failed driver id → error.
    """
    outcomes = await collect_lap_outcomes(client, session_key, drivers)
    table = merge_outcomes(outcomes, strict=False)
    failures = {o.driver: o.error for o in outcomes if not o.ok}
    if failures:
        logger.warning(f"Skipped {len(failures)} driver(s) without laps: {sorted(failures)}")
    return table, failures
