"""
Unit tests for the multi-driver lap-time merger.
"""
import math

import pytest

from f1charts.exceptions import TransportError
from f1charts.laps import (
    MergedLapTable,
    fold_laps,
    merge_lap_times,
    merge_lap_times_best_effort,
)
from f1charts.models import LapRecord

SESSION = 9472


@pytest.fixture
def two_drivers(fake):
    fake.add("/laps", [{"lap_number": 1, "lap_duration": 90.1}, {"lap_number": 2, "lap_duration": 89.9}],
             match={"session_key": SESSION, "driver_number": "1"})
    fake.add("/laps", [{"lap_number": 1, "lap_duration": 91.0}, {"lap_number": 3, "lap_duration": 88.5}],
             match={"session_key": SESSION, "driver_number": "2"})
    return fake


class TestFoldLaps:
    def test_creates_then_updates_rows(self):
        table = MergedLapTable()
        fold_laps(table, "1", [LapRecord(lap_number=5, lap_duration=80.0)])
        fold_laps(table, "2", [LapRecord(lap_number=5, lap_duration=81.0), LapRecord(lap_number=4, lap_duration=82.0)])
        assert table.to_records() == [
            {"LapNumber": 5, "1": 80.0, "2": 81.0},
            {"LapNumber": 4, "2": 82.0},
        ]

    def test_missing_duration_kept_as_none(self):
        table = fold_laps(MergedLapTable(), "44", [LapRecord(lap_number=1)])
        assert 1 in table
        assert table.get(1, "44") is None

    def test_lap_time_alias(self):
        lap = LapRecord.model_validate({"lap_number": 2, "lap_time": 95.3})
        assert lap.lap_duration == 95.3


class TestMergeLapTimes:
    @pytest.mark.asyncio
    async def test_first_sight_order(self, client, two_drivers):
        table = await merge_lap_times(client, SESSION, ["1", "2"])
        assert table.to_records() == [
            {"LapNumber": 1, "1": 90.1, "2": 91.0},
            {"LapNumber": 2, "1": 89.9},
            {"LapNumber": 3, "2": 88.5},
        ]
        assert table.drivers == ["1", "2"]

    @pytest.mark.asyncio
    async def test_drivers_fetched_sequentially_in_order(self, client, two_drivers):
        await merge_lap_times(client, SESSION, ["2", "1"])
        assert [r.url.params["driver_number"] for r in two_drivers.requests] == ["2", "1"]

    @pytest.mark.asyncio
    async def test_integer_driver_ids_become_string_columns(self, client, two_drivers):
        table = await merge_lap_times(client, SESSION, [1])
        assert table.to_records()[0] == {"LapNumber": 1, "1": 90.1}

    @pytest.mark.asyncio
    async def test_one_failure_fails_the_merge(self, client, fake):
        fake.add("/laps", [{"lap_number": 1, "lap_duration": 90.1}], match={"driver_number": "1"})
        fake.add("/laps", {"detail": "boom"}, status=500, match={"driver_number": "2"})
        fake.add("/laps", [{"lap_number": 1, "lap_duration": 92.0}], match={"driver_number": "3"})
        with pytest.raises(TransportError) as exc_info:
            await merge_lap_times(client, SESSION, ["1", "2", "3"])
        assert exc_info.value.status_code == 500
        # Drivers after the failure are never requested.
        assert [r.url.params["driver_number"] for r in fake.requests] == ["1", "2"]

    @pytest.mark.asyncio
    async def test_no_drivers_gives_empty_table(self, client):
        table = await merge_lap_times(client, SESSION, [])
        assert len(table) == 0
        assert table.to_records() == []


class TestBestEffortMerge:
    @pytest.mark.asyncio
    async def test_keeps_successful_drivers(self, client, two_drivers):
        two_drivers.add("/laps", {"detail": "boom"}, status=502, match={"driver_number": "3"})
        table, failures = await merge_lap_times_best_effort(client, SESSION, ["1", "3", "2"])
        assert table.lap_numbers == [1, 2, 3]
        assert table.get(1, "2") == 91.0
        assert list(failures) == ["3"]
        assert failures["3"].status_code == 502

    @pytest.mark.asyncio
    async def test_no_failures(self, client, two_drivers):
        _, failures = await merge_lap_times_best_effort(client, SESSION, ["1", "2"])
        assert failures == {}


class TestToFrame:
    @pytest.mark.asyncio
    async def test_sorted_by_lap_with_gaps(self, client, two_drivers):
        table = await merge_lap_times(client, SESSION, ["2", "1"])
        df = table.to_frame()
        assert list(df.columns) == ["LapNumber", "2", "1"]
        assert df["LapNumber"].tolist() == [1, 2, 3]
        assert math.isnan(df.loc[1, "2"])
        assert df.loc[2, "2"] == 88.5

    def test_empty_table_frame(self):
        df = MergedLapTable().to_frame()
        assert df.empty
        assert list(df.columns) == ["LapNumber"]
