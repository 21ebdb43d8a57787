"""Tests for WorkshopCsvExporter."""

import csv
from datetime import date, datetime, time

import pytest

from src.dal.workshop_dao import WorkshopDao
from src.models.workshop import Workshop
from src.services.csv_export import CSV_COLUMNS, WorkshopCsvExporter


@pytest.mark.asyncio
async def test_export_writes_one_row_per_workshop(dynamodb_table, tmp_path) -> None:
    """Test the CSV produced for a partition."""
    dao = WorkshopDao()
    created = await dao.create(
        Workshop(
            client_id="C1",
            location_id="L1",
            name="Intro",
            workshop_date=date(2025, 3, 14),
            start_time=time(9, 0),
            duration=60,
        )
    )
    await dao.create(Workshop(client_id="C2", name="Other client"))
    exporter = WorkshopCsvExporter(dao=dao, partition="C1", directory=tmp_path / "out")

    await exporter.export("track-1")

    with (tmp_path / "out" / "track-1.csv").open(newline="", encoding="utf-8") as handle:
        reader = csv.DictReader(handle)
        rows = list(reader)

    assert reader.fieldnames == CSV_COLUMNS
    assert len(rows) == 1
    row = rows[0]
    assert row["clientId"] == "C1"
    assert row["workshopId"] == created.workshop_id
    assert row["locationId"] == "L1"
    assert row["organizerId"] == ""
    assert row["workshopDate"] == "2025-03-14"
    assert row["startTime"] == "09:00:00"
    assert row["duration"] == "60"
    assert datetime.fromisoformat(row["createdOn"]) == created.created_on


@pytest.mark.asyncio
async def test_export_of_empty_partition_writes_header_only(dynamodb_table, tmp_path) -> None:
    """Test that an empty partition still produces a file."""
    exporter = WorkshopCsvExporter(dao=WorkshopDao(), partition="C1", directory=tmp_path)

    await exporter.export("empty")

    lines = (tmp_path / "empty.csv").read_text(encoding="utf-8").splitlines()
    assert lines == [",".join(CSV_COLUMNS)]


def test_output_path_uses_tracking_id(tmp_path) -> None:
    """Test the file naming scheme."""
    exporter = WorkshopCsvExporter(dao=WorkshopDao(), partition="C1", directory=tmp_path)

    assert exporter.output_path("abc") == tmp_path / "abc.csv"
