"""CSV export of workshops."""

import asyncio
import csv
from pathlib import Path
from typing import Protocol

from src.config import settings
from src.dal.workshop_dao import WorkshopDao
from src.logging.config import get_logger
from src.models.workshop import Workshop

logger = get_logger(__name__)

CSV_COLUMNS = [
    "clientId",
    "workshopId",
    "locationId",
    "organizerId",
    "name",
    "category",
    "description",
    "workshopDate",
    "startTime",
    "duration",
    "createdOn",
    "lastUpdatedOn",
]


class CsvExporter(Protocol):
    """Produces the CSV file for one tracking id."""

    async def export(self, tracking_id: str) -> None: ...


class WorkshopCsvExporter:
    """
    Writes all workshops of one client to ``<directory>/<tracking_id>.csv``.

    The file has a header row of camelCase column names followed by one
    row per workshop. Missing values are written as empty cells.
    """

    def __init__(
        self,
        dao: WorkshopDao | None = None,
        partition: str | None = None,
        directory: str | Path | None = None,
    ) -> None:
        """
        Initialize the exporter.

        Args:
            dao: WorkshopDao instance (creates new if None)
            partition: Client whose workshops are exported
            directory: Output directory for CSV files
        """
        self.dao = dao or WorkshopDao()
        self.partition = partition or settings.csv_export_partition
        self.directory = Path(directory or settings.csv_export_directory)

    def output_path(self, tracking_id: str) -> Path:
        return self.directory / f"{tracking_id}.csv"

    async def export(self, tracking_id: str) -> None:
        workshops = await self.dao.read_all(self.partition)
        path = self.output_path(tracking_id)
        await asyncio.to_thread(self._write, path, workshops)
        logger.info(
            "CSV export written",
            extra={
                "context": {
                    "tracking_id": tracking_id,
                    "path": str(path),
                    "rows": len(workshops),
                }
            },
        )

    @staticmethod
    def _write(path: Path, workshops: list[Workshop]) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", newline="", encoding="utf-8") as handle:
            writer = csv.DictWriter(handle, fieldnames=CSV_COLUMNS)
            writer.writeheader()
            for workshop in workshops:
                row = workshop.model_dump(by_alias=True, mode="json")
                writer.writerow({column: row.get(column) for column in CSV_COLUMNS})
