"""Fire-and-forget initiation of CSV exports."""

import asyncio

from src.config import settings
from src.exceptions import DataProcessingException
from src.logging.config import get_logger
from src.services.csv_export import CsvExporter, WorkshopCsvExporter
from src.utils.metrics import MetricsStopWatch

logger = get_logger(__name__)


class OrchestrationService:
    """
    Starts CSV exports in the background and returns immediately.

    Exports run as tasks on the current event loop. At most
    ``max_pending`` exports are in flight; further requests are rejected
    until one finishes. The caller only learns whether the export was
    accepted, never how it ended.
    """

    def __init__(
        self,
        exporter: CsvExporter | None = None,
        max_pending: int | None = None,
    ) -> None:
        """
        Initialize OrchestrationService.

        Args:
            exporter: Export job (creates WorkshopCsvExporter if None)
            max_pending: Limit of concurrently running exports
        """
        self.exporter = exporter or WorkshopCsvExporter()
        self.max_pending = max_pending or settings.csv_export_max_pending
        self._tasks: set[asyncio.Task] = set()

    @property
    def pending_count(self) -> int:
        return len(self._tasks)

    async def create_csv(self, tracking_id: str) -> None:
        """
        Initiate the CSV export for ``tracking_id``.

        Raises:
            DataProcessingException: If the export cannot be started
        """
        if self.pending_count >= self.max_pending:
            logger.error(
                "ERROR::OrchestrationService",
                extra={
                    "context": {
                        "tracking_id": tracking_id,
                        "pending_exports": self.pending_count,
                    }
                },
            )
            raise DataProcessingException(
                f"Error in OrchestrationService: {self.pending_count} exports "
                "already in progress",
                details={"tracking_id": tracking_id},
            )

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError as exc:
            logger.error("ERROR::OrchestrationService", exc_info=exc)
            raise DataProcessingException(
                "Error in OrchestrationService: no running event loop", cause=exc
            ) from exc

        task = loop.create_task(self._run(tracking_id), name=f"csv-export-{tracking_id}")
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

        logger.info(
            "CSV export accepted",
            extra={"context": {"tracking_id": tracking_id}},
        )

    async def _run(self, tracking_id: str) -> None:
        with MetricsStopWatch(f"OrchestrationService::export::{tracking_id}"):
            try:
                await self.exporter.export(tracking_id)
            except asyncio.CancelledError:
                logger.warning(
                    "CSV export cancelled",
                    extra={"context": {"tracking_id": tracking_id}},
                )
                raise
            except Exception as exc:
                # Nobody awaits this task; the log is the only report
                logger.error(
                    "CSV export failed",
                    exc_info=exc,
                    extra={"context": {"tracking_id": tracking_id}},
                )

    async def wait_idle(self) -> None:
        """Wait until every accepted export has finished."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)


_orchestration_service: OrchestrationService | None = None


def get_orchestration_service() -> OrchestrationService:
    """Return the process-wide OrchestrationService."""
    global _orchestration_service
    if _orchestration_service is None:
        _orchestration_service = OrchestrationService()
    return _orchestration_service
