"""Elapsed-time measurement for data access and background work."""

import time
from types import TracebackType

from src.logging.config import get_logger

logger = get_logger(__name__)


class MetricsStopWatch:
    """
    Stopwatch that logs the elapsed wall-clock time under a label.

    Starts on construction. Used as a context manager it logs on every
    exit path and never suppresses the exception in flight::

        with MetricsStopWatch("WorkshopDao::read"):
            ...
    """

    def __init__(self, label: str | None = None) -> None:
        self.label = label
        self.start_time = time.perf_counter()

    def elapsed_ms(self) -> float:
        """Milliseconds since the stopwatch was started."""
        return (time.perf_counter() - self.start_time) * 1000

    def log_elapsed_time(self, label: str | None = None) -> float:
        """
        Log the elapsed time and return it.

        Args:
            label: Label for the measurement; falls back to the one
                given at construction

        Returns:
            Elapsed milliseconds
        """
        elapsed_ms = self.elapsed_ms()
        logger.info(
            "Elapsed time",
            extra={
                "context": {
                    "label": label or self.label,
                    "elapsed_ms": round(elapsed_ms, 3),
                }
            },
        )
        return elapsed_ms

    def __enter__(self) -> "MetricsStopWatch":
        self.start_time = time.perf_counter()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        self.log_elapsed_time()
        return False
