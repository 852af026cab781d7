"""Background execution of a sensor monitor."""

import logging
import threading
from typing import Any

from pydantic import Field

from .entity import Entity
from .monitor import SensorMonitor


class MonitorRunner(Entity):
    """Runs a SensorMonitor in a background thread.

    Useful with unbounded sources such as a polled sensor, where run()
    would otherwise block the caller forever. stop() uses the monitor's
    cooperative stop, so the thread ends after the sample in progress.

    Key characteristics:
    - Daemon thread, one per runner
    - The exception that ended the run, if any, is kept in error
    - A runner can be restarted once its thread has finished
    """

    monitor: SensorMonitor = Field(
        description="The monitor to run in the background"
    )

    def __init__(self, **data: Any) -> None:
        super().__init__(**data)
        self._logger = logging.getLogger(
            f"{self.__class__.__module__}.{self.__class__.__name__}."
            f"{self.name}"
        )
        self._thread: threading.Thread | None = None
        self._error: Exception | None = None

    @property
    def error(self) -> Exception | None:
        """Exception raised by the last run, or None."""
        return self._error

    def start(self) -> None:
        """Start the monitor in a background thread.

        Raises:
            RuntimeError: If runner is already started

        """
        if self._thread and self._thread.is_alive():
            raise RuntimeError(f"Runner {self.name} already started")

        self._logger.info(f"Starting runner {self.name}")
        self._error = None
        self._thread = threading.Thread(
            target=self._run_monitor,
            name=f"Runner-{self.name}",
            daemon=True,
        )
        self._thread.start()

    def stop(self, timeout: float = 5.0) -> None:
        """Stop the monitor and wait for the thread to finish."""
        if not self._thread:
            return

        self._logger.info(f"Stopping runner {self.name}")
        if self._thread.is_alive():
            self.monitor.stop()

        self._thread.join(timeout=timeout)
        if self._thread.is_alive():
            self._logger.warning(
                f"Runner {self.name} thread did not stop within timeout"
            )
            return

        # The thread may have ended between is_alive() and stop()
        self.monitor.clear_stop()
        self._thread = None

    def join(self, timeout: float | None = None) -> bool:
        """Wait for a finite source to be drained.

        Returns:
            True if the thread has finished

        """
        if self._thread is None:
            return True
        self._thread.join(timeout=timeout)
        return not self._thread.is_alive()

    def is_running(self) -> bool:
        """Check if the monitor thread is alive."""
        return self._thread is not None and self._thread.is_alive()

    def _run_monitor(self) -> None:
        """Thread body: run the monitor and record how it ended."""
        try:
            self.monitor.run()
        except Exception as e:
            self._error = e
            self._logger.error(
                f"Monitor {self.monitor.name} failed: {e}", exc_info=True
            )
        finally:
            self._logger.info(f"Runner {self.name} execution loop ended")
