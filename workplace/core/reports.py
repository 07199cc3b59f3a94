# -*- coding: utf-8 -*-
"""
reports

Background report workers for long running dialog actions.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
import threading
import uuid
from collections import OrderedDict
from typing import List, Tuple


class Report:
    """Thread-safe line buffer filled by a worker and read by pollers."""

    FORMAT_DEFAULT = "default"
    FORMAT_HEADLINE = "headline"
    FORMAT_WARNING = "warning"
    FORMAT_ERROR = "error"

    def __init__(self, locale: str = "en") -> None:
        """Create an empty report for ``locale``."""

        self.locale = locale
        self._lines: List[Tuple[str, str]] = []
        self._lock = threading.Lock()
        self._errors = 0

    def println(self, message: str, fmt: str = FORMAT_DEFAULT) -> None:
        """Append ``message`` formatted as ``fmt``."""

        with self._lock:
            self._lines.append((fmt, message))
            if fmt == self.FORMAT_ERROR:
                self._errors += 1

    def lines(self, offset: int = 0) -> List[Tuple[str, str]]:
        """Return the lines appended since ``offset``."""

        with self._lock:
            return list(self._lines[max(offset, 0) :])

    @property
    def error_count(self) -> int:
        """Return the number of error lines written so far."""
        with self._lock:
            return self._errors

    def __len__(self) -> int:
        with self._lock:
            return len(self._lines)


class ReportThread(threading.Thread):
    """Worker thread writing its progress into a :class:`Report`."""

    def __init__(self, name: str, *, locale: str = "en") -> None:
        """Initialise the worker with a fresh report."""

        super().__init__(name=name, daemon=True)
        self.report = Report(locale)
        self.error: BaseException | None = None
        self.logger = logging.getLogger(__name__)

    def run(self) -> None:
        """Execute :meth:`work`, recording failures in the report."""

        self.logger.info("Report thread %s started", self.name)
        try:
            self.work()
        except Exception as exc:  # noqa: BLE001 - failures end up in the report
            self.error = exc
            self.report.println(str(exc) or exc.__class__.__name__, Report.FORMAT_ERROR)
            self.logger.exception("Report thread %s failed", self.name)
        finally:
            self.logger.info("Report thread %s finished", self.name)

    def work(self) -> None:
        """Perform the actual long running job."""
        raise NotImplementedError


class ReportManager:
    """Track running and finished report threads by identifier.

    At most ``max_finished`` finished reports are kept; older ones are
    dropped when a new report starts. Running reports are never dropped.
    """

    def __init__(self, max_finished: int = 32) -> None:
        """Prepare the thread table."""

        self.max_finished = max(max_finished, 0)
        self._threads: "OrderedDict[str, ReportThread]" = OrderedDict()
        self._lock = threading.Lock()
        self.logger = logging.getLogger(__name__)

    def start(self, thread: ReportThread) -> str:
        """Start ``thread`` and return the identifier used for polling."""

        report_id = uuid.uuid4().hex
        with self._lock:
            self._prune()
            self._threads[report_id] = thread
        thread.start()
        return report_id

    def release(self, report_id: str) -> bool:
        """Forget a finished report; running reports are kept."""

        with self._lock:
            thread = self._threads.get(report_id)
            if thread is None or thread.is_alive():
                return False
            del self._threads[report_id]
        self.logger.debug("Report %s released", report_id)
        return True

    def __len__(self) -> int:
        with self._lock:
            return len(self._threads)

    def _prune(self) -> None:
        finished = [key for key, thread in self._threads.items() if not thread.is_alive()]
        for key in finished[: max(len(finished) - self.max_finished, 0)]:
            del self._threads[key]

    def get(self, report_id: str) -> ReportThread | None:
        """Return the thread registered under ``report_id``."""

        with self._lock:
            return self._threads.get(report_id)

    def poll(self, report_id: str, offset: int = 0) -> Tuple[List[Tuple[str, str]], bool]:
        """Return new report lines and whether the worker has finished."""

        thread = self.get(report_id)
        if thread is None:
            raise KeyError(report_id)
        finished = not thread.is_alive()
        return thread.report.lines(offset), finished

    def shutdown(self, timeout: float | None = 5.0) -> None:
        """Wait for running threads and forget every report."""

        with self._lock:
            threads = list(self._threads.values())
            self._threads.clear()
        for thread in threads:
            if thread.is_alive():
                thread.join(timeout)
                if thread.is_alive():
                    self.logger.warning("Report thread %s did not stop in time", thread.name)


__all__ = ["Report", "ReportThread", "ReportManager"]


# The End
