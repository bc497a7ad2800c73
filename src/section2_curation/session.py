"""
Refresh session: caller-owned mode and the latest dashboard.

Refreshes can overlap (e.g. quick mode changes). Each refresh takes a
ticket; only the newest ticket may publish, so the dashboard always
reflects the most recently requested report. Ticket issue and publish
are serialized with a lock, so refreshes may run on worker threads.
"""

import logging
import threading
from typing import Optional

from src.section1_collection.collector import Collector
from src.section1_collection.schemas import Report, VerbosityMode

from .dashboard import build_dashboard
from .schemas import Dashboard

logger = logging.getLogger(__name__)


class DashboardSession:
    """
    Holds the current mode, report and dashboard for one viewer.

    Args:
        collector: Report source (anything with `fetch(mode) -> Report`)
        mode: Initial verbosity mode
    """

    def __init__(self, collector: Optional[Collector] = None, mode: str | VerbosityMode = VerbosityMode.BASIC):
        self.collector = collector or Collector()
        self.mode = VerbosityMode.parse(getattr(mode, "value", mode))
        self.report: Optional[Report] = None
        self.dashboard: Optional[Dashboard] = None
        self._issued = 0
        self._ticket_mode = self.mode
        self._lock = threading.Lock()

    def set_mode(self, mode: str | VerbosityMode) -> VerbosityMode:
        """Validate and store a new mode (raises InvalidModeError)."""
        self.mode = VerbosityMode.parse(getattr(mode, "value", mode))
        return self.mode

    def _issue(self, mode: Optional[str | VerbosityMode]) -> tuple[int, VerbosityMode]:
        with self._lock:
            if mode is not None:
                self.set_mode(mode)
            self._issued += 1
            self._ticket_mode = self.mode
            return self._issued, self._ticket_mode

    def begin_refresh(self, mode: Optional[str | VerbosityMode] = None) -> int:
        """Start a refresh and return its ticket; the current mode is recorded with it."""
        ticket, _ = self._issue(mode)
        return ticket

    def is_current(self, ticket: int) -> bool:
        return ticket == self._issued

    def complete_refresh(self, ticket: int, report: Report) -> bool:
        """
        Publish a fetched report if its ticket is still the newest.

        The dashboard is curated in the mode recorded when the ticket was
        issued, so a later `set_mode` does not relabel an in-flight report.

        Returns:
            True if the dashboard was replaced, False for a stale result
        """
        with self._lock:
            if not self.is_current(ticket):
                logger.warning("discarding stale refresh %d (latest is %d)", ticket, self._issued)
                return False

            self.report = report
            self.dashboard = build_dashboard(report, self._ticket_mode.value)
            return True

    def refresh(self, mode: Optional[str | VerbosityMode] = None) -> Dashboard:
        """
        Fetch a new report and rebuild the dashboard.

        Raises:
            ReportFetchError: If the collector cannot produce a report;
                the previous dashboard is left untouched
        """
        ticket, fetch_mode = self._issue(mode)
        report = self.collector.fetch(fetch_mode)
        self.complete_refresh(ticket, report)
        return self.dashboard
