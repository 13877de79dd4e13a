"""
Overview Accumulator
Incremental maintenance of the hospital-wide OverviewStatistics counters
"""
from datetime import date, datetime
from typing import Optional
import logging

from wardview.schemas.hospital import Appointment, OverviewStatistics
from wardview.utils.dates import is_same_day

logger = logging.getLogger(__name__)

# Appointment status -> counter it feeds
STATUS_COUNTERS = {
    "Completed": "completed_appointments",
    "Cancelled": "cancelled_appointments",
}


class OverviewAccumulator:
    """Applies appointment events to an OverviewStatistics snapshot.

    Counters only grow by default: an appointment leaving Completed or
    Cancelled keeps its earlier contribution. With reversible=True the
    counter it leaves is decremented, never below zero.
    """

    def __init__(self, reversible: bool = False):
        self.reversible = reversible

    def on_appointment_created(
        self, overview: OverviewStatistics, appointment: Appointment, today: Optional[date] = None
    ) -> OverviewStatistics:
        """Count a new appointment, and today's count when it falls on today"""
        today = today or date.today()
        updates = {
            "total_appointments": overview.total_appointments + 1,
            "last_updated": datetime.now(),
        }
        if is_same_day(appointment.date, today):
            updates["today_appointments"] = overview.today_appointments + 1
        return overview.model_copy(update=updates)

    def on_status_changed(
        self, overview: OverviewStatistics, previous: Optional[str], new: Optional[str]
    ) -> OverviewStatistics:
        """Count a status transition; unchanged status is a no-op"""
        if previous == new:
            return overview

        updates = {}
        counter = STATUS_COUNTERS.get(new)
        if counter:
            updates[counter] = getattr(overview, counter) + 1

        left = STATUS_COUNTERS.get(previous)
        if self.reversible and left:
            updates[left] = max(getattr(overview, left) - 1, 0)

        if not updates:
            return overview

        logger.debug(f"Overview counters updated for {previous} -> {new}: {updates}")
        updates["last_updated"] = datetime.now()
        return overview.model_copy(update=updates)
