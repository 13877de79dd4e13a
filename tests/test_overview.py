from datetime import date

from wardview.schemas.hospital import Appointment, OverviewStatistics
from wardview.services.overview import OverviewAccumulator

OVERVIEW = OverviewStatistics(total_appointments=10, today_appointments=2, completed_appointments=5,
                              cancelled_appointments=1)


def _appointment(day):
    return Appointment(id="APT100", patient_id="P001", date=day)


def test_created_appointment_counts_today_only_when_due_today():
    accumulator = OverviewAccumulator()

    today = accumulator.on_appointment_created(OVERVIEW, _appointment("2024-06-12"), date(2024, 6, 12))
    assert today.total_appointments == 11
    assert today.today_appointments == 3
    assert today.last_updated is not None

    later = accumulator.on_appointment_created(OVERVIEW, _appointment("2024-06-20"), date(2024, 6, 12))
    assert later.total_appointments == 11
    assert later.today_appointments == 2


def test_input_overview_is_not_mutated():
    OverviewAccumulator().on_appointment_created(OVERVIEW, _appointment("2024-06-12"), date(2024, 6, 12))
    assert OVERVIEW.total_appointments == 10


def test_status_changes_only_grow_counters_by_default():
    accumulator = OverviewAccumulator()

    completed = accumulator.on_status_changed(OVERVIEW, "Scheduled", "Completed")
    assert completed.completed_appointments == 6

    reopened = accumulator.on_status_changed(completed, "Completed", "Scheduled")
    assert reopened.completed_appointments == 6

    cancelled = accumulator.on_status_changed(completed, "Completed", "Cancelled")
    assert cancelled.completed_appointments == 6
    assert cancelled.cancelled_appointments == 2


def test_unchanged_status_is_a_no_op():
    accumulator = OverviewAccumulator()
    assert accumulator.on_status_changed(OVERVIEW, "Completed", "Completed") is OVERVIEW
    assert accumulator.on_status_changed(OVERVIEW, "Scheduled", "In Progress") is OVERVIEW


def test_reversible_counters_decrement_without_going_negative():
    accumulator = OverviewAccumulator(reversible=True)

    moved = accumulator.on_status_changed(OVERVIEW, "Completed", "Cancelled")
    assert moved.completed_appointments == 4
    assert moved.cancelled_appointments == 2

    empty = OverviewStatistics()
    reopened = accumulator.on_status_changed(empty, "Cancelled", "Scheduled")
    assert reopened.cancelled_appointments == 0
