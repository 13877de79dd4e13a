"""
Status Utilities
Map raw domain statuses onto the badge categories shown by the dashboard
"""
from typing import Literal, Optional

StatusType = Literal[
    "In Treatment", "Scheduled", "Critical", "Discharged", "Active", "Inactive",
    "Recovered", "Pending", "Completed", "Cancelled", "No-show",
]

_APPOINTMENT_STATUS = {
    "scheduled": "Pending",
    "in progress": "In Treatment",
    "completed": "Completed",
    "cancelled": "Cancelled",
    "no-show": "No-show",
}

_PATIENT_STATUS = {
    "in treatment": "In Treatment",
    "critical": "Critical",
    "discharged": "Completed",
    "scheduled": "Pending",
}

_STAFF_STATUS = {
    "on duty": "Active",
    "on call": "Pending",
    "off duty": "Inactive",
    "on leave": "Inactive",
}

_PRIORITY = {
    "high": "Critical",
    "medium": "In Treatment",
    "low": "Active",
}

_STATUS_COLORS = {
    "completed": "green",
    "discharged": "green",
    "in treatment": "blue",
    "in progress": "blue",
    "pending": "yellow",
    "scheduled": "yellow",
    "cancelled": "red",
    "no-show": "red",
    "critical": "red",
}


def _key(status: Optional[str]) -> str:
    return (status or "").strip().lower()


def map_appointment_status_to_status_type(status: Optional[str]) -> StatusType:
    """Badge category for an appointment status"""
    return _APPOINTMENT_STATUS.get(_key(status), "Pending")


def map_patient_status_to_status_type(status: Optional[str]) -> StatusType:
    """Badge category for a patient status"""
    return _PATIENT_STATUS.get(_key(status), "Pending")


def map_staff_status_to_status_type(status: Optional[str]) -> StatusType:
    """Badge category for a staff duty status"""
    return _STAFF_STATUS.get(_key(status), "Active")


def map_priority_to_status_type(priority: Optional[str]) -> StatusType:
    """Badge category for an activity priority"""
    return _PRIORITY.get(_key(priority), "Pending")


def get_status_color(status: Optional[str]) -> str:
    return _STATUS_COLORS.get(_key(status), "gray")


def get_status_bg_class(status: Optional[str]) -> str:
    return f"bg-{get_status_color(status)}-100"


def get_status_text_class(status: Optional[str]) -> str:
    return f"text-{get_status_color(status)}-800"
