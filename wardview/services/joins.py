"""
Cross-collection joins between departments, staff and patients

Records may carry explicit foreign keys (department_id, doctor_id), assigned
at ingestion by link_foreign_keys. When a record has one, the join uses it.
Records without keys fall back to the legacy join on display names, which
silently drops records whose department or doctor was renamed and cannot
tell apart two staff members with the same name.
"""
from collections import Counter
from typing import Any, Dict, Iterable, List, Optional

from wardview.schemas.hospital import Department, Patient, StaffMember
from wardview.services.errors import DuplicateDisplayNameError


def belongs_to_department(record, department: Department) -> bool:
    """Patient or staff record belongs to the department"""
    if record.department_id is not None:
        return record.department_id == department.id
    return record.department == department.name


def assigned_to_staff(patient: Patient, staff: StaffMember) -> bool:
    """Patient is under the care of the staff member"""
    if patient.doctor_id is not None:
        return patient.doctor_id == staff.id
    return patient.doctor == staff.full_name


def find_by_department(rows: Iterable[Any], department_name: str) -> Optional[Any]:
    """First aggregate row whose department label matches"""
    for row in rows:
        if row.department == department_name:
            return row
    return None


def duplicate_display_names(records: Iterable[Any], attribute: str = "full_name") -> List[str]:
    counts = Counter(getattr(record, attribute) for record in records)
    return [name for name, count in counts.items() if name and count > 1]


def assert_unique_display_names(records: Iterable[Any], collection: str, attribute: str = "full_name"):
    """Raise when a display-name join key is ambiguous"""
    duplicates = duplicate_display_names(records, attribute)
    if duplicates:
        raise DuplicateDisplayNameError(collection, duplicates)


def link_foreign_keys(
    patients: Iterable[Dict[str, Any]],
    staff: Iterable[Dict[str, Any]],
    departments: Iterable[Dict[str, Any]],
):
    """Assign department_id and doctor_id to raw documents from their names.

    Works on camelCase documents in place; existing keys are kept. Doctor
    names that are shared by several staff members are left unlinked.
    """
    patients, staff = list(patients), list(staff)
    department_ids = {d["name"]: d["id"] for d in departments if "name" in d}
    doctor_names = Counter(s.get("fullName") for s in staff)
    doctor_ids = {s.get("fullName"): s["id"] for s in staff if doctor_names[s.get("fullName")] == 1}

    for document in patients + staff:
        if document.get("departmentId") is None and document.get("department") in department_ids:
            document["departmentId"] = department_ids[document["department"]]

    for document in patients:
        if document.get("doctorId") is None and document.get("doctor") in doctor_ids:
            document["doctorId"] = doctor_ids[document["doctor"]]
