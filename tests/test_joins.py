import pytest

from wardview.schemas.hospital import Department, Patient, StaffMember
from wardview.services.errors import DuplicateDisplayNameError
from wardview.services.joins import (
    assert_unique_display_names, assigned_to_staff, belongs_to_department,
    duplicate_display_names, link_foreign_keys
)

CARDIOLOGY = Department(id=2, name="Cardiology", code="CARD")


def _patient(**fields):
    return Patient(id="P100", full_name="Test Patient", status="In Treatment", severity="Low", **fields)


def test_department_join_prefers_foreign_key():
    assert belongs_to_department(_patient(department="Cardiology"), CARDIOLOGY)
    assert belongs_to_department(_patient(department="Heart Unit", department_id=2), CARDIOLOGY)
    assert not belongs_to_department(_patient(department="Cardiology", department_id=3), CARDIOLOGY)


def test_staff_join_prefers_foreign_key():
    chen = StaffMember(id="S001", full_name="Dr. Michael Chen", status="On Duty")
    assert assigned_to_staff(_patient(doctor="Dr. Michael Chen"), chen)
    assert assigned_to_staff(_patient(doctor="Dr. M. Chen", doctor_id="S001"), chen)
    assert not assigned_to_staff(_patient(doctor="Dr. Michael Chen", doctor_id="S009"), chen)


def test_duplicate_display_names():
    staff = [
        StaffMember(id="S001", full_name="Dr. Alex Kim", status="On Duty"),
        StaffMember(id="S002", full_name="Dr. Alex Kim", status="Off Duty"),
        StaffMember(id="S003", full_name="Dr. Jo Park", status="On Duty"),
    ]
    assert duplicate_display_names(staff) == ["Dr. Alex Kim"]

    with pytest.raises(DuplicateDisplayNameError) as error:
        assert_unique_display_names(staff, "staff")
    assert error.value.names == ["Dr. Alex Kim"]

    assert_unique_display_names(staff[1:], "staff")


def test_link_foreign_keys_resolves_names():
    departments = [{"id": 2, "name": "Cardiology"}]
    staff = [
        {"id": "S001", "fullName": "Dr. Michael Chen", "department": "Cardiology"},
        {"id": "S002", "fullName": "Dr. Alex Kim", "department": "Cardiology"},
        {"id": "S003", "fullName": "Dr. Alex Kim", "department": "Surgery"},
    ]
    patients = [
        {"id": "P001", "department": "Cardiology", "doctor": "Dr. Michael Chen"},
        {"id": "P002", "department": "Cardiology", "doctor": "Dr. Alex Kim"},
        {"id": "P003", "department": "Cardiology", "departmentId": 9, "doctor": "Dr. Michael Chen"},
    ]

    link_foreign_keys(patients, staff, departments)

    assert patients[0]["departmentId"] == 2
    assert patients[0]["doctorId"] == "S001"
    # ambiguous doctor name stays unlinked
    assert "doctorId" not in patients[1]
    assert patients[2]["departmentId"] == 9
    assert staff[0]["departmentId"] == 2
    assert "departmentId" not in staff[2]
