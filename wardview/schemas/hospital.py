"""
Hospital Record Schemas
Raw entity records and their masked (secure) projections

Raw records carry PII and are only handed to authorized callers. Secure
projections are separate types that can only be built through their
from_* constructors, which apply the masking utilities field by field.
"""
from datetime import datetime
from typing import Any, Dict, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from wardview.utils.privacy import mask_patient_id, mask_pii, mask_text_content

PatientStatus = Literal["In Treatment", "Scheduled", "Critical", "Discharged"]
PatientSeverity = Literal["High", "Medium", "Low"]
StaffStatus = Literal["On Duty", "On Call", "Off Duty", "On Leave"]
AppointmentStatus = Literal["Scheduled", "Completed", "Cancelled", "No-show", "In Progress"]


class WardModel(BaseModel):
    """Base for all records: camelCase on the wire, immutable once built"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json")


def _with_full_name(data: Any) -> Any:
    """Fill fullName from first and last name when it is missing"""
    if isinstance(data, dict) and not (data.get("fullName") or data.get("full_name")):
        first = data.get("firstName") or data.get("first_name") or ""
        last = data.get("lastName") or data.get("last_name") or ""
        if first or last:
            data = {**data, "fullName": f"{first} {last}".strip()}
    return data


def _unique(values) -> Tuple[str, ...]:
    seen = []
    for value in values or ():
        if value not in seen:
            seen.append(value)
    return tuple(seen)


class PatientVitals(WardModel):
    """Latest vitals snapshot stored on the patient record"""
    blood_pressure: str = ""
    heart_rate: Optional[float] = None
    temperature: Optional[float] = None
    oxygen_saturation: Optional[float] = None
    weight: Optional[float] = None
    height: Optional[float] = None


class Patient(WardModel):
    """Full patient record including identity and contact fields"""
    id: str
    first_name: str = ""
    last_name: str = ""
    full_name: str = ""
    age: Optional[int] = None
    gender: str = ""
    date_of_birth: str = ""

    # Contact
    phone: str = ""
    email: str = ""
    address: str = ""
    insurance: str = ""
    emergency_contact: str = ""

    # Clinical
    department: str = ""
    department_id: Optional[int] = None
    doctor: str = ""
    doctor_id: Optional[str] = None
    admission_date: str = ""
    status: PatientStatus
    severity: PatientSeverity
    room: str = ""
    diagnosis: str = ""
    medications: Tuple[str, ...] = ()
    allergies: Tuple[str, ...] = ()
    notes: str = ""

    # Scheduling
    last_visit: str = ""
    next_appointment: str = ""

    vitals: Optional[PatientVitals] = None

    @model_validator(mode="before")
    @classmethod
    def _derive_full_name(cls, data: Any) -> Any:
        return _with_full_name(data)

    @field_validator("allergies", mode="before")
    @classmethod
    def _dedupe_allergies(cls, value):
        return _unique(value)

    @field_validator("medications", mode="before")
    @classmethod
    def _list_medications(cls, value):
        return tuple(value or ())


class SecurePatient(WardModel):
    """Patient projection safe for display: no identity or contact fields"""
    id: str
    full_name: str
    age: Optional[int] = None
    gender: str = ""
    department: str = ""
    doctor: str = ""
    status: PatientStatus
    severity: PatientSeverity
    admission_date: str = ""
    last_visit: str = ""
    next_appointment: str = ""
    room: str = ""
    diagnosis: str = ""
    vitals: Optional[PatientVitals] = None
    allergies: Tuple[str, ...] = ()
    medications: Tuple[str, ...] = ()

    @classmethod
    def from_patient(cls, patient: Patient) -> "SecurePatient":
        return cls(
            id=mask_patient_id(patient.id),
            full_name=mask_pii(patient.full_name),
            age=patient.age,
            gender=patient.gender,
            department=patient.department or "Unassigned",
            doctor=mask_pii(patient.doctor) or "Unassigned",
            status=patient.status,
            severity=patient.severity,
            admission_date=patient.admission_date,
            last_visit=patient.last_visit,
            next_appointment=patient.next_appointment,
            room=patient.room,
            diagnosis=patient.diagnosis,
            vitals=patient.vitals,
            allergies=patient.allergies,
            medications=patient.medications,
        )


class StaffMember(WardModel):
    """Full staff record"""
    id: str
    first_name: str = ""
    last_name: str = ""
    full_name: str = ""
    role: str = ""
    department: str = ""
    department_id: Optional[int] = None
    status: StaffStatus
    shift: str = ""
    experience: int = 0
    patients: int = 0
    phone: str = ""
    email: str = ""
    specialty: str = ""
    rating: float = Field(default=0, ge=0, le=5)

    @model_validator(mode="before")
    @classmethod
    def _derive_full_name(cls, data: Any) -> Any:
        return _with_full_name(data)


class SecureStaffMember(WardModel):
    """Staff projection with the display name masked; the id is kept"""
    id: str
    full_name: str
    role: str = ""
    department: str = ""
    status: StaffStatus
    shift: str = ""
    specialty: str = ""
    experience: int = 0
    patients: int = 0
    rating: float = 0

    @classmethod
    def from_staff(cls, staff: StaffMember) -> "SecureStaffMember":
        return cls(
            id=staff.id,
            full_name=mask_pii(staff.full_name),
            role=staff.role,
            department=staff.department,
            status=staff.status,
            shift=staff.shift,
            specialty=staff.specialty,
            experience=staff.experience,
            patients=staff.patients,
            rating=staff.rating,
        )


class DepartmentStaff(WardModel):
    doctors: int = 0
    nurses: int = 0
    support: int = 0


class Department(WardModel):
    """Department record; occupancy above capacity is accepted as recorded"""
    id: int
    name: str
    code: str
    total_patients: int = 0
    today_patients: int = 0
    avg_wait_time: float = 0
    satisfaction: float = Field(default=0, ge=0, le=5)
    staff: DepartmentStaff = DepartmentStaff()
    revenue: float = 0
    capacity: int = 0
    current_occupancy: int = 0
    critical_cases: int = 0


class Appointment(WardModel):
    """Scheduled, running or finished appointment"""
    id: str
    patient_id: str
    patient_name: str = ""
    doctor_id: Optional[str] = None
    doctor: str = ""
    department: str = ""
    date: str
    time: str = ""
    type: str = ""
    status: AppointmentStatus = "Scheduled"
    duration: int = 30
    wait_time: Optional[int] = None
    notes: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def _wait_time_only_when_completed(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("status", "Scheduled") != "Completed":
            data = {k: v for k, v in data.items() if k not in ("waitTime", "wait_time")}
        return data


class SecureAppointment(WardModel):
    """Appointment with patient and doctor names masked"""
    id: str
    patient_id: str
    patient_name: str = ""
    doctor: str = ""
    department: str = ""
    date: str
    time: str = ""
    type: str = ""
    status: AppointmentStatus = "Scheduled"
    duration: int = 30
    wait_time: Optional[int] = None
    notes: Optional[str] = None

    @classmethod
    def from_appointment(cls, appointment: Appointment) -> "SecureAppointment":
        return cls(
            id=appointment.id,
            patient_id=mask_patient_id(appointment.patient_id),
            patient_name=mask_pii(appointment.patient_name),
            doctor=mask_pii(appointment.doctor),
            department=appointment.department,
            date=appointment.date,
            time=appointment.time,
            type=appointment.type,
            status=appointment.status,
            duration=appointment.duration,
            wait_time=appointment.wait_time,
            notes=mask_text_content(appointment.notes) if appointment.notes else appointment.notes,
        )


class OverviewStatistics(WardModel):
    """Hospital-wide snapshot, maintained incrementally"""
    total_patients: int = 0
    active_patients: int = 0
    new_patients_today: int = 0
    total_appointments: int = 0
    today_appointments: int = 0
    completed_appointments: int = 0
    cancelled_appointments: int = 0
    pending_results: int = 0
    critical_alerts: int = 0
    total_beds: int = 0
    occupied_beds: int = 0
    available_beds: int = 0
    bed_occupancy_rate: float = 0
    total_staff: int = 0
    staff_on_duty: int = 0
    doctors_available: int = 0
    nurses_on_duty: int = 0
    average_wait_time: float = 0
    patient_satisfaction_score: float = 0
    revenue: float = 0
    expenses: float = 0
    last_updated: Optional[datetime] = None


class StaffScheduleEntry(WardModel):
    staff_id: str
    date: str
    shift: str


class StatusUpdateResult(WardModel):
    success: bool
    message: str


class StaffContact(WardModel):
    """Staff contact details, masked unless the caller role may see PII"""
    id: str
    full_name: str
    email: str = ""
    phone: str = ""
