"""
Raw Data Sources
The interface behind the read-model, and the static in-memory dataset

A data source returns validated raw records (PII included). It does no
masking and no cross-collection joins; that is the read-model's job.
"""
import copy
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from wardview.schemas.hospital import (
    Appointment, Department, OverviewStatistics, Patient, PatientVitals,
    StaffMember, StaffScheduleEntry
)
from wardview.schemas.views import (
    AppointmentData, Demographics, Financial, Inventory, PatientVitalHistory,
    Quality, RecentActivity, TimelineEvent, VitalSignAlert
)
from wardview.services.errors import DuplicateRecordError

logger = logging.getLogger(__name__)


class DataSource(ABC):
    """Asynchronous access to raw hospital collections"""

    # True when the backing service generates ids and maintains the
    # overview counters itself on writes
    manages_writes = False

    async def ping(self) -> bool:
        return True

    # Entities
    @abstractmethod
    async def list_patients(self) -> List[Patient]: ...

    @abstractmethod
    async def get_patient(self, patient_id: str) -> Optional[Patient]: ...

    @abstractmethod
    async def list_staff(self) -> List[StaffMember]: ...

    @abstractmethod
    async def get_staff(self, staff_id: str) -> Optional[StaffMember]: ...

    @abstractmethod
    async def update_staff_status(self, staff_id: str, status: str) -> Optional[StaffMember]: ...

    @abstractmethod
    async def list_departments(self) -> List[Department]: ...

    @abstractmethod
    async def get_department(self, department_id: int) -> Optional[Department]: ...

    @abstractmethod
    async def list_appointments(self) -> List[Appointment]: ...

    @abstractmethod
    async def get_appointment(self, appointment_id: str) -> Optional[Appointment]: ...

    @abstractmethod
    async def insert_appointment(self, appointment: Appointment) -> Appointment: ...

    @abstractmethod
    async def replace_appointment(self, appointment: Appointment) -> Appointment: ...

    # Aggregates
    @abstractmethod
    async def get_overview(self) -> Optional[OverviewStatistics]: ...

    @abstractmethod
    async def save_overview(self, overview: OverviewStatistics) -> OverviewStatistics: ...

    @abstractmethod
    async def get_financial(self) -> Financial: ...

    @abstractmethod
    async def get_quality(self) -> Quality: ...

    @abstractmethod
    async def get_demographics(self) -> Demographics: ...

    @abstractmethod
    async def get_inventory(self) -> Inventory: ...

    @abstractmethod
    async def get_recent_activities(self) -> List[RecentActivity]: ...

    @abstractmethod
    async def get_appointment_statistics(self) -> AppointmentData:
        """Monthly trends, weekly schedule and type breakdown; no appointment lists"""

    # Per-patient clinical series
    @abstractmethod
    async def get_vital_history(self, patient_id: str) -> List[PatientVitalHistory]: ...

    @abstractmethod
    async def get_vital_alerts(self, patient_id: str) -> List[VitalSignAlert]: ...

    @abstractmethod
    async def list_vital_alert_ids(self) -> List[str]: ...

    @abstractmethod
    async def record_vitals(
        self, patient_id: str, reading: PatientVitals, history: PatientVitalHistory,
        alerts: List[VitalSignAlert]
    ) -> List[VitalSignAlert]: ...

    @abstractmethod
    async def get_timeline(self, patient_id: str) -> List[TimelineEvent]: ...

    # Scheduling
    @abstractmethod
    async def save_staff_schedule(self, entries: List[StaffScheduleEntry]) -> int: ...

    @abstractmethod
    async def get_staff_schedule(self, start_date: str, end_date: str) -> List[StaffScheduleEntry]: ...


def derive_appointments_from_patients(patients: List[Patient]) -> List[Appointment]:
    """Build appointment records from patients' last visit and next appointment.

    Used when a dataset ships no appointment records. Times and durations are
    derived from the patient id, so the same patient always gets the same slot.
    """
    appointments = []
    for patient in patients:
        seed = sum(ord(char) for char in patient.id)

        if patient.last_visit:
            hour, minute = 8 + seed % 8, (seed * 3) % 60
            appointments.append(Appointment(
                id=f"APT-{patient.id}-LV",
                patient_id=patient.id,
                patient_name=patient.full_name,
                doctor_id=patient.doctor_id,
                doctor=patient.doctor,
                department=patient.department,
                date=patient.last_visit,
                time=f"{hour:02d}:{minute:02d}",
                type="Check-up",
                status="Completed",
                duration=30 + seed % 30,
                notes=f"Regular check-up for {patient.diagnosis}",
            ))

        if patient.next_appointment and patient.next_appointment != "TBD":
            hour, minute = 10 + seed % 6, (seed * 7) % 60
            appointments.append(Appointment(
                id=f"APT-{patient.id}-NA",
                patient_id=patient.id,
                patient_name=patient.full_name,
                doctor_id=patient.doctor_id,
                doctor=patient.doctor,
                department=patient.department,
                date=patient.next_appointment,
                time=f"{hour:02d}:{minute:02d}",
                type="Follow-up",
                status="Scheduled",
                duration=30 + seed % 45,
                notes=f"Follow-up for {patient.diagnosis}",
            ))
    return appointments


class StaticDataSource(DataSource):
    """In-memory dataset in the dashboard's camelCase JSON shape.

    The dataset is copied on construction; writes change this instance only.
    """

    def __init__(self, dataset: Dict[str, Any]):
        data = copy.deepcopy(dataset)

        self._patients = {p["id"]: Patient.model_validate(p) for p in data.get("patients", [])}
        self._staff = {s["id"]: StaffMember.model_validate(s) for s in data.get("staff", [])}
        self._departments = {d["id"]: Department.model_validate(d) for d in data.get("departments", [])}

        appointment_data = data.get("appointments") or {}
        records = data.get("appointmentRecords")
        if records is None:
            appointments = derive_appointments_from_patients(list(self._patients.values()))
        else:
            appointments = [Appointment.model_validate(a) for a in records]
        self._appointments = {a.id: a for a in appointments}
        self._appointment_statistics = AppointmentData.model_validate({
            "monthlyTrends": appointment_data.get("monthlyTrends", []),
            "weeklySchedule": appointment_data.get("weeklySchedule", []),
            "byType": appointment_data.get("byType", []),
        })

        overview = data.get("overview")
        self._overview = OverviewStatistics.model_validate(overview) if overview is not None else None
        self._financial = Financial.model_validate(data.get("financial") or {})
        self._quality = Quality.model_validate(data.get("quality") or {})
        self._demographics = Demographics.model_validate(data.get("demographics") or {})
        self._inventory = Inventory.model_validate(data.get("inventory") or {})
        self._activities = [RecentActivity.model_validate(a) for a in data.get("recentActivities", [])]

        self._vital_history = {
            patient_id: [PatientVitalHistory.model_validate(v) for v in readings]
            for patient_id, readings in (data.get("patientVitals") or {}).items()
        }
        self._alerts = [VitalSignAlert.model_validate(a) for a in data.get("vitalSignsAlerts", [])]
        self._timelines = {
            patient_id: [TimelineEvent.model_validate(e) for e in events]
            for patient_id, events in (data.get("patientTimelines") or {}).items()
        }
        self._schedule: Dict[tuple, StaffScheduleEntry] = {}

        logger.debug(
            f"Static dataset loaded: {len(self._patients)} patients, {len(self._staff)} staff, "
            f"{len(self._departments)} departments, {len(self._appointments)} appointments"
        )

    async def list_patients(self) -> List[Patient]:
        return list(self._patients.values())

    async def get_patient(self, patient_id: str) -> Optional[Patient]:
        return self._patients.get(patient_id)

    async def list_staff(self) -> List[StaffMember]:
        return list(self._staff.values())

    async def get_staff(self, staff_id: str) -> Optional[StaffMember]:
        return self._staff.get(staff_id)

    async def update_staff_status(self, staff_id: str, status: str) -> Optional[StaffMember]:
        staff = self._staff.get(staff_id)
        if staff is None:
            return None
        updated = StaffMember.model_validate({**staff.model_dump(), "status": status})
        self._staff[staff_id] = updated
        return updated

    async def list_departments(self) -> List[Department]:
        return list(self._departments.values())

    async def get_department(self, department_id: int) -> Optional[Department]:
        return self._departments.get(department_id)

    async def list_appointments(self) -> List[Appointment]:
        return list(self._appointments.values())

    async def get_appointment(self, appointment_id: str) -> Optional[Appointment]:
        return self._appointments.get(appointment_id)

    async def insert_appointment(self, appointment: Appointment) -> Appointment:
        if appointment.id in self._appointments:
            raise DuplicateRecordError("Appointment", appointment.id)
        self._appointments[appointment.id] = appointment
        return appointment

    async def replace_appointment(self, appointment: Appointment) -> Appointment:
        self._appointments[appointment.id] = appointment
        return appointment

    async def get_overview(self) -> Optional[OverviewStatistics]:
        return self._overview

    async def save_overview(self, overview: OverviewStatistics) -> OverviewStatistics:
        self._overview = overview
        return overview

    async def get_financial(self) -> Financial:
        return self._financial

    async def get_quality(self) -> Quality:
        return self._quality

    async def get_demographics(self) -> Demographics:
        return self._demographics

    async def get_inventory(self) -> Inventory:
        return self._inventory

    async def get_recent_activities(self) -> List[RecentActivity]:
        return list(self._activities)

    async def get_appointment_statistics(self) -> AppointmentData:
        return self._appointment_statistics

    async def get_vital_history(self, patient_id: str) -> List[PatientVitalHistory]:
        return list(self._vital_history.get(patient_id, []))

    async def get_vital_alerts(self, patient_id: str) -> List[VitalSignAlert]:
        return [alert for alert in self._alerts if alert.patient_id == patient_id]

    async def list_vital_alert_ids(self) -> List[str]:
        return [alert.id for alert in self._alerts]

    async def record_vitals(self, patient_id, reading, history, alerts):
        patient = self._patients[patient_id]
        self._patients[patient_id] = patient.model_copy(update={"vitals": reading})
        self._vital_history.setdefault(patient_id, []).append(history)
        self._alerts.extend(alerts)
        return list(alerts)

    async def get_timeline(self, patient_id: str) -> List[TimelineEvent]:
        return list(self._timelines.get(patient_id, []))

    async def save_staff_schedule(self, entries: List[StaffScheduleEntry]) -> int:
        for entry in entries:
            self._schedule[(entry.staff_id, entry.date)] = entry
        return len(entries)

    async def get_staff_schedule(self, start_date: str, end_date: str) -> List[StaffScheduleEntry]:
        return sorted(
            (e for e in self._schedule.values() if start_date <= e.date <= end_date),
            key=lambda e: (e.date, e.staff_id),
        )
