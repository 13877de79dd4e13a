"""
SQL Data Source
Raw hospital collections read from and written to the SQLAlchemy store
"""
import copy
import logging
from collections import defaultdict
from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from wardview.models.hospital import (
    AppointmentRecord, DepartmentRecord, PatientRecord, StaffRecord, StaffScheduleRecord
)
from wardview.models.metrics import (
    AggregateDocument, OverviewRecord, TimelineEventRecord, VitalAlertRecord, VitalReadingRecord
)
from wardview.schemas.hospital import (
    Appointment, Department, OverviewStatistics, Patient, StaffMember, StaffScheduleEntry
)
from wardview.schemas.views import (
    AppointmentData, AppointmentType, DailyAppointment, Demographics, Financial, Inventory,
    MonthlyAppointment, PatientVitalHistory, Quality, RecentActivity, TimelineEvent,
    VitalSignAlert
)
from wardview.services.data_sources import DataSource, derive_appointments_from_patients
from wardview.services.errors import DuplicateRecordError
from wardview.services.joins import assert_unique_display_names, link_foreign_keys
from wardview.utils.dates import parse_date

logger = logging.getLogger(__name__)

WEEK_DAYS = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]

# Aggregate documents copied from a dataset at seeding time
AGGREGATE_KEYS = ["financial", "quality", "demographics", "inventory", "recentActivities"]


class SQLDataSource(DataSource):
    """Data source over a SQLAlchemy session"""

    def __init__(self, db: Session):
        self.db = db

    async def ping(self) -> bool:
        self.db.query(DepartmentRecord.id).limit(1).all()
        return True

    def _aggregate(self, name: str) -> Any:
        document = self.db.query(AggregateDocument).filter(AggregateDocument.name == name).first()
        return document.body if document else None

    # Patients

    async def list_patients(self) -> List[Patient]:
        rows = self.db.query(PatientRecord).order_by(PatientRecord.id).all()
        return [Patient.model_validate(row.as_dict()) for row in rows]

    async def get_patient(self, patient_id: str) -> Optional[Patient]:
        row = self.db.query(PatientRecord).filter(PatientRecord.id == patient_id).first()
        return Patient.model_validate(row.as_dict()) if row else None

    def _department_keys(self) -> List[Dict[str, Any]]:
        return [{"id": i, "name": name} for i, name in self.db.query(DepartmentRecord.id, DepartmentRecord.name)]

    def _staff_keys(self) -> List[Dict[str, Any]]:
        return [{"id": i, "fullName": name} for i, name in self.db.query(StaffRecord.id, StaffRecord.full_name)]

    async def save_patient(self, patient: Patient) -> Patient:
        """Insert or replace a patient record, resolving department and doctor keys"""
        document = patient.model_dump(by_alias=True, mode="json")
        link_foreign_keys([document], self._staff_keys(), self._department_keys())
        patient = Patient.model_validate(document)
        self.db.merge(PatientRecord(**patient.model_dump(mode="json")))
        self.db.commit()
        return patient

    async def delete_patient(self, patient_id: str) -> bool:
        deleted = self.db.query(PatientRecord).filter(PatientRecord.id == patient_id).delete()
        self.db.commit()
        return deleted > 0

    # Staff

    async def list_staff(self) -> List[StaffMember]:
        rows = self.db.query(StaffRecord).order_by(StaffRecord.id).all()
        return [StaffMember.model_validate(row.as_dict()) for row in rows]

    async def get_staff(self, staff_id: str) -> Optional[StaffMember]:
        row = self.db.query(StaffRecord).filter(StaffRecord.id == staff_id).first()
        return StaffMember.model_validate(row.as_dict()) if row else None

    async def save_staff(self, staff: StaffMember) -> StaffMember:
        document = staff.model_dump(by_alias=True, mode="json")
        link_foreign_keys([], [document], self._department_keys())
        staff = StaffMember.model_validate(document)
        self.db.merge(StaffRecord(**staff.model_dump(mode="json")))
        self.db.commit()
        return staff

    async def delete_staff(self, staff_id: str) -> bool:
        deleted = self.db.query(StaffRecord).filter(StaffRecord.id == staff_id).delete()
        self.db.commit()
        return deleted > 0

    async def update_staff_status(self, staff_id: str, status: str) -> Optional[StaffMember]:
        row = self.db.query(StaffRecord).filter(StaffRecord.id == staff_id).first()
        if not row:
            return None
        # validate before touching the row
        updated = StaffMember.model_validate({**row.as_dict(), "status": status})
        row.status = updated.status
        self.db.commit()
        return updated

    # Departments

    async def list_departments(self) -> List[Department]:
        rows = self.db.query(DepartmentRecord).order_by(DepartmentRecord.id).all()
        return [Department.model_validate(row.as_dict()) for row in rows]

    async def get_department(self, department_id: int) -> Optional[Department]:
        row = self.db.query(DepartmentRecord).filter(DepartmentRecord.id == department_id).first()
        return Department.model_validate(row.as_dict()) if row else None

    async def save_department(self, department: Department) -> Department:
        self.db.merge(DepartmentRecord(**department.model_dump(mode="json")))
        self.db.commit()
        return department

    async def delete_department(self, department_id: int) -> bool:
        deleted = self.db.query(DepartmentRecord).filter(DepartmentRecord.id == department_id).delete()
        self.db.commit()
        return deleted > 0

    # Appointments

    async def list_appointments(self) -> List[Appointment]:
        rows = self.db.query(AppointmentRecord).order_by(AppointmentRecord.id).all()
        return [Appointment.model_validate(row.as_dict()) for row in rows]

    async def get_appointment(self, appointment_id: str) -> Optional[Appointment]:
        row = self.db.query(AppointmentRecord).filter(AppointmentRecord.id == appointment_id).first()
        return Appointment.model_validate(row.as_dict()) if row else None

    async def insert_appointment(self, appointment: Appointment) -> Appointment:
        exists = self.db.query(AppointmentRecord.id).filter(
            AppointmentRecord.id == appointment.id
        ).first()
        if exists:
            raise DuplicateRecordError("Appointment", appointment.id)
        self.db.add(AppointmentRecord(**appointment.model_dump(mode="json")))
        self.db.commit()
        return appointment

    async def replace_appointment(self, appointment: Appointment) -> Appointment:
        values = appointment.model_dump(mode="json")
        row = self.db.query(AppointmentRecord).filter(AppointmentRecord.id == appointment.id).first()
        if row is None:
            self.db.add(AppointmentRecord(**values))
        else:
            for key, value in values.items():
                setattr(row, key, value)
        self.db.commit()
        return appointment

    async def delete_appointment(self, appointment_id: str) -> bool:
        deleted = self.db.query(AppointmentRecord).filter(AppointmentRecord.id == appointment_id).delete()
        self.db.commit()
        return deleted > 0

    # Overview

    async def get_overview(self) -> Optional[OverviewStatistics]:
        row = self.db.query(OverviewRecord).first()
        return OverviewStatistics.model_validate(row.as_dict()) if row else None

    async def save_overview(self, overview: OverviewStatistics) -> OverviewStatistics:
        values = overview.model_dump()
        values["last_updated"] = values.get("last_updated") or datetime.utcnow()
        row = self.db.query(OverviewRecord).first()
        if row is None:
            self.db.add(OverviewRecord(id=1, **values))
        else:
            for key, value in values.items():
                setattr(row, key, value)
        self.db.commit()
        return overview

    # Aggregates

    async def get_financial(self) -> Financial:
        return Financial.model_validate(self._aggregate("financial") or {})

    async def get_quality(self) -> Quality:
        return Quality.model_validate(self._aggregate("quality") or {})

    async def get_demographics(self) -> Demographics:
        return Demographics.model_validate(self._aggregate("demographics") or {})

    async def get_inventory(self) -> Inventory:
        return Inventory.model_validate(self._aggregate("inventory") or {})

    async def get_recent_activities(self) -> List[RecentActivity]:
        return [RecentActivity.model_validate(a) for a in self._aggregate("recentActivities") or []]

    async def get_appointment_statistics(self) -> AppointmentData:
        """Trends from the stored document; type and weekday breakdowns from appointment rows"""
        trends = [MonthlyAppointment.model_validate(m) for m in self._aggregate("appointmentTrends") or []]

        total = self.db.query(func.count(AppointmentRecord.id)).scalar() or 0
        type_rows = self.db.query(
            AppointmentRecord.type,
            func.count(AppointmentRecord.id),
            func.avg(AppointmentRecord.duration),
        ).group_by(AppointmentRecord.type).order_by(func.count(AppointmentRecord.id).desc()).all()

        by_type = [
            AppointmentType(
                type=type_name or "Other",
                count=count,
                percentage=round(count * 100.0 / total, 1) if total else 0,
                avg_duration=round(avg_duration or 0),
            )
            for type_name, count, avg_duration in type_rows
        ]

        return AppointmentData(
            monthly_trends=trends,
            weekly_schedule=self._weekly_schedule(),
            by_type=by_type,
        )

    def _weekly_schedule(self) -> List[DailyAppointment]:
        counts = defaultdict(lambda: defaultdict(int))
        waits = defaultdict(list)

        for row in self.db.query(AppointmentRecord).all():
            parsed = parse_date(row.date)
            if parsed is None:
                continue
            day = WEEK_DAYS[parsed.weekday()]
            counts[day]["scheduled"] += 1
            if row.status == "Completed":
                counts[day]["completed"] += 1
                if row.wait_time is not None:
                    waits[day].append(row.wait_time)
            elif row.status == "In Progress":
                counts[day]["in_progress"] += 1
            elif row.status == "Cancelled":
                counts[day]["cancelled"] += 1

        return [
            DailyAppointment(
                day=day,
                scheduled=counts[day]["scheduled"],
                completed=counts[day]["completed"],
                in_progress=counts[day]["in_progress"],
                cancelled=counts[day]["cancelled"],
                wait_time=round(sum(waits[day]) / len(waits[day])) if waits[day] else 0,
            )
            for day in WEEK_DAYS
        ]

    # Vitals and timeline

    async def get_vital_history(self, patient_id: str) -> List[PatientVitalHistory]:
        rows = self.db.query(VitalReadingRecord).filter(
            VitalReadingRecord.patient_id == patient_id
        ).order_by(VitalReadingRecord.date, VitalReadingRecord.id).all()
        return [PatientVitalHistory.model_validate(row.as_dict()) for row in rows]

    async def get_vital_alerts(self, patient_id: str) -> List[VitalSignAlert]:
        rows = self.db.query(VitalAlertRecord).filter(
            VitalAlertRecord.patient_id == patient_id
        ).order_by(VitalAlertRecord.id).all()
        return [VitalSignAlert.model_validate(row.as_dict()) for row in rows]

    async def list_vital_alert_ids(self) -> List[str]:
        return [alert_id for (alert_id,) in self.db.query(VitalAlertRecord.id).all()]

    async def list_vital_alerts(self) -> List[VitalSignAlert]:
        rows = self.db.query(VitalAlertRecord).order_by(VitalAlertRecord.id).all()
        return [VitalSignAlert.model_validate(row.as_dict()) for row in rows]

    async def record_vitals(self, patient_id, reading, history, alerts):
        row = self.db.query(PatientRecord).filter(PatientRecord.id == patient_id).first()
        row.vitals = reading.model_dump(mode="json")
        self.db.add(VitalReadingRecord(patient_id=patient_id, **history.model_dump(mode="json")))
        for alert in alerts:
            self.db.add(VitalAlertRecord(**alert.model_dump(mode="json")))
        self.db.commit()
        return list(alerts)

    async def get_timeline(self, patient_id: str) -> List[TimelineEvent]:
        rows = self.db.query(TimelineEventRecord).filter(
            TimelineEventRecord.patient_id == patient_id
        ).order_by(TimelineEventRecord.date, TimelineEventRecord.id).all()
        return [TimelineEvent.model_validate(row.as_dict()) for row in rows]

    # Scheduling

    async def save_staff_schedule(self, entries: List[StaffScheduleEntry]) -> int:
        for entry in entries:
            row = self.db.query(StaffScheduleRecord).filter(
                StaffScheduleRecord.staff_id == entry.staff_id,
                StaffScheduleRecord.date == entry.date,
            ).first()
            if row is None:
                self.db.add(StaffScheduleRecord(**entry.model_dump()))
            else:
                row.shift = entry.shift
        self.db.commit()
        return len(entries)

    async def get_staff_schedule(self, start_date: str, end_date: str) -> List[StaffScheduleEntry]:
        rows = self.db.query(StaffScheduleRecord).filter(
            StaffScheduleRecord.date >= start_date,
            StaffScheduleRecord.date <= end_date,
        ).order_by(StaffScheduleRecord.date, StaffScheduleRecord.staff_id).all()
        return [StaffScheduleEntry.model_validate(row.as_dict()) for row in rows]


def seed_database(db: Session, dataset: Dict[str, Any]) -> bool:
    """Load a camelCase dataset into an empty store.

    Department and doctor foreign keys are resolved from names on the way in.
    Returns False without writing when the store already holds departments.
    """
    if db.query(DepartmentRecord.id).first():
        logger.info("Database already seeded, skipping")
        return False

    data = copy.deepcopy(dataset)
    assert_unique_display_names(
        [Department.model_validate(d) for d in data.get("departments", [])], "departments", attribute="name"
    )
    link_foreign_keys(data.get("patients", []), data.get("staff", []), data.get("departments", []))

    departments = [Department.model_validate(d) for d in data.get("departments", [])]
    staff = [StaffMember.model_validate(s) for s in data.get("staff", [])]
    patients = [Patient.model_validate(p) for p in data.get("patients", [])]

    db.add_all(DepartmentRecord(**d.model_dump(mode="json")) for d in departments)
    db.add_all(StaffRecord(**s.model_dump(mode="json")) for s in staff)
    db.add_all(PatientRecord(**p.model_dump(mode="json")) for p in patients)

    records = data.get("appointmentRecords")
    if records is None:
        appointments = derive_appointments_from_patients(patients)
    else:
        appointments = [Appointment.model_validate(a) for a in records]
    db.add_all(AppointmentRecord(**a.model_dump(mode="json")) for a in appointments)

    if data.get("overview") is not None:
        overview = OverviewStatistics.model_validate(data["overview"]).model_dump()
        overview["last_updated"] = overview["last_updated"] or datetime.utcnow()
        db.add(OverviewRecord(id=1, **overview))

    for patient_id, readings in (data.get("patientVitals") or {}).items():
        for reading in readings:
            history = PatientVitalHistory.model_validate(reading)
            db.add(VitalReadingRecord(patient_id=patient_id, **history.model_dump(mode="json")))

    for alert in data.get("vitalSignsAlerts", []):
        db.add(VitalAlertRecord(**VitalSignAlert.model_validate(alert).model_dump(mode="json")))

    for patient_id, events in (data.get("patientTimelines") or {}).items():
        for event in events:
            timeline_event = TimelineEvent.model_validate(event)
            db.add(TimelineEventRecord(patient_id=patient_id, **timeline_event.model_dump(mode="json")))

    for key in AGGREGATE_KEYS:
        if key in data:
            db.add(AggregateDocument(name=key, body=data[key]))
    trends = (data.get("appointments") or {}).get("monthlyTrends")
    if trends is not None:
        db.add(AggregateDocument(name="appointmentTrends", body=trends))

    db.commit()
    logger.info(
        f"Seeded database: {len(departments)} departments, {len(staff)} staff, "
        f"{len(patients)} patients, {len(appointments)} appointments"
    )
    return True
