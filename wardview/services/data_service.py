"""
Dashboard Read-Model Service
Joins raw hospital collections and masks PII before anything leaves the service

Every accessor fetches from a DataSource, joins across collections, masks
and returns frozen view objects. Lookups that miss return None or [], never
raise. Only non-PII aggregates go through the response cache.
"""
from collections import Counter
from datetime import date
from functools import wraps
from typing import Any, Awaitable, Callable, Dict, Iterable, List, Optional
import asyncio
import logging
import math

from pydantic import TypeAdapter

from wardview.schemas.hospital import (
    Appointment, Department, OverviewStatistics, Patient, PatientVitals, SecureAppointment,
    SecurePatient, SecureStaffMember, StaffContact, StaffMember, StaffScheduleEntry,
    StatusUpdateResult
)
from wardview.schemas.views import (
    AppointmentData, ChartSlice, DepartmentCount, DepartmentQualityView, Demographics,
    DemographicsChart, EnhancedDepartment, Financial, FinancialShare, Inventory,
    PatientVitalHistory, PatientVitalsBundle, Quality, ReadmissionMetric, RecentActivity,
    RecordedVitals, RoleCount, SatisfactionMetric, TimelineEvent, VitalSignAlert, WaitTimeMetric
)
from wardview.services.cache import ResponseCache
from wardview.services.data_sources import DataSource
from wardview.services.errors import DataSourceError
from wardview.services.joins import (
    assigned_to_staff, belongs_to_department, duplicate_display_names, find_by_department
)
from wardview.services.overview import OverviewAccumulator
from wardview.services.vitals import check_vital_signs_alerts
from wardview.utils.dates import ensure_number, get_today_formatted
from wardview.utils.identifiers import next_sequential_id
from wardview.utils.privacy import (
    conditionally_mask, mask_email, mask_patient_id, mask_phone_number, mask_pii,
    mask_staff_id, mask_text_content
)

logger = logging.getLogger(__name__)
audit_logger = logging.getLogger("audit")

APPOINTMENT_ID_PREFIX = "APT"

# Cache keys
OVERVIEW = "overview"
DEPARTMENTS = "departments"
FINANCIAL = "financial"
QUALITY = "quality"
DEMOGRAPHICS = "demographics"
INVENTORY = "inventory"
APPOINTMENT_STATISTICS = "appointment_statistics"
STAFF_BY_ROLE = "staff_count_by_role"
STAFF_BY_DEPARTMENT = "staff_count_by_department"

UPCOMING_STATUSES = ("Scheduled", "In Progress")


def logs_source_errors(method):
    """Log data source failures with the failing operation, then re-raise"""
    @wraps(method)
    async def wrapper(self, *args, **kwargs):
        try:
            return await method(self, *args, **kwargs)
        except DataSourceError as e:
            logger.error(f"DataService.{method.__name__} failed: {str(e)}")
            raise
    return wrapper


def numeric_value(value: Any) -> Optional[float]:
    """Value as a number when it is one (or a numeric string), else None"""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return value if math.isfinite(value) else None
    if isinstance(value, str) and value.strip():
        try:
            number = float(value)
        except ValueError:
            return None
        return number if math.isfinite(number) else None
    return None


def merge_payload(model, current, payload: Dict[str, Any]) -> Dict[str, Any]:
    """Overlay a partial payload (snake_case or camelCase keys) on a record"""
    aliases = {name: field.alias or name for name, field in model.model_fields.items()}
    aliases.update({alias: alias for alias in aliases.values()})

    merged = current.model_dump(by_alias=True)
    for key, value in payload.items():
        merged[aliases.get(key, key)] = value
    return merged


def _secure_alert(alert: VitalSignAlert) -> VitalSignAlert:
    return alert.model_copy(update={
        "patient_id": mask_patient_id(alert.patient_id),
        "message": mask_text_content(alert.message),
    })


def _appointment_order(appointment) -> tuple:
    return appointment.date, appointment.time


class DataService:
    """Read-model over a raw data source"""

    def __init__(
        self,
        source: DataSource,
        cache: Optional[ResponseCache] = None,
        accumulator: Optional[OverviewAccumulator] = None,
    ):
        self.source = source
        self.cache = cache
        self.accumulator = accumulator or OverviewAccumulator()
        self._connected = False
        self._connection_checked = False

    async def check_connection(self, force: bool = False) -> bool:
        """Probe the data source once; later calls reuse the result unless forced"""
        if self._connection_checked and not force:
            return self._connected

        try:
            self._connected = await self.source.ping()
        except Exception as e:
            logger.warning(f"Data source unavailable: {str(e)}")
            self._connected = False

        self._connection_checked = True
        logger.info(f"Data source connection status: {'Connected' if self._connected else 'Disconnected'}")
        return self._connected

    async def _cached(self, key: str, value_type: Any, loader: Callable[[], Awaitable[Any]]):
        """Serve an aggregate from the cache, loading and storing it on a miss"""
        adapter = TypeAdapter(value_type)
        if self.cache is not None:
            hit = self.cache.get(key)
            if hit is not None:
                return adapter.validate_json(hit)

        value = await loader()
        if self.cache is not None and value is not None:
            self.cache.set(key, adapter.dump_json(value, by_alias=True).decode())
        return value

    def invalidate(self, *keys: str):
        """Drop cached aggregates after a write"""
        if self.cache is None:
            return
        for key in keys:
            self.cache.invalidate(key)

    # Aggregates

    @logs_source_errors
    async def get_overview(self) -> Optional[OverviewStatistics]:
        return await self._cached(OVERVIEW, Optional[OverviewStatistics], self.source.get_overview)

    @logs_source_errors
    async def get_demographics(self) -> Demographics:
        return await self._cached(DEMOGRAPHICS, Demographics, self.source.get_demographics)

    async def get_demographics_mapped(self) -> DemographicsChart:
        """Demographics reshaped into name/value chart slices"""
        demographics = await self.get_demographics()
        return DemographicsChart(
            age=[
                ChartSlice(name=item.label or item.age_group, value=item.count,
                           percentage=item.percentage, color=item.color)
                for item in demographics.by_age
            ],
            gender=[
                ChartSlice(name=item.gender, value=item.count, percentage=item.percentage, color=item.color)
                for item in demographics.by_gender
            ],
            insurance=[
                ChartSlice(name=item.type, value=item.count, percentage=item.percentage, color=item.color)
                for item in demographics.by_insurance
            ],
        )

    @logs_source_errors
    async def get_departments(self) -> List[Department]:
        return await self._cached(DEPARTMENTS, List[Department], self.source.list_departments)

    @logs_source_errors
    async def get_department_by_id(self, department_id: int) -> Optional[Department]:
        return await self.source.get_department(department_id)

    @logs_source_errors
    async def get_financial_data(self) -> Financial:
        return await self._cached(FINANCIAL, Financial, self.source.get_financial)

    @logs_source_errors
    async def get_quality_metrics(self) -> Quality:
        return await self._cached(QUALITY, Quality, self.source.get_quality)

    @logs_source_errors
    async def get_inventory(self) -> Inventory:
        return await self._cached(INVENTORY, Inventory, self.source.get_inventory)

    @logs_source_errors
    async def get_recent_activities(self) -> List[RecentActivity]:
        """Activity feed with names and ids in messages masked"""
        activities = await self.source.get_recent_activities()
        return [
            activity.model_copy(update={"message": mask_text_content(activity.message)})
            for activity in activities
        ]

    # Patients

    @logs_source_errors
    async def get_secure_patients(self) -> List[SecurePatient]:
        patients = await self.source.list_patients()
        return [SecurePatient.from_patient(patient) for patient in patients]

    @logs_source_errors
    async def get_secure_patient_by_id(self, patient_id: str) -> Optional[SecurePatient]:
        patient = await self.source.get_patient(patient_id)
        return SecurePatient.from_patient(patient) if patient else None

    @logs_source_errors
    async def get_patient_by_id(self, patient_id: str) -> Optional[Patient]:
        """Full patient record including PII, for authorized callers only"""
        patient = await self.source.get_patient(patient_id)
        if patient:
            audit_logger.info(f"Raw patient record read: {mask_patient_id(patient_id)}")
        return patient

    @logs_source_errors
    async def get_secure_patients_by_department(self, department_id: int) -> List[SecurePatient]:
        department, patients = await asyncio.gather(
            self.source.get_department(department_id),
            self.source.list_patients(),
        )
        if department is None:
            return []
        return [
            SecurePatient.from_patient(patient)
            for patient in patients
            if belongs_to_department(patient, department)
        ]

    @logs_source_errors
    async def get_patients_by_staff_id(self, staff_id: str) -> List[SecurePatient]:
        """Patients under the care of a staff member"""
        staff, patients = await asyncio.gather(
            self.source.get_staff(staff_id),
            self.source.list_patients(),
        )
        if staff is None:
            return []

        if any(patient.doctor_id is None for patient in patients):
            all_staff = await self.source.list_staff()
            if staff.full_name in duplicate_display_names(all_staff):
                logger.warning(
                    f"Staff display name shared by several members; "
                    f"name-joined patients of {staff_id} may be misattributed"
                )

        return [
            SecurePatient.from_patient(patient)
            for patient in patients
            if assigned_to_staff(patient, staff)
        ]

    @logs_source_errors
    async def get_patient_vitals(self, patient_id: str) -> Optional[PatientVitalsBundle]:
        """Vital history, latest snapshot and alerts; None for an unknown patient"""
        patient = await self.source.get_patient(patient_id)
        if patient is None:
            return None

        history, alerts = await asyncio.gather(
            self.source.get_vital_history(patient_id),
            self.source.get_vital_alerts(patient_id),
        )
        return PatientVitalsBundle(
            vitals=history,
            current_reading=patient.vitals,
            alerts=[_secure_alert(alert) for alert in alerts],
        )

    @logs_source_errors
    async def get_patient_timeline(self, patient_id: str) -> List[TimelineEvent]:
        events = await self.source.get_timeline(patient_id)
        return [
            event.model_copy(update={"description": mask_text_content(event.description)})
            for event in events
        ]

    # Staff

    @logs_source_errors
    async def get_secure_staff(self) -> List[SecureStaffMember]:
        staff = await self.source.list_staff()
        return [SecureStaffMember.from_staff(member) for member in staff]

    @logs_source_errors
    async def get_secure_staff_by_id(self, staff_id: str) -> Optional[SecureStaffMember]:
        staff = await self.source.get_staff(staff_id)
        return SecureStaffMember.from_staff(staff) if staff else None

    @logs_source_errors
    async def get_staff_by_id(self, staff_id: str) -> Optional[StaffMember]:
        """Full staff record including contact details"""
        staff = await self.source.get_staff(staff_id)
        if staff:
            audit_logger.info(f"Raw staff record read: {mask_staff_id(staff_id)}")
        return staff

    @logs_source_errors
    async def get_staff_contact(self, staff_id: str, role: Optional[str] = None) -> Optional[StaffContact]:
        """Contact card; raw for PII viewer roles, masked for everyone else"""
        staff = await self.source.get_staff(staff_id)
        if staff is None:
            return None
        return StaffContact(
            id=staff.id,
            full_name=conditionally_mask(staff.full_name, mask_pii, role),
            email=conditionally_mask(staff.email, mask_email, role),
            phone=conditionally_mask(staff.phone, mask_phone_number, role),
        )

    @logs_source_errors
    async def get_secure_staff_by_department(self, department_id: int) -> List[SecureStaffMember]:
        department, staff = await asyncio.gather(
            self.source.get_department(department_id),
            self.source.list_staff(),
        )
        if department is None:
            return []
        return [
            SecureStaffMember.from_staff(member)
            for member in staff
            if belongs_to_department(member, department)
        ]

    async def get_staff_count_by_role(self) -> List[RoleCount]:
        """Headcount per role family (first word of the role)"""
        async def count():
            staff = await self.source.list_staff()
            counts = Counter((member.role.split() or ["Unknown"])[0] for member in staff)
            return [RoleCount(role=role, count=n) for role, n in counts.items()]

        return await self._cached(STAFF_BY_ROLE, List[RoleCount], count)

    async def get_staff_count_by_department(self) -> List[DepartmentCount]:
        async def count():
            staff = await self.source.list_staff()
            counts = Counter(member.department for member in staff)
            return [DepartmentCount(department=name, count=n) for name, n in counts.items()]

        return await self._cached(STAFF_BY_DEPARTMENT, List[DepartmentCount], count)

    @logs_source_errors
    async def get_staff_schedule(self, start_date: str, end_date: str) -> List[StaffScheduleEntry]:
        return await self.source.get_staff_schedule(start_date, end_date)

    # Enhanced department

    @logs_source_errors
    async def get_enhanced_department(self, department_id: int) -> Optional[EnhancedDepartment]:
        """Department joined with its financial share and quality sub-metrics.

        financial    financial join, else None
        satisfaction satisfaction join with a numeric score, else None
        wait time    wait-time join with a numeric avgWait (target avgWait + 10
                     when missing); without a usable join the department's own
                     avgWaitTime with target avgWaitTime + 10
        readmission  readmission join with a numeric rate (target rate - 1
                     when missing), else None
        """
        department = await self.get_department_by_id(department_id)
        if department is None:
            return None

        quality, financial = await asyncio.gather(self.get_quality_metrics(), self.get_financial_data())

        financial_row = find_by_department(financial.by_department, department.name)
        satisfaction_row = find_by_department(quality.patient_satisfaction.by_department, department.name)
        wait_row = find_by_department(quality.wait_times.by_department, department.name)
        readmission_row = find_by_department(quality.readmission_rates.by_department, department.name)

        financial_share = None
        if financial_row is not None:
            financial_share = FinancialShare(
                revenue=ensure_number(financial_row.revenue),
                percentage=ensure_number(financial_row.percentage),
            )

        satisfaction = None
        if satisfaction_row is not None and numeric_value(satisfaction_row.score) is not None:
            satisfaction = SatisfactionMetric(
                score=numeric_value(satisfaction_row.score),
                responses=ensure_number(satisfaction_row.responses),
            )

        avg_wait = numeric_value(wait_row.avg_wait) if wait_row is not None else None
        if avg_wait is not None:
            target = numeric_value(wait_row.target)
            wait_time = WaitTimeMetric(avg_wait=avg_wait, target=avg_wait + 10 if target is None else target)
        else:
            wait_time = WaitTimeMetric(avg_wait=department.avg_wait_time, target=department.avg_wait_time + 10)

        readmission = None
        rate = numeric_value(readmission_row.rate) if readmission_row is not None else None
        if rate is not None:
            target = numeric_value(readmission_row.target)
            readmission = ReadmissionMetric(rate=rate, target=rate - 1 if target is None else target)

        return EnhancedDepartment(
            department=department,
            financial=financial_share,
            quality=DepartmentQualityView(
                satisfaction=satisfaction,
                wait_time=wait_time,
                readmission=readmission,
            ),
        )

    # Appointments

    @logs_source_errors
    async def get_all_appointments(self) -> List[SecureAppointment]:
        appointments = await self.source.list_appointments()
        return [SecureAppointment.from_appointment(a) for a in sorted(appointments, key=_appointment_order)]

    @logs_source_errors
    async def get_appointments_for_day(self, day: str) -> List[SecureAppointment]:
        appointments = await self.source.list_appointments()
        return [
            SecureAppointment.from_appointment(a)
            for a in sorted(appointments, key=_appointment_order)
            if a.date == day
        ]

    @logs_source_errors
    async def get_patient_appointments(self, patient_id: str) -> List[SecureAppointment]:
        appointments = await self.source.list_appointments()
        return [
            SecureAppointment.from_appointment(a)
            for a in sorted(appointments, key=_appointment_order)
            if a.patient_id == patient_id
        ]

    @logs_source_errors
    async def get_appointments(self) -> AppointmentData:
        """Dashboard bundle: trends, weekly load, type mix, upcoming and completed"""
        statistics, appointments = await asyncio.gather(
            self._cached(APPOINTMENT_STATISTICS, AppointmentData, self.source.get_appointment_statistics),
            self.source.list_appointments(),
        )
        ordered = sorted(appointments, key=_appointment_order)
        return statistics.model_copy(update={
            "upcoming": tuple(
                SecureAppointment.from_appointment(a) for a in ordered if a.status in UPCOMING_STATUSES
            ),
            "completed": tuple(
                SecureAppointment.from_appointment(a) for a in reversed(ordered) if a.status == "Completed"
            ),
        })

    @logs_source_errors
    async def create_appointment_record(self, payload: Dict[str, Any], today: Optional[date] = None) -> Appointment:
        """Create an appointment and count it in the overview; returns the raw record.

        Without an id the next APT id after the current maximum is assigned.
        Sources that manage their own writes get the payload as is.
        """
        data = dict(payload)
        if self.source.manages_writes:
            appointment = Appointment.model_validate({**data, "id": data.get("id") or ""})
            created = await self.source.insert_appointment(appointment)
        else:
            if not data.get("id"):
                existing = [a.id for a in await self.source.list_appointments()]
                data["id"] = next_sequential_id(existing, APPOINTMENT_ID_PREFIX)
            created = await self.source.insert_appointment(Appointment.model_validate(data))

            overview = await self.source.get_overview()
            if overview is not None:
                await self.source.save_overview(
                    self.accumulator.on_appointment_created(overview, created, today)
                )

        self.invalidate(OVERVIEW, APPOINTMENT_STATISTICS)
        logger.info(f"Appointment created: {created.id}")
        return created

    async def create_appointment(self, payload: Dict[str, Any], today: Optional[date] = None) -> SecureAppointment:
        created = await self.create_appointment_record(payload, today)
        return SecureAppointment.from_appointment(created)

    @logs_source_errors
    async def update_appointment_record(self, appointment_id: str, payload: Dict[str, Any]) -> Optional[Appointment]:
        """Apply a partial update; a status change feeds the overview counters"""
        current = await self.source.get_appointment(appointment_id)
        if current is None:
            return None

        merged = merge_payload(Appointment, current, payload)
        merged["id"] = appointment_id
        updated = await self.source.replace_appointment(Appointment.model_validate(merged))

        if not self.source.manages_writes and current.status != updated.status:
            overview = await self.source.get_overview()
            if overview is not None:
                await self.source.save_overview(
                    self.accumulator.on_status_changed(overview, current.status, updated.status)
                )

        self.invalidate(OVERVIEW, APPOINTMENT_STATISTICS)
        logger.info(f"Appointment updated: {appointment_id}")
        return updated

    async def update_appointment(self, appointment_id: str, payload: Dict[str, Any]) -> Optional[SecureAppointment]:
        updated = await self.update_appointment_record(appointment_id, payload)
        return SecureAppointment.from_appointment(updated) if updated else None

    async def update_appointment_status(self, appointment_id: str, status: str) -> StatusUpdateResult:
        updated = await self.update_appointment_record(appointment_id, {"status": status})
        if updated is None:
            return StatusUpdateResult(success=False, message=f"Appointment {appointment_id} not found")
        return StatusUpdateResult(success=True, message=f"Appointment {appointment_id} status updated to {status}")

    # Staff writes

    @logs_source_errors
    async def update_staff_status(self, staff_id: str, status: str) -> StatusUpdateResult:
        updated = await self.source.update_staff_status(staff_id, status)
        if updated is None:
            return StatusUpdateResult(success=False, message=f"Staff {staff_id} not found")
        logger.info(f"Staff {staff_id} status set to {status}")
        return StatusUpdateResult(success=True, message=f"Staff {staff_id} status updated to {status}")

    @logs_source_errors
    async def save_staff_schedule(self, entries: Iterable[Any]) -> StatusUpdateResult:
        schedule = [StaffScheduleEntry.model_validate(entry) for entry in entries]
        saved = await self.source.save_staff_schedule(schedule)
        return StatusUpdateResult(success=True, message=f"Schedule updated successfully for {saved} entries")

    # Vitals writes

    @logs_source_errors
    async def store_patient_vitals(
        self, patient_id: str, reading: Any, recorded_on: Optional[date] = None
    ) -> Optional[RecordedVitals]:
        """Record a reading and raise threshold alerts; returns raw alerts"""
        patient = await self.source.get_patient(patient_id)
        if patient is None:
            return None

        reading = PatientVitals.model_validate(reading)
        day = recorded_on.isoformat() if recorded_on else get_today_formatted()
        history = PatientVitalHistory(
            date=day,
            heart_rate=reading.heart_rate,
            blood_pressure=reading.blood_pressure,
            temperature=reading.temperature,
            oxygen_saturation=reading.oxygen_saturation,
        )

        alerts = []
        if not self.source.manages_writes:
            alerts = check_vital_signs_alerts(
                patient_id, reading, day, await self.source.list_vital_alert_ids()
            )
        saved = await self.source.record_vitals(patient_id, reading, history, alerts)
        return RecordedVitals(success=True, current_reading=reading, alerts=saved)

    async def record_patient_vitals(
        self, patient_id: str, reading: Any, recorded_on: Optional[date] = None
    ) -> Optional[RecordedVitals]:
        recorded = await self.store_patient_vitals(patient_id, reading, recorded_on)
        if recorded is None:
            return None
        return recorded.model_copy(update={"alerts": tuple(_secure_alert(a) for a in recorded.alerts)})
