"""
Remote Data Source
Raw hospital collections fetched from a CRUD API over HTTP

The remote API speaks camelCase JSON and owns its writes: it generates
appointment ids, raises vital sign alerts and maintains the overview counters.
"""
from typing import Any, Dict, List, Optional
import asyncio
import logging

import aiohttp

from wardview.schemas.hospital import (
    Appointment, Department, OverviewStatistics, Patient, StaffMember, StaffScheduleEntry
)
from wardview.schemas.views import (
    AppointmentData, Demographics, Financial, Inventory, PatientVitalHistory, Quality,
    RecentActivity, TimelineEvent, VitalSignAlert
)
from wardview.services.data_sources import DataSource
from wardview.services.errors import DataSourceError, DuplicateRecordError

logger = logging.getLogger(__name__)


class RemoteDataSource(DataSource):
    """Data source backed by the records API of another WardView deployment"""

    manages_writes = True

    def __init__(self, base_url: str, timeout: float = 3.0, session: aiohttp.ClientSession = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self.headers = {
            "Content-Type": "application/json",
            "Accept": "application/json"
        }
        self._session = session

    async def _request(self, method: str, path: str, payload: Any = None, params: Dict[str, str] = None):
        """Send one request; 404 yields None, other failures raise DataSourceError"""
        url = f"{self.base_url}{path}"
        try:
            if self._session is not None:
                return await self._send(self._session, method, url, payload, params)
            async with aiohttp.ClientSession(timeout=self.timeout, headers=self.headers) as session:
                return await self._send(session, method, url, payload, params)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"Remote data source error on {method} {url}: {str(e)}")
            raise DataSourceError(f"{method} {path} failed: {e}") from e

    async def _send(self, session, method, url, payload, params):
        async with session.request(method, url, json=payload, params=params, timeout=self.timeout) as response:
            if response.status == 404:
                return None
            if response.status == 409:
                raise DuplicateRecordError("Record", url.rsplit("/", 1)[-1])
            if response.status >= 400:
                body = await response.text()
                logger.error(f"Remote data source returned {response.status} for {method} {url}")
                raise DataSourceError(f"{method} {url} returned {response.status}: {body}", status=response.status)
            return await response.json()

    async def _get(self, path: str, params: Dict[str, str] = None):
        return await self._request("GET", path, params=params)

    async def ping(self) -> bool:
        """True when the departments collection answers"""
        try:
            await self._get("/departments")
            return True
        except DataSourceError:
            return False

    # Entities

    async def list_patients(self) -> List[Patient]:
        return [Patient.model_validate(p) for p in await self._get("/patients") or []]

    async def get_patient(self, patient_id: str) -> Optional[Patient]:
        data = await self._get(f"/patients/{patient_id}")
        return Patient.model_validate(data) if data else None

    async def list_staff(self) -> List[StaffMember]:
        return [StaffMember.model_validate(s) for s in await self._get("/staff") or []]

    async def get_staff(self, staff_id: str) -> Optional[StaffMember]:
        data = await self._get(f"/staff/{staff_id}")
        return StaffMember.model_validate(data) if data else None

    async def update_staff_status(self, staff_id: str, status: str) -> Optional[StaffMember]:
        data = await self._request("PUT", f"/staff/{staff_id}/status", {"status": status})
        return StaffMember.model_validate(data) if data else None

    async def list_departments(self) -> List[Department]:
        return [Department.model_validate(d) for d in await self._get("/departments") or []]

    async def get_department(self, department_id: int) -> Optional[Department]:
        data = await self._get(f"/departments/{department_id}")
        return Department.model_validate(data) if data else None

    async def list_appointments(self) -> List[Appointment]:
        return [Appointment.model_validate(a) for a in await self._get("/appointments") or []]

    async def get_appointment(self, appointment_id: str) -> Optional[Appointment]:
        data = await self._get(f"/appointments/{appointment_id}")
        return Appointment.model_validate(data) if data else None

    async def insert_appointment(self, appointment: Appointment) -> Appointment:
        payload = appointment.to_dict()
        if not payload.get("id"):
            payload.pop("id", None)
        data = await self._request("POST", "/appointments", payload)
        return Appointment.model_validate(data)

    async def replace_appointment(self, appointment: Appointment) -> Appointment:
        data = await self._request("PUT", f"/appointments/{appointment.id}", appointment.to_dict())
        if data is None:
            raise DataSourceError(f"Appointment {appointment.id} not found on remote", status=404)
        return Appointment.model_validate(data)

    # Aggregates

    async def get_overview(self) -> Optional[OverviewStatistics]:
        data = await self._get("/overview")
        return OverviewStatistics.model_validate(data) if data else None

    async def save_overview(self, overview: OverviewStatistics) -> OverviewStatistics:
        data = await self._request("PUT", "/overview", overview.to_dict())
        return OverviewStatistics.model_validate(data)

    async def get_financial(self) -> Financial:
        return Financial.model_validate(await self._get("/financial") or {})

    async def get_quality(self) -> Quality:
        return Quality.model_validate(await self._get("/quality") or {})

    async def get_demographics(self) -> Demographics:
        return Demographics.model_validate(await self._get("/demographics") or {})

    async def get_inventory(self) -> Inventory:
        return Inventory.model_validate(await self._get("/inventory") or {})

    async def get_recent_activities(self) -> List[RecentActivity]:
        return [RecentActivity.model_validate(a) for a in await self._get("/activities/recent") or []]

    async def get_appointment_statistics(self) -> AppointmentData:
        return AppointmentData.model_validate(await self._get("/appointments/statistics") or {})

    # Vitals and timeline

    async def get_vital_history(self, patient_id: str) -> List[PatientVitalHistory]:
        data = await self._get(f"/patients/{patient_id}/vitals") or []
        return [PatientVitalHistory.model_validate(v) for v in data]

    async def get_vital_alerts(self, patient_id: str) -> List[VitalSignAlert]:
        data = await self._get(f"/patients/{patient_id}/alerts") or []
        return [VitalSignAlert.model_validate(a) for a in data]

    async def list_vital_alert_ids(self) -> List[str]:
        return [alert["id"] for alert in await self._get("/alerts") or []]

    async def record_vitals(self, patient_id, reading, history, alerts):
        """Post the reading; the remote side raises its own alerts"""
        data = await self._request("POST", f"/patients/{patient_id}/vitals", reading.to_dict())
        if data is None:
            raise DataSourceError(f"Patient {patient_id} not found on remote", status=404)
        return [VitalSignAlert.model_validate(a) for a in data.get("alerts", [])]

    async def get_timeline(self, patient_id: str) -> List[TimelineEvent]:
        data = await self._get(f"/patients/{patient_id}/timeline") or []
        return [TimelineEvent.model_validate(e) for e in data]

    # Scheduling

    async def save_staff_schedule(self, entries: List[StaffScheduleEntry]) -> int:
        await self._request("POST", "/staff/schedule", [entry.to_dict() for entry in entries])
        return len(entries)

    async def get_staff_schedule(self, start_date: str, end_date: str) -> List[StaffScheduleEntry]:
        data = await self._get("/staff/schedule", {"startDate": start_date, "endDate": end_date}) or []
        return [StaffScheduleEntry.model_validate(e) for e in data]
