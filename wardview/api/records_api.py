"""
Records API
Raw camelCase CRUD over the SQL store

This is the storage-facing API: it returns unmasked records and is what a
RemoteDataSource in another deployment talks to. It is not meant to be
exposed to dashboard clients.
"""
from fastapi import APIRouter, Depends, HTTPException, Query
from typing import Any, Dict, List
import logging

from wardview.api.dependencies import get_records_service
from wardview.schemas.hospital import Department, OverviewStatistics, Patient, StaffMember
from wardview.services.data_service import (
    DEPARTMENTS, OVERVIEW, STAFF_BY_DEPARTMENT, STAFF_BY_ROLE, DataService, merge_payload
)
from wardview.services.joins import assert_unique_display_names

router = APIRouter(prefix="/api/records", tags=["records"])
logger = logging.getLogger(__name__)

STAFF_COUNTS = (STAFF_BY_ROLE, STAFF_BY_DEPARTMENT)


def _found(record, detail: str):
    if record is None:
        raise HTTPException(status_code=404, detail=detail)
    return record.to_dict()


def _many(records) -> List[Dict[str, Any]]:
    return [record.to_dict() for record in records]


def _deleted(deleted: bool, detail: str):
    if not deleted:
        raise HTTPException(status_code=404, detail=detail)
    return {"deleted": True}

# Patients

@router.get("/patients")
async def list_patients(service: DataService = Depends(get_records_service)):
    return _many(await service.source.list_patients())

@router.post("/patients", status_code=201)
async def create_patient(payload: dict, service: DataService = Depends(get_records_service)):
    patient = await service.source.save_patient(Patient.model_validate(payload))
    logger.info(f"Patient record saved: {patient.id}")
    return patient.to_dict()

@router.get("/patients/{patient_id}")
async def get_patient(patient_id: str, service: DataService = Depends(get_records_service)):
    return _found(await service.source.get_patient(patient_id), "Patient not found")

@router.put("/patients/{patient_id}")
async def update_patient(patient_id: str, payload: dict, service: DataService = Depends(get_records_service)):
    current = await service.source.get_patient(patient_id)
    if current is None:
        raise HTTPException(status_code=404, detail="Patient not found")
    merged = merge_payload(Patient, current, payload)
    merged["id"] = patient_id
    patient = await service.source.save_patient(Patient.model_validate(merged))
    return patient.to_dict()

@router.delete("/patients/{patient_id}")
async def delete_patient(patient_id: str, service: DataService = Depends(get_records_service)):
    return _deleted(await service.source.delete_patient(patient_id), "Patient not found")

@router.get("/patients/{patient_id}/vitals")
async def get_vital_history(patient_id: str, service: DataService = Depends(get_records_service)):
    return _many(await service.source.get_vital_history(patient_id))

@router.post("/patients/{patient_id}/vitals")
async def record_vitals(patient_id: str, reading: dict, service: DataService = Depends(get_records_service)):
    """Store a reading; the response carries the alerts it raised"""
    return _found(await service.store_patient_vitals(patient_id, reading), "Patient not found")

@router.get("/patients/{patient_id}/alerts")
async def get_vital_alerts(patient_id: str, service: DataService = Depends(get_records_service)):
    return _many(await service.source.get_vital_alerts(patient_id))

@router.get("/patients/{patient_id}/timeline")
async def get_timeline(patient_id: str, service: DataService = Depends(get_records_service)):
    return _many(await service.source.get_timeline(patient_id))

@router.get("/alerts")
async def list_vital_alerts(service: DataService = Depends(get_records_service)):
    return _many(await service.source.list_vital_alerts())

# Staff

@router.get("/staff")
async def list_staff(service: DataService = Depends(get_records_service)):
    return _many(await service.source.list_staff())

@router.post("/staff", status_code=201)
async def create_staff(payload: dict, service: DataService = Depends(get_records_service)):
    staff = await service.source.save_staff(StaffMember.model_validate(payload))
    service.invalidate(*STAFF_COUNTS)
    logger.info(f"Staff record saved: {staff.id}")
    return staff.to_dict()

@router.get("/staff/schedule")
async def get_staff_schedule(
    start_date: str = Query(..., alias="startDate"),
    end_date: str = Query(..., alias="endDate"),
    service: DataService = Depends(get_records_service)
):
    return _many(await service.get_staff_schedule(start_date, end_date))

@router.post("/staff/schedule")
async def save_staff_schedule(entries: List[dict], service: DataService = Depends(get_records_service)):
    return (await service.save_staff_schedule(entries)).to_dict()

@router.get("/staff/{staff_id}")
async def get_staff(staff_id: str, service: DataService = Depends(get_records_service)):
    return _found(await service.source.get_staff(staff_id), "Staff member not found")

@router.put("/staff/{staff_id}")
async def update_staff(staff_id: str, payload: dict, service: DataService = Depends(get_records_service)):
    current = await service.source.get_staff(staff_id)
    if current is None:
        raise HTTPException(status_code=404, detail="Staff member not found")
    merged = merge_payload(StaffMember, current, payload)
    merged["id"] = staff_id
    staff = await service.source.save_staff(StaffMember.model_validate(merged))
    service.invalidate(*STAFF_COUNTS)
    return staff.to_dict()

@router.put("/staff/{staff_id}/status")
async def update_staff_status(staff_id: str, body: dict, service: DataService = Depends(get_records_service)):
    if "status" not in body:
        raise HTTPException(status_code=422, detail="status is required")
    return _found(await service.source.update_staff_status(staff_id, body["status"]), "Staff member not found")

@router.delete("/staff/{staff_id}")
async def delete_staff(staff_id: str, service: DataService = Depends(get_records_service)):
    deleted = _deleted(await service.source.delete_staff(staff_id), "Staff member not found")
    service.invalidate(*STAFF_COUNTS)
    return deleted

# Departments

@router.get("/departments")
async def list_departments(service: DataService = Depends(get_records_service)):
    return _many(await service.source.list_departments())

@router.get("/departments/{department_id}")
async def get_department(department_id: int, service: DataService = Depends(get_records_service)):
    return _found(await service.source.get_department(department_id), "Department not found")

@router.put("/departments/{department_id}")
async def save_department(department_id: int, payload: dict, service: DataService = Depends(get_records_service)):
    department = Department.model_validate({**payload, "id": department_id})
    others = [d for d in await service.source.list_departments() if d.id != department_id]
    assert_unique_display_names(others + [department], "departments", attribute="name")
    await service.source.save_department(department)
    service.invalidate(DEPARTMENTS)
    return department.to_dict()

@router.delete("/departments/{department_id}")
async def delete_department(department_id: int, service: DataService = Depends(get_records_service)):
    deleted = _deleted(await service.source.delete_department(department_id), "Department not found")
    service.invalidate(DEPARTMENTS)
    return deleted

# Appointments

@router.get("/appointments")
async def list_appointments(service: DataService = Depends(get_records_service)):
    return _many(await service.source.list_appointments())

@router.post("/appointments", status_code=201)
async def create_appointment(payload: dict, service: DataService = Depends(get_records_service)):
    """Create an appointment; an id is assigned when the payload has none"""
    return (await service.create_appointment_record(payload)).to_dict()

@router.get("/appointments/statistics")
async def get_appointment_statistics(service: DataService = Depends(get_records_service)):
    return (await service.source.get_appointment_statistics()).to_dict()

@router.get("/appointments/{appointment_id}")
async def get_appointment(appointment_id: str, service: DataService = Depends(get_records_service)):
    return _found(await service.source.get_appointment(appointment_id), "Appointment not found")

@router.put("/appointments/{appointment_id}")
async def update_appointment(appointment_id: str, payload: dict, service: DataService = Depends(get_records_service)):
    return _found(await service.update_appointment_record(appointment_id, payload), "Appointment not found")

@router.delete("/appointments/{appointment_id}")
async def delete_appointment(appointment_id: str, service: DataService = Depends(get_records_service)):
    return _deleted(await service.source.delete_appointment(appointment_id), "Appointment not found")

# Aggregates

@router.get("/overview")
async def get_overview(service: DataService = Depends(get_records_service)):
    return _found(await service.source.get_overview(), "Overview statistics not available")

@router.put("/overview")
async def save_overview(payload: dict, service: DataService = Depends(get_records_service)):
    overview = await service.source.save_overview(OverviewStatistics.model_validate(payload))
    service.invalidate(OVERVIEW)
    return overview.to_dict()

@router.get("/financial")
async def get_financial(service: DataService = Depends(get_records_service)):
    return (await service.source.get_financial()).to_dict()

@router.get("/quality")
async def get_quality(service: DataService = Depends(get_records_service)):
    return (await service.source.get_quality()).to_dict()

@router.get("/demographics")
async def get_demographics(service: DataService = Depends(get_records_service)):
    return (await service.source.get_demographics()).to_dict()

@router.get("/inventory")
async def get_inventory(service: DataService = Depends(get_records_service)):
    return (await service.source.get_inventory()).to_dict()

@router.get("/activities/recent")
async def get_recent_activities(service: DataService = Depends(get_records_service)):
    return _many(await service.source.get_recent_activities())
