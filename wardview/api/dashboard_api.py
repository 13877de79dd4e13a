"""
Dashboard API
Masked read-model views for the hospital dashboard
"""
from fastapi import APIRouter, Depends, Header, HTTPException, Query
from typing import Any, Dict, List, Optional
import logging

from wardview.api.dependencies import get_data_service
from wardview.services.data_service import DataService
from wardview.utils.privacy import can_view_full_pii

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])
logger = logging.getLogger(__name__)


def _found(view, detail: str):
    if view is None:
        raise HTTPException(status_code=404, detail=detail)
    return view.to_dict()


def _many(views) -> List[Dict[str, Any]]:
    return [view.to_dict() for view in views]


@router.get("/health")
async def get_health(service: DataService = Depends(get_data_service)):
    """Data source connectivity"""
    connected = await service.check_connection()
    return {"status": "ok" if connected else "degraded", "dataSourceConnected": connected}

# Aggregates

@router.get("/overview")
async def get_overview(service: DataService = Depends(get_data_service)):
    return _found(await service.get_overview(), "Overview statistics not available")

@router.get("/demographics")
async def get_demographics(service: DataService = Depends(get_data_service)):
    return (await service.get_demographics()).to_dict()

@router.get("/demographics/chart")
async def get_demographics_chart(service: DataService = Depends(get_data_service)):
    """Demographics as name/value chart slices"""
    return (await service.get_demographics_mapped()).to_dict()

@router.get("/financial")
async def get_financial(service: DataService = Depends(get_data_service)):
    return (await service.get_financial_data()).to_dict()

@router.get("/quality")
async def get_quality(service: DataService = Depends(get_data_service)):
    return (await service.get_quality_metrics()).to_dict()

@router.get("/inventory")
async def get_inventory(service: DataService = Depends(get_data_service)):
    return (await service.get_inventory()).to_dict()

@router.get("/activities")
async def get_recent_activities(service: DataService = Depends(get_data_service)):
    return _many(await service.get_recent_activities())

# Departments

@router.get("/departments")
async def get_departments(service: DataService = Depends(get_data_service)):
    return _many(await service.get_departments())

@router.get("/departments/{department_id}")
async def get_department(department_id: int, service: DataService = Depends(get_data_service)):
    return _found(await service.get_department_by_id(department_id), "Department not found")

@router.get("/departments/{department_id}/enhanced")
async def get_enhanced_department(department_id: int, service: DataService = Depends(get_data_service)):
    """Department with financial share and quality metrics"""
    return _found(await service.get_enhanced_department(department_id), "Department not found")

@router.get("/departments/{department_id}/patients")
async def get_department_patients(department_id: int, service: DataService = Depends(get_data_service)):
    return _many(await service.get_secure_patients_by_department(department_id))

@router.get("/departments/{department_id}/staff")
async def get_department_staff(department_id: int, service: DataService = Depends(get_data_service)):
    return _many(await service.get_secure_staff_by_department(department_id))

# Patients

@router.get("/patients")
async def get_patients(service: DataService = Depends(get_data_service)):
    return _many(await service.get_secure_patients())

@router.get("/patients/{patient_id}")
async def get_patient(patient_id: str, service: DataService = Depends(get_data_service)):
    return _found(await service.get_secure_patient_by_id(patient_id), "Patient not found")

@router.get("/patients/{patient_id}/full")
async def get_full_patient(
    patient_id: str,
    x_role: Optional[str] = Header(None),
    service: DataService = Depends(get_data_service)
):
    """Unmasked patient record, for PII viewer roles only"""
    if not can_view_full_pii(x_role):
        logger.warning(f"Full patient record refused for role {x_role!r}")
        raise HTTPException(status_code=403, detail="Role not allowed to view patient PII")
    return _found(await service.get_patient_by_id(patient_id), "Patient not found")

@router.get("/patients/{patient_id}/vitals")
async def get_patient_vitals(patient_id: str, service: DataService = Depends(get_data_service)):
    return _found(await service.get_patient_vitals(patient_id), "Patient not found")

@router.post("/patients/{patient_id}/vitals")
async def record_patient_vitals(
    patient_id: str,
    reading: dict,
    service: DataService = Depends(get_data_service)
):
    """Record a vitals reading and return any threshold alerts"""
    return _found(await service.record_patient_vitals(patient_id, reading), "Patient not found")

@router.get("/patients/{patient_id}/timeline")
async def get_patient_timeline(patient_id: str, service: DataService = Depends(get_data_service)):
    return _many(await service.get_patient_timeline(patient_id))

@router.get("/patients/{patient_id}/appointments")
async def get_patient_appointments(patient_id: str, service: DataService = Depends(get_data_service)):
    return _many(await service.get_patient_appointments(patient_id))

# Staff

@router.get("/staff")
async def get_staff(service: DataService = Depends(get_data_service)):
    return _many(await service.get_secure_staff())

@router.get("/staff/counts/role")
async def get_staff_count_by_role(service: DataService = Depends(get_data_service)):
    return _many(await service.get_staff_count_by_role())

@router.get("/staff/counts/department")
async def get_staff_count_by_department(service: DataService = Depends(get_data_service)):
    return _many(await service.get_staff_count_by_department())

@router.get("/staff/schedule")
async def get_staff_schedule(
    start_date: str = Query(..., alias="startDate"),
    end_date: str = Query(..., alias="endDate"),
    service: DataService = Depends(get_data_service)
):
    return _many(await service.get_staff_schedule(start_date, end_date))

@router.post("/staff/schedule")
async def save_staff_schedule(entries: List[dict], service: DataService = Depends(get_data_service)):
    return (await service.save_staff_schedule(entries)).to_dict()

@router.get("/staff/{staff_id}")
async def get_staff_member(staff_id: str, service: DataService = Depends(get_data_service)):
    return _found(await service.get_secure_staff_by_id(staff_id), "Staff member not found")

@router.get("/staff/{staff_id}/contact")
async def get_staff_contact(
    staff_id: str,
    x_role: Optional[str] = Header(None),
    service: DataService = Depends(get_data_service)
):
    """Contact details, unmasked only for PII viewer roles"""
    return _found(await service.get_staff_contact(staff_id, x_role), "Staff member not found")

@router.get("/staff/{staff_id}/patients")
async def get_staff_patients(staff_id: str, service: DataService = Depends(get_data_service)):
    return _many(await service.get_patients_by_staff_id(staff_id))

@router.put("/staff/{staff_id}/status")
async def update_staff_status(staff_id: str, body: dict, service: DataService = Depends(get_data_service)):
    if "status" not in body:
        raise HTTPException(status_code=422, detail="status is required")
    result = await service.update_staff_status(staff_id, body["status"])
    if not result.success:
        raise HTTPException(status_code=404, detail=result.message)
    return result.to_dict()

# Appointments

@router.get("/appointments")
async def get_appointments(service: DataService = Depends(get_data_service)):
    """Appointment dashboard: trends, weekly load, type mix, upcoming and completed"""
    return (await service.get_appointments()).to_dict()

@router.get("/appointments/all")
async def get_all_appointments(service: DataService = Depends(get_data_service)):
    return _many(await service.get_all_appointments())

@router.get("/appointments/day/{day}")
async def get_appointments_for_day(day: str, service: DataService = Depends(get_data_service)):
    return _many(await service.get_appointments_for_day(day))

@router.post("/appointments", status_code=201)
async def create_appointment(payload: dict, service: DataService = Depends(get_data_service)):
    appointment = await service.create_appointment(payload)
    return appointment.to_dict()

@router.put("/appointments/{appointment_id}")
async def update_appointment(appointment_id: str, payload: dict, service: DataService = Depends(get_data_service)):
    return _found(await service.update_appointment(appointment_id, payload), "Appointment not found")

@router.put("/appointments/{appointment_id}/status")
async def update_appointment_status(
    appointment_id: str,
    body: dict,
    service: DataService = Depends(get_data_service)
):
    if "status" not in body:
        raise HTTPException(status_code=422, detail="status is required")
    result = await service.update_appointment_status(appointment_id, body["status"])
    if not result.success:
        raise HTTPException(status_code=404, detail=result.message)
    return result.to_dict()
