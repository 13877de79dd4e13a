"""
Dashboard View Schemas
Aggregate collections and the derived views computed by the read-model
"""
from typing import Literal, Optional, Tuple, Union

from wardview.schemas.hospital import (
    Department, PatientSeverity, PatientVitals, SecureAppointment, WardModel
)

# Values in the quality and financial collections are not always numbers;
# they are validated by the read-model, not here.
LooseNumber = Union[float, str, None]


# Financial

class FinancialMonthly(WardModel):
    month: str
    revenue: float = 0
    expenses: float = 0
    profit: float = 0
    patients: int = 0


class DepartmentFinancial(WardModel):
    department: str
    revenue: LooseNumber = None
    percentage: LooseNumber = None


class PaymentMethod(WardModel):
    method: str
    amount: float = 0
    percentage: float = 0


class Financial(WardModel):
    monthly: Tuple[FinancialMonthly, ...] = ()
    by_department: Tuple[DepartmentFinancial, ...] = ()
    payment_methods: Tuple[PaymentMethod, ...] = ()


# Quality

class DepartmentQuality(WardModel):
    """Per-department quality row; which fields are set depends on the metric"""
    department: str
    score: LooseNumber = None
    responses: LooseNumber = None
    avg_wait: LooseNumber = None
    target: LooseNumber = None
    rate: LooseNumber = None


class QualityMetric(WardModel):
    overall: float = 0
    average: float = 0
    by_department: Tuple[DepartmentQuality, ...] = ()


class Quality(WardModel):
    patient_satisfaction: QualityMetric = QualityMetric()
    wait_times: QualityMetric = QualityMetric()
    readmission_rates: QualityMetric = QualityMetric()


# Enhanced department

class FinancialShare(WardModel):
    revenue: float
    percentage: float


class SatisfactionMetric(WardModel):
    score: float
    responses: float


class WaitTimeMetric(WardModel):
    avg_wait: float
    target: float


class ReadmissionMetric(WardModel):
    rate: float
    target: float


class DepartmentQualityView(WardModel):
    satisfaction: Optional[SatisfactionMetric] = None
    wait_time: Optional[WaitTimeMetric] = None
    readmission: Optional[ReadmissionMetric] = None


class EnhancedDepartment(WardModel):
    """Department joined with its financial share and quality sub-metrics"""
    department: Department
    financial: Optional[FinancialShare] = None
    quality: DepartmentQualityView = DepartmentQualityView()


# Vitals and timeline

class PatientVitalHistory(WardModel):
    date: str
    heart_rate: Optional[float] = None
    blood_pressure: str = ""
    temperature: Optional[float] = None
    oxygen_saturation: Optional[float] = None


class VitalSignAlert(WardModel):
    id: str
    patient_id: str
    type: str
    message: str
    severity: PatientSeverity
    date: str
    resolved: bool = False


class PatientVitalsBundle(WardModel):
    """History, latest snapshot and alerts for one patient"""
    vitals: Tuple[PatientVitalHistory, ...] = ()
    current_reading: Optional[PatientVitals] = None
    alerts: Tuple[VitalSignAlert, ...] = ()


class RecordedVitals(WardModel):
    success: bool
    current_reading: PatientVitals
    alerts: Tuple[VitalSignAlert, ...] = ()


TimelineEventType = Literal["admission", "visit", "test", "medication", "discharge", "surgery", "other"]


class TimelineEvent(WardModel):
    id: str
    date: str
    title: str
    description: str = ""
    type: TimelineEventType = "other"


# Appointment dashboard

class MonthlyAppointment(WardModel):
    month: str
    appointments: int = 0
    completed: int = 0
    cancelled: int = 0
    no_show: int = 0
    revenue: float = 0


class DailyAppointment(WardModel):
    day: str
    scheduled: int = 0
    completed: int = 0
    in_progress: int = 0
    cancelled: int = 0
    wait_time: float = 0


class AppointmentType(WardModel):
    type: str
    count: int = 0
    percentage: float = 0
    avg_duration: float = 0
    color: str = "#3b82f6"


class AppointmentData(WardModel):
    monthly_trends: Tuple[MonthlyAppointment, ...] = ()
    weekly_schedule: Tuple[DailyAppointment, ...] = ()
    by_type: Tuple[AppointmentType, ...] = ()
    upcoming: Tuple[SecureAppointment, ...] = ()
    completed: Tuple[SecureAppointment, ...] = ()


# Demographics, inventory, activity feed

class DemographicItem(WardModel):
    age_group: Optional[str] = None
    gender: Optional[str] = None
    type: Optional[str] = None
    label: Optional[str] = None
    count: int = 0
    percentage: float = 0
    color: str = ""


class Demographics(WardModel):
    by_age: Tuple[DemographicItem, ...] = ()
    by_gender: Tuple[DemographicItem, ...] = ()
    by_insurance: Tuple[DemographicItem, ...] = ()


class ChartSlice(WardModel):
    name: Optional[str] = None
    value: int = 0
    percentage: float = 0
    color: str = ""


class DemographicsChart(WardModel):
    age: Tuple[ChartSlice, ...] = ()
    gender: Tuple[ChartSlice, ...] = ()
    insurance: Tuple[ChartSlice, ...] = ()


class MedicalSupply(WardModel):
    item: str
    current: int = 0
    minimum: int = 0
    status: str = ""
    cost: float = 0


class Equipment(WardModel):
    equipment: str
    status: str = ""
    last_maintenance: str = ""
    next_maintenance: str = ""


class Inventory(WardModel):
    medical_supplies: Tuple[MedicalSupply, ...] = ()
    equipment: Tuple[Equipment, ...] = ()


class RecentActivity(WardModel):
    id: int
    type: str
    message: str
    timestamp: str
    priority: str = "Low"


class RoleCount(WardModel):
    role: str
    count: int


class DepartmentCount(WardModel):
    department: str
    count: int
