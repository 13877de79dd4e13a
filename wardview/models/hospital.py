"""
Hospital Entity Models
Patients, staff, departments, appointments and shift schedules
"""
from sqlalchemy import (
    Column, Integer, String, Float, DateTime, Text, ForeignKey, JSON, UniqueConstraint
)
from datetime import datetime

from wardview.config.database import Base


class RecordMixin:
    """Column values as a plain dict; unset columns are left out"""

    def as_dict(self):
        values = {}
        for column in self.__table__.columns:
            value = getattr(self, column.name)
            if value is not None:
                values[column.name] = value
        return values


class DepartmentRecord(RecordMixin, Base):
    """Hospital department with capacity and headcount"""
    __tablename__ = "departments"

    id = Column(Integer, primary_key=True)
    name = Column(String(100), unique=True, nullable=False)
    code = Column(String(20), unique=True, nullable=False)

    total_patients = Column(Integer, default=0)
    today_patients = Column(Integer, default=0)
    avg_wait_time = Column(Float, default=0)
    satisfaction = Column(Float, default=0)
    staff = Column(JSON)  # {doctors, nurses, support}
    revenue = Column(Float, default=0)

    # Occupancy above capacity is stored as reported
    capacity = Column(Integer, default=0)
    current_occupancy = Column(Integer, default=0)
    critical_cases = Column(Integer, default=0)


class StaffRecord(RecordMixin, Base):
    """Clinical and support staff"""
    __tablename__ = "staff"

    id = Column(String(20), primary_key=True)
    first_name = Column(String(100))
    last_name = Column(String(100))
    full_name = Column(String(200), nullable=False, index=True)
    role = Column(String(100))
    department = Column(String(100), index=True)
    department_id = Column(Integer, ForeignKey("departments.id"))
    status = Column(String(20), nullable=False)  # On Duty, On Call, Off Duty, On Leave
    shift = Column(String(100))
    experience = Column(Integer, default=0)
    patients = Column(Integer, default=0)
    phone = Column(String(20))
    email = Column(String(255))
    specialty = Column(String(100))
    rating = Column(Float, default=0)

    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


class PatientRecord(RecordMixin, Base):
    """Patient with identity, contact and clinical fields"""
    __tablename__ = "patients"

    id = Column(String(20), primary_key=True)
    first_name = Column(String(100))
    last_name = Column(String(100))
    full_name = Column(String(200), nullable=False)
    age = Column(Integer)
    gender = Column(String(20))
    date_of_birth = Column(String(10))

    # Contact
    phone = Column(String(20))
    email = Column(String(255))
    address = Column(String(255))
    insurance = Column(String(100))
    emergency_contact = Column(String(255))

    # Care assignment; the *_id columns are filled at ingestion when the name resolves
    department = Column(String(100), index=True)
    department_id = Column(Integer, ForeignKey("departments.id"))
    doctor = Column(String(200), index=True)
    doctor_id = Column(String(20), ForeignKey("staff.id"))

    admission_date = Column(String(10))
    status = Column(String(20), nullable=False)  # In Treatment, Scheduled, Critical, Discharged
    severity = Column(String(10), nullable=False)  # High, Medium, Low
    room = Column(String(20))
    diagnosis = Column(Text)
    medications = Column(JSON)
    allergies = Column(JSON)
    notes = Column(Text)

    last_visit = Column(String(10))
    next_appointment = Column(String(10))  # date or TBD
    vitals = Column(JSON)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


class AppointmentRecord(RecordMixin, Base):
    """Scheduled or completed appointment"""
    __tablename__ = "appointments"

    id = Column(String(30), primary_key=True)
    patient_id = Column(String(20), nullable=False, index=True)
    patient_name = Column(String(200))
    doctor_id = Column(String(20))
    doctor = Column(String(200))
    department = Column(String(100))

    date = Column(String(10), nullable=False, index=True)
    time = Column(String(10))
    type = Column(String(50))
    status = Column(String(20), default="Scheduled")
    duration = Column(Integer, default=30)
    wait_time = Column(Integer)  # only recorded once completed
    notes = Column(Text)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


class StaffScheduleRecord(RecordMixin, Base):
    """One shift assignment per staff member and day"""
    __tablename__ = "staff_schedule"
    __table_args__ = (UniqueConstraint("staff_id", "date", name="uq_staff_schedule_day"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    staff_id = Column(String(20), ForeignKey("staff.id"), nullable=False)
    date = Column(String(10), nullable=False)
    shift = Column(String(100), nullable=False)
