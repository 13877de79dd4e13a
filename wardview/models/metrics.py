"""
Dashboard Metric Models
Overview counters, vital sign series, clinical timelines and aggregate documents
"""
from sqlalchemy import Column, Integer, String, Float, DateTime, Text, Boolean, JSON
from datetime import datetime

from wardview.config.database import Base
from wardview.models.hospital import RecordMixin


class OverviewRecord(RecordMixin, Base):
    """Single-row hospital overview, updated incrementally"""
    __tablename__ = "overview"

    id = Column(Integer, primary_key=True, default=1)

    # Patients and appointments
    total_patients = Column(Integer, default=0)
    active_patients = Column(Integer, default=0)
    new_patients_today = Column(Integer, default=0)
    total_appointments = Column(Integer, default=0)
    today_appointments = Column(Integer, default=0)
    completed_appointments = Column(Integer, default=0)
    cancelled_appointments = Column(Integer, default=0)
    pending_results = Column(Integer, default=0)
    critical_alerts = Column(Integer, default=0)

    # Beds
    total_beds = Column(Integer, default=0)
    occupied_beds = Column(Integer, default=0)
    available_beds = Column(Integer, default=0)
    bed_occupancy_rate = Column(Float, default=0)

    # Staffing
    total_staff = Column(Integer, default=0)
    staff_on_duty = Column(Integer, default=0)
    doctors_available = Column(Integer, default=0)
    nurses_on_duty = Column(Integer, default=0)

    average_wait_time = Column(Float, default=0)
    patient_satisfaction_score = Column(Float, default=0)
    revenue = Column(Float, default=0)
    expenses = Column(Float, default=0)

    last_updated = Column(DateTime, default=datetime.utcnow)


class VitalReadingRecord(RecordMixin, Base):
    """Point in a patient's vital sign history"""
    __tablename__ = "vital_readings"

    id = Column(Integer, primary_key=True, autoincrement=True)
    patient_id = Column(String(20), nullable=False, index=True)
    date = Column(String(10), nullable=False)
    heart_rate = Column(Float)
    blood_pressure = Column(String(10))
    temperature = Column(Float)
    oxygen_saturation = Column(Float)


class VitalAlertRecord(RecordMixin, Base):
    """Threshold breach raised from a vital sign reading"""
    __tablename__ = "vital_alerts"

    id = Column(String(20), primary_key=True)
    patient_id = Column(String(20), nullable=False, index=True)
    type = Column(String(50), nullable=False)
    message = Column(Text, nullable=False)
    severity = Column(String(10), nullable=False)  # High, Medium, Low
    date = Column(String(10), nullable=False)
    resolved = Column(Boolean, default=False)


class TimelineEventRecord(RecordMixin, Base):
    """Clinical event in a patient's history"""
    __tablename__ = "timeline_events"

    id = Column(String(30), primary_key=True)
    patient_id = Column(String(20), nullable=False, index=True)
    date = Column(String(10), nullable=False)
    title = Column(String(200), nullable=False)
    description = Column(Text)
    type = Column(String(20), default="other")


class AggregateDocument(Base):
    """Pre-computed aggregate stored as one JSON document per name

    Names in use: financial, quality, demographics, inventory,
    recentActivities, appointmentTrends.
    """
    __tablename__ = "aggregate_documents"

    name = Column(String(50), primary_key=True)
    body = Column(JSON, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
