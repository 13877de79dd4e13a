"""
Vital Sign Threshold Checks
Alerts raised when a recorded reading leaves the normal adult range
"""
from typing import Iterable, List, Optional, Tuple
import logging

from wardview.schemas.hospital import PatientVitals
from wardview.schemas.views import VitalSignAlert
from wardview.utils.identifiers import next_sequential_id
from wardview.utils.privacy import mask_patient_id

logger = logging.getLogger(__name__)

ALERT_ID_PREFIX = "ALT"


def parse_blood_pressure(value: Optional[str]) -> Optional[Tuple[int, int]]:
    """'140/90' -> (140, 90); anything else -> None"""
    if not value or "/" not in value:
        return None
    systolic, _, diastolic = value.partition("/")
    try:
        return int(systolic.strip()), int(diastolic.strip())
    except ValueError:
        return None


def _findings(reading: PatientVitals) -> List[Tuple[str, str, str]]:
    """(type, severity, message) for every threshold breach in a reading"""
    findings = []

    pressure = parse_blood_pressure(reading.blood_pressure)
    if pressure:
        systolic, diastolic = pressure
        if systolic >= 180 or diastolic >= 120:
            findings.append(("Blood Pressure", "High",
                             f"Hypertensive crisis: {reading.blood_pressure} requires immediate attention"))
        elif systolic >= 140 or diastolic >= 90:
            findings.append(("Blood Pressure", "Medium",
                             f"Elevated blood pressure reading ({reading.blood_pressure}) requires monitoring"))

    heart_rate = reading.heart_rate
    if heart_rate is not None:
        if heart_rate > 120:
            findings.append(("Heart Rate", "High", f"Tachycardia: Heart rate elevated at {heart_rate:g} BPM"))
        elif heart_rate > 100:
            findings.append(("Heart Rate", "Medium", f"Heart rate above normal range ({heart_rate:g} BPM)"))
        elif heart_rate < 60:
            findings.append(("Heart Rate", "Low", f"Heart rate below normal range ({heart_rate:g} BPM)"))

    oxygen = reading.oxygen_saturation
    if oxygen is not None:
        if oxygen < 90:
            findings.append(("Oxygen Saturation", "High", f"Oxygen saturation at {oxygen:g}% - below normal"))
        elif oxygen < 94:
            findings.append(("Oxygen Saturation", "Medium",
                             f"Oxygen level below 94% ({oxygen:g}%) - monitor respiratory function"))

    # Fahrenheit
    temperature = reading.temperature
    if temperature is not None:
        if temperature >= 103:
            findings.append(("Temperature", "High", f"High fever: {temperature:g}°F"))
        elif temperature > 101.3:
            findings.append(("Temperature", "Medium", f"Fever alert: {temperature:g}°F"))

    return findings


def check_vital_signs_alerts(
    patient_id: str, reading: PatientVitals, date: str, existing_ids: Iterable[str] = ()
) -> List[VitalSignAlert]:
    """Alerts for one reading, with ids following the highest existing ALT id"""
    known_ids = list(existing_ids)
    alerts = []

    for alert_type, severity, message in _findings(reading):
        alert_id = next_sequential_id(known_ids, ALERT_ID_PREFIX)
        known_ids.append(alert_id)
        alerts.append(VitalSignAlert(
            id=alert_id,
            patient_id=patient_id,
            type=alert_type,
            message=message,
            severity=severity,
            date=date,
            resolved=False,
        ))

    if any(alert.severity == "High" for alert in alerts):
        logger.warning(f"VITAL ALERT: Patient {mask_patient_id(patient_id)} has {len(alerts)} threshold breaches")
    return alerts
