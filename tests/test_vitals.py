import logging

from wardview.schemas.hospital import PatientVitals
from wardview.services.vitals import check_vital_signs_alerts, parse_blood_pressure


def test_parse_blood_pressure():
    assert parse_blood_pressure("140/90") == (140, 90)
    assert parse_blood_pressure(" 120 / 80 ") == (120, 80)
    assert parse_blood_pressure("high") is None
    assert parse_blood_pressure("") is None


def test_normal_reading_raises_nothing():
    reading = PatientVitals(blood_pressure="118/75", heart_rate=74, temperature=98.7, oxygen_saturation=99)
    assert check_vital_signs_alerts("P005", reading, "2024-06-12") == []


def test_each_breach_gets_the_next_alert_id():
    reading = PatientVitals(blood_pressure="185/95", heart_rate=130, temperature=101.5, oxygen_saturation=92)

    alerts = check_vital_signs_alerts("P001", reading, "2024-06-12", existing_ids=["ALT001", "ALT005"])

    assert [a.id for a in alerts] == ["ALT006", "ALT007", "ALT008", "ALT009"]
    assert [(a.type, a.severity) for a in alerts] == [
        ("Blood Pressure", "High"),
        ("Heart Rate", "High"),
        ("Oxygen Saturation", "Medium"),
        ("Temperature", "Medium"),
    ]
    assert all(a.patient_id == "P001" and a.date == "2024-06-12" and not a.resolved for a in alerts)


def test_moderate_readings():
    reading = PatientVitals(blood_pressure="145/92", heart_rate=55, oxygen_saturation=88)

    alerts = check_vital_signs_alerts("P002", reading, "2024-06-12")

    assert [(a.type, a.severity) for a in alerts] == [
        ("Blood Pressure", "Medium"),
        ("Heart Rate", "Low"),
        ("Oxygen Saturation", "High"),
    ]
    assert alerts[0].id == "ALT001"
    assert "145/92" in alerts[0].message


def test_high_severity_warning_masks_patient_id(caplog):
    reading = PatientVitals(blood_pressure="185/95", heart_rate=72, temperature=98.6, oxygen_saturation=98)

    with caplog.at_level(logging.WARNING, logger="wardview.services.vitals"):
        check_vital_signs_alerts("P001", reading, "2024-06-12")

    assert "P••1" in caplog.text
    assert "P001" not in caplog.text
