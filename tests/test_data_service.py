import logging
from datetime import date

import pytest

from wardview.schemas.hospital import Patient, SecurePatient
from wardview.services.data_service import DataService
from wardview.services.data_sources import StaticDataSource
from wardview.services.errors import DataSourceError, DuplicateRecordError
from wardview.services.overview import OverviewAccumulator


class FailingSource(StaticDataSource):
    async def ping(self):
        raise DataSourceError("connection refused")

    async def list_patients(self):
        raise DataSourceError("connection refused")


async def test_secure_patients_are_masked(service):
    patients = await service.get_secure_patients()

    assert len(patients) == 5
    sarah = patients[0]
    assert isinstance(sarah, SecurePatient)
    assert sarah.id == "P••1"
    assert sarah.full_name == "Sarah J."
    assert sarah.doctor == "Dr. C."
    assert "email" not in sarah.to_dict()
    assert "phone" not in sarah.to_dict()


async def test_lookup_misses_return_none_or_empty(service):
    assert await service.get_secure_patient_by_id("P999") is None
    assert await service.get_patient_by_id("P999") is None
    assert await service.get_secure_staff_by_id("S999") is None
    assert await service.get_department_by_id(99) is None
    assert await service.get_patient_vitals("P999") is None
    assert await service.get_patient_timeline("P999") == []
    assert await service.get_secure_patients_by_department(99) == []
    assert await service.get_patients_by_staff_id("S999") == []


async def test_raw_patient_read_is_audited(service, caplog):
    with caplog.at_level(logging.INFO, logger="audit"):
        patient = await service.get_patient_by_id("P001")

    assert patient.email == "sarah.johnson@email.com"
    assert any("P••1" in record.getMessage() for record in caplog.records)
    assert not any("P001" in record.getMessage() for record in caplog.records)


async def test_staff_views(service):
    staff = await service.get_secure_staff_by_id("S004")
    assert staff.id == "S004"
    assert staff.full_name == "Nurse T."

    raw = await service.get_staff_by_id("S004")
    assert raw.phone == "(555) 444-5555"


async def test_staff_contact_is_masked_unless_role_allowed(service, pii_viewer):
    masked = await service.get_staff_contact("S001", role="receptionist")
    assert masked.email == "m•••n@hospital.com"
    assert masked.phone == "•••-•••-2222"
    assert masked.full_name == "Dr. C."

    raw = await service.get_staff_contact("S001", role=pii_viewer)
    assert raw.email == "mchen@hospital.com"
    assert raw.full_name == "Dr. Michael Chen"


async def test_patients_by_department_and_staff(service):
    cardiology = await service.get_secure_patients_by_department(2)
    assert [p.id for p in cardiology] == ["P••1"]

    staff = await service.get_secure_staff_by_department(2)
    assert [s.id for s in staff] == ["S001"]

    chen_patients = await service.get_patients_by_staff_id("S001")
    assert [p.full_name for p in chen_patients] == ["Sarah J."]


async def test_patients_by_staff_prefers_doctor_id(dataset):
    dataset["patients"][1]["doctorId"] = "S001"
    service = DataService(StaticDataSource(dataset))

    patients = await service.get_patients_by_staff_id("S001")

    assert sorted(p.full_name for p in patients) == ["Michael B.", "Sarah J."]


async def test_duplicate_staff_names_are_logged(dataset, caplog):
    dataset["staff"].append({**dataset["staff"][0], "id": "S009"})
    service = DataService(StaticDataSource(dataset))

    with caplog.at_level(logging.WARNING):
        patients = await service.get_patients_by_staff_id("S009")

    assert [p.full_name for p in patients] == ["Sarah J."]
    assert "display name shared" in caplog.text


async def test_staff_counts(service):
    by_role = {row.role: row.count for row in await service.get_staff_count_by_role()}
    assert by_role == {"Cardiologist": 1, "Orthopedic": 1, "Emergency": 1, "Registered": 1}

    by_department = {row.department: row.count for row in await service.get_staff_count_by_department()}
    assert by_department["Internal Medicine"] == 1
    assert sum(by_department.values()) == 4


async def test_patient_vitals_bundle(service):
    bundle = await service.get_patient_vitals("P001")

    assert len(bundle.vitals) == 4
    assert bundle.current_reading.blood_pressure == "140/90"
    assert [a.id for a in bundle.alerts] == ["ALT001"]
    assert bundle.alerts[0].patient_id == "P••1"


async def test_timeline_descriptions_are_masked(service):
    events = await service.get_patient_timeline("P001")

    assert len(events) == 5
    assert events[1].description == "Admitted to Cardiology department under Dr. Michael C."


async def test_recent_activity_messages_are_masked(service):
    activities = await service.get_recent_activities()
    messages = {a.id: a.message for a in activities}

    assert messages[3] == "Dr. James R. is now on call"
    assert messages[4] == "Patient P••1 - High blood pressure reading"


async def test_demographics_chart(service):
    chart = await service.get_demographics_mapped()

    assert chart.age[0].name == "Children"
    assert chart.age[0].value == 287
    assert chart.gender[0].name == "Female"
    assert chart.insurance[-1].name == "Other"


async def test_aggregates_are_served_from_cache(service, cache):
    first = await service.get_departments()
    assert cache.get("departments") is not None

    service.source._departments.clear()
    second = await service.get_departments()
    assert second == first

    cache.invalidate_all()
    assert await service.get_departments() == []


async def test_appointment_bundle(service):
    bundle = await service.get_appointments()

    assert len(bundle.monthly_trends) == 6
    assert len(bundle.weekly_schedule) == 7
    assert [a.id for a in bundle.upcoming] == ["APT004", "APT003", "APT002"]
    assert [a.id for a in bundle.completed] == ["APT005", "APT001"]
    assert bundle.upcoming[0].patient_name == "Emma D."
    assert bundle.upcoming[0].patient_id == "P••3"


async def test_appointments_by_day_and_patient(service):
    assert [a.id for a in await service.get_appointments_for_day("2024-06-14")] == ["APT003"]
    assert [a.id for a in await service.get_patient_appointments("P001")] == ["APT001", "APT002"]
    assert len(await service.get_all_appointments()) == 6


async def test_create_appointment_generates_id_and_updates_overview(service, cache):
    await service.get_overview()
    assert cache.get("overview") is not None

    created = await service.create_appointment(
        {"patientId": "P002", "patientName": "Michael Brown", "date": "2024-06-12", "time": "15:00"},
        today=date(2024, 6, 12),
    )

    assert created.id == "APT007"
    assert created.patient_name == "Michael B."
    assert cache.get("overview") is None

    overview = await service.get_overview()
    assert overview.total_appointments == 157
    assert overview.today_appointments == 43


async def test_create_appointment_after_apt049(dataset):
    dataset["appointmentRecords"].append({"id": "APT049", "patientId": "P001", "date": "2024-07-01"})
    service = DataService(StaticDataSource(dataset))

    created = await service.create_appointment_record({"patientId": "P003", "date": "2024-07-02"})

    assert created.id == "APT050"


async def test_create_duplicate_appointment_raises(service):
    with pytest.raises(DuplicateRecordError):
        await service.create_appointment({"id": "APT001", "patientId": "P001", "date": "2024-07-01"})


async def test_status_update_feeds_overview_counters(service):
    result = await service.update_appointment_status("APT002", "Completed")
    assert result.success
    assert result.message == "Appointment APT002 status updated to Completed"

    overview = await service.get_overview()
    assert overview.completed_appointments == 39

    await service.update_appointment_status("APT002", "Scheduled")
    overview = await service.get_overview()
    assert overview.completed_appointments == 39


async def test_reversible_status_update(dataset):
    service = DataService(StaticDataSource(dataset), accumulator=OverviewAccumulator(reversible=True))

    await service.update_appointment_status("APT001", "Cancelled")

    overview = await service.get_overview()
    assert overview.completed_appointments == 37
    assert overview.cancelled_appointments == 5


async def test_update_appointment_merges_partial_payload(service):
    updated = await service.update_appointment("APT003", {"time": "16:00", "notes": "Bring X-ray results"})

    assert updated.time == "16:00"
    assert updated.date == "2024-06-14"
    raw = await service.source.get_appointment("APT003")
    assert raw.notes == "Bring X-ray results"
    assert raw.patient_name == "Michael Brown"


async def test_missing_appointment_updates(service):
    assert await service.update_appointment("APT999", {"time": "16:00"}) is None
    result = await service.update_appointment_status("APT999", "Completed")
    assert not result.success
    assert result.message == "Appointment APT999 not found"


async def test_staff_status_and_schedule(service):
    result = await service.update_staff_status("S002", "Off Duty")
    assert result.message == "Staff S002 status updated to Off Duty"
    assert (await service.get_secure_staff_by_id("S002")).status == "Off Duty"
    assert not (await service.update_staff_status("S999", "Off Duty")).success

    saved = await service.save_staff_schedule([
        {"staffId": "S001", "date": "2024-06-13", "shift": "Day"},
        {"staffId": "S002", "date": "2024-06-20", "shift": "Night"},
    ])
    assert saved.message == "Schedule updated successfully for 2 entries"

    schedule = await service.get_staff_schedule("2024-06-10", "2024-06-16")
    assert [(e.staff_id, e.shift) for e in schedule] == [("S001", "Day")]


async def test_record_patient_vitals_raises_alerts(service):
    recorded = await service.record_patient_vitals(
        "P001", {"bloodPressure": "182/100", "heartRate": 88, "temperature": 98.6, "oxygenSaturation": 97},
        recorded_on=date(2024, 6, 12),
    )

    assert recorded.success
    assert [(a.id, a.severity) for a in recorded.alerts] == [("ALT006", "High")]
    assert recorded.alerts[0].patient_id == "P••1"

    bundle = await service.get_patient_vitals("P001")
    assert bundle.current_reading.blood_pressure == "182/100"
    assert bundle.vitals[-1].date == "2024-06-12"
    assert [a.id for a in bundle.alerts] == ["ALT001", "ALT006"]


async def test_record_vitals_defaults_to_today(service):
    await service.record_patient_vitals("P005", {"bloodPressure": "118/75", "heartRate": 74})

    bundle = await service.get_patient_vitals("P005")
    assert bundle.vitals[-1].date == date.today().isoformat()


async def test_record_vitals_for_unknown_patient(service):
    assert await service.record_patient_vitals("P999", {"heartRate": 80}) is None


async def test_check_connection_probes_once(dataset, caplog):
    source = FailingSource(dataset)
    service = DataService(source)

    with caplog.at_level(logging.WARNING):
        assert await service.check_connection() is False
    assert "Data source unavailable" in caplog.text

    source.ping = lambda: pytest.fail("probed twice")
    assert await service.check_connection() is False


async def test_source_errors_are_logged_and_raised(dataset, caplog):
    service = DataService(FailingSource(dataset))

    with caplog.at_level(logging.ERROR):
        with pytest.raises(DataSourceError):
            await service.get_secure_patients()

    assert "get_secure_patients failed" in caplog.text


async def test_reads_without_writes_are_stable(service):
    assert await service.get_enhanced_department(2) == await service.get_enhanced_department(2)
    assert await service.get_secure_patients() == await service.get_secure_patients()
    assert await service.get_patient_timeline("P001") == await service.get_patient_timeline("P001")
    assert await service.get_appointments() == await service.get_appointments()


async def test_department_rename_drops_name_joined_patients(dataset):
    dataset["patients"][2]["departmentId"] = 2
    before = await DataService(StaticDataSource(dataset)).get_secure_patients_by_department(2)

    dataset["departments"][1]["name"] = "Heart Centre"
    after = await DataService(StaticDataSource(dataset)).get_secure_patients_by_department(2)

    assert sorted(p.id for p in before) == ["P••1", "P••3"]
    assert [p.id for p in after] == ["P••3"]


def test_secure_patient_keeps_multi_word_diagnosis(dataset):
    patient = Patient.model_validate({**dataset["patients"][0], "diagnosis": "Chronic Obstructive Pulmonary Disease"})

    secure = SecurePatient.from_patient(patient)

    assert secure.diagnosis == "Chronic Obstructive Pulmonary Disease"
    assert secure.full_name == "Sarah J."
