import pytest
from fastapi.testclient import TestClient

from wardview.api.dependencies import get_records_service
from wardview.main import create_app
from wardview.services.cache import ResponseCache
from wardview.services.data_service import DataService


@pytest.fixture()
def records_service(sql_source):
    return DataService(sql_source, cache=ResponseCache())


@pytest.fixture()
def client(records_service):
    app = create_app()
    app.dependency_overrides[get_records_service] = lambda: records_service
    return TestClient(app)


def test_records_are_raw_camel_case(client):
    sarah = client.get("/api/records/patients/P001").json()
    assert sarah["email"] == "sarah.johnson@email.com"
    assert sarah["departmentId"] == 2
    assert sarah["doctorId"] == "S001"

    assert client.get("/api/records/patients/P999").status_code == 404
    assert len(client.get("/api/records/staff").json()) == 4


def test_patient_crud(client):
    created = client.post("/api/records/patients", json={
        "id": "P010", "firstName": "Nora", "lastName": "Quinn", "department": "Surgery",
        "status": "Scheduled", "severity": "Low", "allergies": ["Latex", "Latex"],
    })
    assert created.status_code == 201
    assert created.json()["fullName"] == "Nora Quinn"
    assert created.json()["departmentId"] == 6
    assert created.json()["allergies"] == ["Latex"]

    updated = client.put("/api/records/patients/P010", json={"room": "S-101", "status": "In Treatment"})
    assert updated.json()["room"] == "S-101"
    assert updated.json()["fullName"] == "Nora Quinn"

    assert client.delete("/api/records/patients/P010").json() == {"deleted": True}
    assert client.delete("/api/records/patients/P010").status_code == 404


def test_invalid_patient_is_422(client):
    resp = client.post("/api/records/patients", json={"id": "P011", "status": "Sleeping", "severity": "Low"})
    assert resp.status_code == 422


def test_staff_crud(client):
    client.post("/api/records/staff", json={
        "id": "S010", "fullName": "Dr. Ivy Park", "department": "Radiology", "status": "On Call",
    })
    updated = client.put("/api/records/staff/S010", json={"specialty": "Imaging"})
    assert updated.json()["specialty"] == "Imaging"
    assert updated.json()["departmentId"] == 7

    status = client.put("/api/records/staff/S010/status", json={"status": "On Duty"})
    assert status.json()["status"] == "On Duty"
    assert client.put("/api/records/staff/S999/status", json={"status": "On Duty"}).status_code == 404
    assert client.delete("/api/records/staff/S010").json() == {"deleted": True}


def test_department_names_stay_unique(client):
    renamed = client.put("/api/records/departments/7", json={"name": "Cardiology", "code": "RAD"})
    assert renamed.status_code == 409

    saved = client.put("/api/records/departments/8", json={"name": "Oncology", "code": "ONC"})
    assert saved.status_code == 200
    assert client.get("/api/records/departments/8").json()["name"] == "Oncology"


def test_appointment_crud_feeds_overview(client):
    created = client.post("/api/records/appointments", json={"patientId": "P005", "date": "2024-07-02"})
    assert created.status_code == 201
    assert created.json()["id"] == "APT007"

    duplicate = client.post("/api/records/appointments", json={"id": "APT007", "patientId": "P005", "date": "2024-07-02"})
    assert duplicate.status_code == 409

    updated = client.put("/api/records/appointments/APT007", json={"status": "Cancelled"})
    assert updated.json()["status"] == "Cancelled"

    overview = client.get("/api/records/overview").json()
    assert overview["totalAppointments"] == 157
    assert overview["cancelledAppointments"] == 5

    assert client.put("/api/records/appointments/APT999", json={"status": "Cancelled"}).status_code == 404
    assert client.delete("/api/records/appointments/APT007").json() == {"deleted": True}


def test_appointment_statistics_route_is_not_an_id(client):
    resp = client.get("/api/records/appointments/statistics")
    assert resp.status_code == 200
    assert len(resp.json()["weeklySchedule"]) == 7


def test_vitals_and_alerts(client):
    resp = client.post("/api/records/patients/P002/vitals", json={"bloodPressure": "150/95", "oxygenSaturation": 91})
    body = resp.json()
    assert body["success"] is True
    assert [(a["id"], a["patientId"]) for a in body["alerts"]] == [("ALT006", "P002"), ("ALT007", "P002")]

    assert len(client.get("/api/records/patients/P002/vitals").json()) == 4
    assert len(client.get("/api/records/alerts").json()) == 7
    assert len(client.get("/api/records/patients/P002/alerts").json()) == 4


def test_aggregate_records(client):
    assert client.get("/api/records/financial").json()["byDepartment"][0]["department"] == "Surgery"
    assert len(client.get("/api/records/activities/recent").json()) == 5
    assert client.get("/api/records/patients/P001/timeline").json()[0]["id"] == "TL001-P001"

    saved = client.put("/api/records/overview", json={"totalAppointments": 1})
    assert saved.json()["totalAppointments"] == 1
    assert client.get("/api/records/overview").json()["totalAppointments"] == 1


async def test_staff_writes_refresh_cached_counts(client, records_service):
    by_department = await records_service.get_staff_count_by_department()
    assert "Radiology" not in {row.department for row in by_department}

    client.post("/api/records/staff", json={
        "id": "S010", "fullName": "Dr. Ivy Park", "role": "Radiologist",
        "department": "Radiology", "status": "On Duty",
    })
    by_department = {row.department: row.count for row in await records_service.get_staff_count_by_department()}
    by_role = {row.role: row.count for row in await records_service.get_staff_count_by_role()}
    assert by_department["Radiology"] == 1
    assert by_role["Radiologist"] == 1

    client.put("/api/records/staff/S010", json={"department": "Oncology"})
    by_department = {row.department: row.count for row in await records_service.get_staff_count_by_department()}
    assert "Radiology" not in by_department
    assert by_department["Oncology"] == 1

    client.delete("/api/records/staff/S010")
    by_role = {row.role: row.count for row in await records_service.get_staff_count_by_role()}
    assert "Radiologist" not in by_role


async def test_department_delete_refreshes_cached_list(client, records_service):
    assert 7 in [d.id for d in await records_service.get_departments()]

    assert client.delete("/api/records/departments/7").json() == {"deleted": True}

    assert 7 not in [d.id for d in await records_service.get_departments()]
