from wardview.services.data_service import DataService, numeric_value
from wardview.services.data_sources import StaticDataSource


def _rows(dataset, metric):
    return dataset["quality"][metric]["byDepartment"]


def _drop(rows, department):
    rows[:] = [row for row in rows if row["department"] != department]


def _row(rows, department):
    return next(row for row in rows if row["department"] == department)


async def _enhanced(dataset, department_id=2):
    return await DataService(StaticDataSource(dataset)).get_enhanced_department(department_id)


def test_numeric_value():
    assert numeric_value(4.8) == 4.8
    assert numeric_value(0) == 0
    assert numeric_value("9.8") == 9.8
    assert numeric_value("n/a") is None
    assert numeric_value("") is None
    assert numeric_value(None) is None
    assert numeric_value(True) is None
    assert numeric_value(float("nan")) is None


async def test_fully_joined_department(dataset):
    enhanced = await _enhanced(dataset)

    assert enhanced.department.name == "Cardiology"
    assert enhanced.financial.revenue == 124500
    assert enhanced.financial.percentage == 17.8
    assert enhanced.quality.satisfaction.score == 4.8
    assert enhanced.quality.satisfaction.responses == 187
    assert (enhanced.quality.wait_time.avg_wait, enhanced.quality.wait_time.target) == (28, 30)
    assert (enhanced.quality.readmission.rate, enhanced.quality.readmission.target) == (9.8, 8.0)


async def test_cardiology_without_satisfaction_entry(dataset):
    _drop(_rows(dataset, "patientSatisfaction"), "Cardiology")

    enhanced = await _enhanced(dataset)

    assert enhanced.financial.revenue == 124500
    assert enhanced.financial.percentage == 17.8
    assert enhanced.quality.satisfaction is None
    assert enhanced.quality.wait_time is not None


async def test_unknown_department(dataset):
    assert await _enhanced(dataset, department_id=99) is None


async def test_missing_financial_row(dataset):
    _drop(dataset["financial"]["byDepartment"], "Cardiology")

    enhanced = await _enhanced(dataset)

    assert enhanced.financial is None


async def test_non_numeric_satisfaction_score(dataset):
    _row(_rows(dataset, "patientSatisfaction"), "Cardiology")["score"] = "pending"

    assert (await _enhanced(dataset)).quality.satisfaction is None


async def test_wait_time_target_defaults_to_average_plus_ten(dataset):
    del _row(_rows(dataset, "waitTimes"), "Cardiology")["target"]

    wait_time = (await _enhanced(dataset)).quality.wait_time

    assert (wait_time.avg_wait, wait_time.target) == (28, 38)


async def test_wait_time_falls_back_to_department_average(dataset):
    _drop(_rows(dataset, "waitTimes"), "Cardiology")
    dataset["departments"][1]["avgWaitTime"] = 31

    wait_time = (await _enhanced(dataset)).quality.wait_time

    assert (wait_time.avg_wait, wait_time.target) == (31, 41)


async def test_non_numeric_wait_uses_department_average(dataset):
    _row(_rows(dataset, "waitTimes"), "Cardiology")["avgWait"] = "unknown"

    wait_time = (await _enhanced(dataset)).quality.wait_time

    assert (wait_time.avg_wait, wait_time.target) == (28, 38)


async def test_zero_target_is_kept(dataset):
    _row(_rows(dataset, "waitTimes"), "Cardiology")["target"] = 0

    assert (await _enhanced(dataset)).quality.wait_time.target == 0


async def test_readmission_target_defaults_to_rate_minus_one(dataset):
    _row(_rows(dataset, "readmissionRates"), "Cardiology")["target"] = None

    readmission = (await _enhanced(dataset)).quality.readmission

    assert (readmission.rate, readmission.target) == (9.8, 8.8)


async def test_missing_readmission_row(dataset):
    _drop(_rows(dataset, "readmissionRates"), "Cardiology")

    assert (await _enhanced(dataset)).quality.readmission is None


async def test_numeric_strings_are_accepted(dataset):
    _row(_rows(dataset, "readmissionRates"), "Cardiology").update({"rate": "9.8", "target": "8"})

    readmission = (await _enhanced(dataset)).quality.readmission

    assert (readmission.rate, readmission.target) == (9.8, 8)
