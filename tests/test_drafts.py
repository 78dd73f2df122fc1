import json

import pytest
from pydantic import ValidationError

from tw_payroll.drafts import EmployeeDraft, load_employees, parse_employees
from tw_payroll.models import CustomItem


def camel_payload(**overrides):
    payload = {
        "id": 1718000000000,
        "name": "王小明",
        "position": "工程師",
        "department": "工程部",
        "bankName": "台灣銀行",
        "bankAccount": "012-345678",
        "baseSalary": 60000,
        "mealAllowance": 3000,
        "fuelAllowance": 1000,
        "attendanceBonus": 2000,
        "useBaseSalaryForInsurance": True,
        "otHoursWeekday": 3,
        "otHoursRestDay": 1.5,
        "otHoursHoliday": 0,
        "dependents": 2,
        "customAllowances": [
            {"id": "a1", "name": "主管加給", "amount": 5000},
            {"id": "a2", "name": "", "amount": 300},
        ],
        "customDeductions": [{"id": "d1", "name": "借支", "amount": 0}],
        "joinDate": "2024-03-01",
    }
    payload.update(overrides)
    return payload


def test_camel_case_payload_builds_record():
    record = EmployeeDraft.model_validate(camel_payload()).to_record()

    assert record.id == "1718000000000"
    assert record.bank_name == "台灣銀行"
    assert record.base_salary == 60000
    assert record.use_base_salary_for_insurance is True
    assert record.ot_hours_rest_day == 1.5
    assert record.dependents == 2
    assert record.join_date == "2024-03-01"


def test_blank_custom_items_are_dropped():
    record = EmployeeDraft.model_validate(camel_payload()).to_record()

    assert record.custom_allowances == (CustomItem("a1", "主管加給", 5000),)
    assert record.custom_deductions == ()


def test_snake_case_fields_are_accepted():
    draft = EmployeeDraft(id="emp1", base_salary=30000, ot_hours_holiday=8)

    record = draft.to_record()

    assert record.base_salary == 30000
    assert record.ot_hours_holiday == 8
    assert record.custom_allowances == ()


@pytest.mark.parametrize(
    "overrides",
    [
        {"baseSalary": -1},
        {"mealAllowance": float("nan")},
        {"otHoursWeekday": 1.25},
        {"otHoursHoliday": -0.5},
        {"dependents": -1},
        {"id": ""},
        {"customAllowances": [{"id": "a1", "name": "獎金", "amount": -10}]},
    ],
)
def test_invalid_drafts_are_rejected(overrides):
    with pytest.raises(ValidationError):
        EmployeeDraft.model_validate(camel_payload(**overrides))


def test_parse_employees_accepts_sync_payload():
    records = parse_employees({"status": "success", "employees": [camel_payload(), camel_payload(id="2")]})

    assert [r.id for r in records] == ["1718000000000", "2"]


def test_parse_employees_rejects_other_shapes():
    with pytest.raises(ValueError):
        parse_employees("not a list")


def test_load_employees_reads_json_file(tmp_path):
    path = tmp_path / "employees.json"
    path.write_text(json.dumps([camel_payload()], ensure_ascii=False), encoding="utf-8")

    records = load_employees(path)

    assert len(records) == 1
    assert records[0].name == "王小明"
