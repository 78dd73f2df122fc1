from dataclasses import replace

import pytest

from tw_payroll.calculator import PayrollCalculator, PensionBasis, compute_payroll, compute_payroll_batch
from tw_payroll.models import CustomItem, EmployeeRecord
from tw_payroll.schedules import SCHEDULE_115


def build_record(**overrides) -> EmployeeRecord:
    fields = dict(
        id="emp1",
        name="王小明",
        department="工程部",
        position="工程師",
        base_salary=60000,
        meal_allowance=3000,
        fuel_allowance=1000,
        attendance_bonus=2000,
        use_base_salary_for_insurance=False,
        ot_hours_weekday=3,
        custom_allowances=(CustomItem("a1", "主管加給", 5000),),
    )
    fields.update(overrides)
    return EmployeeRecord(**fields)


def assert_identities(result):
    assert result.net_pay == result.gross_salary - result.total_deductions
    assert result.total_company_cost == (
        result.net_pay
        + result.labor_insurance_employer
        + result.health_insurance_employer
        + result.pension_company
    )


def test_full_settlement_for_one_employee():
    result = compute_payroll(build_record())

    assert result.employee_id == "emp1"
    assert result.overtime_pay == 1192
    assert result.gross_salary == 72192
    # insurance basis is the fixed monthly total, custom allowance included
    assert result.insured_salary_labor == 45800
    assert result.insured_salary_health == 72800
    assert result.insured_salary_pension == 72800
    assert result.labor_insurance_employee == 1145
    assert result.health_insurance_employee == 1129
    assert result.total_custom_deductions == 0
    assert result.total_deductions == 2274
    assert result.net_pay == 69918
    assert result.health_insurance_employer == 3568
    assert result.pension_company == 4368
    assert_identities(result)


def test_overtime_uses_regular_salary_only():
    with_allowance = compute_payroll(build_record())
    without_allowance = compute_payroll(build_record(custom_allowances=()))

    assert with_allowance.overtime_pay == without_allowance.overtime_pay == 1192
    assert without_allowance.gross_salary == 67192
    assert without_allowance.insured_salary_health == 66800
    assert without_allowance.health_insurance_employee == 1036


def test_base_salary_flag_narrows_insurance_and_pension_basis():
    result = compute_payroll(build_record(use_base_salary_for_insurance=True))

    assert result.gross_salary == 72192
    assert result.insured_salary_health == 60800
    assert result.insured_salary_pension == 60800
    # 60800 * 0.0517 * 0.30 = 943.008
    assert result.health_insurance_employee == 943
    assert result.pension_company == 3648
    assert_identities(result)


def test_pension_basis_can_follow_base_salary_for_everyone():
    calc = PayrollCalculator(SCHEDULE_115, pension_basis=PensionBasis.BASE_SALARY)

    result = calc.calculate_employee(build_record())

    assert result.insured_salary_health == 72800
    assert result.insured_salary_pension == 60800
    assert result.pension_company == 3648


def test_custom_deductions_reduce_net_pay_and_company_cost():
    baseline = compute_payroll(build_record())
    record = build_record(
        custom_deductions=(CustomItem("d1", "借支", 1000), CustomItem("d2", "伙食費", 500)),
    )

    result = compute_payroll(record)

    assert result.total_custom_deductions == 1500
    assert result.total_deductions == baseline.total_deductions + 1500
    assert result.net_pay == baseline.net_pay - 1500
    assert result.total_company_cost == baseline.total_company_cost - 1500
    # deductions never change the insurance basis
    assert result.labor_insurance_employer == baseline.labor_insurance_employer
    assert result.health_insurance_employer == baseline.health_insurance_employer
    assert_identities(result)


def test_dependents_beyond_three_are_free():
    three = compute_payroll(build_record(dependents=3))
    five = compute_payroll(build_record(dependents=5))

    assert three.health_insurance_employee == 1129 * 4
    assert five == three


@pytest.mark.parametrize(
    "overrides",
    [
        {},
        {"base_salary": 0, "meal_allowance": 0, "fuel_allowance": 0, "attendance_bonus": 0, "custom_allowances": ()},
        {"base_salary": 27470, "ot_hours_weekday": 0, "ot_hours_holiday": 10.5, "dependents": 2},
        {"base_salary": 250000, "ot_hours_rest_day": 6.5, "use_base_salary_for_insurance": True},
        {"custom_deductions": (CustomItem("d1", "罰款", 99999),)},
    ],
)
def test_identities_hold(overrides):
    assert_identities(compute_payroll(build_record(**overrides)))


def test_result_is_recomputed_identically():
    record = build_record(ot_hours_holiday=9.5, dependents=1)

    assert compute_payroll(record) == compute_payroll(record)


def test_batch_is_keyed_by_employee_id():
    records = [build_record(id="emp1"), build_record(id="emp2", base_salary=35000)]

    results = compute_payroll_batch(records)

    assert set(results) == {"emp1", "emp2"}
    assert results["emp1"] == compute_payroll(records[0])
    # regular salary 41000: 170.83 * 2 * 4/3 + 170.83 * 5/3 = 740.28
    assert results["emp2"].gross_salary == 41000 + 5000 + 741
    with pytest.raises(TypeError):
        results["emp3"] = results["emp1"]


def test_batch_rejects_duplicate_ids():
    with pytest.raises(ValueError):
        compute_payroll_batch([build_record(), build_record()])


def test_calculator_uses_injected_schedule():
    schedule = replace(SCHEDULE_115, version="test", health_rate=0.05)
    calc = PayrollCalculator(schedule)

    result = calc.calculate_employee(build_record())

    # 72800 * 0.05 * 0.30 = 1092
    assert result.health_insurance_employee == 1092
    assert result.labor_insurance_employee == 1145


def test_settlement_writes_nothing_to_stdout(capsys):
    compute_payroll(EmployeeRecord(id="e1", base_salary=30000))
    compute_payroll_batch([build_record(id="emp1"), build_record(id="emp2")])

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""
