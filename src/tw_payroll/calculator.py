from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional

from .brackets import RateSchedule
from .insurance import InsuranceCalculator
from .models import EmployeeRecord, PayrollResult
from .overtime import OvertimeCalculator
from .schedules import default_schedule


class PensionBasis(str, Enum):
    """Which salary feeds the pension bracket lookup."""

    FOLLOW_INSURANCE = "follow_insurance"
    BASE_SALARY = "base_salary"


class PayrollCalculator:
    def __init__(
        self,
        schedule: Optional[RateSchedule] = None,
        pension_basis: PensionBasis = PensionBasis.FOLLOW_INSURANCE,
        overtime: Optional[OvertimeCalculator] = None,
    ):
        self.schedule = schedule or default_schedule()
        self.pension_basis = PensionBasis(pension_basis)
        self.insurance = InsuranceCalculator(self.schedule)
        self.overtime = overtime or OvertimeCalculator()

    @staticmethod
    def _insurance_basis(record: EmployeeRecord, fixed_monthly_total: float) -> float:
        # overtime and custom deductions never enter an insurance basis
        return record.base_salary if record.use_base_salary_for_insurance else fixed_monthly_total

    def _pension_basis(self, record: EmployeeRecord, insurance_basis: float) -> float:
        if self.pension_basis is PensionBasis.BASE_SALARY:
            return record.base_salary
        return insurance_basis

    def calculate_employee(self, record: EmployeeRecord) -> PayrollResult:
        regular_salary = record.regular_salary
        overtime_pay = self.overtime.compute(
            regular_salary,
            record.ot_hours_weekday,
            record.ot_hours_rest_day,
            record.ot_hours_holiday,
        )
        fixed_monthly_total = regular_salary + record.total_custom_allowances
        gross_salary = fixed_monthly_total + overtime_pay

        insurance_basis = self._insurance_basis(record, fixed_monthly_total)
        pension_basis = self._pension_basis(record, insurance_basis)

        labor_employee = self.insurance.employee_labor(insurance_basis)
        health_employee = self.insurance.employee_health(insurance_basis, record.dependents)
        custom_deductions = record.total_custom_deductions
        total_deductions = labor_employee + health_employee + custom_deductions

        labor_employer = self.insurance.employer_labor(insurance_basis)
        health_employer = self.insurance.employer_health(insurance_basis)
        pension = self.insurance.pension(pension_basis)

        net_pay = gross_salary - total_deductions
        # custom deductions are already reflected in net pay
        total_company_cost = net_pay + labor_employer + health_employer + pension

        return PayrollResult(
            employee_id=record.id,
            insured_salary_labor=self.insurance.labor_insured_salary(insurance_basis),
            insured_salary_health=self.insurance.health_insured_salary(insurance_basis),
            insured_salary_pension=self.insurance.pension_insured_salary(pension_basis),
            labor_insurance_employee=labor_employee,
            health_insurance_employee=health_employee,
            total_custom_deductions=custom_deductions,
            labor_insurance_employer=labor_employer,
            health_insurance_employer=health_employer,
            pension_company=pension,
            overtime_pay=overtime_pay,
            gross_salary=gross_salary,
            total_deductions=total_deductions,
            net_pay=net_pay,
            total_company_cost=total_company_cost,
        )

    def calculate_batch(self, records: Iterable[EmployeeRecord]) -> Mapping[str, PayrollResult]:
        results: Dict[str, PayrollResult] = {}
        for record in records:
            if record.id in results:
                raise ValueError(f"Duplicate employee id {record.id} in payroll batch")
            results[record.id] = self.calculate_employee(record)
        return MappingProxyType(results)


_default_calculator = PayrollCalculator()


def compute_payroll(record: EmployeeRecord) -> PayrollResult:
    return _default_calculator.calculate_employee(record)


def compute_payroll_batch(records: Iterable[EmployeeRecord]) -> Mapping[str, PayrollResult]:
    return _default_calculator.calculate_batch(records)
