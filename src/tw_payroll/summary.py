from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping, Sequence

from .calculator import PayrollCalculator
from .models import EmployeeRecord, PayrollResult


@dataclass
class PayrollTotals:
    base_salary: float = 0
    meal_allowance: float = 0
    fuel_allowance: float = 0
    attendance_bonus: float = 0
    custom_allowances: Dict[str, float] = field(default_factory=dict)
    overtime_pay: float = 0
    gross_salary: float = 0
    labor_insurance_employee: float = 0
    health_insurance_employee: float = 0
    custom_deductions: Dict[str, float] = field(default_factory=dict)
    total_deductions: float = 0
    net_pay: float = 0
    labor_insurance_employer: float = 0
    health_insurance_employer: float = 0
    pension_company: float = 0
    total_company_cost: float = 0

    @property
    def fixed_allowances(self) -> float:
        return self.meal_allowance + self.fuel_allowance + self.attendance_bonus

    @property
    def employer_insurance(self) -> float:
        return self.labor_insurance_employer + self.health_insurance_employer


@dataclass
class PayrollSummary:
    employees: Mapping[str, PayrollResult]
    totals: PayrollTotals
    allowance_names: List[str]
    deduction_names: List[str]


def custom_item_names(records: Iterable[EmployeeRecord], kind: str) -> List[str]:
    """Distinct custom allowance or deduction names in first-seen order."""
    names: Dict[str, None] = {}
    for record in records:
        items = record.custom_allowances if kind == "allowance" else record.custom_deductions
        for item in items:
            names.setdefault(item.name, None)
    return list(names)


def summarize(records: Sequence[EmployeeRecord], results: Mapping[str, PayrollResult]) -> PayrollSummary:
    allowance_names = custom_item_names(records, "allowance")
    deduction_names = custom_item_names(records, "deduction")
    totals = PayrollTotals(
        custom_allowances={name: 0 for name in allowance_names},
        custom_deductions={name: 0 for name in deduction_names},
    )

    for record in records:
        result = results[record.id]
        totals.base_salary += record.base_salary
        totals.meal_allowance += record.meal_allowance
        totals.fuel_allowance += record.fuel_allowance
        totals.attendance_bonus += record.attendance_bonus
        for name in allowance_names:
            totals.custom_allowances[name] += record.allowance_amount(name)
        totals.overtime_pay += result.overtime_pay
        totals.gross_salary += result.gross_salary
        totals.labor_insurance_employee += result.labor_insurance_employee
        totals.health_insurance_employee += result.health_insurance_employee
        for name in deduction_names:
            totals.custom_deductions[name] += record.deduction_amount(name)
        totals.total_deductions += result.total_deductions
        totals.net_pay += result.net_pay
        totals.labor_insurance_employer += result.labor_insurance_employer
        totals.health_insurance_employer += result.health_insurance_employer
        totals.pension_company += result.pension_company
        totals.total_company_cost += result.total_company_cost

    return PayrollSummary(
        employees=results,
        totals=totals,
        allowance_names=allowance_names,
        deduction_names=deduction_names,
    )


class PreviewWizard:
    def __init__(self, calculator: PayrollCalculator):
        self.calculator = calculator

    def preview(self, records: Sequence[EmployeeRecord]) -> PayrollSummary:
        results = self.calculator.calculate_batch(records)
        return summarize(records, results)
