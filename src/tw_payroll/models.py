from __future__ import annotations

import operator
from dataclasses import dataclass, field
from functools import reduce
from typing import Optional, Tuple


@dataclass(frozen=True)
class CustomItem:
    """A named allowance or deduction line; ``amount`` is non-negative."""

    id: str
    name: str
    amount: float


@dataclass(frozen=True)
class EmployeeRecord:
    """Fixed payroll inputs for one employee and one pay period.

    Name, position, department, note, bank details and join date are carried
    for display only and never affect the settlement. Monetary fields must be
    non-negative and overtime hours non-negative in half-hour steps; the
    calculators do not check this (see ``tw_payroll.drafts``).
    """

    id: str
    name: str = ""
    position: str = ""
    department: str = ""
    note: Optional[str] = None
    bank_name: str = ""
    bank_account: str = ""
    base_salary: float = 0
    meal_allowance: float = 0
    fuel_allowance: float = 0
    attendance_bonus: float = 0
    use_base_salary_for_insurance: bool = False
    ot_hours_weekday: float = 0
    ot_hours_rest_day: float = 0
    ot_hours_holiday: float = 0
    dependents: int = 0
    custom_allowances: Tuple[CustomItem, ...] = field(default_factory=tuple)
    custom_deductions: Tuple[CustomItem, ...] = field(default_factory=tuple)
    join_date: str = ""

    @property
    def regular_salary(self) -> float:
        return self.base_salary + self.meal_allowance + self.fuel_allowance + self.attendance_bonus

    @property
    def fixed_allowances(self) -> float:
        return self.meal_allowance + self.fuel_allowance + self.attendance_bonus

    @property
    def total_custom_allowances(self) -> float:
        return reduce(operator.add, (item.amount for item in self.custom_allowances), 0)

    @property
    def total_custom_deductions(self) -> float:
        return reduce(operator.add, (item.amount for item in self.custom_deductions), 0)

    def allowance_amount(self, name: str) -> float:
        return next((a.amount for a in self.custom_allowances if a.name == name), 0)

    def deduction_amount(self, name: str) -> float:
        return next((d.amount for d in self.custom_deductions if d.name == name), 0)


@dataclass(frozen=True)
class PayrollResult:
    employee_id: str
    insured_salary_labor: float
    insured_salary_health: float
    insured_salary_pension: float
    labor_insurance_employee: int
    health_insurance_employee: int
    total_custom_deductions: float
    labor_insurance_employer: int
    health_insurance_employer: int
    pension_company: int
    overtime_pay: int
    gross_salary: float
    total_deductions: float
    net_pay: float
    total_company_cost: float

    @property
    def employer_insurance(self) -> int:
        return self.labor_insurance_employer + self.health_insurance_employer
