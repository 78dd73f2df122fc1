from __future__ import annotations

import math
from typing import Optional

from .brackets import RateSchedule
from .schedules import default_schedule


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going toward positive infinity.

    Unlike the built-in ``round``, ``2.5`` becomes ``3``.
    """
    whole = math.floor(value)
    return whole + 1 if value - whole >= 0.5 else whole


class InsuranceCalculator:
    """Labor/health insurance and pension contributions for one basis salary.

    All amounts are whole NT dollars. Basis salaries and dependent counts are
    expected to be finite and non-negative; validation belongs to the caller.
    """

    def __init__(self, schedule: Optional[RateSchedule] = None):
        self.schedule = schedule or default_schedule()

    def labor_insured_salary(self, basis_salary: float) -> float:
        return self.schedule.labor.lookup(basis_salary)

    def health_insured_salary(self, basis_salary: float) -> float:
        return self.schedule.health.lookup(basis_salary)

    def pension_insured_salary(self, pension_basis_salary: float) -> float:
        return self.schedule.pension.lookup(pension_basis_salary)

    def chargeable_count(self, dependents: int) -> int:
        return 1 + min(dependents, self.schedule.max_chargeable_dependents)

    def employee_labor(self, basis_salary: float) -> int:
        s = self.schedule
        return round_half_up(self.labor_insured_salary(basis_salary) * s.labor_rate * s.labor_employee_share)

    def employee_health(self, basis_salary: float, dependents: int) -> int:
        s = self.schedule
        # the single-person share is rounded before multiplying by head count
        single_share = round_half_up(
            self.health_insured_salary(basis_salary) * s.health_rate * s.health_employee_share
        )
        return single_share * self.chargeable_count(dependents)

    def employer_labor(self, basis_salary: float) -> int:
        s = self.schedule
        return round_half_up(self.labor_insured_salary(basis_salary) * s.labor_rate * s.labor_employer_share)

    def employer_health(self, basis_salary: float) -> int:
        s = self.schedule
        return round_half_up(
            self.health_insured_salary(basis_salary)
            * s.health_rate
            * s.health_employer_share
            * (1 + s.average_dependents)
        )

    def pension(self, pension_basis_salary: float) -> int:
        return round_half_up(self.pension_insured_salary(pension_basis_salary) * self.schedule.pension_rate)


_default_calculator = InsuranceCalculator()


def compute_employee_labor_insurance(basis_salary: float) -> int:
    return _default_calculator.employee_labor(basis_salary)


def compute_employee_health_insurance(basis_salary: float, dependents: int) -> int:
    return _default_calculator.employee_health(basis_salary, dependents)


def compute_employer_labor_insurance(basis_salary: float) -> int:
    return _default_calculator.employer_labor(basis_salary)


def compute_employer_health_insurance(basis_salary: float) -> int:
    return _default_calculator.employer_health(basis_salary)


def compute_pension(pension_basis_salary: float) -> int:
    return _default_calculator.pension(pension_basis_salary)
