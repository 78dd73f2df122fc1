"""Taiwan statutory payroll settlement engine."""

from .brackets import BracketTable, RateSchedule, lookup_tier
from .calculator import PayrollCalculator, PensionBasis, compute_payroll, compute_payroll_batch
from .insurance import (
    InsuranceCalculator,
    compute_employee_health_insurance,
    compute_employee_labor_insurance,
    compute_employer_health_insurance,
    compute_employer_labor_insurance,
    compute_pension,
)
from .models import CustomItem, EmployeeRecord, PayrollResult
from .overtime import OvertimeCalculator, compute_overtime_pay, overtime_breakdown_text
from .schedules import ScheduleRepository, default_schedule

__all__ = [
    "BracketTable",
    "CustomItem",
    "EmployeeRecord",
    "InsuranceCalculator",
    "OvertimeCalculator",
    "PayrollCalculator",
    "PayrollResult",
    "PensionBasis",
    "RateSchedule",
    "ScheduleRepository",
    "compute_employee_health_insurance",
    "compute_employee_labor_insurance",
    "compute_employer_health_insurance",
    "compute_employer_labor_insurance",
    "compute_overtime_pay",
    "compute_payroll",
    "compute_payroll_batch",
    "compute_pension",
    "default_schedule",
    "lookup_tier",
    "overtime_breakdown_text",
]
