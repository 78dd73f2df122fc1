from __future__ import annotations

import csv
from pathlib import Path
from typing import Any, Dict, Iterable, List

from .models import EmployeeRecord
from .summary import PayrollSummary

ReportRow = Dict[str, Any]

TOTAL_LABEL = "總計"


def allowance_column(name: str) -> str:
    return f"{name}(加)"


def deduction_column(name: str) -> str:
    return f"{name}(扣)"


def _stringify(value: Any) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _row(
    name: str,
    unit: str,
    base_salary: float,
    fixed_allowances: float,
    allowances: Dict[str, float],
    overtime_pay: float,
    gross_salary: float,
    labor_employee: float,
    health_employee: float,
    deductions: Dict[str, float],
    total_deductions: float,
    net_pay: float,
    labor_employer: float,
    health_employer: float,
    pension: float,
    total_cost: float,
) -> ReportRow:
    row: ReportRow = {
        "姓名": name,
        "部門/職位": unit,
        "本俸": base_salary,
        "伙食/油資/全勤": fixed_allowances,
    }
    row.update({allowance_column(item): amount for item, amount in allowances.items()})
    row.update(
        {
            "加班費": overtime_pay,
            "應發總額": gross_salary,
            "勞保(自)": labor_employee,
            "健保(自)": health_employee,
        }
    )
    row.update({deduction_column(item): amount for item, amount in deductions.items()})
    row.update(
        {
            "應扣總額": total_deductions,
            "實發金額": net_pay,
            "勞保(公)": labor_employer,
            "健保(公)": health_employer,
            "勞退(6%)": pension,
            "公司總成本": total_cost,
        }
    )
    return row


def build_report_rows(records: Iterable[EmployeeRecord], summary: PayrollSummary) -> List[ReportRow]:
    """One row per employee followed by a totals row.

    Custom allowance and deduction columns are the union of names across all
    employees, suffixed with ``(加)`` or ``(扣)`` so they never share a header
    with each other or with a fixed column. An employee without a given item
    reports ``0`` for it.
    """
    rows: List[ReportRow] = []
    for record in records:
        result = summary.employees[record.id]
        rows.append(
            _row(
                record.name,
                f"{record.department}/{record.position}",
                record.base_salary,
                record.fixed_allowances,
                {name: record.allowance_amount(name) for name in summary.allowance_names},
                result.overtime_pay,
                result.gross_salary,
                result.labor_insurance_employee,
                result.health_insurance_employee,
                {name: record.deduction_amount(name) for name in summary.deduction_names},
                result.total_deductions,
                result.net_pay,
                result.labor_insurance_employer,
                result.health_insurance_employer,
                result.pension_company,
                result.total_company_cost,
            )
        )

    totals = summary.totals
    rows.append(
        _row(
            TOTAL_LABEL,
            "",
            totals.base_salary,
            totals.fixed_allowances,
            dict(totals.custom_allowances),
            totals.overtime_pay,
            totals.gross_salary,
            totals.labor_insurance_employee,
            totals.health_insurance_employee,
            dict(totals.custom_deductions),
            totals.total_deductions,
            totals.net_pay,
            totals.labor_insurance_employer,
            totals.health_insurance_employer,
            totals.pension_company,
            totals.total_company_cost,
        )
    )
    return rows


def export_csv(rows: Iterable[ReportRow], output_path: Path) -> Path:
    rows = list(rows)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with output_path.open("w", newline="", encoding="utf-8-sig") as handle:
        if not rows:
            return output_path
        writer = csv.DictWriter(handle, fieldnames=list(rows[0].keys()))
        writer.writeheader()
        for row in rows:
            writer.writerow({key: _stringify(value) for key, value in row.items()})
    return output_path
