from __future__ import annotations

import argparse
from pathlib import Path

from .calculator import PayrollCalculator, PensionBasis
from .config import get_settings
from .drafts import load_employees
from .exporter import build_report_rows, export_csv
from .logging import configure_logging, get_logger
from .models import EmployeeRecord, PayrollResult
from .overtime import OvertimeCalculator
from .schedules import ScheduleRepository
from .summary import PayrollTotals, PreviewWizard

logger = get_logger(__name__)


def _money(value: float) -> str:
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,.2f}"


def format_settlement(record: EmployeeRecord, result: PayrollResult) -> str:
    return (
        f"{record.id} {record.name or '-'}"
        f" gross: {_money(result.gross_salary)}"
        f" overtime: {_money(result.overtime_pay)}"
        f" deductions: {_money(result.total_deductions)}"
        f" net: {_money(result.net_pay)}"
        f" company cost: {_money(result.total_company_cost)}"
    )


def format_totals(totals: PayrollTotals) -> str:
    return (
        f"TOTAL gross: {_money(totals.gross_salary)}"
        f" net: {_money(totals.net_pay)}"
        f" employer insurance: {_money(totals.employer_insurance)}"
        f" pension: {_money(totals.pension_company)}"
        f" company cost: {_money(totals.total_company_cost)}"
    )


def build_calculator(args: argparse.Namespace) -> PayrollCalculator:
    settings = get_settings()
    schedule = ScheduleRepository().load(args.schedule or settings.schedule_version)
    pension_basis = PensionBasis(args.pension_basis or settings.pension_basis)
    return PayrollCalculator(schedule, pension_basis=pension_basis)


def cmd_compute(args: argparse.Namespace) -> None:
    calculator = build_calculator(args)
    records = load_employees(Path(args.path))
    summary = PreviewWizard(calculator).preview(records)
    for record in records:
        print(format_settlement(record, summary.employees[record.id]))
    print(format_totals(summary.totals))
    if args.export:
        path = export_csv(build_report_rows(records, summary), Path(args.export))
        print(f"Exported payroll report to {path}")


def cmd_overtime(args: argparse.Namespace) -> None:
    calculator = OvertimeCalculator()
    pay = calculator.compute(args.regular_salary, args.weekday, args.rest_day, args.holiday)
    print(f"Overtime pay: {_money(pay)} ({calculator.breakdown_text(args.weekday, args.rest_day, args.holiday)})")


def cmd_schedules(args: argparse.Namespace) -> None:
    repo = ScheduleRepository()
    for version in repo.available_versions():
        schedule = repo.load(version)
        print(
            f"{version} labor max {schedule.labor.ceiling:,}"
            f" health {schedule.health.floor:,}-{schedule.health.ceiling:,}"
            f" pension max {schedule.pension.ceiling:,}"
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Taiwan payroll settlement CLI")
    sub = parser.add_subparsers(dest="command", required=True)

    compute = sub.add_parser("compute", help="Settle payroll for employees in a JSON file")
    compute.add_argument("path", help="JSON list of employees or a sync payload with an 'employees' key")
    compute.add_argument("--schedule", help="Rate schedule version (defaults to configured version)")
    compute.add_argument("--pension-basis", choices=[b.value for b in PensionBasis])
    compute.add_argument("--export", help="Write the payroll report to this CSV path")
    compute.set_defaults(func=cmd_compute)

    overtime = sub.add_parser("overtime", help="Compute overtime pay for one employee")
    overtime.add_argument("regular_salary", type=float)
    overtime.add_argument("--weekday", type=float, default=0.0)
    overtime.add_argument("--rest-day", type=float, default=0.0)
    overtime.add_argument("--holiday", type=float, default=0.0)
    overtime.set_defaults(func=cmd_overtime)

    schedules = sub.add_parser("schedules", help="List available rate schedules")
    schedules.set_defaults(func=cmd_schedules)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        settings = get_settings()
    except ValueError as exc:
        configure_logging()
        logger.error("invalid_settings", command=args.command, error=str(exc))
        return 1
    configure_logging(settings.log_level)
    try:
        args.func(args)
    except (KeyError, ValueError, OSError) as exc:
        logger.error("command_failed", command=args.command, error=str(exc))
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
