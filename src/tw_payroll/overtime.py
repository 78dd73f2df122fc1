from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List

MONTHLY_HOURS_DIVISOR = 240


def hourly_rate(regular_salary: float) -> float:
    return regular_salary / MONTHLY_HOURS_DIVISOR


def _hours(value: float) -> str:
    return f"{value:g}"


@dataclass
class OvertimeRule:
    """Base overtime rule interface."""

    label: str

    def premiums(self, rate: float, hours: float) -> List[float]:
        raise NotImplementedError

    def describe(self, hours: float) -> str:
        raise NotImplementedError


@dataclass
class TieredRule(OvertimeRule):
    """Weekday and rest-day overtime: a first block at one multiplier, the rest at a higher one."""

    first_block_hours: float = 2
    first_multiplier: float = 4 / 3
    beyond_multiplier: float = 5 / 3

    def premiums(self, rate: float, hours: float) -> List[float]:
        first = min(hours, self.first_block_hours)
        remaining = max(0, hours - self.first_block_hours)
        return [rate * first * self.first_multiplier, rate * remaining * self.beyond_multiplier]

    def describe(self, hours: float) -> str:
        first = min(hours, self.first_block_hours)
        remaining = max(0, hours - self.first_block_hours)
        if remaining > 0:
            breakdown = f"{_hours(self.first_block_hours)}h×1.33 + {_hours(remaining)}h×1.66"
        else:
            breakdown = f"{_hours(first)}h×1.33"
        return f"{self.label}{_hours(hours)}h[{breakdown}]"


@dataclass
class HolidayRule(OvertimeRule):
    """Statutory holidays: any work pays one full day, hours past the day add a premium."""

    day_hours: float = 8
    excess_multiplier: float = 4 / 3

    def premiums(self, rate: float, hours: float) -> List[float]:
        amounts = [rate * self.day_hours]
        if hours > self.day_hours:
            amounts.append(rate * (hours - self.day_hours) * self.excess_multiplier)
        return amounts

    def describe(self, hours: float) -> str:
        if hours <= self.day_hours:
            breakdown = "加發一日"
        else:
            breakdown = f"加發一日+{_hours(hours - self.day_hours)}h×1.33"
        return f"{self.label}{_hours(hours)}h[{breakdown}]"


@dataclass
class OvertimeCalculator:
    weekday: OvertimeRule = field(default_factory=lambda: TieredRule(label="平日"))
    rest_day: OvertimeRule = field(default_factory=lambda: TieredRule(label="休"))
    holiday: OvertimeRule = field(default_factory=lambda: HolidayRule(label="假"))

    def raw_total(self, regular_salary: float, weekday_hours: float, rest_day_hours: float, holiday_hours: float) -> float:
        """Overtime pay before the final ceiling, summed in a fixed order."""
        rate = hourly_rate(regular_salary)
        total = 0.0
        for rule, hours in self._categories(weekday_hours, rest_day_hours, holiday_hours):
            if hours > 0:
                for amount in rule.premiums(rate, hours):
                    total += amount
        return total

    def compute(self, regular_salary: float, weekday_hours: float, rest_day_hours: float, holiday_hours: float) -> int:
        return math.ceil(self.raw_total(regular_salary, weekday_hours, rest_day_hours, holiday_hours))

    def breakdown_text(self, weekday_hours: float, rest_day_hours: float, holiday_hours: float) -> str:
        parts = [
            rule.describe(hours)
            for rule, hours in self._categories(weekday_hours, rest_day_hours, holiday_hours)
            if hours > 0
        ]
        return ", ".join(parts) if parts else "-"

    def _categories(self, weekday_hours: float, rest_day_hours: float, holiday_hours: float):
        return (
            (self.weekday, weekday_hours),
            (self.rest_day, rest_day_hours),
            (self.holiday, holiday_hours),
        )


_default_calculator = OvertimeCalculator()


def compute_overtime_pay(regular_salary: float, weekday_hours: float, rest_day_hours: float, holiday_hours: float) -> int:
    """Total overtime pay, rounded up to the whole dollar.

    The hourly rate is ``regular_salary / 240`` at full precision; only the
    grand total is rounded. Hours must be finite and non-negative.
    """
    return _default_calculator.compute(regular_salary, weekday_hours, rest_day_hours, holiday_hours)


def overtime_breakdown_text(weekday_hours: float, rest_day_hours: float, holiday_hours: float) -> str:
    return _default_calculator.breakdown_text(weekday_hours, rest_day_hours, holiday_hours)
