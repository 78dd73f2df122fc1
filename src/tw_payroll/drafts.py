"""Validated construction of ``EmployeeRecord`` values.

Edits are collected in an ``EmployeeDraft`` and converted once, at save time.
Drafts accept the camelCase payload produced by the browser application and
its spreadsheet sync (``baseSalary``, ``otHoursWeekday``...) as well as
snake_case field names.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from .models import CustomItem, EmployeeRecord

Money = Annotated[float, Field(ge=0, allow_inf_nan=False)]
Hours = Annotated[float, Field(ge=0, allow_inf_nan=False)]


class DraftModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class CustomItemDraft(DraftModel):
    id: str = ""
    name: str = ""
    amount: Money = 0

    @field_validator("id", mode="before")
    @classmethod
    def stringify_id(cls, value):
        return "" if value is None else str(value)

    @property
    def is_blank(self) -> bool:
        return not self.name.strip() or not self.amount

    def to_item(self) -> CustomItem:
        return CustomItem(id=self.id, name=self.name.strip(), amount=self.amount)


class EmployeeDraft(DraftModel):
    id: str
    name: str = ""
    position: str = ""
    department: str = ""
    note: Optional[str] = None
    bank_name: str = ""
    bank_account: str = ""
    base_salary: Money = 0
    meal_allowance: Money = 0
    fuel_allowance: Money = 0
    attendance_bonus: Money = 0
    use_base_salary_for_insurance: bool = False
    ot_hours_weekday: Hours = 0
    ot_hours_rest_day: Hours = 0
    ot_hours_holiday: Hours = 0
    dependents: int = Field(default=0, ge=0)
    custom_allowances: List[CustomItemDraft] = Field(default_factory=list)
    custom_deductions: List[CustomItemDraft] = Field(default_factory=list)
    join_date: str = ""

    @field_validator("id", mode="before")
    @classmethod
    def stringify_id(cls, value):
        if value is None or str(value).strip() == "":
            raise ValueError("employee id is required")
        return str(value)

    @field_validator("ot_hours_weekday", "ot_hours_rest_day", "ot_hours_holiday")
    @classmethod
    def half_hour_steps(cls, value: float) -> float:
        if not (value * 2).is_integer():
            raise ValueError("overtime hours must be given in half-hour increments")
        return value

    def to_record(self) -> EmployeeRecord:
        # unnamed or zero-amount lines are dropped, as the editing form does on save
        return EmployeeRecord(
            id=self.id,
            name=self.name,
            position=self.position,
            department=self.department,
            note=self.note,
            bank_name=self.bank_name,
            bank_account=self.bank_account,
            base_salary=self.base_salary,
            meal_allowance=self.meal_allowance,
            fuel_allowance=self.fuel_allowance,
            attendance_bonus=self.attendance_bonus,
            use_base_salary_for_insurance=self.use_base_salary_for_insurance,
            ot_hours_weekday=self.ot_hours_weekday,
            ot_hours_rest_day=self.ot_hours_rest_day,
            ot_hours_holiday=self.ot_hours_holiday,
            dependents=self.dependents,
            custom_allowances=tuple(a.to_item() for a in self.custom_allowances if not a.is_blank),
            custom_deductions=tuple(d.to_item() for d in self.custom_deductions if not d.is_blank),
            join_date=self.join_date,
        )


def parse_employees(payload) -> List[EmployeeRecord]:
    """Build records from a JSON list or a ``{"employees": [...]}`` sync payload."""
    if isinstance(payload, dict):
        payload = payload.get("employees", [])
    if not isinstance(payload, list):
        raise ValueError("Employee payload must be a list or an object with an 'employees' list")
    return [EmployeeDraft.model_validate(item).to_record() for item in payload]


def load_employees(path: Path) -> List[EmployeeRecord]:
    with path.open("r", encoding="utf-8") as handle:
        return parse_employees(json.load(handle))
