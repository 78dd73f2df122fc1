from __future__ import annotations

from types import MappingProxyType
from typing import List, Mapping, Optional

from .brackets import BracketTable, RateSchedule

# Labor insurance table effective ROC 115 (2026), capped at 45,800.
LABOR_BRACKETS_115 = BracketTable.of(
    "labor",
    [
        11100, 12540, 13500, 15840, 16500, 17280, 17880, 19047, 20008,
        21009, 22000, 23100, 24000, 25250, 26400, 27600, 28500, 29500,
        30300, 31800, 33300, 34800, 36300, 38200, 40100, 42000, 43900, 45800,
    ],
)

# Health insurance table effective ROC 114/1/1, levels 1..59.
HEALTH_BRACKETS_114 = BracketTable.of(
    "health",
    [
        28590, 28800, 30300, 31800, 33300, 34800, 36300, 38200, 40100, 42000,
        43900, 45800, 48200, 50600, 53000, 55400, 57800, 60800, 63800, 66800,
        69800, 72800, 76500, 80200, 83900, 87600, 92100, 96600, 101100, 105600,
        110100, 115500, 120500, 125500, 131700, 137900, 144100, 150000, 156400,
        162800, 169200, 175600, 182000, 189500, 197000, 204500, 212000, 219500,
        228200, 236900, 245600, 254300, 263000, 273000, 283000, 293000, 303000, 313000,
    ],
)

# Labor pension contribution wages, capped at 150,000.
PENSION_BRACKETS_115 = BracketTable.of(
    "pension",
    [
        1500, 3000, 4500, 6000, 7500,
        8700, 9900, 11100, 12540, 13500,
        15840, 16500, 17280, 17880, 19047,
        20008, 21009, 22000, 23100, 24000,
        25250, 26400, 27600, 28590, 29500,
        30300, 31800, 33300, 34800, 36300,
        38200, 40100, 42000, 43900, 45800,
        48200, 50600, 53000, 55400, 57800,
        60800, 63800, 66800, 69800, 72800,
        76500, 80200, 83900, 87600, 92100,
        96600, 101100, 105600, 110100, 115500,
        120900, 126300, 131700, 137100, 142500,
        147900, 150000,
    ],
)

SCHEDULE_115 = RateSchedule(
    version="115",
    labor=LABOR_BRACKETS_115,
    health=HEALTH_BRACKETS_114,
    pension=PENSION_BRACKETS_115,
)

DEFAULT_VERSION = "115"

SCHEDULES: Mapping[str, RateSchedule] = MappingProxyType({SCHEDULE_115.version: SCHEDULE_115})


class ScheduleRepository:
    def __init__(self, schedules: Optional[Mapping[str, RateSchedule]] = None):
        self.schedules = SCHEDULES if schedules is None else schedules

    def available_versions(self) -> List[str]:
        return sorted(self.schedules)

    def latest(self) -> RateSchedule:
        return self.schedules[self.available_versions()[-1]]

    def load(self, version: str) -> RateSchedule:
        try:
            return self.schedules[version]
        except KeyError:
            raise KeyError(
                f"Rate schedule {version} not configured; available: {', '.join(self.available_versions())}"
            ) from None


def default_schedule() -> RateSchedule:
    return SCHEDULES[DEFAULT_VERSION]
