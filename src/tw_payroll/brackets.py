from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple


def lookup_tier(table: Sequence[float], salary: float) -> float:
    """Round ``salary`` up to the nearest tier ceiling in ``table``.

    Salaries at or below the first tier map to the first tier, salaries above
    the last tier are capped at the last tier. ``salary`` must be finite and
    non-negative; other inputs are not checked.
    """
    if salary <= table[0]:
        return table[0]
    for tier in table:
        if salary <= tier:
            return tier
    return table[-1]


@dataclass(frozen=True)
class BracketTable:
    name: str
    tiers: Tuple[float, ...]

    def __post_init__(self) -> None:
        if not self.tiers:
            raise ValueError(f"Bracket table {self.name} has no tiers")
        for lower, upper in zip(self.tiers, self.tiers[1:]):
            if upper <= lower:
                raise ValueError(
                    f"Bracket table {self.name} is not strictly ascending at {lower} -> {upper}"
                )

    @classmethod
    def of(cls, name: str, tiers: Iterable[float]) -> "BracketTable":
        return cls(name=name, tiers=tuple(tiers))

    @property
    def floor(self) -> float:
        return self.tiers[0]

    @property
    def ceiling(self) -> float:
        return self.tiers[-1]

    def lookup(self, salary: float) -> float:
        return lookup_tier(self.tiers, salary)

    def __len__(self) -> int:
        return len(self.tiers)


@dataclass(frozen=True)
class RateSchedule:
    """One versioned bundle of bracket tables and statutory rates.

    Labor and health premiums are split between employee, employer and
    government; only the first two shares are charged here. The employer
    health figure uses ``average_dependents`` instead of the employee's own
    dependent count.
    """

    version: str
    labor: BracketTable
    health: BracketTable
    pension: BracketTable
    labor_rate: float = 0.125
    labor_employee_share: float = 0.20
    labor_employer_share: float = 0.70
    health_rate: float = 0.0517
    health_employee_share: float = 0.30
    health_employer_share: float = 0.60
    average_dependents: float = 0.58
    pension_rate: float = 0.06
    max_chargeable_dependents: int = 3
